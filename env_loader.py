"""
Environment variable loader for the MCP server.
Handles loading Firebase credentials and runtime settings from .env or environment.
"""
import os
import json
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Load .env file if it exists
from dotenv import load_dotenv

DEFAULT_CREDENTIALS_FILENAME = "firebase-service-account.json"


# Find a file next to this module (look in current dir and parent dirs)
def _find_upwards(filename: str) -> Path | None:
    current = Path(__file__).parent
    for _ in range(3):  # Check up to 3 levels up
        candidate = current / filename
        if candidate.exists():
            return candidate
        current = current.parent
    return None

_env_file = _find_upwards(".env")
if _env_file:
    load_dotenv(_env_file)


def _load_json_file(path_str: str, var_name: str) -> dict:
    path = Path(path_str)
    if not path.exists():
        raise RuntimeError(f"{var_name} not found: {path_str}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def get_firebase_credentials() -> dict:
    """
    Get Firebase Service Account credentials.

    Priority:
    1. FIREBASE_CREDENTIALS_FILE (path to JSON file)
    2. FIREBASE_CREDENTIALS_JSON (JSON string content)
    3. GOOGLE_APPLICATION_CREDENTIALS (path to JSON file)
    4. firebase-service-account.json next to the project

    Returns:
        dict: Parsed credentials dictionary

    Raises:
        RuntimeError: If no credentials are configured
    """
    creds_file = os.environ.get("FIREBASE_CREDENTIALS_FILE")
    if creds_file:
        return _load_json_file(creds_file, "FIREBASE_CREDENTIALS_FILE")

    creds_json = os.environ.get("FIREBASE_CREDENTIALS_JSON")
    if creds_json:
        try:
            return json.loads(creds_json)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Invalid FIREBASE_CREDENTIALS_JSON: {e}")

    adc_file = os.environ.get("GOOGLE_APPLICATION_CREDENTIALS")
    if adc_file:
        return _load_json_file(adc_file, "GOOGLE_APPLICATION_CREDENTIALS")

    fallback = _find_upwards(DEFAULT_CREDENTIALS_FILENAME)
    if fallback:
        return _load_json_file(str(fallback), DEFAULT_CREDENTIALS_FILENAME)

    raise RuntimeError(
        "No Firebase credentials configured. "
        "Set FIREBASE_CREDENTIALS_FILE or FIREBASE_CREDENTIALS_JSON in .env"
    )


def get_transport() -> str:
    """Get MCP transport from environment ("stdio" or "http")."""
    transport = os.environ.get("MCP_TRANSPORT", "stdio").strip().lower()
    if transport not in {"stdio", "http"}:
        raise RuntimeError(f"Unsupported MCP_TRANSPORT: {transport} (expected stdio or http)")
    return transport


def get_port() -> int:
    """Get server port from environment."""
    return int(os.environ.get("PORT", "8080"))


def get_allowed_hosts() -> list[str]:
    """Get hosts allowed by DNS rebinding protection for the HTTP transport."""
    raw = os.environ.get("MCP_ALLOWED_HOSTS", "")
    hosts = [h.strip() for h in raw.split(",") if h.strip()]
    if hosts:
        return hosts
    port = get_port()
    return [f"localhost:{port}", f"127.0.0.1:{port}"]


def get_timezone() -> ZoneInfo | None:
    """
    Get the zone used to interpret calendar dates.

    Returns None when PLANNER_TIMEZONE is unset, meaning the process local zone.
    """
    name = os.environ.get("PLANNER_TIMEZONE", "").strip()
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise RuntimeError(f"Unknown PLANNER_TIMEZONE: {name}")
