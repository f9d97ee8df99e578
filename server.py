"""
Study Planner MCP Server

Lets an agent create, query, complete, and delete study plans
(daily plans, weekly plans, monthly goals) stored in Cloud Firestore.
Serves MCP over stdio (default) or streamable HTTP (MCP_TRANSPORT=http).
"""
import asyncio
from contextlib import asynccontextmanager
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.server.transport_security import TransportSecuritySettings
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route

from config import SERVER_NAME, SERVER_VERSION
from core import catalog
from core.dispatcher import Dispatcher
from env_loader import get_allowed_hosts, get_port, get_transport
from firestore_client import get_firestore_client
from lib.common import log

server = Server(SERVER_NAME, version=SERVER_VERSION)

_dispatcher: Dispatcher | None = None


def get_dispatcher() -> Dispatcher:
    """Get the process-wide Dispatcher bound to the Firestore client."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher(get_firestore_client())
    return _dispatcher


def reset_dispatcher() -> None:
    """Reset the global dispatcher (useful for testing)."""
    global _dispatcher
    _dispatcher = None


# ===== MCP Handlers =====

@server.list_tools()
async def list_tools() -> list[types.Tool]:
    """Enumerate the tool catalog."""
    return [
        types.Tool(name=t.name, description=t.description, inputSchema=t.input_schema)
        for t in catalog.list_tools()
    ]


# The dispatcher validates arguments itself and reports failures as error envelopes
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
    """Invoke one tool and wrap its envelope as a single text block."""
    result = await get_dispatcher().invoke(name, arguments or {})
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result["text"])],
        isError=not result["ok"],
    )


# ===== Transports =====

async def run_stdio() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def build_http_app():
    """
    ASGI app: MCP streamable HTTP under /mcp, plus /healthz and a root hint.
    """
    session_manager = StreamableHTTPSessionManager(
        app=server,
        security_settings=TransportSecuritySettings(
            enable_dns_rebinding_protection=True,
            allowed_hosts=get_allowed_hosts(),
        ),
    )

    async def healthz(request):
        return JSONResponse({"status": "ok"})

    async def root(request):
        return JSONResponse(
            {"error": "Use /mcp for MCP endpoint or /healthz for health check"},
            status_code=406,
        )

    @asynccontextmanager
    async def lifespan(app):
        async with session_manager.run():
            yield

    # Starlette app for non-MCP routes
    starlette_app = Starlette(
        routes=[
            Route("/", root),
            Route("/healthz", healthz),
        ],
        lifespan=lifespan,
    )

    # Combined ASGI app - session manager handles the /mcp path
    async def combined_app(scope, receive, send):
        path = scope.get("path", "/")
        if path.startswith("/mcp"):
            await session_manager.handle_request(scope, receive, send)
        else:
            await starlette_app(scope, receive, send)

    return combined_app


# ===== Server Entry Point =====

def main() -> None:
    transport = get_transport()
    # Open the Firestore connection once, before serving
    get_dispatcher()

    if transport == "http":
        import uvicorn

        port = get_port()
        log(f"Study Planner MCP Server starting on port {port}")
        uvicorn.run(build_http_app(), host="0.0.0.0", port=port, lifespan="on")
    else:
        log("Study Planner MCP Server running on stdio")
        asyncio.run(run_stdio())


if __name__ == "__main__":
    main()
