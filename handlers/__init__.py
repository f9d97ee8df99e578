"""
Domain handlers for the MCP server.
Each package provides a handler class operating on one record kind.
"""
