#!/usr/bin/env python3
import os
import sys
from fastmcp import FastMCP
from forecast_tools import register_weather

SERVER_NAME = "Weather Forecast MCP"
SERVER_VERSION = "1.0.0"


# Helper to register tools with logging
def register_module(mcp, name, register_func):
    print(f"--- Registering {name} module ---", file=sys.stderr)
    try:
        register_func(mcp)
        print(f"✅ {name} module registered successfully.", file=sys.stderr)
    except Exception as e:
        print(f"❌ Failed to register {name} module: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc(file=sys.stderr)


def create_server():
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    register_module(mcp, "Weather", register_weather)
    return mcp


mcp = create_server()


def main():
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        port = int(os.environ.get("PORT", 8000))
        host = "0.0.0.0"
        print(f"Starting FastMCP server on {host}:{port}", file=sys.stderr)
        mcp.run(
            transport="http",
            host=host,
            port=port,
            stateless_http=True
        )
    else:
        print("Starting FastMCP server on stdio", file=sys.stderr)
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
