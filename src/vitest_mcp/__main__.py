"""Entry point: python -m vitest_mcp"""

from vitest_mcp.mcp.server import run_server

if __name__ == "__main__":
    run_server()
