"""
Plugin process entry point.

The host editor spawns this process (jdtls-volt, or python -m jdtls_volt)
from the plugin directory and talks to it over stdin/stdout. The process
lives for the whole editor session: it answers initialize by provisioning
the JDT language server and telling the host to start it, then idles
until shutdown.
"""
import os
import sys

from jdtls_volt.lsp.server import create_server

DEBUG_PORT = 5678


def _wait_for_debugger():
    # stdout is the JSON-RPC channel to the host
    print(f"jdtls-volt: waiting for debugpy on port {DEBUG_PORT}", file=sys.stderr)
    try:
        import debugpy  # type: ignore
    except ImportError:
        print("jdtls-volt: debugpy missing, install the dev extra", file=sys.stderr)
        return
    debugpy.listen(("127.0.0.1", DEBUG_PORT))
    debugpy.wait_for_client()


def main():
    """Run the bootstrap plugin until the host closes the connection."""
    if os.getenv("DEBUG"):
        _wait_for_debugger()

    # Settings come from VOLT_URI and the JDTLS_VOLT_* variables
    server = create_server()
    server.start_io()


if __name__ == "__main__":
    main()
