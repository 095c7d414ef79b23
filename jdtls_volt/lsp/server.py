from lsprotocol.types import (
    INITIALIZE,
    SHUTDOWN,
    InitializeParams,
    LogMessageParams,
    MessageType,
)

from jdtls_volt.config import BootstrapSettings
from jdtls_volt.lsp.volt_server import JdtlsVoltServer


def create_server(settings: BootstrapSettings | None = None) -> JdtlsVoltServer:
    """
    Creates and returns the configured plugin server.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with the host editor
    - Request/response lifecycle
    - The built-in initialize reply; our handler runs right after it
    """
    server = JdtlsVoltServer("jdtls-volt", "0.1.0", settings=settings)

    @server.feature(INITIALIZE)
    def initialize(ls: JdtlsVoltServer, params: InitializeParams):
        """
        Provision the Java language server and hand it to the host.

        Blocks until the download and extraction are done.
        """
        ls.window_log_message(
            LogMessageParams(MessageType.Log, f"Received {INITIALIZE} request")
        )
        ls.bootstrap.initialize(params)

    @server.feature(SHUTDOWN)
    def shutdown(ls: JdtlsVoltServer, params):
        ls.http_client.close()

    return server
