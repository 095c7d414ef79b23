from __future__ import annotations

import httpx
from pygls.lsp.server import LanguageServer

from jdtls_volt.config import BootstrapSettings
from jdtls_volt.lsp.bootstrap import JavaBootstrap
from jdtls_volt.lsp.launch import ServerLaunchSpec
from jdtls_volt.provisioning.coordinator import ProvisioningCoordinator

# Host notification asking it to spawn a language server
HOST_START_LSP = "start_lsp"


class JdtlsVoltServer(LanguageServer):
    """
    Plugin-side endpoint of the host connection.

    All session-scoped resources are created here, once, and shared by every
    request handled during the session.

    Attributes:
        bootstrap_settings: Download source and install layout
        http_client: Client used for the archive download
        coordinator: Installs the server and resolves its location
        bootstrap: Handles the initialize request
    """

    def __init__(
        self,
        name: str,
        version: str,
        settings: BootstrapSettings | None = None,
        http_client: httpx.Client | None = None,
    ):
        super().__init__(name, version)

        self.bootstrap_settings = settings or BootstrapSettings.from_env()
        self.http_client = http_client or httpx.Client(
            follow_redirects=True,
            timeout=self.bootstrap_settings.download_timeout,
        )
        self.coordinator = ProvisioningCoordinator(
            self.bootstrap_settings, self.http_client
        )
        self.bootstrap = JavaBootstrap(self, self.coordinator)

    def start_lsp(self, spec: ServerLaunchSpec) -> None:
        """Ask the host to launch the language server described by spec."""
        self.protocol.notify(HOST_START_LSP, spec.to_params())
