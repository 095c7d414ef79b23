"""
Bootstrap Handler

Runs once per session, when the host sends initialize. Picks the server to
launch, installs the bundled one if needed and asks the host to start it.

Failures are reported on the host's log channel and never re-raised: the
initialize request always completes, possibly with no server started.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from lsprotocol.types import LogMessageParams, MessageType

from jdtls_volt.errors import BootstrapError
from jdtls_volt.lsp.launch import ServerLaunchSpec
from jdtls_volt.lsp.options import ExplicitServer, resolve_options

if TYPE_CHECKING:
    from jdtls_volt.provisioning.coordinator import ProvisioningCoordinator


class Host(Protocol):
    """The two host calls the bootstrap needs."""

    def window_log_message(self, params: LogMessageParams) -> None: ...

    def start_lsp(self, spec: ServerLaunchSpec) -> None: ...


class JavaBootstrap:
    """
    Resolves, provisions and registers the Java language server.

    Usage:
        bootstrap = JavaBootstrap(server, coordinator)
        spec = bootstrap.initialize(params)
    """

    def __init__(self, host: Host, coordinator: ProvisioningCoordinator) -> None:
        self.host = host
        self.coordinator = coordinator

    def _log(self, message: str, level: MessageType = MessageType.Info) -> None:
        self.host.window_log_message(LogMessageParams(type=level, message=message))

    def initialize(self, params: Any) -> ServerLaunchSpec | None:
        """
        Handle the host's initialize request.

        Args:
            params: InitializeParams (anything with initialization_options)

        Returns:
            The spec registered with the host, or None if bootstrapping failed
        """
        options = getattr(params, "initialization_options", None)

        try:
            spec = self._resolve(options)
        except BootstrapError as e:
            self._log(f"plugin returned with error: {e}", MessageType.Error)
            return None

        self.host.start_lsp(spec)
        return spec

    def _resolve(self, options: Any) -> ServerLaunchSpec:
        choice = resolve_options(options)

        if isinstance(choice, ExplicitServer):
            self._log(f"Starting java lsp server: {choice.path}")
            return ServerLaunchSpec(
                location=choice.path,
                args=choice.args,
                initialization_options=options,
            )

        location = self.coordinator.provision()
        self._log(f"Starting java lsp server: {location}")
        return ServerLaunchSpec(
            location=location,
            args=choice.args,
            initialization_options=options,
        )
