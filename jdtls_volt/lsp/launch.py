from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse


@dataclass(frozen=True)
class DocumentFilter:
    """Which documents the started server handles."""

    language: str | None = None
    pattern: str | None = None
    scheme: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {
            "language": self.language,
            "pattern": self.pattern,
            "scheme": self.scheme,
        }
        return {key: value for key, value in data.items() if value is not None}


DOCUMENT_SELECTOR: tuple[DocumentFilter, ...] = (
    DocumentFilter(language="java", pattern="**/*.java"),
)


@dataclass(frozen=True)
class ServerLaunchSpec:
    """
    Everything the host needs to start the language server.

    Attributes:
        location: Launcher URI, or a plain filesystem path
        args: Command line arguments, in order
        document_selector: Files routed to the server
        initialization_options: Passed through untouched from the host
    """

    location: str
    args: tuple[str, ...] = ()
    document_selector: tuple[DocumentFilter, ...] = DOCUMENT_SELECTOR
    initialization_options: Any = None

    @property
    def server_uri(self) -> str:
        """The location as a URI; bare paths use the urn scheme."""
        scheme = urlparse(self.location).scheme
        # Single letters are Windows drive prefixes, not schemes
        if len(scheme) > 1:
            return self.location
        return f"urn:{self.location}"

    def to_params(self) -> dict[str, Any]:
        return {
            "server_uri": self.server_uri,
            "server_args": list(self.args),
            "document_selector": [f.to_dict() for f in self.document_selector],
            "options": self.initialization_options,
        }
