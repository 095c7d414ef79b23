"""
Session settings for the bootstrap agent.

The host starts the plugin with its working directory set to the plugin
folder and exports VOLT_URI pointing at the same place. The remaining
variables exist so the download source can be redirected (mirrors, tests).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SERVER_ID = "jdt-language-server-latest"
DEFAULT_DOWNLOAD_HOST = "download.eclipse.org"
SERVER_BINARY = "jdtls"
DEFAULT_DOWNLOAD_TIMEOUT = 180.0


def _truthy_env(key: str) -> bool:
    value = os.environ.get(key, "").strip().lower()
    return value in {"1", "true"}


def _float_env(key: str, default: float) -> float:
    value = os.environ.get(key, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class BootstrapSettings:
    """Where the server comes from and where it is installed."""

    working_dir: Path = field(default_factory=Path.cwd)
    volt_uri: str | None = None
    server_id: str = DEFAULT_SERVER_ID
    binary_name: str = SERVER_BINARY
    download_host: str = DEFAULT_DOWNLOAD_HOST
    download_enabled: bool = True
    download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT

    @classmethod
    def from_env(cls, working_dir: Path | None = None) -> BootstrapSettings:
        return cls(
            working_dir=working_dir or Path.cwd(),
            volt_uri=os.environ.get("VOLT_URI") or None,
            server_id=os.environ.get("JDTLS_VOLT_SERVER_ID") or DEFAULT_SERVER_ID,
            download_host=(
                os.environ.get("JDTLS_VOLT_DOWNLOAD_HOST") or DEFAULT_DOWNLOAD_HOST
            ),
            download_enabled=not _truthy_env("JDTLS_VOLT_DISABLE_DOWNLOAD"),
            download_timeout=_float_env(
                "JDTLS_VOLT_DOWNLOAD_TIMEOUT", DEFAULT_DOWNLOAD_TIMEOUT
            ),
        )

    @property
    def archive_url(self) -> str:
        return f"http://{self.download_host}/jdtls/snapshots/{self.server_id}.tar.gz"

    @property
    def archive_path(self) -> Path:
        return self.working_dir / f"{self.server_id}.tar.gz"

    @property
    def install_dir(self) -> Path:
        return self.working_dir / self.server_id

    @property
    def staging_dir(self) -> Path:
        # Sibling of install_dir so the final rename stays on one filesystem
        return self.working_dir / f"{self.server_id}.partial"
