"""
Provisioning Coordinator

Makes sure the JDT language server is unpacked in the plugin directory and
works out where its launcher lives.

Layout inside the working directory:
    <server_id>.tar.gz      downloaded payload, kept for reuse
    <server_id>.partial/    staging directory, only present mid-extraction
    <server_id>/            installed server tree
    <server_id>/bin/jdtls   launcher handed to the host

The installed tree only appears through a rename of a fully extracted
staging directory, so its existence means the install completed.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from urllib.parse import urlparse

import httpx

from jdtls_volt.config import BootstrapSettings
from jdtls_volt.errors import ExtractionError, FetchError, LocationError
from jdtls_volt.provisioning.extractor import extract_tar_gz
from jdtls_volt.provisioning.fetcher import ArchiveFetcher


class ProvisioningCoordinator:
    """
    Installs the server on first use and resolves its executable location.

    One instance lives for the whole host session. It holds no per-call
    state, so provision() can be called repeatedly; after the first
    successful install every call is a directory check plus a URI join.

    Attributes:
        settings: Paths, download source and base URI
        fetcher: Downloads the payload when it is missing
    """

    def __init__(
        self,
        settings: BootstrapSettings,
        client: httpx.Client,
    ) -> None:
        self.settings = settings
        self.fetcher = ArchiveFetcher(client)

    def is_installed(self) -> bool:
        return self.settings.install_dir.is_dir()

    def ensure_installed(self) -> Path:
        """
        Return the installation directory, downloading and unpacking if needed.

        Raises:
            FetchError: The payload is missing and could not be downloaded
            ExtractionError: The payload could not be unpacked
        """
        install_dir = self.settings.install_dir
        if self.is_installed():
            return install_dir

        archive = self.settings.archive_path
        if not archive.exists():
            if not self.settings.download_enabled:
                raise FetchError(
                    f"{archive.name} is missing and downloads are disabled"
                )
            self.fetcher.fetch(self.settings.archive_url, archive)

        staging = self.settings.staging_dir
        try:
            # Leftover from an interrupted run
            if staging.exists():
                shutil.rmtree(staging)
            extract_tar_gz(archive, staging)
            os.replace(staging, install_dir)
        except OSError as e:
            raise ExtractionError(
                f"Failed to install {self.settings.server_id}: {e}"
            ) from e

        return install_dir

    def server_location(self) -> str:
        """
        Build the URI of the server launcher.

        The base is the plugin directory URI exported by the host, or the
        working directory when the host did not set one.

        Raises:
            LocationError: The base is not an absolute URI
        """
        base = self.settings.volt_uri
        if base is None:
            base = self.settings.working_dir.resolve().as_uri()

        parsed = urlparse(base)
        if not parsed.scheme:
            raise LocationError(f"Plugin base is not an absolute URI: {base!r}")

        if not base.endswith("/"):
            base += "/"

        return f"{base}{self.settings.server_id}/bin/{self.settings.binary_name}"

    def provision(self) -> str:
        """Install if necessary and return the launcher URI."""
        self.ensure_installed()
        return self.server_location()
