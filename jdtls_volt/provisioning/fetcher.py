"""
Archive download.

The payload is written next to its final path and renamed into place, so a
failed download never leaves a truncated archive that a later run would
treat as complete.
"""

from __future__ import annotations

import os
from pathlib import Path

import httpx

from jdtls_volt.errors import FetchError


class ArchiveFetcher:
    """Downloads a remote archive to local storage."""

    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def fetch(self, url: str, destination: Path) -> Path:
        """
        Download url into destination.

        Args:
            url: Remote archive URL
            destination: Final path of the payload

        Returns:
            The destination path

        Raises:
            FetchError: On unparsable URLs, network failures, non-success
                        status codes or when the payload cannot be written.
        """
        partial = destination.with_name(destination.name + ".download")

        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.InvalidURL as e:
            raise FetchError(f"Invalid download URL {url!r}: {e}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to download {url}: {e}") from e

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            partial.write_bytes(response.content)
            os.replace(partial, destination)
        except OSError as e:
            if partial.exists():
                partial.unlink()
            raise FetchError(f"Failed to write {destination}: {e}") from e

        return destination
