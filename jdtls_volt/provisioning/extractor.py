"""
Streaming tar.gz extraction.

Only regular files and directories are materialized. Symlinks, hard links,
devices and fifos are skipped, as are entries whose path would land outside
the destination directory.
"""

from __future__ import annotations

import gzip
import shutil
import tarfile
import zlib
from pathlib import Path

from jdtls_volt.errors import ExtractionError


def _safe_join(base: Path, relative: str) -> Path | None:
    """Join relative onto base, or None if the result escapes base."""
    base_resolved = base.resolve()
    target = (base_resolved / relative).resolve()
    if target == base_resolved or base_resolved in target.parents:
        return target
    return None


def extract_tar_gz(archive: Path, destination: Path) -> int:
    """
    Unpack a gzip-compressed tar archive into destination.

    The archive is read as a stream, one entry at a time. Concatenated gzip
    members are decoded as a single stream.

    Args:
        archive: Path to the .tar.gz payload
        destination: Directory to extract into (created if missing)

    Returns:
        Number of files and directories written

    Raises:
        ExtractionError: If the archive is unreadable or writing fails
    """
    written = 0

    try:
        destination.mkdir(parents=True, exist_ok=True)

        with gzip.open(archive, "rb") as stream, tarfile.open(
            fileobj=stream, mode="r|"
        ) as tf:
            for member in tf:
                if not member.isdir() and not member.isfile():
                    continue

                target = _safe_join(destination, member.name)
                if target is None:
                    continue

                if member.isdir():
                    target.mkdir(parents=True, exist_ok=True)
                    written += 1
                    continue

                target.parent.mkdir(parents=True, exist_ok=True)
                src = tf.extractfile(member)
                if src is None:
                    continue
                with src, open(target, "wb") as dst:
                    shutil.copyfileobj(src, dst)
                # Keep bin/jdtls executable
                target.chmod(member.mode & 0o777 or 0o644)
                written += 1

    except (tarfile.TarError, OSError, EOFError, zlib.error) as e:
        raise ExtractionError(f"Failed to extract {archive}: {e}") from e

    return written
