"""Synthetic JDT LS snapshots for the provisioning tests."""
import io
import tarfile
from pathlib import Path

SERVER_ID = "jdt-language-server-latest"
LAUNCHER = b"#!/usr/bin/env python3\nprint('jdtls')\n"


def add_dir(tf: tarfile.TarFile, name: str) -> None:
    info = tarfile.TarInfo(name)
    info.type = tarfile.DIRTYPE
    info.mode = 0o755
    tf.addfile(info)


def add_file(tf: tarfile.TarFile, name: str, data: bytes, mode: int = 0o644) -> None:
    info = tarfile.TarInfo(name)
    info.size = len(data)
    info.mode = mode
    tf.addfile(info, io.BytesIO(data))


def add_symlink(tf: tarfile.TarFile, name: str, target: str) -> None:
    info = tarfile.TarInfo(name)
    info.type = tarfile.SYMTYPE
    info.linkname = target
    tf.addfile(info)


def write_server_archive(path: Path) -> Path:
    """A minimal JDT LS snapshot: bin/jdtls plus a plugin jar."""
    with tarfile.open(path, "w:gz") as tf:
        add_dir(tf, "bin")
        add_file(tf, "bin/jdtls", LAUNCHER, mode=0o755)
        add_dir(tf, "plugins")
        add_file(tf, "plugins/org.eclipse.jdt.ls.core.jar", b"PK\x03\x04jar")
    return path
