"""
Tests for jdtls_volt/provisioning/extractor.py
"""
from __future__ import annotations

import gzip
import io
import os
import tarfile

import pytest

from jdtls_volt.errors import ExtractionError
from jdtls_volt.provisioning.extractor import extract_tar_gz
from tests.helpers import LAUNCHER, add_dir, add_file, add_symlink, write_server_archive


class TestExtractTarGz:
    """Tests for extract_tar_gz."""

    def test_nested_file_is_reproduced(self, tmp_path):
        """Test that nested paths and file bytes survive extraction."""
        archive = tmp_path / "nested.tar.gz"
        payload = bytes(range(256)) * 4
        with tarfile.open(archive, "w:gz") as tf:
            add_dir(tf, "outer")
            add_dir(tf, "outer/inner")
            add_file(tf, "outer/inner/data.bin", payload)

        dest = tmp_path / "out"
        written = extract_tar_gz(archive, dest)

        assert written == 3
        assert (dest / "outer" / "inner").is_dir()
        assert (dest / "outer" / "inner" / "data.bin").read_bytes() == payload

    def test_file_without_directory_entry(self, tmp_path):
        """Test that parent directories are created for bare file entries."""
        archive = tmp_path / "flat.tar.gz"
        with tarfile.open(archive, "w:gz") as tf:
            add_file(tf, "a/b/c.txt", b"hello")

        dest = tmp_path / "out"
        extract_tar_gz(archive, dest)

        assert (dest / "a" / "b" / "c.txt").read_bytes() == b"hello"

    def test_symlink_is_skipped(self, tmp_path):
        """Test that symbolic links are ignored without error."""
        archive = tmp_path / "links.tar.gz"
        with tarfile.open(archive, "w:gz") as tf:
            add_file(tf, "real.txt", b"content")
            add_symlink(tf, "link.txt", "real.txt")

        dest = tmp_path / "out"
        written = extract_tar_gz(archive, dest)

        assert written == 1
        assert (dest / "real.txt").exists()
        assert not os.path.lexists(dest / "link.txt")

    def test_fifo_is_skipped(self, tmp_path):
        """Test that special entries other than links are ignored too."""
        archive = tmp_path / "fifo.tar.gz"
        with tarfile.open(archive, "w:gz") as tf:
            info = tarfile.TarInfo("pipe")
            info.type = tarfile.FIFOTYPE
            tf.addfile(info)

        dest = tmp_path / "out"

        assert extract_tar_gz(archive, dest) == 0
        assert not os.path.lexists(dest / "pipe")

    def test_escaping_entries_are_skipped(self, tmp_path):
        """Test that entries resolving outside the destination are not written."""
        archive = tmp_path / "evil.tar.gz"
        with tarfile.open(archive, "w:gz") as tf:
            add_file(tf, "../escaped.txt", b"nope")
            add_file(tf, "ok.txt", b"fine")

        dest = tmp_path / "out"
        written = extract_tar_gz(archive, dest)

        assert written == 1
        assert not (tmp_path / "escaped.txt").exists()
        assert (dest / "ok.txt").read_bytes() == b"fine"

    def test_executable_bit_is_kept(self, tmp_path):
        """Test that the launcher stays executable."""
        archive = write_server_archive(tmp_path / "server.tar.gz")
        dest = tmp_path / "out"

        extract_tar_gz(archive, dest)

        launcher = dest / "bin" / "jdtls"
        assert launcher.read_bytes() == LAUNCHER
        assert os.access(launcher, os.X_OK)

    def test_multi_member_gzip(self, tmp_path):
        """Test that a tar stream split over several gzip members is read whole."""
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w") as tf:
            add_file(tf, "first.txt", b"1" * 2000)
            add_file(tf, "second.txt", b"2" * 2000)
        raw = buffer.getvalue()

        archive = tmp_path / "multi.tar.gz"
        archive.write_bytes(gzip.compress(raw[:1024]) + gzip.compress(raw[1024:]))

        dest = tmp_path / "out"
        extract_tar_gz(archive, dest)

        assert (dest / "first.txt").read_bytes() == b"1" * 2000
        assert (dest / "second.txt").read_bytes() == b"2" * 2000

    def test_not_gzip(self, tmp_path):
        """Test that a corrupt payload raises ExtractionError."""
        archive = tmp_path / "broken.tar.gz"
        archive.write_bytes(b"this is not gzip data")

        with pytest.raises(ExtractionError):
            extract_tar_gz(archive, tmp_path / "out")

    def test_truncated_archive(self, tmp_path):
        """Test that a truncated download raises ExtractionError."""
        full = write_server_archive(tmp_path / "full.tar.gz").read_bytes()
        archive = tmp_path / "truncated.tar.gz"
        archive.write_bytes(full[: len(full) // 2])

        with pytest.raises(ExtractionError):
            extract_tar_gz(archive, tmp_path / "out")

    def test_missing_archive(self, tmp_path):
        """Test that a missing payload raises ExtractionError."""
        with pytest.raises(ExtractionError):
            extract_tar_gz(tmp_path / "absent.tar.gz", tmp_path / "out")
