import pytest

from jdtls_volt.config import BootstrapSettings
from tests.helpers import SERVER_ID, write_server_archive


@pytest.fixture
def server_archive_bytes(tmp_path) -> bytes:
    return write_server_archive(tmp_path / "snapshot.tar.gz").read_bytes()


@pytest.fixture
def settings(tmp_path) -> BootstrapSettings:
    working_dir = tmp_path / "plugin"
    working_dir.mkdir()
    return BootstrapSettings(
        working_dir=working_dir,
        volt_uri="file:///plugins/jdtls-volt",
        server_id=SERVER_ID,
    )
