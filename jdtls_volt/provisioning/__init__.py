"""Download and installation of the JDT language server."""
from .coordinator import ProvisioningCoordinator
from .extractor import extract_tar_gz
from .fetcher import ArchiveFetcher

__all__ = ["ProvisioningCoordinator", "ArchiveFetcher", "extract_tar_gz"]
