"""
Errors raised while bootstrapping the Java language server.

Every failure that aborts provisioning is a BootstrapError. The bootstrap
handler catches this base class, reports it to the host and carries on.
"""


class BootstrapError(Exception):
    """Base class for failures that abort a bootstrap."""


class FetchError(BootstrapError):
    """Downloading the server archive failed."""


class ExtractionError(BootstrapError):
    """The server archive could not be unpacked."""


class LocationError(BootstrapError):
    """The server executable location could not be built."""
