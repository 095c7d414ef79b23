"""Host-facing side of the plugin."""
from .bootstrap import JavaBootstrap
from .launch import DOCUMENT_SELECTOR, DocumentFilter, ServerLaunchSpec
from .options import DefaultServer, ExplicitServer, resolve_options

__all__ = [
    'JavaBootstrap',
    'DOCUMENT_SELECTOR',
    'DocumentFilter',
    'ServerLaunchSpec',
    'DefaultServer',
    'ExplicitServer',
    'resolve_options',
]
