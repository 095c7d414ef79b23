"""
Initialization options handling.

The host forwards the user's plugin settings as initializationOptions:

    {"lsp": {"serverPath": "/usr/bin/jdtls", "serverArgs": ["--verbose"]}}

Anything that does not match this shape is ignored and the bundled server
is used instead. Bad settings never stop the plugin from starting.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ExplicitServer:
    """The user pointed at a server binary of their own."""

    path: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class DefaultServer:
    """Use the provisioned JDT language server."""

    args: tuple[str, ...] = ()


ServerChoice = ExplicitServer | DefaultServer


def _server_args(lsp: Mapping[str, Any]) -> tuple[str, ...]:
    raw = lsp.get("serverArgs")
    if not isinstance(raw, list):
        return ()
    return tuple(arg for arg in raw if isinstance(arg, str))


def _server_path(lsp: Mapping[str, Any]) -> str | None:
    raw = lsp.get("serverPath")
    if not isinstance(raw, str):
        return None
    path = raw.strip()
    return path or None


def resolve_options(initialization_options: Any) -> ServerChoice:
    """
    Decide which server to launch from the host's initialization options.

    Args:
        initialization_options: Raw initializationOptions value, any JSON type

    Returns:
        ExplicitServer when lsp.serverPath is a non-blank string,
        DefaultServer otherwise. Both carry the string entries of
        lsp.serverArgs in their original order.
    """
    if not isinstance(initialization_options, Mapping):
        return DefaultServer()

    lsp = initialization_options.get("lsp")
    if not isinstance(lsp, Mapping):
        return DefaultServer()

    args = _server_args(lsp)
    path = _server_path(lsp)
    if path is None:
        return DefaultServer(args)

    return ExplicitServer(path, args)
