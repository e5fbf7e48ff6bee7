"""Utility helpers shared by the mdsite configuration loader."""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from mdsite.errors import ConfigurationError

BIND_ADDRESS_PATTERN = re.compile(r"^(?P<host>\[[^\]]+\]|[^:]*):(?P<port>\d{1,5})$")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_folder(value: object | None, base_dir: Path) -> Path | None:
    """Return ``value`` as a path, anchoring relative paths at ``base_dir``."""
    text = _optional_str(value)
    if text is None:
        return None
    path = Path(text).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


def _parse_page_size(value: typ.Any) -> int:
    """Return ``value`` as a positive page size or raise ConfigurationError."""
    match value:
        case bool():
            valid = None
        case int():
            valid = value
        case str() as text if text.strip().isdigit():
            valid = int(text.strip())
        case _:
            valid = None
    if valid is None or valid < 1:
        msg = f"ArticlesPerPage must be a positive integer, got {value!r}."
        raise ConfigurationError(msg)
    return valid


def split_bind_address(server_ip: str) -> tuple[str, int]:
    """Split a ``host:port`` bind address into its parts.

    Parameters
    ----------
    server_ip : str
        Address such as ``"127.0.0.1:9999"``, ``"[::1]:8080"`` or ``":80"``.
        An empty host binds every interface.

    Returns
    -------
    tuple[str, int]
        Host name (brackets stripped for IPv6) and port number.

    Raises
    ------
    ConfigurationError
        If the value has no port or the port is outside ``1..65535``.

    Examples
    --------
    >>> split_bind_address(":8080")
    ('0.0.0.0', 8080)
    """
    match = BIND_ADDRESS_PATTERN.match(server_ip.strip())
    if match is None:
        msg = f"ServerIp must look like 'host:port', got {server_ip!r}."
        raise ConfigurationError(msg)
    host = match.group("host").strip("[]") or "0.0.0.0"  # noqa: S104 - bind-all is explicit
    port = int(match.group("port"))
    if not 0 < port < 65536:
        msg = f"ServerIp port must be between 1 and 65535, got {port}."
        raise ConfigurationError(msg)
    return host, port


__all__ = [
    "_optional_str",
    "_parse_page_size",
    "_resolve_folder",
    "split_bind_address",
]
