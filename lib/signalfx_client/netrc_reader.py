from __future__ import annotations

import logging
import netrc
import os
import stat
from typing import Callable, Mapping

from .config_types import PartialConfig
from .errors import ParseError, ReadError

logger = logging.getLogger(__name__)

NETRC_ENV = "NETRC"
DEFAULT_NETRC_HOST = "api.signalfx.com"


class _FirstEntryHosts(dict):
    def __setitem__(self, key, value) -> None:
        if key not in self:
            super().__setitem__(key, value)


class _Netrc(netrc.netrc):
    """netrc parser where the first entry for a machine wins, as in curl and ftp."""

    def _parse(self, file, fp, default_netrc):
        self.hosts = _FirstEntryHosts()
        super()._parse(file, fp, default_netrc)


def netrc_filename(os_name: str | None = None) -> str:
    return "_netrc" if (os_name or os.name) == "nt" else ".netrc"


def netrc_path(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    path = (env.get(NETRC_ENV) or "").strip()
    if path:
        return path
    return os.path.expanduser(f"~/{netrc_filename()}")


def read_netrc_token(
        host: str = DEFAULT_NETRC_HOST,
        environ: Mapping[str, str] | None = None,
) -> str | None:
    """Return the password stored for ``host`` in the user's netrc file.

    A missing file, a directory in its place, or no entry for the host all
    mean "no credentials" and yield ``None``.
    """
    path = netrc_path(environ)
    try:
        st = os.stat(path)
    except FileNotFoundError:
        logger.debug("No netrc file at %s", path)
        return None
    except OSError as exc:
        raise ReadError(path, f"failed to stat netrc file {path}: {exc}") from exc
    if stat.S_ISDIR(st.st_mode):
        logger.debug("Netrc path %s is a directory, ignoring", path)
        return None

    try:
        parsed = _Netrc(path)
    except (netrc.NetrcParseError, UnicodeDecodeError) as exc:
        raise ParseError(path, f"error parsing netrc file at {path!r}: {exc}") from exc
    except OSError as exc:
        raise ReadError(path, f"failed to open netrc file {path}: {exc}") from exc

    entry = parsed.hosts.get(host)
    if entry is None:
        logger.debug("No netrc entry for %s in %s", host, path)
        return None
    _login, _account, password = entry
    return password or None


def netrc_source(
        host: str = DEFAULT_NETRC_HOST,
        environ: Mapping[str, str] | None = None,
) -> Callable[[], PartialConfig | None]:
    def _source() -> PartialConfig | None:
        token = read_netrc_token(host, environ)
        if token is None:
            return None
        return PartialConfig(auth_token=token)

    return _source
