from __future__ import annotations

import logging
import platform
from typing import Any, Mapping

import httpx

from .client import SignalFxClient
from .config_types import DEFAULT_TIMEOUT_SECONDS, ConfigRecord
from .errors import ClientInitError, OptionsError
from .options import CallerOptions, parse_timeout_seconds
from .resolve import ConfigResolver, ResolverPaths
from .transport import Transport
from .version import LIBRARY_NAME, __version__

logger = logging.getLogger(__name__)

DEFAULT_HOST_PRODUCT = "Python"


def compose_user_agent(host_product: str, host_version: str | None) -> str:
    if host_version is None and host_product == DEFAULT_HOST_PRODUCT:
        host_version = platform.python_version()
    return f"{host_product}/{host_version or 'unknown'} {LIBRARY_NAME}/{__version__}"


def _validate_api_url(api_url: str) -> str:
    value = (api_url or "").strip()
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ClientInitError(f"invalid api_url {api_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ClientInitError(f"invalid api_url {api_url!r}: expected an absolute http(s) URL")
    return value


def _validate_token(token: str) -> str:
    if not token:
        raise ClientInitError("auth_token is empty")
    if "\r" in token or "\n" in token:
        raise ClientInitError("auth_token contains line breaks")
    try:
        token.encode("ascii")
    except UnicodeEncodeError as exc:
        raise ClientInitError("auth_token contains non-ASCII characters") from exc
    return token


def new_client(
        config: ConfigRecord,
        *,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        host_product: str = DEFAULT_HOST_PRODUCT,
        host_version: str | None = None,
        transport: httpx.BaseTransport | None = None,
) -> SignalFxClient:
    """Build an HTTP client for the resolved configuration.

    No request is sent; a bad token only shows up on first use.
    """
    try:
        timeout_seconds = parse_timeout_seconds(timeout_seconds)
    except OptionsError as exc:
        raise ClientInitError(str(exc)) from exc
    api_url = _validate_api_url(config.api_url)
    token = _validate_token(config.auth_token)
    user_agent = compose_user_agent(host_product, host_version)

    logger.debug("SignalFx: HTTP Timeout is %d seconds", timeout_seconds)
    try:
        t = Transport(
            api_url,
            token=token,
            timeout_s=float(timeout_seconds),
            user_agent=user_agent,
            transport=transport,
        )
    except (httpx.InvalidURL, ValueError, TypeError) as exc:
        raise ClientInitError(f"failed to build SignalFx client: {exc}") from exc
    return SignalFxClient(t, user_agent=user_agent)


def configure(
        options: CallerOptions | Mapping[str, Any] | None = None,
        *,
        paths: ResolverPaths | None = None,
        host_product: str = DEFAULT_HOST_PRODUCT,
        host_version: str | None = None,
        transport: httpx.BaseTransport | None = None,
) -> ConfigRecord:
    """Resolve configuration and attach a ready client to the record."""
    resolver = ConfigResolver(paths)
    if not isinstance(options, CallerOptions):
        options = CallerOptions.from_mapping(options, resolver.paths.environ)
    config = resolver.resolve(options)
    config.client = new_client(
        config,
        timeout_seconds=options.timeout_seconds,
        host_product=host_product,
        host_version=host_version,
        transport=transport,
    )
    return config
