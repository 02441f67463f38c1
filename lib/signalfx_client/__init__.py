from .client import SignalFxClient
from .config_types import ConfigRecord, PartialConfig
from .errors import (
    ApiError,
    AuthError,
    ClientInitError,
    ConfigError,
    DecodeError,
    MissingCredentialError,
    NetworkError,
    OptionsError,
    ParseError,
    ReadError,
    SignalFxClientError,
)
from .factory import configure, new_client
from .options import CallerOptions
from .resolve import ConfigResolver, ResolverPaths, resolve_config
from .version import __version__

__all__ = [
    "SignalFxClient",
    "ConfigRecord",
    "PartialConfig",
    "CallerOptions",
    "ConfigResolver",
    "ResolverPaths",
    "resolve_config",
    "new_client",
    "configure",
    "SignalFxClientError",
    "ConfigError",
    "ReadError",
    "DecodeError",
    "ParseError",
    "MissingCredentialError",
    "OptionsError",
    "ClientInitError",
    "NetworkError",
    "ApiError",
    "AuthError",
    "__version__",
]
