from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

from .config_file import config_file_source
from .config_types import ConfigRecord, PartialConfig, overlay
from .errors import MissingCredentialError, ReadError
from .netrc_reader import DEFAULT_NETRC_HOST, netrc_source
from .options import CallerOptions

logger = logging.getLogger(__name__)

SYSTEM_CONFIG_PATH = "/etc/signalfx.conf"
HOME_CONFIG_FILENAME = ".signalfx.conf"

Source = Callable[[], PartialConfig | None]


@dataclass
class ResolverPaths:
    """Where the resolver looks for file-based configuration.

    ``home_config_path`` may be set explicitly (tests do this); otherwise it
    is derived from the user's home directory on first use and kept on the
    instance.
    """

    system_config_path: str = SYSTEM_CONFIG_PATH
    home_config_path: str | None = None
    netrc_host: str = DEFAULT_NETRC_HOST
    environ: Mapping[str, str] | None = field(default=None, repr=False)

    def resolved_home_config_path(self) -> str:
        if self.home_config_path is None:
            try:
                home = str(Path.home())
            except (RuntimeError, KeyError) as exc:
                raise ReadError("~", f"failed to get user environment {exc}") from exc
            self.home_config_path = os.path.join(home, HOME_CONFIG_FILENAME)
        return self.home_config_path


class ConfigResolver:
    def __init__(self, paths: ResolverPaths | None = None):
        self.paths = paths or ResolverPaths()

    def sources(self, options: CallerOptions) -> list[tuple[str, Source]]:
        """Configuration sources, lowest priority first."""
        return [
            ("system", config_file_source(self.paths.system_config_path)),
            ("home", self._home_source),
            ("netrc", netrc_source(self.paths.netrc_host, self.paths.environ)),
            ("options", options.as_partial),
        ]

    def _home_source(self) -> PartialConfig | None:
        return config_file_source(self.paths.resolved_home_config_path())()

    def resolve_with_origins(
            self,
            options: CallerOptions | Mapping[str, Any] | None = None,
    ) -> tuple[ConfigRecord, dict[str, str]]:
        """Resolve the configuration and report which source set each field.

        Fields still at their built-in default map to ``"default"``.
        """
        if not isinstance(options, CallerOptions):
            options = CallerOptions.from_mapping(options, self.paths.environ)

        record = ConfigRecord()
        origins = {name: "default" for name in record.values()}
        for name, source in self.sources(options):
            applied = overlay(record, source())
            for field_name in applied:
                origins[field_name] = name
            if applied:
                logger.debug("Config source %s supplied: %s", name, ", ".join(applied))

        if not record.auth_token:
            raise MissingCredentialError("auth_token", record)
        return record, origins

    def resolve(self, options: CallerOptions | Mapping[str, Any] | None = None) -> ConfigRecord:
        record, _origins = self.resolve_with_origins(options)
        return record


def resolve_config(
        options: CallerOptions | Mapping[str, Any] | None = None,
        paths: ResolverPaths | None = None,
) -> ConfigRecord:
    return ConfigResolver(paths).resolve(options)
