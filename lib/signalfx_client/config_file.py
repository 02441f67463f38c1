from __future__ import annotations

import json
import logging
import os
from typing import Callable

from .config_types import RECORD_FIELDS, PartialConfig
from .errors import DecodeError, ReadError

logger = logging.getLogger(__name__)


def read_config_file(path: str) -> PartialConfig:
    """Decode a JSON config file into the fields it supplies.

    The file must exist; callers skip missing files before calling this.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise ReadError(path, f"failed to open config file {path}: {exc}") from exc

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(path, f"failed to parse config file {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DecodeError(
            path,
            f"failed to parse config file {path}: expected a JSON object, got {type(data).__name__}",
        )

    values: dict[str, str] = {}
    for key in RECORD_FIELDS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise DecodeError(
                path,
                f"failed to parse config file {path}: {key} must be a string, got {type(value).__name__}",
            )
        values[key] = value

    logger.debug("Read config file %s (fields: %s)", path, ", ".join(sorted(values)) or "none")
    return PartialConfig(**values)


def config_file_source(path: str) -> Callable[[], PartialConfig | None]:
    def _source() -> PartialConfig | None:
        if not os.path.exists(path):
            return None
        return read_config_file(path)

    return _source
