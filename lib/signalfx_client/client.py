from __future__ import annotations

from typing import Any

from .transport import Transport


class SignalFxClient:
    """Handle used for all API calls once configuration has been resolved."""

    def __init__(self, transport: Transport, *, user_agent: str):
        self._t = transport
        self.user_agent = user_agent

    @property
    def base_url(self) -> str:
        return self._t.base_url

    @property
    def timeout_seconds(self) -> float | None:
        return self._t.timeout.read

    def request(self, method: str, path: str, *, json_body: Any | None = None) -> Any:
        return self._t.request(method, path, json_body=json_body)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "SignalFxClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
