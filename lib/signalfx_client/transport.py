from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .errors import ApiError, AuthError, NetworkError

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-SF-Token"

CONNECT_TIMEOUT_S = 5.0
# httpx bounds idle connections per pool only; the per-host cap equals the total.
MAX_IDLE_CONNS = 100


def _log_request(request: httpx.Request) -> None:
    logger.debug("SignalFx request: %s %s", request.method, request.url)


def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.debug("SignalFx response: %s %s -> %s", request.method, request.url, response.status_code)


class Transport:
    def __init__(
            self,
            base_url: str,
            *,
            token: str,
            timeout_s: float,
            user_agent: str,
            transport: httpx.BaseTransport | None = None,
    ):
        headers = {"User-Agent": user_agent}
        if token:
            headers[AUTH_HEADER] = token

        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout_s, connect=CONNECT_TIMEOUT_S),
            limits=httpx.Limits(
                max_connections=None,
                max_keepalive_connections=MAX_IDLE_CONNS,
            ),
            headers=headers,
            trust_env=True,
            follow_redirects=True,
            transport=transport,
            event_hooks={"request": [_log_request], "response": [_log_response]},
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    @property
    def headers(self) -> httpx.Headers:
        return self._client.headers

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, path: str, *, json_body: Any | None = None) -> Any:
        try:
            r = self._client.request(method, path, json=json_body)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        data: Any = None
        text = None
        try:
            data = r.json()
        except ValueError:
            text = r.text

        if r.status_code >= 400:
            msg = f"{method} {path} failed with {r.status_code}"
            details = None

            if isinstance(data, dict) and "message" in data:
                details = json.dumps(data, ensure_ascii=False)
                msg = str(data.get("message") or msg)
            elif text:
                details = text[:1000]

            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        return data if data is not None else r.text
