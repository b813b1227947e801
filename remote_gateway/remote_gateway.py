from __future__ import annotations  # Remote practice service gateway module

import asyncio
import logging
import os
from typing import Any, Dict, Optional, Protocol, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from config import RemoteRoute


logger = logging.getLogger(__name__)  # Module logger setup


class HttpResponse(Protocol):  # Minimal HTTP response protocol
    @property
    def status_code(self) -> int: ...

    def json(self) -> Any: ...

    @property
    def text(self) -> str: ...


class HttpClient(Protocol):  # Minimal async HTTP client protocol
    async def post(self, url: str, *, json: Dict[str, Any], headers: Dict[str, str], timeout: float) -> HttpResponse: ...

    async def get(self, url: str, *, headers: Dict[str, str], timeout: float) -> HttpResponse: ...


class RemoteGatewayError(RuntimeError):  # Base gateway error
    kind = "remote_error"


class RemoteUnavailable(RemoteGatewayError):  # Transport failure or timeout
    kind = "unavailable"


class RemoteRejected(RemoteGatewayError):  # Non-success status code
    kind = "rejected"

    def __init__(self, status_code: int, detail: str = "") -> None:
        super().__init__(f"Remote returned status {status_code}")
        self.status_code = status_code
        self.detail = detail


class RemoteMalformed(RemoteGatewayError):  # Success status with an unusable body
    kind = "malformed"


T = TypeVar("T", bound=BaseModel)


async def post_json(
    payload: Dict[str, Any],
    schema: Type[T],
    *,
    cfg: RemoteRoute,
    client: Optional[HttpClient] = None,
) -> T:  # POST payload to the configured route and validate the reply
    response = await _send("POST", cfg, client, payload)
    data = _decode(response, cfg)
    try:
        parsed = schema.model_validate(data)
    except ValidationError as exc:
        logger.warning("Remote payload failed validation route=%s errors=%d", cfg.name, exc.error_count())
        raise RemoteMalformed(f"Remote payload did not match {schema.__name__}") from exc
    logger.info("Remote request done route=%s", cfg.name)
    return parsed


async def probe(cfg: RemoteRoute, *, client: Optional[HttpClient] = None) -> None:  # Health check via GET
    await _send("GET", cfg, client, None)


async def _send(
    method: str,
    cfg: RemoteRoute,
    client: Optional[HttpClient],
    payload: Optional[Dict[str, Any]],
) -> HttpResponse:  # Dispatch with bounded timeout and transport retries
    attempts = cfg.max_retries + 1
    headers = _headers(cfg)
    last_error: Optional[BaseException] = None
    for attempt in range(attempts):
        logger.info(
            "Remote request send route=%s method=%s attempt=%d/%d",
            cfg.name,
            method,
            attempt + 1,
            attempts,
        )
        try:
            response = await asyncio.wait_for(
                _exchange(method, cfg.url, payload, headers, cfg.timeout_s, client),
                timeout=cfg.timeout_s,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("Remote request timed out route=%s after %.1fs", cfg.name, cfg.timeout_s)
            last_error = exc
            continue
        except Exception as exc:  # noqa: BLE001
            logger.warning("Remote transport failure route=%s: %s", cfg.name, exc)
            last_error = exc
            continue
        status = int(response.status_code)
        if not 200 <= status < 300:
            logger.warning("Remote error status route=%s status=%s", cfg.name, status)
            raise RemoteRejected(status, _safe_text(response))
        return response
    raise RemoteUnavailable(f"Remote route '{cfg.name}' unreachable") from last_error


async def _exchange(
    method: str,
    url: str,
    payload: Optional[Dict[str, Any]],
    headers: Dict[str, str],
    timeout: float,
    client: Optional[HttpClient],
) -> HttpResponse:  # Perform a single HTTP exchange
    if client is not None:
        if method == "GET":
            return await client.get(url, headers=headers, timeout=timeout)
        return await client.post(url, json=payload or {}, headers=headers, timeout=timeout)
    async with httpx.AsyncClient(timeout=timeout) as http_client:
        if method == "GET":
            return await http_client.get(url, headers=headers)
        return await http_client.post(url, json=payload or {}, headers=headers)


def _headers(cfg: RemoteRoute) -> Dict[str, str]:  # Compose request headers for a route
    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if cfg.api_key_env:
        api_key = os.getenv(cfg.api_key_env)
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
    headers.update(cfg.extra_headers)
    return headers


def _decode(response: HttpResponse, cfg: RemoteRoute) -> Any:  # Parse JSON body or flag as malformed
    try:
        return response.json()
    except Exception as exc:  # noqa: BLE001
        logger.warning("Invalid JSON payload route=%s: %s", cfg.name, exc)
        raise RemoteMalformed("Remote payload was not JSON") from exc


def _safe_text(response: HttpResponse) -> str:  # Short error body preview for diagnostics
    try:
        text = response.text or ""
    except Exception:  # noqa: BLE001
        return ""
    return text[:197] + "..." if len(text) > 200 else text
