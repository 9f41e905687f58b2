import asyncio
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from .constant import *
from .interface import IHttpClient
from .type import ErrHTTPRequest, HttpClientConfig


def build_params(params: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Drop None and empty-string values, stringify the rest.

    Booleans are rendered lowercase so query strings read ``true``/``false``.
    """
    clean: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            clean[key] = "true" if value else "false"
        else:
            clean[key] = str(value)
    return clean


class HttpClient(IHttpClient):
    """Async JSON client bound to one provider base URL.

    Every failure (transport error, timeout, non-2xx status, non-JSON body)
    is raised as ``ErrHTTPRequest`` so adapters handle a single error type.

    Example:
        >>> client = HttpClient(HttpClientConfig(
        ...     base_url="https://api.coingecko.com/api/v3",
        ...     service_name="CoinGecko",
        ...     headers={"x-cg-demo-api-key": "..."},
        ... ))
        >>> data = await client.get_json("/search/trending")
        >>> await client.close()
    """

    def __init__(self, config: HttpClientConfig):
        self.config = config
        self.service_name = config.service_name
        headers = {
            "Content-Type": DEFAULT_CONTENT_TYPE,
            "User-Agent": config.user_agent,
            **config.headers,
        }
        self.client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=headers,
            timeout=config.timeout,
            transport=config.transport,
        )

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post_json(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self._request("POST", path, params=params, body=body)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        attempt = 0
        while True:
            try:
                response = await self.client.request(
                    method, path, params=build_params(params), json=body
                )
            except httpx.TimeoutException as exc:
                error = ErrHTTPRequest(
                    f"request timed out: {exc}", TIMEOUT_ERROR_STATUS, self.service_name
                )
            except httpx.HTTPError as exc:
                error = ErrHTTPRequest(str(exc) or type(exc).__name__, TRANSPORT_ERROR_STATUS, self.service_name)
            else:
                if response.is_success:
                    try:
                        return response.json()
                    except ValueError:
                        raise ErrHTTPRequest(
                            "response body is not valid JSON",
                            response.status_code,
                            self.service_name,
                        )
                error = ErrHTTPRequest(
                    _error_message(response), response.status_code, self.service_name
                )
                if response.status_code not in RETRYABLE_STATUS_CODES:
                    self._log_failure(method, path, error)
                    raise error

            if attempt >= self.config.max_retries:
                self._log_failure(method, path, error)
                raise error
            attempt += 1
            await asyncio.sleep(self.config.retry_backoff * (2 ** (attempt - 1)))

    def _log_failure(self, method: str, path: str, error: ErrHTTPRequest) -> None:
        logger.debug(
            f"[{self.service_name}] {method} {path} failed: "
            f"status={error.status_code} message={error.message}"
        )

    async def close(self) -> None:
        await self.client.aclose()


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"
    if isinstance(data, dict):
        message = data.get("message") or data.get("error") or data.get("detail")
        if isinstance(message, str) and message:
            return message
    return response.reason_phrase or f"HTTP {response.status_code}"


__all__ = [
    "HttpClient",
    "build_params",
]
