from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_BACKEND_TIMEOUT
from ..core.exceptions import BackendError

logger = logging.getLogger(__name__)


@dataclass
class BackendConfig:
    base_url: str
    timeout: float = DEFAULT_BACKEND_TIMEOUT


class BackendClient:
    """Thin JSON client for the EMS REST backend.

    Note: No retries; a failed call surfaces as BackendError to the caller.
    """

    _instance: Optional["BackendClient"] = None

    def __init__(self, config: BackendConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @classmethod
    def get_instance(cls, config: BackendConfig) -> "BackendClient":
        if cls._instance is None:
            cls._instance = BackendClient(config)
        return cls._instance

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self._request("GET", path, params=_drop_none(params))

    def post(self, path: str, payload: Any = None) -> Any:
        return self._request("POST", path, json=payload)

    def put(self, path: str, payload: Optional[dict] = None) -> Any:
        return self._request("PUT", path, json=payload)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, timeout=self._config.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("backend unreachable: %s %s (%s)", method, url, exc)
            raise BackendError(None, f"Backend unreachable: {exc}") from exc

        if not resp.ok:
            detail = _error_detail(resp)
            logger.warning("backend error: %s %s -> %s %s", method, url, resp.status_code, detail)
            raise BackendError(resp.status_code, detail)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise BackendError(resp.status_code, "Backend returned invalid JSON") from exc


def _drop_none(params: Optional[dict]) -> Optional[dict]:
    if params is None:
        return None
    return {k: v for k, v in params.items() if v is not None}


def _error_detail(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason or "error"
    if isinstance(body, dict):
        return str(body.get("error") or body.get("message") or body)
    return str(body)
