"""Asana REST API adapter."""

from typing import Any, Dict

import requests

from asana_closer.adapters.base import TaskTrackerAdapter, TaskTrackerError


def _error_body(resp: requests.Response) -> Any | None:
    """Decoded JSON error body, or None when the body is not JSON."""
    try:
        return resp.json()
    except ValueError:
        return None


class AsanaAdapter(TaskTrackerAdapter):
    """Asana API implementation (task completion only)."""

    def __init__(self, token: str, api_url: str = "https://app.asana.com/api/1.0", timeout: int = 30) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"Bearer {token}"
        self._session.headers["Content-Type"] = "application/json"

    def _request(
        self,
        method: str,
        path: str,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, json=json, timeout=self._timeout)
        except requests.RequestException as e:
            raise TaskTrackerError(str(e)) from e
        if not 200 <= resp.status_code < 300:
            body = _error_body(resp)
            msg = f"Request failed with status code {resp.status_code}"
            raise TaskTrackerError(msg, status_code=resp.status_code, response=body)
        return resp

    def complete_task(self, task_id: str) -> None:
        self._request("PUT", f"/tasks/{task_id}", json={"data": {"completed": True}})
