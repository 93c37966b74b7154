"""Unit tests for Asana adapter (mocked API)."""

from unittest.mock import Mock, patch

import pytest
import requests

from asana_closer.adapters.asana import AsanaAdapter
from asana_closer.adapters.base import TaskTrackerError


@pytest.fixture
def adapter() -> AsanaAdapter:
    return AsanaAdapter(token="test-token")


def test_session_headers(adapter: AsanaAdapter) -> None:
    """Bearer token and JSON content type are sent with every request."""
    assert adapter._session.headers["Authorization"] == "Bearer test-token"
    assert adapter._session.headers["Content-Type"] == "application/json"


def test_complete_task_success(adapter: AsanaAdapter) -> None:
    """complete_task PUTs completed=true to the task endpoint."""
    mock_resp = Mock()
    mock_resp.status_code = 200
    mock_resp.json.return_value = {"data": {"gid": "222", "completed": True}}

    with patch.object(adapter._session, "request", return_value=mock_resp) as req:
        adapter.complete_task("222")

    req.assert_called_once()
    call_args = req.call_args
    assert call_args[0][0] == "PUT"
    assert call_args[0][1] == "https://app.asana.com/api/1.0/tasks/222"
    assert call_args[1]["json"] == {"data": {"completed": True}}
    assert call_args[1]["timeout"] == 30


def test_custom_api_url_and_timeout() -> None:
    """api_url trailing slash is stripped and timeout is passed through."""
    adapter = AsanaAdapter(token="t", api_url="https://asana.example/api/1.0/", timeout=5)
    mock_resp = Mock()
    mock_resp.status_code = 204

    with patch.object(adapter._session, "request", return_value=mock_resp) as req:
        adapter.complete_task("9")

    assert req.call_args[0][1] == "https://asana.example/api/1.0/tasks/9"
    assert req.call_args[1]["timeout"] == 5


def test_complete_task_error_status_carries_body(adapter: AsanaAdapter) -> None:
    """Non-2xx raises TaskTrackerError with status and decoded error body."""
    error_body = {"errors": [{"message": "task: Not a recognized ID: 222"}]}
    mock_resp = Mock()
    mock_resp.status_code = 404
    mock_resp.json.return_value = error_body

    with patch.object(adapter._session, "request", return_value=mock_resp):
        with pytest.raises(TaskTrackerError, match="status code 404") as exc_info:
            adapter.complete_task("222")

    assert exc_info.value.status_code == 404
    assert exc_info.value.response == error_body


def test_complete_task_error_status_without_json(adapter: AsanaAdapter) -> None:
    """Non-JSON error body leaves response as None."""
    mock_resp = Mock()
    mock_resp.status_code = 502
    mock_resp.json.side_effect = ValueError("not json")

    with patch.object(adapter._session, "request", return_value=mock_resp):
        with pytest.raises(TaskTrackerError) as exc_info:
            adapter.complete_task("222")

    assert exc_info.value.status_code == 502
    assert exc_info.value.response is None


def test_complete_task_transport_error(adapter: AsanaAdapter) -> None:
    """Network errors and timeouts become TaskTrackerError."""
    with patch.object(adapter._session, "request", side_effect=requests.Timeout("timed out")):
        with pytest.raises(TaskTrackerError, match="timed out") as exc_info:
            adapter.complete_task("222")

    assert exc_info.value.status_code is None
    assert exc_info.value.response is None
