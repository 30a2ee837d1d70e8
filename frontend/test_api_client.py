# frontend/test_api_client.py
# Unit tests for the projects API client (requests is mocked, no backend needed)

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from frontend.api_client import (
    api_request,
    delete_project,
    fetch_projects,
    list_projects,
    project_path,
    save_project,
)
from frontend.models import Project

BASE = "http://api.test"


def make_response(status_code=200, payload=None, json_error=False):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    if json_error:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture(autouse=True)
def base_url():
    with patch("frontend.api_client.get_api_base_url", return_value=BASE):
        yield


class TestApiRequest:
    def test_get_bypasses_cache_when_asked(self):
        with patch("frontend.api_client.requests.get", return_value=make_response()) as mock_get:
            api_request("GET", "/api/projects", no_cache=True)

        url = mock_get.call_args.args[0]
        headers = mock_get.call_args.kwargs["headers"]
        assert url == f"{BASE}/api/projects"
        assert headers["Cache-Control"] == "no-cache"
        assert headers["Pragma"] == "no-cache"
        assert "Content-Type" not in headers

    def test_post_sends_json_content_type(self):
        with patch("frontend.api_client.requests.post", return_value=make_response(201)) as mock_post:
            api_request("POST", "/api/projects", json={"title": "A"})

        kwargs = mock_post.call_args.kwargs
        assert kwargs["json"] == {"title": "A"}
        assert kwargs["headers"]["Content-Type"] == "application/json"

    def test_non_2xx_is_returned_to_caller(self):
        with patch("frontend.api_client.requests.get", return_value=make_response(500)):
            resp = api_request("GET", "/api/projects")
        assert resp is not None
        assert resp.status_code == 500

    def test_connection_error_returns_none(self, capsys):
        with patch("frontend.api_client.requests.get", side_effect=requests.exceptions.ConnectionError()):
            assert api_request("GET", "/api/projects") is None
        assert "[API] Connection error" in capsys.readouterr().out

    def test_timeout_returns_none(self):
        with patch("frontend.api_client.requests.delete", side_effect=requests.exceptions.Timeout()):
            assert api_request("DELETE", "/api/projects/1") is None

    def test_config_error_returns_none(self, capsys):
        with patch("frontend.api_client.get_api_base_url", side_effect=RuntimeError("not configured")):
            assert api_request("GET", "/api/projects") is None
        assert "Configuration error" in capsys.readouterr().out


class TestListProjects:
    def test_parses_array(self):
        payload = [
            {"id": 1, "title": "A", "featured": True, "imageUrl": "https://img/a.png", "technologies": ["x"]},
            {"id": 2, "title": "B", "featured": False},
        ]
        with patch("frontend.api_client.requests.get", return_value=make_response(200, payload)):
            projects = list_projects()

        assert [p.id for p in projects] == [1, 2]
        assert projects[0].image_url == "https://img/a.png"
        assert projects[1].technologies == []

    @pytest.mark.parametrize("payload", [{"projects": []}, "oops", None, 42])
    def test_non_array_body_is_empty(self, payload):
        with patch("frontend.api_client.requests.get", return_value=make_response(200, payload)):
            assert list_projects() == []

    def test_invalid_json_is_empty(self):
        with patch("frontend.api_client.requests.get", return_value=make_response(200, json_error=True)):
            assert list_projects() == []

    def test_http_error_is_empty(self):
        with patch("frontend.api_client.requests.get", return_value=make_response(503, [{"id": 1}])):
            assert list_projects() == []

    def test_transport_error_is_empty(self):
        with patch("frontend.api_client.requests.get", side_effect=requests.exceptions.ConnectionError()):
            assert list_projects() == []

    def test_skips_malformed_items_and_duplicate_ids(self, capsys):
        payload = [
            {"id": 1, "title": "A"},
            {"title": "missing id"},
            {"id": 1, "title": "A again"},
            {"id": 3, "title": "C"},
        ]
        with patch("frontend.api_client.requests.get", return_value=make_response(200, payload)):
            projects = list_projects()

        assert [p.title for p in projects] == ["A", "C"]
        out = capsys.readouterr().out
        assert "malformed" in out
        assert "duplicate" in out

    @pytest.mark.parametrize("technologies", [5, True, {"a": 1}])
    def test_skips_items_with_non_list_technologies(self, technologies):
        payload = [{"id": 1, "technologies": technologies}, {"id": 2}]
        with patch("frontend.api_client.requests.get", return_value=make_response(200, payload)):
            projects = list_projects()
        assert [p.id for p in projects] == [2]


class TestFetchProjects:
    def test_no_response_is_none(self):
        with patch("frontend.api_client.requests.get", side_effect=requests.exceptions.ConnectionError()):
            assert fetch_projects() is None

    def test_non_json_body_is_none(self):
        with patch("frontend.api_client.requests.get", return_value=make_response(200, json_error=True)):
            assert fetch_projects() is None

    def test_non_array_body_is_empty(self):
        with patch("frontend.api_client.requests.get", return_value=make_response(200, {"error": "x"})):
            assert fetch_projects() == []

    def test_http_error_is_empty(self):
        with patch("frontend.api_client.requests.get", return_value=make_response(500, {"error": "x"})):
            assert fetch_projects() == []


class TestSaveProject:
    def test_create_posts_to_collection(self):
        with patch("frontend.api_client.requests.post", return_value=make_response(201)) as mock_post, \
             patch("frontend.api_client.requests.put") as mock_put:
            assert save_project({"title": "New"}) is True

        mock_put.assert_not_called()
        assert mock_post.call_args.args[0] == f"{BASE}/api/projects"
        assert mock_post.call_args.kwargs["json"] == {"title": "New"}

    def test_update_puts_to_project_id(self):
        existing = Project(id=7, title="Old")
        with patch("frontend.api_client.requests.put", return_value=make_response(200)) as mock_put, \
             patch("frontend.api_client.requests.post") as mock_post:
            assert save_project({"title": "Renamed"}, existing) is True

        mock_post.assert_not_called()
        assert mock_put.call_args.args[0] == f"{BASE}/api/projects/7"

    def test_failure_status_is_false_and_logged(self, capsys):
        with patch("frontend.api_client.requests.post", return_value=make_response(422)):
            assert save_project({"title": ""}) is False
        assert "Failed to save project" in capsys.readouterr().out

    def test_transport_error_is_false(self):
        with patch("frontend.api_client.requests.put", side_effect=requests.exceptions.ConnectionError()):
            assert save_project({"title": "x"}, Project(id=1)) is False


class TestDeleteProject:
    def test_success(self):
        with patch("frontend.api_client.requests.delete", return_value=make_response(204)) as mock_delete:
            assert delete_project(2) is True
        assert mock_delete.call_args.args[0] == f"{BASE}/api/projects/2"

    def test_failure(self):
        with patch("frontend.api_client.requests.delete", return_value=make_response(404)):
            assert delete_project(2) is False


def test_project_path_quotes_opaque_ids():
    assert project_path(5) == "/api/projects/5"
    assert project_path("a b/c") == "/api/projects/a%20b%2Fc"
