"""
frontend/api_client.py
Centralized API client for the Projects page.

This module ensures:
1. All backend calls go through api_request() (one place for URL, headers, timeouts)
2. Failures never raise into the page: they are logged and reported as None/False
3. The project collection endpoints (list, create/update, delete) share one contract
"""

from typing import Any, Dict, List, Literal, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

# Import config (robust fallback for different run contexts)
try:
    from frontend.config import get_api_base_url, IS_DEV, PROJECTS_API_PATH, REQUEST_TIMEOUT
except ModuleNotFoundError:
    from config import get_api_base_url, IS_DEV, PROJECTS_API_PATH, REQUEST_TIMEOUT

try:
    from frontend.models import Project, ProjectId
except ModuleNotFoundError:
    from models import Project, ProjectId


__all__ = [
    "api_request",
    "fetch_projects",
    "list_projects",
    "save_project",
    "delete_project",
    "project_path",
    "get_api_base_url",
]


def api_request(
    method: Literal["GET", "POST", "PUT", "DELETE"],
    path: str,
    json: Optional[Any] = None,
    params: Optional[Dict[str, Any]] = None,
    timeout: int = REQUEST_TIMEOUT,
    no_cache: bool = False,
) -> Optional[requests.Response]:
    """
    Make an API request with JSON headers and uniform error handling.

    This is the ONLY function that should make backend API calls.

    Args:
        method: HTTP method (GET, POST, PUT, DELETE)
        path: API endpoint path (e.g., "/api/projects")
        json: JSON body for POST/PUT requests
        params: Query parameters
        timeout: Request timeout in seconds
        no_cache: Ask intermediaries not to serve a cached response

    Returns:
        Response object for any HTTP status, None on configuration or
        transport error. Callers decide what a non-2xx status means.
    """
    try:
        base_url = get_api_base_url()
    except (RuntimeError, ValueError) as e:
        print(f"[API] Configuration error: {e}")
        return None

    url = f"{base_url}{path}"

    headers = {"Accept": "application/json"}
    if json is not None:
        headers["Content-Type"] = "application/json"
    if no_cache:
        headers["Cache-Control"] = "no-cache"
        headers["Pragma"] = "no-cache"

    try:
        if method == "GET":
            resp = requests.get(url, headers=headers, params=params, timeout=timeout)
        elif method == "POST":
            resp = requests.post(url, json=json, headers=headers, params=params, timeout=timeout)
        elif method == "PUT":
            resp = requests.put(url, json=json, headers=headers, params=params, timeout=timeout)
        elif method == "DELETE":
            resp = requests.delete(url, headers=headers, params=params, timeout=timeout)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if IS_DEV:
            print(f"[API] {method} {path} -> {resp.status_code}")
        return resp

    except requests.exceptions.Timeout:
        print(f"[API] Timeout on {method} {path} after {timeout}s")
        return None

    except requests.exceptions.ConnectionError:
        print(f"[API] Connection error on {method} {path} (backend {base_url})")
        return None

    except requests.exceptions.RequestException as e:
        print(f"[API] Request failed on {method} {path}: {type(e).__name__}: {str(e)[:100]}")
        return None


def project_path(project_id: ProjectId) -> str:
    """Item endpoint for a project, e.g. /api/projects/42."""
    return f"{PROJECTS_API_PATH}/{quote(str(project_id), safe='')}"


def _parse_projects(data: Any) -> List[Project]:
    if not isinstance(data, list):
        print(f"[PROJECTS] Expected a JSON array, got {type(data).__name__}; treating as empty")
        return []

    projects: List[Project] = []
    seen = set()
    for idx, item in enumerate(data):
        try:
            project = Project.model_validate(item)
        except ValidationError as e:
            print(f"[PROJECTS] Skipping malformed project at index {idx}: {e.error_count()} error(s)")
            continue
        except TypeError as e:
            print(f"[PROJECTS] Skipping malformed project at index {idx}: {e}")
            continue

        key = str(project.id)
        if key in seen:
            print(f"[PROJECTS] Skipping duplicate project id {project.id}")
            continue
        seen.add(key)
        projects.append(project)
    return projects


def fetch_projects() -> Optional[List[Project]]:
    """
    Fetch the full project collection, bypassing any response cache.

    Returns:
        None when nothing usable came back (no response, or a body that is
        not JSON); callers keep what they already show. Otherwise the parsed
        list, empty when the status is not 2xx or the body is not an array.
    """
    resp = api_request("GET", PROJECTS_API_PATH, no_cache=True)
    if resp is None:
        print("[PROJECTS] Failed to fetch projects: no response")
        return None

    if not resp.ok:
        print(f"[PROJECTS] Failed to fetch projects: HTTP {resp.status_code}")
        return []

    try:
        data = resp.json()
    except ValueError:
        print("[PROJECTS] Failed to fetch projects: body is not JSON")
        return None

    return _parse_projects(data)


def list_projects() -> List[Project]:
    """Like fetch_projects(), but any failure is an empty list."""
    projects = fetch_projects()
    return projects if projects is not None else []


def save_project(form_data: Dict[str, Any], existing_project: Optional[Project] = None) -> bool:
    """
    Create a project, or update existing_project when given.

    Returns True on a 2xx response. Callers resynchronize with
    list_projects() instead of reading the response body.
    """
    if existing_project is not None:
        method, path = "PUT", project_path(existing_project.id)
    else:
        method, path = "POST", PROJECTS_API_PATH

    resp = api_request(method, path, json=form_data)
    if resp is None:
        print(f"[PROJECTS] Failed to save project ({method} {path}): no response")
        return False
    if not resp.ok:
        print(f"[PROJECTS] Failed to save project ({method} {path}): HTTP {resp.status_code}")
        return False
    return True


def delete_project(project_id: ProjectId) -> bool:
    """Delete a project by id. Returns True on a 2xx response."""
    path = project_path(project_id)
    resp = api_request("DELETE", path)
    if resp is None:
        print(f"[PROJECTS] Failed to delete project {project_id}: no response")
        return False
    if not resp.ok:
        print(f"[PROJECTS] Failed to delete project {project_id}: HTTP {resp.status_code}")
        return False
    return True
