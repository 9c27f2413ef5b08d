import os

import requests

from strength import StrengthLevel

DEFAULT_TIMEOUT = 5
LEVEL_NAMES = {level.value for level in StrengthLevel}


class ServiceError(Exception):
    """The password service could not be reached or answered with an error."""


def get_server_url():
    return os.getenv("PWTIER_SERVER_URL")


def get_timeout():
    return float(os.getenv("PWTIER_TIMEOUT", DEFAULT_TIMEOUT))


def _unwrap(resp):
    try:
        data = resp.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        data = {}
    if resp.status_code != 200:
        reason = data.get("reason") or f"HTTP {resp.status_code}"
        raise ServiceError(reason)
    if not data:
        raise ServiceError("malformed response: expected a JSON object")
    return data


def _request(method, url, session=None, **kwargs):
    kwargs.setdefault("timeout", get_timeout())
    try:
        if session is not None:
            return session.request(method, url, **kwargs)
        with requests.Session() as own_session:
            return own_session.request(method, url, **kwargs)
    except requests.RequestException as e:
        raise ServiceError(f"could not reach {url}: {e}") from e


def classify_remote(server_url, password, session=None):
    """POST /classify. Returns the response body as a dict."""
    resp = _request("POST", f"{server_url.rstrip('/')}/classify", session, json={"password": password})
    data = _unwrap(resp)

    if data.get("level") not in LEVEL_NAMES:
        raise ServiceError(f"malformed response: unknown level {data.get('level')!r}")
    hints = data.get("suggestions", [])
    if not isinstance(hints, list):
        raise ServiceError("malformed response: suggestions must be a list")
    return data


def generate_remote(server_url, level, count=1, session=None):
    """GET /generate. Returns the list of generated passwords."""
    resp = _request("GET", f"{server_url.rstrip('/')}/generate", session, params={"level": level, "count": count})
    data = _unwrap(resp)

    passwords = data.get("passwords")
    if not isinstance(passwords, list) or not all(isinstance(p, str) for p in passwords):
        raise ServiceError("malformed response: passwords must be a list of strings")
    return passwords
