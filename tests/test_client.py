from unittest import mock

import pytest
import requests

from client import ServiceError, classify_remote, generate_remote


def fake_response(status_code, body):
    resp = mock.Mock()
    resp.status_code = status_code
    resp.json.return_value = body
    return resp


def fake_session(status_code, body):
    session = mock.Mock()
    session.request.return_value = fake_response(status_code, body)
    return session


def test_classify_remote():
    session = fake_session(200, {"status": "success", "level": "strong", "suggestions": []})

    data = classify_remote("http://pw.test/", "Abcdefghijk1!", session=session)

    assert data["level"] == "strong"
    args, kwargs = session.request.call_args
    assert args == ("POST", "http://pw.test/classify")
    assert kwargs["json"] == {"password": "Abcdefghijk1!"}
    assert kwargs["timeout"] == 5


def test_generate_remote():
    session = fake_session(200, {"status": "success", "passwords": ["abcd", "efgh"]})

    assert generate_remote("http://pw.test", "low", 2, session=session) == ["abcd", "efgh"]
    args, kwargs = session.request.call_args
    assert args == ("GET", "http://pw.test/generate")
    assert kwargs["params"] == {"level": "low", "count": 2}


def test_error_status_raises():
    session = fake_session(400, {"status": "fail", "reason": "Invalid level: x"})

    with pytest.raises(ServiceError, match="Invalid level: x"):
        generate_remote("http://pw.test", "x", session=session)


def test_error_status_without_json_body():
    session = mock.Mock()
    resp = fake_response(500, None)
    resp.json.side_effect = ValueError("no json")
    session.request.return_value = resp

    with pytest.raises(ServiceError, match="HTTP 500"):
        classify_remote("http://pw.test", "abc", session=session)


def test_connection_error_raises():
    session = mock.Mock()
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ServiceError, match="could not reach"):
        classify_remote("http://pw.test", "abc", session=session)


@pytest.mark.parametrize("body", [
    {"status": "success"},
    {"status": "success", "level": "medium"},
    {"status": "success", "level": "low", "suggestions": "Add digits"},
    ["low"],
])
def test_classify_malformed_body_raises(body):
    session = fake_session(200, body)

    with pytest.raises(ServiceError, match="malformed response"):
        classify_remote("http://pw.test", "abc", session=session)


@pytest.mark.parametrize("body", [
    {"status": "success"},
    {"status": "success", "passwords": "abcd"},
    {"status": "success", "passwords": [1, 2]},
])
def test_generate_malformed_body_raises(body):
    session = fake_session(200, body)

    with pytest.raises(ServiceError, match="malformed response"):
        generate_remote("http://pw.test", "low", session=session)


def test_timeout_from_env(monkeypatch):
    monkeypatch.setenv("PWTIER_TIMEOUT", "1.5")
    session = fake_session(200, {"level": "low"})

    classify_remote("http://pw.test", "abc", session=session)
    assert session.request.call_args[1]["timeout"] == 1.5


def test_own_session_is_closed():
    own = mock.MagicMock()
    own.__enter__.return_value = own
    own.request.return_value = fake_response(200, {"level": "low", "suggestions": []})

    with mock.patch("client.requests.Session", return_value=own):
        classify_remote("http://pw.test", "abc")

    own.__exit__.assert_called_once()
