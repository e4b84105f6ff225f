"""Shared fixtures: a fake GitHub listing endpoint."""

import pytest

from gh_repo_list import repos as repos_mod


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK", text=""):
        self._payload = payload
        self.status_code = status_code
        self.reason = reason
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return self._payload


def _repo_data(name, updated_at="2024-01-01T00:00:00Z", **extra):
    data = {
        "name": name,
        "html_url": f"https://github.com/octo/{name}",
        "description": None,
        "stargazers_count": 0,
        "language": None,
        "updated_at": updated_at,
    }
    data.update(extra)
    return data


class FakeApi:
    """Serves pre-built responses in order and records each request.

    A response that is an exception instance is raised instead of returned.
    """

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def repo_data():
    return _repo_data


@pytest.fixture
def response():
    return FakeResponse


@pytest.fixture
def fake_api(monkeypatch):
    def install(*responses):
        api = FakeApi(responses)
        monkeypatch.setattr(repos_mod.niquests, "get", api.get)
        return api

    return install


@pytest.fixture
def page_of():
    def build(count, prefix="repo"):
        return FakeResponse([_repo_data(f"{prefix}{i}") for i in range(count)])

    return build
