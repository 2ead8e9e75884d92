"""Pytest configuration and shared fixtures."""

import json

import httpx
import pytest


class FakeTransport:
    """In-memory transport that records requests and replays canned responses."""

    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content
        self.error = None
        self.calls = []

    def respond(self, status_code, content=b""):
        if not isinstance(content, bytes):
            content = json.dumps(content).encode("utf-8")
        self.status_code = status_code
        self.content = content

    def _reply(self, method, path, body=None, params=None):
        self.calls.append(
            {"method": method, "path": path, "body": body, "params": params}
        )
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content)

    def get(self, path, params=None):
        return self._reply("GET", path, params=params)

    def post(self, path, body):
        return self._reply("POST", path, body=body)

    def put(self, path, body):
        return self._reply("PUT", path, body=body)

    def delete(self, path):
        return self._reply("DELETE", path)

    @property
    def last_call(self):
        return self.calls[-1]

    def last_json(self):
        return json.loads(self.last_call["body"])


@pytest.fixture
def transport():
    """Fake transport returning 200 with an empty body."""
    return FakeTransport()


@pytest.fixture
def hosted_payload():
    """Hosted maven2 repository as returned by the list endpoint."""
    return {
        "name": "releases",
        "format": "maven2",
        "type": "hosted",
        "url": "https://nexus.example.com/repository/releases",
        "online": True,
        "storage": {
            "blobStoreName": "default",
            "strictContentTypeValidation": True,
            "writePolicy": "allow_once",
        },
        "cleanup": {"policyNames": ["weekly", "snapshots"]},
        "attributes": {},
    }


@pytest.fixture
def proxy_payload():
    """Proxy npm repository as returned by the list endpoint."""
    return {
        "name": "npm-proxy",
        "format": "npm",
        "type": "proxy",
        "online": True,
        "storage": {
            "blobStoreName": "default",
            "strictContentTypeValidation": True,
        },
        "proxy": {
            "remoteUrl": "https://registry.npmjs.org",
            "contentMaxAge": 1440,
            "metadataMaxAge": 1440,
        },
        "negativeCache": {"enabled": True, "timeToLive": 1440},
        "httpClient": {
            "blocked": False,
            "autoBlock": True,
            "connection": {
                "retries": 3,
                "userAgentSuffix": "ci",
                "timeout": 60,
                "enableCircularRedirects": False,
                "enableCookies": True,
            },
            "authentication": {
                "type": "username",
                "username": "reader",
                "ntlmHost": "",
                "ntlmDomain": "",
            },
        },
    }


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "nexus": {
            "url": "https://nexus.example.com/",
            "username": "admin",
            "password": "secret",
            "timeout": 15,
        },
        "logging": {
            "level": "DEBUG",
        },
    }
