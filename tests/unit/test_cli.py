"""Tests for the command-line interface."""

import json

import httpx
import pytest

from nexus_repos import cli
from nexus_repos.repos.client import RepositoryClient
from nexus_repos.repos.transport import HttpxTransport


@pytest.fixture
def definition_file(tmp_path):
    path = tmp_path / "releases.yaml"
    path.write_text(
        """
name: releases
format: maven2
type: hosted
online: true
storage:
  blobStoreName: default
  strictContentTypeValidation: true
  writePolicy: allow_once
"""
    )
    return path


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        """
nexus:
  url: https://nexus.example.com
  username: admin
  password: secret
logging:
  level: ERROR
"""
    )
    return path


def parse(*argv):
    return cli.build_parser().parse_args(list(argv))


class TestLoadDefinition:
    """Tests for loading repository definitions."""

    def test_yaml_definition(self, definition_file):
        repo = cli.load_definition(str(definition_file))

        assert repo.name == "releases"
        assert repo.storage.blob_store_name == "default"

    def test_json_definition(self, tmp_path):
        path = tmp_path / "repo.json"
        path.write_text(json.dumps({"name": "npm", "format": "npm", "type": "group"}))

        assert cli.load_definition(str(path)).type == "group"

    def test_missing_type(self, tmp_path):
        path = tmp_path / "repo.yaml"
        path.write_text("name: r\nformat: raw\n")

        with pytest.raises(ValueError, match="format"):
            cli.load_definition(str(path))

    def test_invalid_definition(self, tmp_path):
        path = tmp_path / "repo.yaml"
        path.write_text("format: raw\ntype: hosted\n")

        with pytest.raises(ValueError, match="Invalid repository definition"):
            cli.load_definition(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            cli.load_definition(str(tmp_path / "nope.yaml"))


class TestRun:
    """Tests for command dispatch."""

    def test_list(self, transport, hosted_payload, capsys):
        transport.respond(200, [hosted_payload])

        code = cli.run(parse("list"), RepositoryClient(transport))

        assert code == 0
        assert "releases maven2 hosted" in capsys.readouterr().out

    def test_get_found(self, transport, hosted_payload, capsys):
        transport.respond(200, [hosted_payload])

        code = cli.run(parse("get", "releases"), RepositoryClient(transport))

        assert code == 0
        printed = json.loads(capsys.readouterr().out)
        assert printed["storage"]["writePolicy"] == "allow_once"

    def test_get_not_found(self, transport, capsys):
        transport.respond(200, [])

        code = cli.run(parse("get", "missing"), RepositoryClient(transport))

        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_create(self, transport, definition_file):
        transport.respond(201)

        code = cli.run(
            parse("create", str(definition_file)), RepositoryClient(transport)
        )

        assert code == 0
        assert transport.last_call["path"].endswith("/maven2/hosted")

    def test_update(self, transport, definition_file):
        transport.respond(204)

        code = cli.run(
            parse("update", "releases", str(definition_file)),
            RepositoryClient(transport),
        )

        assert code == 0
        assert transport.last_call["path"].endswith("/maven2/hosted/releases")

    def test_delete(self, transport):
        transport.respond(204)

        code = cli.run(parse("delete", "releases"), RepositoryClient(transport))

        assert code == 0
        assert transport.last_call["method"] == "DELETE"


class TestMain:
    """Tests for the main entry point."""

    def test_no_command(self, capsys):
        assert cli.main([]) == 1

    def test_missing_config(self, tmp_path, capsys):
        code = cli.main(["-c", str(tmp_path / "missing.yaml"), "list"])

        assert code == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_request_error_exit_code(self, config_file, monkeypatch, capsys):
        def handler(request):
            return httpx.Response(403, text="forbidden")

        def fake_from_config(config):
            return HttpxTransport(
                config.url,
                client=httpx.Client(
                    base_url=config.url, transport=httpx.MockTransport(handler)
                ),
            )

        monkeypatch.setattr(HttpxTransport, "from_config", fake_from_config)

        code = cli.main(["-c", str(config_file), "delete", "releases"])

        assert code == 1
        assert "HTTP: 403, forbidden" in capsys.readouterr().err
