# tests/cli/test_cli.py
"""Tests for the elastisink CLI."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from elastisink import __version__
from elastisink.cli import app

runner = CliRunner()


class TestCliBasics:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"elastisink version {__version__}" in result.output

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])

        assert "docs" in result.output
        assert "validate" in result.output

    def test_missing_env_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--env-file", str(tmp_path / "nope.env"), "docs"])

        assert result.exit_code == 1
        assert ".env file not found" in result.output


class TestDocsCommand:
    def test_enriched_by_default(self) -> None:
        result = runner.invoke(app, ["--no-dotenv", "docs"])

        assert result.exit_code == 0
        assert "Connector\n^^^^^^^^^" in result.stdout
        assert "``elastic.https.ssl.truststore.location``" in result.stdout
        assert "* Display name: Connection URLs" in result.stdout

    def test_plain(self) -> None:
        result = runner.invoke(app, ["--no-dotenv", "docs", "--plain"])

        assert result.exit_code == 0
        assert "Display name" not in result.stdout
        # Required keys lead the flat listing
        assert result.stdout.startswith("``connection.url``")


class TestValidateCommand:
    """Tests for validate command."""

    @pytest.fixture
    def valid_config(self, tmp_path: Path) -> Path:
        config = {
            "connection.url": ["http://es1:9200", "http://es2:9200"],
            "type.name": "_doc",
            "connection.password": "s3cret",
            "write.method": "upsert",
            "proxy": {"host": "proxy.local", "port": 3128},
        }
        config_file = tmp_path / "sink.yaml"
        config_file.write_text(yaml.dump(config))
        return config_file

    def test_valid_config_console(self, valid_config: Path) -> None:
        result = runner.invoke(app, ["--no-dotenv", "validate", "--config", str(valid_config)])

        assert result.exit_code == 0
        assert "Connector configuration valid" in result.stdout
        assert "Write method: upsert" in result.stdout
        assert "Proxy: proxy.local:3128" in result.stdout
        assert "connection.password = [hidden]" in result.stdout
        assert "s3cret" not in result.output

    def test_valid_config_json(self, valid_config: Path) -> None:
        result = runner.invoke(app, ["--no-dotenv", "validate", "-c", str(valid_config), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["connection.url"] == ["http://es1:9200", "http://es2:9200"]
        assert data["connection.password"] == "[hidden]"
        assert data["proxy.port"] == 3128
        assert data["batch.size"] == 2000

    def test_missing_required(self, tmp_path: Path) -> None:
        config_file = tmp_path / "sink.properties"
        config_file.write_text("connection.url=http://es:9200\n")

        result = runner.invoke(app, ["--no-dotenv", "validate", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Missing Required Configuration" in result.output
        assert "type.name" in result.output

    def test_invalid_enum(self, tmp_path: Path) -> None:
        config_file = tmp_path / "sink.properties"
        config_file.write_text("connection.url=http://es:9200\ntype.name=_doc\nwrite.method=UPSERT\n")

        result = runner.invoke(app, ["--no-dotenv", "validate", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid Value" in result.output
        assert "case-sensitive" in result.output

    def test_proxy_conflict(self, tmp_path: Path) -> None:
        config_file = tmp_path / "sink.properties"
        config_file.write_text("connection.url=http://es:9200\ntype.name=_doc\nproxy.username=u\n")

        result = runner.invoke(app, ["--no-dotenv", "validate", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Conflicting Configuration" in result.output
        assert "proxy.host" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--no-dotenv", "validate", "--config", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "Cannot Load Configuration" in result.output

    def test_missing_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ELASTISINK_TEST_UNSET", raising=False)
        config_file = tmp_path / "sink.yaml"
        config_file.write_text("connection.url: http://es:9200\ntype.name: _doc\nconnection.password: ${ELASTISINK_TEST_UNSET}\n")

        result = runner.invoke(app, ["--no-dotenv", "validate", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Missing Environment Variable" in result.output

    def test_env_file_supplies_secret(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # Registered with monkeypatch so the value loaded from .env is removed afterwards
        monkeypatch.setenv("ELASTISINK_TEST_PASSWORD", "placeholder")
        monkeypatch.delenv("ELASTISINK_TEST_PASSWORD")
        env_file = tmp_path / "test.env"
        env_file.write_text("ELASTISINK_TEST_PASSWORD=from-dotenv\n")
        config_file = tmp_path / "sink.yaml"
        config_file.write_text(
            "connection.url: http://es:9200\ntype.name: _doc\nconnection.password: ${ELASTISINK_TEST_PASSWORD}\n"
        )

        result = runner.invoke(
            app,
            ["--env-file", str(env_file), "validate", "--config", str(config_file), "--format", "json"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["connection.password"] == "[hidden]"
