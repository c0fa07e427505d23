"""Tests for the command-line interface."""

from typing import Any

import pytest
from typer.testing import CliRunner

from complexity_radar import cli
from complexity_radar.exceptions import NotFoundError
from complexity_radar.logging import get_logger
from complexity_radar.types.files import FileChangeFrequency, FileIdentity

runner = CliRunner()


class FakeAsyncRadarClient:
    """Stands in for AsyncRadarClient, recording how it was built and called."""

    instances: list["FakeAsyncRadarClient"] = []
    result: list[FileChangeFrequency] = []
    error: Exception | None = None

    def __init__(self, token: str | None, base_url: str, max_concurrency: int) -> None:
        self.token = token
        self.base_url = base_url
        self.max_concurrency = max_concurrency
        self.calls: list[tuple[int, str, str]] = []
        FakeAsyncRadarClient.instances.append(self)

    async def get_top_changed_files(self, limit: int, owner: str, repo: str) -> Any:
        self.calls.append((limit, owner, repo))
        if self.error:
            raise self.error
        return self.result

    async def __aenter__(self) -> "FakeAsyncRadarClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def fake_client(monkeypatch) -> type[FakeAsyncRadarClient]:
    monkeypatch.setattr(cli, "AsyncRadarClient", FakeAsyncRadarClient)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    FakeAsyncRadarClient.instances = []
    FakeAsyncRadarClient.result = [
        FileChangeFrequency(file=FileIdentity("README.md"), change_count=15),
        FileChangeFrequency(file=FileIdentity("main.py"), change_count=7),
    ]
    FakeAsyncRadarClient.error = None
    return FakeAsyncRadarClient


def test_prints_ranked_files(fake_client) -> None:
    result = runner.invoke(cli.app, ["-u", "atilag", "-r", "radar", "-n", "2", "-t", "tok"])

    assert result.exit_code == 0, result.output
    assert "README.md" in result.output
    assert "15" in result.output
    client = fake_client.instances[0]
    assert client.token == "tok"
    assert client.base_url == "https://api.github.com"
    assert client.calls == [(2, "atilag", "radar")]


def test_defaults_and_environment(fake_client, monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api/v3")

    result = runner.invoke(cli.app, ["--github-user", "o", "--github-repo", "r"])

    assert result.exit_code == 0, result.output
    client = fake_client.instances[0]
    assert client.token == "env-token"
    assert client.base_url == "https://github.example.com/api/v3"
    assert client.max_concurrency == 8
    assert client.calls == [(5, "o", "r")]


def test_missing_token_fails(fake_client) -> None:
    result = runner.invoke(cli.app, ["-u", "o", "-r", "r"])

    assert result.exit_code == 1
    assert fake_client.instances == []


def test_provider_error_fails(fake_client) -> None:
    fake_client.error = NotFoundError("NOT_FOUND", "Not Found")

    result = runner.invoke(cli.app, ["-u", "o", "-r", "missing", "-t", "tok"])

    assert result.exit_code == 1


def test_num_rows_must_be_positive(fake_client) -> None:
    result = runner.invoke(cli.app, ["-u", "o", "-r", "r", "-t", "tok", "-n", "0"])

    assert result.exit_code != 0
    assert fake_client.instances == []


def test_version(fake_client) -> None:
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert "complexity-radar" in result.output


def test_repeated_runs_keep_one_log_handler(fake_client) -> None:
    args = ["-u", "atilag", "-r", "radar", "-t", "tok", "-v"]

    runner.invoke(cli.app, args)
    result = runner.invoke(cli.app, args)

    assert result.exit_code == 0, result.output
    assert len(get_logger().handlers) == 1
