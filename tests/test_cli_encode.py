from pathlib import Path
import json

import pytest
from click.testing import CliRunner

from symcodec.cli import cli
from symcodec.config import EXIT_CODEWORD_SPACE, EXIT_OPEN_FAILURE, EXIT_USAGE


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def workspace(tmp_path: Path):
    src = tmp_path / "input.txt"
    src.write_bytes("hello, wörld\r\nsecond\tline\n".encode("utf-8"))
    return {
        "input": src,
        "codebook": tmp_path / "codebook.csv",
        "encoded": tmp_path / "encoded.bin",
        "base": tmp_path,
    }


def _args(ws) -> list[str]:
    return ["encode", str(ws["input"]), str(ws["codebook"]), str(ws["encoded"])]


def test_encode_success(cli_runner: CliRunner, workspace):
    result = cli_runner.invoke(cli, _args(workspace))
    assert result.exit_code == 0, result.output
    assert workspace["codebook"].exists()
    assert workspace["encoded"].exists()
    assert "Encoding completed successfully" in result.output


def test_encode_wrong_argument_count(cli_runner: CliRunner, workspace):
    result = cli_runner.invoke(cli, ["encode", str(workspace["input"]), str(workspace["codebook"])])
    assert result.exit_code == EXIT_USAGE
    assert not workspace["codebook"].exists()


def test_encode_missing_input(cli_runner: CliRunner, workspace):
    missing = workspace["base"] / "missing.txt"
    result = cli_runner.invoke(
        cli, ["encode", str(missing), str(workspace["codebook"]), str(workspace["encoded"])]
    )
    assert result.exit_code == EXIT_OPEN_FAILURE
    assert "missing.txt" in result.output
    assert not workspace["codebook"].exists()


def test_encode_too_many_symbols(cli_runner: CliRunner, workspace):
    workspace["input"].write_bytes(bytes(range(128)) + "ñ".encode("utf-8"))
    result = cli_runner.invoke(cli, _args(workspace))
    assert result.exit_code == EXIT_CODEWORD_SPACE
    r2 = cli_runner.invoke(cli, _args(workspace) + ["--width", "8"])
    assert r2.exit_code == 0, r2.output


def test_encode_capacity_warning(cli_runner: CliRunner, workspace):
    result = cli_runner.invoke(cli, _args(workspace) + ["--capacity", "3"])
    assert result.exit_code == 0
    assert "Warning" in result.output
    assert "dropped" in result.output


def test_encode_invalid_width(cli_runner: CliRunner, workspace):
    result = cli_runner.invoke(cli, _args(workspace) + ["--width", "0"])
    assert result.exit_code == EXIT_USAGE


def test_encode_stats(cli_runner: CliRunner, workspace):
    stats = workspace["base"] / "stats" / "run.json"
    result = cli_runner.invoke(cli, _args(workspace) + ["--stats", str(stats)])
    assert result.exit_code == 0, result.output
    data = json.loads(stats.read_text(encoding="utf-8"))
    assert data["command"] == "encode"
    assert data["codeword_width"] == 7
    assert data["input_sha256"].startswith("sha256:")
    assert data["encoded_bytes"] == workspace["encoded"].stat().st_size


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
