from pathlib import Path
import json

import pytest
from click.testing import CliRunner

from symcodec.cli import cli
from symcodec.config import EXIT_OPEN_FAILURE


@pytest.fixture()
def codebook(tmp_path: Path) -> Path:
    path = tmp_path / "codebook.csv"
    path.write_bytes(
        b"[\\n],1,0.2000000,0000000\n"
        b"[a],2,0.4000000,0000001\n"
        b"[b],2,0.4000000,0000010\n"
    )
    return path


def test_inspect_table(codebook: Path):
    result = CliRunner().invoke(cli, ["inspect", str(codebook)])
    assert result.exit_code == 0, result.output
    assert "Codeword" in result.output
    assert "0000010" in result.output
    assert "3 entries" in result.output


def test_inspect_json(codebook: Path):
    result = CliRunner().invoke(cli, ["inspect", str(codebook), "--format", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [e["symbol"] for e in data["entries"]] == ["\\n", "a", "b"]
    assert data["summary"]["codeword_width"] == 7


def test_inspect_csv(codebook: Path):
    result = CliRunner().invoke(cli, ["inspect", str(codebook), "--format", "csv"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0] == "rank,symbol,count,probability,codeword"
    assert len(lines) == 4


def test_inspect_missing(tmp_path: Path):
    result = CliRunner().invoke(cli, ["inspect", str(tmp_path / "missing.csv")])
    assert result.exit_code == EXIT_OPEN_FAILURE
