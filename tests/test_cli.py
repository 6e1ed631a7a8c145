import json
from pathlib import Path

import pytest
import requests
from click.testing import CliRunner

from chaosdump.cli import _shared
from chaosdump.cli import main as cli_main
from chaosdump.config import DEFAULT_INDEX_URL

from .utils import FakeSession, index_bytes, zip_bytes


@pytest.fixture
def routes() -> dict:
    """Index with three datasets; *broken* serves a non-ZIP body."""
    return {
        DEFAULT_INDEX_URL: index_bytes(
            {
                "Tesla": "https://x/tesla.zip",
                "Google": "https://x/google.zip",
                "Broken": "https://x/broken.zip",
            }
        ),
        "https://x/tesla.zip": zip_bytes({"tesla.com.txt": "a.tesla.com"}),
        "https://x/google.zip": zip_bytes({"google.com.txt": "a.google.com"}),
        "https://x/broken.zip": b"garbage",
    }


@pytest.fixture
def offline(monkeypatch, routes):
    """Route every session opened by the CLI to :class:`FakeSession`."""
    sessions: list[FakeSession] = []

    def fake_make_session(user_agent=None):
        s = FakeSession(routes)
        sessions.append(s)
        return s

    monkeypatch.setattr(_shared, "make_session", fake_make_session)
    return sessions


def test_download_without_selection_shows_help(tmp_path: Path, offline):
    result = CliRunner().invoke(cli_main, ["download"])
    assert result.exit_code == 0, result.output
    assert "--input-file" in result.output
    assert not (tmp_path / "AllChaosData").exists()
    assert offline == []


def test_download_selected_names(tmp_path: Path, offline):
    result = CliRunner().invoke(cli_main, ["download", "-n", "TESLA, google"])
    assert result.exit_code == 0, result.output

    base = tmp_path / "AllChaosData"
    assert sorted(p.name for p in base.iterdir()) == ["Google", "Tesla"]
    assert "Processing Tesla..." in result.output
    assert "2 dataset(s) processed" in result.output
    # traversal order is lexicographic: Google before Tesla
    assert (tmp_path / "everything.txt").read_text() == "a.google.com\na.tesla.com\n"


def test_download_all_survives_broken_entry(tmp_path: Path, offline):
    result = CliRunner().invoke(cli_main, ["download", "--all"])
    assert result.exit_code == 0, result.output
    assert "2 dataset(s) processed" in result.output
    assert "Broken" in result.output
    assert (tmp_path / "everything.txt").exists()


def test_download_from_input_file(tmp_path: Path, offline):
    names = tmp_path / "companies.txt"
    names.write_text("google\n\n")
    result = CliRunner().invoke(
        cli_main, ["download", "-i", str(names), "--output", "merged.txt"]
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "merged.txt").read_text() == "a.google.com\n"


def test_missing_input_file_is_fatal(tmp_path: Path, offline):
    result = CliRunner().invoke(cli_main, ["download", "-i", "absent.txt"])
    assert result.exit_code == 1
    assert "Failed to read input file" in result.output
    assert offline == []


def test_unreachable_index_is_fatal(tmp_path: Path, offline, routes):
    routes[DEFAULT_INDEX_URL] = requests.exceptions.ConnectionError("offline")
    result = CliRunner().invoke(cli_main, ["download", "--all"])
    assert result.exit_code == 1
    assert "error fetching JSON index" in result.output
    assert not (tmp_path / "everything.txt").exists()


def test_base_dir_not_creatable_is_fatal(tmp_path: Path, offline):
    (tmp_path / "blocker").write_text("a file, not a directory")
    result = CliRunner().invoke(
        cli_main, ["download", "--all", "--base-dir", "blocker/sub"]
    )
    assert result.exit_code == 1
    assert "Failed to create base directory" in result.output


def test_all_with_names_is_usage_error(offline):
    result = CliRunner().invoke(cli_main, ["download", "--all", "-n", "tesla"])
    assert result.exit_code == 2


def test_no_concat_skips_merge(tmp_path: Path, offline):
    result = CliRunner().invoke(cli_main, ["download", "-n", "tesla", "--no-concat"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "AllChaosData" / "Tesla" / "tesla.com.txt").exists()
    assert not (tmp_path / "everything.txt").exists()


def test_concat_command(tmp_path: Path):
    base = tmp_path / "AllChaosData" / "x"
    base.mkdir(parents=True)
    (base / "1.txt").write_text("one")
    result = CliRunner().invoke(cli_main, ["concat"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "everything.txt").read_text() == "one\n"


def test_list_command_filters(offline):
    result = CliRunner().invoke(cli_main, ["list", "-n", "tesla", "--urls"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Tesla\thttps://x/tesla.zip"


def test_config_file_sets_defaults(tmp_path: Path, offline):
    cfg = tmp_path / "custom.yaml"
    cfg.write_text("base_dir: dumps\noutput_file: all.txt\n")
    result = CliRunner().invoke(cli_main, ["-c", str(cfg), "download", "-n", "tesla"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "dumps" / "Tesla").is_dir()
    assert (tmp_path / "all.txt").read_text() == "a.tesla.com\n"


def test_failures_reach_text_mirror_and_rotating_log(tmp_path: Path, offline, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("CHAOSDUMP_LOG_DIR", str(log_dir))

    result = CliRunner().invoke(
        cli_main, ["--save-logfile", "log.txt", "download", "--all"]
    )
    assert result.exit_code == 0, result.output

    mirror = tmp_path / "log.txt"
    rotating = log_dir / "chaosdump.log"
    assert mirror.exists() and rotating.exists()
    assert "Failed to process Broken" in mirror.read_text()
    records = [json.loads(line) for line in rotating.read_text().splitlines()]
    assert any("Failed to process Broken" in r["event"] for r in records)
    assert all("level" in r and "timestamp" in r for r in records)


def test_session_closed_when_index_fetch_fails(offline, routes):
    routes[DEFAULT_INDEX_URL] = 500
    result = CliRunner().invoke(cli_main, ["download", "--all"])
    assert result.exit_code == 1
    assert len(offline) == 1 and offline[0].closed
