from click.testing import CliRunner

from bbploom import cli
from bbploom.cli import main
from bbploom.errors import CommunicationFailure


def test_default_run_report():
    result = CliRunner().invoke(main, ["50", "--workers", "2", "--executor", "thread", "--verify"])
    assert result.exit_code == 0, result.output
    assert "workers: 2" in result.output
    assert "digits: 50" in result.output
    assert "terms: 60" in result.output
    assert "precision: 239 bits" in result.output
    assert "3.1415926535 8979323846 2643383279 5028841971 6939937510" in result.output
    assert "verified: 50 decimals" in result.output


def test_default_digit_count():
    result = CliRunner().invoke(main, ["--executor", "thread"])
    assert result.exit_code == 0, result.output
    assert "digits: 100" in result.output


def test_zero_digits_is_usage_error():
    result = CliRunner().invoke(main, ["0", "--executor", "thread"])
    assert result.exit_code != 0
    assert "digits must be >= 1" in result.output
    assert "terms:" not in result.output


def test_bad_worker_count():
    result = CliRunner().invoke(main, ["10", "--workers", "0"])
    assert result.exit_code != 0


def test_communication_failure_is_reported(monkeypatch):
    def lost(*args, **kwargs):
        raise CommunicationFailure("group aborted by rank 3")

    monkeypatch.setattr(cli, "run_local", lost)
    result = CliRunner().invoke(main, ["10", "--executor", "thread"])
    assert result.exit_code == 1
    assert "group aborted by rank 3" in result.output
    assert "terms:" not in result.output
