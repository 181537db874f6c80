"""Tests for the purefa-prtg-sensor command line."""
import io
import json
import logging
from unittest.mock import patch

import pytest

import purefa_sensor_cli
from purefa_sensor.errors import ArrayConnectionError


def _main(argv):
    stream = io.StringIO()
    exit_code = purefa_sensor_cli.main(argv, stream=stream)
    return exit_code, json.loads(stream.getvalue())


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch, tmp_path):
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


def test_missing_token():
    with patch("purefa_sensor.sensor.get_session") as get_session:
        exit_code, document = _main(["--address", "fa01"])

    get_session.assert_not_called()
    assert exit_code == 0
    assert document["prtg"]["error"] == 1
    assert "api_token" in document["prtg"]["message"]


def test_missing_address():
    exit_code, document = _main(["--api-token", "t-1"])

    assert exit_code == 0
    assert "address" in document["prtg"]["message"]


def test_unknown_option_is_reported_as_json():
    exit_code, document = _main(["--api-token", "t-1", "--address", "fa01", "--bogus"])

    assert exit_code == 0
    assert document["prtg"]["error"] == 1
    assert "--bogus" in document["prtg"]["message"]


def test_bad_tls_mode_is_reported_as_json():
    exit_code, document = _main(["--tls-validation", "maybe"])

    assert exit_code == 0
    assert "Invalid arguments" in document["prtg"]["message"]


def test_connection_failure_exit_code_is_zero():
    error = ArrayConnectionError("Connection to fa01 failed: timed out")
    with patch("purefa_sensor.sensor.get_session", side_effect=error):
        exit_code, document = _main(["--api-token", "t-1", "--address", "fa01"])

    assert exit_code == 0
    assert document == {"prtg": {"error": 1, "message": "Connection to fa01 failed: timed out"}}


def test_success(array_session):
    with patch("purefa_sensor.sensor.get_session", return_value=array_session) as get_session:
        exit_code, document = _main(["--api-token", "t-1", "--address", "fa01",
                                     "--tls-validation", "none", "--parallel"])

    assert exit_code == 0
    config = get_session.call_args[0][0]
    assert config.tls_validation == "none"
    assert config.parallel is True
    assert len(document["prtg"]["result"]) == 12


def test_parser_defaults_leave_settings_unset():
    args = purefa_sensor_cli.parse_arguments([])

    assert args.parallel is None
    assert args.tls_validation is None
    assert args.timeout is None


def test_unusable_log_file_is_reported_as_json(monkeypatch, tmp_path):
    # basicConfig only opens the file when the root logger has no handlers yet
    monkeypatch.setattr(logging.root, "handlers", [])
    log_file = tmp_path / "missing-dir" / "sensor.log"

    with patch("purefa_sensor.sensor.get_session") as get_session:
        exit_code, document = _main(["--api-token", "t-1", "--address", "fa01",
                                     "--log-file", str(log_file)])

    get_session.assert_not_called()
    assert exit_code == 0
    assert document["prtg"]["error"] == 1
    assert document["prtg"]["message"].startswith(f"Cannot open log file {log_file}:")
