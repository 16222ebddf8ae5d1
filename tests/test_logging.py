import logging

import pytest

from optionflow import logging_config


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    path = tmp_path / "logs"
    monkeypatch.setenv(logging_config.LOG_DIR_ENV, str(path))
    yield path
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    audit = logging.getLogger(logging_config.AUDIT_LOGGER)
    for handler in list(audit.handlers):
        audit.removeHandler(handler)
        handler.close()


def test_session_id_generation():
    session_id = logging_config.generate_session_id()
    assert session_id.startswith("sess_")
    assert len(session_id) > 20


def test_session_id_round_trip():
    logging_config.set_session_id("sess_test")
    assert logging_config.get_session_id() == "sess_test"


def test_logging_setup_creates_log_files(log_dir):
    logging_config.setup_logging(console_level="WARNING", file_level="DEBUG")
    logging.getLogger("optionflow.test").info("Test message")

    assert (log_dir / "optionflow.log").exists()
    assert (log_dir / "optionflow-error.log").exists()
    assert "Test message" in (log_dir / "optionflow.log").read_text()


def test_session_id_is_stamped_on_records(log_dir):
    logging_config.setup_logging(console_level="WARNING", json_format=True)
    logging_config.set_session_id("sess_json")
    logging.getLogger("optionflow.test").warning("stamped")

    lines = (log_dir / "optionflow.log").read_text().splitlines()
    assert any('"session_id": "sess_json"' in line and "stamped" in line for line in lines)


def test_audit_log_stays_out_of_app_log(log_dir):
    logging_config.setup_logging(console_level="WARNING")
    logging_config.audit_log("Flow analyzed", symbol="SPY", spreads=3)

    audit_text = (log_dir / "optionflow-audit.log").read_text()
    assert "Flow analyzed | symbol=SPY | spreads=3" in audit_text
    assert "Flow analyzed" not in (log_dir / "optionflow.log").read_text()
    assert logging.getLogger(logging_config.AUDIT_LOGGER).propagate is False


def test_colored_formatter_leaves_record_untouched():
    formatter = logging_config.ColoredFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
    assert "\033[31m" in formatter.format(record)
    assert record.levelname == "ERROR"
