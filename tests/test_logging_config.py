import logging

import pytest

from metaphone_transform import encode
from metaphone_transform.utils import logging_config
from metaphone_transform.utils.observability import StructuredLoggerAdapter, get_logger


@pytest.fixture
def fresh_logging(monkeypatch):
    calls = []

    def fake_basic_config(**kwargs):
        calls.append(kwargs)

    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setattr(logging_config.logging, "basicConfig", fake_basic_config)
    monkeypatch.delenv(logging_config.LOG_LEVEL_ENV, raising=False)
    package_logger = logging.getLogger("metaphone_transform")
    previous_level = package_logger.level
    yield calls
    package_logger.setLevel(previous_level)


def test_configure_logging_defaults_to_info(fresh_logging):
    logging_config.configure_logging()

    assert fresh_logging[0]["level"] == logging.INFO
    assert "%(name)s" in fresh_logging[0]["format"]
    assert logging.getLogger("metaphone_transform").level == logging.INFO


def test_configure_logging_reads_environment(fresh_logging, monkeypatch):
    monkeypatch.setenv(logging_config.LOG_LEVEL_ENV, "debug")

    logging_config.configure_logging()

    assert fresh_logging[0]["level"] == logging.DEBUG


def test_configure_logging_runs_once_unless_forced(fresh_logging):
    logging_config.configure_logging("WARNING")
    logging_config.configure_logging("DEBUG")

    assert len(fresh_logging) == 1

    logging_config.configure_logging("DEBUG", force=True)

    assert len(fresh_logging) == 2
    assert fresh_logging[1]["level"] == logging.DEBUG
    assert fresh_logging[1]["force"] is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, logging.INFO),
        (logging.ERROR, logging.ERROR),
        ("15", 15),
        ("warning", logging.WARNING),
        (" Error ", logging.ERROR),
        ("bogus", logging.INFO),
        ("BASIC_FORMAT", logging.INFO),
    ],
)
def test_resolve_level(value, expected):
    assert logging_config._resolve_level(value) == expected


def test_structured_logger_renders_context(caplog):
    logger = get_logger("metaphone_transform.tests", component="encoder")
    caplog.set_level(logging.INFO, logger="metaphone_transform.tests")

    logger.info("Encoded batch", context={"words": 3})

    assert caplog.records[-1].getMessage() == 'Encoded batch | {"component": "encoder", "words": 3}'


def test_bind_merges_context():
    logger = get_logger("metaphone_transform.tests", a=1)

    bound = logger.bind(b=2)

    assert isinstance(bound, StructuredLoggerAdapter)
    assert bound.extra == {"a": 1, "b": 2}
    assert logger.extra == {"a": 1}


def test_encoder_logs_each_word_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="metaphone_transform.core.encoder")

    encode("Schmidt")

    messages = [record.getMessage() for record in caplog.records]
    assert 'Encoded word | {"code": "XMT", "word": "Schmidt"}' in messages


def test_encoder_is_quiet_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="metaphone_transform.core.encoder")

    encode("Schmidt")

    assert not [r for r in caplog.records if r.name == "metaphone_transform.core.encoder"]
