import json
import logging

from arithmos.logging import JsonFormatter, configure_logging


def test_json_formatter_outputs_structured_record():
    record = logging.LogRecord("arithmos.test", logging.INFO, __file__, 1, "value %s", ("שלום",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {"level": "INFO", "logger": "arithmos.test", "message": "value שלום"}


def test_configure_logging_sets_level_and_formatter():
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

        configure_logging("nonsense", json_format=False)
        assert root.level == logging.INFO
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
