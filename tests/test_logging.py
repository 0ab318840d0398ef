import json
import logging

import pytest

from restful.errors import EncodingError
from restful.log_config import JSONFormatter
from restful.log_config import configure_logging
from restful.log_config import console_handler
from restful.renderers.php_object import ObjectRenderer


def test_parser_registration_logging(parser_registry, json_parser, caplog):
    caplog.set_level(logging.DEBUG)
    parser_registry.register_parser("application/json", json_parser)
    assert "Registered parser for 'application/json'" in caplog.text

    caplog.clear()
    parser_registry.register_parser("application/json", json_parser)
    assert "Replaced parser for 'application/json'" in caplog.text

    caplog.clear()
    parser_registry.get_parser("text/csv")
    assert "No parser registered for 'text/csv'" in caplog.text


def test_encoding_failure_logged(caplog):
    caplog.set_level(logging.ERROR)
    with pytest.raises(EncodingError):
        ObjectRenderer.render({"s": {1}})
    assert "PHP serialization failed" in caplog.text


def test_configure_logging_formatters():
    configure_logging(json_logging=True)
    assert isinstance(console_handler.formatter, JSONFormatter)
    record = logging.LogRecord(
        "restful", logging.INFO, __file__, 1, "hi %s", ("x",), None
    )
    payload = json.loads(console_handler.formatter.format(record))
    assert payload["message"] == "hi x"
    assert payload["level"] == "INFO"

    configure_logging(json_logging=False)
    assert not isinstance(console_handler.formatter, JSONFormatter)
