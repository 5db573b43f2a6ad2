import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from computadoras.core.logging import JsonLogFormatter, configure_logging
from computadoras.middlewares import request_id_ctx_var


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("computadoras.request", logging.INFO, __file__, 1, "request.completed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_json_with_request_id_and_extra():
    token = request_id_ctx_var.set("req-42")
    try:
        line = JsonLogFormatter().format(_record(extra_data={"status": 404, "path": "/computadoras/9"}))
    finally:
        request_id_ctx_var.reset(token)

    payload = json.loads(line)
    assert payload["message"] == "request.completed"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "computadoras.request"
    assert payload["request_id"] == "req-42"
    assert payload["status"] == 404
    assert payload["timestamp"].endswith("Z")


def test_formatter_includes_exception_text():
    try:
        raise RuntimeError("connection refused")
    except RuntimeError:
        record = _record(exc_info=sys.exc_info())

    payload = json.loads(JsonLogFormatter().format(record))
    assert "request_id" not in payload
    assert "connection refused" in payload["exception"]


def test_configure_logging_installs_json_handler_and_mutes_uvicorn_access():
    root = logging.getLogger()
    access = logging.getLogger("uvicorn.access")
    saved_handlers, saved_level, saved_disabled = root.handlers[:], root.level, access.disabled
    try:
        configure_logging("WARNING")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonLogFormatter)
        assert root.level == logging.WARNING
        assert access.disabled is True
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        access.disabled = saved_disabled
