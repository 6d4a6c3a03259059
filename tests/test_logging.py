import io

from fastapi.testclient import TestClient
from loguru import logger

from chat_server.app import create_app
from chat_server.config import Settings
from chat_server.logging import configure_logging


def test_debug_lines_hidden_at_info_level():
    sink = io.StringIO()
    configure_logging("info", sink)

    logger.debug("quiet detail")
    logger.info("visible line")

    output = sink.getvalue()
    assert "quiet detail" not in output
    assert "visible line" in output


def test_debug_lines_shown_at_debug_level():
    sink = io.StringIO()
    configure_logging("debug", sink)

    logger.debug("quiet detail")

    assert "quiet detail" in sink.getvalue()


def test_create_app_applies_log_level(capsys):
    client = TestClient(create_app(Settings(_env_file=None, LOG_LEVEL="info")))

    client.post("/sendChat", json={"userMessage": "hello"})

    assert "Transforming message" not in capsys.readouterr().err
