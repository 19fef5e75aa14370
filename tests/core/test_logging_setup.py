# tests/core/test_logging_setup.py
"""
Testes da configuração de logging da biblioteca.

Os testes asseguram que:
- apenas o logger `lsc_config` é configurado (o logger raiz não é tocado)
- o formato JSON produz um objeto por linha com campos canônicos
- conflitos de merge levam chave e fontes como campos estruturados
- o arquivo rotativo é criado quando solicitado
"""

import json
import logging

import pytest

from lsc_config.core.config.namespace import Namespace
from lsc_config.core.logging_setup import ROOT_LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _last_json_line(log_file, logger):
    for handler in logger.handlers:
        handler.flush()
    return json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])


def test_setup_configures_library_logger_only(restore_logger):
    root_handlers = list(logging.getLogger().handlers)
    logger = setup_logging("debug")
    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logging.getLogger().handlers == root_handlers


def test_json_output_and_log_file(tmp_path, restore_logger):
    log_file = tmp_path / "logs" / "lsc.log"
    setup_logging("INFO", json_output=True, log_file=log_file)

    get_logger("lsc_config.core.config.loader").warning("Property %s overridden", "uid.maxlength")

    payload = _last_json_line(log_file, restore_logger)
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "lsc_config.core.config.loader"
    assert payload["message"] == "Property uid.maxlength overridden"
    assert "time" in payload
    assert "config_key" not in payload


def test_merge_conflict_carries_key_and_sources(tmp_path, restore_logger):
    log_file = tmp_path / "lsc.log"
    setup_logging("WARNING", json_output=True, log_file=log_file)

    ns = Namespace({"uid.maxlength": "8"}, source="lsc.properties")
    ns.merge({"uid.maxlength": "12"}, source="lsc.d/10-uid.properties")

    payload = _last_json_line(log_file, restore_logger)
    assert payload["config_key"] == "uid.maxlength"
    assert payload["config_source"] == "lsc.d/10-uid.properties"
    assert payload["previous_source"] == "lsc.properties"
