# src/lsc_config/core/logging_setup.py
"""
Configuração de logging do LSC.

A biblioteca emite logs por módulo sob o logger `lsc_config` e nunca
configura o logger raiz. Aplicações que embarcam o LSC podem chamar
`setup_logging` para obter saída em console (texto ou JSON por linha)
e, opcionalmente, um arquivo rotativo.

Níveis utilizados:
    - DEBUG   → carregamento de fontes
    - WARNING → conflitos de merge (override de chave existente)
    - ERROR   → falhas fatais de inicialização
"""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER_NAME = "lsc_config"
CONTEXT_FIELDS = ("config_key", "config_source", "previous_source")


class _JsonFormatter(logging.Formatter):
    """Uma linha JSON por registro; campos de contexto só quando presentes."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def setup_logging(
    level: Union[int, str] = "INFO",
    *,
    json_output: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Configura handlers do logger `lsc_config` e o retorna."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    fmt = _JsonFormatter() if json_output else logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
