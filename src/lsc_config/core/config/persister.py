# src/lsc_config/core/config/persister.py
"""
Persistência de alterações de configuração.

O `Persister` aplica um conjunto de alterações (opcionalmente prefixadas)
através de `Namespace.set` e grava o snapshot completo do namespace no
local de onde a fonte primária foi carregada.

Decisões arquiteturais:
    - Alterações e gravação ocorrem sob o lock do namespace
    - Falha de gravação é reportada como `PersistError`, sem retry
    - Persistência é uma ação rara e explícita do usuário
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..logging_setup import get_logger
from .codec import is_raw_value
from .errors import ConfigTypeMismatchError, PersistError
from .namespace import Namespace

log = get_logger(__name__)


class PersistTarget(Protocol):
    def persist(self, identifier: str, snapshot: Mapping[str, Any]) -> None: ...


def qualify(prefix: Optional[str], key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


class Persister:
    """Grava alterações no namespace e o persiste no armazenamento de origem."""

    def __init__(self, namespace: Namespace, target: PersistTarget, location: str):
        self.namespace = namespace
        self.target = target
        self.location = location

    def write(self, prefix: Optional[str], changes: Mapping[str, Any]) -> None:
        """
        Aplica `changes` e persiste o namespace.

        Args:
            prefix: prefixo adicionado a cada chave (`<prefix>.<chave>`) ou None.
            changes: mapa chave → valor.

        Raises:
            ConfigTypeMismatchError: valor inválido em `changes`.
            PersistError: falha ao gravar no armazenamento.
        """
        for key, value in changes.items():
            if not is_raw_value(value):
                raise ConfigTypeMismatchError(
                    f"Valor para '{qualify(prefix, key)}' deve ser str ou sequência não vazia de str"
                )

        with self.namespace.lock:
            for key, value in changes.items():
                self.namespace.set(qualify(prefix, key), value, source=self.location)
            snapshot = self.namespace.snapshot()
            try:
                self.target.persist(self.location, snapshot)
            except OSError as exc:
                log.error(
                    "Unable to save configuration to %s: %s",
                    self.location,
                    exc,
                    extra={"config_source": self.location},
                )
                raise PersistError(f"Falha ao gravar configuração em {self.location}: {exc}") from exc


__all__ = ["Persister", "PersistTarget", "qualify"]
