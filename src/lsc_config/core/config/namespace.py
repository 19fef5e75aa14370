# src/lsc_config/core/config/namespace.py
"""
Namespace canônico de configuração do LSC.

Este módulo define o `Namespace`, o armazenamento chave-valor ordenado e
mutável que contém a configuração mesclada, e o `ConflictRecord`, o registro
de auditoria produzido quando uma fonte suplementar redefine uma chave.

Responsabilidades do módulo:
    - Armazenar valores brutos (string ou sequência de strings) por chave
    - Expor acessores tipados com fallback para default
    - Rastrear a fonte de origem de cada chave
    - Registrar conflitos de merge sem bloquear o merge

Decisões arquiteturais:
    - Cada chave mapeia exatamente para um valor (sobrescrita, nunca acumulação)
    - A última fonte aplicada vence
    - `get_int` é o único caminho leniente: falha de parse retorna o default
    - Um único `RLock` protege leituras e escritas

Invariantes:
    - Chaves são case-sensitive
    - A enumeração segue a ordem de inserção (estável dentro de uma carga)
    - Conflitos são mantidos na ordem em que foram emitidos

Limites explícitos:
    - Não lê nem grava arquivos
    - Não valida schema de configuração
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from ..logging_setup import get_logger
from .codec import decode, is_raw_value, split_words
from .errors import ConfigTypeMismatchError
from .view import PrefixView

log = get_logger(__name__)

_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class ConflictRecord:
    """
    Registro de auditoria de uma redefinição de chave durante o merge.

    Campos:
    - key: chave redefinida
    - incoming: novo valor (o que prevalece)
    - existing: valor anterior (o que foi sobrescrito)
    - source: identificador da fonte que redefiniu a chave
    - previous_source: identificador da fonte que havia definido o valor anterior
    """

    key: str
    incoming: Any
    existing: Any
    source: str
    previous_source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "incoming": self.incoming,
            "existing": self.existing,
            "source": self.source,
            "previous_source": self.previous_source,
        }


def _copy_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


class Namespace:
    """
    Armazenamento chave-valor ordenado da configuração mesclada.

    Valores brutos são strings ou sequências não vazias de strings. Os
    acessores `get_string`/`get_int`/`get_list` aplicam o codec escalar
    (`codec.decode`) sobre o valor bruto retornado por `get`.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None, *, source: Optional[str] = None):
        self._values: Dict[str, Any] = {}
        self._sources: Dict[str, Optional[str]] = {}
        self._conflicts: List[ConflictRecord] = []
        self._lock = threading.RLock()
        for key, value in (values or {}).items():
            self.set(key, value, source=source)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # -----------------------------
    # Raw access
    # -----------------------------
    def get(self, key: str) -> Any:
        with self._lock:
            return _copy_value(self._values.get(key))

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._values

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._values)

    def items(self) -> List[Tuple[str, Any]]:
        with self._lock:
            return [(k, _copy_value(v)) for k, v in self._values.items()]

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def snapshot(self) -> Dict[str, Any]:
        """Cópia bruta do namespace, na ordem de inserção."""
        return dict(self.items())

    def set(self, key: str, value: Any, *, source: Optional[str] = None) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError("key must be a non-empty string")
        if not is_raw_value(value):
            raise ConfigTypeMismatchError(
                f"Valor para '{key}' deve ser str ou sequência não vazia de str, "
                f"recebido: {type(value).__name__}"
            )
        with self._lock:
            self._values[key] = _copy_value(value)
            self._sources[key] = source

    def remove(self, key: str) -> bool:
        with self._lock:
            self._sources.pop(key, None)
            return self._values.pop(key, None) is not None

    def source_of(self, key: str) -> Optional[str]:
        with self._lock:
            return self._sources.get(key)

    # -----------------------------
    # Typed access
    # -----------------------------
    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        raw = self.get(key)
        if raw is None:
            return default
        return decode(raw)

    def get_int(self, key: str, default: int) -> int:
        value = self.get_string(key)
        if value is None:
            return default
        text = value.strip()
        if not _INT_PATTERN.fullmatch(text):
            return default
        number = int(text)
        if not _INT_MIN <= number <= _INT_MAX:
            return default
        return number

    def get_list(self, key: str) -> List[str]:
        return split_words(self.get_string(key))

    def subset(self, prefix: str) -> PrefixView:
        return PrefixView(self, prefix)

    # -----------------------------
    # Merge
    # -----------------------------
    @property
    def conflicts(self) -> Tuple[ConflictRecord, ...]:
        with self._lock:
            return tuple(self._conflicts)

    def merge(self, values: Mapping[str, Any], *, source: str) -> List[ConflictRecord]:
        """
        Aplica `values` sobre o namespace com precedência da fonte aplicada.

        Para cada chave já presente, um `ConflictRecord` é registrado e um
        WARNING é emitido antes da sobrescrita. O merge nunca é bloqueado
        por conflitos.

        Args:
            values: mapa chave → valor bruto da fonte suplementar.
            source: identificador da fonte suplementar.

        Returns:
            List[ConflictRecord]: conflitos emitidos por esta aplicação.
        """
        for key, value in values.items():
            if not is_raw_value(value):
                raise ConfigTypeMismatchError(
                    f"Valor para '{key}' em {source} deve ser str ou sequência não vazia de str"
                )

        emitted: List[ConflictRecord] = []
        with self._lock:
            for key, value in values.items():
                if key in self._values:
                    record = ConflictRecord(
                        key=key,
                        incoming=_copy_value(value),
                        existing=_copy_value(self._values[key]),
                        source=source,
                        previous_source=self._sources.get(key),
                    )
                    log.warning(
                        "Property %s (%s) in file %s override main value (%s)",
                        key,
                        decode(record.incoming),
                        source,
                        decode(record.existing),
                        extra={
                            "config_key": key,
                            "config_source": source,
                            "previous_source": record.previous_source,
                        },
                    )
                    self._conflicts.append(record)
                    emitted.append(record)
                self.set(key, value, source=source)
        return emitted

    def __repr__(self) -> str:
        return f"Namespace(keys={len(self)}, conflicts={len(self.conflicts)})"


__all__ = ["ConflictRecord", "Namespace"]
