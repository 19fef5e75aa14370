# src/lsc_config/core/config/configuration.py
"""
Configuração de processo do LSC.

Este módulo define a `Configuration`, objeto explícito (injetado por
referência nos chamadores) que substitui o singleton global preguiçoso:
ele carrega o namespace mesclado exatamente uma vez, no primeiro acesso,
e o publica de forma atômica para todos os leitores seguintes.

Máquina de estados:
    - Unloaded → Loaded, uma única vez, no primeiro acessor chamado
      (ou explicitamente via `load()` / `seed()`)
    - Chamadas enquanto Loaded não recarregam nada
    - `reset()` devolve o objeto ao estado Unloaded (hook de teste)

Decisões arquiteturais:
    - A carga ocorre sob exclusão mútua (`threading.Lock`, double-checked):
      acessos concorrentes não fazem parse duas vezes nem observam um
      namespace parcialmente mesclado
    - Falha de inicialização é fatal e persistente: o erro é registrado
      (ERROR) e re-levantado em todo acesso até `reset()`
    - Após a carga, leituras e escritas são serializadas pelo lock do
      próprio `Namespace`

Limites explícitos:
    - Não observa mudanças nos arquivos
    - Não gerencia múltiplas configurações independentes
"""

from __future__ import annotations

import os
import threading
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..logging_setup import get_logger
from .codec import decode
from .errors import ConfigError
from .hashing import compute_config_hash
from .loader import LoadResult, load_from, load_namespace
from .namespace import ConflictRecord, Namespace
from .persister import Persister
from .sources import FileSystemSources
from .view import PrefixView

log = get_logger(__name__)

PROPERTIES_FILENAME = "lsc.properties"
PROPERTIES_DIRECTORY = "lsc.d"


class Configuration:
    """
    Configuração mesclada do processo, carregada uma única vez.

    Args:
        sources: colaborador de I/O (default: `FileSystemSources()`).
        primary_name: nome bem conhecido da fonte primária.
        supplementary_dir: nome bem conhecido do diretório suplementar.
    """

    def __init__(
        self,
        sources: Optional[Any] = None,
        *,
        primary_name: str = PROPERTIES_FILENAME,
        supplementary_dir: str = PROPERTIES_DIRECTORY,
    ):
        self.sources = sources if sources is not None else FileSystemSources()
        self.primary_name = primary_name
        self.supplementary_dir = supplementary_dir
        self._init_lock = threading.Lock()
        self._result: Optional[LoadResult] = None
        self._failure: Optional[ConfigError] = None

    # -----------------------------
    # Lifecycle
    # -----------------------------
    @property
    def is_loaded(self) -> bool:
        return self._result is not None

    def load(self) -> LoadResult:
        result = self._result
        if result is not None:
            return result

        with self._init_lock:
            if self._result is not None:
                return self._result
            if self._failure is not None:
                raise self._failure
            try:
                result = load_namespace(
                    self.sources,
                    primary_name=self.primary_name,
                    supplementary_dir=self.supplementary_dir,
                )
            except ConfigError as exc:
                log.error(
                    "Unable to load '%s': %s",
                    self.primary_name,
                    exc,
                    extra={"config_source": self.primary_name},
                )
                self._failure = exc
                raise
            self._result = result
            return result

    def seed(
        self,
        location: Union[str, "os.PathLike[str]"],
        *,
        supplementary_dir: Optional[str] = None,
    ) -> LoadResult:
        """Carrega agora a partir de uma fonte primária explícita, substituindo o estado atual."""
        with self._init_lock:
            result = load_from(
                self.sources,
                os.fspath(location),
                supplementary_dir=supplementary_dir or self.supplementary_dir,
            )
            self._result = result
            self._failure = None
            return result

    def reset(self) -> None:
        with self._init_lock:
            self._result = None
            self._failure = None

    @property
    def namespace(self) -> Namespace:
        return self.load().namespace

    @property
    def location(self) -> str:
        return self.load().location

    @property
    def supplementary(self) -> List[str]:
        return list(self.load().supplementary)

    @property
    def conflicts(self) -> Tuple[ConflictRecord, ...]:
        return self.namespace.conflicts

    # -----------------------------
    # Accessors
    # -----------------------------
    def get(self, key: str) -> Any:
        return self.namespace.get(key)

    def contains(self, key: str) -> bool:
        return self.namespace.contains(key)

    def keys(self) -> List[str]:
        return self.namespace.keys()

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.namespace.get_string(key, default)

    def get_int(self, key: str, default: int) -> int:
        return self.namespace.get_int(key, default)

    def get_list(self, key: str) -> List[str]:
        return self.namespace.get_list(key)

    def subset(self, prefix: str) -> PrefixView:
        return self.namespace.subset(prefix)

    def fingerprint(self) -> str:
        """Hash SHA-256 do namespace decodificado."""
        namespace = self.namespace
        with namespace.lock:
            decoded = {key: decode(value) for key, value in namespace.items()}
        return compute_config_hash(decoded)

    # -----------------------------
    # Persistence
    # -----------------------------
    def set_properties(self, prefix: Optional[str], changes: Mapping[str, Any]) -> None:
        result = self.load()
        Persister(result.namespace, self.sources, result.location).write(prefix, changes)

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "unloaded"
        return f"Configuration(primary_name={self.primary_name!r}, state={state})"


__all__ = ["Configuration", "PROPERTIES_FILENAME", "PROPERTIES_DIRECTORY"]
