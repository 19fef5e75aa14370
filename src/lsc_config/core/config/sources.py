# src/lsc_config/core/config/sources.py
"""Resolução de fontes de configuração em filesystem.

O `FileSystemSources` é o colaborador de I/O do loader e do persister:

- `resolve_primary(name)`: primeiro `<raiz>/<name>` existente entre as raízes
  de busca, senão `<cwd>/<name>`; nenhum → `SourceNotFoundError`
- `list_supplementary(dirname)`: arquivos regulares do primeiro diretório
  `<raiz>/<dirname>` existente (ou `<cwd>/<dirname>`); ausência → lista vazia
- `read(identifier)`: bytes da fonte
- `persist(identifier, snapshot)`: gravação atômica (`.tmp` + rename)

Identificadores de fonte são caminhos absolutos em forma de string.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..logging_setup import get_logger
from .errors import SourceNotFoundError
from .properties import dump_properties

log = get_logger(__name__)

PathLike = Union[str, Path]


class FileSystemSources:
    """Colaborador de I/O sobre o filesystem local."""

    def __init__(self, search_paths: Iterable[PathLike] = (), *, cwd: Optional[PathLike] = None):
        self.search_paths: List[Path] = [Path(p) for p in search_paths]
        self.cwd = Path(cwd) if cwd is not None else None

    def _roots(self) -> List[Path]:
        return [*self.search_paths, self.cwd if self.cwd is not None else Path(os.getcwd())]

    def resolve_primary(self, name: str) -> str:
        for root in self._roots():
            candidate = root / name
            if candidate.is_file():
                return str(candidate.resolve())
        raise SourceNotFoundError(
            f"Unable to find '{name}' file (searched: {', '.join(str(r) for r in self._roots())})"
        )

    def list_supplementary(self, dirname: str) -> List[str]:
        for root in self._roots():
            directory = root / dirname
            if directory.is_dir():
                return [str(p.absolute()) for p in directory.iterdir() if p.is_file()]
        log.debug("No supplementary directory '%s' found", dirname)
        return []

    def read(self, identifier: str) -> bytes:
        return Path(identifier).read_bytes()

    def persist(self, identifier: str, snapshot: Mapping[str, Any]) -> None:
        path = Path(identifier)
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        temp_path.write_text(dump_properties(snapshot), encoding="utf-8")
        temp_path.replace(path)
        log.info("Saved configuration: %s", path)


__all__ = ["FileSystemSources"]
