# src/lsc_config/core/config/loader.py
"""
Loader canônico de configuração do LSC.

Este módulo é responsável por construir o namespace mesclado a partir de:
    - uma fonte primária (obrigatória, ex.: `lsc.properties`)
    - zero ou mais fontes suplementares (opcionais, ex.: arquivos em `lsc.d`)

Política de resolução:
    1. A fonte primária é resolvida pelo colaborador de I/O e carregada em um
       namespace novo; ausência ou parse inválido é fatal
    2. As fontes suplementares são listadas e ordenadas lexicograficamente
       pelo nome do arquivo (reprodutível entre execuções)
    3. Cada fonte suplementar é aplicada sobre o namespace: cada chave já
       existente gera um `ConflictRecord` (WARNING) e é sobrescrita
    4. Parse inválido de qualquer fonte suplementar é fatal para a carga inteira

Formatos suportados:
    - properties (.properties; também qualquer extensão para a fonte primária)
    - YAML (.yaml, .yml), achatado em chaves pontuadas
    - JSON (.json), achatado em chaves pontuadas

Invariantes:
    - A última fonte aplicada vence
    - A mesma entrada sempre produz o mesmo namespace
    - Nenhum namespace parcial é retornado em caso de erro

Limites explícitos:
    - Não mantém estado global (ver `configuration.Configuration`)
    - Não valida schema nem semântica de domínio
    - Não persiste configuração
"""

from __future__ import annotations

import json
from datetime import date
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Dict, Iterable, List, Protocol

import yaml  # PyYAML

from ..logging_setup import get_logger
from .errors import (
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .namespace import Namespace
from .properties import parse_properties

log = get_logger(__name__)

PROPERTIES_SUFFIXES = frozenset({".properties"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})
SUPPORTED_SUFFIXES = PROPERTIES_SUFFIXES | YAML_SUFFIXES | JSON_SUFFIXES


class SourceProvider(Protocol):
    """Contrato mínimo do colaborador de I/O usado pelo loader."""

    def resolve_primary(self, name: str) -> str: ...

    def list_supplementary(self, dirname: str) -> List[str]: ...

    def read(self, identifier: str) -> bytes: ...


@dataclass
class LoadResult:
    """Resultado de uma carga completa."""

    namespace: Namespace
    location: str
    supplementary: List[str] = field(default_factory=list)


def _suffix(identifier: str) -> str:
    return PurePath(identifier).suffix.lower()


def _scalar(value: Any, *, key: str, source: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    raise ConfigParseError(
        f"Valor não escalar para a chave '{key}': {type(value).__name__}", source=source
    )


def _flatten(data: Dict[Any, Any], *, source: str, prefix: str = "") -> Dict[str, Any]:
    """Achata um mapa aninhado em chaves pontuadas."""
    out: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = f"{prefix}{raw_key}"
        if isinstance(value, dict):
            out.update(_flatten(value, source=source, prefix=key + "."))
        elif isinstance(value, list):
            items = [_scalar(item, key=key, source=source) for item in value]
            out[key] = items if items else ""
        else:
            out[key] = _scalar(value, key=key, source=source)
    return out


def parse_source(identifier: str, data: bytes, *, strict_format: bool = True) -> Dict[str, Any]:
    """
    Faz o parse dos bytes de uma fonte em um mapa chave → valor bruto.

    Args:
        identifier: identificador da fonte (a extensão define o formato).
        data: conteúdo bruto.
        strict_format: quando False, extensões desconhecidas são lidas
            como `.properties` (usado para a fonte primária).

    Raises:
        UnsupportedConfigFormatError: extensão desconhecida com `strict_format`.
        InvalidConfigRootTypeError: raiz YAML/JSON que não é um mapa.
        ConfigParseError: bytes não UTF-8 ou sintaxe inválida.
    """
    suffix = _suffix(identifier)
    if suffix not in SUPPORTED_SUFFIXES and strict_format:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {suffix or '<none>'}", source=identifier)

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"Conteúdo não é UTF-8 válido: {exc}", source=identifier) from exc

    if suffix in YAML_SUFFIXES:
        try:
            loaded = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigParseError(f"YAML inválido: {exc}", source=identifier) from exc
    elif suffix in JSON_SUFFIXES:
        try:
            loaded = json.loads(text) if text.strip() else None
        except json.JSONDecodeError as exc:
            raise ConfigParseError(f"JSON inválido: {exc}", source=identifier, line=exc.lineno) from exc
    else:
        return parse_properties(text, source=identifier)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser um mapa, recebido: {type(loaded).__name__}", source=identifier
        )
    return _flatten(loaded, source=identifier)


def _read(sources: SourceProvider, identifier: str) -> bytes:
    try:
        return sources.read(identifier)
    except OSError as exc:
        raise ConfigParseError(f"Fonte ilegível: {exc}", source=identifier) from exc


def supplementary_order(identifiers: Iterable[str]) -> List[str]:
    """
    Filtra e ordena as fontes suplementares candidatas.

    Apenas extensões suportadas são mantidas. A ordem é lexicográfica pelo
    nome do arquivo e, em empate, pelo identificador completo; quanto mais
    tarde uma fonte aparece, maior a sua precedência.
    """
    kept = []
    for identifier in identifiers:
        if _suffix(identifier) in SUPPORTED_SUFFIXES:
            kept.append(identifier)
        else:
            log.debug("Ignoring supplementary candidate with unsupported format: %s", identifier)
    return sorted(kept, key=lambda ident: (PurePath(ident).name, ident))


def load_primary(sources: SourceProvider, identifier: str) -> Namespace:
    log.debug("Loading configuration url : %s", identifier)
    values = parse_source(identifier, _read(sources, identifier), strict_format=False)
    return Namespace(values, source=identifier)


def add_supplementary(namespace: Namespace, sources: SourceProvider, identifier: str) -> None:
    log.debug("Adding configuration : %s", identifier)
    values = parse_source(identifier, _read(sources, identifier))
    namespace.merge(values, source=identifier)


def load_namespace(
    sources: SourceProvider,
    *,
    primary_name: str,
    supplementary_dir: str,
) -> LoadResult:
    """
    Carrega a fonte primária e aplica as fontes suplementares.

    Args:
        sources: colaborador de I/O.
        primary_name: nome bem conhecido da fonte primária.
        supplementary_dir: nome bem conhecido do diretório suplementar.

    Returns:
        LoadResult: namespace mesclado, local da fonte primária e a lista
        ordenada de fontes suplementares aplicadas.

    Raises:
        SourceNotFoundError: fonte primária não encontrada.
        ConfigParseError: parse inválido de qualquer fonte.
    """
    location = sources.resolve_primary(primary_name)
    return load_from(sources, location, supplementary_dir=supplementary_dir)


def load_from(
    sources: SourceProvider,
    location: str,
    *,
    supplementary_dir: str,
) -> LoadResult:
    """Mesma política de `load_namespace`, com a fonte primária já resolvida."""
    namespace = load_primary(sources, location)
    applied: List[str] = []
    for identifier in supplementary_order(sources.list_supplementary(supplementary_dir)):
        if identifier == location:
            continue
        add_supplementary(namespace, sources, identifier)
        applied.append(identifier)

    log.debug(
        "Configuration loaded: %d keys, %d supplementary sources, %d conflicts, fingerprint=%s",
        len(namespace),
        len(applied),
        len(namespace.conflicts),
        compute_config_hash(namespace.snapshot()),
    )
    return LoadResult(namespace=namespace, location=location, supplementary=applied)


__all__ = [
    "LoadResult",
    "SourceProvider",
    "add_supplementary",
    "load_from",
    "load_namespace",
    "load_primary",
    "parse_source",
    "supplementary_order",
]
