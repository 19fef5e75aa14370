# src/lsc_config/core/config/connections.py
"""
Sub-namespaces de conexão (origem e destino).

Política de chamador sobre `PrefixView`:
    - origem  = subset("src")
    - destino = subset("dst"); se vazio, subset("ldap") (migração de prefixo legado)
"""

from __future__ import annotations

from typing import Any, Dict

from .view import PrefixView

SOURCE_PREFIX = "src"
DESTINATION_PREFIX = "dst"
LEGACY_DESTINATION_PREFIX = "ldap"


def source_view(config: Any) -> PrefixView:
    return config.subset(SOURCE_PREFIX)


def destination_view(config: Any) -> PrefixView:
    view = config.subset(DESTINATION_PREFIX)
    if view.is_empty():
        view = config.subset(LEGACY_DESTINATION_PREFIX)
    return view


def get_src_properties(config: Any) -> Dict[str, str]:
    """Parâmetros de conexão da fonte de dados."""
    return source_view(config).to_dict()


def get_dst_properties(config: Any) -> Dict[str, str]:
    """Parâmetros de conexão do destino (com fallback para `ldap`)."""
    return destination_view(config).to_dict()


__all__ = [
    "DESTINATION_PREFIX",
    "LEGACY_DESTINATION_PREFIX",
    "SOURCE_PREFIX",
    "destination_view",
    "get_dst_properties",
    "get_src_properties",
    "source_view",
]
