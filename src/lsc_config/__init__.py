# src/lsc_config/__init__.py
"""
LSC config — motor de resolução de configuração em camadas.

Este pacote raiz define o namespace público da configuração do LDAP
Synchronization Connector: uma fonte primária (`lsc.properties`) é
carregada uma única vez por processo e recebe, em ordem determinística,
os fragmentos suplementares do diretório `lsc.d`.

Arquitetura em alto nível:
    - core.config        → codec, namespace, loader, views, persistência
    - core.logging_setup → logging da biblioteca

Limites explícitos:
    - Não valida schema de configuração
    - Não observa mudanças nos arquivos
    - Não sincroniza diretórios (apenas fornece a configuração)
"""

from .core.config import (
    ConfigError,
    Configuration,
    ConflictRecord,
    DirectorySettings,
    FileSystemSources,
    Namespace,
    PrefixView,
    get_dst_properties,
    get_src_properties,
)
from .core.logging_setup import setup_logging

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Configuration",
    "ConflictRecord",
    "DirectorySettings",
    "FileSystemSources",
    "Namespace",
    "PrefixView",
    "get_dst_properties",
    "get_src_properties",
    "setup_logging",
]
