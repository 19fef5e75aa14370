# src/lsc_config/core/config/__init__.py
"""
Camada de configuração do LSC.

Este pacote carrega uma fonte primária de propriedades, aplica fragmentos
suplementares encontrados em um diretório de configuração e expõe o
namespace mesclado resultante.

Responsabilidades do pacote:
    - Parse de fontes `.properties`, YAML e JSON
    - Merge determinístico com precedência da última fonte aplicada
    - Registro auditável de conflitos de merge
    - Projeções por prefixo e acessores tipados com default
    - Persistência explícita de alterações

Invariantes:
    - Cada chave mapeia para exatamente um valor
    - Fontes suplementares são aplicadas em ordem lexicográfica
    - Falhas de carga são fatais; conflitos apenas geram WARNING

Limites explícitos:
    - Não valida schema de configuração
    - Não observa mudanças nos arquivos
"""

from .codec import LIST_DELIMITER, decode, split_words
from .configuration import PROPERTIES_DIRECTORY, PROPERTIES_FILENAME, Configuration
from .connections import destination_view, get_dst_properties, get_src_properties, source_view
from .errors import (
    ConfigError,
    ConfigParseError,
    ConfigTypeMismatchError,
    InvalidConfigRootTypeError,
    PersistError,
    SourceNotFoundError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import LoadResult, load_namespace
from .namespace import ConflictRecord, Namespace
from .persister import Persister
from .settings import DirectorySettings
from .sources import FileSystemSources
from .view import PrefixView

__all__ = [
    "LIST_DELIMITER",
    "PROPERTIES_DIRECTORY",
    "PROPERTIES_FILENAME",
    "ConfigError",
    "ConfigParseError",
    "ConfigTypeMismatchError",
    "Configuration",
    "ConflictRecord",
    "DirectorySettings",
    "FileSystemSources",
    "InvalidConfigRootTypeError",
    "LoadResult",
    "Namespace",
    "PersistError",
    "Persister",
    "PrefixView",
    "SourceNotFoundError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "decode",
    "destination_view",
    "get_dst_properties",
    "get_src_properties",
    "load_namespace",
    "source_view",
    "split_words",
]
