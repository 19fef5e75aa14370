# src/lsc_config/core/config/hashing.py
"""
Hashing canônico do namespace de configuração do LSC.

O hash gerado representa a **identidade** do namespace mesclado e é
utilizado para auditoria: duas cargas sobre as mesmas fontes produzem
o mesmo fingerprint, independentemente da ordem de inserção das chaves.

Política de hashing (v1):
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256

Limites explícitos:
    - Não carrega nem resolve configuração
    - Não persiste o hash
"""

import hashlib
import json
from typing import Any, Mapping


def compute_config_hash(config: Mapping[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico de um mapa de configuração.

    Args:
        config (Mapping[str, Any]): mapa chave-valor (ex.: snapshot do namespace).

    Returns:
        str: hash hexadecimal de 64 caracteres.

    Raises:
        TypeError: se o objeto fornecido não for um mapa.
    """

    if not isinstance(config, Mapping):
        raise TypeError(
            f"Config para hashing deve ser um mapa, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        dict(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
