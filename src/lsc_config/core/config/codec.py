# src/lsc_config/core/config/codec.py
"""
Codec escalar de valores de configuração.

Um valor bruto armazenado no namespace é uma string ou uma sequência
ordenada de strings. Este módulo converte esse valor bruto na string
apresentada aos chamadores.

Política de decodificação (v1):
    - None (ausente)       → None
    - str                  → inalterada
    - sequência de str     → elementos unidos por `,`
    - qualquer outro valor → `ConfigTypeMismatchError`

Decisões arquiteturais:
    - Nenhum escape é aplicado: uma vírgula literal dentro de um elemento
      é indistinguível de um separador após a junção
    - A operação inversa nunca é reconstruída automaticamente; a string
      decodificada não é re-dividida em vírgulas (ex.: listas de DNs)

Limites explícitos:
    - Não faz parse de arquivos
    - Não realiza coerção numérica
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from .errors import ConfigTypeMismatchError

LIST_DELIMITER = ","

RawValue = Union[str, Sequence[str]]


def is_raw_value(value: Any) -> bool:
    """Indica se `value` é um valor bruto aceito pelo namespace."""
    if isinstance(value, str):
        return True
    if isinstance(value, (list, tuple)):
        return len(value) > 0 and all(isinstance(item, str) for item in value)
    return False


def decode(raw: Optional[Any]) -> Optional[str]:
    """
    Converte um valor bruto na sua representação em string.

    Args:
        raw: string, sequência ordenada de strings ou None.

    Returns:
        Optional[str]: string apresentada, ou None quando `raw` é None.

    Raises:
        ConfigTypeMismatchError: se `raw` não for string nem sequência
            de strings.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (list, tuple)) and all(isinstance(item, str) for item in raw):
        return LIST_DELIMITER.join(raw)
    raise ConfigTypeMismatchError(
        f"Valor de configuração deve ser str ou sequência de str, recebido: {type(raw).__name__}"
    )


def split_words(value: Optional[str]) -> List[str]:
    """Divide `value` em espaços em branco, com cada token em minúsculas."""
    if value is None:
        return []
    return [token.lower() for token in value.split()]


__all__ = ["LIST_DELIMITER", "RawValue", "decode", "is_raw_value", "split_words"]
