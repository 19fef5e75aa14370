# src/lsc_config/core/config/properties.py
"""
Leitura e escrita do formato `.properties`.

Este módulo implementa a sintaxe convencional de arquivos de propriedades
utilizada pelas fontes do LSC (`lsc.properties` e fragmentos em `lsc.d`).

Sintaxe suportada:
    - `chave=valor`, `chave: valor` ou `chave valor`
    - linhas em branco e comentários (`#` ou `!`) são ignorados
    - continuação de linha com barra invertida final
    - escapes `\\t \\n \\r \\f \\uXXXX` e `\\<caractere>` literal
    - espaços em branco não escapados no início e no fim do valor são removidos
    - apenas `\\n`, `\\r` e `\\r\\n` terminam uma linha física

Decisões arquiteturais:
    - O parser NÃO divide valores em vírgulas: o valor é sempre uma string
    - Chaves duplicadas no mesmo arquivo: a última ocorrência vence
    - Chave vazia ou escape `\\u` malformado é erro de parse com linha

Limites explícitos:
    - Não realiza merge entre fontes
    - Não interpola variáveis
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .codec import decode
from .errors import ConfigParseError

_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _ends_with_continuation(line: str) -> bool:
    count = 0
    for ch in reversed(line):
        if ch != "\\":
            break
        count += 1
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Produz pares (número da linha inicial, linha lógica)."""
    physical = _LINE_BREAK.split(text)
    index = 0
    while index < len(physical):
        start = index + 1
        line = physical[index].lstrip(_WHITESPACE)
        index += 1

        if not line or line[0] in "#!":
            continue

        parts: List[str] = []
        while _ends_with_continuation(line) and index < len(physical):
            parts.append(line[:-1])
            line = physical[index].lstrip(_WHITESPACE)
            index += 1
        if _ends_with_continuation(line):
            line = line[:-1]
        parts.append(line)
        yield start, "".join(parts)


def _unescape(raw: str, *, source: Optional[str], line: int) -> str:
    out: List[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue

        if i + 1 >= len(raw):
            i += 1
            continue

        nxt = raw[i + 1]
        if nxt == "u":
            digits = raw[i + 2:i + 6]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise ConfigParseError(
                    f"Escape unicode malformado: \\u{digits}", source=source, line=line
                )
            out.append(chr(int(digits, 16)))
            i += 6
            continue

        out.append(_SIMPLE_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _rstrip_raw(raw: str) -> str:
    """Remove espaços finais não escapados, preservando `\\ ` e afins."""
    end = len(raw)
    while end and raw[end - 1] in _WHITESPACE and not _ends_with_continuation(raw[:end - 1]):
        end -= 1
    return raw[:end]


def _split_entry(entry: str) -> Tuple[str, str]:
    """Separa uma linha lógica em (chave bruta, valor bruto)."""
    i = 0
    while i < len(entry):
        ch = entry[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1

    key = entry[:i]
    rest = entry[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def parse_properties(text: str, *, source: Optional[str] = None) -> Dict[str, str]:
    """
    Faz o parse de um texto `.properties` em um dicionário ordenado.

    Args:
        text: conteúdo do arquivo já decodificado.
        source: identificador da fonte (usado nas mensagens de erro).

    Returns:
        Dict[str, str]: chaves na ordem da primeira ocorrência.

    Raises:
        ConfigParseError: chave vazia ou escape malformado.
    """
    result: Dict[str, str] = {}
    for line_no, entry in _logical_lines(text):
        raw_key, raw_value = _split_entry(entry)
        key = _unescape(raw_key, source=source, line=line_no)
        if not key:
            raise ConfigParseError("Entrada sem chave", source=source, line=line_no)
        result[key] = _unescape(_rstrip_raw(raw_value), source=source, line=line_no)
    return result


def _escape(text: str, *, is_key: bool) -> str:
    out: List[str] = []
    for pos, ch in enumerate(text):
        if ch == "\\":
            out.append("\\\\")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\f":
            out.append("\\f")
        elif ch == " " and (is_key or pos == 0 or pos == len(text) - 1):
            out.append("\\ ")
        elif is_key and ch in "=:#!":
            out.append("\\" + ch)
        elif not is_key and pos == 0 and ch in "#!":
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)


def dump_properties(
    entries: Mapping[str, object],
    *,
    header: Optional[Iterable[str]] = None,
) -> str:
    """
    Serializa `entries` no formato `.properties`.

    Valores multivalorados são gravados unidos por vírgula (ver `codec.decode`).
    A ordem de iteração de `entries` é preservada.
    """
    lines: List[str] = []
    for comment in header or ():
        lines.append(f"# {comment}")
    for key, raw in entries.items():
        value = decode(raw) or ""
        lines.append(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}")
    return "\n".join(lines) + "\n"


__all__ = ["parse_properties", "dump_properties"]
