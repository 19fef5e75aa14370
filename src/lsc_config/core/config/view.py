# src/lsc_config/core/config/view.py
"""
Projeção por prefixo do namespace de configuração.

Uma `PrefixView` expõe apenas as chaves que começam exatamente com
`"<prefix>."`, apresentando-as sem o prefixo. Escritas pela view
re-adicionam o prefixo antes de delegar ao namespace subjacente.

Decisões arquiteturais:
    - A view não possui dados próprios, apenas referência ao namespace
    - Toda leitura é feita sobre o estado atual do namespace
    - A view não implementa políticas de fallback (ver `connections`)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .codec import decode, split_words

if TYPE_CHECKING:  # pragma: no cover
    from .namespace import Namespace


class PrefixView:
    """Projeção leitura/escrita de um `Namespace` restrita a um prefixo."""

    def __init__(self, namespace: "Namespace", prefix: str):
        if not isinstance(prefix, str) or not prefix.strip(". "):
            raise ValueError("prefix must be a non-empty string")
        self._namespace = namespace
        self._prefix = prefix.rstrip(".")

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def namespace(self) -> "Namespace":
        return self._namespace

    def qualify(self, key: str) -> str:
        return f"{self._prefix}.{key}"

    def keys(self) -> List[str]:
        head = self._prefix + "."
        return [
            key[len(head):]
            for key in self._namespace.keys()
            if key.startswith(head) and len(key) > len(head)
        ]

    def __len__(self) -> int:
        return len(self.keys())

    def __iter__(self):
        return iter(self.keys())

    def is_empty(self) -> bool:
        return len(self) == 0

    def contains(self, key: str) -> bool:
        return self._namespace.contains(self.qualify(key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def get(self, key: str) -> Any:
        return self._namespace.get(self.qualify(key))

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._namespace.get_string(self.qualify(key), default)

    def get_int(self, key: str, default: int) -> int:
        return self._namespace.get_int(self.qualify(key), default)

    def get_list(self, key: str) -> List[str]:
        return split_words(self.get_string(key))

    def set(self, key: str, value: Any, *, source: Optional[str] = None) -> None:
        self._namespace.set(self.qualify(key), value, source=source)

    def subset(self, prefix: str) -> "PrefixView":
        return PrefixView(self._namespace, self.qualify(prefix.rstrip(".")))

    def to_dict(self) -> Dict[str, str]:
        """Chaves sem prefixo → valor decodificado (string)."""
        with self._namespace.lock:
            return {key: decode(self.get(key)) for key in self.keys()}

    def __repr__(self) -> str:
        return f"PrefixView(prefix={self._prefix!r}, keys={len(self)})"


__all__ = ["PrefixView"]
