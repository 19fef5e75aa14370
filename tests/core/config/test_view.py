# tests/core/config/test_view.py
"""
Testes da projeção por prefixo (PrefixView) e da política origem/destino.

Os testes asseguram que:
- apenas chaves com o prefixo pontuado exato são visíveis
- o prefixo é removido das chaves apresentadas
- escritas pela view re-adicionam o prefixo
- o destino recorre ao prefixo legado `ldap` quando `dst` está vazio
"""

import pytest

from lsc_config.core.config.connections import (
    destination_view,
    get_dst_properties,
    get_src_properties,
    source_view,
)
from lsc_config.core.config.namespace import Namespace
from lsc_config.core.config.view import PrefixView


@pytest.fixture
def namespace() -> Namespace:
    return Namespace(
        {
            "src.driver": "org.hsqldb.jdbcDriver",
            "src.port": "9001",
            "src": "bare key is not part of the view",
            "srcx.url": "not a src key",
            "ldap.url": "ldap://localhost:33389",
            "ldap.username": "cn=Directory Manager",
            "ldap.base.dn": ["dc=lsc-project", "dc=org"],
        }
    )


def test_subset_strips_exact_prefix(namespace):
    view = namespace.subset("src")
    assert isinstance(view, PrefixView)
    assert view.keys() == ["driver", "port"]
    assert view.get_string("driver") == "org.hsqldb.jdbcDriver"
    assert view.get_int("port", 0) == 9001
    assert view.get_int("missing", 3) == 3
    assert view.get_string("url") is None
    assert "driver" in view and "url" not in view


def test_subset_trailing_dot_is_tolerated(namespace):
    assert namespace.subset("src.").keys() == ["driver", "port"]


def test_subset_rejects_empty_prefix(namespace):
    with pytest.raises(ValueError):
        namespace.subset("")
    with pytest.raises(ValueError):
        namespace.subset(".")


def test_write_through_view_adds_prefix(namespace):
    view = namespace.subset("dst")
    assert view.is_empty()
    view.set("url", "ldap://remote")
    assert namespace.get_string("dst.url") == "ldap://remote"
    assert not view.is_empty()
    assert len(view) == 1


def test_nested_subset_and_to_dict(namespace):
    base = namespace.subset("ldap").subset("base")
    assert base.prefix == "ldap.base"
    assert base.to_dict() == {"dn": "dc=lsc-project,dc=org"}


def test_to_dict_decodes_values(namespace):
    assert namespace.subset("ldap").to_dict() == {
        "url": "ldap://localhost:33389",
        "username": "cn=Directory Manager",
        "base.dn": "dc=lsc-project,dc=org",
    }


def test_destination_falls_back_to_legacy_prefix(namespace):
    """
    Verifica a política de migração do destino.

    `dst` sem chaves → o conteúdo de `ldap` é retornado inalterado, com as
    chaves sem prefixo.
    """
    assert namespace.subset("dst").is_empty()
    assert destination_view(namespace).prefix == "ldap"
    assert get_dst_properties(namespace) == namespace.subset("ldap").to_dict()


def test_destination_prefers_dst_when_present(namespace):
    namespace.set("dst.url", "ldap://new")
    assert destination_view(namespace).prefix == "dst"
    assert get_dst_properties(namespace) == {"url": "ldap://new"}


def test_source_properties(namespace):
    assert source_view(namespace).prefix == "src"
    assert get_src_properties(namespace) == {"driver": "org.hsqldb.jdbcDriver", "port": "9001"}
