# tests/core/config/test_persister.py
"""
Testes da persistência de alterações (Persister / set_properties).

Os testes asseguram que:
- chaves são qualificadas com o prefixo quando fornecido
- o snapshot completo é gravado no local da fonte primária
- a gravação em disco é relida sem perda (vírgulas incluídas)
- falhas de gravação são reportadas como `PersistError`, sem retry
"""

from pathlib import Path

import pytest

from lsc_config.core.config.configuration import Configuration
from lsc_config.core.config.errors import ConfigTypeMismatchError, PersistError
from lsc_config.core.config.namespace import Namespace
from lsc_config.core.config.persister import Persister, qualify
from lsc_config.core.config.sources import FileSystemSources
from tests.core.config._helpers import FailingTarget, InMemorySources


def test_qualify():
    assert qualify("src", "url") == "src.url"
    assert qualify(None, "url") == "url"


def test_write_with_prefix_updates_namespace_and_persists():
    sources = InMemorySources({"lsc.properties": "src.url=old\nuid.maxlength=8\n"})
    cfg = Configuration(sources)

    cfg.set_properties("src", {"url": "jdbc:new", "username": "sa"})

    assert cfg.get_string("src.url") == "jdbc:new"
    assert cfg.subset("src").to_dict() == {"url": "jdbc:new", "username": "sa"}
    assert sources.persisted["lsc.properties"] == {
        "src.url": "jdbc:new",
        "uid.maxlength": "8",
        "src.username": "sa",
    }


def test_write_without_prefix():
    sources = InMemorySources({"lsc.properties": "a=1\n"})
    cfg = Configuration(sources)
    cfg.set_properties(None, {"b": "2"})
    assert sources.persisted["lsc.properties"] == {"a": "1", "b": "2"}


def test_persisted_file_is_reloaded(write_layout, primary_properties, override_properties):
    """
    Verifica que a configuração persistida em disco é relida sem perda.

    O snapshot mesclado (incluindo overrides suplementares) é gravado na
    fonte primária; DNs com vírgulas sobrevivem à releitura.
    """
    root = write_layout(primary_properties, {"override.properties": override_properties})
    cfg = Configuration(FileSystemSources(cwd=root))
    cfg.set_properties("dst", {"base": "ou=People,dc=example,dc=com"})

    primary = root / "lsc.properties"
    assert not primary.with_suffix(".properties.tmp").exists()

    reloaded = Configuration(FileSystemSources(cwd=root / "elsewhere"))
    reloaded.seed(primary, supplementary_dir="absent.d")
    assert reloaded.get_string("dst.base") == "ou=People,dc=example,dc=com"
    assert reloaded.get_int("uid.maxlength", 0) == 12
    assert reloaded.get_string("ldap.username") == "cn=Directory Manager"


def test_persist_failure_is_reported_without_retry():
    ns = Namespace({"a": "1"})
    target = FailingTarget()
    persister = Persister(ns, target, "lsc.properties")

    with pytest.raises(PersistError) as excinfo:
        persister.write("src", {"url": "x"})

    assert target.calls == 1
    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert ns.get_string("src.url") == "x"


def test_invalid_change_is_rejected_before_any_update():
    sources = InMemorySources({"lsc.properties": "a=1\n"})
    cfg = Configuration(sources)
    with pytest.raises(ConfigTypeMismatchError):
        cfg.set_properties(None, {"b": "2", "c": 3})
    assert not cfg.contains("b")
    assert sources.persisted == {}


def test_filesystem_persist_writes_properties(tmp_path: Path):
    target = tmp_path / "conf" / "lsc.properties"
    FileSystemSources().persist(str(target), {"a key": "v", "list": ["x", "y"]})
    assert target.read_text(encoding="utf-8") == "a\\ key=v\nlist=x,y\n"
