# tests/core/config/test_hashing.py
"""
Testes do hashing canônico do namespace (compute_config_hash).

Os testes asseguram que:
- o hash é determinístico e independente da ordem de inserção
- o hash corresponde ao SHA-256 do JSON canônico
- alterações de valor produzem hash diferente
"""

import hashlib
import json

import pytest

from lsc_config.core.config.hashing import compute_config_hash


def test_hash_is_deterministic():
    a = {"dn.people": "ou=People", "uid.maxlength": "8"}
    b = {"uid.maxlength": "8", "dn.people": "ou=People"}
    assert compute_config_hash(a) == compute_config_hash(b)


def test_hash_matches_sha256_of_canonical_json():
    cfg = {"b": ["x", "y"], "a": "é"}
    canonical = json.dumps(cfg, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    assert compute_config_hash(cfg) == hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def test_hash_changes_on_override():
    assert compute_config_hash({"uid.maxlength": "8"}) != compute_config_hash({"uid.maxlength": "12"})


def test_hash_rejects_non_mapping():
    with pytest.raises(TypeError):
        compute_config_hash(["not", "a", "mapping"])
