# tests/conftest.py
"""
Fixtures compartilhados para testes do LSC config.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdo de fontes primárias e suplementares semelhantes ao uso real
- um layout de configuração em disco (`lsc.properties` + `lsc.d/`)
- um colaborador de I/O em memória para testes sem filesystem

Decisões arquiteturais:
    - Conteúdos são fornecidos como strings para evitar acoplamento a arquivos
    - Escritas em disco usam exclusivamente `tmp_path`
    - Nenhuma fixture configura logging global

Invariantes:
    - Dados retornados são determinísticos e isolados
    - Nenhuma fixture carrega configuração implicitamente

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

from pathlib import Path
from typing import Callable, Dict, Optional

import pytest


@pytest.fixture
def primary_properties() -> str:
    """
    Fixture que fornece um `lsc.properties` semelhante ao uso real do projeto.

    O conteúdo cobre DNs com vírgulas, parâmetros de conexão da fonte (`src.*`),
    o prefixo legado de destino (`ldap.*`) e um limite numérico.

    Returns:
        str: conteúdo da fonte primária.
    """
    return """\
# LSC main configuration
dn.people=ou=People
dn.real_root = dc=example,dc=com
uid.maxlength=8

src.driver = org.hsqldb.jdbcDriver
src.url = jdbc:hsqldb:file:hsqldb/lsc
src.username = sa

! legacy destination prefix
ldap.url = ldap://localhost:33389/dc=lsc-project,dc=org
ldap.username = cn=Directory Manager
"""


@pytest.fixture
def override_properties() -> str:
    """Fragmento suplementar que redefine `uid.maxlength` e acrescenta uma chave."""
    return """\
uid.maxlength=12
objectclass.person=lscPerson
"""


@pytest.fixture
def write_layout(tmp_path: Path) -> Callable[..., Path]:
    """
    Fixture que materializa um layout de configuração em `tmp_path`.

    Uso:
        root = write_layout(primary, {"10-a.properties": "..."})

    Returns:
        Callable: função (primary, fragments=None) → diretório raiz.
    """

    def _write(primary: Optional[str], fragments: Optional[Dict[str, str]] = None) -> Path:
        if primary is not None:
            (tmp_path / "lsc.properties").write_text(primary, encoding="utf-8")
        if fragments is not None:
            directory = tmp_path / "lsc.d"
            directory.mkdir(exist_ok=True)
            for name, content in fragments.items():
                (directory / name).write_text(content, encoding="utf-8")
        return tmp_path

    return _write
