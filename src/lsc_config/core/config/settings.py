# src/lsc_config/core/config/settings.py
"""
Parâmetros bem conhecidos do diretório LDAP.

Este módulo resolve, a partir da configuração mesclada, os DNs, classes de
objeto e limites utilizados pelos conectores de sincronização, aplicando
os valores padrão históricos quando a chave não está definida.

Decisões arquiteturais:
    - Resolução explícita (`from_configuration`), nunca em tempo de import
    - O objeto resultante é imutável
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class DirectorySettings:
    """
    Parâmetros do diretório resolvidos com defaults.

    Campos:
    - dn_people: DN das pessoas (`dn.people`)
    - dn_ldap_schema: DN do schema LDAP (`dn.ldap_schema`)
    - dn_enhanced_schema: DN do schema estendido (também `dn.ldap_schema`)
    - dn_structures: DN das estruturas (`dn.structures`)
    - dn_accounts: DN das contas (`dn.accounts`)
    - objectclass_person: objectClass de pessoa (`objectclass.person`)
    - objectclass_employee: objectClass de empregado (`objectclass.employee`)
    - days_before_suppression: dias entre a marcação e a remoção de uma entrada
    - dn_real_root: DN base real (`dn.real_root`)
    - uid_max_length: tamanho máximo de identificador (`uid.maxlength`)
    """

    dn_people: str = "ou=People"
    dn_ldap_schema: str = "cn=Subschema"
    dn_enhanced_schema: str = "ou=Schema,ou=System"
    dn_structures: str = "ou=Structures"
    dn_accounts: str = "ou=Accounts"
    objectclass_person: str = "inetOrgPerson"
    objectclass_employee: str = "inetOrgPerson"
    days_before_suppression: int = 90
    dn_real_root: str = "dc=lsc-project,dc=org"
    uid_max_length: int = 8

    @classmethod
    def from_configuration(cls, config: Any) -> "DirectorySettings":
        """Resolve os parâmetros sobre qualquer objeto com `get_string`/`get_int`."""
        d = cls()
        return cls(
            dn_people=config.get_string("dn.people", d.dn_people),
            dn_ldap_schema=config.get_string("dn.ldap_schema", d.dn_ldap_schema),
            # mesma chave do schema LDAP, com default distinto
            dn_enhanced_schema=config.get_string("dn.ldap_schema", d.dn_enhanced_schema),
            dn_structures=config.get_string("dn.structures", d.dn_structures),
            dn_accounts=config.get_string("dn.accounts", d.dn_accounts),
            objectclass_person=config.get_string("objectclass.person", d.objectclass_person),
            objectclass_employee=config.get_string("objectclass.employee", d.objectclass_employee),
            days_before_suppression=config.get_int(
                "suppression.MARQUAGE_NOMBRE_DE_JOURS", d.days_before_suppression
            ),
            dn_real_root=config.get_string("dn.real_root", d.dn_real_root),
            uid_max_length=config.get_int("uid.maxlength", d.uid_max_length),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["DirectorySettings"]
