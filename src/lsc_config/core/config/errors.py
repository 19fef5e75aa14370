# src/lsc_config/core/config/errors.py
"""
Exceções canônicas da camada de configuração do LSC.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a resolução das fontes, o parse, o acesso tipado e a persistência da
configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Falhas de inicialização são fatais e nunca silenciadas
    - Mensagens de erro identificam a fonte ofensora

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Erros de parse sempre carregam o identificador da fonte quando conhecido

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs (responsabilidade de quem captura)
"""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do LSC.

    Esta hierarquia permite captura genérica de qualquer falha de
    configuração, mantendo distinção entre falhas de inicialização
    (fonte ausente, parse) e falhas de acesso ou persistência.
    """


class SourceNotFoundError(ConfigError):
    """
    Exceção levantada quando a fonte primária (`lsc.properties`) não é
    encontrada em nenhum dos locais de busca.

    Decisões arquiteturais:
        - A fonte primária é obrigatória
        - Não existe namespace padrão utilizável sem ela

    Limites explícitos:
        - Não tenta criar a fonte automaticamente
    """


class ConfigParseError(ConfigError):
    """
    Exceção levantada quando uma fonte (primária ou suplementar) não pode
    ser lida ou possui sintaxe inválida.

    A falha de parse de qualquer fonte aborta o carregamento inteiro:
    configuração parcial é considerada pior do que falhar cedo.

    Atributos:
        source: identificador da fonte ofensora (quando conhecido)
        line: número da linha (1-based) onde o erro foi detectado
    """

    def __init__(
        self,
        message: str,
        *,
        source: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        self.source = source
        self.line = line
        location = ""
        if source is not None:
            location = f" [{source}" + (f":{line}" if line is not None else "") + "]"
        super().__init__(f"{message}{location}")


class UnsupportedConfigFormatError(ConfigParseError):
    """
    Exceção levantada quando o formato de uma fonte não é suportado.

    Formatos suportados:
        - properties (.properties)
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigParseError):
    """
    Exceção levantada quando o conteúdo raiz de uma fonte estruturada
    (YAML/JSON) não é um mapa chave-valor.

    Invariantes:
        - Listas ou escalares no root são inválidos
    """


class ConfigTypeMismatchError(ConfigError, TypeError):
    """
    Exceção levantada quando um valor bruto armazenado não é nem uma
    string nem uma sequência ordenada de strings.

    Representa erro de programação ou corrupção de dados, não uma
    condição recuperável pelo usuário.
    """


class PersistError(ConfigError):
    """
    Exceção levantada quando a gravação do namespace no armazenamento
    de origem falha.

    Decisões arquiteturais:
        - A falha é reportada ao chamador
        - Nenhuma política automática de retry é aplicada
    """
