"""
Configurações do Codeflix Catalog.

Valores lidos de variáveis de ambiente (e de um arquivo .env, se
existir), com defaults para desenvolvimento local.

Variáveis:
- DEBUG: Modo debug (true/1/yes)
- LOG_LEVEL: Nível do logger raiz (default: INFO)
"""

from dataclasses import dataclass
from typing import Optional, Union
import logging.config
import os

from dotenv import load_dotenv


def load_environment(dotenv_path: Optional[Union[str, os.PathLike]] = None) -> bool:
    """
    Carrega variáveis de um arquivo .env para o ambiente.

    Variáveis já definidas no ambiente não são sobrescritas.

    Args:
        dotenv_path: Caminho do arquivo; None procura um .env a partir do projeto

    Returns:
        True se algum arquivo foi carregado
    """
    return load_dotenv(dotenv_path)


# Carregar variáveis de ambiente
load_environment()


# =============================================================================
# Configurações Gerais
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """Snapshot imutável das configurações lidas do ambiente."""

    debug: bool
    log_level: str


def get_settings() -> Settings:
    """Relê o ambiente e retorna as configurações atuais."""
    return Settings(
        debug=os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes'),
        log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    )


# =============================================================================
# Logging
# =============================================================================

def build_logging_config(log_level: str, debug: bool = False) -> dict:
    """
    Monta dicionário para logging.config.dictConfig.

    Args:
        log_level: Nível aplicado ao logger raiz
        debug: Usa formatter detalhado e DEBUG para src.core

    Returns:
        Configuração de logging
    """
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
                'style': '{',
            },
            'simple': {
                'format': '{levelname} {asctime} {module} {message}',
                'style': '{',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'verbose' if debug else 'simple',
            },
        },
        'root': {
            'handlers': ['console'],
            'level': log_level,
        },
        'loggers': {
            'src.core': {
                'handlers': ['console'],
                'level': 'DEBUG' if debug else log_level,
                'propagate': False,
            },
        },
    }


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Aplica a configuração de logging a partir do ambiente atual.

    Args:
        log_level: Sobrescreve LOG_LEVEL (opcional)
    """
    current = get_settings()
    level = log_level.upper() if log_level else current.log_level
    logging.config.dictConfig(build_logging_config(level, current.debug))
