"""
Configuração do projeto Codeflix Catalog.

Módulos:
- settings: Variáveis de ambiente (.env) e configuração de logging
"""

from .settings import Settings, configure_logging, get_settings, load_environment

__all__ = ('Settings', 'configure_logging', 'get_settings', 'load_environment')
