"""
核心模块
"""

from .config_loader import load_config, Settings
from .messages import get_localized_message
from .models import ProviderId, TranslationResult

__all__ = [
    'load_config',
    'Settings',
    'get_localized_message',
    'ProviderId',
    'TranslationResult',
]
