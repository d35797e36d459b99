"""Translate Dispatcher Plugin - 翻译请求分发插件"""

__version__ = "1.0.0"
__description__ = "翻译请求分发插件，支持 Google、DeepL 和有道翻译"

# 导出主要的类和函数
from .core import ProviderId, Settings, TranslationResult, load_config
from .translators import TranslatorManager, create_default_manager

__all__ = [
    # 核心模块
    'ProviderId',
    'Settings',
    'TranslationResult',
    'load_config',
    # 管理器
    'TranslatorManager',
    'create_default_manager',
]
