"""翻译器模块

提供 Google、DeepL、有道三种翻译服务的适配器、会话缓存和分发管理器。
"""

from .base_translator import BaseTranslator
from .google_translator import GoogleTranslator
from .youdao_translator import YoudaoTranslator, build_signature
from .deepl_translator import DeepLTranslator
from .translation_cache import TranslationCache, CacheKey, SessionStore, InMemorySessionStore
from .translator_manager import TranslatorManager, create_default_manager

__all__ = [
    'BaseTranslator',
    'GoogleTranslator',
    'YoudaoTranslator',
    'DeepLTranslator',
    'build_signature',
    'TranslationCache',
    'CacheKey',
    'SessionStore',
    'InMemorySessionStore',
    'TranslatorManager',
    'create_default_manager',
]
