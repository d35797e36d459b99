"""翻译管理器

按配置选择翻译服务，提供会话级翻译缓存。
每次调用只访问一个翻译服务，不做失败降级与重试。
"""

import logging
from typing import Dict, List, Optional, Type

from .base_translator import BaseTranslator
from .deepl_translator import DeepLTranslator
from .google_translator import GoogleTranslator
from .translation_cache import TranslationCache, SessionStore
from .youdao_translator import YoudaoTranslator
from ..core.config_loader import Settings, load_config
from ..core.models import ProviderId, TranslationResult
from ..web.request import Request

logger = logging.getLogger(__name__)

TRANSLATOR_CLASSES: Dict[ProviderId, Type[BaseTranslator]] = {
    ProviderId.GOOGLE: GoogleTranslator,
    ProviderId.DEEPL: DeepLTranslator,
    ProviderId.YOUDAO: YoudaoTranslator,
}


class TranslatorManager:
    """翻译管理器"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[SessionStore] = None,
        request: Optional[Request] = None,
        translators: Optional[Dict[ProviderId, BaseTranslator]] = None
    ):
        """初始化翻译管理器

        Args:
            settings: 设置接口
            store: 会话存储，None 则使用内存存储
            request: 共享的 HTTP 客户端（可选）
            translators: 预先构造的翻译器（可选，未提供的按需创建）
        """
        self.settings = settings or Settings()
        self.cache = TranslationCache(store)
        self.request = request
        self._translators: Dict[ProviderId, BaseTranslator] = dict(translators or {})

    @property
    def provider(self) -> ProviderId:
        """当前配置的翻译服务（每次读取配置）"""
        return ProviderId.parse(self.settings.get_setting('translationApi'))

    def get_translator(self, provider: ProviderId) -> BaseTranslator:
        """获取指定服务的翻译器（首次使用时创建）"""
        translator = self._translators.get(provider)
        if translator is None:
            translator = TRANSLATOR_CLASSES[provider](self.settings, self.request)
            self._translators[provider] = translator
        return translator

    async def translate(
        self,
        source_word: str,
        source_lang: str = "auto",
        target_lang: str = "en"
    ) -> TranslationResult:
        """翻译文本（带缓存）

        Args:
            source_word: 要翻译的单词或短语
            source_lang: 源语言代码（auto 表示自动检测）
            target_lang: 目标语言代码

        Returns:
            TranslationResult；空输入返回 TranslationResult.empty()
        """
        logger.debug(f"translate(): {source_word!r} {source_lang} -> {target_lang}")
        source_word = source_word.strip()
        if source_word == "":
            return TranslationResult.empty()

        provider = self.provider
        key = self.cache.make_key(source_word, source_lang, target_lang, provider.value)

        # 检查缓存
        try:
            cached = await self.cache.get(key)
        except Exception as e:
            logger.warning(f"读取翻译缓存失败: {key}: {e}")
            cached = None
        if cached is not None:
            logger.debug(f"使用缓存翻译: {key}")
            return cached

        result = await self.get_translator(provider).translate(source_word, source_lang, target_lang)

        # 保存到缓存（失败不影响返回结果）
        try:
            await self.cache.set(key, result)
        except Exception as e:
            logger.warning(f"写入翻译缓存失败: {key}: {e}")

        return result

    def get_available_translators(self) -> List[str]:
        """获取可用翻译器列表（已配置所需密钥）"""
        return [
            provider.value for provider in ProviderId
            if self.get_translator(provider).is_available()
        ]

    async def clear_cache(self):
        """清空翻译缓存"""
        await self.cache.clear()


def create_default_manager(config_file: Optional[str] = None, store: Optional[SessionStore] = None) -> TranslatorManager:
    """创建默认的翻译管理器

    Args:
        config_file: 配置文件路径（None 使用默认查找顺序）
        store: 会话存储（None 使用内存存储）

    Returns:
        配置好的 TranslatorManager 实例
    """
    settings = Settings(load_config(config_file))
    logger.info(f"翻译管理器初始化完成，当前服务: {ProviderId.parse(settings.get_setting('translationApi')).value}")
    return TranslatorManager(settings, store)
