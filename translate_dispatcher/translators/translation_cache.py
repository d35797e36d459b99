"""翻译缓存

会话级缓存：只在当前会话内有效，不做持久化，也没有自己的淘汰策略。
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, NamedTuple, Optional

from ..core.models import TranslationResult

logger = logging.getLogger(__name__)


class CacheKey(NamedTuple):
    """缓存键

    以元组整体作为键，单词中出现分隔符也不会产生冲突。
    """
    source_lang: str
    target_lang: str
    provider: str
    word: str

    def __str__(self) -> str:
        # 仅用于日志显示
        return f"{self.source_lang}-{self.target_lang}-{self.provider}-{self.word}"


class SessionStore(ABC):
    """会话存储接口（键值存储，生命周期由宿主管理）"""

    @abstractmethod
    async def get(self, key: Hashable) -> Optional[Any]:
        pass

    @abstractmethod
    async def set(self, key: Hashable, value: Any):
        pass

    @abstractmethod
    async def clear(self):
        pass


class InMemorySessionStore(SessionStore):
    """进程内存中的会话存储，进程结束即会话结束"""

    def __init__(self):
        self._data: Dict[Hashable, Any] = {}

    async def get(self, key: Hashable) -> Optional[Any]:
        return self._data.get(key)

    async def set(self, key: Hashable, value: Any):
        self._data[key] = value

    async def clear(self):
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


class TranslationCache:
    """翻译缓存管理器"""

    def __init__(self, store: Optional[SessionStore] = None):
        """初始化缓存

        Args:
            store: 会话存储，None 则使用内存存储
        """
        self.store = store if store is not None else InMemorySessionStore()

    @staticmethod
    def make_key(word: str, source_lang: str, target_lang: str, provider: str) -> CacheKey:
        """生成缓存键

        Args:
            word: 原文（已去除首尾空白）
            source_lang: 源语言
            target_lang: 目标语言
            provider: 翻译服务标识
        """
        return CacheKey(source_lang, target_lang, provider, word)

    async def get(self, key: CacheKey) -> Optional[TranslationResult]:
        """获取缓存的翻译，不存在返回 None"""
        return await self.store.get(key)

    async def set(self, key: CacheKey, result: TranslationResult):
        """设置翻译缓存

        失败结果不会写入，相同请求下次仍会访问网络。
        """
        if result.is_error:
            return
        await self.store.set(key, result)
        logger.debug(f"写入翻译缓存: {key}")

    async def clear(self):
        """清空缓存"""
        await self.store.clear()
        logger.info("翻译缓存已清空")
