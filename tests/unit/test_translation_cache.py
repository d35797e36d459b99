"""
翻译缓存测试
"""

from translate_dispatcher.core.models import TranslationResult
from translate_dispatcher.translators.translation_cache import (
    CacheKey, InMemorySessionStore, TranslationCache
)


class TestTranslationCache:
    """TranslationCache 测试"""

    async def test_set_and_get(self):
        cache = TranslationCache()
        key = cache.make_key("hello", "auto", "fr", "google")
        result = TranslationResult(result_text="bonjour", source_language="en", percentage=1.0)

        await cache.set(key, result)

        assert await cache.get(key) is result

    async def test_miss_returns_none(self):
        cache = TranslationCache()

        assert await cache.get(CacheKey("auto", "fr", "google", "hello")) is None

    async def test_error_results_are_skipped(self):
        store = InMemorySessionStore()
        cache = TranslationCache(store)
        key = cache.make_key("hello", "auto", "fr", "google")

        await cache.set(key, TranslationResult.failure("boom"))

        assert len(store) == 0
        assert await cache.get(key) is None

    async def test_clear(self):
        store = InMemorySessionStore()
        cache = TranslationCache(store)
        await cache.set(cache.make_key("a", "auto", "fr", "google"), TranslationResult(result_text="b"))

        await cache.clear()

        assert len(store) == 0


class TestCacheKey:
    """CacheKey 测试"""

    def test_field_order(self):
        key = TranslationCache.make_key("hello", "auto", "fr", "google")

        assert key == CacheKey(source_lang="auto", target_lang="fr", provider="google", word="hello")
        assert str(key) == "auto-fr-google-hello"

    def test_structured_keys_do_not_collide(self):
        a = CacheKey("auto", "fr", "google", "x-y")
        b = CacheKey("auto-fr", "google", "x", "y")

        assert str(a) == str(b)
        assert a != b
