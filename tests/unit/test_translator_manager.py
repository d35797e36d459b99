"""
翻译管理器（分发与缓存）测试
"""

import pytest

from translate_dispatcher.core.models import ProviderId, TranslationResult
from translate_dispatcher.translators.base_translator import BaseTranslator
from translate_dispatcher.translators.deepl_translator import DeepLTranslator
from translate_dispatcher.translators.google_translator import GoogleTranslator
from translate_dispatcher.translators.translation_cache import CacheKey, InMemorySessionStore, SessionStore
from translate_dispatcher.translators.translator_manager import TranslatorManager, TRANSLATOR_CLASSES
from translate_dispatcher.translators.youdao_translator import YoudaoTranslator


class FakeTranslator(BaseTranslator):
    """返回固定结果并记录调用的翻译器"""

    provider = ProviderId.GOOGLE

    def __init__(self, result: TranslationResult):
        super().__init__()
        self.result = result
        self.calls = []

    async def translate(self, text, source_lang="auto", target_lang="en"):
        self.calls.append((text, source_lang, target_lang))
        return self.result

    async def _send_request(self, text, source_lang, target_lang):
        raise NotImplementedError

    def _parse_response(self, data, text, source_lang):
        raise NotImplementedError


class BrokenStore(SessionStore):
    """读写都失败的会话存储"""

    async def get(self, key):
        raise RuntimeError("store unavailable")

    async def set(self, key, value):
        raise RuntimeError("store unavailable")

    async def clear(self):
        raise RuntimeError("store unavailable")


OK_RESULT = TranslationResult(result_text="bonjour", source_language="en", percentage=0.9)
ERROR_RESULT = TranslationResult.failure("network down")


def make_manager(settings_factory, result=OK_RESULT, store=None, **settings):
    fake = FakeTranslator(result)
    manager = TranslatorManager(
        settings_factory(**settings),
        store=store,
        translators={provider: fake for provider in ProviderId},
    )
    return manager, fake


class TestTranslate:
    """TranslatorManager.translate 测试"""

    @pytest.mark.parametrize("word", ["", "   ", "\n\t "])
    async def test_empty_input_is_noop(self, settings_factory, word):
        manager, fake = make_manager(settings_factory)

        result = await manager.translate(word, "auto", "fr")

        assert result == TranslationResult(result_text="", source_language="en", percentage=0)
        assert not result.is_error
        assert fake.calls == []
        assert len(manager.cache.store) == 0

    async def test_input_is_trimmed(self, settings_factory):
        manager, fake = make_manager(settings_factory)

        await manager.translate("  hello \n", "auto", "fr")

        assert fake.calls == [("hello", "auto", "fr")]

    async def test_second_call_hits_cache(self, settings_factory):
        manager, fake = make_manager(settings_factory)

        first = await manager.translate("hello", "auto", "fr")
        second = await manager.translate("hello", "auto", "fr")

        assert first == second == OK_RESULT
        assert len(fake.calls) == 1

    async def test_errors_are_not_cached(self, settings_factory):
        manager, fake = make_manager(settings_factory, result=ERROR_RESULT)

        await manager.translate("hello", "auto", "fr")
        result = await manager.translate("hello", "auto", "fr")

        assert result.is_error
        assert len(fake.calls) == 2
        assert len(manager.cache.store) == 0

    async def test_key_includes_languages_and_provider(self, settings_factory):
        manager, fake = make_manager(settings_factory)

        await manager.translate("hello", "auto", "fr")
        await manager.translate("hello", "auto", "de")
        await manager.translate("hello", "en", "fr")
        manager.settings.set_setting('translationApi', 'deepl')
        await manager.translate("hello", "auto", "fr")

        assert len(fake.calls) == 4

    async def test_words_with_delimiter_do_not_collide(self, settings_factory):
        manager, fake = make_manager(settings_factory)

        await manager.translate("en-google-x", "auto", "fr")
        await manager.translate("x", "auto-fr", "google-en")

        assert len(fake.calls) == 2

    async def test_store_failures_do_not_fail_the_call(self, settings_factory):
        manager, fake = make_manager(settings_factory, store=BrokenStore())

        result = await manager.translate("hello", "auto", "fr")

        assert result == OK_RESULT
        assert len(fake.calls) == 1


class TestProviderSelection:
    """翻译服务选择测试"""

    @pytest.mark.parametrize("value, expected", [
        ("google", GoogleTranslator),
        ("deepl", DeepLTranslator),
        ("youdao", YoudaoTranslator),
        ("bing", GoogleTranslator),
        (None, GoogleTranslator),
    ])
    def test_configured_provider(self, settings_factory, value, expected):
        manager = TranslatorManager(settings_factory(translationApi=value))

        assert isinstance(manager.get_translator(manager.provider), expected)

    def test_translators_are_reused(self, settings_factory):
        manager = TranslatorManager(settings_factory())

        assert manager.get_translator(ProviderId.DEEPL) is manager.get_translator(ProviderId.DEEPL)

    def test_every_provider_has_a_translator(self):
        assert set(TRANSLATOR_CLASSES) == set(ProviderId)

    def test_available_translators(self, settings_factory):
        manager = TranslatorManager(settings_factory(deeplAuthKey='k'))

        assert manager.get_available_translators() == ['google', 'deepl']


class TestEndToEnd:
    """经过本地假服务的完整流程"""

    async def test_google_scenario(self, provider, settings_factory):
        provider.respond({
            'sentences': [{'trans': 'bonjour'}],
            'src': 'en',
            'ld_result': {'srclangs_confidences': [0.9]},
        })
        store = InMemorySessionStore()
        manager = TranslatorManager(
            settings_factory(translationApi='google', googleApiUrl=provider.url),
            store=store,
        )

        result = await manager.translate("hello", "auto", "fr")
        cached = await manager.translate("hello", "auto", "fr")

        assert result == TranslationResult(
            result_text="bonjour", source_language="en", percentage=0.9
        )
        assert cached == result
        assert len(provider.requests) == 1

        key = CacheKey("auto", "fr", "google", "hello")
        assert str(key) == "auto-fr-google-hello"
        assert await store.get(key) == result

    async def test_failing_provider_retries_network(self, provider, settings_factory):
        provider.respond({}, status=503)
        manager = TranslatorManager(settings_factory(googleApiUrl=provider.url))

        first = await manager.translate("hello", "auto", "fr")
        second = await manager.translate("hello", "auto", "fr")

        assert first.is_error and second.is_error
        assert len(provider.requests) == 2

    async def test_clear_cache(self, provider, settings_factory):
        provider.respond({
            'sentences': [{'trans': 'bonjour'}],
            'src': 'en',
            'ld_result': {'srclangs_confidences': [1.0]},
        })
        manager = TranslatorManager(settings_factory(googleApiUrl=provider.url))

        await manager.translate("hello", "auto", "fr")
        await manager.clear_cache()
        await manager.translate("hello", "auto", "fr")

        assert len(provider.requests) == 2

    async def test_undecodable_body_returns_error_result(self, provider, settings_factory):
        provider.respond(status=200, body=b'{"sentences": "\xff\xfe"}')
        manager = TranslatorManager(settings_factory(googleApiUrl=provider.url))

        result = await manager.translate("hello", "auto", "fr")

        assert result.is_error
        assert len(manager.cache.store) == 0
