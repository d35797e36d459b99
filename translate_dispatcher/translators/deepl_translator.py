"""DeepL 翻译器

使用 DeepL API 实现的高质量翻译器，需要 API 密钥。
"""

from typing import Any

from .base_translator import BaseTranslator
from ..core.models import ProviderId, TranslationResult
from ..web.request import HttpResponse

FREE_API_URL = "https://api-free.deepl.com/v2/translate"
PRO_API_URL = "https://api.deepl.com/v2/translate"


class DeepLTranslator(BaseTranslator):
    """DeepL 翻译器实现

    设置项：
        deeplAuthKey: DeepL API 密钥（必需）
        deeplPlan: 'free' 使用 api-free 域名，其他值使用付费版域名
    """

    provider = ProviderId.DEEPL
    auth_statuses = frozenset({403})

    @property
    def api_url(self) -> str:
        plan = str(self.settings.get_setting('deeplPlan', 'free')).lower()
        default = FREE_API_URL if plan in ('free', 'deeplfree') else PRO_API_URL
        return self._api_url('deeplApiUrl', default)

    async def _send_request(self, text: str, source_lang: str, target_lang: str) -> HttpResponse:
        # DeepL 自动检测源语言，source_lang 不参与请求
        data = {
            'auth_key': self.settings.get_setting('deeplAuthKey', ''),
            'text': text,
            'target_lang': target_lang,
        }
        return await self.request.post(self.api_url, data=data)

    def _parse_response(self, data: Any, text: str, source_lang: str) -> TranslationResult:
        translation = data['translations'][0]
        return TranslationResult(
            result_text=translation['text'],
            source_language=translation['detected_source_language'].lower(),
            percentage=1.0,
        )

    def is_available(self) -> bool:
        """检查翻译器是否可用"""
        return bool(self.settings.get_setting('deeplAuthKey'))
