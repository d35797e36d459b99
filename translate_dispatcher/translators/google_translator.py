"""Google 翻译器

使用 Google Translate 免费 API（translate_a/single）实现的翻译器，无需配置。
一次请求同时获取译文（dt=t）与词典释义（dt=bd）。
"""

from typing import Any

from .base_translator import BaseTranslator
from ..core.models import ProviderId, TranslationResult
from ..web.request import HttpResponse

API_URL = "https://translate.googleapis.com/translate_a/single"


class GoogleTranslator(BaseTranslator):
    """Google 翻译器实现（使用免费 API）"""

    provider = ProviderId.GOOGLE
    unavailable_statuses = frozenset({429, 503})

    async def _send_request(self, text: str, source_lang: str, target_lang: str) -> HttpResponse:
        # dt 需要重复出现，使用键值对列表
        params = [
            ('client', 'gtx'),
            ('sl', source_lang),
            ('tl', target_lang),
            ('dt', 't'),
            ('dt', 'bd'),
            ('dj', '1'),
            ('q', text),
        ]
        return await self.request.get(self._api_url('googleApiUrl', API_URL), params=params)

    def _parse_response(self, data: Any, text: str, source_lang: str) -> TranslationResult:
        # 返回格式（dj=1）: {"sentences": [{"trans": ...}], "dict": [...], "src": "en",
        #                   "ld_result": {"srclangs_confidences": [0.9]}}
        result_text = "".join(sentence.get('trans', '') for sentence in data['sentences'])

        return TranslationResult(
            result_text=result_text,
            candidate_text=format_dictionary(data.get('dict') or []),
            source_language=data['src'],
            percentage=data['ld_result']['srclangs_confidences'][0],
        )


def format_dictionary(entries) -> str:
    """
    将词典释义格式化为候选文本

    每个词性一行: "<词性>: <词1>, <词2>"；词性为空时省略前缀。

    Args:
        entries: 响应中的 dict 列表

    Returns:
        候选文本（每行以换行结尾）
    """
    lines = []
    for entry in entries:
        pos = entry.get('pos', '')
        terms = entry.get('terms')
        prefix = f"{pos}: " if pos != "" else ""
        lines.append(f"{prefix}{', '.join(terms) if terms is not None else ''}\n")
    return "".join(lines)
