"""有道翻译器

使用有道智云文本翻译 API（openapi.youdao.com，签名 v3）实现的翻译器，
需要应用 ID（appKey）与应用密钥（appSecret）。
"""

import base64
import hashlib
import logging
import time
from typing import Any, Optional, Tuple

from .base_translator import BaseTranslator
from ..core.models import ProviderId, TranslationResult
from ..web.exceptions import ApplicationError
from ..web.request import HttpResponse

logger = logging.getLogger(__name__)

API_URL = "https://openapi.youdao.com/api"
SIGN_TYPE = "v3"


def truncate_input(q: str) -> str:
    """
    v3 签名使用的截断文本

    长度不超过 20 时原样返回，否则为 前10个字符 + 长度 + 后10个字符。
    """
    size = len(q)
    if size <= 20:
        return q
    return f"{q[:10]}{size}{q[-10:]}"


def build_signature(app_key: str, q: str, salt: str, curtime: str, app_secret: str) -> str:
    """
    生成 v3 签名

    sign = sha256(appKey + truncate(q) + salt + curtime + appSecret)，十六进制小写。
    相同输入总是得到相同签名。

    Args:
        app_key: 应用 ID
        q: 待翻译文本
        salt: 随机串（毫秒时间戳）
        curtime: 秒级时间戳
        app_secret: 应用密钥
    """
    sign_str = f"{app_key}{truncate_input(q)}{salt}{curtime}{app_secret}"
    try:
        digest = hashlib.new('sha256')
    except ValueError:
        # 运行环境不提供 SHA-256 时的退化编码，不安全
        logger.warning("SHA-256 不可用，使用不安全的 base64 签名")
        return base64.b64encode(sign_str.encode('utf-8')).decode('ascii')
    digest.update(sign_str.encode('utf-8'))
    return digest.hexdigest()


class YoudaoTranslator(BaseTranslator):
    """有道翻译器实现

    设置项：
        youdaoAppKey: 应用 ID（必需）
        youdaoAppSecret: 应用密钥（必需）
    """

    provider = ProviderId.YOUDAO

    @staticmethod
    def _timestamps(now: Optional[float] = None) -> Tuple[str, str]:
        """返回 (salt, curtime)：毫秒与秒级时间戳"""
        now = time.time() if now is None else now
        return str(int(now * 1000)), str(int(now))

    async def _send_request(self, text: str, source_lang: str, target_lang: str) -> HttpResponse:
        app_key = self.settings.get_setting('youdaoAppKey', '')
        app_secret = self.settings.get_setting('youdaoAppSecret', '')
        salt, curtime = self._timestamps()

        data = {
            'q': text,
            'from': source_lang,
            'to': target_lang,
            'appKey': app_key,
            'salt': salt,
            'sign': build_signature(app_key, text, salt, curtime, app_secret),
            'signType': SIGN_TYPE,
            'curtime': curtime,
        }
        return await self.request.post(
            self._api_url('youdaoApiUrl', API_URL),
            data=data,
            headers={'Content-Type': 'application/x-www-form-urlencoded'},
        )

    def _parse_response(self, data: Any, text: str, source_lang: str) -> TranslationResult:
        error_code = str(data.get('errorCode', '0'))
        if error_code != '0':
            raise ApplicationError(error_code)

        # basic.explains 仅在单词查询时返回
        explains = (data.get('basic') or {}).get('explains') or []

        return TranslationResult(
            result_text="\n".join(data.get('translation') or []),
            candidate_text="\n".join(explains),
            source_language=source_lang,
            percentage=1.0,
        )

    def is_available(self) -> bool:
        """检查翻译器是否可用"""
        return bool(
            self.settings.get_setting('youdaoAppKey')
            and self.settings.get_setting('youdaoAppSecret')
        )
