"""翻译器基类

定义翻译器的抽象接口，所有翻译器实现必须继承此类。
基类统一负责错误分类与结果归一化，子类只描述各自的请求与响应格式。
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Optional

from ..core.config_loader import Settings
from ..core.models import ProviderId, TranslationResult
from ..web.exceptions import (
    TranslateError, NetworkError, ServiceUnavailableError,
    AuthenticationError, ApplicationError, UnknownHttpError
)
from ..web.request import Request, HttpResponse

logger = logging.getLogger(__name__)


class BaseTranslator(ABC):
    """翻译器抽象基类"""

    provider: ProviderId

    # 各服务文档中明确的限流/暂不可用状态码
    unavailable_statuses: FrozenSet[int] = frozenset()
    # 认证失败状态码
    auth_statuses: FrozenSet[int] = frozenset()

    def __init__(self, settings: Optional[Settings] = None, request: Optional[Request] = None):
        """初始化翻译器

        Args:
            settings: 设置接口（API 密钥、账户类型等）
            request: HTTP 客户端，默认按 settings 中的 network 配置创建
        """
        self.settings = settings or Settings()
        self.request = request or Request(self.settings.config)

    @property
    def locale(self) -> str:
        return self.settings.get_setting('locale', 'en')

    async def translate(
        self,
        text: str,
        source_lang: str = "auto",
        target_lang: str = "en"
    ) -> TranslationResult:
        """翻译文本

        只发起一次请求，任何失败都转换为 is_error=True 的结果，不向调用方抛出异常。

        Args:
            text: 要翻译的文本（已去除首尾空白）
            source_lang: 源语言代码（auto 表示自动检测）
            target_lang: 目标语言代码

        Returns:
            TranslationResult
        """
        response: Optional[HttpResponse] = None
        try:
            response = await self._send_request(text, source_lang, target_lang)
            self._check_status(response)
            result = self._parse_body(response, text, source_lang)
        except TranslateError as e:
            logger.error(f"{self.get_name()} 翻译失败: {e.message_en} response={response!r}")
            return TranslationResult.failure(e.get_message(self.locale))

        logger.debug(f"{self.get_name()} 翻译成功: {text[:50]} -> {result.result_text[:50]}")
        return result

    def _check_status(self, response: HttpResponse):
        """按状态码分类错误

        Raises:
            NetworkError: 未获得 HTTP 状态码
            ServiceUnavailableError: 限流或暂不可用
            AuthenticationError: 认证失败
            UnknownHttpError: 其他非 200 状态码
        """
        if response.status == 0:
            raise NetworkError()
        if response.status in self.unavailable_statuses:
            raise ServiceUnavailableError()
        if response.status in self.auth_statuses:
            raise AuthenticationError()
        if response.status != 200:
            raise UnknownHttpError(response.status, response.reason)

    def _parse_body(self, response: HttpResponse, text: str, source_lang: str) -> TranslationResult:
        try:
            data = response.json()
        except ValueError as e:
            raise ApplicationError("invalid JSON") from e

        try:
            return self._parse_response(data, text, source_lang)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ApplicationError(f"malformed response: {e!r}") from e

    @abstractmethod
    async def _send_request(self, text: str, source_lang: str, target_lang: str) -> HttpResponse:
        """发送服务方请求，返回原始响应"""
        pass

    @abstractmethod
    def _parse_response(self, data: Any, text: str, source_lang: str) -> TranslationResult:
        """将服务方 JSON 响应归一化为 TranslationResult

        Raises:
            ApplicationError: 响应体中报告了错误
        """
        pass

    def _api_url(self, setting_name: str, default: str) -> str:
        """读取可覆盖的接口地址"""
        return self.settings.get_setting(setting_name) or default

    def get_name(self) -> str:
        """获取翻译器名称"""
        return self.provider.value

    def is_available(self) -> bool:
        """检查翻译器是否可用

        Returns:
            True 如果翻译器可用，否则 False
        """
        return True
