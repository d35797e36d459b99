"""
翻译请求相关的异常
增强：添加双语消息支持
"""

from typing import Optional

from ..core.messages import get_localized_message

__all__ = ['TranslateError', 'NetworkError', 'ServiceUnavailableError',
           'AuthenticationError', 'ApplicationError', 'UnknownHttpError']


class TranslateError(Exception):
    """所有翻译请求相关异常的基类（支持双语消息）"""

    message_key = 'unknownError'

    def __init__(self, message_zh: Optional[str] = None, message_en: Optional[str] = None, *args):
        """
        初始化异常

        Args:
            message_zh: 中文错误消息（可选，默认取本地化消息）
            message_en: 英文错误消息（可选，默认取本地化消息）
            *args: 其他参数
        """
        self.message_zh = message_zh or get_localized_message(self.message_key, 'zh')
        self.message_en = message_en or get_localized_message(self.message_key, 'en')
        super().__init__(self.message_zh, *args)

    def get_message(self, locale: str = 'zh') -> str:
        """
        获取指定语言的消息

        Args:
            locale: 语言代码（'zh' 或 'en'）

        Returns:
            对应语言的错误消息
        """
        return self.message_zh if locale.lower().startswith('zh') else self.message_en


class NetworkError(TranslateError):
    """网络连接错误（未获得 HTTP 状态码）"""
    message_key = 'networkError'


class ServiceUnavailableError(TranslateError):
    """服务限流或暂时不可用"""
    message_key = 'unavailableError'


class AuthenticationError(TranslateError):
    """认证失败"""
    message_key = 'deeplAuthError'


class ApplicationError(TranslateError):
    """HTTP 成功但响应体无法解析，或响应体中报告了错误码"""
    message_key = 'applicationError'

    def __init__(self, detail: str = "", *args):
        """
        Args:
            detail: 服务方给出的错误码或解析失败原因
        """
        message_zh = get_localized_message(self.message_key, 'zh')
        message_en = get_localized_message(self.message_key, 'en')
        if detail:
            message_zh = f"{message_zh} [{detail}]"
            message_en = f"{message_en} [{detail}]"
        super().__init__(message_zh, message_en, *args)
        self.detail = detail


class UnknownHttpError(TranslateError):
    """非预期的 HTTP 状态码"""

    def __init__(self, status: int, reason: str = "", *args) -> None:
        """
        Args:
            status: HTTP 状态码
            reason: 状态描述
        """
        suffix = f"[{status} {reason}]"
        message_zh = f"{get_localized_message(self.message_key, 'zh')} {suffix}"
        message_en = f"{get_localized_message(self.message_key, 'en')} {suffix}"
        super().__init__(message_zh, message_en, *args)
        self.status = status
        self.reason = reason
