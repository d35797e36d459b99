"""
本地化消息
为错误分类提供双语（中文/英文）可读消息
"""

from typing import Dict

DEFAULT_LOCALE = 'en'

MESSAGES: Dict[str, Dict[str, str]] = {
    'networkError': {
        'zh': '网络错误，请检查网络连接',
        'en': 'A network error has occurred. Please check your connection.',
    },
    'unavailableError': {
        'zh': '翻译服务暂时不可用，请稍后再试',
        'en': 'The translation service is temporarily unavailable. Please try again later.',
    },
    'deeplAuthError': {
        'zh': 'DeepL 认证失败，请检查认证密钥',
        'en': 'DeepL authentication failed. Please check your authentication key.',
    },
    'applicationError': {
        'zh': '翻译服务返回错误',
        'en': 'The translation service returned an error.',
    },
    'unknownError': {
        'zh': '发生未知错误',
        'en': 'An unknown error has occurred.',
    },
}


def get_localized_message(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    获取指定语言的消息

    Args:
        key: 消息键（如 'networkError'）
        locale: 语言代码（'zh' 或 'en'），其他值按 'en' 处理

    Returns:
        对应语言的消息；未知键原样返回
    """
    entry = MESSAGES.get(key)
    if entry is None:
        return key
    lang = 'zh' if locale.lower().startswith('zh') else DEFAULT_LOCALE
    return entry[lang]
