"""
核心数据模型
包含所有翻译器共用的数据结构
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any, Optional


class ProviderId(Enum):
    """翻译服务提供方枚举"""
    GOOGLE = "google"
    DEEPL = "deepl"
    YOUDAO = "youdao"

    @classmethod
    def default(cls) -> "ProviderId":
        return cls.GOOGLE

    @classmethod
    def parse(cls, value: Optional[str]) -> "ProviderId":
        """
        解析配置中的提供方标识

        未设置或无法识别的值回退到默认提供方（google）。

        Args:
            value: 配置值，例如 'deepl'

        Returns:
            ProviderId
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.default()


@dataclass(frozen=True)
class TranslationResult:
    """
    翻译结果数据模型（所有翻译器统一输出）

    字段：
        result_text: 译文，失败时为空字符串
        candidate_text: 候选译文/词典释义，不可用时为空字符串
        source_language: 服务端检测（或回显）的源语言代码，失败时为空
        percentage: 源语言检测置信度 [0, 1]，不提供置信度的服务固定为 1.0
        is_error: 请求是否失败
        error_message: 失败时的可读错误信息
    """

    result_text: str = ""
    candidate_text: str = ""
    source_language: str = ""
    percentage: float = 0.0
    is_error: bool = False
    error_message: str = ""

    @classmethod
    def empty(cls) -> "TranslationResult":
        """空输入的返回值：不是错误，也不访问缓存和网络"""
        return cls(source_language="en", percentage=0.0)

    @classmethod
    def failure(cls, message: str) -> "TranslationResult":
        return cls(is_error=True, error_message=message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典（用于 JSON 序列化）"""
        return asdict(self)
