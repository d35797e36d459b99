"""
HTTP 请求封装

"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Dict, Any, Optional

import aiohttp

logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    """
    HTTP 响应快照

    status 为 0 表示传输层失败（连接被拒绝、DNS 失败、超时等），
    此时 body 为空。body 保留原始字节，解码推迟到 json()。
    """
    status: int
    reason: str = ""
    body: bytes = b""
    charset: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 200

    def json(self) -> Any:
        """解析 JSON 响应体，解码或解析失败均抛出 ValueError"""
        try:
            text = self.body.decode(self.charset or "utf-8")
        except LookupError as e:
            raise ValueError(f"未知字符集: {self.charset}") from e
        return json.loads(text)


class Request:
    """
    异步 HTTP 请求封装类
    支持代理与可选超时；传输异常统一转换为 status=0 的响应
    """

    DEFAULT_HEADERS = {
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/132.0.0.0 Safari/537.36',
        'Accept': 'application/json, text/javascript, */*; q=0.01',
    }

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        初始化 Request 对象

        Args:
            config: 配置字典，包含 network 配置
        """
        self.config = config or {}
        network_config = self.config.get('network') or {}

        self.headers = self.DEFAULT_HEADERS.copy()

        # 设置代理
        self.proxy = network_config.get('proxy_server')
        if self.proxy:
            logger.info(f"使用代理: {self.proxy}")

        # 未配置超时时使用 aiohttp 默认值
        timeout = network_config.get('timeout')
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None

    async def get(self, url: str, params: Any = None, **kwargs) -> HttpResponse:
        """
        发送 GET 请求

        Args:
            url: 请求 URL
            params: 查询参数（字典或键值对列表，允许重复键）
            **kwargs: 其他 aiohttp 参数

        Returns:
            HttpResponse 对象（传输失败时 status=0）
        """
        return await self._request('GET', url, params=params, **kwargs)

    async def post(self, url: str, data: Any = None, **kwargs) -> HttpResponse:
        """
        发送 POST 请求（表单编码）

        Args:
            url: 请求 URL
            data: 表单数据
            **kwargs: 其他 aiohttp 参数（包括 headers）

        Returns:
            HttpResponse 对象（传输失败时 status=0）
        """
        return await self._request('POST', url, data=data, **kwargs)

    async def _request(self, method: str, url: str, **kwargs) -> HttpResponse:
        # 合并请求头
        headers = self.headers.copy()
        headers.update(kwargs.pop('headers', None) or {})

        if self.timeout is not None and 'timeout' not in kwargs:
            kwargs['timeout'] = self.timeout

        try:
            async with aiohttp.ClientSession() as session:
                async with session.request(
                    method,
                    url,
                    headers=headers,
                    proxy=self.proxy,
                    **kwargs
                ) as response:
                    body = await response.read()
                    return HttpResponse(response.status, response.reason or "", body, response.charset)

        except asyncio.TimeoutError:
            logger.debug(f"请求超时: {method} {url}")
        except aiohttp.ClientError as e:
            logger.debug(f"连接错误: {method} {url}: {e}")

        return HttpResponse(status=0)
