"""
测试公共夹具：本地假翻译服务与设置构造
"""

import pytest
from aiohttp import web

from translate_dispatcher.core.config_loader import Settings


class FakeProvider:
    """记录收到的请求并返回预设响应的假翻译服务"""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.payload = {}
        self.body = None
        self.url = ""

    def respond(self, payload=None, status=200, body=None):
        self.payload = payload if payload is not None else {}
        self.status = status
        self.body = body

    async def handle(self, request: web.Request) -> web.Response:
        form = await request.post()
        self.requests.append({
            'method': request.method,
            'query': request.query.copy(),
            'form': form.copy(),
        })
        if isinstance(self.body, bytes):
            return web.Response(status=self.status, body=self.body,
                                content_type="application/json", charset="utf-8")
        if self.body is not None:
            return web.Response(status=self.status, text=self.body)
        return web.json_response(self.payload, status=self.status)


@pytest.fixture
async def provider(aiohttp_server):
    fake = FakeProvider()
    app = web.Application()
    app.router.add_route('*', '/{tail:.*}', fake.handle)
    server = await aiohttp_server(app)
    fake.url = str(server.make_url('/api'))
    return fake


def make_settings(**overrides) -> Settings:
    settings = Settings()
    for name, value in overrides.items():
        settings.set_setting(name, value)
    return settings


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def unreachable_url():
    """不会有服务监听的地址，用于模拟网络错误"""
    return "http://127.0.0.1:1/api"
