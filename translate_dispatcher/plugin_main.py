#!/usr/bin/env python3
"""
Translate Dispatcher Plugin - 主入口
通过 stdin/stdout 与主程序通信（每行一个 JSON 请求/响应）
进程生命周期即缓存会话的生命周期
"""

import asyncio
import io
import json
import logging
import sys
from typing import Dict, Any, Optional

from . import __version__
from .core.config_loader import load_config, Settings
from .core.models import ProviderId
from .translators.translator_manager import TranslatorManager


class PluginMain:
    """插件主入口"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """初始化插件

        Args:
            config: 配置字典（None 则从配置文件加载）
        """
        self.config = config if config is not None else load_config()

        # 设置日志（写入文件，避免干扰 stdout）
        self._setup_logging()

        self.manager = TranslatorManager(Settings(self.config))

        self.logger.info("Plugin initialized")

    def _setup_logging(self):
        """设置日志"""
        log_config = self.config.get('logging', {})
        log_level = log_config.get('level', 'INFO')
        log_file = log_config.get('log_file', 'translate_dispatcher.log')
        log_format = log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # 配置日志到文件
        logging.basicConfig(
            level=getattr(logging, str(log_level).upper(), logging.INFO),
            format=log_format,
            filename=log_file,
            filemode='a',
            encoding='utf-8'
        )

        self.logger = logging.getLogger(__name__)

    def run(self, stdin=None, stdout=None):
        """运行插件主循环"""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        self.logger.info("Plugin started")

        try:
            for line in stdin:
                line = line.strip()
                if not line:
                    continue

                response = self.process_line(line)

                # 输出响应到 stdout
                print(json.dumps(response, ensure_ascii=False), file=stdout)
                stdout.flush()

        except KeyboardInterrupt:
            self.logger.info("Plugin interrupted by user")

        finally:
            self.logger.info("Plugin stopped")

    def process_line(self, line: str) -> Dict[str, Any]:
        """解析一行 JSON 请求并返回响应字典"""
        try:
            request = json.loads(line)
            self.logger.debug(f"Received request: {request}")
            if not isinstance(request, dict):
                raise json.JSONDecodeError("request must be an object", line, 0)
            return asyncio.run(self.handle_request(request))

        except json.JSONDecodeError as e:
            self.logger.error(f"JSON decode error: {e}")
            return {
                'success': False,
                'error': f'Invalid JSON: {str(e)}'
            }

        except Exception as e:
            self.logger.exception(f"Unexpected error: {e}")
            return {
                'success': False,
                'error': f'Internal error: {str(e)}'
            }

    async def handle_request(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        处理请求

        Args:
            request: 请求字典，包含 action 字段

        Returns:
            响应字典
        """
        action = request.get('action')

        if action == 'info':
            return self._handle_info()
        elif action == 'translate':
            return await self._handle_translate(request)
        elif action == 'clear_cache':
            await self.manager.clear_cache()
            return {'success': True}
        else:
            return {
                'success': False,
                'error': f'Unknown action: {action}'
            }

    def _handle_info(self) -> Dict[str, Any]:
        return {
            'success': True,
            'data': {
                'version': __version__,
                'provider': self.manager.provider.value,
                'providers': [provider.value for provider in ProviderId],
                'available': self.manager.get_available_translators(),
            }
        }

    async def _handle_translate(self, request: Dict[str, Any]) -> Dict[str, Any]:
        text = request.get('text')
        target_lang = request.get('target_lang')
        if not isinstance(text, str) or not target_lang:
            return {
                'success': False,
                'error': "translate 需要 'text' 和 'target_lang' 字段"
            }

        result = await self.manager.translate(
            text,
            request.get('source_lang') or 'auto',
            target_lang
        )
        # 翻译失败也返回完整结果，由 is_error 区分
        return {
            'success': True,
            'data': result.to_dict()
        }


def main():
    """主函数"""
    # 设置 stdin/stdout 为 UTF-8 编码
    sys.stdin = io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8')
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', line_buffering=True)

    plugin = PluginMain()
    plugin.run()


if __name__ == '__main__':
    main()
