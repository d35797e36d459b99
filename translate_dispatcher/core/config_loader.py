"""
配置加载器
从 config.yml 加载插件配置
"""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

CONFIG_ENV_VAR = 'TRANSLATE_DISPATCHER_CONFIG'


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    加载配置文件

    查找顺序：参数 config_file → 环境变量 TRANSLATE_DISPATCHER_CONFIG →
    插件根目录下的 config/config.yml。文件不存在时返回默认配置。

    Args:
        config_file: 配置文件路径（相对路径以插件根目录为基准）

    Returns:
        配置字典（用户配置深度合并到默认配置之上）
    """
    config_file = config_file or os.environ.get(CONFIG_ENV_VAR) or "config/config.yml"

    # 获取插件根目录（core 的父目录）
    plugin_root = Path(__file__).parent.parent
    config_path = Path(config_file)
    if not config_path.is_absolute():
        config_path = plugin_root / config_path

    # 加载 YAML 配置
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = yaml.safe_load(f)
    except FileNotFoundError:
        # 返回默认配置
        return _get_default_config()
    except Exception as e:
        raise RuntimeError(f"配置文件加载失败: {e}")

    return _merge(_get_default_config(), user_config or {})


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """递归合并字典，override 优先"""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge(base[key], value)
        else:
            base[key] = value
    return base


def _get_default_config() -> Dict[str, Any]:
    """返回默认配置"""
    return {
        'translation': {
            'provider': 'google',
            'locale': 'en',
            'google': {
                'api_url': None,
            },
            'deepl': {
                'auth_key': '',
                'plan': 'free',
                'api_url': None,
            },
            'youdao': {
                'app_key': '',
                'app_secret': '',
                'api_url': None,
            },
        },
        'network': {
            'proxy_server': None,
            'timeout': None,
        },
        'logging': {
            'level': 'INFO',
            'log_file': 'translate_dispatcher.log',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }
    }


class Settings:
    """
    设置访问接口

    包装配置字典，按宿主使用的扁平名称读取设置。
    每次读取都访问底层字典，运行期间修改配置立即生效。
    """

    # 扁平名称 -> 配置路径
    SETTING_PATHS = {
        'translationApi': ('translation', 'provider'),
        'locale': ('translation', 'locale'),
        'deeplAuthKey': ('translation', 'deepl', 'auth_key'),
        'deeplPlan': ('translation', 'deepl', 'plan'),
        'deeplApiUrl': ('translation', 'deepl', 'api_url'),
        'googleApiUrl': ('translation', 'google', 'api_url'),
        'youdaoAppKey': ('translation', 'youdao', 'app_key'),
        'youdaoAppSecret': ('translation', 'youdao', 'app_secret'),
        'youdaoApiUrl': ('translation', 'youdao', 'api_url'),
        'proxyServer': ('network', 'proxy_server'),
        'timeout': ('network', 'timeout'),
    }

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config if config is not None else _get_default_config()

    def get_setting(self, name: str, default: Any = None) -> Any:
        """
        读取设置

        Args:
            name: 扁平设置名（如 'deeplAuthKey'）
            default: 未设置时的返回值

        Raises:
            KeyError: 未知的设置名
        """
        node: Any = self.config
        for part in self.SETTING_PATHS[name]:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return default if node is None else node

    def set_setting(self, name: str, value: Any):
        """写入设置（缺失的中间节点会被创建）"""
        *parents, leaf = self.SETTING_PATHS[name]
        node = self.config
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value

    def copy(self) -> "Settings":
        return Settings(copy.deepcopy(self.config))
