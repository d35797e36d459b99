#!/usr/bin/env python3
"""
Translate Dispatcher Plugin Entry Point
插件入口文件，用于启动插件主程序
"""

from translate_dispatcher.plugin_main import main

if __name__ == '__main__':
    main()
