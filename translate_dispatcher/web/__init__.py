"""Web 模块 - HTTP 客户端和异常"""

from .exceptions import *
from .request import Request, HttpResponse

__all__ = ['Request', 'HttpResponse', 'TranslateError', 'NetworkError',
           'ServiceUnavailableError', 'AuthenticationError', 'ApplicationError',
           'UnknownHttpError']
