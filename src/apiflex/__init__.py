"""
apiflex API 响应模块

为 Django 视图提供统一的 JSON 响应信封 {code, msg, ...data}

主要组件:
    - ApiResponse: 基于 JsonResponse 的统一格式响应
    - ResponseEnvelope: 与框架无关的响应信封
    - ApiResponseException: 携带响应的业务异常
    - 格式化器: DefaultResponseFormatter
    - 配置: ResponseConfig, get_response_config
    - 异常处理器: ApiResponseExceptionMiddleware, exception_handler

使用示例:
    >>> from apiflex import ApiResponse, ApiResponseException
    >>>
    >>> def profile(request):
    ...     if not request.user.is_authenticated:
    ...         raise ApiResponseException("请先登录", code=401)
    ...     return ApiResponse(request.user.profile).clean("user_profile")
"""

# 配置
from apiflex.config import (
    ResponseConfig,
    get_response_config,
    reload_response_config,
)

# 异常类
from apiflex.exceptions import (
    ApiFlexError,
    ApiResponseConfigError,
    ApiResponseConversionError,
    ApiResponseException,
)

# 响应格式化器
from apiflex.formatter import (
    BaseResponseFormatter,
    DefaultResponseFormatter,
    Mappable,
)

# 响应
from apiflex.envelope import ResponseEnvelope, render_envelope
from apiflex.response import ApiResponse

# 异常处理器
from apiflex.handlers import (
    ApiResponseExceptionMiddleware,
    exception_handler,
)

# 快捷函数
from apiflex.shortcuts import api_abort, api_error, api_success

# 工具函数
from apiflex.utils import (
    clean_data,
    data_get,
    data_set,
    filter_empty,
    snake_case,
)

# 常量配置
from apiflex.constants import (
    DEFAULT_CODE_KEY,
    DEFAULT_MESSAGE_KEY,
    RESPONSE_CODE_ERROR,
    RESPONSE_CODE_SUCCESS,
)

__all__ = [
    # 配置
    "ResponseConfig",
    "get_response_config",
    "reload_response_config",
    # 异常
    "ApiFlexError",
    "ApiResponseConfigError",
    "ApiResponseConversionError",
    "ApiResponseException",
    # 格式化器
    "BaseResponseFormatter",
    "DefaultResponseFormatter",
    "Mappable",
    # 响应
    "ResponseEnvelope",
    "render_envelope",
    "ApiResponse",
    # 异常处理器
    "ApiResponseExceptionMiddleware",
    "exception_handler",
    # 快捷函数
    "api_success",
    "api_error",
    "api_abort",
    # 工具函数
    "clean_data",
    "data_get",
    "data_set",
    "filter_empty",
    "snake_case",
    # 常量
    "DEFAULT_CODE_KEY",
    "DEFAULT_MESSAGE_KEY",
    "RESPONSE_CODE_SUCCESS",
    "RESPONSE_CODE_ERROR",
]

__version__ = "0.1.0"
__author__ = "HACK-WU"
