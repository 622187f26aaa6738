"""快捷函数模块"""

from __future__ import annotations

from typing import Any

from apiflex.config import get_response_config
from apiflex.exceptions import ApiResponseException
from apiflex.response import ApiResponse


def api_success(data: Any = None, message: str | None = None, **kwargs) -> ApiResponse:
    """
    创建成功响应

    参数:
        data: 响应数据
        message: 成功消息，None 时不设置
        kwargs: 传给 ApiResponse 的其他参数（headers、config 等）

    返回:
        业务码为成功码的 ApiResponse
    """
    response = ApiResponse(data, **kwargs)
    if message is not None:
        response.set_message(message)
    return response


def api_error(message: str, code: int | None = None, data: Any = None, **kwargs) -> ApiResponse:
    """
    创建错误响应

    参数:
        message: 错误消息
        code: 业务错误码，None 时使用配置的错误码
        data: 可选的错误详情数据
        kwargs: 传给 ApiResponse 的其他参数

    返回:
        带错误码和消息的 ApiResponse
    """
    if code is None:
        code = (kwargs.get("config") or get_response_config()).error_code
    return ApiResponse(data, code, **kwargs).set_message(message)


def api_abort(message: str, code: int | None = None, data: Any = None, **kwargs):
    """
    抛出携带错误响应的 ApiResponseException，由异常处理器转换为响应

    异常:
        ApiResponseException: 总是抛出
    """
    exc = ApiResponseException(data, code, **kwargs)
    exc.get_response().set_message(message)
    exc.args = (str(message),)
    raise exc
