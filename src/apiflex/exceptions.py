"""
API 响应异常模块

定义响应格式化相关的异常类，以及携带完整响应的业务异常
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from apiflex.config import ResponseConfig
    from apiflex.response import ApiResponse


class ApiFlexError(Exception):
    """
    apiflex 异常基类

    所有自定义异常的基类，用于统一捕获库内抛出的错误
    """


class ApiResponseConfigError(ApiFlexError):
    """
    配置异常

    当 Django 配置项 API_RESPONSE 不是字典，或其中的键名/状态码类型不正确时抛出
    """


class ApiResponseConversionError(ApiFlexError):
    """
    对象转换异常

    严格转换模式下，对象无法转换为字典（或标量无法 JSON 编码）时抛出此异常。
    非严格模式下转换失败只记录警告并退化为空字典。

    参数:
        message: 错误描述信息
        value: 转换失败的原始值（可选）

    属性:
        value: 保存原始值，便于定位问题
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ApiResponseException(ApiFlexError):
    """
    携带格式化响应的业务异常

    在业务代码任意位置抛出，由顶层处理器（中间件或 DRF 异常处理器）捕获后
    直接返回其携带的响应。构造参数与 ApiResponse 相同，默认业务码为配置中的错误码。

    参数:
        data: 响应数据，规则同 ApiResponse
        code: 业务状态码，None 时使用配置的错误码（默认 -1）
        headers: 响应头
        json_dumps_params: 传给 json.dumps 的编码参数
        config: 显式注入的 ResponseConfig（可选）

    使用示例:
        >>> raise ApiResponseException("余额不足", code=1001)
    """

    def __init__(
        self,
        data: Any = None,
        code: int | None = None,
        headers: dict[str, str] | None = None,
        json_dumps_params: dict[str, Any] | None = None,
        *,
        config: ResponseConfig | None = None,
    ):
        # 延迟导入，避免 response -> formatter -> exceptions 的循环依赖
        from apiflex.config import get_response_config
        from apiflex.response import ApiResponse

        config = config or get_response_config()
        if code is None:
            code = config.error_code

        self.response = ApiResponse(data, code, headers, json_dumps_params, config=config)

        message = self.response.get_message()
        super().__init__("" if message is None else str(message))

    def get_response(self) -> ApiResponse:
        """返回携带的 ApiResponse 实例"""
        return self.response
