"""
异常处理器模块

把业务代码中抛出的 ApiResponseException 转换为其携带的响应:
    - ApiResponseExceptionMiddleware: Django 中间件
    - exception_handler: DRF 的 EXCEPTION_HANDLER

配置示例:
    MIDDLEWARE = [
        ...,
        "apiflex.handlers.ApiResponseExceptionMiddleware",
    ]

    REST_FRAMEWORK = {
        "EXCEPTION_HANDLER": "apiflex.handlers.exception_handler",
    }
"""

from __future__ import annotations

import logging

from rest_framework.views import exception_handler as drf_exception_handler

from apiflex.exceptions import ApiResponseException

logger = logging.getLogger(__name__)


class ApiResponseExceptionMiddleware:
    """捕获视图中抛出的 ApiResponseException 并返回其携带的响应"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, ApiResponseException):
            return None

        response = exception.get_response()
        logger.info(f"ApiResponseException caught for {request.path}: code={response.get_code()}")
        return response


def exception_handler(exc, context):
    """
    DRF 异常处理器

    ApiResponseException 直接返回携带的响应，其余异常交给 DRF 默认处理器
    """
    if isinstance(exc, ApiResponseException):
        response = exc.get_response()
        view = context.get("view")
        logger.info(f"ApiResponseException caught in {view.__class__.__name__}: code={response.get_code()}")
        return response

    return drf_exception_handler(exc, context)
