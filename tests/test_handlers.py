"""
handlers.py 模块的单元测试

测试用例:
- UT-HDL-001: 中间件把 ApiResponseException 转换为响应
- UT-HDL-002: 中间件忽略其他异常
- UT-HDL-003: DRF 异常处理器返回携带的响应
- UT-HDL-004: DRF 异常处理器把其他异常交给默认处理器
- IT-HDL-001: APIView 中抛出异常得到统一格式响应
"""

import json
from unittest.mock import Mock

import pytest
from django.test import RequestFactory
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.test import APIRequestFactory
from rest_framework.views import APIView

from apiflex.exceptions import ApiResponseException
from apiflex.handlers import ApiResponseExceptionMiddleware, exception_handler


@pytest.fixture
def request_factory():
    return RequestFactory()


class TestApiResponseExceptionMiddleware:
    """测试 ApiResponseExceptionMiddleware"""

    @pytest.fixture
    def middleware(self):
        return ApiResponseExceptionMiddleware(Mock(return_value="passthrough"))

    @pytest.mark.unit
    def test_call_passes_through(self, middleware, request_factory):
        request = request_factory.get("/orders")

        assert middleware(request) == "passthrough"
        middleware.get_response.assert_called_once_with(request)

    @pytest.mark.unit
    def test_process_api_response_exception(self, middleware, request_factory):
        """UT-HDL-001: 返回异常携带的响应"""
        exc = ApiResponseException("库存不足", 2001)

        response = middleware.process_exception(request_factory.get("/orders"), exc)

        assert response is exc.get_response()
        assert json.loads(response.content) == {"msg": "库存不足", "code": 2001}

    @pytest.mark.unit
    def test_ignore_other_exceptions(self, middleware, request_factory):
        """UT-HDL-002: 其他异常返回 None，交给 Django 处理"""
        assert middleware.process_exception(request_factory.get("/orders"), ValueError("boom")) is None


class TestDRFExceptionHandler:
    """测试 DRF 异常处理器"""

    @pytest.mark.unit
    def test_api_response_exception(self):
        """UT-HDL-003: 返回携带的响应"""
        exc = ApiResponseException("denied", 403)

        response = exception_handler(exc, {"view": Mock()})

        assert response is exc.get_response()

    @pytest.mark.unit
    def test_delegates_to_drf_default(self):
        """UT-HDL-004: DRF 异常由默认处理器处理"""
        response = exception_handler(drf_exceptions.NotFound(), {"view": Mock(), "request": None})

        assert isinstance(response, Response)
        assert response.status_code == 404

    @pytest.mark.unit
    def test_unhandled_exception_returns_none(self):
        assert exception_handler(ValueError("boom"), {"view": Mock()}) is None


class TestAPIViewIntegration:
    """测试与 APIView 集成（EXCEPTION_HANDLER 在 conftest 中配置）"""

    @pytest.mark.integration
    def test_exception_raised_in_view(self):
        """IT-HDL-001: 视图中抛出 ApiResponseException"""

        class OrderView(APIView):
            def get(self, request):
                raise ApiResponseException("订单不存在", 404)

        request = APIRequestFactory().get("/orders/1")

        response = OrderView.as_view()(request)

        assert response.status_code == 200
        assert json.loads(response.content) == {"msg": "订单不存在", "code": 404}
