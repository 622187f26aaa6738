"""
测试 apiflex.shortcuts 模块
"""

import json

import pytest

from apiflex.exceptions import ApiResponseException
from apiflex.shortcuts import api_abort, api_error, api_success


class TestApiSuccess:
    """测试 api_success"""

    @pytest.mark.unit
    def test_success_with_data(self):
        response = api_success({"id": 1})

        assert json.loads(response.content) == {"id": 1, "code": 1}

    @pytest.mark.unit
    def test_success_with_message(self):
        response = api_success({"id": 1}, "created")

        assert response.get_message() == "created"
        assert response.get_code() == 1

    @pytest.mark.unit
    def test_success_kwargs_passed(self, custom_config):
        response = api_success(config=custom_config, headers={"X-A": "1"})

        assert response.data == {"status": 0}
        assert response["X-A"] == "1"


class TestApiError:
    """测试 api_error"""

    @pytest.mark.unit
    def test_default_error_code(self):
        response = api_error("参数错误")

        assert json.loads(response.content) == {"code": -1, "msg": "参数错误"}
        assert response.status_code == 200

    @pytest.mark.unit
    def test_custom_code_and_data(self):
        response = api_error("参数错误", 422, {"errors": {"name": ["必填"]}})

        assert response.data == {"errors": {"name": ["必填"]}, "code": 422, "msg": "参数错误"}

    @pytest.mark.unit
    def test_error_code_from_injected_config(self, custom_config):
        response = api_error("boom", config=custom_config)

        assert response.data == {"status": 500, "message": "boom"}


class TestApiAbort:
    """测试 api_abort"""

    @pytest.mark.unit
    def test_raises_with_response(self):
        with pytest.raises(ApiResponseException) as exc_info:
            api_abort("无权限", 403)

        exc = exc_info.value
        assert str(exc) == "无权限"
        assert exc.get_response().data == {"code": 403, "msg": "无权限"}

    @pytest.mark.unit
    def test_default_code(self):
        with pytest.raises(ApiResponseException) as exc_info:
            api_abort("失败", data={"id": 1})

        assert exc_info.value.get_response().data == {"id": 1, "code": -1, "msg": "失败"}
