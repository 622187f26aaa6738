"""API 响应模块

提供基于 Django JsonResponse 的统一格式响应。业务结果通过响应体中的 code 表达，
HTTP 状态码默认固定为 200。
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from django.core.serializers.json import DjangoJSONEncoder
from django.http import JsonResponse

from apiflex.config import ResponseConfig
from apiflex.envelope import ResponseEnvelope, render_envelope
from apiflex.formatter import BaseResponseFormatter


class ApiResponse(JsonResponse):
    """
    统一格式的 JSON 响应

    内部持有一个 ResponseEnvelope，所有修改操作委托给信封后立即重新渲染响应内容。

    参数:
        data: 响应数据，转换规则见 DefaultResponseFormatter
        code: 业务状态码，None 时使用配置的成功码
        headers: 响应头（Content-Type 会转为 content_type 参数）；构造后请直接修改响应对象的响应头，
                 envelope.headers 只保存构造时的输入
        json_dumps_params: 传给 json.dumps 的编码参数
        config: 响应配置（可选）
        formatter: 响应格式化器（可选）
        encoder: JSON 编码器类

    使用示例:
        >>> def user_detail(request, pk):
        ...     user = User.objects.get(pk=pk)
        ...     return ApiResponse(user).set_message("ok")
        # {"user": {...}, "code": 1, "msg": "ok"}
    """

    def __init__(
        self,
        data: Any = None,
        code: int | None = None,
        headers: dict[str, str] | None = None,
        json_dumps_params: dict[str, Any] | None = None,
        *,
        config: ResponseConfig | None = None,
        formatter: BaseResponseFormatter | None = None,
        encoder: type[json.JSONEncoder] = DjangoJSONEncoder,
        **kwargs,
    ):
        self.envelope = ResponseEnvelope(data, code, headers, config=config, formatter=formatter)
        self._encoder = encoder
        self._json_dumps_params = dict(json_dumps_params or {})

        # JsonResponse 总是设置 content_type，响应头中的 Content-Type 需要改为参数传入
        headers = dict(self.envelope.headers)
        for name in list(headers):
            if name.lower() == "content-type":
                kwargs.setdefault("content_type", headers.pop(name))

        super().__init__(
            self.envelope.data,
            encoder=encoder,
            json_dumps_params=self._json_dumps_params,
            status=self.envelope.status_code,
            headers=headers or None,
            **kwargs,
        )

    def _render(self) -> ApiResponse:
        self.content = render_envelope(self.envelope, encoder=self._encoder, **self._json_dumps_params)
        return self

    @property
    def data(self) -> dict[str, Any]:
        return self.envelope.data

    @property
    def code(self) -> int:
        return self.envelope.code

    def get_data(self) -> dict[str, Any]:
        return self.envelope.get_data()

    def set_data(self, data: Any = None) -> ApiResponse:
        self.envelope.set_data(data)
        return self._render()

    def merge(self, *mappings: dict[str, Any]) -> ApiResponse:
        self.envelope.merge(*mappings)
        return self._render()

    def get_code(self) -> int:
        return self.envelope.get_code()

    def set_code(self, code: int) -> ApiResponse:
        self.envelope.set_code(code)
        return self._render()

    def get_message(self) -> Any:
        return self.envelope.get_message()

    def set_message(self, message: Any) -> ApiResponse:
        self.envelope.set_message(message)
        return self._render()

    def get_clean_keys(self) -> list[str] | None:
        return self.envelope.get_clean_keys()

    def clean(self, *keys: str | Iterable[str] | None) -> ApiResponse:
        self.envelope.clean(*keys)
        return self._render()

    def with_status(self, status: int, reason: str | None = None) -> ApiResponse:
        """设置 HTTP 状态码，不影响业务状态码"""
        self.envelope.with_status(status, reason)
        self.status_code = self.envelope.status_code
        # None 时由 Django 根据状态码推导
        self.reason_phrase = reason
        return self
