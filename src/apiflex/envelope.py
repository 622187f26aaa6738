"""响应信封模块

提供与 Web 框架无关的响应信封对象，保存业务状态码、响应数据、清理路径、
响应头和 HTTP 状态码，并负责在每次修改后重新格式化数据。
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from django.core.serializers.json import DjangoJSONEncoder

from apiflex.config import ResponseConfig, get_response_config
from apiflex.constants import DEFAULT_HTTP_STATUS
from apiflex.formatter import BaseResponseFormatter, DefaultResponseFormatter
from apiflex.utils import clean_data, data_get

logger = logging.getLogger(__name__)


class ResponseEnvelope:
    """
    响应信封

    构造时立即格式化数据，之后所有修改操作（set_code、set_message、merge、clean、set_data）
    都会重新执行完整的格式化流程，保证 data 中始终包含业务状态码字段。
    所有修改操作返回 self，支持链式调用。

    参数:
        data: 原始响应数据（字典、Model、对象、字符串、标量或 None）
        code: 业务状态码，None 时使用配置的成功码
        headers: 响应头，只记录构造时的输入，宿主框架的响应对象之后修改的响应头不会同步回来
        config: 响应配置，None 时使用 get_response_config()
        formatter: 响应格式化器，None 时使用 DefaultResponseFormatter

    使用示例:
        >>> envelope = ResponseEnvelope({"user": {"id": 1}})
        >>> envelope.set_message("ok").data
        {"user": {"id": 1}, "code": 1, "msg": "ok"}
    """

    def __init__(
        self,
        data: Any = None,
        code: int | None = None,
        headers: dict[str, str] | None = None,
        *,
        config: ResponseConfig | None = None,
        formatter: BaseResponseFormatter | None = None,
    ):
        self.config = config or get_response_config()
        self.formatter = formatter or DefaultResponseFormatter()
        self.code = self.config.success_code if code is None else int(code)
        self.headers = dict(headers or {})
        self.status_code = DEFAULT_HTTP_STATUS
        self.reason_phrase: str | None = None
        self.clean_keys: list[str] | None = None
        self.data: dict[str, Any] = {}

        self.set_data(data)

    def set_data(self, data: Any = None) -> ResponseEnvelope:
        """格式化并替换响应数据"""
        normalized = self.formatter.format(data, self.code, self.config)

        if self.clean_keys is not None:
            normalized = clean_data(normalized, self.clean_keys)

        self.data = normalized
        logger.debug(f"Response data normalized, keys: {list(normalized)}")
        return self

    def get_data(self) -> dict[str, Any]:
        """返回当前响应数据的浅拷贝"""
        return dict(self.data)

    def merge(self, *mappings: dict[str, Any]) -> ResponseEnvelope:
        """
        把一个或多个字典浅合并到当前数据中（同名顶层键后者覆盖前者），然后重新格式化
        """
        merged = dict(self.data)
        for mapping in mappings:
            merged.update(mapping)
        return self.set_data(merged)

    def get_code(self) -> int:
        return self.code

    def set_code(self, code: int) -> ResponseEnvelope:
        """设置业务状态码并写入响应数据"""
        self.code = int(code)
        return self.merge({self.config.code_key: self.code})

    def get_message(self) -> Any:
        """读取响应数据中的消息，未设置时返回 None"""
        return data_get(self.data, self.config.message_key)

    def set_message(self, message: Any) -> ResponseEnvelope:
        return self.merge({self.config.message_key: str(message)})

    def get_clean_keys(self) -> list[str] | None:
        return None if self.clean_keys is None else list(self.clean_keys)

    def clean(self, *keys: str | Iterable[str] | None) -> ResponseEnvelope:
        """
        设置需要清理空值的路径，并立即清理当前数据

        路径支持"点"语法:
            clean(None)            -> 不再清理（已清理的数据不会恢复）
            clean() / clean([])    -> 清理所有根键对应的值
            clean("foo", "a.b")    -> 清理 foo 和 a>b 对应的值
            clean(["a.b.c", "d"])
        """
        if len(keys) == 1 and keys[0] is None:
            self.clean_keys = None
            return self

        if len(keys) == 1 and isinstance(keys[0], (list, tuple, set)):
            keys = tuple(keys[0])

        self.clean_keys = list(keys)
        return self.set_data(self.data)

    def with_status(self, status: int, reason: str | None = None) -> ResponseEnvelope:
        """设置传输层 HTTP 状态码（与业务状态码相互独立）"""
        self.status_code = int(status)
        self.reason_phrase = reason
        return self

    def render(self, encoder: type[json.JSONEncoder] = DjangoJSONEncoder, **json_dumps_params) -> str:
        return render_envelope(self, encoder=encoder, **json_dumps_params)

    def __repr__(self):
        return f"<{self.__class__.__name__} code={self.code} status={self.status_code} data={self.data!r}>"


def render_envelope(
    envelope: ResponseEnvelope,
    encoder: type[json.JSONEncoder] = DjangoJSONEncoder,
    **json_dumps_params,
) -> str:
    """
    把响应信封的数据序列化为 JSON 字符串

    参数:
        envelope: 响应信封
        encoder: JSON 编码器类
        json_dumps_params: 传给 json.dumps 的其他参数，如 ensure_ascii=False
    """
    return json.dumps(envelope.data, cls=encoder, **json_dumps_params)
