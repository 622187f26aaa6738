"""响应配置模块

提供响应键名与业务状态码的配置对象，以及从 Django settings 读取并进程级缓存的入口。

Django 配置示例:
    API_RESPONSE = {
        "CODE_KEY": "code",
        "MESSAGE_KEY": "msg",
        "SUCCESS_CODE": 1,
        "ERROR_CODE": -1,
        "STRICT_CONVERSION": False,
    }
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed

from apiflex.constants import (
    DEFAULTS,
    SETTING_CODE_KEY,
    SETTING_ERROR_CODE,
    SETTING_MESSAGE_KEY,
    SETTING_STRICT_CONVERSION,
    SETTING_SUCCESS_CODE,
    SETTINGS_NAME,
)
from apiflex.exceptions import ApiResponseConfigError

logger = logging.getLogger(__name__)


class ResponseConfig:
    """
    响应配置

    构造后只读使用。可以显式传给 ApiResponse / ResponseEnvelope，
    也可以通过 get_response_config() 从 Django settings 获取进程级共享实例。

    参数:
        code_key: 业务状态码字段名
        message_key: 消息字段名
        success_code: 未指定 code 时使用的成功码
        error_code: ApiResponseException 未指定 code 时使用的错误码
        strict_conversion: 对象转换失败时是否抛出 ApiResponseConversionError
    """

    def __init__(
        self,
        code_key: str = DEFAULTS[SETTING_CODE_KEY],
        message_key: str = DEFAULTS[SETTING_MESSAGE_KEY],
        success_code: int = DEFAULTS[SETTING_SUCCESS_CODE],
        error_code: int = DEFAULTS[SETTING_ERROR_CODE],
        strict_conversion: bool = DEFAULTS[SETTING_STRICT_CONVERSION],
    ):
        if not isinstance(code_key, str) or not code_key:
            raise ApiResponseConfigError(f"code_key must be a non-empty string, got {code_key!r}")
        if not isinstance(message_key, str) or not message_key:
            raise ApiResponseConfigError(f"message_key must be a non-empty string, got {message_key!r}")

        self.code_key = code_key
        self.message_key = message_key
        self.success_code = self._coerce_code(success_code, "success_code")
        self.error_code = self._coerce_code(error_code, "error_code")
        self.strict_conversion = bool(strict_conversion)

    @staticmethod
    def _coerce_code(value: Any, name: str) -> int:
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ApiResponseConfigError(f"{name} must be an integer, got {value!r}") from e

    @classmethod
    def from_settings(cls) -> ResponseConfig:
        """
        从 Django settings.API_RESPONSE 构建配置

        settings 未配置或未设置 API_RESPONSE 时返回默认配置

        异常:
            ApiResponseConfigError: API_RESPONSE 不是字典或值类型不正确
        """
        try:
            user_settings = getattr(settings, SETTINGS_NAME, None)
        except ImproperlyConfigured:
            # 脱离 Django 项目单独使用时 settings 未配置
            user_settings = None
        if user_settings is None:
            user_settings = {}

        if not isinstance(user_settings, dict):
            raise ApiResponseConfigError(f"{SETTINGS_NAME} must be a dict, got {type(user_settings).__name__}")

        unknown = set(user_settings) - set(DEFAULTS)
        if unknown:
            logger.warning(f"Ignoring unknown {SETTINGS_NAME} keys: {sorted(unknown)}")

        values = {**DEFAULTS, **user_settings}
        return cls(
            code_key=values[SETTING_CODE_KEY],
            message_key=values[SETTING_MESSAGE_KEY],
            success_code=values[SETTING_SUCCESS_CODE],
            error_code=values[SETTING_ERROR_CODE],
            strict_conversion=values[SETTING_STRICT_CONVERSION],
        )

    def __eq__(self, other):
        if not isinstance(other, ResponseConfig):
            return NotImplemented
        return vars(self) == vars(other)

    def __hash__(self):
        return hash(tuple(sorted(vars(self).items())))

    def __repr__(self):
        return (
            f"ResponseConfig(code_key={self.code_key!r}, message_key={self.message_key!r}, "
            f"success_code={self.success_code}, error_code={self.error_code}, "
            f"strict_conversion={self.strict_conversion})"
        )


@functools.lru_cache(maxsize=None)
def get_response_config() -> ResponseConfig:
    """
    获取进程级共享的响应配置

    首次访问时从 Django settings 读取，之后直接返回缓存实例
    """
    config = ResponseConfig.from_settings()
    logger.debug(f"Loaded response config: {config!r}")
    return config


def reload_response_config(*, setting: str | None = None, **kwargs) -> None:
    """
    清除缓存的响应配置

    作为 setting_changed 信号的接收者，仅在 API_RESPONSE 变化时生效；
    直接调用（不传 setting）时无条件清除
    """
    if setting is None or setting == SETTINGS_NAME:
        get_response_config.cache_clear()


setting_changed.connect(reload_response_config)
