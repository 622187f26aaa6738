"""
响应格式化器模块

提供响应格式化的基类和默认实现，用于将任意响应数据统一格式化为
{code, msg, ...data} 结构的字典
"""

from __future__ import annotations

import dataclasses
import enum
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.forms.models import model_to_dict
from rest_framework import serializers

from apiflex.config import ResponseConfig
from apiflex.exceptions import ApiResponseConversionError
from apiflex.utils import class_basename, sequence_to_mapping, snake_case

logger = logging.getLogger(__name__)


class Mappable(ABC):
    """
    可转换为字典的数据能力接口

    实现零参数的 to_mapping() 方法并返回 dict 的类型都被视为 Mappable，
    无需显式继承（与 collections.abc 的鸭子类型判定一致）。

    使用示例:
        >>> class Point:
        ...     def to_mapping(self):
        ...         return {"x": 1, "y": 2}
        >>> isinstance(Point(), Mappable)
        True
    """

    @abstractmethod
    def to_mapping(self) -> dict[str, Any]:
        """返回可 JSON 序列化的字典"""

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Mappable:
            return callable(getattr(subclass, "to_mapping", None))
        return NotImplemented


class PublicAttributesJSONEncoder(DjangoJSONEncoder):
    """在 DjangoJSONEncoder 基础上，把普通对象编码为其公开属性组成的字典"""

    def default(self, o):
        try:
            return super().default(o)
        except TypeError:
            if dataclasses.is_dataclass(o) and not isinstance(o, type):
                return dataclasses.asdict(o)
            if hasattr(o, "__dict__"):
                return public_attributes(o)
            raise


def public_attributes(obj: Any) -> dict[str, Any]:
    """返回对象不以下划线开头的实例属性"""
    return {k: v for k, v in vars(obj).items() if not k.startswith("_")}


class BaseResponseFormatter(ABC):
    """响应格式化器基类，定义如何把任意数据格式化为响应字典。"""

    @abstractmethod
    def format(
        self,
        data: Any,
        code: int,
        config: ResponseConfig,
        **kwargs,
    ) -> dict[str, Any]:
        """
        格式化响应数据为统一的字典结构

        参数:
           data: 原始响应数据
           code: 当前业务状态码
           config: 响应配置（键名等）

        返回:
            格式化后的字典结构，必须包含 config.code_key
        """


class DefaultResponseFormatter(BaseResponseFormatter):
    """
    默认响应格式化器

    转换规则（按顺序匹配）:
        1. Django Model 实例: {snake_case(类名): to_mapping() 或 model_to_dict()}
        2. Mappable 对象: to_mapping() 的结果
        3. DRF Serializer 实例: serializer.data
        4. None: {}
        5. 字符串: {message_key: data}
        6. 字典: 浅拷贝后原样使用
        7. 列表/元组: {"0": item0, "1": item1, ...}
        8. 枚举: 按标量处理（普通枚举使用 value）
        9. 其他对象: 公开属性经 JSON 往返转换（尽力而为）
        10. 其他标量: {message_key: json.dumps(data)}
    最后若结果中没有 code_key，则补充当前业务状态码。
    """

    def format(
        self,
        data: Any,
        code: int,
        config: ResponseConfig,
        **kwargs,
    ) -> dict[str, Any]:
        result = self.to_mapping(data, config)

        if config.code_key not in result:
            result[config.code_key] = code

        return result

    def to_mapping(self, data: Any, config: ResponseConfig) -> dict[str, Any]:
        """
        把任意数据转换为字典（不含业务状态码处理）

        异常:
            ApiResponseConversionError: 严格模式下转换失败时抛出
        """
        if isinstance(data, models.Model):
            return {self.model_key(data): self.model_to_mapping(data, config)}

        if isinstance(data, Mappable):
            return self._ensure_mapping(data.to_mapping(), data, config)

        if isinstance(data, serializers.BaseSerializer):
            serialized = data.data
            if isinstance(serialized, list):
                return sequence_to_mapping(serialized)
            return self._ensure_mapping(serialized, data, config)

        if data is None:
            return {}

        if isinstance(data, str):
            return {config.message_key: data}

        if isinstance(data, Mapping):
            return dict(data)

        if isinstance(data, (list, tuple)):
            return sequence_to_mapping(data)

        if isinstance(data, enum.Enum):
            # 无 int/str 混入的枚举编码其 value
            value = data if isinstance(data, (int, float, str)) else data.value
            return {config.message_key: self.encode_scalar(value, config)}

        if hasattr(data, "__dict__"):
            return self.object_to_mapping(data, config)

        return {config.message_key: self.encode_scalar(data, config)}

    def model_key(self, instance: models.Model) -> str:
        """Model 实例在响应中的键名，如 UserProfile -> user_profile"""
        return snake_case(class_basename(instance))

    def model_to_mapping(self, instance: models.Model, config: ResponseConfig) -> dict[str, Any]:
        if isinstance(instance, Mappable):
            return self._ensure_mapping(instance.to_mapping(), instance, config)
        return model_to_dict(instance)

    def object_to_mapping(self, obj: Any, config: ResponseConfig) -> dict[str, Any]:
        """
        尽力把普通对象转换为字典

        转换失败时严格模式抛出 ApiResponseConversionError，否则记录警告并返回空字典
        """
        try:
            attrs = dataclasses.asdict(obj) if dataclasses.is_dataclass(obj) else public_attributes(obj)
            return json.loads(json.dumps(attrs, cls=PublicAttributesJSONEncoder))
        except (TypeError, ValueError) as e:
            return self._conversion_failed(obj, config, e, fallback={})

    def encode_scalar(self, value: Any, config: ResponseConfig) -> str:
        """把标量 JSON 编码为字符串，如 True -> "true"，1.5 -> "1.5" """
        try:
            return json.dumps(value, cls=DjangoJSONEncoder)
        except (TypeError, ValueError) as e:
            return self._conversion_failed(value, config, e, fallback=str(value))

    def _ensure_mapping(self, value: Any, source: Any, config: ResponseConfig) -> dict[str, Any]:
        if isinstance(value, Mapping):
            return dict(value)
        error = TypeError(f"expected a mapping, got {type(value).__name__}")
        return self._conversion_failed(source, config, error, fallback={})

    def _conversion_failed(self, value: Any, config: ResponseConfig, error: Exception, fallback: Any) -> Any:
        type_name = type(value).__name__
        if config.strict_conversion:
            raise ApiResponseConversionError(f"Failed to convert {type_name} to response data: {error}", value) from error
        logger.warning(f"Failed to convert {type_name} to response data, degraded to {fallback!r}: {error}")
        return fallback
