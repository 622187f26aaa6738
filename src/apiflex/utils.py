"""工具函数模块

提供键名转换、"点"路径取值/赋值以及空值清理等实用功能
"""

from __future__ import annotations

import copy
import logging
import re
from typing import Any, Iterable

from apiflex.constants import KEY_PATH_SEPARATOR

logger = logging.getLogger(__name__)

_MISSING = object()

_FIRST_CAP_RE = re.compile(r"(.)([A-Z][a-z]+)")
_ALL_CAP_RE = re.compile(r"([a-z0-9])([A-Z])")


def snake_case(name: str) -> str:
    """
    将驼峰命名转换为下划线命名

    示例:
        >>> snake_case("UserProfile")
        "user_profile"
        >>> snake_case("HTTPRequestLog")
        "http_request_log"
    """
    name = _FIRST_CAP_RE.sub(r"\1_\2", name)
    return _ALL_CAP_RE.sub(r"\1_\2", name).lower()


def class_basename(obj: Any) -> str:
    """返回对象（或类）不带模块路径的类名"""
    cls = obj if isinstance(obj, type) else type(obj)
    return cls.__name__


def sequence_to_mapping(items: Iterable[Any]) -> dict[str, Any]:
    """
    将序列转换为以字符串下标为键的字典

    示例:
        >>> sequence_to_mapping(["a", "b"])
        {"0": "a", "1": "b"}
    """
    return {str(index): item for index, item in enumerate(items)}


def _locate(data: Any, key: str) -> tuple[Any, Any] | None:
    """
    定位"点"路径对应的容器和槽位

    优先按字面量键查找（键名本身可能包含"."），找不到再按路径逐级向下查找；
    列表层级使用非负整数下标。

    返回:
        (容器, 键或下标)，路径无法解析时返回 None
    """
    if isinstance(data, dict) and key in data:
        return data, key
    if not isinstance(key, str):
        return None

    segments = key.split(KEY_PATH_SEPARATOR)
    container = data
    for index, segment in enumerate(segments):
        if isinstance(container, dict):
            if segment not in container:
                return None
            slot = segment
        elif isinstance(container, list):
            if not segment.isdigit() or int(segment) >= len(container):
                return None
            slot = int(segment)
        else:
            return None

        if index == len(segments) - 1:
            return container, slot
        container = container[slot]

    return None


def data_get(data: Any, key: str, default: Any = None) -> Any:
    """
    使用"点"路径从嵌套字典/列表中取值

    参数:
        data: 嵌套的字典或列表
        key: "点"路径，如 "user.tags.0"
        default: 路径无法解析时的返回值

    示例:
        >>> data_get({"user": {"name": "Bob"}}, "user.name")
        "Bob"
    """
    location = _locate(data, key)
    if location is None:
        return default
    container, slot = location
    return container[slot]


def data_set(data: Any, key: str, value: Any) -> bool:
    """
    使用"点"路径为已存在的位置赋值

    返回:
        路径可解析并已赋值时返回 True，否则返回 False（不会创建中间层级）
    """
    location = _locate(data, key)
    if location is None:
        return False
    container, slot = location
    container[slot] = value
    return True


def filter_empty(value: dict | list | tuple) -> dict | list:
    """
    过滤容器中的假值元素（None、False、0、""、空容器），只处理一层

    示例:
        >>> filter_empty({"x": 1, "y": None, "z": []})
        {"x": 1}
        >>> filter_empty([0, 1, "", "a"])
        [1, "a"]
    """
    if isinstance(value, dict):
        return {k: v for k, v in value.items() if v}
    return [item for item in value if item]


def clean_data(data: dict[str, Any], keys: Iterable[str] | None = None) -> dict[str, Any]:
    """
    清理指定路径上的空值

    对每个路径：若路径上的值是字典或列表，则替换为过滤掉假值后的副本；
    非容器值保持不变，无法解析的路径直接跳过。

    参数:
        data: 响应数据字典
        keys: "点"路径列表，为空时表示清理所有根键对应的值

    返回:
        清理后的新字典（不修改原字典）

    示例:
        >>> clean_data({"a": {"x": 1, "y": None}, "b": ""}, [])
        {"a": {"x": 1}, "b": ""}
    """
    result = copy.deepcopy(data)
    keys = list(keys or []) or list(result.keys())

    for key in keys:
        value = data_get(result, key, _MISSING)
        if isinstance(value, (dict, list, tuple)):
            data_set(result, key, filter_empty(value))
        elif value is _MISSING:
            logger.debug(f"Clean path not found, skipped: {key}")

    return result
