"""
通用测试 Fixture 定义

配置 Django 测试环境，并提供测试所需的配置、格式化器和 Mock 对象
"""

import django
import pytest
from django.conf import settings

# 配置 Django 设置（必须在导入 apiflex 之前完成）
if not settings.configured:
    settings.configure(
        DEBUG=True,
        SECRET_KEY="test-secret-key",
        USE_I18N=True,
        USE_TZ=True,
        ALLOWED_HOSTS=["*"],
        INSTALLED_APPS=[
            "django.contrib.contenttypes",
            "django.contrib.auth",
            "rest_framework",
        ],
        DATABASES={"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}},
        DEFAULT_AUTO_FIELD="django.db.models.AutoField",
        REST_FRAMEWORK={
            "EXCEPTION_HANDLER": "apiflex.handlers.exception_handler",
            "DEFAULT_AUTHENTICATION_CLASSES": [],
            "DEFAULT_PERMISSION_CLASSES": [],
            "UNAUTHENTICATED_USER": None,
        },
    )
    django.setup()

from apiflex.config import ResponseConfig, reload_response_config  # noqa: E402
from apiflex.formatter import DefaultResponseFormatter  # noqa: E402


@pytest.fixture(autouse=True)
def reset_response_config():
    """每个测试前后清除缓存的响应配置，避免用例之间相互影响"""
    reload_response_config()
    yield
    reload_response_config()


@pytest.fixture
def config():
    """默认响应配置"""
    return ResponseConfig()


@pytest.fixture
def custom_config():
    """自定义键名和状态码的响应配置"""
    return ResponseConfig(code_key="status", message_key="message", success_code=0, error_code=500)


@pytest.fixture
def strict_config():
    """严格转换模式的响应配置"""
    return ResponseConfig(strict_conversion=True)


@pytest.fixture
def formatter():
    """DefaultResponseFormatter 实例"""
    return DefaultResponseFormatter()
