"""
API 响应常量配置模块

定义响应信封使用的默认键名、业务状态码和配置项名称
"""

# Django 配置项名称（类似 DRF 的 REST_FRAMEWORK）
SETTINGS_NAME = "API_RESPONSE"

# 配置项中的键
SETTING_CODE_KEY = "CODE_KEY"
SETTING_MESSAGE_KEY = "MESSAGE_KEY"
SETTING_SUCCESS_CODE = "SUCCESS_CODE"
SETTING_ERROR_CODE = "ERROR_CODE"
SETTING_STRICT_CONVERSION = "STRICT_CONVERSION"

# 默认键名
DEFAULT_CODE_KEY = "code"  # 业务状态码字段名
DEFAULT_MESSAGE_KEY = "msg"  # 消息字段名

# 业务状态码（与 HTTP 状态码无关）
RESPONSE_CODE_SUCCESS = 1  # 默认成功码
RESPONSE_CODE_ERROR = -1  # ApiResponseException 默认错误码

# 默认 HTTP 状态码：业务结果通过响应体中的 code 表达，传输层固定 200
DEFAULT_HTTP_STATUS = 200

# 转换失败时是否抛出异常
DEFAULT_STRICT_CONVERSION = False

# 默认配置字典
DEFAULTS = {
    SETTING_CODE_KEY: DEFAULT_CODE_KEY,
    SETTING_MESSAGE_KEY: DEFAULT_MESSAGE_KEY,
    SETTING_SUCCESS_CODE: RESPONSE_CODE_SUCCESS,
    SETTING_ERROR_CODE: RESPONSE_CODE_ERROR,
    SETTING_STRICT_CONVERSION: DEFAULT_STRICT_CONVERSION,
}

# 清理路径分隔符
KEY_PATH_SEPARATOR = "."
