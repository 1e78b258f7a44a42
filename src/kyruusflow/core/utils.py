"""
kyruusflow 工具函数模块

提供查询值相关的工具函数
"""

from typing import Any


def stringify_value(value: Any) -> str:
    """
    将过滤值或参数值转换为查询字符串中使用的文本.

    布尔值输出为 Kyruus 接口要求的小写形式，其余值直接使用 ``str()``。
    不做任何转义：值中包含 ``&``、``=``、``|``、``^`` 时原样输出。

    示例:
        >>> stringify_value(True)
        'true'
        >>> stringify_value(10)
        '10'
        >>> stringify_value("female")
        'female'

    Args:
        value: 原始值

    Returns:
        文本形式的值
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return str(value)
