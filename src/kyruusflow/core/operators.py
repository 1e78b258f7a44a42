"""Kyruus 过滤条件连接符定义模块."""

from enum import Enum
from typing import Any


class Conjunction(str, Enum):
    """同一字段多个值之间的连接符.

    Kyruus 的 filter 语法中，OR 使用 ``|``，AND 使用 ``^``。
    """

    OR = "|"
    AND = "^"

    @property
    def separator(self) -> str:
        """序列化时使用的分隔符."""
        return self.value

    @classmethod
    def normalize(cls, conjunction: Any) -> "Conjunction":
        """
        将外部传入的连接符统一为 Conjunction.

        支持枚举本身、分隔符字面量（``|`` / ``^``）以及名称（``or`` / ``and``，
        不区分大小写）。无法识别的值一律视为 OR，不抛出异常。

        Args:
            conjunction: 待转换的连接符

        Returns:
            Conjunction 枚举值
        """
        if isinstance(conjunction, cls):
            return conjunction
        if isinstance(conjunction, str):
            token = conjunction.strip().lower()
            if token in ("^", "and"):
                return cls.AND
        return cls.OR
