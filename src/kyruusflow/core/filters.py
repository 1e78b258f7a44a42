"""
过滤节点模块

FilterNode 保存单个字段上累积的过滤值及其连接符，负责合并、追加、删除和序列化。
节点中的每一项是 Scalar（单个值）或嵌套的 FilterNode，二者在各操作中分别处理。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from kyruusflow.core.operators import Conjunction
from kyruusflow.core.utils import stringify_value


@dataclass(frozen=True)
class Scalar:
    """单个过滤值."""

    value: str

    def serialize(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


FilterTerm = Union[Scalar, "FilterNode"]


def _to_term(value: Any) -> FilterTerm:
    """将任意值转换为一个节点项."""
    if isinstance(value, FilterNode):
        return value.copy()
    if isinstance(value, Scalar):
        return value
    return Scalar(stringify_value(value))


class FilterNode:
    """
    单字段过滤节点.

    使用示例:
        node = FilterNode("Cardiology")
        node.append("Oncology")
        str(node)
        # 输出: Cardiology|Oncology

        wrapped = FilterNode(node, Conjunction.AND).append("accepting:true")
        str(wrapped)
        # 输出: Cardiology|Oncology^accepting:true
    """

    def __init__(self, value: Any = None, conjunction: Conjunction | str = Conjunction.OR):
        """
        初始化过滤节点.

        Args:
            value: 初始值。单个值会被包装为只含一项的序列；list/tuple 逐项转换；
                   FilterNode 作为一个嵌套项保留。None 不产生任何项
            conjunction: 连接符，无法识别时视为 OR
        """
        self._conjunction = Conjunction.normalize(conjunction)
        self._values: list[FilterTerm] = []

        if value is None:
            return
        if isinstance(value, (list, tuple)):
            self._values = [_to_term(v) for v in value if v is not None]
        else:
            self._values = [_to_term(value)]

    @classmethod
    def create(
        cls, value: Any, conjunction: Conjunction | str = Conjunction.OR
    ) -> FilterNode:
        """创建过滤节点."""
        return cls(value, conjunction)

    @property
    def conjunction(self) -> Conjunction:
        """节点连接符."""
        return self._conjunction

    @property
    def values(self) -> tuple[FilterTerm, ...]:
        """节点中的各项，按插入顺序."""
        return tuple(self._values)

    def check_conjunction(self, conjunction: Conjunction | str) -> bool:
        """判断节点连接符是否与给定连接符一致."""
        return self._conjunction is Conjunction.normalize(conjunction)

    def append(self, value: Any) -> FilterNode:
        """
        向节点追加值.

        - value 是连接符相同的 FilterNode 时，两个序列取并集（去重，保留首次出现顺序）
        - 其他情况（包括连接符不同的 FilterNode）作为新的一项直接追加，不做类型校验
        - None 不产生任何项

        Args:
            value: 要追加的值或节点

        Returns:
            self，支持链式调用
        """
        if value is None:
            return self
        if isinstance(value, FilterNode) and value.conjunction is self._conjunction:
            self._union(value._values)
        else:
            self._values.append(_to_term(value))
        return self

    def _union(self, terms: list[FilterTerm]) -> None:
        merged: list[FilterTerm] = []
        for term in [*self._values, *terms]:
            if term not in merged:
                merged.append(term)
        self._values = merged

    def remove(self, value: Any) -> FilterNode:
        """
        从节点中删除值.

        删除所有相等的单值项，并递归进入嵌套节点；被删空的嵌套节点随之移除。
        value 为 FilterNode 或 list/tuple 时逐个删除其中的各项。值不存在或为 None 时不做任何处理。

        Args:
            value: 要删除的值或节点

        Returns:
            self，支持链式调用
        """
        if isinstance(value, FilterNode):
            for term in value._values:
                self.remove(term)
            return self
        if isinstance(value, (list, tuple)):
            for v in value:
                self.remove(v)
            return self
        if value is None:
            return self

        target = _to_term(value)
        kept: list[FilterTerm] = []
        for term in self._values:
            if isinstance(term, FilterNode):
                term.remove(target)
                if not term.is_empty():
                    kept.append(term)
            elif term != target:
                kept.append(term)
        self._values = kept
        return self

    def serialize(self) -> str:
        """
        序列化节点.

        各项按插入顺序以连接符拼接，嵌套节点递归序列化，不加括号也不转义。

        Returns:
            序列化后的字符串
        """
        return self._conjunction.separator.join(
            term.serialize() for term in self._values
        )

    def copy(self) -> FilterNode:
        """深拷贝节点."""
        node = FilterNode(conjunction=self._conjunction)
        node._values = [
            term.copy() if isinstance(term, FilterNode) else term
            for term in self._values
        ]
        return node

    def is_empty(self) -> bool:
        """检查节点是否为空."""
        return len(self._values) == 0

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterNode):
            return NotImplemented
        return (
            self._conjunction is other._conjunction and self._values == other._values
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        if self.is_empty():
            return f"<FilterNode {self._conjunction.name}: (empty)>"
        return f"<FilterNode {self._conjunction.name}: {self.serialize()}>"
