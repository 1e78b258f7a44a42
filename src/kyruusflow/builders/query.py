"""Kyruus 查询构建器模块."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from kyruusflow.core.constants import QueryStringCharacters, SearchVector
from kyruusflow.core.fields import FieldMapper
from kyruusflow.core.filters import FilterNode
from kyruusflow.core.operators import Conjunction
from kyruusflow.core.utils import stringify_value
from kyruusflow.typing import ConditionGroupDict, FilterValue, ParamValue

# 模块级别日志记录器
logger = logging.getLogger(__name__)


def _name(field: Any) -> str:
    """枚举取其值，其余转为字符串."""
    if isinstance(field, Enum):
        return str(field.value)
    return str(field)


@dataclass(frozen=True)
class VectorSelection:
    """当前生效的搜索向量."""

    field: str | None = None
    value: Any = None

    @property
    def is_set(self) -> bool:
        """字段和值都为真值时向量才会输出（0、False、空字符串都视为未设置）."""
        return bool(self.field) and bool(self.value)


@dataclass(frozen=True)
class LocationConstraint:
    """地点及距离约束."""

    place: Any = None
    distance: Any = None


class QueryBuilder:
    """
    Kyruus 查询字符串构建器.

    维护字段过滤条件、唯一的搜索向量、地点约束以及分页排序等参数，
    最终拼接为 Kyruus 搜索接口使用的查询字符串。所有修改方法都返回 self。

    使用示例:
        builder = QueryBuilder()
        builder.set_param("per_page", 10)
        builder.set_filter("gender", "female")
        builder.set_vector(SearchVector.NAME, "Smith")

        query_string = builder.serialize()
        # 输出: ?per_page=10&name=Smith&filter=gender:female
    """

    def __init__(
        self,
        field_mapper: FieldMapper | None = None,
        default_conjunction: Conjunction | str = Conjunction.OR,
    ):
        """
        初始化构建器.

        Args:
            field_mapper: 字段映射器，过滤字段名会先经过映射
            default_conjunction: set_filter 未指定连接符时使用的连接符，默认 OR
        """
        self._field_mapper = field_mapper or FieldMapper()
        self._default_conjunction = Conjunction.normalize(default_conjunction)

        # Kyruus 同一字段只对应一个过滤节点
        self._filters: dict[str, FilterNode] = {}
        # Kyruus 一次只允许一个向量
        self._vector = VectorSelection()
        self._location = LocationConstraint()
        self._params: dict[str, ParamValue] = {}
        self._current_field: str | None = None

    # ========== 只读属性 ==========

    @property
    def filters(self) -> dict[str, FilterNode]:
        """过滤条件副本."""
        return {field: node.copy() for field, node in self._filters.items()}

    @property
    def vector(self) -> VectorSelection:
        return self._vector

    @property
    def location(self) -> LocationConstraint:
        return self._location

    @property
    def params(self) -> dict[str, ParamValue]:
        return dict(self._params)

    @property
    def current_field(self) -> str | None:
        """最近一次写入的过滤字段，or_ / with_ 作用于该字段."""
        return self._current_field

    # ========== 过滤条件 ==========

    def set_filter(
        self,
        field: str,
        value: FilterValue,
        conjunction: Conjunction | str | None = None,
    ) -> QueryBuilder:
        """
        添加过滤条件.

        - 字段尚无过滤节点时，新建节点
        - 已有节点的连接符与本次相同时，追加到该节点
        - 连接符不同时，把已有节点整体作为新节点的第一项，新节点使用本次连接符，
          再追加本次的值。这是同一字段上 OR 与 AND 共存的唯一方式
        - 值为 None 时不产生任何过滤项，新字段也不会被创建

        Args:
            field: 字段名（会经过字段映射）
            value: 过滤值，可以是单个值、值列表或 FilterNode
            conjunction: 连接符，默认使用构建器的 default_conjunction

        Returns:
            self，支持链式调用
        """
        field = self._field_mapper.get_api_field(_name(field))
        if conjunction is None:
            conjunction = self._default_conjunction
        conjunction = Conjunction.normalize(conjunction)

        node = self._filters.get(field)
        if node is None:
            node = FilterNode.create(value, conjunction)
            if not node.is_empty():
                self._filters[field] = node
        else:
            if not node.check_conjunction(conjunction):
                logger.debug(
                    f"字段 {field} 连接符由 {node.conjunction.name} 变为 {conjunction.name}，"
                    "重新包装已有条件"
                )
                node = FilterNode.create(node, conjunction)
                self._filters[field] = node
            self._append(node, value)

        self._current_field = field
        return self

    @staticmethod
    def _append(node: FilterNode, value: FilterValue) -> None:
        if isinstance(value, (list, tuple)):
            for v in value:
                node.append(v)
        else:
            node.append(value)

    def or_(self, *values: FilterValue) -> QueryBuilder:
        """
        以 OR 关系向当前过滤字段追加值.

        Args:
            *values: 要追加的值

        Returns:
            self，支持链式调用
        """
        if self._current_field is None:
            logger.warning(f"没有当前过滤字段，跳过 OR 条件: {values}")
            return self

        for value in values:
            self.set_filter(self._current_field, value, Conjunction.OR)
        return self

    def with_(self, *groups: ConditionGroupDict) -> QueryBuilder:
        """
        以 AND 关系向当前过滤字段追加 ``子字段:值`` 形式的条件.

        注意: Kyruus 的 AND 只能作用于同一对象类型的字段，此处不做校验。

        Args:
            *groups: {子字段: 值} 字典

        Returns:
            self，支持链式调用
        """
        if self._current_field is None:
            logger.warning(f"没有当前过滤字段，跳过 AND 条件: {groups}")
            return self

        for group in groups:
            for key, value in group.items():
                self.set_filter(
                    self._current_field,
                    f"{_name(key)}{QueryStringCharacters.FIELD_VALUE_SEPARATOR}"
                    f"{stringify_value(value)}",
                    Conjunction.AND,
                )
        return self

    def remove_from_filter(self, field: str, value: FilterValue) -> QueryBuilder:
        """
        从字段的过滤条件中删除值.

        字段不存在或值不存在时不做任何处理；删除后节点为空则移除该字段。

        Args:
            field: 字段名
            value: 要删除的值

        Returns:
            self，支持链式调用
        """
        field = self._field_mapper.get_api_field(_name(field))
        node = self._filters.get(field)
        if node is None:
            return self

        node.remove(value)
        if node.is_empty():
            logger.debug(f"字段 {field} 的过滤条件已清空，移除该字段")
            del self._filters[field]
        return self

    def delete(self, field: str) -> QueryBuilder:
        """
        从过滤条件、参数和向量中移除字段.

        Args:
            field: 字段名

        Returns:
            self，支持链式调用
        """
        name = _name(field)
        api_field = self._field_mapper.get_api_field(name)

        self._filters.pop(api_field, None)
        self._params.pop(name, None)
        if self._vector.field in (name, api_field):
            self.clear_vector()
        return self

    def remove(self, field: str) -> QueryBuilder:
        """delete 的别名."""
        return self.delete(field)

    # ========== 向量、地点与参数 ==========

    def set_vector(self, field: SearchVector | str, value: Any) -> QueryBuilder:
        """
        设置搜索向量，覆盖之前的向量.

        Args:
            field: 向量字段，通常为 SearchVector
            value: 向量要匹配的值

        Returns:
            self，支持链式调用
        """
        field = _name(field)
        if self._vector.is_set and self._vector.field != field:
            logger.debug(f"搜索向量由 {self._vector.field} 替换为 {field}")
        self._vector = VectorSelection(field=field, value=value)
        return self

    def clear_vector(self) -> QueryBuilder:
        """清除搜索向量."""
        self._vector = VectorSelection()
        return self

    def set_location(self, place: Any, distance: Any) -> QueryBuilder:
        """设置地点及距离约束，覆盖之前的约束."""
        self._location = LocationConstraint(place=place, distance=distance)
        return self

    def clear_location(self) -> QueryBuilder:
        """清除地点约束."""
        self._location = LocationConstraint()
        return self

    def set_param(self, name: str, value: ParamValue) -> QueryBuilder:
        """
        设置查询参数（分页、排序、随机种子等），覆盖同名参数.

        Args:
            name: 参数名
            value: 参数值

        Returns:
            self，支持链式调用
        """
        self._params[_name(name)] = value
        return self

    # ========== 序列化 ==========

    def serialize(self) -> str:
        """
        构建查询字符串.

        依次输出参数、向量和过滤条件，以 ``&`` 连接并加上 ``?`` 前缀；
        没有任何内容时返回空字符串。键和值都不做 URL 编码。

        Returns:
            查询字符串
        """
        terms = [self._term(key, value) for key, value in self._params.items()]

        if self._vector.is_set:
            terms.append(self._term(self._vector.field, self._vector.value))

        for field, node in self._filters.items():
            terms.append(
                self._term(
                    QueryStringCharacters.FILTER_KEY,
                    f"{field}{QueryStringCharacters.FIELD_VALUE_SEPARATOR}{node.serialize()}",
                )
            )

        if not terms:
            return ""
        return QueryStringCharacters.PREFIX + QueryStringCharacters.TERM_SEPARATOR.join(
            terms
        )

    @staticmethod
    def _term(key: Any, value: Any) -> str:
        return f"{key}{QueryStringCharacters.KEY_VALUE_SEPARATOR}{stringify_value(value)}"

    def build(self) -> str:
        """serialize 的别名."""
        return self.serialize()

    def clear(self) -> QueryBuilder:
        """清空所有过滤条件、向量、地点约束和参数."""
        self._filters.clear()
        self._vector = VectorSelection()
        self._location = LocationConstraint()
        self._params.clear()
        self._current_field = None
        return self

    def is_empty(self) -> bool:
        """检查构建器是否没有任何会被输出的内容."""
        return not self._filters and not self._params and not self._vector.is_set

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        if self.is_empty():
            return f"<{type(self).__name__}: (empty)>"
        return f"<{type(self).__name__}: {self.serialize()}>"
