"""kyruusflow - Kyruus Provider Search Query String Builder.

这是一个用于构建 Kyruus 医生搜索接口查询字符串的 Python 库。

主要功能:
    - QueryBuilder: 组合字段过滤条件、搜索向量和分页排序参数，输出查询字符串
    - ProviderQueryBuilder: 按业务名词（专科、性别、语言等）命名的便捷构建器
    - FilterNode: 单字段过滤节点，支持 OR (|) 与 AND (^) 两种连接符

使用示例:
    from kyruusflow import QueryBuilder, Conjunction

    builder = QueryBuilder()
    builder.set_filter("specialties", "Cardiology").or_("Oncology")
    query_string = builder.serialize()
    # 输出: ?filter=specialties:Cardiology|Oncology
"""

__version__ = "0.1.0"

# 导出构建器
from kyruusflow.builders import (
    LocationConstraint,
    ProviderQueryBuilder,
    QueryBuilder,
    VectorSelection,
)

# 导出核心组件
from kyruusflow.core import (
    DEFAULT_PROVIDER_FIELDS,
    Conjunction,
    FieldMapper,
    FilterNode,
    ProviderField,
    ProviderFilterField,
    QueryParam,
    Scalar,
    SearchVector,
)

# 导出异常
from kyruusflow.exceptions import InvalidFieldMappingError, KyruusFlowError

__all__ = [
    # 版本
    "__version__",
    # 构建器
    "QueryBuilder",
    "ProviderQueryBuilder",
    "VectorSelection",
    "LocationConstraint",
    # 枚举与常量
    "Conjunction",
    "SearchVector",
    "QueryParam",
    "ProviderFilterField",
    # 核心组件
    "FilterNode",
    "Scalar",
    "ProviderField",
    "FieldMapper",
    "DEFAULT_PROVIDER_FIELDS",
    # 异常
    "KyruusFlowError",
    "InvalidFieldMappingError",
]
