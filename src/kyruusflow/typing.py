"""kyruusflow 类型定义模块."""

from typing import Any, Dict, Mapping

# 过滤值类型：单个值、值列表或 FilterNode
FilterValue = Any

# 参数值类型
ParamValue = Any

# with_ 使用的组合条件，格式: {子字段: 值}
ConditionGroupDict = Mapping[str, Any]

# 字段别名映射字典类型
# 格式: {别名: 接口字段名}
FieldMappingDict = Dict[str, str]
