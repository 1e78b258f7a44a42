"""kyruusflow 异常定义模块."""


class KyruusFlowError(Exception):
    """kyruusflow 基础异常类."""

    pass


class InvalidFieldMappingError(KyruusFlowError):
    """字段映射配置异常（别名或接口字段名为空、别名冲突）."""

    pass
