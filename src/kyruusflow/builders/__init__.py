"""构建器模块导出."""

from kyruusflow.builders.provider import ProviderQueryBuilder
from kyruusflow.builders.query import LocationConstraint, QueryBuilder, VectorSelection

__all__ = [
    "QueryBuilder",
    "ProviderQueryBuilder",
    "VectorSelection",
    "LocationConstraint",
]
