"""核心模块导出."""

from kyruusflow.core.constants import (
    ProviderFilterField,
    QueryParam,
    QueryStringCharacters,
    SearchVector,
)
from kyruusflow.core.fields import DEFAULT_PROVIDER_FIELDS, FieldMapper, ProviderField
from kyruusflow.core.filters import FilterNode, FilterTerm, Scalar
from kyruusflow.core.operators import Conjunction
from kyruusflow.core.utils import stringify_value

__all__ = [
    "Conjunction",
    "SearchVector",
    "QueryParam",
    "ProviderFilterField",
    "QueryStringCharacters",
    "FilterNode",
    "FilterTerm",
    "Scalar",
    "ProviderField",
    "FieldMapper",
    "DEFAULT_PROVIDER_FIELDS",
    "stringify_value",
]
