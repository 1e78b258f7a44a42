"""字段映射模块."""

from dataclasses import dataclass

from kyruusflow.core.constants import ProviderFilterField
from kyruusflow.exceptions import InvalidFieldMappingError
from kyruusflow.typing import FieldMappingDict


@dataclass(frozen=True)
class ProviderField:
    """过滤字段配置."""

    field: str  # 调用方使用的别名
    api_field: str  # Kyruus 接口实际字段名
    display: str = ""  # 显示名称


DEFAULT_PROVIDER_FIELDS = [
    ProviderField("npi", ProviderFilterField.NPI, "NPI"),
    ProviderField("gender", ProviderFilterField.GENDER, "Gender"),
    ProviderField("location_name", ProviderFilterField.LOCATION_NAME, "Location"),
    ProviderField("city", ProviderFilterField.LOCATION_CITY, "City"),
    ProviderField("specialty", ProviderFilterField.SPECIALTY, "Specialty"),
    ProviderField("subspecialty", ProviderFilterField.SUBSPECIALTY, "Sub-specialty"),
    ProviderField(
        "practice_focus", ProviderFilterField.PRACTICE_FOCUS, "Practice focus"
    ),
    ProviderField("language", ProviderFilterField.LANGUAGE, "Language"),
    ProviderField(
        "accepting_new_patients",
        ProviderFilterField.ACCEPTING_NEW_PATIENTS,
        "Accepting new patients",
    ),
]


class FieldMapper:
    """字段映射器."""

    def __init__(self, fields: list[ProviderField] | None = None):
        """
        初始化字段映射器.

        Args:
            fields: 字段配置列表

        Raises:
            InvalidFieldMappingError: 别名或接口字段名为空，或同一别名映射到不同字段时
        """
        self._fields: dict[str, ProviderField] = {}
        for f in fields or []:
            if not f.field or not f.api_field:
                raise InvalidFieldMappingError(f"字段别名和接口字段名不能为空: {f!r}")
            existing = self._fields.get(f.field)
            if existing is not None and existing.api_field != f.api_field:
                raise InvalidFieldMappingError(
                    f"字段别名 '{f.field}' 同时映射到 "
                    f"'{existing.api_field}' 和 '{f.api_field}'"
                )
            self._fields[f.field] = f

    @classmethod
    def from_dict(cls, mapping: FieldMappingDict) -> "FieldMapper":
        """根据 {别名: 接口字段名} 字典创建映射器."""
        return cls([ProviderField(field, api_field) for field, api_field in mapping.items()])

    @classmethod
    def default(cls) -> "FieldMapper":
        """创建包含医生搜索常用字段的映射器."""
        return cls(DEFAULT_PROVIDER_FIELDS)

    def get_api_field(self, field: str) -> str:
        """
        获取接口字段名.

        Args:
            field: 字段别名或接口字段名

        Returns:
            接口字段名，未配置的字段原样返回
        """
        if field in self._fields:
            return self._fields[field].api_field
        return field

    def get_display(self, field: str) -> str:
        """获取字段显示名称，未配置时返回字段名本身."""
        config = self._fields.get(field)
        if config is None or not config.display:
            return field
        return config.display

    def __contains__(self, field: object) -> bool:
        return field in self._fields

    def __len__(self) -> int:
        return len(self._fields)
