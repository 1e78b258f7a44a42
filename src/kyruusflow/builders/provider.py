"""医生搜索查询构建器模块."""

from __future__ import annotations

from typing import Any

from kyruusflow.builders.query import QueryBuilder
from kyruusflow.core.constants import ProviderFilterField, QueryParam, SearchVector


class ProviderQueryBuilder(QueryBuilder):
    """
    医生搜索查询构建器.

    在 QueryBuilder 之上提供按业务名词命名的便捷方法，
    每个方法只是用固定的字段名调用通用的过滤、向量或参数操作。

    使用示例:
        query_string = (
            ProviderQueryBuilder()
            .specialties("Cardiology")
            .or_("Oncology")
            .accepting_new_patients()
            .page_size(20)
            .build()
        )
        # 输出: ?per_page=20&filter=specialties.specialty.untouched:Cardiology|Oncology
        #       &filter=accepting_new_patients:true
    """

    # ========== 向量 ==========

    def name(self, name: str) -> ProviderQueryBuilder:
        """按医生姓名搜索."""
        return self.set_vector(SearchVector.NAME, name)

    def specialty_synonym(self, synonym: str) -> ProviderQueryBuilder:
        """按专科同义词搜索."""
        return self.set_vector(SearchVector.SPECIALTY_SYNONYM, synonym)

    def clinical_experience(self, experience: str) -> ProviderQueryBuilder:
        """按临床经验（病症或医学术语）搜索."""
        return self.set_vector(SearchVector.CLINICAL_EXPERIENCE, experience)

    def practice_group(self, group: str) -> ProviderQueryBuilder:
        """按执业团体搜索."""
        return self.set_vector(SearchVector.PRACTICE_GROUP, group)

    def unified(self, value: str) -> ProviderQueryBuilder:
        """在所有向量上搜索，容忍拼写错误."""
        return self.set_vector(SearchVector.UNIFIED, value)

    # ========== 过滤条件 ==========

    def _filter_each(self, field: str, values: tuple[Any, ...]) -> ProviderQueryBuilder:
        for value in values:
            self.set_filter(field, value)
        return self

    def npis(self, *npis: str) -> ProviderQueryBuilder:
        return self._filter_each(ProviderFilterField.NPI, npis)

    def gender(self, gender: str) -> ProviderQueryBuilder:
        return self.set_filter(ProviderFilterField.GENDER, gender)

    def location_names(self, *locations: str) -> ProviderQueryBuilder:
        return self._filter_each(ProviderFilterField.LOCATION_NAME, locations)

    def city_locations(self, *cities: str) -> ProviderQueryBuilder:
        return self._filter_each(ProviderFilterField.LOCATION_CITY, cities)

    def specialties(self, *specialties: str) -> ProviderQueryBuilder:
        return self._filter_each(ProviderFilterField.SPECIALTY, specialties)

    def sub_specialties(self, *specialties: str) -> ProviderQueryBuilder:
        return self._filter_each(ProviderFilterField.SUBSPECIALTY, specialties)

    def practice_focus(self, *focuses: str) -> ProviderQueryBuilder:
        return self._filter_each(ProviderFilterField.PRACTICE_FOCUS, focuses)

    def languages(self, *languages: str) -> ProviderQueryBuilder:
        return self._filter_each(ProviderFilterField.LANGUAGE, languages)

    def accepting_new_patients(self, accepts: bool = True) -> ProviderQueryBuilder:
        """
        按是否接收新病人过滤.

        Args:
            accepts: 是否接收新病人，默认 True

        Returns:
            self，支持链式调用
        """
        return self.set_filter(ProviderFilterField.ACCEPTING_NEW_PATIENTS, accepts)

    # ========== 地点、排序与分页 ==========

    def near(self, place: Any, distance: Any) -> ProviderQueryBuilder:
        return self.set_location(place, distance)

    def shuffle(self, seed: str) -> ProviderQueryBuilder:
        """设置结果随机排序的种子."""
        return self.set_param(QueryParam.SHUFFLE_SEED, seed)

    def sort(self, field: str) -> ProviderQueryBuilder:
        return self.set_param(QueryParam.SORT, field)

    def page_size(self, size: int) -> ProviderQueryBuilder:
        """设置每页结果数."""
        return self.set_param(QueryParam.PER_PAGE, size)

    def page_number(self, number: int) -> ProviderQueryBuilder:
        """
        设置页码.

        返回结果为 [page_size * number, page_size * (number + 1) - 1]。

        Args:
            number: 页码

        Returns:
            self，支持链式调用
        """
        return self.set_param(QueryParam.PAGE, number)
