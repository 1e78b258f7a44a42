"""Kyruus 查询常量定义模块."""

from enum import Enum


class SearchVector(str, Enum):
    """Kyruus 搜索向量.

    向量是一种支持部分匹配、词序颠倒等灵活匹配方式的搜索参数，
    结果按质量与相关度排序。一次查询最多只能使用一个向量。

    Attributes:
        NAME: 医生姓名（名、姓或全名）
        SPECIALTY_SYNONYM: 专科同义词
        CLINICAL_EXPERIENCE: 临床经验（病症或医学术语）
        PRACTICE_GROUP: 执业团体
        UNIFIED: 在以上所有向量上搜索，并容忍拼写错误
    """

    NAME = "name"
    SPECIALTY_SYNONYM = "specialty.synonym"
    CLINICAL_EXPERIENCE = "clinical.experience"
    PRACTICE_GROUP = "practice.group"
    UNIFIED = "unified"


class QueryParam:
    """分页、排序等查询参数名."""

    SHUFFLE_SEED = "shuffle_seed"
    SORT = "sort"
    PER_PAGE = "per_page"
    PAGE = "page"


class ProviderFilterField:
    """医生搜索可过滤的字段名."""

    NPI = "npi"
    GENDER = "gender"
    LOCATION_NAME = "locations.name"
    LOCATION_CITY = "locations.city"
    SPECIALTY = "specialties.specialty.untouched"
    SUBSPECIALTY = "specialties.subspecialty.untouched"
    PRACTICE_FOCUS = "specialties.practice_focus.untouched"
    LANGUAGE = "languages.language"
    ACCEPTING_NEW_PATIENTS = "accepting_new_patients"


class QueryStringCharacters:
    """查询字符串拼接用到的字面量."""

    PREFIX = "?"
    TERM_SEPARATOR = "&"
    KEY_VALUE_SEPARATOR = "="
    FILTER_KEY = "filter"
    FIELD_VALUE_SEPARATOR = ":"
