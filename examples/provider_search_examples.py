"""医生搜索查询使用示例.

本示例展示如何构建 Kyruus 医生搜索接口的查询字符串:
1. 通用构建器 (QueryBuilder): 直接操作字段、向量和参数
2. 便捷构建器 (ProviderQueryBuilder): 按业务名词组合查询
"""

from kyruusflow import Conjunction, FieldMapper, ProviderQueryBuilder, QueryBuilder, SearchVector


# ==================== 示例 1: 通用构建器 ====================
def example_query_builder():
    """示例: 分页 + 性别过滤 + 姓名向量."""
    builder = QueryBuilder()
    builder.set_param("per_page", 10)
    builder.set_filter("gender", "female", Conjunction.OR)
    builder.set_vector(SearchVector.NAME, "Smith")

    print(builder.serialize())
    # ?per_page=10&name=Smith&filter=gender:female


# ==================== 示例 2: OR 与 AND 组合 ====================
def example_conjunctions():
    """示例: 同一字段上先 OR 再 AND.

    场景: 专科为 Cardiology 或 Oncology，且接收新病人
    """
    builder = QueryBuilder(field_mapper=FieldMapper.default())
    builder.set_filter("specialty", "Cardiology").or_("Oncology")
    builder.with_({"accepting_new_patients": True})

    print(builder.serialize())
    # ?filter=specialties.specialty.untouched:Cardiology|Oncology^accepting_new_patients:true


# ==================== 示例 3: 便捷构建器 ====================
def example_provider_builder():
    """示例: 使用业务名词构建查询."""
    query_string = (
        ProviderQueryBuilder()
        .unified("cardiolgy")
        .city_locations("Boston", "Cambridge")
        .languages("Spanish")
        .accepting_new_patients()
        .sort("distance")
        .page_size(20)
        .page_number(1)
        .build()
    )
    print(query_string)


if __name__ == "__main__":
    # 运行所有示例
    example_query_builder()
    example_conjunctions()
    example_provider_builder()
