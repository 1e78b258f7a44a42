"""ProviderQueryBuilder 单元测试."""

from kyruusflow import LocationConstraint, ProviderQueryBuilder, QueryBuilder


class TestProviderQueryBuilderVectors:
    """向量便捷方法测试."""

    def test_name(self):
        """测试姓名向量."""
        assert ProviderQueryBuilder().name("Smith").build() == "?name=Smith"

    def test_only_last_vector_active(self):
        """测试只保留最后设置的向量."""
        builder = (
            ProviderQueryBuilder()
            .specialty_synonym("heart")
            .clinical_experience("asthma")
            .practice_group("Group A")
            .unified("Jane")
        )
        assert builder.build() == "?unified=Jane"

    def test_each_vector_token(self):
        """测试各向量字段名."""
        assert ProviderQueryBuilder().specialty_synonym("x").build() == "?specialty.synonym=x"
        assert ProviderQueryBuilder().clinical_experience("x").build() == "?clinical.experience=x"
        assert ProviderQueryBuilder().practice_group("x").build() == "?practice.group=x"


class TestProviderQueryBuilderFilters:
    """过滤便捷方法测试."""

    def test_npis(self):
        """测试 NPI 过滤."""
        builder = ProviderQueryBuilder().npis("1234567890", "0987654321")
        assert builder.build() == "?filter=npi:1234567890|0987654321"

    def test_gender(self):
        """测试性别过滤."""
        assert ProviderQueryBuilder().gender("female").build() == "?filter=gender:female"

    def test_specialties_with_or(self):
        """测试专科过滤与 or_ 组合."""
        builder = ProviderQueryBuilder().specialties("Cardiology").or_("Oncology")
        assert (
            builder.build()
            == "?filter=specialties.specialty.untouched:Cardiology|Oncology"
        )

    def test_locations(self):
        """测试地点相关过滤."""
        builder = (
            ProviderQueryBuilder()
            .location_names("Main Campus")
            .city_locations("Boston", "Cambridge")
        )
        assert builder.build() == (
            "?filter=locations.name:Main Campus"
            "&filter=locations.city:Boston|Cambridge"
        )

    def test_sub_specialties_and_focus(self):
        """测试亚专科与执业方向过滤."""
        builder = (
            ProviderQueryBuilder()
            .sub_specialties("Interventional Cardiology")
            .practice_focus("Heart Failure", "Arrhythmia")
        )
        assert builder.build() == (
            "?filter=specialties.subspecialty.untouched:Interventional Cardiology"
            "&filter=specialties.practice_focus.untouched:Heart Failure|Arrhythmia"
        )

    def test_languages(self):
        """测试语言过滤."""
        builder = ProviderQueryBuilder().languages("English", "Spanish")
        assert builder.build() == "?filter=languages.language:English|Spanish"

    def test_accepting_new_patients(self):
        """测试是否接收新病人过滤."""
        assert (
            ProviderQueryBuilder().accepting_new_patients().build()
            == "?filter=accepting_new_patients:true"
        )
        assert (
            ProviderQueryBuilder().accepting_new_patients(False).build()
            == "?filter=accepting_new_patients:false"
        )

    def test_matches_core_calls(self):
        """测试便捷方法与直接调用核心方法结果一致."""
        provider = ProviderQueryBuilder().gender("male").languages("English")
        core = (
            QueryBuilder()
            .set_filter("gender", "male")
            .set_filter("languages.language", "English")
        )
        assert provider.build() == core.serialize()


class TestProviderQueryBuilderParams:
    """分页、排序与地点测试."""

    def test_paging_and_sorting(self):
        """测试分页排序参数."""
        builder = (
            ProviderQueryBuilder()
            .shuffle("abc")
            .sort("distance")
            .page_size(20)
            .page_number(2)
        )
        assert builder.build() == "?shuffle_seed=abc&sort=distance&per_page=20&page=2"

    def test_location(self):
        """测试地点约束."""
        builder = ProviderQueryBuilder().near("02139", 5)
        assert builder.location == LocationConstraint(place="02139", distance=5)

    def test_full_query(self):
        """测试完整查询."""
        builder = (
            ProviderQueryBuilder()
            .page_size(10)
            .gender("female")
            .name("Smith")
            .specialties("Cardiology")
            .with_({"accepting_new_patients": True})
        )
        assert builder.build() == (
            "?per_page=10&name=Smith&filter=gender:female"
            "&filter=specialties.specialty.untouched:Cardiology^accepting_new_patients:true"
        )

    def test_remove_field(self):
        """测试移除字段."""
        builder = ProviderQueryBuilder().page_size(10).gender("female").remove("per_page")
        assert builder.build() == "?filter=gender:female"
