"""FilterNode 单元测试."""

from kyruusflow import Conjunction, FilterNode, Scalar


class TestFilterNodeCreate:
    """FilterNode 创建测试."""

    def test_scalar_lifted(self):
        """测试单个值包装为单项序列."""
        node = FilterNode.create("female")
        assert node.values == (Scalar("female"),)
        assert node.conjunction is Conjunction.OR

    def test_list_value(self):
        """测试列表值逐项转换."""
        node = FilterNode(["a", "b", "a"])
        assert str(node) == "a|b|a"

    def test_and_conjunction(self):
        """测试 AND 连接符."""
        node = FilterNode(["a", "b"], Conjunction.AND)
        assert node.serialize() == "a^b"

    def test_conjunction_tokens(self):
        """测试字符串形式的连接符."""
        assert FilterNode("a", "^").conjunction is Conjunction.AND
        assert FilterNode("a", "and").conjunction is Conjunction.AND
        assert FilterNode("a", "|").conjunction is Conjunction.OR

    def test_unknown_conjunction_falls_back_to_or(self):
        """测试无法识别的连接符视为 OR."""
        node = FilterNode(["a", "b"], "xor")
        assert node.conjunction is Conjunction.OR
        assert str(node) == "a|b"

    def test_bool_value(self):
        """测试布尔值输出为小写."""
        assert str(FilterNode(True)) == "true"
        assert str(FilterNode(False)) == "false"

    def test_node_seed_is_nested(self):
        """测试以节点为初始值时作为一个嵌套项."""
        inner = FilterNode(["a", "b"])
        outer = FilterNode(inner, Conjunction.AND)
        assert len(outer) == 1
        assert outer.values[0] == inner


class TestFilterNodeAppend:
    """FilterNode 追加测试."""

    def test_append_scalar(self):
        """测试追加单个值."""
        node = FilterNode("a").append("b").append("a")
        assert str(node) == "a|b|a"

    def test_append_same_conjunction_node_unions(self):
        """测试追加相同连接符的节点时取并集."""
        node = FilterNode(["a", "b", "a"])
        node.append(FilterNode(["b", "c"]))
        assert node.values == (Scalar("a"), Scalar("b"), Scalar("c"))
        assert str(node) == "a|b|c"

    def test_append_different_conjunction_node_nests(self):
        """测试追加不同连接符的节点时作为一项追加."""
        node = FilterNode("a")
        node.append(FilterNode(["b", "c"], Conjunction.AND))
        assert len(node) == 2
        assert str(node) == "a|b^c"

    def test_appended_node_is_copied(self):
        """测试追加的节点与原节点互不影响."""
        other = FilterNode("b", Conjunction.AND)
        node = FilterNode("a").append(other)
        other.append("c")
        assert str(node) == "a|b"


class TestFilterNodeRemove:
    """FilterNode 删除测试."""

    def test_remove_value(self):
        """测试删除值."""
        node = FilterNode(["a", "b", "c"]).remove("b")
        assert str(node) == "a|c"

    def test_remove_all_occurrences(self):
        """测试删除所有相等的值."""
        node = FilterNode(["a", "b", "a"]).remove("a")
        assert str(node) == "b"

    def test_remove_missing_is_noop(self):
        """测试删除不存在的值不报错."""
        node = FilterNode(["a", "b"]).remove("z")
        assert str(node) == "a|b"

    def test_remove_recurses_into_nested(self):
        """测试递归删除嵌套节点中的值."""
        node = FilterNode(FilterNode(["a", "b"]), Conjunction.AND).append("c")
        node.remove("b")
        assert str(node) == "a^c"

    def test_remove_prunes_empty_nested(self):
        """测试嵌套节点被删空后移除."""
        node = FilterNode(FilterNode("a"), Conjunction.AND).append("c")
        node.remove("a")
        assert len(node) == 1
        assert str(node) == "c"

    def test_remove_node_removes_each_value(self):
        """测试删除节点时逐个删除其中的值."""
        node = FilterNode(["a", "b", "c"])
        node.remove(FilterNode(["a", "c"]))
        assert str(node) == "b"

    def test_remove_list(self):
        """测试按列表删除多个值."""
        node = FilterNode(["a", "b", "c"]).remove(["a", "c"])
        assert str(node) == "b"

    def test_none_ignored(self):
        """测试 None 不产生任何项."""
        node = FilterNode(["a", None]).append(None).remove(None)
        assert node.values == (Scalar("a"),)
        assert FilterNode(None).is_empty()

    def test_remove_bool(self):
        """测试删除布尔值."""
        node = FilterNode([True, "x"]).remove(True)
        assert str(node) == "x"


class TestFilterNodeMisc:
    """FilterNode 其他行为测试."""

    def test_separator_not_escaped(self):
        """测试值中的分隔符不转义."""
        node = FilterNode(["a|b", "c^d"])
        assert str(node) == "a|b|c^d"

    def test_copy_is_deep(self):
        """测试深拷贝."""
        node = FilterNode(FilterNode("a"), Conjunction.AND)
        clone = node.copy()
        node.values[0].append("b")
        assert clone == FilterNode(FilterNode("a"), Conjunction.AND)
        assert str(clone) == "a"

    def test_empty(self):
        """测试空节点."""
        node = FilterNode()
        assert node.is_empty()
        assert not node
        assert str(node) == ""
        assert repr(node) == "<FilterNode OR: (empty)>"

    def test_equality_depends_on_conjunction(self):
        """测试连接符不同的节点不相等."""
        assert FilterNode("a") == FilterNode("a")
        assert FilterNode("a") != FilterNode("a", Conjunction.AND)
