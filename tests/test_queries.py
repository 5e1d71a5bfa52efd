"""Tests for the derived queries in treewalk.api."""

import pytest

from treewalk import (
    CallableAdapter,
    compute_degree,
    compute_height,
    count_nodes,
    find_node,
    get_descendant_nodes,
    get_leaf_nodes,
    get_node_path,
    get_tree_stats,
    traverse_tree,
)
from treewalk.testing import SimpleNode, build_tree


def _names(nodes):
    return [node.name for node in nodes]


class TestDescendants:

    def test_preorder_with_root(self, small_tree):
        assert _names(get_descendant_nodes(small_tree, 'children')) == ["A", "B", "D", "C"]

    def test_every_node_exactly_once_parent_first(self, wide_tree):
        nodes = get_descendant_nodes(wide_tree, 'children')
        assert len(nodes) == 9
        assert len({id(node) for node in nodes}) == 9
        position = {id(node): i for i, node in enumerate(nodes)}
        for node in nodes:
            for child in node.children:
                assert position[id(node)] < position[id(child)]


class TestLeaves:

    def test_small_tree(self, small_tree):
        assert _names(get_leaf_nodes(small_tree, 'children')) == ["D", "C"]

    def test_leaves_are_childless_descendants(self, wide_tree):
        leaves = get_leaf_nodes(wide_tree, 'children')
        descendants = get_descendant_nodes(wide_tree, 'children')
        assert _names(leaves) == ["A1", "A2", "A3", "B", "C1a"]
        for leaf in leaves:
            assert leaf in descendants
            assert not leaf.children

    def test_single_node_is_a_leaf(self):
        root = SimpleNode("only", None)
        assert get_leaf_nodes(root, 'children') == [root]

    def test_only_holes_counts_as_leaf(self):
        root = build_tree(("A", [("B", [None, None])]))
        assert _names(get_leaf_nodes(root, 'children')) == ["B"]


class TestHeight:

    def test_single_node(self):
        assert compute_height(SimpleNode("only"), 'children') == 1

    def test_root_with_one_leaf(self):
        assert compute_height(build_tree(("A", ["B"])), 'children') == 2

    def test_small_tree(self, small_tree):
        assert compute_height(small_tree, 'children') == 3

    def test_uneven_tree(self, wide_tree):
        assert compute_height(wide_tree, 'children') == 4


class TestDegree:

    def test_single_node(self):
        assert compute_degree(SimpleNode("only"), 'children') == 0

    def test_small_tree(self, small_tree):
        assert compute_degree(small_tree, 'children') == 2

    def test_max_not_at_root(self, wide_tree):
        assert compute_degree(wide_tree, 'children') == 3

    def test_holes_not_counted(self):
        root = build_tree(("A", [None, "B", None]))
        assert compute_degree(root, 'children') == 1


class TestNodePath:

    def test_path_to_leaf(self, small_tree):
        d = small_tree.children[0].children[0]
        assert _names(get_node_path(small_tree, d, 'children')) == ["A", "B", "D"]

    def test_path_to_root(self, small_tree):
        assert get_node_path(small_tree, small_tree, 'children') == [small_tree]

    def test_unreachable_target(self, small_tree):
        assert get_node_path(small_tree, SimpleNode("D"), 'children') == []

    def test_matches_by_equality(self):
        tree = {"a": ["b", "c"], "b": ["d"]}
        assert get_node_path("a", "d", tree) == ["a", "b", "d"]

    def test_stops_at_first_match(self, small_tree):
        calls = []

        def get_children(node):
            calls.append(node.name)
            return node.children

        b = small_tree.children[0]
        assert _names(get_node_path(small_tree, b, get_children)) == ["A", "B"]
        assert calls == ["A", "B"]

    def _twin_dict_tree(self):
        first = {"name": "x"}
        second = {"name": "x"}
        a = {"name": "a", "children": [first]}
        b = {"name": "b", "children": [second]}
        root = {"name": "root", "children": [a, b]}
        return root, a, b, first, second

    def test_identical_node_wins_over_equal_one(self):
        root, _, b, _, second = self._twin_dict_tree()
        path = get_node_path(root, second, lambda n: n.get("children"))
        assert path[-1] is second
        assert path[1] is b
        assert len(path) == 3

    def test_equal_node_used_when_none_identical(self):
        root, a, _, first, _ = self._twin_dict_tree()
        path = get_node_path(root, {"name": "x"}, lambda n: n.get("children"))
        assert path[-1] is first
        assert path[1] is a

    def test_first_match_in_preorder_wins(self):
        tree = {"r": ["x", "t"], "x": ["t"]}
        assert get_node_path("r", "t", tree) == ["r", "x", "t"]


class TestTraverseTree:

    def test_default_is_preorder(self, small_tree):
        assert _names(traverse_tree(small_tree, 'children')) == ["A", "B", "D", "C"]

    @pytest.mark.parametrize("strategy", ["bfs", "level", "LEVEL_ORDER", "breadth_first"])
    def test_breadth_first_aliases(self, small_tree, strategy):
        assert _names(traverse_tree(small_tree, 'children', strategy)) == ["A", "B", "C", "D"]

    def test_path_strategy_yields_paths(self, small_tree):
        paths = list(traverse_tree(small_tree, 'children', "path"))
        assert [len(path) for path in paths] == [1, 2, 3, 2]

    def test_unknown_strategy(self, small_tree):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            list(traverse_tree(small_tree, 'children', "zigzag"))


class TestFindNode:

    def test_preorder_finds_deep_match_first(self):
        root = build_tree(("R", [("X", [("Y", ["T"])]), "T2"]))
        found = find_node(root, 'children', lambda n: n.name.startswith("T"))
        assert found.name == "T"

    def test_bfs_finds_shallow_match_first(self):
        root = build_tree(("R", [("X", [("Y", ["T"])]), "T2"]))
        found = find_node(root, 'children', lambda n: n.name.startswith("T"), strategy="bfs")
        assert found.name == "T2"

    def test_path_strategy_returns_node(self):
        seen = []

        def predicate(node):
            seen.append(node)
            return node == "c"

        found = find_node("a", {"a": ["b", "c"]}, predicate, strategy="path")
        assert found == "c"
        assert seen == ["a", "b", "c"]

    def test_no_match(self, small_tree):
        assert find_node(small_tree, 'children', lambda n: n.name == "Z") is None


def test_count_nodes(wide_tree):
    assert count_nodes(wide_tree, 'children') == 9


def test_tree_stats(wide_tree):
    stats = get_tree_stats(wide_tree, 'children')
    assert stats['total_nodes'] == 9
    assert stats['leaf_nodes'] == 5
    assert stats['internal_nodes'] == 4
    assert stats['height'] == compute_height(wide_tree, 'children')
    assert stats['degree'] == 3
    assert stats['nodes_per_level'] == {1: 1, 2: 3, 3: 4, 4: 1}


@pytest.mark.parametrize("accessor", [
    'children',
    lambda node: node.children,
    CallableAdapter(lambda node: node.children),
])
def test_accessor_forms_agree(small_tree, accessor):
    assert _names(get_descendant_nodes(small_tree, accessor)) == ["A", "B", "D", "C"]
