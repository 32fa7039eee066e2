"""Tests for the game tree and tree builder."""

from gametree._tree import TreeNode, build_tree


class TestTreeNode:
    def test_is_leaf_with_no_children(self):
        node = TreeNode("A", leaf_value=3)
        assert node.is_leaf is True

    def test_is_leaf_with_children(self):
        child = TreeNode("B", leaf_value=3)
        parent = TreeNode("A", children=(child,))
        assert parent.is_leaf is False
        assert child.is_leaf is True

    def test_iter_leaves_nested(self):
        d = TreeNode("D", leaf_value=1)
        e = TreeNode("E", leaf_value=9)
        c = TreeNode("C", leaf_value=4)
        root = TreeNode("A", children=(TreeNode("B", children=(d, e)), c))

        leaves = list(root.iter_leaves())
        assert leaves == [d, e, c]

    def test_get_child(self):
        b = TreeNode("B", leaf_value=1)
        root = TreeNode("A", children=(b, TreeNode("C", leaf_value=2)))
        assert root.get_child("B") is b
        assert root.get_child("Z") is None

    def test_depth_and_len(self):
        root = TreeNode(
            "A",
            children=(
                TreeNode("B", children=(TreeNode("D", leaf_value=1),)),
                TreeNode("C", leaf_value=2),
            ),
        )
        assert root.depth == 2
        assert len(root) == 4
        assert TreeNode("X").depth == 0


class TestBuildTree:
    def test_two_level_tree(self):
        tree = build_tree("A", {"A": ["B", "C"], "B": ["D", "E"]}, {"D": 1, "E": 9, "C": 4})

        assert tree.name == "A"
        assert [child.name for child in tree.children] == ["B", "C"]
        b = tree.children[0]
        assert [(leaf.name, leaf.leaf_value) for leaf in b.children] == [("D", 1), ("E", 9)]
        assert tree.children[1].leaf_value == 4
        assert tree.leaf_value is None

    def test_children_keep_declared_order(self):
        tree = build_tree("A", {"A": ["C", "B"]}, {"B": 1, "C": 2})
        assert [child.name for child in tree.children] == ["C", "B"]

    def test_missing_value_is_deferred(self):
        tree = build_tree("A", {"A": ["B", "C"]}, {"B": 1})
        c = tree.get_child("C")
        assert c is not None
        assert c.is_leaf
        assert c.leaf_value is None

    def test_empty_child_list_makes_a_leaf(self):
        tree = build_tree("A", {"A": ["B"], "B": []}, {"B": 7})
        assert tree.children[0].is_leaf
        assert tree.children[0].leaf_value == 7

    def test_value_on_inner_node_is_kept(self):
        tree = build_tree("A", {"A": ["B"]}, {"A": 5, "B": 1})
        assert tree.leaf_value == 5
        assert not tree.is_leaf

    def test_shared_subtree_is_duplicated(self):
        tree = build_tree("A", {"A": ["B", "C"], "B": ["D"], "C": ["D"]}, {"D": 3})
        d_under_b = tree.children[0].children[0]
        d_under_c = tree.children[1].children[0]
        assert d_under_b == d_under_c
        assert len(tree) == 5

    def test_duplicate_children(self):
        tree = build_tree("A", {"A": ["B", "B"]}, {"B": 2})
        assert [child.name for child in tree.children] == ["B", "B"]
