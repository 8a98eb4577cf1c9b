"""Property-based checks of the tree's invariants."""

import unittest

from hypothesis import given, strategies as st

from balanced_bst import Tree

keys = st.integers(min_value=-100, max_value=100)
operations = st.lists(st.tuples(st.sampled_from(["insert", "delete"]), keys))


def apply(tree, ops):
    for op, value in ops:
        if op == "insert":
            tree.insert(value)
        else:
            tree.delete_item(value)


def is_bst(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.key <= low:
        return False
    if high is not None and node.key >= high:
        return False
    return is_bst(node.left, low, node.key) and is_bst(node.right, node.key, high)


class TestTreeProperties(unittest.TestCase):
    @given(st.lists(keys))
    def test_round_trip(self, xs):
        self.assertEqual(Tree(xs).keys(), sorted(set(xs)))

    @given(st.lists(keys))
    def test_construction_is_balanced(self, xs):
        self.assertTrue(Tree(xs).is_balanced())

    @given(st.lists(keys), operations)
    def test_bst_invariant_under_mutation(self, xs, ops):
        tree = Tree(xs)
        apply(tree, ops)
        result = tree.keys()
        self.assertTrue(all(a < b for a, b in zip(result, result[1:])))
        self.assertTrue(is_bst(tree.root))
        self.assertEqual(len(tree), len(result))

    @given(st.lists(keys, min_size=1), st.data())
    def test_insert_existing_key_is_noop(self, xs, data):
        tree = Tree(xs)
        before = tree.keys()
        tree.insert(data.draw(st.sampled_from(xs)))
        self.assertEqual(tree.keys(), before)

    @given(st.lists(keys, min_size=1), st.data())
    def test_delete_removes_exactly_one_key(self, xs, data):
        tree = Tree(xs)
        target = data.draw(st.sampled_from(xs))
        tree.delete_item(target)
        self.assertEqual(tree.keys(), sorted(set(xs) - {target}))
        self.assertTrue(is_bst(tree.root))

    @given(st.lists(keys), keys)
    def test_delete_absent_key_is_noop(self, xs, target):
        tree = Tree(x for x in xs if x != target)
        before = tree.keys()
        tree.delete_item(target)
        self.assertEqual(tree.keys(), before)

    @given(st.lists(keys), operations)
    def test_rebalance(self, xs, ops):
        tree = Tree(xs)
        apply(tree, ops)
        before = tree.keys()
        tree.rebalance()
        self.assertTrue(tree.is_balanced())
        self.assertEqual(tree.keys(), before)
        tree.rebalance()
        self.assertTrue(tree.is_balanced())
        self.assertEqual(tree.keys(), before)

    @given(st.lists(keys, min_size=1))
    def test_depth_plus_height_bounded_by_tree_height(self, xs):
        tree = Tree(xs)
        nodes = []
        tree.level_order(nodes.append)
        for node in nodes:
            self.assertLessEqual(tree.depth(node) + tree.height(node), tree.height())


if __name__ == "__main__":
    unittest.main()
