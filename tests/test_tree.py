from apollonian.tree import Tree, flatten, iter_pruned, prune, unfold_tree

EXPECTED = [1, 2, 4, 8, 9, 5, 10, 11, 3, 6, 12, 13, 7, 14, 15]


def _binary(n):
    return [2 * n, 2 * n + 1]


def test_children_built_on_demand():
    root = unfold_tree(1, _binary)
    assert not root.expanded
    assert [t.value for t in root.children] == [2, 3]
    assert root.expanded
    assert root.children is root.children
    assert not root.children[0].expanded


def test_iter_pruned_preorder():
    root = unfold_tree(1, _binary)
    assert list(iter_pruned(root, lambda n: n < 16)) == EXPECTED


def test_iter_pruned_cuts_at_shallowest_failure():
    root = unfold_tree(1, _binary)
    # 3 fails, so nothing below it is visited even though 6 and 7 pass
    assert list(iter_pruned(root, lambda n: n != 3 and n < 8)) == [1, 2, 4, 5]


def test_iter_pruned_does_not_expand_failing_nodes():
    expanded = []

    def expand(n):
        expanded.append(n)
        return _binary(n)

    list(iter_pruned(unfold_tree(1, expand), lambda n: n < 16))
    assert sorted(expanded) == sorted(EXPECTED)


def test_prune_then_flatten():
    pruned = prune(unfold_tree(1, _binary), lambda n: n < 16)
    assert pruned.value == 1
    assert len(pruned.children) == 2
    assert flatten(pruned) == EXPECTED
    assert prune(unfold_tree(1, _binary), lambda n: n > 1) is None
    assert flatten(None) == []


def test_explicit_children():
    leaf = Tree(2)
    t = Tree(1, children=[leaf])
    assert t.expanded and leaf.expanded
    assert leaf.children == []
    assert flatten(t) == [1, 2]


def test_deep_chain_without_recursion():
    chain = unfold_tree(0, lambda n: [n + 1])
    assert len(list(iter_pruned(chain, lambda n: n < 5000))) == 5000


def test_walk_does_not_keep_visited_nodes():
    root = unfold_tree(1, _binary)
    assert list(iter_pruned(root, lambda n: n < 16)) == EXPECTED
    assert not root.expanded
    assert flatten(prune(root, lambda n: n < 16)) == EXPECTED
    assert not root.expanded


def test_walk_reuses_built_children():
    root = unfold_tree(1, _binary)
    first = root.children
    assert list(iter_pruned(root, lambda n: n < 4)) == [1, 2, 3]
    assert root.children is first
