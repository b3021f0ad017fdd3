"""Test utilities and helper functions.

Created: 2026-10-19
"""

from collections import Counter
from typing import List, Tuple

from twig.core.tree_store import TreeStore


def assert_invariants(store: TreeStore) -> None:
    """Check the structural invariants of a store through its public API.

    - every listed child resolves, and points back at its parent
    - every node is reached exactly once from the root list (no cycles)
    - the selection, if any, resolves
    """
    for root_id in store.roots:
        assert root_id in store
        assert store.get(root_id).parent is None

    seen = Counter()
    for _, node in store.traverse_visible():
        seen[node.id] += 1
        assert seen[node.id] == 1, f"node {node.id} reached twice"
        assert not node.is_leaf or not node.children, f"leaf {node.id} has children"
        for child_id in node.children:
            assert child_id in store, f"dangling child {child_id}"
            assert store.get(child_id).parent == node.id

    assert len(seen) == len(store)

    if store.selected_id is not None:
        assert store.selected_id in store


def outline(store: TreeStore) -> List[Tuple[int, str]]:
    """(depth, name) pairs in display order."""
    return [(depth, node.name) for depth, node in store.traverse_visible()]


def build_store(*shape) -> TreeStore:
    """Build a store from nested (name, [children...]) tuples.

    Example:
        build_store(("A", [("B", []), ("C", [])]))
    """
    store = TreeStore()

    def add(item, parent_id):
        name, children = item
        store.select(parent_id)
        node = store.add_child_of_selection()
        store.rename_node(node.id, name)
        for child in children:
            add(child, node.id)

    for item in shape:
        add(item, None)
    store.select(None)
    return store
