"""
Tree store for Twig outlines.

Owns every node and the current selection. Nodes are kept in a single
identity -> Node table; parent/children fields are identities looked up in
that table, so the table is the only owner.

Modified: 2026-10-19
"""

import itertools
import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from twig.core.exceptions import NodeNotFoundError
from twig.core.models import Node, VisibleEntry

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_NAME = "new node"


class TreeStore:
    """
    In-memory outline tree with a single selection.

    Navigation at a structural boundary (empty tree, first/last sibling)
    is a silent no-op, never an error.
    """

    def __init__(self, placeholder_name: str = DEFAULT_PLACEHOLDER_NAME):
        """
        Initialize an empty store.

        Args:
            placeholder_name: Name given to newly created nodes
        """
        self.placeholder_name = placeholder_name
        self._nodes: Dict[int, Node] = {}
        self._roots: List[int] = []
        self._selected: Optional[int] = None
        self._ids = itertools.count(1)

    # ==================== Queries ====================

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    @property
    def roots(self) -> List[int]:
        """Identities of the top-level nodes, in order."""
        return list(self._roots)

    @property
    def selected_id(self) -> Optional[int]:
        return self._selected

    @property
    def selected_node(self) -> Optional[Node]:
        if self._selected is None:
            return None
        return self._nodes[self._selected]

    def get(self, node_id: int) -> Node:
        """
        Look up a node by identity.

        Raises:
            NodeNotFoundError: If the identity is not in the store
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def children_of(self, node_id: int) -> List[Node]:
        return [self._nodes[child_id] for child_id in self.get(node_id).children]

    def parent_of(self, node_id: int) -> Optional[Node]:
        parent_id = self.get(node_id).parent
        if parent_id is None:
            return None
        return self._nodes[parent_id]

    def siblings_of(self, node_id: int) -> List[int]:
        """
        Get the sibling group a node belongs to.

        Args:
            node_id: Node identity

        Returns:
            The root list for a top-level node, else the parent's children
            (the node itself included)
        """
        return list(self._sibling_list(self.get(node_id)))

    def depth_of(self, node_id: int) -> int:
        depth = 0
        node = self.get(node_id)
        while node.parent is not None:
            node = self._nodes[node.parent]
            depth += 1
        return depth

    def path_of(self, node_id: int) -> Tuple[int, ...]:
        """
        Compute the zero-based index path of a node from the root list.

        Args:
            node_id: Node identity

        Returns:
            Tuple of sibling indices, outermost first
        """
        path = []
        node = self.get(node_id)
        while True:
            path.append(self._sibling_list(node).index(node.id))
            if node.parent is None:
                break
            node = self._nodes[node.parent]
        return tuple(reversed(path))

    def node_at_path(self, path: Sequence[int]) -> Optional[Node]:
        """Resolve an index path to a node, or None if it does not exist."""
        if not path:
            return None
        level = self._roots
        node = None
        for index in path:
            if not 0 <= index < len(level):
                return None
            node = self._nodes[level[index]]
            level = node.children
        return node

    # ==================== Traversal ====================

    def traverse_visible(self) -> Iterator[Tuple[int, Node]]:
        """
        Walk the whole tree depth-first, pre-order.

        Every node is visible; there is no collapsed state. Each call starts
        a fresh walk.

        Yields:
            (depth, node) pairs, top-level nodes at depth 0
        """
        return self._walk(self._roots)

    def visible_entries(self) -> Iterator[VisibleEntry]:
        """Yield one VisibleEntry per node, in display order."""
        for depth, node in self.traverse_visible():
            yield VisibleEntry(
                depth=depth,
                node_id=node.id,
                name=node.name,
                is_selected=node.id == self._selected,
                is_leaf=node.is_leaf,
            )

    # ==================== Creation ====================

    def add_child_of_selection(self) -> Node:
        """
        Create a node under the current selection and select it.

        With no selection the node becomes a new top-level node. A leaf
        never gains children, so when the selection is a leaf the new node
        joins the leaf's sibling group instead.

        Returns:
            The created Node
        """
        selected = self.selected_node
        if selected is None:
            parent_id = None
        elif selected.is_leaf:
            parent_id = selected.parent
        else:
            parent_id = selected.id
        return self._create(parent_id)

    def add_sibling_of_selection(self) -> Node:
        """
        Create a node at the end of the selection's sibling group and select it.

        The node is appended after the last sibling, not after the selected
        one. With no selection the node becomes a new top-level node.

        Returns:
            The created Node
        """
        selected = self.selected_node
        parent_id = selected.parent if selected is not None else None
        return self._create(parent_id)

    def _create(self, parent_id: Optional[int]) -> Node:
        node = Node(id=next(self._ids), name=self.placeholder_name, parent=parent_id)
        self._nodes[node.id] = node
        if parent_id is None:
            self._roots.append(node.id)
        else:
            self._nodes[parent_id].children.append(node.id)
        self._selected = node.id
        logger.debug(f"Created node {node.id} under {parent_id}")
        return node

    # ==================== Navigation ====================

    def select(self, node_id: Optional[int]) -> None:
        """
        Select a node directly, or clear the selection with None.

        Raises:
            NodeNotFoundError: If the identity is not in the store
        """
        if node_id is not None:
            self.get(node_id)
        self._selected = node_id

    def move_selection_down(self) -> bool:
        """Select the next sibling. Returns False if nothing moved."""
        return self._move_within_siblings(1)

    def move_selection_up(self) -> bool:
        """Select the previous sibling. Returns False if nothing moved."""
        return self._move_within_siblings(-1)

    def _move_within_siblings(self, delta: int) -> bool:
        selected = self.selected_node
        if selected is None:
            return False

        siblings = self._sibling_list(selected)
        new_index = siblings.index(selected.id) + delta
        if not 0 <= new_index < len(siblings):
            return False

        self._selected = siblings[new_index]
        return True

    def select_first_overall(self) -> bool:
        """Select the first top-level node, if there is one."""
        if not self._roots:
            return False
        self._selected = self._roots[0]
        return True

    def select_last_overall(self) -> bool:
        """
        Select the last node in display order.

        Starts at the last top-level node and keeps descending into the last
        child until reaching a node without children.
        """
        if not self._roots:
            return False

        node = self._nodes[self._roots[-1]]
        while node.children:
            node = self._nodes[node.children[-1]]
        self._selected = node.id
        return True

    # ==================== Editing ====================

    def rename_node(self, node_id: int, name: str) -> None:
        self.get(node_id).name = name

    def set_content(self, node_id: int, content: Optional[str]) -> bool:
        """
        Attach or clear a node's content payload.

        Args:
            node_id: Node identity
            content: Text payload, or None to turn the node back into a folder

        Returns:
            False (and no change) if content was given for a node with children
        """
        node = self.get(node_id)
        if content is not None and node.children:
            return False
        node.content = content
        return True

    def delete_selection(self) -> Optional[Node]:
        """
        Remove the selected node together with its subtree.

        The selection moves to the sibling now at the same index, else the
        previous sibling, else the parent, else nothing.

        Returns:
            The removed Node, or None if nothing was selected
        """
        selected = self.selected_node
        if selected is None:
            return None

        siblings = self._sibling_list(selected)
        index = siblings.index(selected.id)
        siblings.pop(index)

        for _, node in list(self._walk([selected.id])):
            del self._nodes[node.id]

        if index < len(siblings):
            self._selected = siblings[index]
        elif siblings:
            self._selected = siblings[-1]
        else:
            self._selected = selected.parent

        logger.debug(f"Deleted node {selected.id}, selection now {self._selected}")
        return selected

    # ==================== Internals ====================

    def _sibling_list(self, node: Node) -> List[int]:
        """The live list holding node's identity."""
        if node.parent is None:
            return self._roots
        return self._nodes[node.parent].children

    def _walk(self, start_ids: Sequence[int]) -> Iterator[Tuple[int, Node]]:
        stack = [(0, node_id) for node_id in reversed(start_ids)]
        while stack:
            depth, node_id = stack.pop()
            node = self._nodes[node_id]
            yield depth, node
            stack.extend((depth + 1, child_id) for child_id in reversed(node.children))
