# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hierarchy - A generic root-anchored tree container.

This module provides the Hierarchy class, which owns a single root
HierarchyNode and offers value-based lookup over the nodes below it.

Key Features:
    - **Arbitrary payloads**: Any element supporting ``==`` can be stored
    - **Value lookup**: Depth-first pre-order search by element equality
    - **Nested hierarchies**: Independent deep copies of any subtree
    - **Deep trees**: Searches and copies use an explicit stack, so tree
      depth is not limited by the interpreter recursion limit

Lookups compare elements with ``==``, never identity. The first match in
pre-order wins, so with duplicate elements the shallowest-leftmost node
is returned.

Example:
    Basic usage::

        tree = Hierarchy('A')
        tree.root_node.add_children(['B', 'C'])
        tree.get_node('B').add_child('D')

        print(tree.get_children('A'))  # ['B', 'C']
        print(tree.get_node('D').parent.element)  # 'B'

    Nested hierarchy::

        sub = tree.get_nested('B')
        sub.root_node.add_child('E')  # tree is unchanged
"""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import (
    ElementNotFoundError,
    EmptyHierarchyError,
    InvalidStartNodeError,
)
from .node import HierarchyNode

logger = logging.getLogger(__name__)

_EMPTY = object()
_FROM_ROOT = object()


class Hierarchy:
    """A tree container owning a single root node.

    Hierarchy provides:
    - root / root_node: The root element and the root node
    - get_node(element): Find a node by element equality
    - get_children(parent) / get_child_nodes(parent): Children of a node
    - get_nested(element): Deep copy of the subtree rooted at element

    A Hierarchy is either empty (no root node) or rooted. It only grows,
    through the add_child/add_children methods of its nodes. Not safe for
    concurrent mutation.

    Example:
        >>> tree = Hierarchy('A')
        >>> tree.root_node.add_children(['B', 'C'])
        >>> tree.get_children('A')
        ['B', 'C']
        >>> tree.get_node('Z') is None
        True
    """

    __slots__ = ('_root_node',)

    def __init__(self, root_obj: Any = _EMPTY) -> None:
        """Initialize a Hierarchy.

        Args:
            root_obj: Element of the root node. When omitted the
                hierarchy is empty. None is a valid root element.

        Example:
            >>> Hierarchy().is_empty
            True
            >>> Hierarchy(None).is_empty
            False
        """
        self._root_node: HierarchyNode | None = None
        if root_obj is not _EMPTY:
            self._root_node = HierarchyNode(root_obj)

    def __repr__(self) -> str:
        if self._root_node is None:
            return "Hierarchy()"
        return f"Hierarchy({self._root_node.element!r})"

    # ==================== Root ====================

    @property
    def root(self) -> Any:
        """The element of the root node.

        Raises:
            EmptyHierarchyError: If the hierarchy has no root node.
        """
        return self._require_root().element

    @root.setter
    def root(self, value: Any) -> None:
        self._require_root().element = value

    @property
    def root_node(self) -> HierarchyNode | None:
        """The root node itself (not a copy), or None if empty."""
        return self._root_node

    @property
    def is_empty(self) -> bool:
        """True if the hierarchy has no root node."""
        return self._root_node is None

    def _require_root(self) -> HierarchyNode:
        if self._root_node is None:
            raise EmptyHierarchyError("Hierarchy is empty: it has no root node")
        return self._root_node

    # ==================== Lookup ====================

    def get_node(
        self, element: Any, start_node: Any = _FROM_ROOT
    ) -> HierarchyNode | None:
        """Find the first node whose element equals element.

        The search is depth-first pre-order: start_node itself is checked
        first, then each child subtree in insertion order.

        Args:
            element: The element to look for.
            start_node: Node to start searching from. Defaults to the
                root node. Only start_node and its descendants are
                searched.

        Returns:
            The matching node, or None if no node matches.

        Raises:
            EmptyHierarchyError: If searching from the root of an empty
                hierarchy.
            InvalidStartNodeError: If start_node is not a HierarchyNode.
        """
        if start_node is _FROM_ROOT:
            start_node = self._require_root()
        elif not isinstance(start_node, HierarchyNode):
            raise InvalidStartNodeError(
                f"start_node must be a HierarchyNode, not {type(start_node).__name__}"
            )

        stack = [start_node]
        while stack:
            node = stack.pop()
            if node.element == element:
                return node
            # reversed so children are visited in insertion order
            stack.extend(reversed(node.child_nodes))
        return None

    def get_children(self, parent: Any) -> list[Any] | None:
        """Return the cached child elements of the node matching parent.

        The returned list is the node's own cache, not a copy.

        Returns:
            List of child elements, or None if no node matches parent.

        Raises:
            EmptyHierarchyError: If the hierarchy has no root node.
        """
        parent_node = self.get_node(parent)
        if parent_node is None:
            return None
        return parent_node.children

    def get_child_nodes(self, parent: Any) -> list[HierarchyNode] | None:
        """Return the child nodes of the node matching parent.

        Returns:
            List of child nodes, or None if no node matches parent.

        Raises:
            EmptyHierarchyError: If the hierarchy has no root node.
        """
        parent_node = self.get_node(parent)
        if parent_node is None:
            return None
        return parent_node.child_nodes

    # ==================== Nested ====================

    def get_nested(self, element: Any) -> Hierarchy:
        """Extract the subtree rooted at element as a new Hierarchy.

        The result is built from fresh nodes: it has the same shape and
        the same element at each position as the original subtree, but
        adding children to it (or reassigning its elements) never affects
        this hierarchy, and vice versa. Elements themselves are shared,
        not copied.

        Args:
            element: Element of the node to use as the new root. The new
                hierarchy's root element is this argument.

        Returns:
            A new, independent Hierarchy.

        Raises:
            EmptyHierarchyError: If the hierarchy has no root node.
            ElementNotFoundError: If no node matches element.

        Example:
            >>> tree = Hierarchy('A')
            >>> tree.root_node.add_children(['B', 'C'])
            >>> sub = tree.get_nested('A')
            >>> sub.get_children('A')
            ['B', 'C']
            >>> sub.root_node is tree.root_node
            False
        """
        start_node = self.get_node(element)
        if start_node is None:
            logger.debug("Nested hierarchy requested for missing element %r", element)
            raise ElementNotFoundError(element)

        nested = Hierarchy(element)
        copied = 1
        # pairs of (node in the copy, node it mirrors in the original)
        stack = [(nested._root_node, start_node)]
        while stack:
            nested_node, original_node = stack.pop()
            pending = []
            for child in original_node.child_nodes:
                pending.append((nested_node.add_child(child.element), child))
            copied += len(pending)
            stack.extend(reversed(pending))

        logger.debug("Extracted nested hierarchy at %r with %d nodes", element, copied)
        return nested
