# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hierarchy node class."""

from __future__ import annotations

import weakref
from collections.abc import Iterable
from typing import Any


class HierarchyNode:
    """A single cell of a Hierarchy.

    Each node has:
    - element: The payload, any value supporting ``==``
    - child_nodes: Ordered list of owned child nodes (insertion order)
    - children: Cached list of the children's elements, index-aligned
      with child_nodes
    - parent: Weak back-reference to the node holding this one as a child

    Children are only meant to be added through add_child/add_children,
    which keep child_nodes and children in lock-step. Mutating child_nodes
    directly, or reassigning the element of a node that is already a child,
    leaves the parent's cached children stale.

    Example:
        >>> node = HierarchyNode('A')
        >>> node.add_children(['B', 'C'])
        >>> node.children
        ['B', 'C']
        >>> node.get_child('C').parent is node
        True
    """

    __slots__ = ('element', '_parent', '_children', '_child_elements', '__weakref__')

    def __init__(self, element: Any) -> None:
        """Initialize a HierarchyNode.

        The parent reference is left empty: it is set by add_child on
        the node that takes ownership of this one.

        Args:
            element: The payload carried by this node.
        """
        self.element = element
        self._parent: weakref.ref[HierarchyNode] | None = None
        self._children: list[HierarchyNode] = []
        self._child_elements: list[Any] = []

    def __repr__(self) -> str:
        return f"HierarchyNode({self.element!r}, children={len(self._children)})"

    # ==================== Mutation ====================

    def add_child(self, element: Any) -> HierarchyNode:
        """Append a new child node wrapping element and return it.

        Duplicate elements are allowed.

        Example:
            >>> root = HierarchyNode('A')
            >>> root.add_child('B').add_child('D').element
            'D'
        """
        child = HierarchyNode(element)
        self._children.append(child)
        self._child_elements.append(element)
        child._parent = weakref.ref(self)
        return child

    def add_children(self, *elements: Any) -> None:
        """Add several children in order.

        Accepts either one iterable of elements or the elements as
        positional arguments. A single string is one element.

        Example:
            >>> node = HierarchyNode('A')
            >>> node.add_children(['B', 'C'])
            >>> node.add_children('D', 'E')
            >>> node.children
            ['B', 'C', 'D', 'E']
        """
        if len(elements) == 1 and _is_element_iterable(elements[0]):
            elements = tuple(elements[0])
        for element in elements:
            self.add_child(element)

    # ==================== Lookup ====================

    @property
    def is_leaf(self) -> bool:
        """True if this node has no child nodes."""
        return not self._children

    def has_child(self, element: Any) -> bool:
        """True if a direct child carries an element equal to element."""
        for child_element in self._child_elements:
            if child_element == element:
                return True
        return False

    def get_child(self, element: Any) -> HierarchyNode | None:
        """Return the first direct child whose element equals element.

        Returns:
            The matching child node, or None if no direct child matches.
        """
        for child in self._children:
            if child.element == element:
                return child
        return None

    # ==================== Accessors ====================

    @property
    def children(self) -> list[Any]:
        """The cached list of the child nodes' elements, in order."""
        return self._child_elements

    @property
    def child_nodes(self) -> list[HierarchyNode]:
        """The list of child nodes, in insertion order."""
        return self._children

    @property
    def parent(self) -> HierarchyNode | None:
        """The node holding this one as a child.

        None for a root node, and for a node whose parent no longer
        exists (parents are referenced weakly).
        """
        if self._parent is None:
            return None
        return self._parent()

    # ==================== Navigation ====================

    @property
    def root(self) -> HierarchyNode:
        """Get the topmost reachable ancestor (self for a root node)."""
        node = self
        parent = node.parent
        while parent is not None:
            node = parent
            parent = node.parent
        return node

    @property
    def depth(self) -> int:
        """Get the depth of this node in the hierarchy (root=0)."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth


def _is_element_iterable(value: Any) -> bool:
    """True if value should be unpacked by add_children."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Iterable)
