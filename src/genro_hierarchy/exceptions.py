# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hierarchy exceptions."""

from __future__ import annotations

from typing import Any


class HierarchyError(Exception):
    """Base exception for Hierarchy errors."""

    pass


class EmptyHierarchyError(HierarchyError):
    """Raised when an operation needs a root node and the hierarchy has none."""

    pass


class InvalidStartNodeError(HierarchyError):
    """Raised when a search is started from something that is not a node."""

    pass


class ElementNotFoundError(HierarchyError):
    """Raised when a nested hierarchy is requested for a missing element."""

    def __init__(self, element: Any) -> None:
        self.element = element
        super().__init__(f"Element {element!r} not found in hierarchy")
