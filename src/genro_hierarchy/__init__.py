# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Hierarchy - Generic in-memory tree container.

A lightweight, zero-dependency library providing a root-anchored hierarchy
of arbitrary elements, with value-based lookup and nested (sub-tree) copies.
"""

__version__ = "0.1.0"

from .exceptions import (
    ElementNotFoundError,
    EmptyHierarchyError,
    HierarchyError,
    InvalidStartNodeError,
)
from .hierarchy import Hierarchy
from .node import HierarchyNode

__all__ = [
    # Core classes
    "Hierarchy",
    "HierarchyNode",
    # Exceptions
    "HierarchyError",
    "EmptyHierarchyError",
    "InvalidStartNodeError",
    "ElementNotFoundError",
]
