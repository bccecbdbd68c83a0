# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Categories - Example hierarchy of product categories.

A didactic example showing how to build a Hierarchy, look nodes up by
element and extract an independent nested hierarchy.
"""

from __future__ import annotations

from genro_hierarchy import Hierarchy, HierarchyNode


def build_catalog() -> Hierarchy:
    """Build a small product catalog.

    Example:
        >>> catalog = build_catalog()
        >>> catalog.get_children('Kitchen')
        ['Cookware', 'Appliances']
    """
    catalog = Hierarchy('Catalog')
    catalog.root_node.add_children(['Home', 'Garden'])

    home = catalog.get_node('Home')
    home.add_child('Kitchen').add_children('Cookware', 'Appliances')
    home.add_child('Bedroom').add_children(['Beds', 'Wardrobes'])

    catalog.get_node('Garden').add_children('Tools', 'Plants')
    catalog.get_node('Appliances').add_children('Fridges', 'Ovens')
    return catalog


def print_node(node: HierarchyNode, indent: int = 0) -> None:
    """Print node and its descendants, one per line."""
    print('  ' * indent + str(node.element))
    for child in node.child_nodes:
        print_node(child, indent + 1)


if __name__ == '__main__':
    catalog = build_catalog()
    print_node(catalog.root_node)

    fridges = catalog.get_node('Fridges')
    print(f"\n'Fridges' is at depth {fridges.depth} under {fridges.parent.element!r}")

    # The nested hierarchy is a copy: growing it leaves the catalog untouched
    kitchen = catalog.get_nested('Kitchen')
    kitchen.get_node('Cookware').add_child('Pans')
    print()
    print_node(kitchen.root_node)
    print(f"\nCatalog has 'Pans': {catalog.get_node('Pans') is not None}")
