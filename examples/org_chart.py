#!/usr/bin/env python3
"""
Walking an org chart with treewalk.

This example demonstrates:
- Using an adjacency mapping as the children accessor
- Pre-order and level-order traversal with early termination
- Path lookup and tree statistics
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalk import (
    STOP,
    get_node_path,
    get_tree_stats,
    level_traversal,
    preorder_traversal,
)


REPORTS = {
    "ceo": ["cto", "cfo"],
    "cto": ["platform-lead", "product-lead"],
    "platform-lead": ["sre-1", "sre-2"],
    "product-lead": ["designer"],
    "cfo": ["controller"],
}


def print_outline():
    """Print the chart indented by depth."""
    def on_traverse(person):
        depth = len(get_node_path("ceo", person, REPORTS)) - 1
        print(f"{'  ' * depth}{person}")

    preorder_traversal("ceo", REPORTS, on_traverse)


def print_levels(max_level: int):
    """Print one line per management level, stopping after max_level."""
    def on_wrap(people, level):
        if level > max_level:
            return STOP
        print(f"Level {level}: {', '.join(people)}")

    level_traversal("ceo", REPORTS, on_wrap=on_wrap)


def main():
    print("=== Outline ===")
    print_outline()

    print("\n=== First two levels ===")
    print_levels(2)

    print("\n=== Chain of command for sre-2 ===")
    print(" -> ".join(get_node_path("ceo", "sre-2", REPORTS)))

    stats = get_tree_stats("ceo", REPORTS)
    print(f"\nHeadcount: {stats['total_nodes']}, "
          f"individual contributors: {stats['leaf_nodes']}, "
          f"levels: {stats['height']}, "
          f"widest span of control: {stats['degree']}")


if __name__ == "__main__":
    main()
