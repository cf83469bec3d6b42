#!/usr/bin/env python3
"""
Config dependency report with findallimports.

This example demonstrates:
- Finding every local file a config file pulls in
- Collecting per-file facts through a callback and its accumulator
- Turning a Failure into a readable error
"""

import os
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from findallimports import CallbackConfig
from findallimports.sync import find_all_imports_with_callback_sync


def count_statements(file_path, module, report):
    """Record how many top-level statements each file has."""
    report[file_path] = len(module.body)


def main():
    """Print the dependencies of a config file."""
    config_path = os.path.abspath(sys.argv[1]) if len(sys.argv) > 1 else None
    if config_path is None:
        print("usage: config_dependencies.py path/to/comments.config.js [max_depth]")
        return 2
    max_depth = int(sys.argv[2]) if len(sys.argv) > 2 else 100

    print(f"Config: {config_path}")
    print("-" * 50)

    report = {}
    result = find_all_imports_with_callback_sync(
        config_path,
        CallbackConfig(callback=count_statements, accumulator=report),
        cwd=os.path.dirname(config_path),
        max_depth=max_depth,
    )

    if not result.success:
        for error in result.errors:
            print(f"[{error.kind.value}] {error.message}")
        return 1

    root = os.path.dirname(config_path)
    # Dicts keep insertion order, which is discovery order
    for file_path, statements in report.items():
        print(f"  {os.path.relpath(file_path, root):<50} {statements:>4} statements")

    print(f"\nFiles: {len(result.visited)}")
    return 0


if __name__ == "__main__":
    print("findallimports - Config Dependency Report")
    print("=" * 50)
    sys.exit(main())
