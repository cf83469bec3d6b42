#!/usr/bin/env python3
"""
Basic async traversal example for findallimports.

This example demonstrates:
- Awaiting a callback on every discovered file
- Reading extra data per file without blocking the event loop
- Opting into exceptions with raise_for_errors()
"""

import asyncio
import os
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from findallimports import CallbackConfig, FindAllImportsError
from findallimports.aio import find_all_imports_with_callback_async


async def measure(file_path, module, sizes):
    """Store each file's size, read off the event loop."""
    sizes[file_path] = await asyncio.to_thread(os.path.getsize, file_path)


async def main():
    """Demonstrate an async traversal."""
    entry = os.path.abspath(sys.argv[1]) if len(sys.argv) > 1 else os.path.abspath("index.js")

    print(f"Entry: {entry}")
    print("-" * 50)

    sizes = {}
    try:
        result = (await find_all_imports_with_callback_async(
            entry,
            CallbackConfig(callback=measure, accumulator=sizes),
            cwd=os.getcwd(),
        )).raise_for_errors()
    except FindAllImportsError as e:
        print(f"Traversal failed ({e.kind.value}):\n{e}")
        return

    print(f"\nTraversal Summary:")
    print(f"  Files: {len(result.visited):,}")
    print(f"  Total Size: {sum(sizes.values()) / 1024:.1f} KB")

    largest = sorted(sizes.items(), key=lambda x: x[1], reverse=True)[:5]
    if largest:
        print(f"\nLargest Files:")
        for path, size in largest:
            print(f"  {size / 1024:.1f} KB: {os.path.basename(path)}")


if __name__ == "__main__":
    print("findallimports - Basic Async Traversal Example")
    print("=" * 50)
    asyncio.run(main())
