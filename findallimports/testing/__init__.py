"""Testing utilities for findallimports consumers."""

from .fixtures import InMemorySourceAdapter, chain_project

__all__ = ['InMemorySourceAdapter', 'chain_project']
