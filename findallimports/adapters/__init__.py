"""Source adapters for findallimports."""

from .base import ParsedModule, SourceAdapter
from .caching import CachingSourceAdapter, FilesystemCachingAdapter
from .javascript import JavaScriptSourceAdapter
from .parser import TreeSitterSourceParser
from .resolver import ImportPathResolver

__all__ = [
    'ParsedModule',
    'SourceAdapter',
    'CachingSourceAdapter',
    'FilesystemCachingAdapter',
    'JavaScriptSourceAdapter',
    'TreeSitterSourceParser',
    'ImportPathResolver',
]
