"""Default source adapter for JavaScript and TypeScript projects on disk."""

import os
from typing import Optional, Sequence

from .._common.config import DEFAULT_EXTENSIONS
from .base import ParsedModule, SourceAdapter
from .parser import TreeSitterSourceParser
from .resolver import ImportPathResolver


class JavaScriptSourceAdapter(SourceAdapter):
    """Reads files from disk, parses them with tree-sitter and resolves
    specifiers Node-style.

    Example:
        adapter = JavaScriptSourceAdapter(extensions=(".js", ".ts"))
        result = find_all_imports("/project/comments.config.js", adapter=adapter)
    """

    def __init__(self, extensions: Sequence[str] = DEFAULT_EXTENSIONS):
        self.parser = TreeSitterSourceParser()
        self.resolver = ImportPathResolver(extensions=extensions)

    def exists(self, file_path: str) -> bool:
        return os.path.isfile(file_path)

    def parse(self, file_path: str) -> Optional[ParsedModule]:
        return self.parser.parse(file_path)

    def resolve(
        self,
        current_dir: str,
        specifier: str,
        working_directory: str,
    ) -> Optional[str]:
        return self.resolver.resolve(current_dir, specifier, working_directory)
