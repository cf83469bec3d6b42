"""Tree-sitter based source parser for JavaScript and TypeScript."""

import logging
import os
from functools import lru_cache
from typing import Optional

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

from .base import ParsedModule


logger = logging.getLogger(__name__)

TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts"}
TSX_SUFFIXES = {".tsx"}


@lru_cache(maxsize=None)
def _language(name: str) -> tree_sitter.Language:
    if name == "typescript":
        return tree_sitter.Language(tree_sitter_typescript.language_typescript())
    if name == "tsx":
        return tree_sitter.Language(tree_sitter_typescript.language_tsx())
    return tree_sitter.Language(tree_sitter_javascript.language())


def language_for(file_path: str) -> str:
    """Pick the grammar name for a file from its suffix.

    Anything that is not TypeScript is parsed as JavaScript, which
    includes JSX.
    """
    suffix = os.path.splitext(file_path)[1].lower()
    if suffix in TYPESCRIPT_SUFFIXES:
        return "typescript"
    if suffix in TSX_SUFFIXES:
        return "tsx"
    return "javascript"


class TreeSitterSourceParser:
    """Parses JavaScript/TypeScript sources into ParsedModule objects.

    A source that contains syntax errors is treated as unparseable, so the
    traversal never scans a partial tree.
    """

    def __init__(self):
        self._parsers = {}

    def _parser(self, language: str) -> tree_sitter.Parser:
        parser = self._parsers.get(language)
        if parser is None:
            parser = tree_sitter.Parser(_language(language))
            self._parsers[language] = parser
        return parser

    def parse_source(self, file_path: str, source: str) -> Optional[ParsedModule]:
        """Parse source text that was obtained for ``file_path``.

        Args:
            file_path: Path used to pick the grammar
            source: Source text

        Returns:
            ParsedModule, or None if the tree contains errors
        """
        tree = self._parser(language_for(file_path)).parse(source.encode("utf-8"))
        if tree.root_node.has_error:
            logger.debug("Syntax errors in %s", file_path)
            return None
        return ParsedModule(file_path=file_path, source=source, tree=tree)

    def parse(self, file_path: str) -> Optional[ParsedModule]:
        """Read and parse a file.

        Returns:
            ParsedModule, or None if the file cannot be read or parsed
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", file_path, e)
            return None
        return self.parse_source(file_path, source)
