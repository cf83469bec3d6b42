"""Test fixtures for findallimports consumers.

InMemorySourceAdapter lets a test describe a whole project as a mapping of
absolute paths to source text, and traverse it with the real parser and
resolver without touching the disk.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from .._common.config import DEFAULT_EXTENSIONS
from ..adapters.base import ParsedModule, SourceAdapter
from ..adapters.parser import TreeSitterSourceParser
from ..adapters.resolver import ImportPathResolver


class InMemorySourceAdapter(SourceAdapter):
    """SourceAdapter over an in-memory project.

    Example:
        adapter = InMemorySourceAdapter({
            "/project/a.js": "import './b.js';",
            "/project/b.js": "",
        })
        result = find_all_imports("/project/a.js", cwd="/project", adapter=adapter)
        assert result.visited == {"/project/a.js", "/project/b.js"}

    Attributes:
        files: The project, keyed by absolute path
        parse_calls: Every path parse() was called with, in call order
        resolve_calls: Every (current_dir, specifier) resolve() was called with
    """

    def __init__(self, files: Mapping[str, str], extensions: Sequence[str] = DEFAULT_EXTENSIONS):
        self.files: Dict[str, str] = dict(files)
        self.parse_calls: List[str] = []
        self.resolve_calls: List[tuple] = []
        self._parser = TreeSitterSourceParser()
        self._resolver = ImportPathResolver(
            extensions=extensions,
            is_file=self.files.__contains__,
            read_text=self.files.get,
        )

    def exists(self, file_path: str) -> bool:
        return file_path in self.files

    def parse(self, file_path: str) -> Optional[ParsedModule]:
        self.parse_calls.append(file_path)
        source = self.files.get(file_path)
        if source is None:
            return None
        return self._parser.parse_source(file_path, source)

    def resolve(
        self,
        current_dir: str,
        specifier: str,
        working_directory: str,
    ) -> Optional[str]:
        self.resolve_calls.append((current_dir, specifier))
        return self._resolver.resolve(current_dir, specifier, working_directory)


def chain_project(length: int, root: str = "/project") -> Dict[str, str]:
    """Build a linear chain ``f0.js -> f1.js -> ... -> f{length-1}.js``.

    Args:
        length: Number of files in the chain
        root: Directory holding the files

    Returns:
        Mapping suitable for InMemorySourceAdapter
    """
    files = {}
    for index in range(length):
        if index + 1 < length:
            source = f'import "./f{index + 1}.js";\n'
        else:
            source = "export default {};\n"
        files[f"{root}/f{index}.js"] = source
    return files
