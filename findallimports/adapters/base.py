"""SourceAdapter abstraction for findallimports.

The traversal engines never touch the filesystem, a parser or a module
resolver directly. A SourceAdapter bundles those three collaborators, so
the same engine can walk real files, an in-memory project, or any other
source of modules.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass
class ParsedModule:
    """A parsed source file.

    Attributes:
        file_path: Absolute path the source was read from
        source: Decoded source text
        tree: The tree-sitter Tree
    """

    file_path: str
    source: str
    tree: Any

    @property
    def body(self) -> List[Any]:
        """Top-level statement nodes, in source order."""
        return list(self.tree.root_node.named_children)


class SourceAdapter(ABC):
    """Abstract adapter providing parsing, resolution and existence checks.

    Implementations must not raise from any of these methods: a parse
    failure is signalled by ``None``, an unresolvable specifier by ``None``,
    a missing file by ``False``.
    """

    @abstractmethod
    def exists(self, file_path: str) -> bool:
        """Check if a file exists.

        Args:
            file_path: Absolute path to check

        Returns:
            True if the path names an existing file
        """
        pass

    @abstractmethod
    def parse(self, file_path: str) -> Optional[ParsedModule]:
        """Parse a file into a ParsedModule.

        Args:
            file_path: Absolute path of an existing file

        Returns:
            ParsedModule, or None if no usable syntax tree was produced
        """
        pass

    @abstractmethod
    def resolve(
        self,
        current_dir: str,
        specifier: str,
        working_directory: str,
    ) -> Optional[str]:
        """Resolve a raw specifier to an absolute file path.

        Args:
            current_dir: Directory of the file containing the reference
            specifier: The string written in the import or require
            working_directory: Working directory of the traversal

        Returns:
            Absolute path, or None for bare packages and anything else
            that is not a local file
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
