"""Node-style resolution of import specifiers to files.

Tries, for each candidate base path:
1. The path as written.
2. The path with each known extension appended.
3. The path as a directory holding an ``index`` file.

Relative and absolute specifiers give a single candidate. Other specifiers
are looked up in the ``paths``/``baseUrl`` aliases of a tsconfig.json or
jsconfig.json in the working directory; without a match they are bare
package names and resolve to nothing. Files whose extension is not a
script extension (stylesheets, JSON, images) are never returned.
"""

import json
import logging
import os
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .._common.config import ALIAS_CONFIG_FILES, DEFAULT_EXTENSIONS, INDEX_BASENAME


logger = logging.getLogger(__name__)

# Strings are matched first so that "//" inside them survives
_JSONC_COMMENTS = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)
_TRAILING_COMMAS = re.compile(r",(\s*[}\]])")

AliasConfig = Tuple[Optional[str], Dict[str, List[str]], str]


def _read_text(path: str) -> Optional[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        return None


def loads_jsonc(text: str):
    """Load JSON that may carry comments and trailing commas."""
    stripped = _JSONC_COMMENTS.sub(lambda m: m.group(1) or "", text)
    return json.loads(_TRAILING_COMMAS.sub(r"\1", stripped))


def is_relative_specifier(specifier: str) -> bool:
    return specifier in (".", "..") or specifier.startswith(("./", "../"))


class ImportPathResolver:
    """Resolves specifiers the way Node and TypeScript tooling do.

    Args:
        extensions: Extensions probed when the specifier has none that exists
        is_file: Predicate telling whether a path is an existing file
        read_text: Reads a config file, returning None when unreadable
    """

    def __init__(
        self,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        is_file: Callable[[str], bool] = os.path.isfile,
        read_text: Callable[[str], Optional[str]] = _read_text,
    ):
        self.extensions = tuple(extensions)
        self._is_file = is_file
        self._read_text = read_text
        self._alias_configs: Dict[str, Optional[AliasConfig]] = {}

    def resolve(
        self,
        current_dir: str,
        specifier: str,
        working_directory: str,
    ) -> Optional[str]:
        """Resolve ``specifier`` as written in a file under ``current_dir``.

        A relative or absolute specifier naming a script that does not exist
        still resolves, to the path as written, so the traversal reports the
        missing file instead of skipping it.

        Returns:
            Normalized absolute path, or None if nothing local matches
        """
        if not isinstance(specifier, str) or not specifier:
            return None

        local = is_relative_specifier(specifier) or os.path.isabs(specifier)
        if local:
            bases = [os.path.join(current_dir, specifier)]
        else:
            bases = self._alias_bases(specifier, working_directory)

        bases = [
            os.path.normpath(base if os.path.isabs(base) else os.path.join(working_directory, base))
            for base in bases
        ]
        for base in bases:
            found = self._probe(base)
            if found is not None:
                return found

        if local and self.is_script_path(bases[0]) and not self._is_file(bases[0]):
            logger.debug("No file for %r, reporting %s", specifier, bases[0])
            return bases[0]

        logger.debug("Unresolved specifier %r from %s", specifier, current_dir)
        return None

    def is_script_path(self, path: str) -> bool:
        """Tell whether a path can hold a parseable module.

        Extensionless paths count, so that executables such as ``bin/cli``
        are followed.
        """
        suffix = os.path.splitext(path)[1].lower()
        return suffix == "" or suffix in self.extensions

    def _probe(self, base: str) -> Optional[str]:
        if self._is_file(base) and self.is_script_path(base):
            return base
        for extension in self.extensions:
            candidate = base + extension
            if self._is_file(candidate):
                return candidate
        for extension in self.extensions:
            candidate = os.path.join(base, INDEX_BASENAME + extension)
            if self._is_file(candidate):
                return candidate
        return None

    def _alias_bases(self, specifier: str, working_directory: str) -> List[str]:
        config = self._alias_config(working_directory)
        if config is None:
            return []
        base_url, paths, config_dir = config

        bases = []
        match = _best_alias_match(specifier, paths)
        if match is not None:
            pattern, captured = match
            root = base_url or config_dir
            for target in paths[pattern]:
                bases.append(os.path.join(root, target.replace("*", captured, 1)))

        if base_url is not None:
            bases.append(os.path.join(base_url, specifier))
        return bases

    def _alias_config(self, working_directory: str) -> Optional[AliasConfig]:
        if working_directory not in self._alias_configs:
            self._alias_configs[working_directory] = self._load_alias_config(working_directory)
        return self._alias_configs[working_directory]

    def _load_alias_config(self, working_directory: str) -> Optional[AliasConfig]:
        for name in ALIAS_CONFIG_FILES:
            config_path = os.path.join(working_directory, name)
            if not self._is_file(config_path):
                continue
            text = self._read_text(config_path)
            if text is None:
                continue
            try:
                data = loads_jsonc(text)
            except ValueError as e:
                logger.debug("Ignoring malformed %s: %s", config_path, e)
                continue

            options = data.get("compilerOptions") if isinstance(data, dict) else None
            if not isinstance(options, dict):
                options = {}

            base_url = options.get("baseUrl")
            if isinstance(base_url, str):
                base_url = os.path.normpath(os.path.join(working_directory, base_url))
            else:
                base_url = None

            paths = {}
            raw_paths = options.get("paths")
            if isinstance(raw_paths, dict):
                for pattern, targets in raw_paths.items():
                    if isinstance(targets, list):
                        paths[pattern] = [t for t in targets if isinstance(t, str)]

            return base_url, paths, working_directory
        return None


def _best_alias_match(specifier: str, paths: Dict[str, List[str]]) -> Optional[Tuple[str, str]]:
    """Find the ``paths`` pattern matching ``specifier`` with the longest prefix.

    Returns:
        (pattern, text captured by the wildcard) or None
    """
    if specifier in paths:
        return specifier, ""

    best = None
    best_prefix_length = -1
    for pattern in paths:
        if pattern.count("*") != 1:
            continue
        prefix, suffix = pattern.split("*")
        if (
            len(specifier) >= len(prefix) + len(suffix)
            and specifier.startswith(prefix)
            and specifier.endswith(suffix)
            and len(prefix) > best_prefix_length
        ):
            captured = specifier[len(prefix):len(specifier) - len(suffix)]
            best = (pattern, captured)
            best_prefix_length = len(prefix)
    return best
