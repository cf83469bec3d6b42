"""Tests for Node-style specifier resolution on a real directory."""

import json
import os

import pytest

from findallimports.adapters.resolver import (
    ImportPathResolver,
    is_relative_specifier,
    loads_jsonc,
)


def touch(root, relative, content=""):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return os.path.normpath(str(path))


@pytest.fixture
def project(tmp_path):
    touch(tmp_path, "src/app.js")
    touch(tmp_path, "src/util.js")
    touch(tmp_path, "src/util.ts")
    touch(tmp_path, "src/typed.ts")
    touch(tmp_path, "src/view.jsx")
    touch(tmp_path, "src/rules/index.ts")
    touch(tmp_path, "src/styles.css", "body {}")
    touch(tmp_path, "src/data.json", "{}")
    touch(tmp_path, "bin/cli", "#!/usr/bin/env node\n")
    return tmp_path


@pytest.fixture
def resolver():
    return ImportPathResolver()


class TestRelativeSpecifiers:

    def test_exact_file(self, project, resolver):
        src = str(project / "src")
        assert resolver.resolve(src, "./util.ts", str(project)) == os.path.join(src, "util.ts")

    def test_extension_probing_follows_extension_order(self, project, resolver):
        src = str(project / "src")
        # util.js and util.ts both exist; .js is probed first
        assert resolver.resolve(src, "./util", str(project)) == os.path.join(src, "util.js")

    def test_typescript_extension(self, project, resolver):
        src = str(project / "src")
        assert resolver.resolve(src, "./typed", str(project)) == os.path.join(src, "typed.ts")

    def test_jsx_extension(self, project, resolver):
        src = str(project / "src")
        assert resolver.resolve(src, "./view", str(project)) == os.path.join(src, "view.jsx")

    def test_directory_index(self, project, resolver):
        src = str(project / "src")
        expected = os.path.join(src, "rules", "index.ts")
        assert resolver.resolve(src, "./rules", str(project)) == expected

    def test_parent_directory(self, project, resolver):
        rules = str(project / "src" / "rules")
        expected = os.path.join(str(project / "src"), "app.js")
        assert resolver.resolve(rules, "../app.js", str(project)) == expected

    def test_dot_resolves_directory_index(self, project, resolver):
        rules = str(project / "src" / "rules")
        assert resolver.resolve(rules, ".", str(project)) == os.path.join(rules, "index.ts")

    def test_result_is_normalized(self, project, resolver):
        src = str(project / "src")
        result = resolver.resolve(src, "./rules/../util.js", str(project))
        assert result == os.path.join(src, "util.js")

    def test_extensionless_executable(self, project, resolver):
        bin_dir = str(project / "bin")
        assert resolver.resolve(bin_dir, "./cli", str(project)) == os.path.join(bin_dir, "cli")


class TestMissingAndForeignFiles:

    def test_missing_script_is_returned_as_written(self, project, resolver):
        src = str(project / "src")
        expected = os.path.join(src, "missing.js")
        assert resolver.resolve(src, "./missing.js", str(project)) == expected

    def test_missing_extensionless_is_returned_as_written(self, project, resolver):
        src = str(project / "src")
        expected = os.path.join(src, "missing")
        assert resolver.resolve(src, "./missing", str(project)) == expected

    @pytest.mark.parametrize("specifier", ["./styles.css", "./data.json", "./logo.svg"])
    def test_non_script_files_are_skipped(self, project, resolver, specifier):
        src = str(project / "src")
        assert resolver.resolve(src, specifier, str(project)) is None

    @pytest.mark.parametrize("specifier", ["react", "@scope/pkg", "node:fs", "lodash/merge"])
    def test_bare_specifiers(self, project, resolver, specifier):
        assert resolver.resolve(str(project / "src"), specifier, str(project)) is None

    @pytest.mark.parametrize("specifier", ["", None, 42])
    def test_unusable_specifiers(self, project, resolver, specifier):
        assert resolver.resolve(str(project / "src"), specifier, str(project)) is None

    def test_absolute_specifier(self, project, resolver):
        target = os.path.join(str(project / "src"), "typed")
        assert resolver.resolve("/elsewhere", target, str(project)) == target + ".ts"


class TestAliases:

    def test_tsconfig_paths_with_comments(self, project, resolver):
        (project / "tsconfig.json").write_text(
            "{\n"
            "  // generated by the scaffolder\n"
            '  "compilerOptions": {\n'
            '    "baseUrl": ".",\n'
            '    "paths": { "@app/*": ["src/*"], },\n'
            "  },\n"
            "}\n"
        )
        result = resolver.resolve(str(project / "bin"), "@app/typed", str(project))
        assert result == os.path.join(str(project / "src"), "typed.ts")

    def test_longest_prefix_wins(self, project, resolver):
        touch(project, "lib/rules/index.js")
        (project / "tsconfig.json").write_text(json.dumps({
            "compilerOptions": {
                "paths": {"@/*": ["src/*"], "@/rules/*": ["lib/rules/*"]},
            },
        }))
        result = resolver.resolve(str(project), "@/rules/index", str(project))
        assert result == os.path.join(str(project / "lib" / "rules"), "index.js")

    def test_exact_alias(self, project, resolver):
        (project / "tsconfig.json").write_text(json.dumps({
            "compilerOptions": {"paths": {"config": ["src/app.js"]}},
        }))
        result = resolver.resolve(str(project), "config", str(project))
        assert result == os.path.join(str(project / "src"), "app.js")

    def test_jsconfig_base_url(self, project, resolver):
        (project / "jsconfig.json").write_text(json.dumps({
            "compilerOptions": {"baseUrl": "src"},
        }))
        result = resolver.resolve(str(project), "rules", str(project))
        assert result == os.path.join(str(project / "src" / "rules"), "index.ts")

    def test_unmatched_alias_is_bare(self, project, resolver):
        (project / "tsconfig.json").write_text(json.dumps({
            "compilerOptions": {"baseUrl": "src"},
        }))
        assert resolver.resolve(str(project), "react", str(project)) is None

    def test_malformed_config_is_ignored(self, project, resolver):
        (project / "tsconfig.json").write_text("{ not json")
        assert resolver.resolve(str(project), "@app/typed", str(project)) is None

    def test_config_is_read_once_per_working_directory(self, project):
        reads = []

        def read_text(path):
            reads.append(path)
            with open(path) as f:
                return f.read()

        (project / "tsconfig.json").write_text(json.dumps({
            "compilerOptions": {"baseUrl": "src"},
        }))
        resolver = ImportPathResolver(read_text=read_text)
        resolver.resolve(str(project), "util", str(project))
        resolver.resolve(str(project), "typed", str(project))
        assert reads == [os.path.join(str(project), "tsconfig.json")]


def test_is_relative_specifier():
    assert is_relative_specifier("./a")
    assert is_relative_specifier("../a")
    assert is_relative_specifier(".")
    assert is_relative_specifier("..")
    assert not is_relative_specifier(".hidden")
    assert not is_relative_specifier("pkg/./a")


def test_loads_jsonc_keeps_slashes_in_strings():
    data = loads_jsonc('{"url": "https://example.com/*x*/", /* note */ "list": [1, 2,],}')
    assert data == {"url": "https://example.com/*x*/", "list": [1, 2]}
