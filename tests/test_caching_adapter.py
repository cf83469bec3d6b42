"""Tests for the caching source adapters."""

import os

import pytest

from findallimports import (
    CachingSourceAdapter,
    FilesystemCachingAdapter,
    JavaScriptSourceAdapter,
    find_all_imports,
)
from findallimports.testing import InMemorySourceAdapter


DIAMOND = {
    "/project/a.js": 'import "./b.js";\nimport "./c.js";\n',
    "/project/b.js": 'import "./d.js";\n',
    "/project/c.js": 'import "./d.js";\n',
    "/project/d.js": "",
}


class TestCachingSourceAdapter:

    def test_each_file_parsed_once(self):
        base = InMemorySourceAdapter(DIAMOND)
        adapter = CachingSourceAdapter(base)
        result = find_all_imports("/project/a.js", cwd="/project", adapter=adapter)
        assert result.visited == set(DIAMOND)
        assert sorted(base.parse_calls) == sorted(DIAMOND)
        assert adapter.cache_hits == 1

    def test_uncached_adapter_reparses(self):
        base = InMemorySourceAdapter(DIAMOND)
        find_all_imports("/project/a.js", cwd="/project", adapter=base)
        assert base.parse_calls.count("/project/d.js") == 2

    def test_cache_shared_across_traversals(self):
        base = InMemorySourceAdapter(DIAMOND)
        adapter = CachingSourceAdapter(base)
        find_all_imports("/project/a.js", cwd="/project", adapter=adapter)
        find_all_imports("/project/c.js", cwd="/project", adapter=adapter)
        assert len(base.parse_calls) == len(DIAMOND)

    def test_failed_parse_is_not_cached(self):
        base = InMemorySourceAdapter({"/project/a.js": "import {"})
        adapter = CachingSourceAdapter(base)
        assert adapter.parse("/project/a.js") is None
        base.files["/project/a.js"] = "export default 1;"
        assert adapter.parse("/project/a.js") is not None
        assert adapter.cache_misses == 2

    def test_delegates_exists_and_resolve(self):
        base = InMemorySourceAdapter(DIAMOND)
        adapter = CachingSourceAdapter(base)
        assert adapter.exists("/project/a.js")
        assert not adapter.exists("/project/z.js")
        assert adapter.resolve("/project", "./b", "/project") == "/project/b.js"

    def test_stats_and_clear(self):
        adapter = CachingSourceAdapter(InMemorySourceAdapter(DIAMOND), max_size=2, ttl=60)
        adapter.parse("/project/a.js")
        adapter.parse("/project/a.js")
        stats = adapter.get_cache_stats()
        assert stats["cache_hits"] == 1
        assert stats["cache_misses"] == 1
        assert stats["hit_rate"] == pytest.approx(0.5)
        assert stats["max_size"] == 2
        assert stats["ttl"] == 60

        adapter.clear_cache()
        assert adapter.get_cache_stats()["cache_size"] == 0
        assert adapter.cache_hits == 0

    def test_repr(self):
        adapter = CachingSourceAdapter(JavaScriptSourceAdapter())
        assert repr(adapter) == "CachingSourceAdapter(JavaScriptSourceAdapter())"


class TestFilesystemCachingAdapter:

    def test_modified_file_is_reparsed(self, tmp_path):
        entry = tmp_path / "a.js"
        other = tmp_path / "b.js"
        entry.write_text("export default 1;\n")
        other.write_text("")
        adapter = FilesystemCachingAdapter(JavaScriptSourceAdapter())

        first = find_all_imports(str(entry), cwd=str(tmp_path), adapter=adapter)
        assert first.visited == {str(entry)}

        entry.write_text('import "./b.js";\nexport default 1;\n')
        stat = os.stat(entry)
        # Make the change visible even on coarse mtime filesystems
        os.utime(entry, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))

        second = find_all_imports(str(entry), cwd=str(tmp_path), adapter=adapter)
        assert second.visited == {str(entry), str(other)}

    def test_unchanged_file_hits_cache(self, tmp_path):
        entry = tmp_path / "a.js"
        entry.write_text("export default 1;\n")
        adapter = FilesystemCachingAdapter(JavaScriptSourceAdapter())
        adapter.parse(str(entry))
        adapter.parse(str(entry))
        assert adapter.cache_hits == 1
