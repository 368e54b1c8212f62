import pytest

from workspace_context.matcher import is_ignored, matches_pattern, parent_directory
from workspace_context.models import IgnorePolicy


@pytest.mark.parametrize(
    "path, expected",
    [
        ("dist", True),
        ("dist/app.js", True),
        ("dist/nested/deep.js", True),
        ("distribution/app.js", False),
        ("src/dist", False),
    ],
)
def test_plain_pattern_matches_at_segment_boundary(path, expected):
    assert matches_pattern("dist", path) is expected


def test_star_spans_directories():
    assert matches_pattern("*.log", "server.log")
    assert matches_pattern("*.log", "logs/today/server.log")
    assert not matches_pattern("*.log", "server.log.txt")
    assert matches_pattern("npm-debug.log*", "npm-debug.log.1")


def test_trailing_separator_is_stripped():
    assert matches_pattern("build/", "build")
    assert matches_pattern("build/", "build/out.txt")


def test_other_metacharacters_are_literal():
    assert not matches_pattern("file?.txt", "file1.txt")
    assert matches_pattern("file?.txt", "file?.txt")
    assert not matches_pattern("a.b", "axb")
    assert matches_pattern("[abc]", "[abc]/x")
    assert not matches_pattern("[abc]", "a")


def test_no_negation_or_anchoring():
    assert matches_pattern("!keep.txt", "!keep.txt")
    assert not matches_pattern("!keep.txt", "keep.txt")
    assert not matches_pattern("/dist", "dist")


def test_parent_directory_of_top_level_entry_is_root():
    assert parent_directory("index.ts") == "."
    assert parent_directory("src/index.ts") == "src"


def test_pattern_hit_is_ignored():
    policy = IgnorePolicy(patterns=frozenset({"node_modules", "*.png"}))
    assert is_ignored("node_modules", policy, is_dir=True)
    assert is_ignored("node_modules/pkg.json", policy)
    assert is_ignored("img/logo.png", policy)
    assert not is_ignored("src/index.ts", policy)


def test_keep_directory_overrides_patterns():
    policy = IgnorePolicy(
        patterns=frozenset({"build", "*.txt"}),
        keep_directories=frozenset({"build"}),
    )
    assert not is_ignored("build", policy, is_dir=True)
    assert not is_ignored("build/out.txt", policy)
    assert not is_ignored("build/sub/deep.txt", policy)
    assert is_ignored("notes.txt", policy)


def test_keep_directory_name_prefix_is_not_an_ancestor():
    policy = IgnorePolicy(
        patterns=frozenset({"*.txt"}),
        keep_directories=frozenset({"build"}),
    )
    assert is_ignored("buildx/out.txt", policy)


def test_directories_leading_to_keep_directory_stay_visible():
    policy = IgnorePolicy(
        patterns=frozenset({"node_modules"}),
        keep_directories=frozenset({"node_modules/pkg"}),
    )
    assert not is_ignored("node_modules", policy, is_dir=True)
    assert not is_ignored("node_modules/pkg", policy, is_dir=True)
    assert not is_ignored("node_modules/pkg/index.js", policy)
    assert is_ignored("node_modules/other.js", policy)
    assert is_ignored("node_modules/other", policy, is_dir=True)


def test_root_keep_directory_keeps_everything():
    policy = IgnorePolicy(
        patterns=frozenset({"dist"}),
        keep_directories=frozenset({"."}),
    )
    assert not is_ignored("dist", policy, is_dir=True)
    assert not is_ignored("dist/app.js", policy)
