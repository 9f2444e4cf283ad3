import pytest

from zenops.errors import UnsafeRelativePathError
from zenops.git import (
    GitFileStatus,
    GitStatusKind,
    parse_is_inside_work_tree,
    parse_porcelain_v2,
    safe_relative_path,
    status_from_xy,
)


@pytest.mark.parametrize("raw", ["true", "true\n", "  true  "])
def test_parse_is_inside_work_tree_recognises_true(raw):
    assert parse_is_inside_work_tree(raw) is True


@pytest.mark.parametrize("raw", ["", "\n"])
def test_parse_is_inside_work_tree_treats_empty_as_not_a_repo(raw):
    assert parse_is_inside_work_tree(raw) is False


def test_parse_is_inside_work_tree_treats_false_as_not_a_work_tree():
    assert parse_is_inside_work_tree("false") is False


@pytest.mark.parametrize("raw", ["garbage", "yes", "fatal: not a git repository"])
def test_parse_is_inside_work_tree_falls_back_to_false_for_unknown_output(raw):
    assert parse_is_inside_work_tree(raw) is False


def test_parse_porcelain_v2_skips_unknown_tag():
    assert parse_porcelain_v2("xyz some/path\n") == []


def test_parse_porcelain_v2_skips_ignored_marker():
    assert parse_porcelain_v2("! ignored.txt\n") == []


def test_parse_porcelain_v2_rejects_unsafe_path():
    out = "1 .M N... 100644 100644 100644 abcd abcd ../escape\n"
    with pytest.raises(UnsafeRelativePathError):
        parse_porcelain_v2(out)


def test_parse_porcelain_v2_handles_mixed_known_and_skipped_lines():
    out = "! ignored.txt\n? wanted.txt\nxyz junk\n"
    assert parse_porcelain_v2(out) == [
        GitFileStatus(GitStatusKind.UNTRACKED, "wanted.txt")
    ]


def test_status_reports_modified_for_a_changed_tracked_file():
    out = "1 .M N... 100644 100644 100644 abcd abcd config.toml\n"
    assert parse_porcelain_v2(out) == [
        GitFileStatus(GitStatusKind.MODIFIED, "config.toml")
    ]


def test_status_reports_added_for_a_staged_only_new_file():
    out = "1 A. N... 000000 100644 100644 0000 abcd staged.txt\n"
    assert parse_porcelain_v2(out) == [GitFileStatus(GitStatusKind.ADDED, "staged.txt")]


def test_status_reports_deleted_for_a_removed_tracked_file():
    out = "1 .D N... 100644 100644 000000 abcd abcd doomed.txt\n"
    assert parse_porcelain_v2(out) == [
        GitFileStatus(GitStatusKind.DELETED, "doomed.txt")
    ]


def test_status_reports_untracked_for_a_brand_new_file():
    assert parse_porcelain_v2("? never_added.txt\n") == [
        GitFileStatus(GitStatusKind.UNTRACKED, "never_added.txt")
    ]


def test_status_reports_modified_at_new_path_after_rename():
    out = "2 R. N... 100644 100644 100644 abcd abcd R100 new.txt\told.txt\n"
    assert parse_porcelain_v2(out) == [GitFileStatus(GitStatusKind.MODIFIED, "new.txt")]


def test_status_returns_empty_for_a_clean_repo():
    assert parse_porcelain_v2("") == []


def test_unmerged_entry_surfaces_as_other_with_code():
    out = "u UU N... 100644 100644 100644 100644 h1 h2 h3 conflict.txt\n"
    assert parse_porcelain_v2(out) == [
        GitFileStatus(GitStatusKind.OTHER, "conflict.txt", code="UU")
    ]


def test_path_with_spaces_is_kept_whole():
    out = "1 .M N... 100644 100644 100644 abcd abcd dir/my file.txt\n"
    assert parse_porcelain_v2(out) == [
        GitFileStatus(GitStatusKind.MODIFIED, "dir/my file.txt")
    ]


def test_crlf_line_endings_are_stripped():
    assert parse_porcelain_v2("? a.txt\r\n? b.txt\r\n") == [
        GitFileStatus(GitStatusKind.UNTRACKED, "a.txt"),
        GitFileStatus(GitStatusKind.UNTRACKED, "b.txt"),
    ]


def test_truncated_line_raises_value_error():
    with pytest.raises(ValueError):
        parse_porcelain_v2("1 .M N...\n")


@pytest.mark.parametrize(
    "xy, kind",
    [
        (".M", GitStatusKind.MODIFIED),
        ("M.", GitStatusKind.MODIFIED),
        (".T", GitStatusKind.MODIFIED),
        ("R.", GitStatusKind.MODIFIED),
        ("C.", GitStatusKind.MODIFIED),
        ("A.", GitStatusKind.ADDED),
        ("AM", GitStatusKind.MODIFIED),
        (".D", GitStatusKind.DELETED),
        ("AD", GitStatusKind.DELETED),
    ],
)
def test_status_from_xy_prefers_worktree_side(xy, kind):
    assert status_from_xy(xy, "f") == GitFileStatus(kind, "f")


def test_status_from_xy_unknown_code_is_other():
    assert status_from_xy("..", "f") == GitFileStatus(GitStatusKind.OTHER, "f", code="..")


def test_status_from_xy_empty_code_is_other():
    assert status_from_xy("", "f") == GitFileStatus(GitStatusKind.OTHER, "f", code="")


def test_to_json_for_simple_variant():
    status = GitFileStatus(GitStatusKind.MODIFIED, "config.toml")
    assert status.to_json() == {"kind": "modified", "data": "config.toml"}


def test_to_json_for_other_variant():
    status = GitFileStatus(GitStatusKind.OTHER, "x.txt", code="UU")
    assert status.to_json() == {
        "kind": "other",
        "data": {"code": "UU", "path": "x.txt"},
    }


def test_safe_relative_path_normalises():
    assert safe_relative_path("a/./b//c") == "a/b/c"


@pytest.mark.parametrize("path", ["..", "../escape", "a/../b", "/abs/path"])
def test_safe_relative_path_rejects_unsafe(path):
    with pytest.raises(UnsafeRelativePathError) as info:
        safe_relative_path(path)
    assert info.value.path == path