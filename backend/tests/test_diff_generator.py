"""Tests for line/word diffs, the multi-file aggregator and patch output."""

from models.diff import RowType, TokenType
from services.diff_generator import (
    diff_lines,
    diff_snapshots,
    generate_patch,
    lcs_diff,
    tokenize,
)

from .conftest import make_snapshot


def _side(tokens, kinds):
    return "".join(t.value for t in tokens if t.type in kinds)


# ---------------------------------------------------------------------------
# Word differ
# ---------------------------------------------------------------------------

def test_tokenize_splits_words_whitespace_and_symbols():
    assert tokenize("Hello,  world!") == ["Hello", ",", "  ", "world", "!"]


def test_tokenize_reconstructs_line():
    line = "  role: build -> deploy (v2.0)\t"
    assert "".join(tokenize(line)) == line


def test_tokenize_empty_line():
    assert tokenize("") == []


def test_lcs_diff_reconstructs_both_sides():
    left = "The quick brown fox jumps"
    right = "The slow brown cat jumps high"
    tokens = lcs_diff(tokenize(left), tokenize(right))

    assert _side(tokens, {TokenType.SAME, TokenType.DEL}) == left
    assert _side(tokens, {TokenType.SAME, TokenType.ADD}) == right


def test_lcs_diff_prefers_deletion_on_ties():
    tokens = lcs_diff(["a"], ["b"])
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.DEL, "a"),
        (TokenType.ADD, "b"),
    ]


def test_lcs_diff_remainders():
    assert [t.type for t in lcs_diff(["a", "b"], [])] == [TokenType.DEL, TokenType.DEL]
    assert [t.type for t in lcs_diff([], ["a"])] == [TokenType.ADD]


# ---------------------------------------------------------------------------
# Line differ
# ---------------------------------------------------------------------------

def test_identical_texts_are_all_same():
    text = "line one\nline two\n\nline four"
    rows = diff_lines(text, text)
    assert rows
    assert all(row.type == RowType.SAME for row in rows)


def test_added_and_removed_lines():
    rows = diff_lines("a\n", "a\nb")
    assert [row.type for row in rows] == [RowType.SAME, RowType.ADDED]
    assert rows[1].right == "b"

    rows = diff_lines("a\nb", "a")
    assert [row.type for row in rows] == [RowType.SAME, RowType.REMOVED]
    assert rows[1].left == "b"


def test_whitespace_normalization():
    assert diff_lines("a   b", "a b", ignore_whitespace=True)[0].type == RowType.SAME
    assert diff_lines("a   b", "a b", ignore_whitespace=False)[0].type == RowType.MODIFIED


def test_modified_row_word_diff_uses_raw_lines():
    rows = diff_lines("a   b c", "a b d", ignore_whitespace=True)
    row = rows[0]
    assert row.type == RowType.MODIFIED
    assert _side(row.word_diff, {TokenType.SAME, TokenType.DEL}) == "a   b c"
    assert _side(row.word_diff, {TokenType.SAME, TokenType.ADD}) == "a b d"


def test_word_diff_only_on_modified_rows():
    rows = diff_lines("same\nold\n", "same\nnew\nextra")
    assert rows[0].word_diff is None
    assert rows[1].word_diff is not None
    assert rows[2].type == RowType.ADDED
    assert rows[2].word_diff is None


def test_word_diff_key_omitted_from_unmodified_rows():
    rows = diff_lines("same\nold\n", "same\nnew\nextra")
    dumped = [row.model_dump(by_alias=True) for row in rows]

    assert "wordDiff" not in dumped[0]
    assert "wordDiff" not in dumped[2]
    assert dumped[1]["wordDiff"][0] == {"type": "del", "value": "old"}
    assert "word_diff" not in rows[0].model_dump()


def test_inserted_line_cascades_into_modified_rows():
    rows = diff_lines("a\nb\nc", "a\nX\nb\nc")
    assert [row.type for row in rows] == [
        RowType.SAME,
        RowType.MODIFIED,
        RowType.MODIFIED,
        RowType.ADDED,
    ]


def test_diff_lines_is_deterministic():
    left = "alpha beta\ngamma\n"
    right = "alpha  delta\ngamma\nepsilon"
    first = [row.model_dump() for row in diff_lines(left, right, ignore_whitespace=True)]
    second = [row.model_dump() for row in diff_lines(left, right, ignore_whitespace=True)]
    assert first == second


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------

def test_diff_snapshots_file_union_order():
    left = make_snapshot(files={"A": "a", "B": "b"}, name="left")
    right = make_snapshot(files={"B": "b", "C": "c"}, name="right")

    result = diff_snapshots(left, right)

    assert [f.file for f in result.full] == ["A", "B", "C"]
    assert [f.changed for f in result.full] == [True, False, True]
    assert result.full[0].rows[0].type == RowType.REMOVED
    assert result.full[2].rows[0].type == RowType.ADDED


def test_diff_snapshots_only_changed_keeps_full():
    left = make_snapshot(files={"A": "a", "B": "b"}, name="left")
    right = make_snapshot(files={"A": "a", "B": "bb"}, name="right")

    result = diff_snapshots(left, right, only_changed=True)

    assert [f.file for f in result.files] == ["B"]
    assert [f.file for f in result.full] == ["A", "B"]


def test_diff_snapshots_tools_scenario():
    left = make_snapshot(
        form_data={"tools": "x"},
        files={"Tools.md": "Available Tools\nx\n"},
        name="L",
    )
    right = make_snapshot(
        form_data={"tools": "x,y"},
        files={"Tools.md": "Available Tools\nx,y\n"},
        name="R",
    )

    result = diff_snapshots(left, right)

    assert len(result.full) == 1
    tools = result.full[0]
    assert tools.file == "Tools.md"
    assert tools.changed is True
    assert tools.rows[0].type == RowType.SAME
    assert tools.rows[1].type == RowType.MODIFIED
    added = "".join(t.value for t in tools.rows[1].word_diff if t.type == TokenType.ADD)
    assert added == ",y"


# ---------------------------------------------------------------------------
# Patch
# ---------------------------------------------------------------------------

def test_generate_patch():
    left = make_snapshot(files={"A.md": "keep\nold\ngone", "B.md": "same"}, name="v1")
    right = make_snapshot(files={"A.md": "keep\nnew", "B.md": "same"}, name="v2")
    result = diff_snapshots(left, right)

    patch = generate_patch(left, right, result)

    assert patch.split("\n") == [
        "--- v1",
        "+++ v2",
        "diff -- A.md",
        "- old",
        "+ new",
        "- gone",
    ]
