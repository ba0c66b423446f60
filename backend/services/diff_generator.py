"""
Diff Generator Service - Line and word level diffs between snapshots

Lines are compared by index, not realigned: an inserted line shows up as a
run of modified rows below it. Generated files are short and field-labelled,
so this keeps the output predictable.
"""

from __future__ import annotations

import re

from models.diff import DiffResult, DiffRow, FileDiff, RowType, TokenType, WordToken
from models.version import Snapshot

_TOKEN_RE = re.compile(r"\s+|\w+|[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(line: str) -> list[str]:
    """Split a line into whitespace runs, word runs and single symbols"""
    return _TOKEN_RE.findall(line)


def lcs_diff(a_tokens: list[str], b_tokens: list[str]) -> list[WordToken]:
    """Token-level diff based on the longest common subsequence"""
    n = len(a_tokens)
    m = len(b_tokens)

    # dp[i][j] = LCS length of a_tokens[i:] and b_tokens[j:]
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if a_tokens[i] == b_tokens[j]:
                dp[i][j] = dp[i + 1][j + 1] + 1
            else:
                dp[i][j] = max(dp[i + 1][j], dp[i][j + 1])

    out = []
    i = j = 0
    while i < n and j < m:
        if a_tokens[i] == b_tokens[j]:
            out.append(WordToken(type=TokenType.SAME, value=a_tokens[i]))
            i += 1
            j += 1
        elif dp[i + 1][j] >= dp[i][j + 1]:
            out.append(WordToken(type=TokenType.DEL, value=a_tokens[i]))
            i += 1
        else:
            out.append(WordToken(type=TokenType.ADD, value=b_tokens[j]))
            j += 1

    out.extend(WordToken(type=TokenType.DEL, value=token) for token in a_tokens[i:])
    out.extend(WordToken(type=TokenType.ADD, value=token) for token in b_tokens[j:])
    return out


def normalize_line(line: str, ignore_whitespace: bool) -> str:
    if not ignore_whitespace:
        return line
    return _WHITESPACE_RE.sub(" ", line).strip()


def diff_lines(
    left_text: str,
    right_text: str,
    ignore_whitespace: bool = False,
) -> list[DiffRow]:
    """Compare two texts line by line (index-aligned)"""
    left = (left_text or "").split("\n")
    right = (right_text or "").split("\n")

    rows = []
    for i in range(max(len(left), len(right))):
        left_line = left[i] if i < len(left) else ""
        right_line = right[i] if i < len(right) else ""

        if left_line == "" and right_line != "":
            rows.append(DiffRow(type=RowType.ADDED, left="", right=right_line, index=i))
        elif left_line != "" and right_line == "":
            rows.append(DiffRow(type=RowType.REMOVED, left=left_line, right="", index=i))
        elif normalize_line(left_line, ignore_whitespace) != normalize_line(
            right_line, ignore_whitespace
        ):
            rows.append(
                DiffRow(
                    type=RowType.MODIFIED,
                    left=left_line,
                    right=right_line,
                    index=i,
                    word_diff=lcs_diff(tokenize(left_line), tokenize(right_line)),
                )
            )
        else:
            rows.append(DiffRow(type=RowType.SAME, left=left_line, right=right_line, index=i))

    return rows


def diff_snapshots(
    left: Snapshot,
    right: Snapshot,
    ignore_whitespace: bool = False,
    only_changed: bool = False,
) -> DiffResult:
    """Diff every generated file of two snapshots"""
    left_files = left.files or {}
    right_files = right.files or {}

    # Left order first, then names only the right side has
    all_files = list(dict.fromkeys([*left_files, *right_files]))

    full = []
    for file in all_files:
        rows = diff_lines(
            left_files.get(file, ""),
            right_files.get(file, ""),
            ignore_whitespace=ignore_whitespace,
        )
        changed = any(row.type != RowType.SAME for row in rows)
        full.append(FileDiff(file=file, rows=rows, changed=changed))

    visible = [f for f in full if f.changed] if only_changed else list(full)
    return DiffResult(files=visible, full=full)


def generate_patch(left: Snapshot, right: Snapshot, diff_result: DiffResult) -> str:
    """Render a unified-diff style patch of every changed file"""
    out = [f"--- {left.name}", f"+++ {right.name}"]

    for file_diff in diff_result.full:
        if not file_diff.changed:
            continue
        out.append(f"diff -- {file_diff.file}")
        for row in file_diff.rows:
            if row.type == RowType.SAME:
                continue
            if row.type == RowType.REMOVED:
                out.append(f"- {row.left}")
            elif row.type == RowType.ADDED:
                out.append(f"+ {row.right}")
            else:
                out.append(f"- {row.left}")
                out.append(f"+ {row.right}")

    return "\n".join(out)
