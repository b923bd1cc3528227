"""Unit tests for app.services.diff.service."""
import pytest

from app.core.errors import ErrorCode, InputTooLargeError, InvalidInputError
from app.services.diff.models import EditKind
from app.services.diff.service import DiffService


# ─── Scenarios ────────────────────────────────────────────────────────────────

def test_modified_line_scenario(diff_service):
    result = diff_service.compute("a\nb\nc", "a\nx\nc")

    assert [e.kind for e in result.full_diff] == [
        EditKind.EQUAL,
        EditKind.DELETED,
        EditKind.ADDED,
        EditKind.EQUAL,
    ]
    assert (result.stats.added, result.stats.deleted) == (1, 1)
    assert len(result.hunks) == 1
    assert len(result.hunks[0].lines) == 4

    data = result.to_dict()
    deleted, added = data["fullDiff"][1], data["fullDiff"][2]
    assert deleted["inlineDiff"] == [{"text": "b", "type": "deleted"}]
    assert added["inlineDiff"] == [{"text": "x", "type": "added"}]
    assert deleted["isModified"] is True and added["isModified"] is True
    assert data["hunks"][0]["lines"][1] == deleted


def test_single_change_in_ten_lines(diff_service):
    left = "\n".join(str(n) for n in range(1, 11))
    right = left.replace("\n5\n", "\nX\n")
    result = diff_service.compute(left, right)

    assert len(result.hunks) == 1
    hunk = result.hunks[0]
    assert (hunk.left_start, hunk.right_start) == (2, 2)
    kinds = [e.kind for e in hunk.lines]
    assert kinds[:3] == [EditKind.EQUAL] * 3
    assert kinds[3:5] == [EditKind.DELETED, EditKind.ADDED]
    assert all(k is EditKind.EQUAL for k in kinds[5:])


def test_empty_texts(diff_service):
    result = diff_service.compute("", "")
    assert result.to_dict() == {
        "hunks": [],
        "stats": {"added": 0, "deleted": 0},
        "fullDiff": [
            {"type": "equal", "left": "", "right": "", "leftLine": 1, "rightLine": 1}
        ],
    }
    assert not result.has_changes


def test_identical_text_has_no_changes(diff_service):
    text = "alpha\nbeta\n\ngamma\n"
    result = diff_service.compute(text, text)
    assert result.hunks == []
    assert all(e.kind is EditKind.EQUAL for e in result.full_diff)
    assert not result.has_changes


def test_unannotated_entries_omit_optional_keys(diff_service):
    data = diff_service.compute("a\nb", "a\nb\nc").to_dict()
    for entry in data["fullDiff"]:
        assert set(entry) == {"type", "left", "right", "leftLine", "rightLine"}
    assert data["fullDiff"][-1] == {
        "type": "added",
        "left": None,
        "right": "c",
        "leftLine": None,
        "rightLine": 3,
    }


def test_context_lines_is_configurable():
    left = "\n".join(str(n) for n in range(1, 21))
    right = left.replace("\n10\n", "\nX\n")
    result = DiffService(context_lines=1).compute(left, right)
    assert len(result.hunks) == 1
    assert len(result.hunks[0].lines) == 4
    assert result.hunks[0].left_start == 9


# ─── Validation ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("left, right", [(None, "x"), ("x", None)])
def test_missing_input_rejected(diff_service, left, right):
    with pytest.raises(InvalidInputError) as info:
        diff_service.compute(left, right)
    assert info.value.code is ErrorCode.DIFF_INVALID_INPUT
    assert info.value.http_status == 422


@pytest.mark.parametrize("bad", [42, ["a", "b"], {"text": "a"}, b"bytes"])
def test_non_string_input_rejected(diff_service, bad):
    with pytest.raises(InvalidInputError) as info:
        diff_service.compute("x", bad)
    assert info.value.detail["field"] == "right"


def test_line_ceiling():
    service = DiffService(max_input_lines=3)
    service.compute("1\n2\n3", "1\n2\n3")
    with pytest.raises(InputTooLargeError) as info:
        service.compute("1\n2\n3\n4", "1")
    assert info.value.code is ErrorCode.DIFF_INPUT_TOO_LARGE
    assert info.value.detail == {"field": "left", "lines": 4, "limit": 3}


def test_char_ceiling():
    service = DiffService(max_input_chars=5)
    with pytest.raises(InputTooLargeError) as info:
        service.compute("ok", "too long")
    assert info.value.http_status == 413
    assert info.value.detail["field"] == "right"


def test_negative_context_rejected():
    with pytest.raises(ValueError):
        DiffService(context_lines=-1)


def test_from_settings(settings):
    service = DiffService.from_settings(settings)
    assert service.context_lines == settings.context_lines
    assert service.max_input_lines == settings.max_input_lines
    assert service.max_input_chars == settings.max_input_chars
    assert service.max_table_cells == settings.max_table_cells
    assert service.max_inline_cells == settings.max_inline_cells


# ─── Table ceilings ───────────────────────────────────────────────────────────

def test_line_table_ceiling():
    service = DiffService(max_table_cells=12)
    service.compute("1\n2\n3", "1\n2\n3\n4")
    with pytest.raises(InputTooLargeError) as info:
        service.compute("1\n2\n3\n4", "1\n2\n3\n4")
    assert info.value.code is ErrorCode.DIFF_INPUT_TOO_LARGE
    assert info.value.detail == {"cells": 16, "limit": 12}


def test_long_modified_pair_skips_inline_diff():
    left = " ".join(f"w{n}" for n in range(500))
    right = " ".join(f"v{n}" for n in range(500))
    service = DiffService(max_inline_cells=1_000)
    result = service.compute(f"a\n{left}\nc", f"a\n{right}\nc")

    assert (result.stats.added, result.stats.deleted) == (1, 1)
    assert result.has_changes
    lines = result.to_dict()["hunks"][0]["lines"]
    assert [line["type"] for line in lines] == ["equal", "deleted", "added", "equal"]
    assert not any("inlineDiff" in line for line in lines)


def test_short_modified_pair_still_annotated_under_inline_limit():
    service = DiffService(max_inline_cells=1_000)
    result = service.compute("a\nb\nc", "a\nx\nc")
    assert result.full_diff[1].is_modified and result.full_diff[2].is_modified
