"""Tests for the ``traversal_demo`` CLI demonstration script."""

from __future__ import annotations

import logging

import pytest

import traversal_demo


def test_cli_outputs_expected_demo_lines(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure the CLI emits the documented demonstration output."""

    assert traversal_demo.main([]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[:11] == [
        "Example tree",
        "1",
        "2 3",
        "4 5 · 6",
        "sum_leaf_nodes: 15",
        "count_internal_nodes: 3",
        "build_post_order_string: '452631'",
        "collect_level_order_values: [1, 2, 3, 4, 5, 6]",
        "count_distinct_values: 6",
        "has_strictly_increasing_path: True",
        "find_all_root_to_leaf_paths: [[1, 2, 4], [1, 2, 5], [1, 3, 6]]",
    ]
    assert lines[11] == ""
    assert lines[12:15] == ["Increasing tree", "5", "3 9"]
    assert "has_strictly_increasing_path: True" in lines[15:22]
    assert lines[23:26] == ["Empty tree", "<empty>", "sum_leaf_nodes: 0"]
    assert "find_all_root_to_leaf_paths: []" in lines[26:]


def test_cli_filters_cases(capsys: pytest.CaptureFixture[str]) -> None:
    assert traversal_demo.main(["--case", "increasing"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Increasing tree"
    assert "find_all_root_to_leaf_paths: [[5, 3], [5, 9]]" in lines
    assert "Example tree" not in lines


def test_cli_rejects_unknown_case(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        traversal_demo.main(["--case", "missing"])
    assert excinfo.value.code == 2
    assert "Unknown demo case(s): missing" in capsys.readouterr().err


def test_cli_debug_logging_reports_results(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="traversal_demo")
    traversal_demo.main(["--case", "Example", "--log-level", "DEBUG"])

    assert "sum_leaf_nodes on Example tree -> 15" in caplog.text
