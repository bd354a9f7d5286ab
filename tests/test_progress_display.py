"""Tests for the live progress panel."""

import io

from rich.console import Console

from warodai.progress_display import ProgressDisplay, format_elapsed, format_metric


def test_disabled_display_records_metrics():
    with ProgressDisplay("Converting", enabled=False) as progress:
        progress.update(Files=1, Terms=2)
        progress.update(Files=2)

    assert progress.metrics == {"Files": 2, "Terms": 2}
    assert progress.calls == 2
    assert progress.live is None


def test_enabled_display_panel():
    console = Console(file=io.StringIO(), force_terminal=False, width=80)

    with ProgressDisplay("Converting", update_interval=1, console=console) as progress:
        progress.update(Files=1500, Terms=3000)

    assert progress.live is None

    console.print(progress._render())
    output = console.file.getvalue()
    assert "Files:" in output
    assert "1,500" in output
    assert "Elapsed:" in output


def test_format_metric():
    assert format_metric(12345) == "12,345"
    assert format_metric(1.5) == "1.50"
    assert format_metric("done") == "done"


def test_format_elapsed():
    assert format_elapsed(65) == "01:05"
    assert format_elapsed(3725) == "01:02:05"
