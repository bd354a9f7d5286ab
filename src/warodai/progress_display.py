"""
Rich-based live progress panel for the conversion run.

Shows counters that update in place instead of scrolling the terminal:

    with ProgressDisplay("Converting Warodai") as progress:
        for path in files:
            ...
            progress.update(Files=n, Terms=terms)
"""

import time
from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class ProgressDisplay:
    """
    Context manager around rich.live.Live.

    When disabled, update() only records metrics so callers need no
    separate code path for quiet runs.
    """

    def __init__(
        self,
        title: str = "Progress",
        update_interval: int = 500,
        enabled: bool = True,
        console: Optional[Console] = None
    ):
        """
        Args:
            title: Panel title
            update_interval: Redraw every N update() calls
            enabled: Show the live panel at all
            console: Console to draw on (defaults to rich's stdout console)
        """
        self.title = title
        self.update_interval = max(1, update_interval)
        self.enabled = enabled
        self.console = console

        self.metrics: Dict[str, Any] = {}
        self.calls = 0
        self.start_time = 0.0
        self.live: Optional[Live] = None

    def __enter__(self):
        self.start_time = time.monotonic()
        if self.enabled:
            self.live = Live(self._render(), console=self.console, refresh_per_second=4)
            self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.live:
            self.live.update(self._render())
            self.live.__exit__(exc_type, exc_val, exc_tb)
            self.live = None
        return False

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.start_time

    def update(self, **metrics):
        """Record metric values, redrawing every update_interval calls."""
        self.calls += 1
        self.metrics.update(metrics)

        if self.live and self.calls % self.update_interval == 0:
            self.live.update(self._render())

    def _render(self) -> Panel:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="left", no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)

        for key, value in self.metrics.items():
            grid.add_row(
                Text(f"{key}:", style="bold grey50"),
                Text(format_metric(value), style="bright_cyan")
            )
        grid.add_row(
            Text("Elapsed:", style="bold grey50"),
            Text(format_elapsed(self.elapsed), style="bright_cyan")
        )

        return Panel(grid, title=self.title, box=box.SIMPLE, border_style="bright_black")


def format_metric(value: Any) -> str:
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


def format_elapsed(seconds: float) -> str:
    """Format as MM:SS, or HH:MM:SS past one hour."""
    seconds = int(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
