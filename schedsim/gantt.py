from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import GanttSegment

PALETTE = ["blue", "red", "green", "yellow", "magenta", "bright_magenta", "cyan", "dark_orange"]

# (width in ticks, segment or None for an idle gap, tick at which the span ends)
Span = Tuple[int, Optional[GanttSegment], int]


def process_color(pid: int) -> str:
    """
    Color for a process, derived from its id so it stays the same across runs
    and algorithms.
    """
    return PALETTE[(pid - 1) % len(PALETTE)]


def _spans(segments: List[GanttSegment]) -> Iterator[Span]:
    """
    Walk a timeline from tick 0, yielding idle gaps and busy segments in order.
    """
    clock = 0
    for seg in sorted(segments, key=lambda s: (s.start, s.end)):
        if seg.start > clock:
            yield seg.start - clock, None, seg.start
        yield max(1, seg.end - seg.start), seg, seg.end
        clock = seg.end


def _time_marks(spans: List[Span]) -> str:
    return "0" + "".join(f"{end:>3}" for _, _, end in spans)


def render_gantt(segments: List[GanttSegment]) -> str:
    """
    Plain-text Gantt chart; idle ticks are drawn as dots.
    """
    if not segments:
        return "(no execution)"

    spans = list(_spans(segments))
    bar = "".join(("=" if seg else ".") * width for width, seg, _ in spans)
    labels = "".join((seg.name[:width] if seg else "").ljust(width) for width, seg, _ in spans)

    return "\n".join(["Gantt Chart:", f"|{bar}|", f" {labels}", _time_marks(spans)])


def build_rich_gantt(segments: List[GanttSegment]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not segments:
        return Panel("No execution", title="Gantt Chart"), ""

    spans = list(_spans(segments))
    bar = Text()
    labels = Text()

    for width, seg, _ in spans:
        if seg is None:
            bar.append("." * width, style="dim")
            labels.append(" " * width)
        else:
            bar.append(" " * width, style=f"on {process_color(seg.pid)}")
            labels.append(seg.name[:width].ljust(width), style="bold")

    table = Table.grid(padding=(0, 0))
    table.add_row(bar)
    table.add_row(labels)

    return Panel.fit(table, title="Gantt Chart"), _time_marks(spans)
