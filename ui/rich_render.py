"""Rich-Darstellung des Stundenplans (TUI-Anzeige und CLI-Ausgabe)."""

from typing import Optional

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ui.renderer import NO_DATA_TEXT, NO_SUBJECTS_TEXT, CalendarView, DaySection

# Badge-Farben je Kategorie
CATEGORY_STYLES: dict[str, str] = {
    "lecture":  "bold white on dark_blue",
    "lab":      "bold white on dark_magenta",
    "practice": "bold black on green3",
}


def _day_table(day: DaySection) -> RenderableType:
    if day.is_empty:
        return Text(NO_SUBJECTS_TEXT, style="dim")
    table = Table(box=None, show_header=False, expand=True, padding=(0, 1))
    table.add_column("Время", style="bold", width=11, no_wrap=True)
    table.add_column("Занятие", ratio=1)
    for line in day.lines:
        title = Text(line.title, style="bold")
        title.append("  ")
        title.append(f" {line.badge} ", style=CATEGORY_STYLES.get(line.category, ""))
        table.add_row(line.time, Group(title, Text(line.info, style="dim")))
    return table


def calendar_renderable(view: Optional[CalendarView]) -> RenderableType:
    """Kopfkarte plus ein Panel pro Tag; ohne Daten ein Hinweistext."""
    if view is None:
        return Text(NO_DATA_TEXT, style="dim")
    parts: list[RenderableType] = [
        Panel(
            Group(Text(view.title, style="bold"), Text(view.group_line, style="dim")),
            box=box.ROUNDED,
        )
    ]
    for day in view.days:
        parts.append(Panel(_day_table(day), title=day.label, title_align="left",
                           box=box.ROUNDED))
    return Group(*parts)
