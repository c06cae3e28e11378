from __future__ import annotations

from dataclasses import dataclass

from termcolor import colored

from workfetch.duration import format_duration
from workfetch.service import WorkdayView

LOGO_LINES = (
    "##################",
    "###+=======+######",
    "###-          ####",
    "###-   *##=    ###",
    "###-   *##:    ###",
    "###-   +=-     ###",
    "###-          ####",
    "###-   :.     ####",
    "###-   *##=    ###",
    "###-   *##=    ###",
    "###-   ++=     ###",
    "###-          ####",
    "###========+######",
    "##################",
)
LOGO_GAP = "    "
LABEL_WIDTH = 18
SEPARATOR_LABEL = "---"
SEPARATOR = "-" * 35
DONE_VALUE = "DONE! 🎉"
DONE_MESSAGE = "You have reached your goal for today."


@dataclass(frozen=True)
class ReportRow:
    label: str
    value: str
    color: str | None = None


def _separator() -> ReportRow:
    return ReportRow(SEPARATOR_LABEL, SEPARATOR)


def build_rows(view: WorkdayView) -> list[ReportRow]:
    schedule = view.schedule
    rows = [
        ReportRow(view.start.label, view.start.start_time.strftime("%H:%M:%S"), "blue"),
        ReportRow("Rounded Start", schedule.rounded_start.strftime("%H:%M"), "cyan"),
        _separator(),
        ReportRow("Target Work Time", format_duration(view.config.work_minutes), "green"),
        ReportRow("Break Time", format_duration(view.config.break_minutes), "green"),
        ReportRow("End of Day", schedule.end_of_day.strftime("%H:%M"), "magenta"),
        _separator(),
    ]
    if schedule.goal_reached:
        rows.append(ReportRow("Remaining", DONE_VALUE, "red"))
        rows.append(ReportRow("", DONE_MESSAGE))
    else:
        rows.append(ReportRow("Remaining", format_duration(schedule.remaining_minutes), "yellow"))
    return rows


def _paint(text: str, color: str | None, attrs: list[str], use_color: bool | None) -> str:
    if use_color is False:
        return text
    return colored(text, color, attrs=attrs, force_color=True if use_color else None)


def format_row(row: ReportRow, use_color: bool | None = None) -> str:
    if row.label == SEPARATOR_LABEL:
        return _paint(row.value, None, ["dark"], use_color)
    if not row.label:
        return _paint(row.value, None, ["bold"], use_color)
    label = _paint(f"{row.label:<{LABEL_WIDTH}}", None, ["bold"], use_color)
    value = _paint(row.value, row.color, ["bold"], use_color)
    return f"{label} : {value}"


def render_report(rows: list[ReportRow], use_color: bool | None = None) -> str:
    """Logo on the left, formatted rows on the right, framed by blank lines.

    ``use_color=None`` leaves the decision to termcolor (tty detection,
    ``NO_COLOR``/``FORCE_COLOR``), ``False`` renders plain text.
    """
    logo_width = max(len(line) for line in LOGO_LINES)
    formatted = [format_row(row, use_color) for row in rows]
    lines = [""]
    for i in range(max(len(LOGO_LINES), len(formatted))):
        logo_part = LOGO_LINES[i] if i < len(LOGO_LINES) else ""
        entry_part = formatted[i] if i < len(formatted) else ""
        lines.append(f"{logo_part:<{logo_width}}{LOGO_GAP}{entry_part}")
    lines.append("")
    return "\n".join(lines)


def print_report(view: WorkdayView, use_color: bool | None = None) -> None:
    print(render_report(build_rows(view), use_color))
