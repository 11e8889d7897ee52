"""
Output Renderers.

Both renderers return strings; the CLI echoes them through click, which
strips ANSI sequences when stdout is not a terminal.
"""

import json
from collections.abc import Sequence

from tpsp.schemas.line_status import LineItem, OutputResponse
from tpsp.services.line_status import format_line_name, normalize_status, to_output_lines

COLOR_RESET = "\033[0m"
COLOR_BOLD = "\033[1m"
COLOR_DIM = "\033[2m"
COLOR_GREEN = "\033[32m"
COLOR_YELLOW = "\033[33m"
COLOR_RED = "\033[31m"

STATUS_COLORS = {
    "verde": COLOR_GREEN,
    "amarelo": COLOR_YELLOW,
    "vermelho": COLOR_RED,
    "cinza": COLOR_DIM,
}

HEADER_LINE = "Linha"
HEADER_STATUS = "Status"


def color_for_status(status_color: str) -> str:
    """Map a status color tag to its ANSI code; unknown tags reset."""
    return STATUS_COLORS.get(status_color.lower(), COLOR_RESET)


def render_table(items: Sequence[LineItem]) -> str:
    """Render an aligned, colorized table of line statuses."""
    names = [format_line_name(item.line) for item in items]
    width = max([len(HEADER_LINE), *(len(name) for name in names)])

    rows = [
        f"{COLOR_BOLD}{HEADER_LINE:<{width}}  {HEADER_STATUS}{COLOR_RESET}",
        "-" * (width + 2 + 20),
    ]
    for name, item in zip(names, items):
        color = color_for_status(item.status_color)
        rows.append(f"{name:<{width}}  {color}{normalize_status(item.status)}{COLOR_RESET}")
    return "\n".join(rows)


def render_json(items: Sequence[LineItem]) -> str:
    """Render the line statuses as a pretty-printed JSON document."""
    output = OutputResponse(code=200, data=to_output_lines(items), message="success")
    return json.dumps(output.model_dump(), indent=4, ensure_ascii=False)
