from __future__ import annotations

from moves import MoveSet, build_table

CORNER = "you \\ pc"

_LABELS: dict[str, str] = {
    "draw": "Draw",
    "first_win": "Win",
    "second_win": "Lose",
}


def format_table(grid: list[list[str]]) -> str:
    """Render a grid from :func:`moves.build_table` as aligned text.

    Cells are read from the row move's point of view.
    """
    rows = [[CORNER, *grid[0][1:]]]
    for row in grid[1:]:
        rows.append([row[0], *(_LABELS[cell] for cell in row[1:])])

    widths = [max(len(r[col]) for r in rows) for col in range(len(rows[0]))]

    lines: list[str] = []
    header = " | ".join(f"{cell:{w}}" for cell, w in zip(rows[0], widths))
    lines.append(header.rstrip())
    lines.append("-" * len(header))
    for row in rows[1:]:
        lines.append(" | ".join(f"{cell:{w}}" for cell, w in zip(row, widths)).rstrip())
    return "\n".join(lines)


def render_help(moves: MoveSet) -> str:
    return format_table(build_table(moves))
