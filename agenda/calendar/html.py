"""HTML rendering for the month view."""
from __future__ import annotations

import html
from typing import Callable, List

from agenda.schemas.calendar import CalendarDay, MonthView

DayLink = Callable[[CalendarDay], str]


def _cell_style(day: CalendarDay) -> str:
    if day.is_selected:
        return "background-color: #f0f8ff; border: 2px solid #007bff;"
    return "background-color: white; border: 1px solid #ccc;"


def _render_cell(day: CalendarDay, view: MonthView, link: DayLink) -> str:
    classes = ["day"]
    if not day.in_month:
        classes.append("outside")
    if day.is_selected:
        classes.append("selected")
    parts = [
        f'<td class="{" ".join(classes)}" style="{_cell_style(day)}">',
        f'<a href="{html.escape(link(day))}">',
        f'<span class="number" style="font-size: {view.sizes.day}px">{day.day.day}</span>',
    ]
    if day.badge:
        parts.append(
            f'<span class="badge" style="font-size: {view.sizes.badge}px">{html.escape(day.badge)}</span>'
        )
    parts.append("</a></td>")
    return "".join(parts)


def render_month_view(view: MonthView, link: DayLink) -> str:
    """Render ``view`` as a standalone HTML page.

    ``link`` maps each day to the URL a click on its cell navigates to.
    """
    header = "".join(
        f'<th style="font-size: {view.sizes.header}px">{html.escape(label)}</th>'
        for label in view.weekday_labels
    )
    rows: List[str] = []
    for week in view.weeks:
        rows.append("<tr>" + "".join(_render_cell(day, view, link) for day in week) + "</tr>")
    body = "".join(rows)

    return f"""
    <html>
        <head>
            <title>{html.escape(view.title)}</title>
            <style>
                body {{ font-family: Arial, sans-serif; margin: 2rem; }}
                h1 {{ text-align: center; text-transform: uppercase; }}
                table {{ border-collapse: separate; border-spacing: 4px; width: 100%; table-layout: fixed; }}
                th {{ text-align: center; font-weight: 500; }}
                td.day {{ height: 4rem; vertical-align: top; border-radius: 6px; }}
                td.day a {{ display: block; height: 100%; color: inherit; text-decoration: none; }}
                td.outside {{ opacity: 0.5; }}
                .number {{ display: block; text-align: center; font-weight: 800; color: #868e96; }}
                .badge {{ display: block; text-align: center; color: #868e96; }}
            </style>
        </head>
        <body>
            <h1 style="font-size: {view.sizes.title}px">{html.escape(view.title)}</h1>
            <table>
                <thead><tr>{header}</tr></thead>
                <tbody>{body}</tbody>
            </table>
        </body>
    </html>
    """
