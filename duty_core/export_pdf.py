# duty_core/export_pdf.py
from __future__ import annotations
import io
from reportlab.lib import colors
from reportlab.lib.pagesizes import landscape, letter
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from .calendar_model import month_weeks
from .constants import WEEKDAY_HEADERS
from .fairness import compute_stats
from .models import DutyState

GRID_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, -1), 9),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("ALIGN", (0, 0), (-1, -1), "LEFT"),
    ("VALIGN", (0, 0), (-1, -1), "TOP"),
]


def _day_cell(state: DutyState, day) -> str:
    if day is None:
        return ""
    cfg = state.days.get(day)
    assigned = cfg.assigned if cfg is not None else []
    names = "\n".join(a or "-" for a in assigned) or "-"
    return f"Day {day}\n{names}"


def render_schedule_pdf(state: DutyState) -> bytes:
    """Month grid of assignments on page 1, duty summary on page 2."""
    buf = io.BytesIO()
    page_size = landscape(letter)
    c = canvas.Canvas(buf, pagesize=page_size)
    period = state.period

    title = f"Duty Schedule - {period.label} ({period.days_in_month} days)"
    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, page_size[1] - 40, title)

    data = [WEEKDAY_HEADERS[:]]
    for week in month_weeks(period.year, period.month):
        data.append([_day_cell(state, d) for d in week])

    t = Table(data, repeatRows=1, colWidths=[(page_size[0] - 80) / 7] * 7)
    t.setStyle(TableStyle(GRID_STYLE))
    _, table_h = t.wrapOn(c, page_size[0] - 80, page_size[1] - 100)
    t.drawOn(c, 40, page_size[1] - 70 - table_h)
    c.showPage()

    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, page_size[1] - 40, "Duty Summary")
    summary = [["Person", "Total Duties", "Single-Person"]]
    for name, s in compute_stats(state.people, state.days).items():
        summary.append([name, str(s.total), str(s.single)])
    st = Table(summary, repeatRows=1)
    st.setStyle(TableStyle(GRID_STYLE))
    _, table_h = st.wrapOn(c, page_size[0] - 80, page_size[1] - 100)
    st.drawOn(c, 40, page_size[1] - 70 - table_h)

    c.showPage()
    c.save()
    return buf.getvalue()
