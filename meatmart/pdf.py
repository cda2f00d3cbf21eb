"""PDF export of the sales report using ReportLab."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .receipt import format_currency
from .store.ledger import SalesReport


def generate_sales_pdf(
    report: SalesReport,
    output_path: str | Path,
    *,
    shop_name: str = "MeatMart",
    currency_symbol: str = "₱",
    generated_at: datetime | None = None,
) -> Path:
    """Generate a PDF file from a SalesReport.

    Args:
        report: The sales totals to render.
        output_path: Where to save the PDF file.

    Returns:
        Path to the generated PDF file.

    Raises:
        ImportError: If reportlab is not installed.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError:
        raise ImportError("reportlab is required: pip install reportlab")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    generated_at = generated_at or datetime.now()

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=f"{shop_name} Sales Report",
    )
    styles = getSampleStyleSheet()

    table_style = TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ])

    def money(amount) -> str:
        # Built-in PDF fonts lack most currency glyphs other than $.
        text = format_currency(amount, currency_symbol)
        return text.encode("latin-1", "replace").decode("latin-1")

    sections = [
        ("Daily Sales", "Date", [(d.isoformat(), v) for d, v in report.daily]),
        (
            "Weekly Sales",
            "Week",
            [(f"Week {w} of {y}", v) for (y, w), v in report.weekly],
        ),
        (
            "Monthly Sales",
            "Month",
            [(f"Month {m} of {y}", v) for (y, m), v in report.monthly],
        ),
    ]

    story = [
        Paragraph(f"{shop_name} Sales Report", styles["Title"]),
        Paragraph(f"Generated {generated_at:%Y-%m-%d %H:%M}", styles["Normal"]),
        Spacer(1, 6 * mm),
    ]
    for heading, key_label, rows in sections:
        story.append(Paragraph(heading, styles["Heading2"]))
        if rows:
            data = [[key_label, "Amount"]] + [[k, money(v)] for k, v in rows]
            table = Table(data, colWidths=[90 * mm, 50 * mm])
            table.setStyle(table_style)
            story.append(table)
        else:
            story.append(Paragraph("No sales recorded.", styles["Normal"]))
        story.append(Spacer(1, 4 * mm))

    story.append(Paragraph(f"Total Sales: {money(report.total)}", styles["Heading3"]))

    doc.build(story)
    return output_path
