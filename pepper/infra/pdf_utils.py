import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet


def generate_pdf_for_shopping_list(shopping_list):
    """Render the list as one table per grocery section: Ingredient / Amount."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(shopping_list.name, styles["Title"]),
        Spacer(1, 16),
    ]

    groups = shopping_list.grouped_by_category()
    if not groups:
        elements.append(Paragraph("This shopping list is empty.", styles["Normal"]))

    for category, items in groups.items():
        elements.append(Paragraph(category, styles["Heading2"]))
        data = [["Ingredient", "Amount"]]
        for item in items:
            data.append([item.ingredient, item.amount])

        table = Table(data, repeatRows=1, colWidths=[300, 200])
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("ALIGN", (0,0), (-1,-1), "LEFT"),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("BOTTOMPADDING", (0,0), (-1,0), 8),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 12))

    doc.build(elements)
    return buf.getvalue()
