from __future__ import annotations

from datetime import datetime
from io import BytesIO

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from buildmyhome.domain.estimation import estimate_breakdown


def format_rupees(amount: int) -> str:
    """Indian digit grouping: 3993000 -> '39,93,000'."""
    digits = str(int(amount))
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ','.join(groups + [tail])


def build_estimate_pdf(config, *, site_name: str = 'BuildMyHome') -> bytes:
    """Render the builder summary and cost breakdown as a one-page PDF."""
    breakdown = estimate_breakdown(config)

    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    width, height = A4

    margin_x = 18 * mm
    y = height - 22 * mm

    c.setTitle(f'{site_name} cost estimate')

    c.setFillColor(HexColor('#0b1220'))
    c.setFont('Helvetica-Bold', 18)
    c.drawString(margin_x, y, f'{site_name}: Your Custom Home Estimate')

    y -= 8 * mm
    c.setFont('Helvetica', 10)
    c.setFillColor(HexColor('#334155'))
    c.drawString(margin_x, y, f"Generated: {datetime.utcnow().strftime('%Y-%m-%d %H:%M UTC')}")

    # Total banner
    y -= 16 * mm
    c.setFillColor(HexColor('#1f4ce4'))
    c.roundRect(margin_x, y - 6 * mm, width - 2 * margin_x, 14 * mm, 5 * mm, stroke=0, fill=1)
    c.setFillColor(HexColor('#ffffff'))
    c.setFont('Helvetica-Bold', 14)
    c.drawString(margin_x + 8 * mm, y - 0.5 * mm, f'Estimated cost: Rs {format_rupees(config.estimated_cost_rupees)}')

    y -= 20 * mm
    y = _section(c, margin_x, y, 'Basics', [
        f'Land area: {config.land_area_sqft} sq ft',
        f'Floors: {config.floors}',
        f'Bedrooms: {config.bedrooms}    Bathrooms: {config.bathrooms}',
        f'House type: {config.house_type.title()}',
        f"Budget range: {config.budget_range or 'Not set'} lakhs",
    ])

    if config.design:
        y = _section(c, margin_x, y, 'Design', [
            f'Floor plan: {config.design.floor_plan}',
            f'Ceiling height: {config.design.ceiling_height}',
            f'Window style: {config.design.window_style}',
        ])

    materials = [f'{category.title()}: {item}' for category, item in sorted(config.materials.items())]
    y = _section(c, margin_x, y, 'Materials', materials or ['No materials selected'])

    interior_lines = [f"Interior package: {(config.interior_type or 'not selected').title()}"]
    if config.interiors:
        interior_lines.append(f'Lighting quality: {config.interiors.lighting_quality}/3')
        appliances = ', '.join(sorted(config.interiors.appliances)) or 'None'
        interior_lines.append(f'Appliances: {appliances}')
    y = _section(c, margin_x, y, 'Interiors', interior_lines)

    y = _section(c, margin_x, y, 'How the estimate is built', [
        f'Base cost (land area x Rs 2,000): Rs {format_rupees(breakdown.base)}',
        f'Floor multiplier: x{breakdown.floor_multiplier:.2f}',
        f'House type multiplier: x{breakdown.type_multiplier:.2f}',
        f'Interior multiplier: x{breakdown.interior_multiplier:.2f}',
        f'Materials factor: x{breakdown.materials_factor:.2f}',
    ])

    c.setFillColor(HexColor('#334155'))
    c.setFont('Helvetica', 9)
    _draw_paragraph(
        c,
        margin_x,
        max(y - 4 * mm, 20 * mm),
        width - 2 * margin_x,
        'This is an indicative estimate rounded to the nearest Rs 1,000. Final pricing depends on site '
        'survey, local material rates and approvals. Our team will share a detailed quotation.',
        leading=12,
        max_lines=4,
    )

    c.showPage()
    c.save()
    return buf.getvalue()


def _section(c, x: float, y: float, title: str, lines: list[str]) -> float:
    c.setFillColor(HexColor('#0b1220'))
    c.setFont('Helvetica-Bold', 12)
    c.drawString(x, y, title)
    y -= 7 * mm
    c.setFont('Helvetica', 11)
    c.setFillColor(HexColor('#111827'))
    for line in lines:
        c.drawString(x, y, line)
        y -= 6 * mm
    return y - 5 * mm


def _draw_paragraph(c, x: float, y: float, w: float, text: str, *, leading: int, max_lines: int) -> None:
    words = (text or '').split()
    if not words:
        return

    line = ''
    lines = []
    for word in words:
        candidate = (line + ' ' + word).strip()
        if c.stringWidth(candidate, 'Helvetica', 9) <= w:
            line = candidate
        else:
            lines.append(line)
            line = word
            if len(lines) >= max_lines:
                break

    if len(lines) < max_lines and line:
        lines.append(line)

    cursor = y
    for ln in lines:
        c.drawString(x, cursor, ln)
        cursor -= leading
