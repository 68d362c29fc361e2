import asyncio
from datetime import date
from io import BytesIO
from typing import Any
from xml.sax.saxutils import escape

import httpx
from loguru import logger
from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas
from reportlab.platypus import Image, KeepTogether, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from config.app_settings import settings
from core.nutrition.planner import total_macros
from core.nutrition.schemas import Meal, MealPlan

BACKGROUND = colors.HexColor("#111827")
SURFACE = colors.HexColor("#1F2937")
PRIMARY = colors.HexColor("#3B82F6")
TEXT = colors.HexColor("#F3F4F6")
MUTED = colors.HexColor("#9CA3AF")
ACCENT = colors.HexColor("#10B981")
BORDER = colors.HexColor("#374151")

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 15 * mm
HEADER_HEIGHT = 40 * mm
IMAGE_WIDTH = 60 * mm
IMAGE_HEIGHT = 40 * mm
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN

STYLES = {
    "title": ParagraphStyle("title", fontName="Helvetica-Bold", fontSize=28, leading=32, textColor=TEXT),
    "description": ParagraphStyle("description", fontName="Helvetica", fontSize=11, leading=14, textColor=MUTED),
    "macro_value": ParagraphStyle("macro_value", fontName="Helvetica-Bold", fontSize=14, leading=17, textColor=TEXT),
    "macro_label": ParagraphStyle("macro_label", fontName="Helvetica", fontSize=8, leading=10, textColor=MUTED),
    "meal_type": ParagraphStyle("meal_type", fontName="Helvetica-Bold", fontSize=9, leading=11, textColor=PRIMARY),
    "meal_name": ParagraphStyle("meal_name", fontName="Helvetica-Bold", fontSize=16, leading=20, textColor=TEXT),
    "meal_meta": ParagraphStyle("meal_meta", fontName="Helvetica", fontSize=10, leading=13, textColor=MUTED),
    "section": ParagraphStyle("section", fontName="Helvetica-Bold", fontSize=11, leading=14, textColor=TEXT),
    "body": ParagraphStyle("body", fontName="Helvetica", fontSize=10, leading=13, textColor=MUTED),
    "amount": ParagraphStyle(
        "amount", fontName="Helvetica", fontSize=10, leading=13, textColor=TEXT, alignment=TA_RIGHT
    ),
    "step": ParagraphStyle("step", fontName="Helvetica-Bold", fontSize=10, leading=13, textColor=PRIMARY),
}


def _hex(color: colors.Color) -> str:
    return "#" + color.hexval()[2:]


def pdf_filename(plan: MealPlan) -> str:
    return f"Hybrid_Athlete_{plan.calorie_target}kcal_MealPlan.pdf"


def _footer_canvas(calorie_target: int) -> type[canvas.Canvas]:
    class FooterCanvas(canvas.Canvas):
        """Defers page output until the total page count is known."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            super().__init__(*args, **kwargs)
            self._page_states: list[dict[str, Any]] = []

        def showPage(self) -> None:
            self._page_states.append(dict(self.__dict__))
            self._startPage()

        def save(self) -> None:
            total = len(self._page_states)
            for state in self._page_states:
                self.__dict__.update(state)
                self.setFont("Helvetica", 8)
                self.setFillColor(MUTED)
                self.drawCentredString(
                    PAGE_WIDTH / 2,
                    10 * mm,
                    f"Hybrid Athlete Blueprint - {calorie_target} kcal Plan - Page {self._pageNumber} of {total}",
                )
                super().showPage()
            super().save()

    return FooterCanvas


def _draw_background(pdf: canvas.Canvas, _doc: SimpleDocTemplate) -> None:
    pdf.saveState()
    pdf.setFillColor(BACKGROUND)
    pdf.rect(0, 0, PAGE_WIDTH, PAGE_HEIGHT, stroke=0, fill=1)
    pdf.restoreState()


def _draw_first_page(pdf: canvas.Canvas, doc: SimpleDocTemplate) -> None:
    _draw_background(pdf, doc)
    pdf.saveState()
    pdf.setFillColor(SURFACE)
    pdf.rect(0, PAGE_HEIGHT - HEADER_HEIGHT, PAGE_WIDTH, HEADER_HEIGHT, stroke=0, fill=1)

    baseline = PAGE_HEIGHT - 20 * mm
    pdf.setFont("Helvetica-Bold", 22)
    pdf.setFillColor(PRIMARY)
    pdf.drawString(MARGIN, baseline, "HYBRID ATHLETE")
    offset = pdf.stringWidth("HYBRID ATHLETE ", "Helvetica-Bold", 22)
    pdf.setFillColor(colors.white)
    pdf.drawString(MARGIN + offset, baseline, "BLUEPRINT")

    pdf.setFont("Helvetica", 10)
    pdf.setFillColor(MUTED)
    pdf.drawString(MARGIN, PAGE_HEIGHT - 27 * mm, "NUTRITION PLAN")
    pdf.drawRightString(PAGE_WIDTH - MARGIN, baseline, date.today().strftime("%m/%d/%Y"))
    pdf.restoreState()


def _macro_box(plan: MealPlan) -> Table:
    totals = total_macros(plan)
    cells = [
        (str(totals.calories), "CALORIES", PRIMARY),
        (f"{totals.protein}g", "PROTEIN", TEXT),
        (f"{totals.carbs}g", "CARBS", TEXT),
        (f"{totals.fats}g", "FATS", TEXT),
        (f"{totals.fiber}g", "FIBER", ACCENT),
    ]
    values = [
        Paragraph(f'<font color="{_hex(color)}">{value}</font>', STYLES["macro_value"]) for value, _, color in cells
    ]
    labels = [Paragraph(label, STYLES["macro_label"]) for _, label, _ in cells]
    table = Table([values, labels], colWidths=[CONTENT_WIDTH / len(cells)] * len(cells))
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), SURFACE),
                ("BOX", (0, 0), (-1, -1), 0.75, BORDER),
                ("LEFTPADDING", (0, 0), (-1, -1), 10),
                ("TOPPADDING", (0, 0), (-1, 0), 8),
                ("BOTTOMPADDING", (0, -1), (-1, -1), 8),
            ]
        )
    )
    return table


def _meal_image(data: bytes | None) -> Image | None:
    if not data:
        return None
    try:
        ImageReader(BytesIO(data)).getSize()
    except Exception as e:  # noqa: BLE001
        logger.warning(f"Skipping unreadable meal image: {e}")
        return None
    return Image(BytesIO(data), width=IMAGE_WIDTH, height=IMAGE_HEIGHT)


def _meal_header(meal: Meal, image: Image | None) -> Table:
    macro_line = (
        f"{meal.calories} kcal  |  {meal.protein}g P  |  {meal.carbs}g C  |  {meal.fats}g F  |  "
        f'<font color="{_hex(ACCENT)}">{meal.fiber or 0}g Fiber</font>'
    )
    text = [
        Paragraph(escape(meal.type.upper()), STYLES["meal_type"]),
        Paragraph(escape(meal.name), STYLES["meal_name"]),
        Paragraph(macro_line, STYLES["meal_meta"]),
    ]
    if meal.prep_time:
        text.append(Paragraph(f"Duration: {escape(meal.prep_time)}", STYLES["meal_meta"]))

    text_width = CONTENT_WIDTH - IMAGE_WIDTH - 10 * mm
    table = Table([[text, image or ""]], colWidths=[text_width, CONTENT_WIDTH - text_width])
    table.setStyle(
        TableStyle(
            [
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("LINEBEFORE", (0, 0), (0, 0), 4, PRIMARY),
                ("LEFTPADDING", (0, 0), (0, 0), 8),
                ("ALIGN", (1, 0), (1, 0), "RIGHT"),
            ]
        )
    )
    return table


def _ingredients(meal: Meal) -> Table:
    rows = [
        [
            Paragraph(f'<font color="{_hex(PRIMARY)}">&bull;</font>  {escape(item.name)}', STYLES["body"]),
            Paragraph(escape(item.amount), STYLES["amount"]),
        ]
        for item in meal.ingredients
    ]
    table = Table(rows or [[""]], colWidths=[CONTENT_WIDTH * 0.7, CONTENT_WIDTH * 0.3 - 20 * mm])
    table.setStyle(TableStyle([("LEFTPADDING", (0, 0), (-1, -1), 8), ("TOPPADDING", (0, 0), (-1, -1), 1)]))
    return table


def _instructions(meal: Meal) -> Table:
    rows = [
        [Paragraph(str(number), STYLES["step"]), Paragraph(escape(step), STYLES["body"])]
        for number, step in enumerate(meal.instructions, start=1)
    ]
    table = Table(rows or [[""]], colWidths=[10 * mm, CONTENT_WIDTH - 10 * mm])
    table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP"), ("LEFTPADDING", (0, 0), (-1, -1), 8)]))
    return table


def render_meal_plan_pdf(plan: MealPlan, images: list[bytes | None] | None = None) -> bytes:
    """Lay out ``plan`` as a dark-themed PDF; ``images`` lines up with ``plan.meals``."""
    images = images or [None] * len(plan.meals)
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        topMargin=MARGIN,
        bottomMargin=MARGIN + 5 * mm,
        title=f"Hybrid Athlete {plan.calorie_target} kcal Meal Plan",
        author=settings.SITE_NAME,
    )

    story: list[Any] = [
        Spacer(1, HEADER_HEIGHT),
        Paragraph(f'<font color="{_hex(PRIMARY)}">{plan.calorie_target}</font> KCAL PLAN', STYLES["title"]),
        Spacer(1, 3 * mm),
        Paragraph(escape(plan.description), STYLES["description"]),
        Spacer(1, 8 * mm),
        _macro_box(plan),
        Spacer(1, 12 * mm),
    ]

    for meal, image_data in zip(plan.meals, images):
        story.append(KeepTogether([_meal_header(meal, _meal_image(image_data)), Spacer(1, 4 * mm)]))
        story.append(KeepTogether([Paragraph("Ingredients", STYLES["section"]), Spacer(1, 2 * mm), _ingredients(meal)]))
        story.append(Spacer(1, 4 * mm))
        story.append(Paragraph("Instructions", STYLES["section"]))
        story.append(Spacer(1, 2 * mm))
        story.append(_instructions(meal))
        story.append(Spacer(1, 14 * mm))

    doc.build(
        story,
        onFirstPage=_draw_first_page,
        onLaterPages=_draw_background,
        canvasmaker=_footer_canvas(plan.calorie_target),
    )
    return buffer.getvalue()


def _image_url(image: str) -> str | None:
    if not image:
        return None
    if image.startswith(("http://", "https://")):
        return image
    if not settings.PUBLIC_URL:
        return None
    return f"{settings.PUBLIC_URL}/{image.lstrip('/')}"


async def fetch_meal_image(client: httpx.AsyncClient, image: str) -> bytes | None:
    url = _image_url(image)
    if url is None:
        return None
    try:
        response = await client.get(url, timeout=settings.IMAGE_TIMEOUT)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning(f"Failed to load meal image {url}: {e}")
        return None
    return response.content


async def export_meal_plan_pdf(plan: MealPlan, client: httpx.AsyncClient | None = None) -> tuple[str, bytes]:
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            images = await asyncio.gather(*(fetch_meal_image(own_client, meal.image) for meal in plan.meals))
    else:
        images = await asyncio.gather(*(fetch_meal_image(client, meal.image) for meal in plan.meals))

    content = await asyncio.to_thread(render_meal_plan_pdf, plan, list(images))
    logger.debug(f"Exported {plan.calorie_target} kcal meal plan ({len(content)} bytes)")
    return pdf_filename(plan), content
