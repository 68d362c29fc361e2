from io import BytesIO

import httpx
import pytest
from PIL import Image

from core.nutrition import MEAL_ALTERNATIVES, export_meal_plan_pdf, get_meal_plan, render_meal_plan_pdf, swap_meal
from core.nutrition.pdf_export import _image_url, fetch_meal_image, pdf_filename


def _png_bytes() -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (30, 20), color=(59, 130, 246)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_render_without_images():
    content = render_meal_plan_pdf(get_meal_plan(2000))
    assert content.startswith(b"%PDF")
    assert content.rstrip().endswith(b"%%EOF")


def test_render_with_unreadable_image():
    plan = get_meal_plan(2500)
    images = [b"not an image", None, _png_bytes(), None]
    assert render_meal_plan_pdf(plan, images).startswith(b"%PDF")


def test_render_escapes_markup_in_names():
    plan = get_meal_plan(2000)
    plan.meals[1] = plan.meals[1].model_copy(update={"name": "Chicken <b>& Rice"})
    assert render_meal_plan_pdf(plan).startswith(b"%PDF")


def test_pdf_filename():
    assert pdf_filename(get_meal_plan(3500)) == "Hybrid_Athlete_3500kcal_MealPlan.pdf"


def test_image_url():
    assert _image_url("/assets/snack-shake.jpg") == "http://testserver/assets/snack-shake.jpg"
    assert _image_url("https://cdn.example.com/meal.jpg") == "https://cdn.example.com/meal.jpg"
    assert _image_url("") is None


@pytest.mark.asyncio
async def test_fetch_meal_image_failure_is_tolerated():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        assert await fetch_meal_image(client, "/assets/snack-shake.jpg") is None


@pytest.mark.asyncio
async def test_export_fetches_images():
    requested = []
    png = _png_bytes()

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        if request.url.path.endswith("breakfast-pancakes.jpg"):
            return httpx.Response(200, content=png, headers={"content-type": "image/png"})
        return httpx.Response(404)

    plan = get_meal_plan(2000)
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        filename, content = await export_meal_plan_pdf(plan, client)

    assert filename == "Hybrid_Athlete_2000kcal_MealPlan.pdf"
    assert content.startswith(b"%PDF")
    assert requested == [
        "http://testserver/assets/breakfast-pancakes.jpg",
        "http://testserver/assets/lunch-chicken-rice.jpg",
        "http://testserver/assets/dinner-steak-rice.jpg",
    ]


@pytest.mark.asyncio
async def test_export_swapped_plan(image_transport):
    parfait = next(meal for meal in MEAL_ALTERNATIVES if meal.name == "Greek Yogurt Parfait")
    plan = swap_meal(get_meal_plan(2000), 0, parfait)

    async with httpx.AsyncClient(transport=image_transport) as client:
        _, content = await export_meal_plan_pdf(plan, client)

    assert content.startswith(b"%PDF")
