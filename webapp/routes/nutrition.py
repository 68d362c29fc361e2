from typing import Any

from fastapi import APIRouter, Query
from fastapi.responses import Response

from core.containers import get_container
from core.exceptions import MealSwapError
from core.nutrition import (
    build_shopping_list,
    export_meal_plan_pdf,
    fiber_status,
    format_shopping_list,
    get_alternatives_for_meal,
    get_calorie_plans,
    get_meal_plan,
    resolve_meals,
    swap_meal,
    total_macros,
)
from core.nutrition.schemas import CaloriePlan, MealPlan
from webapp.dependencies import resolve
from webapp.schemas import MealSelection, SwapRequest

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


def _selected_plan(calories: int, meals: list[str] | None) -> MealPlan:
    return resolve_meals(get_meal_plan(calories), meals)


def _plan_view(plan: MealPlan) -> dict[str, Any]:
    totals = total_macros(plan)
    return {
        "plan": plan.model_dump(),
        "totals": totals.model_dump(),
        "fiber": fiber_status(totals.fiber).model_dump(),
        "meal_names": [meal.name for meal in plan.meals],
    }


@router.get("/plans", response_model=list[CaloriePlan])
async def calorie_plans() -> list[CaloriePlan]:
    return get_calorie_plans()


@router.get("/plans/{calories}")
async def meal_plan(calories: int, meals: list[str] | None = Query(default=None)) -> dict[str, Any]:
    return _plan_view(_selected_plan(calories, meals))


@router.get("/plans/{calories}/meals/{index}/alternatives")
async def meal_alternatives(
    calories: int, index: int, meals: list[str] | None = Query(default=None)
) -> dict[str, Any]:
    plan = _selected_plan(calories, meals)
    if not 0 <= index < len(plan.meals):
        raise MealSwapError(f"Meal index {index} is out of range for the {calories} kcal plan")
    meal = plan.meals[index]
    return {
        "meal": meal.model_dump(),
        "alternatives": [alternative.model_dump() for alternative in get_alternatives_for_meal(meal)],
    }


@router.post("/plans/{calories}/swap")
async def swap(calories: int, data: SwapRequest) -> dict[str, Any]:
    plan = _selected_plan(calories, data.meals)
    if not 0 <= data.index < len(plan.meals):
        raise MealSwapError(f"Meal index {data.index} is out of range for the {calories} kcal plan")
    alternatives = get_alternatives_for_meal(plan.meals[data.index])
    replacement = next((meal for meal in alternatives if meal.name == data.replacement), None)
    if replacement is None:
        raise MealSwapError(f"{data.replacement} is not an alternative for {plan.meals[data.index].name}")
    return _plan_view(swap_meal(plan, data.index, replacement))


@router.post("/plans/{calories}/shopping-list")
async def shopping_list(calories: int, data: MealSelection) -> dict[str, Any]:
    plan = _selected_plan(calories, data.meals)
    return {
        "shopping_list": build_shopping_list(plan).model_dump(mode="json"),
        "text": format_shopping_list(plan),
    }


@router.post("/plans/{calories}/pdf")
async def export_pdf(calories: int, data: MealSelection) -> Response:
    plan = _selected_plan(calories, data.meals)
    client = await resolve(get_container().http_client)
    filename, content = await export_meal_plan_pdf(plan, client)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
