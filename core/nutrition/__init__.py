from core.nutrition.meal_plans import CALORIE_PLANS, MEAL_ALTERNATIVES, MEAL_PLANS
from core.nutrition.pdf_export import export_meal_plan_pdf, render_meal_plan_pdf
from core.nutrition.planner import (
    build_shopping_list,
    categorize_ingredient,
    fiber_status,
    format_shopping_list,
    get_alternatives_for_meal,
    get_calorie_plans,
    get_meal_plan,
    resolve_meals,
    swap_meal,
    total_macros,
)

__all__ = [
    "CALORIE_PLANS",
    "MEAL_ALTERNATIVES",
    "MEAL_PLANS",
    "build_shopping_list",
    "categorize_ingredient",
    "export_meal_plan_pdf",
    "fiber_status",
    "format_shopping_list",
    "get_alternatives_for_meal",
    "get_calorie_plans",
    "get_meal_plan",
    "render_meal_plan_pdf",
    "resolve_meals",
    "swap_meal",
    "total_macros",
]
