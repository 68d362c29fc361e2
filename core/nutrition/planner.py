from core.enums import FiberLevel, ShoppingCategory
from core.exceptions import MealPlanNotFoundError, MealSwapError
from core.nutrition.meal_plans import CALORIE_PLANS, MEAL_ALTERNATIVES, MEAL_PLANS
from core.nutrition.schemas import (
    CaloriePlan,
    FiberStatus,
    MacroTotals,
    Meal,
    MealPlan,
    ShoppingItem,
    ShoppingList,
)

FIBER_FULL_BAR_GRAMS = 50

# checked in this order, first match wins
CATEGORY_KEYWORDS: tuple[tuple[ShoppingCategory, tuple[str, ...]], ...] = (
    (
        ShoppingCategory.MEAT_DAIRY,
        ("chicken", "beef", "egg", "yogurt", "milk", "cheese", "fish", "tuna", "pork", "turkey"),
    ),
    (
        ShoppingCategory.PRODUCE,
        ("apple", "banana", "berry", "spinach", "lettuce", "tomato", "avocado", "potato", "onion", "garlic",
         "fruit", "veg"),
    ),
    (
        ShoppingCategory.PANTRY,
        ("oat", "rice", "pasta", "bread", "oil", "sauce", "spice", "salt", "pepper", "honey", "nut", "seed",
         "powder"),
    ),
)

LIST_ORDER = (
    ShoppingCategory.PRODUCE,
    ShoppingCategory.MEAT_DAIRY,
    ShoppingCategory.PANTRY,
    ShoppingCategory.OTHER,
)


def get_calorie_plans() -> list[CaloriePlan]:
    return list(CALORIE_PLANS)


def get_meal_plan(calories: int) -> MealPlan:
    plan = MEAL_PLANS.get(calories)
    if plan is None:
        raise MealPlanNotFoundError(calories)
    return plan.model_copy(deep=True)


def total_macros(plan: MealPlan) -> MacroTotals:
    totals = MacroTotals()
    for meal in plan.meals:
        totals.calories += meal.calories
        totals.protein += meal.protein
        totals.carbs += meal.carbs
        totals.fats += meal.fats
        totals.fiber += meal.fiber or 0
    return totals


def get_alternatives_for_meal(meal: Meal) -> list[Meal]:
    return [
        alternative.model_copy(deep=True)
        for alternative in MEAL_ALTERNATIVES
        if alternative.type == meal.type and alternative.name != meal.name
    ]


def swap_meal(plan: MealPlan, index: int, replacement: Meal) -> MealPlan:
    """Return a copy of ``plan`` with the meal at ``index`` replaced."""
    if not 0 <= index < len(plan.meals):
        raise MealSwapError(f"Meal index {index} is out of range for the {plan.calorie_target} kcal plan")
    meals = [meal.model_copy(deep=True) for meal in plan.meals]
    meals[index] = replacement.model_copy(deep=True)
    return plan.model_copy(update={"meals": meals})


def _find_meal(plan: MealPlan, name: str) -> Meal | None:
    for meal in (*plan.meals, *MEAL_ALTERNATIVES):
        if meal.name == name:
            return meal
    return None


def resolve_meals(plan: MealPlan, names: list[str] | None) -> MealPlan:
    """Rebuild a plan from the meal names a client holds after swapping.

    Each name must belong to the plan itself or to the alternatives of the
    meal type in the same slot.
    """
    if not names:
        return plan
    if len(names) != len(plan.meals):
        raise MealSwapError(
            f"Expected {len(plan.meals)} meals for the {plan.calorie_target} kcal plan, got {len(names)}"
        )

    resolved = plan
    for index, (original, name) in enumerate(zip(plan.meals, names)):
        if name == original.name:
            continue
        meal = _find_meal(plan, name)
        if meal is None:
            raise MealSwapError(f"Unknown meal: {name}")
        if meal.type != original.type:
            raise MealSwapError(f"{name} is a {meal.type} and cannot replace a {original.type}")
        resolved = swap_meal(resolved, index, meal)
    return resolved


def categorize_ingredient(name: str) -> ShoppingCategory:
    lower_name = name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lower_name for keyword in keywords):
            return category
    return ShoppingCategory.OTHER


def build_shopping_list(plan: MealPlan) -> ShoppingList:
    categories: dict[ShoppingCategory, list[ShoppingItem]] = {category: [] for category in LIST_ORDER}
    for meal in plan.meals:
        for ingredient in meal.ingredients:
            category = categorize_ingredient(ingredient.name)
            categories[category].append(ShoppingItem(name=ingredient.name, amount=ingredient.amount, category=category))
    return ShoppingList(calorie_target=plan.calorie_target, categories=categories)


def format_shopping_list(plan: MealPlan) -> str:
    shopping_list = build_shopping_list(plan)
    text = f"🛒 Shopping List - {plan.calorie_target} kcal Plan\n\n"
    for category, items in shopping_list.categories.items():
        if not items:
            continue
        text += f"[{category}]\n"
        for item in items:
            text += f"- {item.name} ({item.amount})\n"
        text += "\n"
    return text


def fiber_status(grams: int) -> FiberStatus:
    if grams < 25:
        level = FiberLevel.POOR
    elif grams <= 35:
        level = FiberLevel.MODERATE
    elif grams <= 50:
        level = FiberLevel.GOOD
    else:
        level = FiberLevel.EXCESSIVE
    percentage = min(grams / FIBER_FULL_BAR_GRAMS * 100, 100)
    return FiberStatus(grams=grams, level=level, percentage=percentage)
