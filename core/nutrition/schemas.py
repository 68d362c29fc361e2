from pydantic import BaseModel, ConfigDict, Field

from core.enums import FiberLevel, ShoppingCategory


class Ingredient(BaseModel):
    name: str
    amount: str


class Meal(BaseModel):
    name: str
    type: str
    calories: int
    protein: int
    carbs: int
    fats: int
    fiber: int = 0
    image: str = ""
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    prep_time: str | None = None
    model_config = ConfigDict(extra="ignore")


class MealPlan(BaseModel):
    calorie_target: int
    description: str
    meals: list[Meal]


class CaloriePlan(BaseModel):
    calories: int
    title: str
    description: str
    meals: str
    model_config = ConfigDict(frozen=True)


class MacroTotals(BaseModel):
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fats: int = 0
    fiber: int = 0


class ShoppingItem(BaseModel):
    name: str
    amount: str
    category: ShoppingCategory


class ShoppingList(BaseModel):
    calorie_target: int
    categories: dict[ShoppingCategory, list[ShoppingItem]]

    @property
    def items(self) -> list[ShoppingItem]:
        return [item for items in self.categories.values() for item in items]


class FiberStatus(BaseModel):
    grams: int
    level: FiberLevel
    percentage: float
