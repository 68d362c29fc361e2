from core.nutrition.schemas import CaloriePlan, Ingredient, Meal, MealPlan

BREAKFAST = "Breakfast"
LUNCH = "Lunch"
DINNER = "Dinner"
SNACK = "Snack"
POST_WORKOUT = "Post-Workout"

IMAGE_BREAKFAST = "/assets/breakfast-pancakes.jpg"
IMAGE_LUNCH = "/assets/lunch-chicken-rice.jpg"
IMAGE_DINNER = "/assets/dinner-steak-rice.jpg"
IMAGE_SNACK = "/assets/snack-shake.jpg"


def _meal(
    name: str,
    meal_type: str,
    macros: tuple[int, int, int, int, int],
    image: str,
    ingredients: list[tuple[str, str]],
    instructions: list[str],
    prep_time: str,
) -> Meal:
    calories, protein, carbs, fats, fiber = macros
    return Meal(
        name=name,
        type=meal_type,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        fiber=fiber,
        image=image,
        ingredients=[Ingredient(name=item, amount=amount) for item, amount in ingredients],
        instructions=instructions,
        prep_time=prep_time,
    )


CALORIE_PLANS: tuple[CaloriePlan, ...] = (
    CaloriePlan(
        calories=2000,
        title="Aggressive Fat Loss",
        description="Maximum deficit for rapid results",
        meals="3 meals",
    ),
    CaloriePlan(
        calories=2500,
        title="Moderate Deficit",
        description="Sustainable fat loss / maintenance",
        meals="3 meals + 1 snack",
    ),
    CaloriePlan(
        calories=3000,
        title="Maintenance / Lean Bulk",
        description="Maintain or grow lean muscle",
        meals="3 meals + 1 snack",
    ),
    CaloriePlan(
        calories=3500,
        title="Lean Bulk",
        description="Optimal muscle growth for larger athletes",
        meals="4 meals + 1 snack",
    ),
)


MEAL_PLANS: dict[int, MealPlan] = {
    2000: MealPlan(
        calorie_target=2000,
        description="High-protein, lower-carb day built around three filling meals.",
        meals=[
            _meal(
                "Protein Pancakes with Berries",
                BREAKFAST,
                (550, 40, 62, 14, 8),
                IMAGE_BREAKFAST,
                [
                    ("Rolled oats", "60g"),
                    ("Whey protein powder", "1 scoop"),
                    ("Egg whites", "150ml"),
                    ("Mixed berries", "100g"),
                    ("Banana", "1/2 medium"),
                    ("Honey", "1 tsp"),
                ],
                [
                    "Blend oats, protein powder, egg whites and banana into a smooth batter.",
                    "Cook small pancakes on a non-stick pan over medium heat, 2 minutes per side.",
                    "Top with berries and a drizzle of honey.",
                ],
                "15 min",
            ),
            _meal(
                "Grilled Chicken & Rice Bowl",
                LUNCH,
                (700, 55, 80, 16, 6),
                IMAGE_LUNCH,
                [
                    ("Chicken breast", "180g"),
                    ("Jasmine rice (cooked)", "200g"),
                    ("Broccoli florets", "100g"),
                    ("Olive oil", "1 tsp"),
                    ("Soy sauce", "1 tbsp"),
                ],
                [
                    "Season the chicken and grill for 6 to 7 minutes per side.",
                    "Steam the broccoli for 4 minutes.",
                    "Slice the chicken and serve over rice with broccoli and soy sauce.",
                ],
                "25 min",
            ),
            _meal(
                "Lean Steak with Sweet Potato",
                DINNER,
                (750, 55, 65, 28, 12),
                IMAGE_DINNER,
                [
                    ("Sirloin beef steak", "200g"),
                    ("Sweet potato", "250g"),
                    ("Spinach", "80g"),
                    ("Garlic", "2 cloves"),
                    ("Olive oil", "1 tbsp"),
                ],
                [
                    "Bake cubed sweet potato at 200C for 25 minutes.",
                    "Sear the steak 3 to 4 minutes per side and rest for 5 minutes.",
                    "Wilt spinach with garlic and olive oil and plate everything together.",
                ],
                "35 min",
            ),
        ],
    ),
    2500: MealPlan(
        calorie_target=2500,
        description="Balanced macros with a snack to keep energy steady through training.",
        meals=[
            _meal(
                "Loaded Protein Pancakes",
                BREAKFAST,
                (650, 45, 75, 18, 9),
                IMAGE_BREAKFAST,
                [
                    ("Rolled oats", "70g"),
                    ("Whey protein powder", "1 scoop"),
                    ("Whole eggs", "2 large"),
                    ("Blueberry", "120g"),
                    ("Almond butter", "1 tbsp"),
                ],
                [
                    "Blend oats, protein powder and eggs into a batter.",
                    "Cook pancakes on a lightly oiled pan until golden.",
                    "Serve with blueberries and almond butter.",
                ],
                "15 min",
            ),
            _meal(
                "Chicken Rice Bowl with Avocado",
                LUNCH,
                (800, 58, 85, 24, 11),
                IMAGE_LUNCH,
                [
                    ("Chicken thigh fillets", "180g"),
                    ("Brown rice (cooked)", "220g"),
                    ("Avocado", "1/2"),
                    ("Cherry tomato", "100g"),
                    ("Lime juice", "1 tbsp"),
                ],
                [
                    "Grill the chicken thighs for 6 minutes per side.",
                    "Dice avocado and halve tomatoes, then dress with lime.",
                    "Assemble the bowl over brown rice.",
                ],
                "25 min",
            ),
            _meal(
                "Steak, Rice & Greens",
                DINNER,
                (750, 55, 70, 26, 10),
                IMAGE_DINNER,
                [
                    ("Flank beef steak", "190g"),
                    ("White rice (cooked)", "200g"),
                    ("Green beans", "120g"),
                    ("Garlic", "2 cloves"),
                    ("Olive oil", "2 tsp"),
                ],
                [
                    "Sear the steak to your liking and rest before slicing.",
                    "Saute green beans with garlic in olive oil.",
                    "Serve sliced steak over rice with the beans.",
                ],
                "30 min",
            ),
            _meal(
                "Peanut Butter Banana Shake",
                SNACK,
                (300, 25, 30, 9, 4),
                IMAGE_SNACK,
                [
                    ("Whey protein powder", "1 scoop"),
                    ("Banana", "1 small"),
                    ("Peanut butter", "1 tbsp"),
                    ("Unsweetened almond milk", "300ml"),
                ],
                ["Blend everything with a handful of ice until smooth."],
                "5 min",
            ),
        ],
    ),
    3000: MealPlan(
        calorie_target=3000,
        description="Maintenance calories with extra carbohydrate around training.",
        meals=[
            _meal(
                "Steak & Egg Breakfast Burrito",
                BREAKFAST,
                (750, 50, 70, 28, 8),
                IMAGE_BREAKFAST,
                [
                    ("Whole wheat tortilla", "1 large"),
                    ("Whole eggs", "3 large"),
                    ("Lean beef strips", "80g"),
                    ("Cheddar cheese", "30g"),
                    ("Tomato salsa", "3 tbsp"),
                    ("Potato", "120g"),
                ],
                [
                    "Dice and pan-fry the potato until crisp.",
                    "Scramble the eggs and cook the beef strips in the same pan.",
                    "Fill the tortilla with potato, eggs, beef, cheese and salsa, then roll.",
                ],
                "20 min",
            ),
            _meal(
                "Double Chicken Rice Bowl",
                LUNCH,
                (900, 75, 100, 20, 10),
                IMAGE_LUNCH,
                [
                    ("Chicken breast", "250g"),
                    ("Jasmine rice (cooked)", "280g"),
                    ("Mixed vegetables", "150g"),
                    ("Teriyaki sauce", "2 tbsp"),
                    ("Sesame seeds", "1 tsp"),
                ],
                [
                    "Grill and slice the chicken breast.",
                    "Stir-fry the vegetables for 4 minutes.",
                    "Toss everything with teriyaki sauce and top with sesame seeds.",
                ],
                "25 min",
            ),
            _meal(
                "Salmon with Jasmine Rice",
                DINNER,
                (900, 55, 95, 32, 9),
                IMAGE_DINNER,
                [
                    ("Salmon fillet", "200g"),
                    ("Jasmine rice (cooked)", "250g"),
                    ("Asparagus", "120g"),
                    ("Lemon", "1/2"),
                    ("Olive oil", "1 tsp"),
                ],
                [
                    "Bake the salmon at 200C for 12 to 15 minutes.",
                    "Roast asparagus with olive oil alongside the salmon.",
                    "Serve over rice with a squeeze of lemon.",
                ],
                "25 min",
            ),
            _meal(
                "Greek Yogurt Power Bowl",
                SNACK,
                (450, 35, 55, 10, 8),
                IMAGE_SNACK,
                [
                    ("Greek yogurt (0%)", "250g"),
                    ("Granola", "40g"),
                    ("Strawberry", "100g"),
                    ("Chia seeds", "1 tbsp"),
                ],
                ["Layer yogurt, granola and strawberries, then sprinkle with chia seeds."],
                "5 min",
            ),
        ],
    ),
    3500: MealPlan(
        calorie_target=3500,
        description="Surplus plan with a dedicated post-workout meal for recovery.",
        meals=[
            _meal(
                "Oats & Eggs Power Breakfast",
                BREAKFAST,
                (800, 50, 95, 22, 12),
                IMAGE_BREAKFAST,
                [
                    ("Rolled oats", "100g"),
                    ("Whole milk", "250ml"),
                    ("Whole eggs", "3 large"),
                    ("Banana", "1 medium"),
                    ("Walnuts", "15g"),
                ],
                [
                    "Simmer oats in milk for 5 minutes.",
                    "Scramble or boil the eggs.",
                    "Top the oats with sliced banana and walnuts and serve with the eggs.",
                ],
                "15 min",
            ),
            _meal(
                "Turkey Pasta Bolognese",
                LUNCH,
                (900, 65, 105, 22, 11),
                IMAGE_LUNCH,
                [
                    ("Lean ground turkey", "200g"),
                    ("Whole wheat pasta (dry)", "110g"),
                    ("Tomato passata", "200g"),
                    ("Onion", "1/2"),
                    ("Parmesan cheese", "15g"),
                ],
                [
                    "Cook the pasta according to the packet.",
                    "Brown the turkey with diced onion, then add passata and simmer 10 minutes.",
                    "Toss with pasta and finish with parmesan.",
                ],
                "30 min",
            ),
            _meal(
                "Beef Burrito Bowl",
                DINNER,
                (950, 65, 105, 28, 14),
                IMAGE_DINNER,
                [
                    ("Lean ground beef", "200g"),
                    ("White rice (cooked)", "250g"),
                    ("Black beans", "100g"),
                    ("Sweetcorn", "60g"),
                    ("Tomato salsa", "3 tbsp"),
                ],
                [
                    "Brown the beef with taco spices.",
                    "Warm the beans and corn.",
                    "Build the bowl over rice and top with salsa.",
                ],
                "25 min",
            ),
            _meal(
                "Post-Workout Chicken Wrap",
                POST_WORKOUT,
                (450, 40, 55, 8, 5),
                IMAGE_LUNCH,
                [
                    ("Chicken breast", "130g"),
                    ("Flour tortilla", "1 large"),
                    ("Lettuce", "1 handful"),
                    ("Tomato", "1 small"),
                    ("Light yogurt dressing", "2 tbsp"),
                ],
                [
                    "Slice pre-cooked chicken breast.",
                    "Fill the tortilla with chicken, lettuce, tomato and dressing, then wrap.",
                ],
                "10 min",
            ),
            _meal(
                "Mass Gainer Shake",
                SNACK,
                (400, 35, 45, 9, 6),
                IMAGE_SNACK,
                [
                    ("Whey protein powder", "1 scoop"),
                    ("Rolled oats", "40g"),
                    ("Whole milk", "250ml"),
                    ("Frozen berry mix", "80g"),
                ],
                ["Blend everything until smooth and drink within an hour of training."],
                "5 min",
            ),
        ],
    ),
}


MEAL_ALTERNATIVES: tuple[Meal, ...] = (
    _meal(
        "Greek Yogurt Parfait",
        BREAKFAST,
        (500, 40, 60, 11, 7),
        IMAGE_BREAKFAST,
        [
            ("Greek yogurt (0%)", "300g"),
            ("Granola", "50g"),
            ("Mixed berries", "120g"),
            ("Honey", "1 tsp"),
        ],
        ["Layer yogurt, granola and berries in a glass.", "Finish with honey."],
        "5 min",
    ),
    _meal(
        "Veggie Egg White Omelette",
        BREAKFAST,
        (450, 45, 35, 14, 6),
        IMAGE_BREAKFAST,
        [
            ("Egg whites", "250ml"),
            ("Whole eggs", "1 large"),
            ("Spinach", "50g"),
            ("Tomato", "1 small"),
            ("Whole grain bread", "2 slices"),
        ],
        [
            "Whisk egg whites with the whole egg.",
            "Cook in a pan with spinach and tomato, folding once set.",
            "Serve with toasted bread.",
        ],
        "12 min",
    ),
    _meal(
        "Tuna Pasta Salad",
        LUNCH,
        (650, 50, 75, 16, 7),
        IMAGE_LUNCH,
        [
            ("Canned tuna in water", "150g"),
            ("Whole wheat pasta (dry)", "80g"),
            ("Cherry tomato", "100g"),
            ("Cucumber", "1/2"),
            ("Olive oil", "1 tbsp"),
        ],
        [
            "Cook and cool the pasta.",
            "Mix with tuna, tomatoes, cucumber and olive oil.",
        ],
        "15 min",
    ),
    _meal(
        "Turkey Avocado Wrap",
        LUNCH,
        (620, 45, 60, 22, 10),
        IMAGE_LUNCH,
        [
            ("Sliced turkey breast", "150g"),
            ("Whole wheat tortilla", "1 large"),
            ("Avocado", "1/2"),
            ("Lettuce", "1 handful"),
            ("Mustard sauce", "1 tbsp"),
        ],
        ["Spread mustard on the tortilla.", "Fill with turkey, avocado and lettuce, then roll tightly."],
        "8 min",
    ),
    _meal(
        "Baked Cod with Roasted Potatoes",
        DINNER,
        (600, 50, 65, 14, 8),
        IMAGE_DINNER,
        [
            ("Cod fillet", "220g"),
            ("Baby potato", "250g"),
            ("Green beans", "100g"),
            ("Olive oil", "2 tsp"),
            ("Lemon", "1/2"),
        ],
        [
            "Roast halved potatoes at 200C for 25 minutes.",
            "Bake the cod for the last 12 minutes of roasting.",
            "Steam green beans and serve with lemon.",
        ],
        "35 min",
    ),
    _meal(
        "Pork Tenderloin with Rice",
        DINNER,
        (700, 55, 75, 18, 5),
        IMAGE_DINNER,
        [
            ("Pork tenderloin", "200g"),
            ("Basmati rice (cooked)", "220g"),
            ("Carrot", "1 medium"),
            ("Garlic", "2 cloves"),
            ("Soy sauce", "1 tbsp"),
        ],
        [
            "Roast the tenderloin at 200C for 20 minutes and rest.",
            "Saute sliced carrot with garlic and soy sauce.",
            "Serve sliced pork with rice and carrots.",
        ],
        "30 min",
    ),
    _meal(
        "Cottage Cheese & Pineapple",
        SNACK,
        (250, 28, 24, 4, 2),
        IMAGE_SNACK,
        [("Low-fat cottage cheese", "200g"), ("Pineapple chunks", "100g")],
        ["Top the cottage cheese with pineapple."],
        "2 min",
    ),
    _meal(
        "Rice Cakes with Peanut Butter",
        SNACK,
        (300, 12, 32, 14, 3),
        IMAGE_SNACK,
        [("Rice cakes", "3"), ("Peanut butter", "1.5 tbsp"), ("Banana", "1/2 small")],
        ["Spread peanut butter on the rice cakes and top with banana slices."],
        "3 min",
    ),
    _meal(
        "Chocolate Milk & Banana",
        POST_WORKOUT,
        (400, 22, 70, 5, 4),
        IMAGE_SNACK,
        [("Low-fat chocolate milk", "500ml"), ("Banana", "1 medium")],
        ["Drink the milk alongside the banana straight after training."],
        "1 min",
    ),
    _meal(
        "Tuna Rice Cakes",
        POST_WORKOUT,
        (380, 35, 45, 6, 2),
        IMAGE_SNACK,
        [("Canned tuna in water", "120g"), ("Rice cakes", "4"), ("Light mayo sauce", "1 tbsp")],
        ["Mix tuna with the mayo and pile onto the rice cakes."],
        "5 min",
    ),
)
