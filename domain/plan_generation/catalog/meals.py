"""Meal catalog keyed by (meal slot, diet type).

Diet columns are nested: a standard plan may use every column, a
vegetarian plan the vegetarian and vegan columns, a vegan plan only the
vegan column. Tags mark allergens filtered by restrictions.
"""

from dataclasses import replace
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from ..core.entities.catalog_item import DietType, MealItem, MealSlot

GLUTEN = "gluten"
DAIRY = "dairy"
NUTS = "nuts"

# restriction -> item tag it excludes
RESTRICTION_TAGS: Mapping[str, str] = MappingProxyType(
    {
        "gluten_free": GLUTEN,
        "dairy_free": DAIRY,
        "nut_free": NUTS,
    }
)

# diet -> catalog columns it may draw from
DIET_COLUMNS: Mapping[DietType, Tuple[DietType, ...]] = MappingProxyType(
    {
        DietType.STANDARD: (DietType.STANDARD, DietType.VEGETARIAN, DietType.VEGAN),
        DietType.VEGETARIAN: (DietType.VEGETARIAN, DietType.VEGAN),
        DietType.VEGAN: (DietType.VEGAN,),
    }
)


def _meal(
    name: str,
    calories: float,
    protein: float,
    carbs: float,
    fats: float,
    fiber: float,
    portion: str,
    preparation: Tuple[str, ...],
    tags: FrozenSet[str] = frozenset(),
) -> MealItem:
    # slot and diet are filled in by _cell
    return MealItem(
        name=name,
        slot=MealSlot.BREAKFAST,
        diet=DietType.STANDARD,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        fiber=fiber,
        portion=portion,
        preparation=preparation,
        tags=tags,
    )


def _cell(slot: MealSlot, diet: DietType, *rows: MealItem) -> Tuple[MealItem, ...]:
    return tuple(replace(row, slot=slot, diet=diet) for row in rows)


_B, _L, _D, _S = MealSlot.BREAKFAST, MealSlot.LUNCH, MealSlot.DINNER, MealSlot.SNACK
_STD, _VEG, _VGN = DietType.STANDARD, DietType.VEGETARIAN, DietType.VEGAN

MEAL_CATALOG: Mapping[Tuple[MealSlot, DietType], Tuple[MealItem, ...]] = MappingProxyType(
    {
        (_B, _STD): _cell(
            _B,
            _STD,
            _meal("Turkey Sausage Breakfast Wrap", 450, 32, 38, 18, 5, "1 wrap",
                  ("Brown the turkey sausage", "Scramble eggs with peppers", "Roll in a whole-wheat tortilla"),
                  frozenset({GLUTEN})),
            _meal("Smoked Salmon Bagel", 480, 28, 52, 16, 3, "1 bagel",
                  ("Toast the bagel", "Spread light cream cheese", "Top with salmon and capers"),
                  frozenset({GLUTEN, DAIRY})),
            _meal("Chicken and Veggie Breakfast Hash", 430, 33, 35, 17, 6, "1 bowl",
                  ("Dice potatoes and peppers", "Pan-fry with diced chicken", "Finish with herbs")),
            _meal("Ham and Egg Muffin Cups", 360, 30, 8, 23, 1, "3 cups",
                  ("Line a muffin tin with ham", "Crack an egg into each", "Top with cheese and bake 15 minutes"),
                  frozenset({DAIRY})),
            _meal("Steak and Eggs with Sweet Potato", 520, 40, 35, 24, 5, "1 plate",
                  ("Sear a lean steak", "Fry two eggs", "Serve with roasted sweet potato")),
        ),
        (_B, _VEG): _cell(
            _B,
            _VEG,
            _meal("Greek Yogurt Parfait", 380, 28, 45, 9, 5, "1 large bowl",
                  ("Layer yogurt and berries", "Top with granola"),
                  frozenset({DAIRY, GLUTEN})),
            _meal("Veggie Omelette with Feta", 340, 24, 10, 22, 3, "1 omelette",
                  ("Whisk three eggs", "Cook with spinach and tomatoes", "Fold in crumbled feta"),
                  frozenset({DAIRY})),
            _meal("Cottage Cheese Pancakes", 410, 27, 46, 12, 3, "3 pancakes",
                  ("Blend cottage cheese, eggs and flour", "Cook on a hot griddle"),
                  frozenset({DAIRY, GLUTEN})),
            _meal("Scrambled Eggs on Whole-Grain Toast", 420, 24, 34, 20, 5, "2 slices",
                  ("Scramble eggs over low heat", "Serve on toasted whole-grain bread"),
                  frozenset({GLUTEN})),
            _meal("Spinach and Mushroom Egg Muffins", 300, 21, 8, 20, 2, "3 muffins",
                  ("Saute spinach and mushrooms", "Mix with beaten eggs", "Bake 20 minutes")),
        ),
        (_B, _VGN): _cell(
            _B,
            _VGN,
            _meal("Oatmeal with Berries", 350, 11, 58, 8, 9, "1 bowl",
                  ("Simmer oats in plant milk", "Top with mixed berries")),
            _meal("Tofu Scramble with Spinach", 320, 22, 14, 19, 5, "1 plate",
                  ("Crumble firm tofu", "Cook with turmeric and spinach")),
            _meal("Peanut Butter Banana Toast", 430, 15, 52, 18, 7, "2 slices",
                  ("Toast whole-grain bread", "Spread peanut butter", "Top with sliced banana"),
                  frozenset({GLUTEN, NUTS})),
            _meal("Chia Pudding with Mango", 360, 10, 40, 17, 14, "1 jar",
                  ("Soak chia seeds in coconut milk overnight", "Top with diced mango")),
            _meal("Quinoa Breakfast Bowl", 400, 14, 62, 11, 8, "1 bowl",
                  ("Warm cooked quinoa with plant milk", "Add cinnamon and apple", "Sprinkle sliced almonds"),
                  frozenset({NUTS})),
        ),
        (_L, _STD): _cell(
            _L,
            _STD,
            _meal("Grilled Chicken Salad", 450, 42, 22, 21, 7, "1 large bowl",
                  ("Grill the chicken breast", "Toss greens with olive oil dressing", "Slice chicken on top")),
            _meal("Turkey and Avocado Whole-Wheat Wrap", 540, 35, 48, 22, 9, "1 wrap",
                  ("Layer turkey, avocado and greens", "Roll in a whole-wheat tortilla"),
                  frozenset({GLUTEN})),
            _meal("Tuna Quinoa Bowl", 520, 38, 50, 17, 7, "1 bowl",
                  ("Cook quinoa", "Mix with tuna, cucumber and lemon")),
            _meal("Beef and Broccoli Rice Bowl", 600, 40, 62, 20, 5, "1 bowl",
                  ("Stir-fry lean beef strips", "Add broccoli and tamari", "Serve over rice")),
            _meal("Shrimp Tacos with Slaw", 480, 32, 46, 18, 7, "3 tacos",
                  ("Saute shrimp with chili", "Fill corn tortillas", "Top with cabbage slaw")),
        ),
        (_L, _VEG): _cell(
            _L,
            _VEG,
            _meal("Caprese Quinoa Salad", 470, 20, 48, 22, 6, "1 bowl",
                  ("Cook quinoa", "Toss with tomato, mozzarella and basil"),
                  frozenset({DAIRY})),
            _meal("Egg Salad Lettuce Wraps", 380, 22, 10, 28, 4, "3 wraps",
                  ("Chop hard-boiled eggs", "Mix with mustard and herbs", "Spoon into lettuce cups")),
            _meal("Halloumi and Roasted Vegetable Bowl", 560, 26, 45, 30, 8, "1 bowl",
                  ("Roast peppers and zucchini", "Grill halloumi slices", "Serve over brown rice"),
                  frozenset({DAIRY})),
            _meal("Spinach and Ricotta Whole-Wheat Pasta", 580, 27, 75, 18, 9, "1 plate",
                  ("Cook whole-wheat pasta", "Stir through ricotta and wilted spinach"),
                  frozenset({DAIRY, GLUTEN})),
            _meal("Greek Salad with Chickpeas", 450, 18, 40, 24, 11, "1 large bowl",
                  ("Chop cucumber, tomato and onion", "Add chickpeas and feta", "Dress with olive oil"),
                  frozenset({DAIRY})),
        ),
        (_L, _VGN): _cell(
            _L,
            _VGN,
            _meal("Lentil and Vegetable Soup", 420, 24, 60, 8, 16, "2 cups",
                  ("Simmer lentils with carrots and celery", "Season with cumin")),
            _meal("Chickpea Buddha Bowl", 550, 20, 70, 20, 15, "1 bowl",
                  ("Roast chickpeas and sweet potato", "Serve over greens with tahini")),
            _meal("Tofu Stir-Fry with Brown Rice", 520, 28, 62, 17, 7, "1 plate",
                  ("Press and cube tofu", "Stir-fry with vegetables", "Serve over brown rice")),
            _meal("Black Bean Burrito Bowl", 560, 22, 80, 15, 18, "1 bowl",
                  ("Warm black beans with spices", "Layer rice, salsa and avocado")),
            _meal("Peanut Soba Noodle Salad", 580, 20, 72, 24, 8, "1 bowl",
                  ("Cook soba noodles", "Toss with vegetables and peanut dressing"),
                  frozenset({GLUTEN, NUTS})),
        ),
        (_D, _STD): _cell(
            _D,
            _STD,
            _meal("Salmon with Roasted Vegetables", 520, 38, 25, 29, 6, "1 fillet with sides",
                  ("Roast vegetables 20 minutes", "Bake salmon 12 minutes", "Finish with lemon")),
            _meal("Lean Beef Chili", 540, 42, 45, 20, 12, "2 cups",
                  ("Brown lean beef", "Simmer with beans and tomatoes 30 minutes")),
            _meal("Herb Chicken with Sweet Potato", 500, 45, 45, 14, 7, "1 plate",
                  ("Rub chicken with herbs", "Bake alongside sweet potato wedges")),
            _meal("Turkey Meatballs with Zucchini Noodles", 450, 40, 20, 22, 5, "1 plate",
                  ("Form meatballs with breadcrumbs", "Bake 20 minutes", "Serve over zucchini noodles"),
                  frozenset({GLUTEN})),
            _meal("Baked Cod with Quinoa and Greens", 470, 40, 42, 14, 7, "1 plate",
                  ("Bake cod with garlic", "Serve with quinoa and sauteed greens")),
        ),
        (_D, _VEG): _cell(
            _D,
            _VEG,
            _meal("Vegetable Frittata with Side Salad", 420, 26, 16, 28, 5, "2 slices",
                  ("Whisk eggs with vegetables and cheese", "Bake until set"),
                  frozenset({DAIRY})),
            _meal("Eggplant Parmesan", 520, 24, 48, 26, 10, "1 plate",
                  ("Bread and bake eggplant slices", "Layer with sauce and cheese", "Bake 25 minutes"),
                  frozenset({DAIRY, GLUTEN})),
            _meal("Paneer Tikka with Brown Rice", 580, 30, 58, 25, 6, "1 plate",
                  ("Marinate paneer in spiced yogurt", "Grill and serve with rice"),
                  frozenset({DAIRY})),
            _meal("Mushroom and Egg Fried Rice", 500, 20, 66, 17, 5, "1 bowl",
                  ("Stir-fry mushrooms", "Add rice and scrambled eggs", "Season with tamari")),
            _meal("Stuffed Bell Peppers with Cheese", 460, 22, 48, 20, 9, "2 peppers",
                  ("Fill peppers with rice, beans and cheese", "Bake 30 minutes"),
                  frozenset({DAIRY})),
        ),
        (_D, _VGN): _cell(
            _D,
            _VGN,
            _meal("Tofu and Vegetable Curry", 520, 24, 50, 25, 10, "1 bowl",
                  ("Simmer tofu and vegetables in coconut curry", "Serve with rice")),
            _meal("Lentil Bolognese with Whole-Wheat Spaghetti", 560, 28, 85, 11, 17, "1 plate",
                  ("Simmer lentils in tomato sauce", "Serve over whole-wheat spaghetti"),
                  frozenset({GLUTEN})),
            _meal("Tempeh Stir-Fry with Quinoa", 540, 32, 52, 22, 10, "1 plate",
                  ("Slice and brown tempeh", "Stir-fry with vegetables", "Serve with quinoa")),
            _meal("Chickpea and Spinach Stew", 480, 20, 62, 16, 16, "2 cups",
                  ("Saute onion and garlic", "Simmer chickpeas with tomatoes and spinach")),
            _meal("Black Bean Sweet Potato Tacos", 500, 17, 78, 13, 17, "3 tacos",
                  ("Roast sweet potato cubes", "Fill corn tortillas with beans and potato")),
        ),
        (_S, _STD): _cell(
            _S,
            _STD,
            _meal("Turkey Roll-Ups", 150, 20, 4, 6, 0, "4 roll-ups",
                  ("Roll turkey slices around cucumber sticks",)),
            _meal("Beef Jerky with Apple", 200, 16, 24, 4, 4, "1 oz jerky + 1 apple",
                  ("Slice the apple", "Serve with jerky")),
            _meal("Tuna Cucumber Bites", 140, 20, 4, 5, 1, "8 bites",
                  ("Mix tuna with lemon", "Spoon onto cucumber rounds")),
            _meal("Hard-Boiled Eggs with Ham", 180, 18, 2, 11, 0, "2 eggs + 2 slices",
                  ("Boil eggs 10 minutes", "Serve with sliced ham")),
            _meal("Salmon Rice Cakes", 190, 14, 20, 6, 1, "2 rice cakes",
                  ("Top rice cakes with smoked salmon and dill",)),
        ),
        (_S, _VEG): _cell(
            _S,
            _VEG,
            _meal("Greek Yogurt with Honey", 180, 17, 22, 3, 0, "1 cup",
                  ("Drizzle honey over yogurt",),
                  frozenset({DAIRY})),
            _meal("Cottage Cheese with Pineapple", 170, 16, 18, 4, 1, "1 cup",
                  ("Top cottage cheese with pineapple chunks",),
                  frozenset({DAIRY})),
            _meal("Hard-Boiled Eggs", 150, 12, 1, 10, 0, "2 eggs",
                  ("Boil eggs 10 minutes", "Season with salt and pepper")),
            _meal("String Cheese and Grapes", 170, 8, 18, 7, 1, "1 stick + 1 cup grapes",
                  ("Serve together",),
                  frozenset({DAIRY})),
            _meal("Protein Smoothie with Banana", 240, 24, 30, 3, 3, "1 glass",
                  ("Blend whey, banana and milk",),
                  frozenset({DAIRY})),
        ),
        (_S, _VGN): _cell(
            _S,
            _VGN,
            _meal("Apple with Almond Butter", 200, 5, 25, 10, 5, "1 apple + 1 tbsp",
                  ("Slice the apple", "Serve with almond butter"),
                  frozenset({NUTS})),
            _meal("Hummus and Veggie Sticks", 160, 6, 16, 8, 5, "1/4 cup hummus",
                  ("Cut carrots and celery", "Serve with hummus")),
            _meal("Mixed Nuts", 180, 6, 6, 15, 3, "1 oz",
                  ("Portion a small handful",),
                  frozenset({NUTS})),
            _meal("Roasted Chickpeas", 170, 8, 24, 4, 7, "1/2 cup",
                  ("Toss chickpeas with spices", "Roast 25 minutes")),
            _meal("Edamame with Sea Salt", 150, 13, 11, 6, 6, "1 cup",
                  ("Steam edamame", "Sprinkle with sea salt")),
        ),
    }
)


def meals_for(slot: MealSlot, diet: DietType) -> Tuple[MealItem, ...]:
    """All items a ``diet`` may eat in ``slot``, in catalog order."""
    return tuple(
        item for column in DIET_COLUMNS[diet] for item in MEAL_CATALOG.get((slot, column), ())
    )
