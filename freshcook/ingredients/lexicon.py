"""
Built-in food vocabularies.

FOOD_KEYWORDS is the broad list used to decide whether an image label names
something edible (category words included). COMMON_INGREDIENTS is the narrower
list scanned for in OCR text; entries are lowercase, unique and in the
spelling returned to callers.
"""

FOOD_KEYWORDS = (
    # Categories
    "food", "ingredient", "vegetable", "fruit", "meat", "dairy", "grain",
    "spice", "herb", "sauce", "oil", "vinegar", "cheese", "milk", "egg",
    "bread", "pasta", "rice", "bean", "nut", "seed",

    # Proteins
    "fish", "chicken", "beef", "pork", "lamb", "turkey",

    # Vegetables
    "onion", "garlic", "tomato", "potato", "carrot", "pepper", "mushroom",
    "lettuce", "spinach", "broccoli", "cucumber", "zucchini", "corn", "peas",
    "cabbage", "cauliflower", "celery", "avocado",

    # Fruits
    "apple", "banana", "orange", "lemon", "lime", "strawberry", "blueberry",
    "mango", "pineapple", "grapes", "berries",
)

COMMON_INGREDIENTS = (
    # Pantry
    "flour", "sugar", "salt", "pepper", "oil", "butter", "milk", "egg",

    # Vegetables and herbs
    "onion", "garlic", "tomato", "potato", "carrot", "celery", "parsley",
    "basil", "oregano", "thyme", "rosemary",

    # Proteins and dairy
    "chicken", "beef", "pork", "fish", "cheese", "cream", "yogurt",

    # Acids, sauces and oils
    "lemon", "lime", "vinegar", "soy sauce", "olive oil", "coconut oil",
    "honey", "vanilla",

    # Spices
    "cinnamon", "ginger", "paprika", "cumin", "turmeric", "chili",

    # Produce
    "mushroom", "spinach", "broccoli", "cauliflower", "zucchini", "eggplant",
    "cucumber", "lettuce", "cabbage", "kale", "arugula", "cilantro",

    # Herbs and whole spices
    "mint", "dill", "sage", "bay leaves", "nutmeg", "cardamom", "clove",
)
