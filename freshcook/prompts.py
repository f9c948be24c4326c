"""Prompts for the recipe model."""

RECIPE_PROMPT = """
Generate 3 creative and delicious recipes using some or all of these ingredients: {ingredients}.

For each recipe, provide:
1. A creative title
2. A brief description (1-2 sentences)
3. List of ingredients with quantities
4. Step-by-step instructions
5. Cooking time in minutes
6. Number of servings
7. Difficulty level (Easy, Medium, or Hard)

Format the response as a JSON array of recipe objects with these exact fields:
- title (string)
- description (string)
- ingredients (array of strings with quantities)
- instructions (array of strings, each step)
- cooking_time (number in minutes)
- servings (number)
- difficulty (string: "Easy", "Medium", or "Hard")

Make sure the recipes are practical and use common cooking techniques.
"""
