"""
Validation Constants

Contains whitelist values for validating user input at the API and CLI
boundary.
"""

# Valid values for the display system field
VALID_SYSTEMS = {'metric', 'imperial'}

# Valid values for the quantity kind field
VALID_KINDS = {'volume', 'weight'}

# Maximum field lengths
MAX_LENGTHS = {
    'measurement_text': 100,
    'ingredient_name': 200,
    'recipe_title': 200,
}

# Maximum number of recipes accepted in one shopping list request
MAX_RECIPES_PER_LIST = 50
