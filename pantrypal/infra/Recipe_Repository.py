import json
import logging
from pathlib import Path
from typing import List, Optional

from pantrypal.domain.Recipe import Recipe
from pantrypal.utilities.config import RECIPES_FILE

logger = logging.getLogger(__name__)


def reading_from_recipes(path: Optional[Path] = None) -> List[Recipe]:
    """Read extra recipes from a JSON file with proper error handling."""
    recipes_file = Path(path) if path else RECIPES_FILE
    if recipes_file is None:
        return []
    try:
        with open(recipes_file, 'r', encoding='utf-8') as f:
            recipes_data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Recipes file not found: {recipes_file}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in recipes file: {e}")
        return []
    except OSError as e:
        logger.error(f"Error reading recipes: {e}")
        return []
    if not isinstance(recipes_data, list):
        logger.error(f"Recipes file {recipes_file} must contain a list")
        return []
    recipes: List[Recipe] = []
    for entry in recipes_data:
        try:
            recipes.append(Recipe.from_dict(entry))
        except ValueError as e:
            logger.warning(f"Skipping recipe entry: {e}")
    return recipes
