"""Recipe suggestions from what is on hand.

A recipe qualifies when at least one of its ingredient keywords occurs inside
at least one pantry item name. Results keep catalog order.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pantrypal.domain.PantryItem import PantryItem
from pantrypal.domain.Recipe import Recipe
from pantrypal.infra.Recipe_Repository import reading_from_recipes

__all__ = ["BUILTIN_RECIPES", "load_catalog", "suggest"]

BUILTIN_RECIPES: tuple[Recipe, ...] = (
    Recipe("Pasta with Vegetables", "A simple and healthy pasta dish",
           ["pasta", "tomato", "onion", "garlic"], "Easy"),
    Recipe("Stir Fry", "Quick and colorful vegetable stir fry",
           ["rice", "vegetables", "soy sauce", "garlic"], "Easy"),
    Recipe("Salad Bowl", "Fresh mixed salad with your favorite vegetables",
           ["lettuce", "tomato", "cucumber", "onion"], "Easy"),
    Recipe("Omelette", "Fluffy omelette with vegetables",
           ["eggs", "milk", "vegetables", "cheese"], "Easy"),
    Recipe("Soup", "Warm and comforting vegetable soup",
           ["vegetables", "broth", "onion", "garlic"], "Medium"),
)


def load_catalog(extra_file: Optional[Path] = None) -> List[Recipe]:
    """Built-in recipes followed by any recipes from the configured JSON file."""
    catalog = list(BUILTIN_RECIPES)
    known = {r.name.lower() for r in catalog}
    for recipe in reading_from_recipes(extra_file):
        if recipe.name.lower() not in known:
            catalog.append(recipe)
            known.add(recipe.name.lower())
    return catalog


def suggest(items: Iterable[Union[PantryItem, str]], catalog: Optional[Sequence[Recipe]] = None) -> List[Recipe]:
    names = [i.name if isinstance(i, PantryItem) else str(i) for i in items]
    if not names:
        return []
    recipes = BUILTIN_RECIPES if catalog is None else catalog
    return [recipe for recipe in recipes if recipe.matches(names)]
