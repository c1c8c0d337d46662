"""Recipe domain entity: name, description, ingredient keywords, difficulty."""
from typing import Iterable, List, Optional


class Recipe:
    def __init__(self, name: str = "", description: str = "", ingredients: Optional[List[str]] = None,
                 difficulty: str = "Easy"):
        self.name = name
        self.description = description
        self.ingredients = [i.strip().lower() for i in ingredients if i and i.strip()] if ingredients else []
        self.difficulty = difficulty

    def __str__(self) -> str:
        return f"{self.name} - {self.difficulty} - Ingredients: {', '.join(self.ingredients)}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        name = str(d.get('name') or '').strip()
        if not name:
            raise ValueError("Recipe name is required")
        ingredients = d.get('ingredients') or []
        if not isinstance(ingredients, list):
            raise ValueError(f"Recipe '{name}' ingredients must be a list")
        return Recipe(
            name=name,
            description=str(d.get('description') or ''),
            ingredients=[str(i) for i in ingredients],
            difficulty=str(d.get('difficulty') or 'Easy'),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "difficulty": self.difficulty,
        }

    def matches(self, item_names: Iterable[str]) -> bool:
        """True if any ingredient keyword appears inside any of the item names (case-insensitive)."""
        names = [n.lower() for n in item_names]
        return any(keyword in name for keyword in self.ingredients for name in names)
