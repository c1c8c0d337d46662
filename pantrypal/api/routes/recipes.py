from fastapi import APIRouter, Depends

from pantrypal.api.dependencies import get_pantry, get_catalog
from pantrypal.domain.Pantry import Pantry
from pantrypal.logic.recipes.suggestions import suggest

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("/suggestions")
def recipe_suggestions(pantry: Pantry = Depends(get_pantry), catalog=Depends(get_catalog)):
    recipes = suggest(pantry, catalog)
    return {'recipes': [r.to_dict() for r in recipes], 'count': len(recipes)}
