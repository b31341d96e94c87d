from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

import recipe_box.core.convertors  # noqa: F401  registers the "recipe_id" path convertor
from recipe_box.core import config
from recipe_box.deps import get_store
from recipe_box.models.recipe import CategoryListResponse, Recipe, RecipeListResponse
from recipe_box.services.recipes_repo import RecipeStore

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("", response_model=RecipeListResponse)
def recipe_list(
    q: Optional[str] = None,
    category: Optional[str] = None,
    store: RecipeStore = Depends(get_store),
) -> RecipeListResponse:
    return RecipeListResponse(items=store.query(search_text=q, category=category))


@router.get("/categories", response_model=CategoryListResponse)
def recipe_categories() -> CategoryListResponse:
    return CategoryListResponse(items=list(config.CATEGORY_FILTERS))


@router.get("/{recipe_id:recipe_id}", response_model=Recipe)
def recipe_get(recipe_id: str, store: RecipeStore = Depends(get_store)) -> Recipe:
    r = store.get(recipe_id)
    if not r:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return r


@router.post("/{recipe_id:recipe_id}/favorite", response_model=Recipe)
def recipe_toggle_favorite(recipe_id: str, store: RecipeStore = Depends(get_store)) -> Recipe:
    r = store.toggle_favorite(recipe_id)
    if not r:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return r


@router.post("/{recipe_id:recipe_id}/cooked", response_model=Recipe)
def recipe_mark_cooked(recipe_id: str, store: RecipeStore = Depends(get_store)) -> Recipe:
    r = store.mark_cooked(recipe_id)
    if not r:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return r
