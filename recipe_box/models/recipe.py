# recipe_box/models/recipe.py
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, computed_field

from recipe_box.core.text import split_lines

# Raw record from TheMealDB / TheCocktailDB: field name -> optional string
ExternalRecord = Dict[str, Optional[str]]


class Recipe(BaseModel):
    id: str
    title: str
    summary: Optional[str] = None
    category: Optional[str] = None
    ingredients: Optional[str] = None
    steps: Optional[str] = None
    image_ref: Optional[str] = None
    difficulty: Optional[str] = None
    duration_min: int = Field(default=0, ge=0)
    is_favorite: bool = False
    created_at: datetime
    last_cooked_at: Optional[datetime] = None

    @computed_field
    @property
    def ingredients_list(self) -> List[str]:
        return split_lines(self.ingredients)

    @computed_field
    @property
    def steps_list(self) -> List[str]:
        return split_lines(self.steps)


class RecipeSeed(BaseModel):
    id: str
    title: str
    summary: str
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    category: str
    image_name: str
    difficulty: str
    duration: int = Field(default=0, ge=0)


class NormalizedImport(BaseModel):
    title: str
    ingredients: str
    instructions: str
    servings: Optional[str] = None
    image: Optional[str] = None


class RecipeListResponse(BaseModel):
    items: List[Recipe]


class CategoryListResponse(BaseModel):
    items: List[str]


class ImportResponse(BaseModel):
    upserted: int
