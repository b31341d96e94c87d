# recipe_box/models/order.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel

from recipe_box.models.recipe import Recipe


class OrderResponse(BaseModel):
    items: List[Recipe]
    capacity: int
    can_add: bool


class OrderSubmitResponse(BaseModel):
    ok: bool
    submitted: int
