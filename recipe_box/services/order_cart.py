# recipe_box/services/order_cart.py
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from recipe_box.core import config
from recipe_box.models.recipe import Recipe

log = logging.getLogger("recipe_box.order")


class OrderCart:
    """In-memory pick list of up to `capacity` distinct recipes. Never persisted."""

    def __init__(self, capacity: int = config.ORDER_CAPACITY):
        self.capacity = capacity
        self._items: List[Recipe] = []

    @property
    def items(self) -> List[Recipe]:
        return list(self._items)

    @property
    def can_add(self) -> bool:
        return len(self._items) < self.capacity

    def add(self, recipe: Recipe) -> bool:
        if not self.can_add:
            return False
        if any(r.id == recipe.id for r in self._items):
            return False
        self._items.append(recipe)
        return True

    def remove(self, recipe_id: str) -> None:
        self._items = [r for r in self._items if r.id != recipe_id]

    def clear(self) -> None:
        self._items = []

    async def submit(self, delay_s: Optional[float] = None) -> bool:
        # there is no order backend; confirm after a short pause
        await asyncio.sleep(config.ORDER_SUBMIT_DELAY_S if delay_s is None else delay_s)
        count = len(self._items)
        self.clear()
        log.info("order submitted", extra={"items": count})
        return True
