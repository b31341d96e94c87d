# recipe_box/routers/order.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

import recipe_box.core.convertors  # noqa: F401  registers the "recipe_id" path convertor
from recipe_box.deps import get_cart, get_store
from recipe_box.models.order import OrderResponse, OrderSubmitResponse
from recipe_box.services.order_cart import OrderCart
from recipe_box.services.recipes_repo import RecipeStore

router = APIRouter(prefix="/order", tags=["order"])


def _view(cart: OrderCart) -> OrderResponse:
    return OrderResponse(items=cart.items, capacity=cart.capacity, can_add=cart.can_add)


@router.get("", response_model=OrderResponse)
def order_get(cart: OrderCart = Depends(get_cart)) -> OrderResponse:
    return _view(cart)


@router.post("/submit", response_model=OrderSubmitResponse)
async def order_submit(cart: OrderCart = Depends(get_cart)) -> OrderSubmitResponse:
    submitted = len(cart.items)
    ok = await cart.submit()
    return OrderSubmitResponse(ok=ok, submitted=submitted)


@router.post("/{recipe_id:recipe_id}", response_model=OrderResponse)
def order_add(
    recipe_id: str,
    cart: OrderCart = Depends(get_cart),
    store: RecipeStore = Depends(get_store),
) -> OrderResponse:
    recipe = store.get(recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")

    if not cart.add(recipe):
        detail = "Order is full" if not cart.can_add else "Recipe already in order"
        raise HTTPException(status_code=409, detail=detail)
    return _view(cart)


@router.delete("/{recipe_id:recipe_id}", response_model=OrderResponse)
def order_remove(recipe_id: str, cart: OrderCart = Depends(get_cart)) -> OrderResponse:
    cart.remove(recipe_id)
    return _view(cart)


@router.delete("", response_model=OrderResponse)
def order_clear(cart: OrderCart = Depends(get_cart)) -> OrderResponse:
    cart.clear()
    return _view(cart)
