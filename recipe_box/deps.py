"""FastAPI dependencies.

Services are built once in create_app() and parked on app.state; routes
reach them through these functions instead of module globals.
"""

from fastapi import Request

from recipe_box.services.order_cart import OrderCart
from recipe_box.services.recipes_repo import RecipeStore
from recipe_box.services.recipes_sync import RecipeSyncer


def get_store(request: Request) -> RecipeStore:
    return request.app.state.store


def get_cart(request: Request) -> OrderCart:
    return request.app.state.cart


def get_syncer(request: Request) -> RecipeSyncer:
    return request.app.state.syncer
