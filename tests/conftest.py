from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Dict, List, Optional

import httpx
import pytest

import recipe_box.services.recipes_repo as repo
from recipe_box.clients.recipe_db import RecipeDBClient
from recipe_box.models.recipe import NormalizedImport

MEAL_URL = "https://meals.test/api/json/v1/1"
DRINK_URL = "https://drinks.test/api/json/v1/1"


@pytest.fixture
def store(tmp_path: Path) -> repo.RecipeStore:
    s = repo.RecipeStore(tmp_path / "recipes.sqlite3", bundled_path=tmp_path / "bundled.json")
    s.init_db()
    return s


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> Callable[[], str]:
    # Deterministic, strictly increasing created_at / last_cooked_at
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ticks = {"n": 0}

    def now() -> str:
        ticks["n"] += 1
        return (start + timedelta(minutes=ticks["n"])).isoformat(timespec="microseconds")

    monkeypatch.setattr(repo, "_now_iso", now)
    return now


def make_import(title: str, ingredients: str = "1 egg", instructions: str = "Cook. Eat.") -> NormalizedImport:
    return NormalizedImport(title=title, ingredients=ingredients, instructions=instructions, servings="2")


def meal_record(item_id: str, title: str, **extra: Optional[str]) -> Dict[str, Optional[str]]:
    rec: Dict[str, Optional[str]] = {
        "idMeal": item_id,
        "strMeal": title,
        "strMealThumb": f"https://img.test/{item_id}.jpg",
        "strInstructions": "Mix. Bake.",
        "strIngredient1": "Flour",
        "strMeasure1": "2 cups",
    }
    rec.update(extra)
    return rec


def drink_record(item_id: str, title: str) -> Dict[str, Optional[str]]:
    return {
        "idDrink": item_id,
        "strDrink": title,
        "strDrinkThumb": None,
        "strInstructions": "Shake. Pour.",
        "strIngredient1": "Rum",
        "strMeasure1": "2 oz",
    }


class FakeDirectory:
    """
    Serves filter.php / lookup.php for one directory through httpx.MockTransport.
    `fail_list` / `fail_ids` answer 500; `calls` records every request URL.
    """

    def __init__(self, envelope: str, listing: Dict[str, List[str]], records: Dict[str, dict]):
        self.envelope = envelope
        self.listing = listing
        self.records = records
        self.fail_list: set[str] = set()
        self.fail_ids: set[str] = set()
        self.calls: List[httpx.URL] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url)
        path = request.url.path

        if path.endswith("/filter.php"):
            category = request.url.params.get("c", "")
            if category in self.fail_list:
                return httpx.Response(500, json={"error": "boom"})
            ids = self.listing.get(category)
            items = [{self._id_key(): i} for i in ids] if ids is not None else None
            return httpx.Response(200, json={self.envelope: items})

        if path.endswith("/lookup.php"):
            item_id = request.url.params.get("i", "")
            if item_id in self.fail_ids:
                return httpx.Response(500, json={"error": "boom"})
            rec = self.records.get(item_id)
            return httpx.Response(200, json={self.envelope: [rec] if rec else None})

        return httpx.Response(404)

    def _id_key(self) -> str:
        return "idMeal" if self.envelope == "meals" else "idDrink"

    def lookups(self) -> List[str]:
        return [u.params.get("i") for u in self.calls if u.path.endswith("/lookup.php")]

    def client(self, base_url: str, source: str) -> RecipeDBClient:
        return RecipeDBClient(base_url, source, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def meal_dir() -> FakeDirectory:
    records = {}
    for i in range(1, 9):
        records[f"b{i}"] = meal_record(f"b{i}", f"Breakfast {i}")
    for i in range(1, 4):
        records[f"c{i}"] = meal_record(f"c{i}", f"Chicken {i}")
    listing = {
        "Breakfast": [f"b{i}" for i in range(1, 9)],
        "Chicken": ["c1", "c2", "c3"],
    }
    return FakeDirectory("meals", listing, records)


@pytest.fixture
def drink_dir() -> FakeDirectory:
    records = {"d1": drink_record("d1", "Mojito"), "d2": drink_record("d2", "Daiquiri")}
    return FakeDirectory("drinks", {"Cocktail": ["d1", "d2"]}, records)
