from __future__ import annotations

import asyncio

import httpx
import pytest

from recipe_box.clients.recipe_db import RecipeDBClient
from recipe_box.models.sync import SyncReport
from recipe_box.services.recipes_repo import RecipeStore
from recipe_box.services.recipes_sync import BUCKETS, RecipeSyncer

from conftest import DRINK_URL, MEAL_URL, FakeDirectory


def _syncer(meal_dir: FakeDirectory, drink_dir: FakeDirectory) -> RecipeSyncer:
    return RecipeSyncer(meal_dir.client(MEAL_URL, "meal"), drink_dir.client(DRINK_URL, "drink"))


def test_fetch_all_returns_three_labelled_buckets(meal_dir, drink_dir):
    out = asyncio.run(_syncer(meal_dir, drink_dir).fetch_all())

    assert list(out) == ["Breakfast", "Lunch", "Drinks"]
    assert {r.title for r in out["Breakfast"]} == {f"Breakfast {i}" for i in range(1, 6)}
    assert {r.title for r in out["Drinks"]} == {"Mojito", "Daiquiri"}


def test_lunch_bucket_is_filled_from_chicken_category(meal_dir, drink_dir):
    # Known quirk kept on purpose: the "Lunch" label is backed by the "Chicken" filter.
    lunch = next(b for b in BUCKETS if b.label == "Lunch")
    assert lunch.upstream_category == "Chicken"

    out = asyncio.run(_syncer(meal_dir, drink_dir).fetch_all())

    assert {r.title for r in out["Lunch"]} == {"Chicken 1", "Chicken 2", "Chicken 3"}
    filters = {u.params.get("c") for u in meal_dir.calls if u.path.endswith("/filter.php")}
    assert filters == {"Breakfast", "Chicken"}


def test_only_first_five_ids_are_looked_up(meal_dir, drink_dir):
    syncer = _syncer(meal_dir, drink_dir)
    asyncio.run(syncer.fetch_bucket(BUCKETS[0]))

    assert sorted(meal_dir.lookups()) == ["b1", "b2", "b3", "b4", "b5"]


def test_items_without_string_id_are_skipped():
    d = FakeDirectory("meals", {}, {})

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/filter.php"):
            return httpx.Response(200, json={"meals": [{"idMeal": None}, {"strMeal": "no id"}, {"idMeal": "m1"}]})
        return d.handler(request)

    d.records["m1"] = {"idMeal": "m1", "strMeal": "Only One"}
    meals = RecipeDBClient(MEAL_URL, "meal", transport=httpx.MockTransport(handler))
    syncer = RecipeSyncer(meals, meals)

    out = asyncio.run(syncer.fetch_bucket(BUCKETS[0]))

    assert [r.title for r in out] == ["Only One"]


def test_failed_or_empty_lookups_are_dropped(meal_dir, drink_dir):
    meal_dir.fail_ids.add("c1")
    del meal_dir.records["c2"]  # lookup answers {"meals": null}

    out = asyncio.run(_syncer(meal_dir, drink_dir).fetch_bucket(BUCKETS[1]))

    assert [r.title for r in out] == ["Chicken 3"]
    assert sorted(meal_dir.lookups()) == ["c1", "c2", "c3"]


def test_null_category_listing_is_an_empty_bucket(meal_dir, drink_dir):
    meal_dir.listing.pop("Breakfast")

    out = asyncio.run(_syncer(meal_dir, drink_dir).fetch_all())

    assert out["Breakfast"] == []
    assert len(out["Lunch"]) == 3


def test_undecodable_listing_counts_as_failure(meal_dir, drink_dir):
    def broken(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>maintenance</html>")

    drinks = RecipeDBClient(DRINK_URL, "drink", transport=httpx.MockTransport(broken))
    syncer = RecipeSyncer(meal_dir.client(MEAL_URL, "meal"), drinks)

    out = asyncio.run(syncer.fetch_all())

    assert out["Drinks"] == []
    assert len(out["Breakfast"]) == 5


def test_sync_all_upserts_each_bucket_under_its_label(store: RecipeStore, meal_dir, drink_dir):
    report = asyncio.run(_syncer(meal_dir, drink_dir).sync_all(store))

    assert report.total_upserted == 10
    assert report.failed == []
    assert len(store.query(category="Breakfast")) == 5
    assert len(store.query(category="Lunch")) == 3
    assert {r.title for r in store.query(category="Drinks")} == {"Mojito", "Daiquiri"}

    mojito = store.query("mojito")[0]
    assert mojito.ingredients == "2 oz Rum"
    assert mojito.summary == "Servings: 2"
    assert mojito.image_ref is None


def test_repeated_sync_does_not_duplicate(store: RecipeStore, meal_dir, drink_dir):
    syncer = _syncer(meal_dir, drink_dir)
    asyncio.run(syncer.sync_all(store))
    first = sorted((r.id, r.title, r.steps) for r in store.query())

    asyncio.run(syncer.sync_all(store))

    assert sorted((r.id, r.title, r.steps) for r in store.query()) == first
    assert store.count() == 10


def test_failed_bucket_does_not_block_others_and_completion_fires_once(store: RecipeStore, meal_dir, drink_dir):
    drink_dir.fail_list.add("Cocktail")
    meal_dir.fail_ids.add("b2")
    reports: list[SyncReport] = []

    def on_complete(report: SyncReport) -> None:
        # every nested lookup has resolved by the time completion fires
        assert sorted(meal_dir.lookups()) == ["b1", "b2", "b3", "b4", "b5", "c1", "c2", "c3"]
        reports.append(report)

    report = asyncio.run(_syncer(meal_dir, drink_dir).sync_all(store, on_complete=on_complete))

    assert reports == [report]
    assert report.failed == ["Drinks"]
    assert report.buckets["Drinks"].fetched == 0
    assert report.buckets["Breakfast"].fetched == 4
    assert report.buckets["Lunch"].upserted == 3
    assert store.query(category="Drinks") == []


def test_completion_fires_when_every_bucket_fails(store: RecipeStore, meal_dir, drink_dir):
    meal_dir.fail_list.update({"Breakfast", "Chicken"})
    drink_dir.fail_list.add("Cocktail")
    calls = []

    report = asyncio.run(_syncer(meal_dir, drink_dir).sync_all(store, on_complete=calls.append))

    assert len(calls) == 1
    assert sorted(report.failed) == ["Breakfast", "Drinks", "Lunch"]
    assert store.count() == 0


def test_unexpected_import_error_fails_only_that_bucket(store: RecipeStore, meal_dir, drink_dir, monkeypatch):
    real_import = store.import_online

    def import_online(recipes, label):
        if label == "Lunch":
            raise RuntimeError("disk on fire")
        return real_import(recipes, label)

    monkeypatch.setattr(store, "import_online", import_online)
    calls = []

    report = asyncio.run(_syncer(meal_dir, drink_dir).sync_all(store, on_complete=calls.append))

    assert calls == [report]
    assert report.failed == ["Lunch"]
    assert report.buckets["Lunch"].upserted == 0
    assert report.buckets["Breakfast"].upserted == 5
    assert report.buckets["Drinks"].upserted == 2
    assert store.query(category="Lunch") == []


def test_unexpected_fetch_error_fails_only_that_bucket(store: RecipeStore, meal_dir, drink_dir):
    syncer = _syncer(meal_dir, drink_dir)

    async def crash(category: str):
        raise RuntimeError("unexpected")

    syncer.clients["drink"].list_by_category = crash
    calls = []

    report = asyncio.run(syncer.sync_all(store, on_complete=calls.append))

    assert calls == [report]
    assert report.failed == ["Drinks"]
    assert report.buckets["Drinks"].fetched == 0
    assert report.total_upserted == 8


def test_lookups_and_buckets_run_concurrently():
    state = {"in_flight": 0, "peak": 0}

    async def slow(request: httpx.Request) -> httpx.Response:
        state["in_flight"] += 1
        state["peak"] = max(state["peak"], state["in_flight"])
        try:
            await asyncio.sleep(0.02)
        finally:
            state["in_flight"] -= 1
        if request.url.path.endswith("/filter.php"):
            return httpx.Response(200, json={"meals": [{"idMeal": str(i)} for i in range(5)]})
        return httpx.Response(200, json={"meals": [{"strMeal": f"Meal {request.url.params['i']}"}]})

    meals = RecipeDBClient(MEAL_URL, "meal", transport=httpx.MockTransport(slow))
    syncer = RecipeSyncer(meals, meals)

    out = asyncio.run(syncer.fetch_all())

    assert len(out["Breakfast"]) == 5
    assert len(out["Lunch"]) == 5
    assert len(out["Drinks"]) == 5
    # three list calls at once, then fifteen lookups at once
    assert state["peak"] >= 5


@pytest.mark.parametrize("status", [404, 500, 503])
def test_http_errors_degrade_to_empty(status, meal_dir, drink_dir):
    def down(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status)

    meals = RecipeDBClient(MEAL_URL, "meal", transport=httpx.MockTransport(down))
    syncer = RecipeSyncer(meals, drink_dir.client(DRINK_URL, "drink"))

    out = asyncio.run(syncer.fetch_all())

    assert out["Breakfast"] == [] and out["Lunch"] == []
    assert len(out["Drinks"]) == 2
