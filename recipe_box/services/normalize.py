# recipe_box/services/normalize.py
from __future__ import annotations

from typing import Optional

from recipe_box.clients.recipe_db import SourceType
from recipe_box.core import config
from recipe_box.models.recipe import ExternalRecord, NormalizedImport

MAX_INGREDIENTS = 20
DEFAULT_TITLE = "Unknown"
DEFAULT_INSTRUCTIONS = "No instructions."
DEFAULT_SERVINGS = "2"

_TITLE_FIELD = {"meal": "strMeal", "drink": "strDrink"}
_THUMB_FIELD = {"meal": "strMealThumb", "drink": "strDrinkThumb"}


def _str_field(record: ExternalRecord, key: str) -> Optional[str]:
    # directories send null for unused slots; anything non-string counts as absent
    v = record.get(key)
    return v if isinstance(v, str) else None


def _ingredient_lines(record: ExternalRecord) -> str:
    lines = []
    for i in range(1, MAX_INGREDIENTS + 1):
        ing = _str_field(record, f"strIngredient{i}")
        if not ing or not ing.strip():
            continue
        measure = _str_field(record, f"strMeasure{i}") or ""
        lines.append(f"{measure} {ing}".strip())
    return "\n".join(lines)


def normalize_record(record: ExternalRecord, source: SourceType) -> NormalizedImport:
    """
    Map one raw meal/drink record onto the import shape.
    Missing or malformed fields fall back to defaults; this never raises.
    """
    title = _str_field(record, _TITLE_FIELD[source])
    instructions = _str_field(record, "strInstructions")

    return NormalizedImport(
        title=title if title is not None else DEFAULT_TITLE,
        ingredients=_ingredient_lines(record),
        instructions=instructions or DEFAULT_INSTRUCTIONS,
        servings=DEFAULT_SERVINGS,
        image=_str_field(record, _THUMB_FIELD[source]),
    )


def derived_key(item: NormalizedImport, prefix: str = config.DERIVED_KEY_PREFIX) -> str:
    return f"{prefix}{item.title.lower()}::{item.ingredients.lower()}"
