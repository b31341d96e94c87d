import httpx
from typing import Dict, List, Literal, Optional

from recipe_box.core import config
from recipe_box.models.recipe import ExternalRecord

SourceType = Literal["meal", "drink"]

# Envelope key and id field differ between TheMealDB and TheCocktailDB
_ENVELOPE = {"meal": "meals", "drink": "drinks"}
_ID_FIELD = {"meal": "idMeal", "drink": "idDrink"}


class RecipeDBClient:
    """Read-only client for the TheMealDB-style recipe directories.

    Both directories expose the same two calls:
      - filter.php?c=<category>  -> {"meals"|"drinks": [{"idMeal": ...}, ...] | null}
      - lookup.php?i=<id>        -> {"meals"|"drinks": [{...full record...}] | null}
    """

    def __init__(
        self,
        base_url: str,
        source: SourceType,
        timeout_s: float = config.HTTP_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.source = source
        self.timeout_s = timeout_s
        self.transport = transport

    @property
    def id_field(self) -> str:
        return _ID_FIELD[self.source]

    async def _get(self, path: str, params: Dict[str, str]) -> List[ExternalRecord]:
        async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
            r = await client.get(f"{self.base_url}/{path}", params=params)
            r.raise_for_status()
            data = r.json()

        if not isinstance(data, dict):
            raise ValueError(f"Unexpected payload from {path}: {type(data).__name__}")

        # the directories answer "no results" with null rather than []
        items = data.get(_ENVELOPE[self.source]) or []
        if not isinstance(items, list):
            raise ValueError(f"Unexpected '{_ENVELOPE[self.source]}' shape from {path}")
        return [it for it in items if isinstance(it, dict)]

    async def list_by_category(self, category: str) -> List[ExternalRecord]:
        return await self._get("filter.php", {"c": category})

    async def lookup_by_id(self, item_id: str) -> Optional[ExternalRecord]:
        items = await self._get("lookup.php", {"i": item_id})
        return items[0] if items else None


def meal_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> RecipeDBClient:
    return RecipeDBClient(config.MEALDB_BASE_URL, "meal", transport=transport)


def drink_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> RecipeDBClient:
    return RecipeDBClient(config.COCKTAILDB_BASE_URL, "drink", transport=transport)
