import os
from pathlib import Path

# Project root = checkout containing recipe_box/
PROJECT_ROOT = Path(__file__).resolve().parents[2]
PACKAGE_DIR = Path(__file__).resolve().parents[1]

DATA_DIR = Path(os.getenv("RECIPES_DATA_DIR", str(PROJECT_ROOT / "data")))
RECIPES_DB = Path(os.getenv("RECIPES_DB", str(DATA_DIR / "recipes.sqlite3")))
BUNDLED_RECIPES_PATH = Path(
    os.getenv("BUNDLED_RECIPES_PATH", str(PACKAGE_DIR / "data" / "bundled_recipes.json"))
)

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

MEALDB_BASE_URL = os.getenv("MEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1")
COCKTAILDB_BASE_URL = os.getenv("COCKTAILDB_BASE_URL", "https://www.thecocktaildb.com/api/json/v1/1")
HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "15"))

SYNC_ON_STARTUP = os.getenv("SYNC_ON_STARTUP", "1").lower() not in ("0", "false", "no", "off")

# Lookups per category bucket; truncation, not paging.
LOOKUP_LIMIT = 5

ORDER_CAPACITY = 3
ORDER_SUBMIT_DELAY_S = float(os.getenv("ORDER_SUBMIT_DELAY_S", "1.0"))

PLACEHOLDER_IMAGE = "RecipePlaceholder"
DERIVED_KEY_PREFIX = "ninja:"
IMPORTED_CATEGORY = "Imported"

CATEGORY_FILTERS = [
    "All",
    "Dinner",
    "Breakfast",
    "Lunch",
    "Salad",
    "Street Food",
    "Sides",
    "Drinks",
    "Appetizers",
    "Favorites",
]
