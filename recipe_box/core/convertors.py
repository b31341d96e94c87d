# recipe_box/core/convertors.py
from __future__ import annotations

from starlette.convertors import Convertor, register_url_convertor


class RecipeIdConvertor(Convertor):
    """
    Imported recipe ids embed the lowercased ingredient list, so they carry
    "/" (from "1/2 cup") and newlines. Starlette's "path" convertor stops at
    newlines; this one takes anything.
    """

    regex = r"[\s\S]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


register_url_convertor("recipe_id", RecipeIdConvertor())
