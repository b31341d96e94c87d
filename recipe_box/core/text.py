import unicodedata
from typing import Iterable, List, Optional


def split_lines(text: Optional[str], sep: str = "\n") -> List[str]:
    return [part.strip() for part in (text or "").split(sep) if part.strip()]


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def fold(text: Optional[str]) -> str:
    # case + diacritic insensitive comparison key
    decomposed = unicodedata.normalize("NFKD", text or "")
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()
