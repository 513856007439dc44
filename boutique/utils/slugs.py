# boutique/utils/slugs.py
import re
from urllib.parse import quote, unquote

_SPACES = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Titre -> segment d'URL: espaces en tirets, minuscules."""
    return _SPACES.sub("-", title).lower()


def unslugify(slug: str) -> str:
    """Inverse approximatif de slugify: decode l'URL et remet les espaces.

    La casse est perdue, la recherche qui suit doit etre insensible a la casse.
    """
    return unquote(slug).replace("-", " ")


def category_href(category: str, subcategory: str | None = None) -> str:
    href = f"/category/{quote(_SPACES.sub('-', category))}"
    if subcategory:
        href += f"/{quote(_SPACES.sub('-', subcategory))}"
    return href
