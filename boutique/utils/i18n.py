# boutique/utils/i18n.py
DEFAULT_LANGUAGE = "en"

SORT_LABELS = {
    "fr": {
        "price_asc": "Du - cher au + cher",
        "price_desc": "Du + cher au - cher",
        "name_asc": "De A à Z",
        "name_desc": "De Z à A",
        "recent": "Du + récent au + ancien",
        "oldest": "Du + ancien au + récent",
        "best_selling": "Meilleures ventes",
    },
    "en": {
        "price_asc": "Price: low to high",
        "price_desc": "Price: high to low",
        "name_asc": "Name: A to Z",
        "name_desc": "Name: Z to A",
        "recent": "Newest first",
        "oldest": "Oldest first",
        "best_selling": "Best sellers",
    },
}


def resolve_language(accept_language: str | None) -> str:
    """
    Choisit la langue a partir d'un en-tete Accept-Language.
    Seul le premier tag compte ("fr-FR,fr;q=0.9" -> "fr"), repli sur l'anglais.
    """
    if not accept_language:
        return DEFAULT_LANGUAGE

    first = accept_language.split(",")[0].strip()
    code = first.split(";")[0].split("-")[0].lower()
    return code if code in SORT_LABELS else DEFAULT_LANGUAGE


def sort_labels(language: str) -> dict[str, str]:
    return SORT_LABELS.get(language, SORT_LABELS[DEFAULT_LANGUAGE])
