from boutique.utils.i18n import resolve_language, sort_labels
from boutique.utils.slugs import category_href, slugify, unslugify


def test_slugify_replaces_whitespace_runs_and_lowercases():
    assert slugify("Sac  à Main\tCuir") == "sac-à-main-cuir"


def test_unslugify_decodes_and_restores_spaces():
    assert unslugify("sac-%C3%A0-main") == "sac à main"
    assert unslugify("Maison%20Deco") == "Maison Deco"


def test_category_href_encodes_segments():
    assert category_href("Maison Déco") == "/category/Maison-D%C3%A9co"
    assert category_href("Maison", "Art de la table") == "/category/Maison/Art-de-la-table"


def test_resolve_language_uses_first_tag():
    assert resolve_language("fr-FR,fr;q=0.9,en;q=0.8") == "fr"
    assert resolve_language("en-US") == "en"


def test_resolve_language_falls_back_to_english():
    assert resolve_language(None) == "en"
    assert resolve_language("de-DE,de") == "en"


def test_sort_labels_cover_the_same_keys():
    assert set(sort_labels("fr")) == set(sort_labels("en"))
    assert sort_labels("fr")["best_selling"] == "Meilleures ventes"
    assert sort_labels("xx") == sort_labels("en")
