import pytest

from lyrics_finder.slugs import slugify


def test_slugify_folds_accents_and_hyphenates() -> None:
    assert slugify("Charles Aznavour") == "charles-aznavour"
    assert slugify("Ne me quitte pas") == "ne-me-quitte-pas"
    assert slugify("Édith Piaf") == "edith-piaf"
    assert slugify("Ça plane pour moi") == "ca-plane-pour-moi"
    assert slugify("Mañana, déjà vu!") == "manana-deja-vu"


def test_slugify_strips_symbols_and_trims_hyphens() -> None:
    assert slugify("  --Hier   Encore?!-- ") == "hier-encore"
    assert slugify("L'hymne à l'amour") == "lhymne-a-lamour"
    assert slugify("AC - DC") == "ac-dc"


@pytest.mark.parametrize("value", ["", "   ", "!!!", "🎵🎶", "— … ·", "---"])
def test_slugify_returns_empty_for_symbol_only_input(value: str) -> None:
    assert slugify(value) == ""


@pytest.mark.parametrize(
    "value",
    ["Hier Encore", "Édith Piaf", "  a--b  c ", "Ÿ Æ Ø", "emoji 🎵 title", "x-", "Ça-va"],
)
def test_slugify_is_idempotent(value: str) -> None:
    once = slugify(value)
    assert slugify(once) == once
