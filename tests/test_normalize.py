import re

from matchmaster.text.normalize import normalize_item


def test_normalize_item_basic() -> None:
    assert normalize_item("Pizza") == "pizza"
    assert normalize_item("  Ice Cream  ") == "icecream"
    assert normalize_item("Rock'n'Roll!") == "rocknroll"
    assert normalize_item("Route 66") == "route66"


def test_normalize_item_accents() -> None:
    assert normalize_item("café") == normalize_item("cafe")
    assert normalize_item("Crème Brûlée") == "cremebrulee"
    assert normalize_item("Příliš žluťoučký kůň") == "priliszlutouckykun"


def test_normalize_item_whitespace() -> None:
    assert normalize_item("ice cream") == normalize_item("IceCream")
    assert normalize_item("ice\tcream\n") == "icecream"
    assert normalize_item("ice cream") == "icecream"


def test_normalize_item_drops_non_ascii() -> None:
    assert normalize_item("寿司") == ""
    assert normalize_item("straße") == "strae"
    assert normalize_item("🍕 pizza") == "pizza"


def test_normalize_item_empty_inputs() -> None:
    assert normalize_item("") == ""
    assert normalize_item("   ") == ""
    assert normalize_item("?!.,") == ""
    assert normalize_item(None) == ""
    assert normalize_item(42) == ""


def test_normalize_item_output_alphabet_and_idempotence() -> None:
    samples = [
        "Café au lait",
        "  ÉCOLE  ",
        "naïve-résumé",
        "Ångström 2000",
        "ice cream",
        "!!!",
        "Ÿ́x",
        "",
    ]
    for s in samples:
        key = normalize_item(s)
        assert re.fullmatch(r"[a-z0-9]*", key)
        assert normalize_item(key) == key
