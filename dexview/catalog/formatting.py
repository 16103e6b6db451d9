"""
Display formatting for catalog records.

Every helper here is total over its input type and free of side
effects, so the templates can call them on each render.
"""

from typing import Dict


STAT_LABELS: Dict[str, str] = {
    "hp": "HP",
    "attack": "Attack",
    "defense": "Defense",
    "special-attack": "Sp. Atk",
    "special-defense": "Sp. Def",
    "speed": "Speed",
}

HEIGHT_UNIT = "m"
WEIGHT_UNIT = "kg"


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def format_stat_name(key: str) -> str:
    """Map a PokeAPI stat key to its short label.

    Unknown keys only get their first letter upper-cased, so
    ``"unknown-stat"`` becomes ``"Unknown-stat"``.
    """
    return STAT_LABELS.get(key, _capitalize_first(key))


def format_measurement(raw: int, unit: str) -> str:
    """Convert a raw tenth-unit integer to ``"<x.y> <unit>"``."""
    return f"{raw / 10:.1f} {unit}"


def format_height(raw: int) -> str:
    return format_measurement(raw, HEIGHT_UNIT)


def format_weight(raw: int) -> str:
    return format_measurement(raw, WEIGHT_UNIT)


def format_identifier(numeric_id: int) -> str:
    """``25`` -> ``"#025"``; ids wider than three digits are kept whole."""
    return f"#{numeric_id:03d}"


def format_trait_label(name: str, is_hidden: bool = False) -> str:
    """``"solar-power"`` -> ``"Solar Power"``, suffixed when hidden."""
    words = name.replace("-", " ").split(" ")
    label = " ".join(_capitalize_first(w) for w in words)
    if is_hidden:
        label += " (Hidden)"
    return label


def format_display_name(name: str) -> str:
    return _capitalize_first(name)
