"""Residue coloring by chemical class."""
from types import MappingProxyType
from typing import Optional

DEFAULT_COLOR = "#FFFFFF"

# Zappo-style physicochemical classes: name -> (residues, color)
RESIDUE_CLASSES = MappingProxyType({
    "aliphatic": ("AVLIM", "#FFAFAF"),
    "aromatic": ("FWY", "#FFC800"),
    "positive": ("KRH", "#6464FF"),
    "negative": ("DE", "#FF6464"),
    "hydrophilic": ("STNQ", "#64FF64"),
    "special": ("PG", "#FF64FF"),
    "cysteine": ("C", "#FFFF64"),
})

AMINO_ACID_COLORS = MappingProxyType({
    residue: color
    for residues, color in RESIDUE_CLASSES.values()
    for residue in residues
})

_RESIDUE_CLASS_NAMES = MappingProxyType({
    residue: name
    for name, (residues, _) in RESIDUE_CLASSES.items()
    for residue in residues
})


def _normalize(symbol) -> Optional[str]:
    if not isinstance(symbol, str) or len(symbol) != 1:
        return None
    return symbol.upper()


def color_of(symbol) -> str:
    """Color for a residue symbol, or DEFAULT_COLOR for anything unknown.

    Lookup is case-insensitive and never raises: gaps, digits, empty
    strings and non-string input all fall back to the default color.
    """
    key = _normalize(symbol)
    if key is None:
        return DEFAULT_COLOR
    return AMINO_ACID_COLORS.get(key, DEFAULT_COLOR)


def residue_class(symbol) -> Optional[str]:
    """Name of the chemical class a residue belongs to, if any."""
    key = _normalize(symbol)
    if key is None:
        return None
    return _RESIDUE_CLASS_NAMES.get(key)


def color_table() -> dict[str, str]:
    return dict(AMINO_ACID_COLORS)


def class_table() -> dict[str, str]:
    return {residue: residue_class(residue) for residue in AMINO_ACID_COLORS}
