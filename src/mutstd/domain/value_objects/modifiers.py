"""
Modifier value objects - morph and color modifiers with code tables.

Mutant Standard emoji can vary along two axes:
- Morph: anatomical style (human, paw, claw, hoof)
- Color: palette value, or an explicit request for the default colouring

Encoding and decoding go through explicit tables rather than enum values so
that every mapping can be inspected and tested in one place.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class Morph(str, Enum):
    """Morph modifier (anatomical style)."""

    HUMAN = "human"
    PAW = "paw"
    CLAW = "claw"
    HOOF = "hoof"

    def __str__(self) -> str:
        """String representation."""
        return self.value


class DefaultColor(str, Enum):
    """Explicit request for an emoji's default colouring."""

    DEFAULT = "default"

    def __str__(self) -> str:
        """String representation."""
        return self.value


class Color(str, Enum):
    """Color modifier. Member values are the dataset codes."""

    # Human-restricted
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"

    # Paw-restricted (furry experimental)
    FE1 = "fe1"
    FE2 = "fe2"
    FE3 = "fe3"

    # Shared
    R1 = "r1"
    R2 = "r2"
    R3 = "r3"
    D1 = "d1"
    D2 = "d2"
    D3 = "d3"
    O1 = "o1"
    O2 = "o2"
    O3 = "o3"
    Y1 = "y1"
    Y2 = "y2"
    Y3 = "y3"
    L1 = "l1"
    L2 = "l2"
    L3 = "l3"
    G1 = "g1"
    G2 = "g2"
    G3 = "g3"
    T1 = "t1"
    T2 = "t2"
    T3 = "t3"
    C1 = "c1"
    C2 = "c2"
    C3 = "c3"
    S1 = "s1"
    S2 = "s2"
    S3 = "s3"
    B1 = "b1"
    B2 = "b2"
    B3 = "b3"
    V1 = "v1"
    V2 = "v2"
    V3 = "v3"
    M1 = "m1"
    M2 = "m2"
    M3 = "m3"
    P1 = "p1"
    P2 = "p2"
    P3 = "p3"
    E1 = "e1"
    E2 = "e2"
    E3 = "e3"
    K1 = "k1"
    K2 = "k2"
    K3 = "k3"
    K4 = "k4"
    K5 = "k5"
    K6 = "k6"
    K7 = "k7"

    def __str__(self) -> str:
        """String representation."""
        return self.value


# Either an assigned color or the explicit default; None means absent.
ColorModifier = Union[Color, DefaultColor]

HUMAN_PALETTE: frozenset = frozenset(
    {Color.H1, Color.H2, Color.H3, Color.H4, Color.H5}
)

PAW_PALETTE: frozenset = frozenset({Color.FE1, Color.FE2, Color.FE3})

SHARED_PALETTE: frozenset = frozenset(
    color
    for color in Color
    if color not in HUMAN_PALETTE and color not in PAW_PALETTE
)

MORPH_PALETTES: Mapping[Morph, frozenset] = MappingProxyType(
    {
        Morph.HUMAN: HUMAN_PALETTE | SHARED_PALETTE,
        Morph.PAW: SHARED_PALETTE | PAW_PALETTE,
        Morph.CLAW: SHARED_PALETTE,
        Morph.HOOF: SHARED_PALETTE,
    }
)

COLOR_CODES: Mapping[Color, str] = MappingProxyType(
    {color: color.value for color in Color}
)

CODE_COLORS: Mapping[str, ColorModifier] = MappingProxyType(
    {
        **{code: color for color, code in COLOR_CODES.items()},
        DefaultColor.DEFAULT.value: DefaultColor.DEFAULT,
    }
)

MORPH_CODES: Mapping[Morph, str] = MappingProxyType(
    {
        Morph.HUMAN: "hmn",
        Morph.PAW: "paw",
        Morph.CLAW: "claw",
        Morph.HOOF: "hoof",
    }
)

# Claw decodes from "clw" but encodes to "claw".
CODE_MORPHS: Mapping[str, Morph] = MappingProxyType(
    {
        "hmn": Morph.HUMAN,
        "paw": Morph.PAW,
        "clw": Morph.CLAW,
        "hoof": Morph.HOOF,
    }
)


def color_to_code(color: Color) -> str:
    """Get the dataset code for a color."""
    return COLOR_CODES[color]


def code_to_color(code: str) -> Optional[ColorModifier]:
    """
    Resolve a dataset color code.

    Args:
        code: Color code, e.g. "h1", or "default"

    Returns:
        Color member, DefaultColor.DEFAULT for "default", None if unknown
    """
    return CODE_COLORS.get(code)


def morph_to_code(morph: Morph) -> str:
    """Get the dataset code for a morph."""
    return MORPH_CODES[morph]


def code_to_morph(code: str) -> Optional[Morph]:
    """Resolve a dataset morph code, None if unknown."""
    return CODE_MORPHS.get(code)


def palette_for(morph: Morph) -> frozenset:
    """Get the colors a morph may be combined with."""
    return MORPH_PALETTES[morph]


def is_valid_pairing(
    morph: Optional[Morph], color: Optional[ColorModifier]
) -> bool:
    """
    Check whether a morph/color combination is allowed.

    Rules:
    - No color: only valid without a morph
    - Explicit default color: always valid
    - Assigned color without morph: always valid
    - Assigned color with morph: color must be in the morph's palette

    Args:
        morph: Morph modifier or None
        color: Color, DefaultColor.DEFAULT or None

    Returns:
        True if the pairing is valid
    """
    if color is None:
        return morph is None

    if color is DefaultColor.DEFAULT:
        return True

    if morph is None:
        return True

    return color in MORPH_PALETTES[morph]
