"""
Closed registry of NFL franchise codes.

Pro Football Reference identifies franchises by three-letter codes that
follow the franchise rather than the city ("HTX" for Houston, "RAI" for the
Raiders, "SDG" for the Chargers). Betting sites list teams by nickname. This
module maps nicknames onto those codes and gives each code a stable ordinal,
so an opponent can be stored inside a numeric team vector.

Ordinal 0 is reserved for the BYE sentinel.
"""

from __future__ import annotations

import html
import re
from enum import IntEnum
from typing import Dict, List, Optional


class TeamCode(IntEnum):
    """Franchise codes with their stored ordinals."""

    BYE = 0
    HTX = 1
    NWE = 2
    CIN = 3
    DEN = 4
    OTI = 5
    RAI = 6
    CRD = 7
    BUF = 8
    RAV = 9
    JAX = 10
    MIA = 11
    CLE = 12
    NYG = 13
    WAS = 14
    GNB = 15
    DET = 16
    CAR = 17
    MIN = 18
    SEA = 19
    SFO = 20
    TAM = 21
    RAM = 22
    PIT = 23
    PHI = 24
    KAN = 25
    NYJ = 26
    CLT = 27
    SDG = 28
    DAL = 29
    CHI = 30
    NOR = 31
    ATL = 32


BYE = TeamCode.BYE.name

# ---------------------------------------------------------------------------
# Alias table: franchise code -> known names.
# The first entry is the nickname used by the betting sites.
# ---------------------------------------------------------------------------

_ALIAS_TABLE: Dict[str, List[str]] = {
    "HTX": ["Texans", "Houston Texans", "HOU"],
    "NWE": ["Patriots", "New England Patriots", "NE"],
    "CIN": ["Bengals", "Cincinnati Bengals"],
    "DEN": ["Broncos", "Denver Broncos"],
    "OTI": ["Titans", "Tennessee Titans", "TEN"],
    "RAI": ["Raiders", "Oakland Raiders", "Las Vegas Raiders", "LV", "OAK"],
    "CRD": ["Cardinals", "Arizona Cardinals", "ARI"],
    "BUF": ["Bills", "Buffalo Bills"],
    "RAV": ["Ravens", "Baltimore Ravens", "BAL"],
    "JAX": ["Jaguars", "Jacksonville Jaguars"],
    "MIA": ["Dolphins", "Miami Dolphins"],
    "CLE": ["Browns", "Cleveland Browns"],
    "NYG": ["Giants", "New York Giants"],
    "WAS": ["Redskins", "Washington Redskins", "Commanders", "Washington Commanders",
            "Football Team", "Washington Football Team"],
    "GNB": ["Packers", "Green Bay Packers", "GB"],
    "DET": ["Lions", "Detroit Lions"],
    "CAR": ["Panthers", "Carolina Panthers"],
    "MIN": ["Vikings", "Minnesota Vikings"],
    "SEA": ["Seahawks", "Seattle Seahawks"],
    "SFO": ["49ers", "San Francisco 49ers", "SF"],
    "TAM": ["Buccaneers", "Tampa Bay Buccaneers", "Bucs", "TB"],
    "RAM": ["Rams", "St. Louis Rams", "Los Angeles Rams", "LAR", "STL"],
    "PIT": ["Steelers", "Pittsburgh Steelers"],
    "PHI": ["Eagles", "Philadelphia Eagles"],
    "KAN": ["Chiefs", "Kansas City Chiefs", "KC"],
    "NYJ": ["Jets", "New York Jets"],
    "CLT": ["Colts", "Indianapolis Colts", "IND"],
    "SDG": ["Chargers", "San Diego Chargers", "Los Angeles Chargers", "LAC", "SD"],
    "DAL": ["Cowboys", "Dallas Cowboys"],
    "CHI": ["Bears", "Chicago Bears"],
    "NOR": ["Saints", "New Orleans Saints", "NO"],
    "ATL": ["Falcons", "Atlanta Falcons"],
}


def _normalize_str(s: str) -> str:
    """Normalize a string for matching: uppercase, decode HTML, collapse whitespace."""
    s = html.unescape(s)
    s = s.upper().strip()
    s = re.sub(r"[^A-Z0-9 ]", " ", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s


_NAME_TO_CODE: Dict[str, str] = {}
for _code, _aliases in _ALIAS_TABLE.items():
    _NAME_TO_CODE[_code] = _code
    for _alias in _aliases:
        _NAME_TO_CODE[_normalize_str(_alias)] = _code


def abbreviation_for(name: str) -> Optional[str]:
    """
    Resolve a team name to its franchise code.

    Accepts codes, nicknames ("PACKERS", "49ers") and full names
    ("Green Bay Packers"). A full name that is not in the table falls back to
    its last word, which is the nickname.

    Args:
        name: Team name from any source

    Returns:
        Franchise code, or None when the name is not recognized
    """
    if not name or not name.strip():
        return None
    norm = _normalize_str(name)
    if norm == BYE:
        return BYE
    if norm in _NAME_TO_CODE:
        return _NAME_TO_CODE[norm]
    tokens = norm.split()
    if len(tokens) > 1 and tokens[-1] in _NAME_TO_CODE:
        return _NAME_TO_CODE[tokens[-1]]
    return None


def code_for(abbreviation: str) -> int:
    """Ordinal stored for a franchise code. Raises KeyError outside the registry."""
    return int(TeamCode[abbreviation.upper()])


def name_for(ordinal: float) -> str:
    """Franchise code for a stored ordinal. Raises KeyError outside the registry."""
    try:
        return TeamCode(int(ordinal)).name
    except ValueError:
        raise KeyError(ordinal) from None
