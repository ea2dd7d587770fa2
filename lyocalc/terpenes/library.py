"""Reference table of volatile terpenes.

Antoine coefficients are fit for pressure in Torr and temperature in deg C:
log10(P) = A - B / (T + C). The values are estimates and should be replaced
with measured data where available. ``group`` is a display classification
used for bulk selection only.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class Terpene:
    """A terpene with its vapour-pressure curve and display metadata."""

    name: str
    a: float
    b: float
    c: float
    color: str
    boiling_point: float  # deg C at 1 atm
    group: str            # "major", "minor" or "other"

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


GROUP_LABELS = {
    "major": "Major Terpenes",
    "minor": "Minor Terpenes",
    "other": "Other Terpenes",
}


TERPENE_LIBRARY = [
    Terpene("alpha-Pinene", 7.35, 1592.864, 209.517, "#4285F4", 156.0, "major"),
    Terpene("Camphene", 7.45, 1750.286, 211.883, "#EA4335", 159.0, "minor"),
    Terpene("beta-Pinene", 7.25, 1602.057, 208.075, "#FBBC05", 166.0, "major"),
    Terpene("3-Carene", 7.11, 1699.125, 202.329, "#34A853", 168.0, "minor"),
    Terpene("beta-Myrcene", 7.28, 1762.463, 212.661, "#9C27B0", 167.0, "major"),
    Terpene("alpha-Terpinene", 7.33, 1790.949, 215.546, "#FF9800", 175.0, "minor"),
    Terpene("D-Limonene", 7.37, 1768.908, 213.559, "#795548", 176.0, "major"),
    Terpene("Eucalyptol", 7.27, 1620.118, 207.554, "#607D8B", 174.0, "minor"),
    Terpene("Z-beta-Ocimene", 7.41, 1823.940, 219.324, "#3F51B5", 176.0, "minor"),
    Terpene("gamma-Terpinene", 7.35, 1806.224, 217.735, "#00BCD4", 183.0, "minor"),
    Terpene("E-beta-Ocimene", 7.38, 1824.562, 219.112, "#009688", 177.0, "minor"),
    Terpene("p-Cymene", 7.42, 1797.011, 216.246, "#8BC34A", 177.0, "other"),
    Terpene("Terpinolene", 7.36, 1851.443, 221.765, "#CDDC39", 185.0, "major"),
    Terpene("(+/-) - Fenchone", 7.18, 1729.198, 205.345, "#FFC107", 193.0, "other"),
    Terpene("Camphor", 7.22, 1750.996, 207.635, "#FF5722", 204.0, "other"),
    Terpene("Linalool", 7.40, 1725.138, 217.633, "#9E9E9E", 198.0, "major"),
    Terpene("Isopulegol", 7.35, 1898.637, 212.465, "#E91E63", 212.0, "other"),
    Terpene("Caryophyllene", 7.41, 2104.412, 211.246, "#673AB7", 268.0, "major"),
    Terpene("Humulene", 7.43, 2140.532, 213.785, "#03A9F4", 276.0, "major"),
    Terpene("Terpineol", 7.37, 1949.687, 223.258, "#4CAF50", 217.0, "minor"),
    Terpene("(+/-) - Borneol", 7.24, 1896.528, 210.346, "#F44336", 213.0, "other"),
    Terpene("Valencene", 7.42, 2132.466, 212.754, "#2196F3", 270.0, "minor"),
    Terpene("Geraniol", 7.38, 1978.211, 217.642, "#FF9800", 229.0, "minor"),
    Terpene("cis-Nerolidol", 7.40, 2217.563, 216.432, "#9C27B0", 276.0, "minor"),
    Terpene("trans-Nerolidol", 7.39, 2219.674, 216.768, "#FF4081", 276.0, "minor"),
    Terpene("Caryophyllene oxide", 7.36, 2187.399, 213.547, "#7C4DFF", 280.0, "other"),
    Terpene("Guaiol", 7.19, 2153.884, 207.932, "#18FFFF", 275.0, "other"),
    Terpene("alpha-Bisabolol", 7.32, 2301.754, 217.648, "#64FFDA", 289.0, "minor"),
]

_BY_NAME = {t.name: t for t in TERPENE_LIBRARY}

# Terpenes shown on first load
DEFAULT_SELECTION = [t.name for t in TERPENE_LIBRARY[:5]]


def get_terpene(name: str) -> Optional[Terpene]:
    """Look up a terpene by name. Returns None if not found."""
    return _BY_NAME.get(name)


def get_terpenes(names: Iterable[str]) -> List[Terpene]:
    """Terpenes for ``names`` in table order; unknown names are skipped."""
    wanted = set(names)
    return [t for t in TERPENE_LIBRARY if t.name in wanted]


def get_terpene_groups() -> Dict[str, List[Terpene]]:
    """Terpenes keyed by group, groups in display order."""
    groups: Dict[str, List[Terpene]] = {g: [] for g in GROUP_LABELS}
    for terpene in TERPENE_LIBRARY:
        groups[terpene.group].append(terpene)
    return groups


def toggle_group_selection(selected: List[str], group: str) -> List[str]:
    """Select every terpene of ``group``, or deselect them if all are selected."""
    members = [t.name for t in get_terpene_groups()[group]]
    if all(name in selected for name in members):
        return [name for name in selected if name not in members]
    return list(selected) + [name for name in members if name not in selected]
