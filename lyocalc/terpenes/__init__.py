from lyocalc.terpenes.library import (
    DEFAULT_SELECTION,
    GROUP_LABELS,
    TERPENE_LIBRARY,
    Terpene,
    get_terpene,
    get_terpene_groups,
)
from lyocalc.terpenes.boiling import (
    InvalidPressureError,
    boiling_point_at_mbar,
    boiling_points_at,
    calculate_boiling_point,
)

__all__ = [
    "DEFAULT_SELECTION",
    "GROUP_LABELS",
    "TERPENE_LIBRARY",
    "Terpene",
    "get_terpene",
    "get_terpene_groups",
    "InvalidPressureError",
    "boiling_point_at_mbar",
    "boiling_points_at",
    "calculate_boiling_point",
]
