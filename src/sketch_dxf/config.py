"""DXF output constants.

References:
- AutoCAD R12 DXF reference (AC1009 group codes)
- Group codes: 0 entity type, 8 layer, 10/20 X/Y, 62 color, 1000 extended data

All lengths are written in the unit chosen for the serialization pass.
"""
from enum import Enum


class UnitSystem(Enum):
    """Unit system selectable for a serialization pass."""
    METRIC = "metric"        # meters
    IMPERIAL = "imperial"    # feet


# ── Document ─────────────────────────────────────────────────────────
ACAD_VERSION = "AC1009"                     # R12
VENDOR_COMMENT = "Design created by Aurora"
LINE_TERMINATOR = "\r\n"                    # Required on every platform
DXF_ENCODING = "cp1252"                     # ANSI_1252, the R12 default codepage

# ── Entities ─────────────────────────────────────────────────────────
DEFAULT_LAYER = "1"
TEXT_STYLE = "NewTextStyle_4"
TEXT_SUBCLASS = "AcDbText"
HATCH_SUBCLASS = "AcDbHatch"

# Hatch boundary: solid flag 0, one loop, polyline path type 2
HATCH_SOLID_FILL = 0
HATCH_LOOP_COUNT = 1
HATCH_PATH_TYPE = 2

# ── Tables ───────────────────────────────────────────────────────────
DASHED_LINETYPE = "DASHED"
LAYER_COLOR = 7                 # White/black
LAYER_LINETYPE = "CONTINUOUS"

# ── Number formatting ────────────────────────────────────────────────
DEFAULT_PRECISION = 6           # Significant digits, same as %g
DEFAULT_UNITS = UnitSystem.METRIC
ZERO_TOLERANCE = 1e-9           # Smaller magnitudes are written as 0
