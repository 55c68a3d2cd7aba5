"""
Configuration file for the line-container library.

Contains both INTEGER and FLOAT parameter sets for the two numeric domains.
Modules should read values using the get_active_params() function.
"""

import math
import operator

from utils.geometry import floor_div, true_div

# ---------------------------------------------------------------
# DOMAIN SELECTION
# ---------------------------------------------------------------

# Domain used when a container is created without an explicit one
DEFAULT_DOMAIN = "integer"


# ===============================================================
# INTEGER-DOMAIN PARAMETERS
# ===============================================================

INTEGER = {
    "DOMAIN": "integer",
    "DIVISION": "floor",
}


# ===============================================================
# FLOAT-DOMAIN PARAMETERS
# ===============================================================

FLOAT = {
    "DOMAIN": "float",
    "DIVISION": "true",
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both domains)
# ---------------------------------------------------------------

# Breakpoint sentinels. Floats compare exactly against Python ints of any
# size, so a computed integer breakpoint can never collide with them.
POSITIVE_INFINITY = math.inf
NEGATIVE_INFINITY = -math.inf


# ---------------------------------------------------------------
# VISUALIZATION
# ---------------------------------------------------------------

CANVAS_SIZE = (480, 640)            # (height, width)
CANVAS_MARGIN = 0.05                # fraction of the y-range added on each side

COLOR_ENVELOPE = (0, 255, 0)        # upper envelope - green
COLOR_LINE = (90, 90, 90)           # candidate lines - grey
COLOR_AXIS = (255, 255, 255)        # x/y axes - white

LINE_THICKNESS = 1
ENVELOPE_THICKNESS = 2


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

_DIVIDERS = {
    "floor": floor_div,
    "true": true_div,
}

_COERCERS = {
    "integer": operator.index,
    "float": float,
}


def get_active_params(domain=None):
    """
    Returns the parameter set for one numeric domain:
    - A combination of SHARED + domain-specific constants.
    - Resolves DIVIDE (the breakpoint division) and COERCE (input conversion).

    Raises ValueError for an unknown domain name.
    """
    if domain is None:
        domain = DEFAULT_DOMAIN

    base = {
        "POSITIVE_INFINITY": POSITIVE_INFINITY,
        "NEGATIVE_INFINITY": NEGATIVE_INFINITY,
    }

    match domain:
        case "integer":
            base.update(INTEGER)
        case "float":
            base.update(FLOAT)
        case _:
            raise ValueError(f"unknown numeric domain: {domain!r}")

    base["DIVIDE"] = _DIVIDERS[base["DIVISION"]]
    base["COERCE"] = _COERCERS[base["DOMAIN"]]

    return base
