import math
from typing import Optional

# ---------- Domain limits ----------
T_MIN = -40.0     # °C
T_MAX = 60.0      # °C
RH_MIN = 0.0      # %
RH_MAX = 100.0    # %

# Stull (2011) quotes ±1 °C inside this band
ACCURATE_T = (0.0, 50.0)
ACCURATE_RH = (5.0, 99.0)

PLACEHOLDER = "—"


def clamp(value: float, lower: float, upper: float) -> float:
    """Saturate value into [lower, upper]; units are the caller's."""
    return max(lower, min(upper, value))


def _saturate(value: float, lower: float, upper: float) -> Optional[float]:
    """
    Clamp a reading into [lower, upper], or None if it is NaN or infinite.
    Integers too large for a float saturate by sign.
    """
    try:
        if not math.isfinite(value):
            return None
    except OverflowError:
        return upper if value > 0 else lower
    return clamp(value, lower, upper)


def estimate(temperature: float, relative_humidity: float) -> Optional[float]:
    """
    Stull (2011) wet-bulb temperature approximation.
    T in °C, RH in %, returns °C.
    Inputs are clamped to [-40, 60] °C and [0, 100] %.
    Returns None if either input is NaN or infinite.
    """
    t = _saturate(temperature, T_MIN, T_MAX)
    rh = _saturate(relative_humidity, RH_MIN, RH_MAX)
    if t is None or rh is None:
        return None

    # atan terms are curve-fit artifacts, kept in radians
    s = math.sqrt(rh + 8.313659)
    return (
        t * math.atan(0.151977 * s)
        + math.atan(t + rh)
        - math.atan(rh - 1.676331)
        + 0.00391838 * rh ** 1.5 * math.atan(0.023101 * rh)
        - 4.686035
    )


def in_accuracy_band(temperature: float, relative_humidity: float) -> bool:
    """True when the inputs lie where the approximation is good to ±1 °C."""
    try:
        if not (math.isfinite(temperature) and math.isfinite(relative_humidity)):
            return False
    except OverflowError:
        return False
    return (ACCURATE_T[0] <= temperature <= ACCURATE_T[1]
            and ACCURATE_RH[0] <= relative_humidity <= ACCURATE_RH[1])


def format_estimate(value: Optional[float], placeholder: str = PLACEHOLDER) -> str:
    """Wet-bulb °C to one decimal, or the placeholder when undefined."""
    if value is None:
        return placeholder
    rounded = round(value, 1) + 0.0  # -0.0 + 0.0 is 0.0
    return f"{rounded:0.1f}"
