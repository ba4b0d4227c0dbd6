"""
Distance calculation using the Haversine formula.

Assumption
----------
We use great-circle (Haversine) distance as both the edge weight of the
proximity graph and the fallback metric.  Walking paths on campus are not
modelled; a real footpath network would replace this module.

Complexity: O(1) per call.
"""

import math

EARTH_RADIUS_KM = 6_371.0
KM_TO_MILES = 0.621371
WALKING_SPEED_M_PER_MIN = 80


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def km_to_miles(km: float) -> float:
    return km * KM_TO_MILES


def format_miles(km: float, direct: bool = False) -> str:
    """``"1.9 miles"``, or ``"1.9 miles (direct)"`` for a straight-line value."""
    text = f"{km_to_miles(km):.1f} miles"
    if direct:
        text += " (direct)"
    return text


def format_metric(meters: float) -> str:
    """Short display form: ``"420m"`` below one kilometre, ``"1.3km"`` above."""
    if meters < 1000:
        return f"{round(meters)}m"
    return f"{meters / 1000:.1f}km"


def walking_minutes(
    km: float, meters_per_minute: float = WALKING_SPEED_M_PER_MIN
) -> int:
    return math.ceil(km * 1000 / meters_per_minute)
