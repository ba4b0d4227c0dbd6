"""
Campus building directory.

Resolves building names, aliases and free-text questions ("parking near
the library?") to catalogue entries, and ranks parking lots by walking
distance from a building using the path-distance locator.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from .distance import WALKING_SPEED_M_PER_MIN, format_metric, walking_minutes
from .entities import Building, BuildingNotFound, read_coordinates
from .locator import nearest_destinations

# key -> (display name, lat, lng, aliases)
CAMPUS_BUILDINGS: dict[str, tuple[str, float, float, tuple[str, ...]]] = {
    # Academic Buildings - Core Campus
    "library": ("Frank Melville Jr. Memorial Library", 40.9144, -73.1251,
        ("melville library", "main library", "frank melville library", "central library")),
    "student union": ("Student Activities Center (SAC)", 40.9139, -73.1263,
        ("sac", "student activities center", "union", "student center")),
    "administration": ("Administration Building", 40.9156, -73.1245,
        ("admin building", "admin", "administration building")),
    "student health center": ("Student Health Center", 40.9162, -73.1289,
        ("health center", "medical center", "clinic", "student health")),
    "recreation center": ("Campus Recreation Center", 40.9118, -73.1298,
        ("rec center", "gym", "fitness center", "recreation", "campus rec")),

    # STEM Buildings
    "computer science": ("Computer Science Building", 40.9142, -73.1235,
        ("cs building", "comp sci", "computer science building", "cs")),
    "engineering": ("Engineering Building", 40.9138, -73.1228,
        ("engineering building", "eng building", "engineering", "ceas")),
    "physics": ("Physics Building", 40.9151, -73.1241,
        ("physics building", "phys building", "physics", "physics and astronomy")),
    "chemistry": ("Chemistry Building", 40.9148, -73.1238,
        ("chem building", "chemistry building", "chemistry", "chem")),
    "math tower": ("Mathematics Tower", 40.9145, -73.1242,
        ("mathematics tower", "math building", "math", "mathematics")),
    "earth and space sciences": ("Earth and Space Sciences Building", 40.9147, -73.1233,
        ("ess building", "earth space sciences", "geosciences", "ess")),
    "life sciences": ("Life Sciences Building", 40.9152, -73.1239,
        ("life sciences building", "bio building", "biology", "life sci")),
    "psychology a": ("Psychology A Building", 40.9149, -73.1244,
        ("psych a", "psychology a", "psych building a")),
    "psychology b": ("Psychology B Building", 40.9147, -73.1246,
        ("psych b", "psychology b", "psych building b")),

    # Liberal Arts & Humanities
    "humanities": ("Humanities Building", 40.9141, -73.1248,
        ("humanities building", "hum building", "humanities", "hum")),
    "social sciences": ("Social and Behavioral Sciences Building", 40.9143, -73.1255,
        ("sbs building", "social behavioral sciences", "sbs", "social sciences")),
    "fine arts center": ("Staller Center for the Arts", 40.9136, -73.1271,
        ("staller center", "fine arts", "arts center", "staller", "music building")),
    "theatre arts": ("Theatre Arts Building", 40.9134, -73.1268,
        ("theatre building", "theater arts", "drama", "theatre")),

    # Business & Professional Schools
    "business building": ("Harriman Hall (Business)", 40.9153, -73.1258,
        ("harriman hall", "business school", "business", "harriman")),
    "journalism": ("School of Journalism", 40.9140, -73.1252,
        ("journalism building", "journalism school", "journalism")),

    # Medical Campus
    "hospital": ("Stony Brook University Hospital", 40.9201, -73.1289,
        ("university hospital", "medical center", "sbu hospital", "hospital")),
    "health sciences center": ("Health Sciences Center", 40.9195, -73.1285,
        ("hsc", "health sciences", "medical school", "som")),
    "basic science tower": ("Basic Science Tower", 40.9198, -73.1282,
        ("bst", "basic sciences", "medical basic sciences")),
    "clinical center": ("Clinical Center", 40.9203, -73.1291,
        ("clinical", "outpatient clinic")),

    # Residential Areas
    "chapin apartments": ("Chapin Apartments", 40.9089, -73.1245,
        ("chapin", "chapin complex", "chapin apts")),
    "west apartments": ("West Apartments", 40.9098, -73.1312,
        ("west", "west complex", "west apts")),
    "roth quad": ("Roth Quad", 40.9125, -73.1278,
        ("roth", "roth quadrangle", "roth residence")),
    "tabler quad": ("Tabler Quad", 40.9108, -73.1265,
        ("tabler", "tabler quadrangle", "tabler residence")),
    "kelly quad": ("Kelly Quad", 40.9095, -73.1285,
        ("kelly", "kelly quadrangle", "kelly residence")),
    "mendelsohn quad": ("Mendelsohn Quad", 40.9112, -73.1295,
        ("mendelsohn", "mendy", "mendelsohn residence")),
    "roosevelt quad": ("Roosevelt Quad", 40.9102, -73.1275,
        ("roosevelt", "roosevelt residence", "fdr")),
    "hand college": ("Hand College", 40.9115, -73.1282,
        ("hand", "hand residence")),
    "toscanini college": ("Toscanini College", 40.9118, -73.1285,
        ("toscanini", "toscanini residence", "tosc")),

    # Athletic Facilities
    "seawolves sports complex": ("Kenneth P. LaValle Stadium", 40.9088, -73.1298,
        ("lavalle stadium", "football stadium", "stadium", "seawolves stadium")),
    "pritchard gymnasium": ("Pritchard Gymnasium", 40.9115, -73.1301,
        ("pritchard gym", "basketball arena", "pritchard")),
    "indoor sports complex": ("Indoor Sports Complex", 40.9092, -73.1305,
        ("indoor sports", "sports complex", "indoor athletics")),

    # Support Buildings
    "central hall": ("Central Hall", 40.9146, -73.1249,
        ("central", "central building")),
    "old chemistry": ("Old Chemistry Building", 40.9144, -73.1235,
        ("old chem", "old chemistry building")),
    "graduate chemistry": ("Graduate Chemistry Building", 40.9150, -73.1236,
        ("grad chem", "graduate chemistry")),
    "heavy engineering": ("Heavy Engineering Building", 40.9135, -73.1225,
        ("heavy eng", "heavy engineering")),
    "light engineering": ("Light Engineering Building", 40.9140, -73.1230,
        ("light eng", "light engineering")),
    "engineering drive": ("Engineering Drive Building", 40.9136, -73.1232,
        ("eng drive", "engineering drive")),

    # Research Buildings
    "centers for molecular medicine": ("Centers for Molecular Medicine", 40.9205, -73.1278,
        ("cmm", "molecular medicine", "research building")),
    "laufer center": ("Laufer Center for Physical and Quantitative Biology", 40.9158, -73.1228,
        ("laufer", "laufer center", "quantitative biology")),
    "simons center": ("Simons Center for Geometry and Physics", 40.9160, -73.1235,
        ("simons", "simons center", "geometry physics")),

    # Dining & Services
    "east side dining": ("East Side Dining", 40.9108, -73.1268,
        ("east side", "esd", "dining hall east")),
    "west side dining": ("West Side Dining", 40.9105, -73.1295,
        ("west side", "wsd", "dining hall west")),
    "campus bookstore": ("Campus Bookstore", 40.9138, -73.1265,
        ("bookstore", "campus store", "student bookstore")),
    "postal services": ("Campus Postal Services", 40.9141, -73.1260,
        ("post office", "mail services", "postal")),
}

_MESSAGE_PATTERNS = [
    re.compile(r"(?:near|close to|by|at|in|parking (?:for|near)) (.+?)(?:\?|$|\.)"),
    re.compile(r"(?:going to|headed to|visiting) (.+?)(?:\?|$|\.)"),
    re.compile(r"(.+?) (?:building|center|library|quad|apartments?)(?:\?|$|\.)"),
]


class BuildingDirectory:
    """Lookup and lot ranking over a fixed building catalogue."""

    def __init__(self, buildings: Optional[Iterable[Building]] = None):
        if buildings is None:
            buildings = (
                Building(key, name, lat, lng, aliases)
                for key, (name, lat, lng, aliases) in CAMPUS_BUILDINGS.items()
            )
        self._buildings: dict[str, Building] = {b.key: b for b in buildings}

    def list_buildings(self) -> list[Building]:
        return list(self._buildings.values())

    def find_building(self, name: str) -> Optional[Building]:
        """
        Exact key match first, then the first building with an alias that
        contains, or is contained in, the search text.
        """
        search = name.lower().strip()
        if not search:
            return None
        if search in self._buildings:
            return self._buildings[search]
        for building in self._buildings.values():
            if any(alias in search or search in alias for alias in building.aliases):
                return building
        return None

    def extract_building_from_message(self, message: str) -> Optional[Building]:
        text = message.lower()
        for pattern in _MESSAGE_PATTERNS:
            match = pattern.search(text)
            if match:
                building = self.find_building(match.group(1))
                if building:
                    return building

        for building in self._buildings.values():
            if building.key in text or any(alias in text for alias in building.aliases):
                return building
        return None

    def closest_lots(
        self,
        name: str,
        lots: Iterable[Mapping[str, Any]],
        max_results: int = 3,
        meters_per_minute: float = WALKING_SPEED_M_PER_MIN,
        **options: Any,
    ) -> tuple[Building, list[dict[str, Any]]]:
        """
        Rank *lots* by path distance from the named building.

        Lots without usable coordinates are skipped.  Each returned lot also
        carries ``walkingTimeMinutes`` and ``metricDistance``.
        """
        building = self.find_building(name)
        if building is None:
            raise BuildingNotFound(name)

        usable = [lot for lot in lots if _has_coordinates(lot)]
        ranked = nearest_destinations(
            list(building.coordinates), usable, limit=max_results, **options
        )
        for lot in ranked:
            km = lot["calculatedDistance"]
            lot["walkingTimeMinutes"] = walking_minutes(km, meters_per_minute)
            lot["metricDistance"] = format_metric(km * 1000)
        return building, ranked


def _has_coordinates(lot: Mapping[str, Any]) -> bool:
    lat, lng = read_coordinates(lot)
    return not (math.isnan(lat) or math.isnan(lng))
