"""
models/country.py
-----------------
The fixed set of countries offered in the country picker, mapped to the
query string sent to the news provider.
"""

from types import MappingProxyType
from typing import Mapping, Optional


class CountrySelection:
    """
    Read-only mapping from display name to provider query code.

    Names are matched case-sensitively: "USA" resolves, "usa" does not.
    """

    def __init__(self, countries: Mapping[str, str]):
        self._countries = MappingProxyType(dict(countries))

    def resolve(self, name: str) -> Optional[str]:
        """Return the query code for a display name, or None if unknown."""
        return self._countries.get(name)

    def names(self) -> list[str]:
        """Display names in picker order."""
        return list(self._countries)

    def __contains__(self, name: object) -> bool:
        return name in self._countries

    def __len__(self) -> int:
        return len(self._countries)


DEFAULT_COUNTRIES = CountrySelection({
    "Romania": "romania",
    "Moldova": "moldova",
    "USA": "us",
    "Ukraine": "ukraine",
    "Germany": "germany",
    "Russia": "russia",
})
