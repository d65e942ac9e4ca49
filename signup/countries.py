import json
from pathlib import Path
from typing import Any, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


CountryCities = Tuple[Tuple[str, Tuple[str, ...]], ...]

DEFAULT_COUNTRY_CITIES: CountryCities = (
    (
        "India",
        (
            "Delhi",
            "Mumbai",
            "Bangalore",
            "Chennai",
            "Kolkata",
            "Hyderabad",
            "Ahmedabad",
            "Pune",
            "Jaipur",
            "Lucknow",
        ),
    ),
    ("Canada", ("Toronto", "Vancouver", "Montreal")),
    ("Australia", ("Sydney", "Melbourne", "Brisbane")),
    ("Germany", ("Berlin", "Munich", "Frankfurt")),
    ("France", ("Paris", "Lyon", "Marseille")),
    ("Japan", ("Tokyo", "Osaka", "Kyoto")),
    ("Brazil", ("Sao Paulo", "Rio de Janeiro", "Salvador")),
    ("USA", ("New York", "Los Angeles", "Chicago")),
    ("UK", ("London", "Manchester", "Birmingham")),
)


class CountryCityTable(BaseModel):
    """
    Country -> ordered city names, stored as (country, cities) pairs so the
    table cannot be edited after construction. Pair order is the display
    order. Accepts a mapping on input.
    """

    model_config = ConfigDict(frozen=True)

    cities: CountryCities = DEFAULT_COUNTRY_CITIES

    @field_validator("cities", mode="before")
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    def countries(self) -> Tuple[str, ...]:
        return tuple(country for country, _ in self.cities)

    def cities_for(self, country: str) -> Tuple[str, ...]:
        for name, cities in self.cities:
            if name == country:
                return cities
        return ()

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "CountryCityTable":
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, Mapping):
            raise ValueError(f"Invalid country table in {path}: expected a JSON object")
        try:
            return cls(cities=raw)
        except ValidationError as e:
            raise ValueError(f"Invalid country table in {path}: {e}") from e
