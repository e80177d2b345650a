"""Domain models for canteens and their meals."""

from pydantic import BaseModel, ConfigDict, Field


class Canteen(BaseModel):
    """Canteen as listed in the OpenMensa catalogue."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(ge=0)
    name: str
    city: str
    address: str
    coordinates: tuple[float, float] | None = None


class Prices(BaseModel):
    """Meal prices per price tier."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    students: float | None = None
    employees: float | None = None
    pupils: float | None = None
    others: float | None = None


class Meal(BaseModel):
    """Meal served by a canteen on a given day."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(ge=0)
    name: str
    category: str
    prices: Prices
    notes: list[str] = Field(default_factory=list)
