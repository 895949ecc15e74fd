"""Pet records and the helpers used to filter, sort and show them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

NAME_MAX_LENGTH = 19
HEADER = " ID NOMBRE SEXO EDAD-------"


@dataclass
class Pet:
    """A pet: identifier, name, sex ('m' or 'h') and age in years."""

    id: int
    name: str
    sex: str
    age: int

    def __post_init__(self) -> None:
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValueError(f"name longer than {NAME_MAX_LENGTH} characters")
        if len(self.sex) != 1:
            raise ValueError("sex must be a single character")


def format_pet(pet: Pet) -> str:
    """Return one table row for ``pet``."""
    return f"{pet.id}  {pet.name:>10}  {pet.sex} {pet.age}"


def format_pets(pets: Iterable[Pet | None]) -> str:
    """Return a table of pets: a header, one row per pet and a blank line."""
    rows = "".join(f"{format_pet(pet)}\n" for pet in pets if pet is not None)
    return f"{HEADER}\n{rows}\n"


def is_female(pet: Pet) -> bool:
    """Tell whether the pet is female."""
    return pet.sex == "h"


def is_puppy(pet: Pet) -> bool:
    """Tell whether the pet is younger than two years."""
    return pet.age < 2


def compare_by_age(first: Pet, second: Pet) -> int:
    """Three-way comparison of two pets by age."""
    if first.age > second.age:
        return 1
    if first.age < second.age:
        return -1
    return 0