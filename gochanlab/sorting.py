"""Sorting people with interchangeable ordering functions."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable


@dataclass
class Person:
    name: str
    age: int

    def __str__(self) -> str:
        return f"{{{self.name} {self.age}}}"


Less = Callable[[Person, Person], bool]


class By:
    """An ordering given by a "less than" function."""

    def __init__(self, less: Less) -> None:
        self.less = less

    def _compare(self, p1: Person, p2: Person) -> int:
        if self.less(p1, p2):
            return -1
        if self.less(p2, p1):
            return 1
        return 0

    def sort(self, people: list[Person]) -> None:
        """Sort ``people`` in place."""
        people.sort(key=functools.cmp_to_key(self._compare))


def by_age(p1: Person, p2: Person) -> bool:
    return p1.age < p2.age


def by_name(p1: Person, p2: Person) -> bool:
    return p1.name < p2.name


def _format(people: list[Person]) -> str:
    return "[" + " ".join(str(p) for p in people) + "]"


def sorting_demo() -> tuple[list[Person], list[Person]]:
    """Sort a sample list by age, then by name; return both orderings."""
    people = [Person("Alice", 30), Person("Bob", 25), Person("Charlie", 35)]
    By(by_age).sort(people)
    print("Sorting by age:", _format(people))
    aged = list(people)
    By(by_name).sort(people)
    print("Sorting by name:", _format(people))
    return aged, list(people)