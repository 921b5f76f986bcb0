"""Sample classes that the schema generator is tested with."""

from __future__ import annotations

import ctypes
import enum
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import InitVar, dataclass, field
from typing import Any, ClassVar, NamedTuple


class Color(enum.Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


class Status(enum.Enum):
    ACTIVE = 10
    RETIRED = 20
    ENABLED = 10


class Mood(enum.Enum):
    HAPPY = enum.auto()
    SAD = enum.auto()

    def describe(self, prefix: str) -> str:
        return f"{prefix} {self.name.lower()}"


class Point(NamedTuple):
    x: int
    y: int

    def shifted(self, dx: int) -> Point:
        return self._replace(x=self.x + dx)


class Address:
    street: str
    number: int


class Tag:
    label: str


class Score:
    points: float
    color: Color


class Note:
    text: str


class Person:
    name: str
    age: int
    favorite: Color
    address: Address
    tags: list[Tag]
    scores: dict[str, Score]
    counts: tuple[int, ...]
    cache: ClassVar[int]
    friends: set[Person]

    def greet(self, other: Person, times: int) -> str:
        return f"Hello {other.name}" * times

    def ping(self) -> None:
        pass

    @staticmethod
    def merge(first: Address, extras: tuple[Tag, ...], note: Note) -> None:
        pass


class Scalars:
    flag: bool
    count: int
    ratio: float
    payload: bytes
    text: str
    small: ctypes.c_int32
    big: ctypes.c_int64
    single: ctypes.c_float
    wide: ctypes.c_double
    octet: ctypes.c_byte


@dataclass
class Skipping:
    a: ClassVar[int] = 0
    b: str = ""
    c: str = field(default="", metadata={"transient": True})
    d: int = 0


@dataclass
class Credentials:
    user: str
    password: InitVar[str]
    token: str = ""

    def __post_init__(self, password: str):
        self.token = password[::-1]


class Shape(ABC):
    name: str
    area: float

    @property
    @abstractmethod
    def area(self) -> float: ...


class Scoreboard:
    scores: dict[str, int]


class Histogram:
    counts: tuple[int, ...]


class Palette:
    primary: Color
    colors: list[Color]


class Ranking:
    states: Sequence[Status]


class Node:
    value: int
    next: Node | None
    children: list[Node]


class Parent:
    child: Child


class Child:
    parent: Parent
    siblings: tuple[Child, ...]


class Graph:
    nodes: dict[str, Vertex]


class Vertex:
    graph: Graph
    neighbours: frozenset[Vertex]
    labels: Sequence[Tag]


class Outer:
    class Inner:
        value: int

    inner: Outer.Inner


class Service:
    @classmethod
    def create(cls, name: str, *tags: Tag, **options: int) -> Service:
        return cls()

    def untyped(self, value):
        return value


class RawList:
    items: list


class RawDict:
    values: dict


class NestedGeneric:
    rows: list[dict[str, int]]


class Pair:
    both: tuple[int, str]


class EitherOr:
    value: int | str


class Anything:
    value: Any


class RawValueMap:
    rows: dict[str, list]


class RawElementList:
    rows: list[dict]


class RawComponentArray:
    rows: tuple[set, ...]
