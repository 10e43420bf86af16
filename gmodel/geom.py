from __future__ import annotations
from dataclasses import dataclass, field
from operator import index
from typing import Iterator, List, Tuple

PointHandle = int  # ключ у Model.points, починається з 1
LineHandle = int   # ключ у Model.lines, окрема нумерація

@dataclass
class Point:
    """
    Точка в однорідних координатах (x, y, z, w) — цілі зі знаком.
    lines — хендли ліній, що торкаються точки (у порядку додавання).
    """
    x: int
    y: int
    z: int
    w: int
    lines: List[LineHandle] = field(default_factory=list)

    def __iter__(self) -> Iterator[int]:
        yield self.x; yield self.y; yield self.z; yield self.w

    @property
    def coords(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.z, self.w)

@dataclass(frozen=True)
class Line:
    """Відрізок між двома точками; p1, p2 — хендли, порядок має значення."""
    p1: PointHandle
    p2: PointHandle

    def __iter__(self) -> Iterator[PointHandle]:
        yield self.p1; yield self.p2

    def other(self, p: PointHandle) -> PointHandle:
        """Протилежний кінець відносно p."""
        if p == self.p1:
            return self.p2
        if p == self.p2:
            return self.p1
        raise ValueError(f"point {p} is not an endpoint of {self}")

COORD_MIN = -(2 ** 63)   # координати — знакові 64-бітні
COORD_MAX = 2 ** 63 - 1

def _coord(v) -> int:
    c = index(v)
    if not COORD_MIN <= c <= COORD_MAX:
        raise ValueError(f"coordinate {c} out of signed 64-bit range")
    return c

def make_point(x, y, z, w) -> Point:
    """
    Point з перевіркою координат:
      float/str -> TypeError;
      поза [COORD_MIN, COORD_MAX] -> ValueError.
    """
    return Point(_coord(x), _coord(y), _coord(z), _coord(w))
