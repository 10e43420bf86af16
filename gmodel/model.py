# gmodel/model.py
from __future__ import annotations
import logging
from typing import Dict, List, Tuple

from .geom import Line, LineHandle, Point, PointHandle, make_point

logger = logging.getLogger(__name__)


class ModelError(Exception):
    """Базова помилка gmodel."""


class PointNotFound(ModelError, KeyError):
    def __init__(self, handle: PointHandle):
        super().__init__(handle)
        self.handle = handle

    def __str__(self) -> str:
        return f"no point with handle {self.handle}"


class LineNotFound(ModelError, KeyError):
    def __init__(self, handle: LineHandle):
        super().__init__(handle)
        self.handle = handle

    def __str__(self) -> str:
        return f"no line with handle {self.handle}"


class Model:
    """
    Графічна модель: точки та лінії у пласких словниках за хендлами.
      - points: handle -> Point (Point.lines — інцидентні лінії)
      - lines:  handle -> Line (p1, p2 — хендли точок)
    Жодних прямих посилань між об'єктами, лише цілі хендли.
    Хендли не перевикористовуються: лічильники лише зростають.

    purge_stale=False — сумісний режим: del_line/del_point не чистять
    списки інцидентних ліній на інших кінцях (лишаються «застарілі» хендли).
    purge_stale=True — чистимо обидва кінці одразу.
    strict_endpoints=True — add_line з неіснуючою точкою кидає PointNotFound.
    """
    def __init__(self, *, purge_stale: bool = False, strict_endpoints: bool = False):
        self.purge_stale = purge_stale
        self.strict_endpoints = strict_endpoints
        self.points: Dict[PointHandle, Point] = {}
        self.lines: Dict[LineHandle, Line] = {}
        self._last_point: PointHandle = 0  # найбільший виданий хендл
        self._last_line: LineHandle = 0

    def __repr__(self) -> str:
        return f"Model(points={len(self.points)}, lines={len(self.lines)})"

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    # ---------- додавання ----------
    def add_point(self, x: int, y: int, z: int, w: int) -> PointHandle:
        p = make_point(x, y, z, w)
        self._last_point += 1
        self.points[self._last_point] = p
        return self._last_point

    def add_line(self, p1: PointHandle, p2: PointHandle) -> LineHandle:
        if self.strict_endpoints:
            for p in (p1, p2):
                if p not in self.points:
                    raise PointNotFound(p)
        self._last_line += 1
        lid = self._last_line
        self.lines[lid] = Line(p1, p2)
        # петля (p1 == p2) потрапляє у список двічі — по разу на кінець
        for p in (p1, p2):
            pt = self.points.get(p)
            if pt is None:
                logger.warning("line %d references missing point %d", lid, p)
                continue
            pt.lines.append(lid)
        return lid

    # ---------- пошук ----------
    def has_point(self, handle: PointHandle) -> bool:
        return handle in self.points

    def has_line(self, handle: LineHandle) -> bool:
        return handle in self.lines

    def get_point(self, handle: PointHandle) -> Point:
        try:
            return self.points[handle]
        except KeyError:
            raise PointNotFound(handle) from None

    def get_line(self, handle: LineHandle) -> Line:
        try:
            return self.lines[handle]
        except KeyError:
            raise LineNotFound(handle) from None

    def get_point_lines(self, handle: PointHandle) -> List[LineHandle]:
        """Копія списку інцидентних ліній (разом із застарілими хендлами)."""
        return self.get_point(handle).lines[:]

    def incident_lines(self, handle: PointHandle) -> List[LineHandle]:
        """Те саме, що get_point_lines, але лише лінії, які ще існують."""
        return [lid for lid in self.get_point(handle).lines if lid in self.lines]

    def neighbors(self, handle: PointHandle) -> List[PointHandle]:
        """Різні точки, з'єднані з handle живою лінією (порядок — як у списку ліній)."""
        out: List[PointHandle] = []
        seen = set()
        for lid in self.incident_lines(handle):
            q = self.lines[lid].other(handle)
            if q not in seen:
                seen.add(q)
                out.append(q)
        return out

    def line_points(self, handle: LineHandle) -> Tuple[Point, Point]:
        line = self.get_line(handle)
        return self.get_point(line.p1), self.get_point(line.p2)

    # ---------- видалення ----------
    def del_line(self, handle: LineHandle) -> None:
        line = self.lines.pop(handle, None)
        if line is None:
            logger.debug("del_line(%d): no such line", handle)
            return
        if self.purge_stale:
            for p in dict.fromkeys(line):
                self._forget_line(p, handle)

    def del_point(self, handle: PointHandle) -> None:
        """
        Видалити точку разом з усіма лініями зі списку її інцидентних.
        Вже видалений хендл — no-op; ніколи не виданий — PointNotFound.
        """
        if handle not in self.points and 0 < handle <= self._last_point:
            logger.debug("del_point(%d): already deleted", handle)
            return
        pt = self.get_point(handle)
        for lid in pt.lines:
            line = self.lines.pop(lid, None)
            if line is None:
                continue  # застарілий хендл
            if self.purge_stale:
                for q in dict.fromkeys(line):
                    if q != handle:
                        self._forget_line(q, lid)
        logger.debug("del_point(%d): cascaded %d line refs", handle, len(pt.lines))
        del self.points[handle]

    def clear(self) -> None:
        """Прибрати все; лічильники хендлів не скидаються."""
        self.points.clear()
        self.lines.clear()

    # ---------- застарілі хендли ----------
    def _forget_line(self, p: PointHandle, lid: LineHandle) -> None:
        pt = self.points.get(p)
        if pt is not None:
            pt.lines = [other for other in pt.lines if other != lid]

    def drop_stale_refs(self) -> int:
        """Прибрати з усіх точок хендли видалених ліній. Повертає кількість прибраних."""
        dropped = 0
        for pt in self.points.values():
            alive = [lid for lid in pt.lines if lid in self.lines]
            dropped += len(pt.lines) - len(alive)
            pt.lines = alive
        if dropped:
            logger.debug("drop_stale_refs: dropped %d entries", dropped)
        return dropped

    # ---------- валідація ----------
    def validate(self) -> dict:
        """
        Перевірка узгодженості моделі:
          - stale_refs: (точка, лінія) — у списку точки є видалена лінія;
          - dangling_endpoints: (лінія, точка) — кінець лінії не існує;
          - missing_backrefs: (лінія, точка) — точка існує, але не знає про лінію.
        Повертає словник з діагностикою.
        """
        stale_refs: list[tuple[int, int]] = []
        dangling_endpoints: list[tuple[int, int]] = []
        missing_backrefs: list[tuple[int, int]] = []

        for ph, pt in self.points.items():
            for lid in pt.lines:
                if lid not in self.lines:
                    stale_refs.append((ph, lid))

        for lid, line in self.lines.items():
            for p in dict.fromkeys(line):
                pt = self.points.get(p)
                if pt is None:
                    dangling_endpoints.append((lid, p))
                elif lid not in pt.lines:
                    missing_backrefs.append((lid, p))

        return {
            "points_alive": len(self.points),
            "lines_alive": len(self.lines),
            "stale_refs": stale_refs,                  # [(point, line), ...]
            "dangling_endpoints": dangling_endpoints,  # [(line, point), ...]
            "missing_backrefs": missing_backrefs,      # [(line, point), ...]
        }
