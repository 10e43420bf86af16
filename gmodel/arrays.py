from __future__ import annotations
import logging
from typing import Any, List, Sequence, Tuple

import numpy as np
from scipy import sparse
from scipy.sparse import csgraph

from .geom import PointHandle
from .model import Model

logger = logging.getLogger(__name__)


def to_arrays(model: Model) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Пласке представлення моделі:
      handles  — int64[N], хендли точок за зростанням;
      coords   — int64[N, 4], (x, y, z, w) у тому ж порядку;
      segments — int64[M, 2], індекси рядків coords для кожної лінії.
    Лінії з неіснуючим кінцем пропускаються.
    """
    handles = np.fromiter(model.points.keys(), dtype=np.int64, count=len(model.points))
    coords = np.array([p.coords for p in model.points.values()], dtype=np.int64).reshape(-1, 4)
    row = {h: i for i, h in enumerate(model.points)}

    segs: List[Tuple[int, int]] = []
    for lid, line in model.lines.items():
        if line.p1 not in row or line.p2 not in row:
            logger.debug("to_arrays: skipping line %d with dangling endpoint", lid)
            continue
        segs.append((row[line.p1], row[line.p2]))
    segments = np.array(segs, dtype=np.int64).reshape(-1, 2)
    return handles, coords, segments


def adjacency_matrix(model: Model):
    """
    Симетрична N×N матриця (scipy.sparse CSR) у порядку to_arrays:
    (i, j) — кількість ліній між i-ю та j-ю точками. Петля дає 2 на діагоналі.
    """
    _, coords, segments = to_arrays(model)
    n = len(coords)
    rows = np.concatenate([segments[:, 0], segments[:, 1]])
    cols = np.concatenate([segments[:, 1], segments[:, 0]])
    data = np.ones(len(rows), dtype=np.int64)
    # coo -> csr сумує дублікати
    return sparse.coo_matrix((data, (rows, cols)), shape=(n, n)).tocsr()


def connected_components(model: Model) -> List[List[PointHandle]]:
    """Компоненти зв'язності графа точок; кожна — хендли за зростанням."""
    if not model.points:
        return []
    handles, _, _ = to_arrays(model)
    n_comp, labels = csgraph.connected_components(adjacency_matrix(model), directed=False)
    groups: List[List[PointHandle]] = [[] for _ in range(n_comp)]
    for h, lab in zip(handles.tolist(), labels.tolist()):
        groups[lab].append(h)
    # handles зростають, тож кожна група вже відсортована
    groups.sort(key=lambda g: g[0])
    return groups


def build_model(
    points: Sequence[Tuple[int, int, int, int]],
    lines: Sequence[Tuple[int, int]] = (),
    **options: Any,
) -> Model:
    """
    Зібрати Model з готових списків.
    lines — пари індексів у points (з нуля); точка i отримує хендл i+1.
    options передаються у Model (purge_stale, strict_endpoints).
    """
    model = Model(**options)
    handles = [model.add_point(*p) for p in points]
    for i, j in lines:
        model.add_line(handles[i], handles[j])
    return model
