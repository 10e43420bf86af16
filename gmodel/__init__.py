"""
gmodel — мінімальна графічна модель: точки в однорідних координатах і лінії між ними.
Точки й лінії зберігаються у словниках за цілими хендлами, перехресні посилання — лише хендли.
"""

__version__ = "0.1.0"

from gmodel.geom import Point, Line, PointHandle, LineHandle
from gmodel.model import Model, ModelError, PointNotFound, LineNotFound
from gmodel.arrays import to_arrays, adjacency_matrix, connected_components, build_model

__all__ = [
    "Point", "Line", "PointHandle", "LineHandle",
    "Model", "ModelError", "PointNotFound", "LineNotFound",
    "to_arrays", "adjacency_matrix", "connected_components", "build_model",
    "__version__",
]
