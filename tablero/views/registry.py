from typing import List

from .base import ProjectionBase, ProjectionContext, TableProjection
from .data_view import DataViewProjection
from .default import DefaultProjection
from .hospital import HospitalReportProjection
from .obras import ObrasProjection

# evaluated in order; first branch that applies and yields a projection wins
_REGISTRY: List[ProjectionBase] = []


def register(projection_cls):
    _REGISTRY.append(projection_cls())
    return projection_cls


def projections() -> List[ProjectionBase]:
    return list(_REGISTRY)


def select_projection(ctx: ProjectionContext) -> TableProjection:
    for p in _REGISTRY:
        if not p.applies(ctx):
            continue
        out = p.project(ctx)
        if out is not None:
            return out
    return DefaultProjection().project(ctx)


register(DataViewProjection)
register(HospitalReportProjection)
register(ObrasProjection)
register(DefaultProjection)
