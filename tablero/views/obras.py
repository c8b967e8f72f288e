import logging
from typing import Optional

from .base import ProjectionBase, ProjectionContext, TableProjection, find_column, upper_has

log = logging.getLogger("tablero.views.obras")


def bip_column(columns) -> Optional[str]:
    return find_column(columns, upper_has('BIP', 'CÓDIGO'))


class ObrasProjection(ProjectionBase):
    """Executive columns for construction tracking sheets (DMO-Obras)."""
    branch_name = 'obras'

    def applies(self, ctx: ProjectionContext) -> bool:
        return bip_column(ctx.columns) is not None

    def project(self, ctx: ProjectionContext) -> Optional[TableProjection]:
        cols = ctx.columns
        desired = [
            bip_column(cols),
            find_column(cols, upper_has('NOMBRE'), upper_has('PROYECTO', 'OBRA')),
            find_column(cols, upper_has('MONITOR')),
            find_column(cols, upper_has('SERVICIO'), upper_has('SALUD')),
            find_column(cols, upper_has('AVANCE'), upper_has('FISICO')),
            find_column(cols, upper_has('FECHA'), upper_has('TERMINO', 'TÉRMINO')),
        ]
        picked = [c for c in desired if c]
        if len(picked) < ctx.cfg.min_obras_columns:
            log.debug(f"obras view resolved {picked}; below {ctx.cfg.min_obras_columns}, using all columns")
            return None
        return TableProjection(columns=picked, rows=ctx.rows, branch=self.branch_name)
