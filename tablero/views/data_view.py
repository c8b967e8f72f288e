from .base import ProjectionBase, ProjectionContext, TableProjection, find_column, lower_has, upper_has


class DataViewProjection(ProjectionBase):
    """Strict BIP / project / health-service view for the "data" tab."""
    branch_name = 'data'

    def applies(self, ctx: ProjectionContext) -> bool:
        return ctx.view_type == 'data'

    def project(self, ctx: ProjectionContext) -> TableProjection:
        desired = [
            find_column(ctx.columns, upper_has('BIP', 'CÓDIGO')),
            find_column(ctx.columns, lower_has('proyecto', 'obra')),
            find_column(ctx.columns, lower_has('servicio'), lower_has('salud')),
        ]
        cols = [c for c in desired if c]
        if not cols:
            cols = list(ctx.columns)
        return TableProjection(columns=cols, rows=ctx.rows, branch=self.branch_name)
