from .base import ProjectionBase, ProjectionContext, TableProjection


class DefaultProjection(ProjectionBase):
    branch_name = 'default'

    def applies(self, ctx: ProjectionContext) -> bool:
        return True

    def project(self, ctx: ProjectionContext) -> TableProjection:
        return TableProjection(columns=list(ctx.columns), rows=ctx.rows, branch=self.branch_name)
