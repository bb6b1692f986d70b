"""Exception types raised by the ranking engine."""


class DimensionMismatchError(ValueError):
    """Solutions ranked together report different numbers of objectives."""


class CapacityGrowthError(RuntimeError):
    """The sorting workspace could not be grown to serve a request.

    The engine drops its cached sorter when this is raised; the instance
    should be discarded by the caller.
    """
