class SidecarGraphError(Exception):
    """Base class for errors raised while building the sidecar resource graph."""


class InvalidDirectiveError(SidecarGraphError):
    """The @sidecar directive is used on a type that cannot carry it, or with bad arguments.

    Raised before any resource is written to the registry.
    """


class ResourceGraphError(SidecarGraphError):
    """The dependency edges between registered resources do not form a valid DAG."""
