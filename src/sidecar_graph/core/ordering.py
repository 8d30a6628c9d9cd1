from collections.abc import Mapping

from sidecar_graph.errors import ResourceGraphError
from sidecar_graph.models import Resource


def deployment_order(resources: Mapping[str, Resource]) -> list[str]:
    """Order resource ids so every resource follows the resources it depends on.

    Resources that become ready together keep their registry insertion order.
    """
    for resource_id, resource in resources.items():
        for dependency in resource.depends_on:
            if dependency not in resources:
                raise ResourceGraphError(f"Resource '{resource_id}' depends on unknown resource '{dependency}'.")

    ordered: list[str] = []
    placed: set[str] = set()
    pending = list(resources)
    while pending:
        ready = [rid for rid in pending if all(dep in placed for dep in resources[rid].depends_on)]
        if not ready:
            raise ResourceGraphError(f"Dependency cycle between resources: {', '.join(sorted(pending))}")
        ordered.extend(ready)
        placed.update(ready)
        pending = [rid for rid in pending if rid not in placed]
    return ordered
