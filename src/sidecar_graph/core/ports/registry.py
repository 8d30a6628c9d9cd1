from typing import Protocol

from sidecar_graph.models import Resource


class ResourceRegistry(Protocol):
    def get_resource(self, resource_id: str) -> Resource | None: ...

    def set_resource(self, resource_id: str, resource: Resource) -> None: ...

    def has_resource(self, resource_id: str) -> bool: ...

    def map_resource_to_stack(self, stack_name: str, resource_id: str) -> None: ...

    def resources_in_stack(self, stack_name: str) -> list[str]: ...
