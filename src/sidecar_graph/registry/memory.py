from sidecar_graph.models import Resource


class InMemoryResourceRegistry:
    """Dict-backed resource registry.

    Implements the ``ResourceRegistry`` protocol.
    """

    def __init__(self) -> None:
        self.resources: dict[str, Resource] = {}
        self.stack_mapping: dict[str, str] = {}

    def get_resource(self, resource_id: str) -> Resource | None:
        return self.resources.get(resource_id)

    def set_resource(self, resource_id: str, resource: Resource) -> None:
        self.resources[resource_id] = resource

    def has_resource(self, resource_id: str) -> bool:
        return resource_id in self.resources

    def map_resource_to_stack(self, stack_name: str, resource_id: str) -> None:
        self.stack_mapping[resource_id] = stack_name

    def resources_in_stack(self, stack_name: str) -> list[str]:
        return [resource_id for resource_id, stack in self.stack_mapping.items() if stack == stack_name]
