from sidecar_graph.registry.memory import InMemoryResourceRegistry

__all__ = [
    "InMemoryResourceRegistry",
]
