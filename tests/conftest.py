"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from sidecar_graph.config import TransformerConfig
from sidecar_graph.models import AnnotatedType, Directive, Resource
from sidecar_graph.registry import InMemoryResourceRegistry

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# RecordingRegistry — counts every write made against the registry
# ---------------------------------------------------------------------------


class RecordingRegistry(InMemoryResourceRegistry):
    def __init__(self) -> None:
        super().__init__()
        self.writes: list[tuple[str, str]] = []

    def set_resource(self, resource_id: str, resource: Resource) -> None:
        self.writes.append(("set_resource", resource_id))
        super().set_resource(resource_id, resource)

    def map_resource_to_stack(self, stack_name: str, resource_id: str) -> None:
        self.writes.append(("map_resource_to_stack", resource_id))
        super().map_resource_to_stack(stack_name, resource_id)


def make_type(type_name: str, *directive_names: str, **sidecar_arguments: Any) -> AnnotatedType:
    """Build an annotated type carrying ``directive_names``; ``sidecar`` gets ``sidecar_arguments``."""
    directives = [
        Directive(name=d, arguments=sidecar_arguments if d == "sidecar" else {}) for d in directive_names
    ]
    return AnnotatedType(name=type_name, directives=directives)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> TransformerConfig:
    return TransformerConfig()


@pytest.fixture
def registry() -> InMemoryResourceRegistry:
    return InMemoryResourceRegistry()


@pytest.fixture
def recording_registry() -> RecordingRegistry:
    return RecordingRegistry()


@pytest.fixture
def type_factory() -> Any:
    return make_type
