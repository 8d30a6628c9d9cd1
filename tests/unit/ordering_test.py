"""Unit tests for dependency-based resource ordering."""

from typing import Any

import pytest

from sidecar_graph.core.ordering import deployment_order
from sidecar_graph.core.transform import run_transform
from sidecar_graph.errors import ResourceGraphError
from sidecar_graph.models import Resolver
from sidecar_graph.registry import InMemoryResourceRegistry


def _resolver(field_name: str, depends_on: list[str]) -> Resolver:
    return Resolver(
        api_id="api",
        type_name="Query",
        field_name=field_name,
        data_source_name="ds",
        request_mapping_template="{}",
        response_mapping_template="{}",
        depends_on=depends_on,
    )


def test_role_precedes_data_source_function_and_resolvers(
    registry: InMemoryResourceRegistry, type_factory: Any
) -> None:
    run_transform(registry, [type_factory("Widget", "model", "sidecar", name="fn")])

    order = deployment_order(registry.resources)

    position = {rid: i for i, rid in enumerate(order)}
    assert position["FnLambdaDataSourceRole"] < position["FnLambdaDataSource"]
    assert position["FnLambdaDataSource"] < position["InvokeFnLambdaDataSource"]
    resolver_positions = [position[rid] for rid in order if rid.endswith("SidecarResolver")]
    assert len(resolver_positions) == 5
    assert min(resolver_positions) > position["InvokeFnLambdaDataSource"]


def test_independent_resources_keep_insertion_order() -> None:
    resources = {"b": _resolver("b", []), "a": _resolver("a", []), "c": _resolver("c", ["a"])}
    assert deployment_order(resources) == ["b", "a", "c"]


def test_dependency_inserted_after_dependent_is_moved_first() -> None:
    resources = {"child": _resolver("child", ["parent"]), "parent": _resolver("parent", [])}
    assert deployment_order(resources) == ["parent", "child"]


def test_unknown_dependency_raises() -> None:
    with pytest.raises(ResourceGraphError, match="unknown resource 'missing'"):
        deployment_order({"a": _resolver("a", ["missing"])})


def test_cycle_raises() -> None:
    with pytest.raises(ResourceGraphError, match="cycle"):
        deployment_order({"a": _resolver("a", ["b"]), "b": _resolver("b", ["a"])})
