"""End-to-end tests for a schema-wide @sidecar pass."""

from typing import Any

from sidecar_graph.config import TransformerConfig
from sidecar_graph.core.ordering import deployment_order
from sidecar_graph.core.transform import run_transform
from sidecar_graph.models import Resolver
from sidecar_graph.registry import InMemoryResourceRegistry


def test_run_transform_skips_types_without_sidecar(registry: InMemoryResourceRegistry, type_factory: Any) -> None:
    types = [
        type_factory("Widget", "model", "sidecar", name="fn"),
        type_factory("Note", "model"),
        type_factory("Gadget", "model", "sidecar", name="other-fn", region="eu-west-1"),
    ]

    resolver_ids = run_transform(registry, types)

    assert len(resolver_ids) == 10
    assert not any("Note" in rid for rid in resolver_ids)
    assert len(registry.resources) == 16
    assert "OtherfnEuwest1LambdaDataSource" in registry.resources


def test_all_resources_land_in_the_configured_stack(
    registry: InMemoryResourceRegistry, type_factory: Any
) -> None:
    config = TransformerConfig(stack_name="SidecarStack")
    run_transform(
        registry,
        [
            type_factory("Widget", "model", "sidecar", name="shared-fn"),
            type_factory("Gadget", "model", "sidecar", name="shared-fn"),
        ],
        config,
    )

    stack_members = registry.resources_in_stack("SidecarStack")
    assert stack_members == list(registry.resources)
    assert len(stack_members) == 13

    order = deployment_order(registry.resources)
    function_position = order.index("InvokeSharedfnLambdaDataSource")
    for rid, resource in registry.resources.items():
        if isinstance(resource, Resolver):
            assert resource.depends_on == ["InvokeSharedfnLambdaDataSource"]
            assert order.index(rid) > function_position


def test_rendered_env_aware_role(registry: InMemoryResourceRegistry, type_factory: Any) -> None:
    run_transform(registry, [type_factory("Widget", "model", "sidecar", name="myFn-${env}")])

    role = registry.resources["MyFnLambdaDataSourceRole"].to_cfn()
    role_name = role["Properties"]["RoleName"]["Fn::If"]
    assert role_name[0] == "HasEnvironmentParameter"
    assert role_name[1]["Fn::Join"][1][1:] == [{"Fn::GetAtt": ["GraphQLAPI", "ApiId"]}, {"Ref": "env"}]
    assert role_name[2]["Fn::Join"][1][1:] == [{"Fn::GetAtt": ["GraphQLAPI", "ApiId"]}]

    resource_arn = role["Properties"]["Policies"][0]["PolicyDocument"]["Statement"][0]["Resource"]["Fn::If"]
    assert resource_arn[1] == {
        "Fn::Sub": ["arn:aws:lambda:${AWS::Region}:${AWS::AccountId}:function:myFn-${env}", {"env": {"Ref": "env"}}]
    }
    assert resource_arn[2] == {"Fn::Sub": ["arn:aws:lambda:${AWS::Region}:${AWS::AccountId}:function:myFn", {}]}
