import logging
from typing import NamedTuple

from sidecar_graph.config import TransformerConfig
from sidecar_graph.core.addresses import lambda_arn
from sidecar_graph.core.expressions import Conditional, GetAtt, Join, Ref
from sidecar_graph.core.mapping_template import (
    compound_expression,
    iff,
    obj,
    print_block,
    raw,
    ref,
    string,
)
from sidecar_graph.core.naming import (
    function_config_id,
    function_data_source_id,
    function_iam_role_id,
    function_iam_role_name,
)
from sidecar_graph.core.ports.registry import ResourceRegistry
from sidecar_graph.models import (
    DirectiveArguments,
    FunctionConfiguration,
    IamPolicy,
    IamRole,
    LambdaDataSource,
)

logger = logging.getLogger(__name__)

_POLICY_VERSION = "2012-10-17"
_APPSYNC_PRINCIPAL = "appsync.amazonaws.com"


class FunctionResources(NamedTuple):
    function_config_id: str
    data_source_name: str


class ResourceGraphBuilder:
    """Create the role, data source and function configuration backing one Lambda target.

    Every resource is keyed by ``(name, region)`` and only created when the
    registry does not hold it yet, so several model types pointing at the same
    function share a single set of resources.
    """

    def __init__(self, registry: ResourceRegistry, config: TransformerConfig) -> None:
        self._registry = registry
        self._config = config

    def build(self, arguments: DirectiveArguments) -> FunctionResources:
        name, region = arguments.name, arguments.region

        role_id = function_iam_role_id(name, region)
        if not self._registry.has_resource(role_id):
            self._add(role_id, self._role(name, region))
        else:
            logger.debug("Reusing IAM role %s", role_id)

        data_source_name = function_data_source_id(name, region)
        if not self._registry.has_resource(data_source_name):
            self._add(data_source_name, self._data_source(name, region, role_id, data_source_name))
        else:
            logger.debug("Reusing data source %s", data_source_name)

        config_id = function_config_id(name, region)
        if not self._registry.has_resource(config_id):
            self._add(config_id, self._function_configuration(config_id, data_source_name))
        else:
            logger.debug("Reusing function configuration %s", config_id)

        return FunctionResources(function_config_id=config_id, data_source_name=data_source_name)

    def _add(self, resource_id: str, resource: IamRole | LambdaDataSource | FunctionConfiguration) -> None:
        self._registry.set_resource(resource_id, resource)
        self._registry.map_resource_to_stack(self._config.stack_name, resource_id)
        logger.info("Created %s %s", resource.resource_type, resource_id)

    def _api_id(self) -> GetAtt:
        return GetAtt(logical_id=self._config.api_logical_id, attribute="ApiId")

    def _role(self, name: str, region: str | None) -> IamRole:
        role_name = Conditional(
            condition=self._config.has_env_condition,
            branch_true=Join(
                delimiter="-",
                values=[
                    function_iam_role_name(name, with_env=True),
                    self._api_id(),
                    Ref(logical_id=self._config.env_parameter),
                ],
            ),
            branch_false=Join(
                delimiter="-",
                values=[function_iam_role_name(name, with_env=False), self._api_id()],
            ),
        )
        return IamRole(
            role_name=role_name,
            assume_role_policy_document={
                "Version": _POLICY_VERSION,
                "Statement": [
                    {
                        "Effect": "Allow",
                        "Principal": {"Service": _APPSYNC_PRINCIPAL},
                        "Action": "sts:AssumeRole",
                    }
                ],
            },
            policies=[
                IamPolicy(
                    policy_name="InvokeLambdaFunction",
                    policy_document={
                        "Version": _POLICY_VERSION,
                        "Statement": [
                            {
                                "Effect": "Allow",
                                "Action": ["lambda:InvokeFunction"],
                                "Resource": lambda_arn(name, region, self._config),
                            }
                        ],
                    },
                )
            ],
        )

    def _data_source(self, name: str, region: str | None, role_id: str, data_source_name: str) -> LambdaDataSource:
        return LambdaDataSource(
            api_id=self._api_id(),
            name=data_source_name,
            service_role_arn=GetAtt(logical_id=role_id, attribute="Arn"),
            lambda_function_arn=lambda_arn(name, region, self._config),
            depends_on=[role_id],
        )

    def _function_configuration(self, config_id: str, data_source_name: str) -> FunctionConfiguration:
        version = self._config.function_version
        request_template = print_block(f"Invoke AWS Lambda data source: {data_source_name}")(
            obj(
                {
                    "version": string(version),
                    "operation": string("Invoke"),
                    "payload": obj(
                        {
                            "typeName": string('$ctx.stash.get("typeName")'),
                            "fieldName": string('$ctx.stash.get("fieldName")'),
                            "arguments": ref("util.toJson($ctx.arguments)"),
                            "identity": ref("util.toJson($ctx.identity)"),
                            "source": ref("util.toJson($ctx.source)"),
                            "request": ref("util.toJson($ctx.request)"),
                            "prev": ref("util.toJson($ctx.prev)"),
                        }
                    ),
                }
            )
        )
        response_template = print_block("Handle error or return result")(
            compound_expression(
                [
                    iff(ref("ctx.error"), raw("$util.error($ctx.error.message, $ctx.error.type)")),
                    raw("$util.toJson($ctx.result)"),
                ]
            )
        )
        return FunctionConfiguration(
            api_id=self._api_id(),
            name=config_id,
            data_source_name=data_source_name,
            function_version=version,
            request_mapping_template=request_template,
            response_mapping_template=response_template,
            depends_on=[data_source_name],
        )
