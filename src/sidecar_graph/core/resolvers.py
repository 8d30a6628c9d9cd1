import logging
from typing import Literal

from sidecar_graph.config import TransformerConfig
from sidecar_graph.core.expressions import GetAtt
from sidecar_graph.core.graph import FunctionResources
from sidecar_graph.core.mapping_template import compound_expression, obj, print_block, qref
from sidecar_graph.core.naming import resolver_id
from sidecar_graph.core.ports.registry import ResourceRegistry
from sidecar_graph.models import Resolver

logger = logging.getLogger(__name__)

OperationType = Literal["Query", "Mutation"]


class ResolverAttacher:
    def __init__(self, registry: ResourceRegistry, config: TransformerConfig) -> None:
        self._registry = registry
        self._config = config

    def attach(self, resources: FunctionResources, type_name: OperationType, field_name: str) -> str:
        """Register a unit resolver for ``type_name.field_name`` that calls the shared Lambda.

        The resolver stashes its own type and field name so the function
        configuration can forward them in the Lambda payload. Each field must
        be attached at most once; the resolver id is not checked for reuse.
        """
        new_resolver_id = resolver_id(type_name, field_name)
        request_template = print_block("Stash resolver specific context.")(
            compound_expression(
                [
                    qref(f'$ctx.stash.put("typeName", "{type_name}")'),
                    qref(f'$ctx.stash.put("fieldName", "{field_name}")'),
                    obj({}),
                ]
            )
        )
        resolver = Resolver(
            api_id=GetAtt(logical_id=self._config.api_logical_id, attribute="ApiId"),
            type_name=type_name,
            field_name=field_name,
            data_source_name=resources.data_source_name,
            request_mapping_template=request_template,
            response_mapping_template="$util.toJson($ctx.result)",
            depends_on=[resources.function_config_id],
        )
        self._registry.set_resource(new_resolver_id, resolver)
        self._registry.map_resource_to_stack(self._config.stack_name, new_resolver_id)
        logger.info("Attached resolver %s for %s.%s", new_resolver_id, type_name, field_name)
        return new_resolver_id
