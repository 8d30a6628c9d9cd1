import logging

from pydantic import ValidationError

from sidecar_graph.config import TransformerConfig
from sidecar_graph.core.graph import ResourceGraphBuilder
from sidecar_graph.core.naming import plurality
from sidecar_graph.core.ports.registry import ResourceRegistry
from sidecar_graph.core.resolvers import OperationType, ResolverAttacher
from sidecar_graph.errors import InvalidDirectiveError
from sidecar_graph.models import AnnotatedType, Directive, DirectiveArguments

logger = logging.getLogger(__name__)

DIRECTIVE_NAME = "sidecar"


def get_directive_arguments(directive: Directive) -> DirectiveArguments:
    try:
        return DirectiveArguments.model_validate(directive.arguments)
    except ValidationError as exc:
        raise InvalidDirectiveError(f"Invalid arguments for @{directive.name}: {exc}") from exc


class SidecarTransformer:
    """Handles the @sidecar directive on object types."""

    directive_name = DIRECTIVE_NAME
    directive_definition = "directive @sidecar(name: String!, region: String) on OBJECT"

    def __init__(self, registry: ResourceRegistry, config: TransformerConfig | None = None) -> None:
        self._config = config or TransformerConfig()
        self._graph_builder = ResourceGraphBuilder(registry, self._config)
        self._resolver_attacher = ResolverAttacher(registry, self._config)

    def transform_object(self, definition: AnnotatedType, directive: Directive) -> list[str]:
        """Wire the sidecar Lambda into the CRUD resolvers of ``definition``.

        Returns the ids of the resolvers created, in operation order.
        """
        self.validate_object(definition)
        arguments = get_directive_arguments(directive)

        resources = self._graph_builder.build(arguments)

        type_name = definition.name
        operations: list[tuple[OperationType, str]] = [
            ("Mutation", f"create{type_name}"),
            ("Mutation", f"update{type_name}"),
            ("Mutation", f"delete{type_name}"),
            ("Query", f"get{type_name}"),
            ("Query", plurality(f"list{type_name}")),
        ]
        resolver_ids = [
            self._resolver_attacher.attach(resources, operation, field_name) for operation, field_name in operations
        ]
        logger.info("Attached %d sidecar resolvers to %s", len(resolver_ids), type_name)
        return resolver_ids

    def validate_object(self, definition: AnnotatedType) -> None:
        if not definition.directives:
            raise InvalidDirectiveError("Type does not have any directives.")

        if definition.find_directive(self._config.model_directive) is None:
            raise InvalidDirectiveError(
                f"Types annotated with @{self.directive_name} must also be annotated with "
                f"@{self._config.model_directive}."
            )
