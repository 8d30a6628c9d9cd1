from collections.abc import Iterable

from sidecar_graph.config import TransformerConfig
from sidecar_graph.core.ports.registry import ResourceRegistry
from sidecar_graph.core.transformer import DIRECTIVE_NAME, SidecarTransformer
from sidecar_graph.models import AnnotatedType


def run_transform(
    registry: ResourceRegistry,
    types: Iterable[AnnotatedType],
    config: TransformerConfig | None = None,
) -> list[str]:
    """Apply the @sidecar directive to every type that carries it, in declaration order.

    Returns the ids of all resolvers created.
    """
    transformer = SidecarTransformer(registry, config)
    resolver_ids: list[str] = []
    for definition in types:
        directive = definition.find_directive(DIRECTIVE_NAME)
        if directive is None:
            continue
        resolver_ids.extend(transformer.transform_object(definition, directive))
    return resolver_ids
