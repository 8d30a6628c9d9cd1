import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from sidecar_graph.config import TransformerConfig
from sidecar_graph.core.ordering import deployment_order
from sidecar_graph.core.transform import run_transform
from sidecar_graph.core.transformer import DIRECTIVE_NAME, SidecarTransformer
from sidecar_graph.errors import SidecarGraphError
from sidecar_graph.models import AnnotatedType, Directive
from sidecar_graph.registry import InMemoryResourceRegistry

console = Console()


def _annotated_types(
    names: list[str], function: str, region: str | None, config: TransformerConfig
) -> list[AnnotatedType]:
    arguments = {"name": function, "region": region}
    return [
        AnnotatedType(
            name=name,
            directives=[
                Directive(name=config.model_directive),
                Directive(name=DIRECTIVE_NAME, arguments=arguments),
            ],
        )
        for name in names
    ]


def synth(
    types: Annotated[list[str], typer.Option("--type", "-t", help="Model type annotated with @sidecar. Repeatable.")],
    function: Annotated[str, typer.Option("--function", "-f", help="Name of the sidecar Lambda function.")],
    region: Annotated[str | None, typer.Option(help="Region of the Lambda function, if not the stack region.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the resources as CloudFormation JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log resource creation.")] = False,
) -> None:
    """Derive the sidecar resources for the given model types."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = TransformerConfig.from_env()
    registry = InMemoryResourceRegistry()
    try:
        run_transform(registry, _annotated_types(types, function, region, config), config)
        order = deployment_order(registry.resources)
    except SidecarGraphError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    if as_json:
        typer.echo(json.dumps({rid: registry.resources[rid].to_cfn() for rid in order}, indent=2))
        return

    table = Table(show_lines=False)
    for header in ("Resource", "Type", "Depends on", "Stack"):
        table.add_column(header)
    for rid in order:
        resource = registry.resources[rid]
        table.add_row(rid, resource.resource_type, ", ".join(resource.depends_on), registry.stack_mapping.get(rid, ""))
    console.print(table)
    console.print(f"({len(order)} resources)")


def directive() -> None:
    """Print the @sidecar directive definition."""
    typer.echo(SidecarTransformer.directive_definition)
