import typer

from sidecar_graph.cli.synth import directive, synth

app = typer.Typer(
    name="sidecar-graph",
    help="Sidecar Graph CLI: derive AppSync sidecar Lambda resources from @sidecar model types.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("synth")(synth)
app.command("directive")(directive)


def main() -> None:
    app()
