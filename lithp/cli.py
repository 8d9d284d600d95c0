"""Command line entry point: ``lithp`` starts the REPL, subcommands do the rest."""

from pathlib import Path
from typing import Optional

import typer

from lithp import config
from lithp.errors import LithpConfigError, LithpSyntaxError
from lithp.interpreter import Interpreter

app = typer.Typer(
    name="lithp",
    help="A tiny S-expression calculator with quoted expressions.",
    no_args_is_help=False,
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level name"),
    history_file: Optional[Path] = typer.Option(None, "--history-file", help="readline history file"),
    no_history: bool = typer.Option(False, "--no-history", help="Do not load or save history"),
) -> None:
    """Start the interactive REPL when no subcommand is given."""
    try:
        config.configure_logging(log_level)
    except LithpConfigError as ex:
        typer.echo(str(ex), err=True)
        raise typer.Exit(code=1)
    if ctx.invoked_subcommand is not None:
        return

    from lithp.repl import Repl

    path = None if no_history else (history_file or config.get_history_path())
    Repl(history_path=path).run()


@app.command("eval")
def eval_command(code: str = typer.Argument(..., help="One line of lithp source")) -> None:
    """Evaluate CODE and print the result."""
    try:
        typer.echo(Interpreter().eval_to_string(code))
    except LithpSyntaxError as ex:
        typer.echo(str(ex), err=True)
        raise typer.Exit(code=1)


@app.command("serve")
def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="TCP port"),
) -> None:
    """Serve JSON-lines evaluation requests over TCP."""
    from lithp_lsp.repl_server import ReplServer

    default_host, default_port = config.get_server_address()
    ReplServer(host or default_host, port or default_port).serve_forever()


@app.command("lsp")
def lsp_command() -> None:
    """Run the language server over stdio."""
    from lithp_lsp.server import server

    server.start_io()
