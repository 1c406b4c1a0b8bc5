"""
PEMDAS CLI.

Developer commands for inspecting how an expression is tokenized and
parsed:

- tokens: show the token list for an expression
- parse:  show the parsed tree and its fully parenthesised form
"""

from __future__ import annotations

import logging
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from pemdas import __version__
from pemdas.core.errors import PemdasError
from pemdas.core.expression_lang import parse, tokenize
from pemdas.core.ir import (
    BinaryExpr,
    EConstant,
    Expr,
    NumberLiteral,
    PiConstant,
    Variable,
    children,
    depth,
)

app = typer.Typer(
    help="PEMDAS - inspect how math expressions are tokenized and parsed",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pemdas {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each parser stage to stderr"),
    ] = False,
) -> None:
    """PEMDAS CLI main callback for global options."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


def _fail(error: PemdasError) -> NoReturn:
    console.print(f"[red]Error ({error.kind}): {escape(error.message)}[/red]")
    raise typer.Exit(1)


@app.command(name="tokens")
def tokens_command(
    expression: Annotated[str, typer.Argument(help="Expression to tokenize")],
) -> None:
    """Print the tokens of an expression."""
    try:
        tokens = tokenize(expression)
    except PemdasError as e:
        _fail(e)

    table = Table(title="Tokens")
    table.add_column("Pos", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    for token in tokens:
        table.add_row(str(token.pos), token.kind.value, escape(token.value))
    console.print(table)


@app.command(name="parse")
def parse_command(
    expression: Annotated[str, typer.Argument(help="Expression to parse")],
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", min=1, help="Maximum parenthesis nesting depth"),
    ] = None,
) -> None:
    """Print the parsed tree of an expression."""
    try:
        expr = parse(tokenize(expression), max_depth=max_depth)
    except PemdasError as e:
        _fail(e)

    tree = Tree(escape(str(expr)))
    _add_branch(tree, expr)
    console.print(tree)
    console.print(f"[dim]depth {depth(expr)}[/dim]")


def _label(expr: Expr) -> str:
    if isinstance(expr, NumberLiteral):
        return f"[cyan]Number[/cyan] {expr.value}"
    if isinstance(expr, Variable):
        return f"[green]Variable[/green] {escape(expr.name)}"
    if isinstance(expr, PiConstant):
        return "[magenta]Pi[/magenta]"
    if isinstance(expr, EConstant):
        return "[magenta]E[/magenta]"
    if isinstance(expr, BinaryExpr):
        return f"[bold]{expr.op.name.title()}[/bold] {escape(expr.op.value)}"
    return f"[bold]{expr.op.name.title()}[/bold]"


def _add_branch(parent: Tree, expr: Expr) -> None:
    stack: list[tuple[Tree, Expr]] = [(parent, expr)]
    while stack:
        tree, node = stack.pop()
        branch = tree.add(_label(node))
        stack.extend((branch, kid) for kid in reversed(children(node)))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
