"""laddr inspector - decode packed logical addresses."""
from __future__ import annotations

import click

from laddr_core.protocol import B_DEFAULT_OFFSET_BITS
from .logic import inspect_literal
from .render import canonical_json, render_table

PROMPT = "Enter laddr_t"


def _run(variant: str, literal: str | None, as_json: bool, offset_bits: int = B_DEFAULT_OFFSET_BITS) -> None:
    if literal is None:
        literal = click.prompt(PROMPT, prompt_suffix=": ")
    result = inspect_literal(variant, literal, offset_bits=offset_bits)
    if as_json:
        click.echo(canonical_json(result))
    elif result["status"] == "PASS":
        click.echo(render_table(result["rows"]))
    if result["status"] != "PASS":
        # Fail closed with a single-line reason, no stack trace.
        err = result["errors"][0]
        click.echo(f"FATAL: {err['code']}: {err['detail']}", err=True)
        raise SystemExit(1)


json_option = click.option("--json", "as_json", is_flag=True, help="Emit canonical JSON instead of a table")


@click.group()
def main():
    """Decode packed laddr values."""


@main.command("a")
@click.argument("literal", required=False)
@json_option
def variant_a_cmd(literal: str | None, as_json: bool):
    """Split low/high laddr: 0x<hex> or 'low = <dec>, high = <dec>'."""
    _run("a", literal, as_json)


@main.command("b")
@click.argument("literal", required=False)
@click.option(
    "--offset-bits",
    type=int,
    default=B_DEFAULT_OFFSET_BITS,
    show_default=True,
    envvar="LADDR_OFFSET_BITS",
    help="Width of the offset part of object_content",
)
@json_option
def variant_b_cmd(literal: str | None, offset_bits: int, as_json: bool):
    """128-bit laddr with parametric offset width: [L]<hex>."""
    _run("b", literal, as_json, offset_bits=offset_bits)


@main.command("c")
@click.argument("literal", required=False)
@json_option
def variant_c_cmd(literal: str | None, as_json: bool):
    """128-bit laddr with zero-prefix short form: [L|0x]<hex>."""
    _run("c", literal, as_json)


if __name__ == "__main__":
    main()
