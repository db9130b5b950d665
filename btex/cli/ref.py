"""Ref Typer app factory."""

import typer
from jinja2 import BaseLoader, Environment, StrictUndefined

from btex.api.ref.cmd_infer import cmd_infer
from btex.api.ref.cmd_render import cmd_render
from btex.cli._handle_stage_result import _handle_stage_result

_HTML_TEMPLATE = Environment(loader=BaseLoader(), undefined=StrictUndefined).from_string(
    """\
<!-- {{ kind }}{% if page %} page={{ page }}{% endif %} -->
{{ html }}
"""
)


def _print_html(output: dict) -> None:
    typer.echo(_HTML_TEMPLATE.render(**output), nl=False)


def ref() -> typer.Typer:
    """Create and configure the ref Typer app."""
    app = typer.Typer(
        name="ref",
        help="Resolve and render cross-references",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="infer")
    def infer_cmd(
        ctx: typer.Context,
        text: str = typer.Argument(..., help="Reference content"),
        suffix: str | None = typer.Option(None, help="Page suffix appended before inference"),
    ) -> None:
        """Infer the page identifier for reference content."""
        _handle_stage_result(cmd_infer, ctx)(text=text, suffix=suffix)

    @app.command(name="render")
    def render_cmd(
        ctx: typer.Context,
        text: str = typer.Argument("", help="Reference content"),
        page: str | None = typer.Option(None, help="Explicit page (ref-page)"),
        key: str | None = typer.Option(None, help="Lookup key (ref-key)"),
        url: str | None = typer.Option(None, help="External URL (ref-url)"),
        suffix: str | None = typer.Option(None, help="Page suffix (ref-page-suffix)"),
        infer: bool = typer.Option(False, "--infer", help="Infer the page from the content"),
        no_link: bool = typer.Option(False, "--no-link", help="Render without a link wrapper"),
        target_id: str | None = typer.Option(None, help="Bookmark id of a resolved label"),
        target_text: str | None = typer.Option(None, help="Content of the resolved label"),
        italic: bool = typer.Option(False, "--italic", help="Inherited italic style"),
        bold: bool = typer.Option(False, "--bold", help="Inherited bold style"),
        size: float | None = typer.Option(None, help="Inherited font size in px"),
        html: bool = typer.Option(False, "--html", help="Print only the rendered HTML"),
    ) -> None:
        """Bind, normalise and render a reference."""
        _handle_stage_result(cmd_render, ctx, result_printer=_print_html if html else None)(
            text=text,
            page=page,
            key=key,
            url=url,
            suffix=suffix,
            infer_page=infer,
            no_link=no_link,
            target_id=target_id,
            target_text=target_text,
            italic=italic,
            bold=bold,
            size=size,
        )

    return app
