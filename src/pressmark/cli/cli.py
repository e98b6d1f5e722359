"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from pressmark.cli.commands import export_md_cmd, html_cmd, parse_cmd, render_cmd


app = typer.Typer(name="pressmark", no_args_is_help=True, help="Render guide markup to a print document and CMS hypertext")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log pipeline details")] = False,
    ):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


app.command(name="render")(render_cmd)
app.command(name="parse")(parse_cmd)
app.command(name="html")(html_cmd)
app.command(name="export-md")(export_md_cmd)
