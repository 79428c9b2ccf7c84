"""CLI entrypoint: Typer app definition and command registration"""

import typer

from knitpost.cli.commands import build_cmd, check_cmd, convert_cmd, main_callback


app = typer.Typer(name="knitpost", no_args_is_help=True, help="Annotated source to gallery article converter")

app.callback()(main_callback)
app.command(name="convert")(convert_cmd)
app.command(name="build")(build_cmd)
app.command(name="check")(check_cmd)
