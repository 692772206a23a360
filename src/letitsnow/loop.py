import typer

from letitsnow.cli.commands.preview import preview_command
from letitsnow.cli.commands.render import render_command
from letitsnow.cli.commands.run import run_command

app = typer.Typer(help="Animate a falling snowflake by patching an HTML file.")

app.command(name="run")(run_command)
app.command(name="render")(render_command)
app.command(name="preview")(preview_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
