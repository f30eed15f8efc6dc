from __future__ import annotations

from functools import partial

import typer
from rich import box

try:
    import typer.rich_utils as tru
except ModuleNotFoundError:  # pragma: no cover - older Typer versions
    tru = None

from charforge.cli_character import char_app
from charforge.cli_options import options_app, pointbuy_app
from charforge.cli_validate import validate_app
from charforge.config_env import load_env

if tru is not None:  # pragma: no branch
    tru.Panel = partial(tru.Panel, box=box.ASCII)


app = typer.Typer(no_args_is_help=True)
app.add_typer(char_app, name="character")
app.add_typer(pointbuy_app, name="pointbuy")
app.add_typer(options_app, name="options")
app.add_typer(validate_app, name="validate")


@app.callback()
def main() -> None:
    """Charforge - 5e character creation and levelling (local-first)."""
    load_env()


if __name__ == "__main__":
    app()
