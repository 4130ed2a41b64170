from pathlib import Path
from typing import List, Optional

import typer

from .config import ConfigError, Settings
from .logging import get_logger
from .registry import UnknownImplementationError, available_implementations, create_keystore

app = typer.Typer(help="keystore – bounded set of validated text keys", no_args_is_help=True)


def _read_keys(path: Path) -> List[str]:
    """Read one candidate key per line, keeping blank lines as candidates."""
    with path.open(encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle]


@app.command()
def load(
    keys: Optional[List[str]] = typer.Argument(None, help="Keys to insert, in order"),
    impl: Optional[str] = typer.Option(None, "--impl", "-i", help="Keystore implementation name"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, dir_okay=False,
        help="File with one key per line, inserted after positional keys",
    ),
) -> None:
    """
    Insert keys into a fresh keystore and report which were accepted.

    Each candidate is offered once, positional keys first and then the lines
    of --file. Rejected keys (blank, duplicate, or over capacity) are listed
    as such; they are not errors.
    """
    try:
        settings = Settings.from_env()
        keystore = create_keystore(impl or settings.implementation)
    except (ConfigError, UnknownImplementationError) as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    logger = get_logger(__name__, settings.log_level_value)

    candidates = list(keys or [])
    if file is not None:
        candidates.extend(_read_keys(file))
    logger.info(f"Loading {len(candidates)} candidate keys into {keystore!r}")

    rejected = 0
    for candidate in candidates:
        accepted = keystore.insert(candidate)
        if not accepted:
            rejected += 1
        typer.echo(f"{'accepted' if accepted else 'rejected'}\t{candidate!r}")

    typer.echo(f"size: {keystore.size()}/{keystore.MAX_CAPACITY}")
    if rejected:
        logger.info(f"{rejected} of {len(candidates)} keys rejected")


@app.command()
def implementations() -> None:
    """List registered keystore implementations."""
    for name in available_implementations():
        typer.echo(name)


if __name__ == "__main__":
    app()
