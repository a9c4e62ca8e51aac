#!/usr/bin/env python3
"""
Random Emoji

Print one random basic emoji, chosen uniformly from an emoji-sequences.txt
data file.

    random-emoji emoji-sequences.txt
"""

import typer

from emoji_picker.config import Config
from emoji_picker.console import configure_logging, print_error
from emoji_picker.errors import EmojiPickerError
from emoji_picker.selector import pick_emoji

app = typer.Typer(
    name="random-emoji",
    help="● Random Emoji - pick one basic emoji from an emoji-sequences.txt file\n\n"
    "Only single code points tagged Basic_Emoji are eligible; keycap, flag and\n"
    "modifier sequences are skipped.",
    rich_markup_mode="rich",
    add_completion=False,
)


@app.command()
def pick(
    data_file: str = typer.Argument(
        None, help="Path to emoji-sequences.txt", show_default=False
    ),
    seed: int = typer.Option(
        None, "--seed", help="Seed the random generator for a reproducible pick"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging to stderr"
    ),
    log_file: str = typer.Option(
        None, "--log-file", help="Log verbose output to specified file"
    ),
):
    """Print one random basic emoji from DATA_FILE"""
    try:
        config = Config()
        configure_logging(
            verbose or config.VERBOSE, log_file or config.LOG_FILE
        )
        if seed is not None:
            config.SEED = seed

        path = config.resolve_data_file(data_file)
        char = pick_emoji(path, config)
    except EmojiPickerError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code)

    typer.echo(char)


def main():
    app()


if __name__ == "__main__":
    main()
