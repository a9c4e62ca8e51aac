#!/usr/bin/env python3
"""
Emoji picker CLI using Cleo framework.
"""

import sys

from cleo.application import Application
from cleo.commands.command import Command
from cleo.helpers import argument, option

from emoji_picker.config import Config, parse_seed
from emoji_picker.console import configure_logging
from emoji_picker.errors import EmojiPickerError
from emoji_picker.selector import count_emoji, pick_emoji


class EmojiCommand(Command):
    """Shared setup for commands that read a data file."""

    def setup_logging(self, config: Config):
        verbose = self.io.is_verbose() or config.VERBOSE
        configure_logging(verbose, self.option("log-file") or config.LOG_FILE)


class PickCommand(EmojiCommand):
    """
    Print one random basic emoji.

    pick
        {file? : Path to emoji-sequences.txt}
        {--seed= : Seed the random generator}
        {--log-file= : Log verbose output to file}
    """

    name = "pick"
    description = "Print one random basic emoji from a data file"
    arguments = [
        argument("file", "Path to emoji-sequences.txt", optional=True)
    ]
    options = [
        option("seed", None, "Seed the random generator", flag=False),
        option("log-file", None, "Log verbose output to file", flag=False),
    ]

    def handle(self):
        """Handle the pick command."""
        try:
            config = Config()
            self.setup_logging(config)
            seed = parse_seed(self.option("seed"))
            if seed is not None:
                config.SEED = seed

            path = config.resolve_data_file(self.argument("file"))
            char = pick_emoji(path, config)
        except KeyboardInterrupt:
            self.line("\nOperation cancelled by user.")
            return 1
        except EmojiPickerError as e:
            self.line_error(f"Error picking emoji: {e}")
            return e.exit_code

        self.line(char)
        return 0


class CountCommand(EmojiCommand):
    """
    Count the selectable emoji in a data file.

    count
        {file? : Path to emoji-sequences.txt}
        {--log-file= : Log verbose output to file}
    """

    name = "count"
    description = "Count the selectable basic emoji in a data file"
    arguments = [
        argument("file", "Path to emoji-sequences.txt", optional=True)
    ]
    options = [
        option("log-file", None, "Log verbose output to file", flag=False),
    ]

    def handle(self):
        """Handle the count command."""
        try:
            config = Config()
            self.setup_logging(config)
            path = config.resolve_data_file(self.argument("file"))
            total = count_emoji(path, config)
        except KeyboardInterrupt:
            self.line("\nOperation cancelled by user.")
            return 1
        except EmojiPickerError as e:
            self.line_error(f"Error counting emoji: {e}")
            return e.exit_code

        self.line(str(total))
        return 0


def create_application():
    """Create and configure the Cleo application."""
    app = Application("emoji-picker", "1.0.0")
    app.catch_exceptions(False)

    # Add commands
    app.add(PickCommand())
    app.add(CountCommand())

    return app


def main():
    """Main entry point for the CLI."""
    app = create_application()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
