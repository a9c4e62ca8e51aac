"""Emoji picker CLI entry point."""
import sys
from pathlib import Path

# Run from a source checkout without installing
src_dir = Path(__file__).parent / "src"
sys.path.insert(0, str(src_dir))

from emoji_picker.cli import main

if __name__ == "__main__":
    sys.exit(main())
