import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from identicon.core import create_identicon


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate an identicon PNG for an input string."
    )
    parser.add_argument(
        "input",
        help="String the identicon is derived from.",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="File name (without extension) for the PNG. Defaults to the input.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Folder where the PNG is written. Defaults to $IDENTICON_OUTPUT_DIR or the current folder.",
    )
    return parser.parse_args()


def main() -> int:
    # Load environment variables from a local .env file if present
    # (e.g. IDENTICON_OUTPUT_DIR=avatars).
    load_dotenv()

    args = parse_args()

    output_dir = args.output_dir or Path(os.environ.get("IDENTICON_OUTPUT_DIR", "."))

    result = create_identicon(args.input, name=args.name, output_dir=output_dir)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
