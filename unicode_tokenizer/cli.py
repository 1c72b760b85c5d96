"""Command-line interface for the tokenization pipeline."""

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .pipeline import TokenizationPipeline
from .registry import TokenizerRegistry, register_builtin_tokenizers


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Split text into Unicode word tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using a config file
  unicode-tokenizer --config config.yaml

  # Direct arguments
  unicode-tokenizer tokenize --input data/input.jsonl --output data/tokens

  # Whole file as one document, JSON-lines output
  unicode-tokenizer tokenize --input book.txt --input-format text --format jsonl

  # Show the tokens of a string
  unicode-tokenizer inspect "Hello World"
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    tokenize_parser = subparsers.add_parser("tokenize", help="Tokenize text files")
    setup_tokenize_parser(tokenize_parser)

    inspect_parser = subparsers.add_parser(
        "inspect", help="Print the tokens of a string or file"
    )
    setup_inspect_parser(inspect_parser)

    # If no command specified, treat as tokenize command
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv or (argv[0] not in subparsers.choices and argv[0] not in ("-h", "--help")):
        argv = ["tokenize", *argv]

    return parser.parse_args(argv)


def setup_tokenize_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for tokenize command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )

    # Input/Output
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input file",
    )
    parser.add_argument(
        "--input-format",
        choices=["jsonl", "text"],
        help="jsonl: one document per line; text: whole file is one document",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for token files",
    )
    parser.add_argument(
        "--format",
        choices=["csv", "jsonl"],
        help="Output file format (default: csv)",
    )

    # Tokenizer options
    parser.add_argument(
        "--bytes-per-token",
        type=int,
        help="Initial bytes-per-token estimate for output pre-sizing (default: 6)",
    )
    parser.add_argument(
        "--no-adaptive",
        action="store_true",
        help="Disable output pre-sizing and use plain list growth",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: 1)",
    )

    # Output options
    parser.add_argument(
        "--single-lines",
        action="store_true",
        help="Also save one token file per document",
    )
    parser.add_argument(
        "--no-full-files",
        action="store_true",
        help="Skip saving the combined token file",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_inspect_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for inspect command."""
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="Text to tokenize")
    source.add_argument("--file", type=Path, help="Read raw bytes from a file")
    parser.add_argument(
        "--tokenizer",
        default="unicode",
        help="Registered tokenizer name (default: unicode)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    if getattr(args, "input", None):
        config.input_file = args.input
    if getattr(args, "input_format", None):
        config.input_format = args.input_format
    if getattr(args, "output", None):
        config.output.output_dir = args.output
    if getattr(args, "format", None):
        config.output.format = args.format

    if getattr(args, "bytes_per_token", None) is not None:
        config.tokenizer.bytes_per_token = args.bytes_per_token
    if getattr(args, "no_adaptive", False):
        config.tokenizer.adaptive = False
    if getattr(args, "workers", None) is not None:
        config.processing.workers = args.workers

    if getattr(args, "single_lines", False):
        config.output.save_single_lines = True
    if getattr(args, "no_full_files", False):
        config.output.save_full_files = False

    # Assignments bypass validation; re-validate the merged result
    return Config.model_validate(config.model_dump())


def handle_tokenize(args: argparse.Namespace) -> int:
    """Handle tokenize command."""
    try:
        config = build_config(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    try:
        pipeline = TokenizationPipeline(config)
        count = pipeline.run()
        print(f"\nProcessed {count} documents")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Tokenization failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def handle_inspect(args: argparse.Namespace) -> int:
    """Handle inspect command."""
    registry = register_builtin_tokenizers(TokenizerRegistry())
    try:
        tokenizer = registry.create(args.tokenizer)
        data = args.file.read_bytes() if args.file else args.text.encode("utf-8")
    except (KeyError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for token in tokenizer.tokenize(data):
        print(
            f"{token.position:>6}  {token.start:>8}-{token.end:<8}  "
            f"{token.type.value:<12}  {token.text}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(getattr(args, "verbose", False))

    if args.command == "inspect":
        return handle_inspect(args)
    else:
        return handle_tokenize(args)


if __name__ == "__main__":
    sys.exit(main())
