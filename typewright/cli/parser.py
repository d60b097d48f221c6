"""Command-line interface for typewright."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Replay keystrokes against a document with autocorrect and magic quotes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Type into an empty document with the default rules
  %(prog)s -k '"Hello" (c) 2024 '

  # Continue a Markdown file, cursor at the end, write the result
  %(prog)s -i notes.md -k ' -> done ' -o notes.md

  # Custom rules and German quotes
  %(prog)s -k '"teh" ' --rule teh the --primary-quotes '„…“'

  # Using a config file (JSON or YAML)
  %(prog)s --config autocorrect.yaml --keys-file keys.txt

Key scripts:
  Each character is one key press. Named keys go in braces:
  {Space}, {Enter}, {Backspace}. Use {{ and }} for literal braces.

Example autocorrect.yaml:
  active: true
  magic_quotes:
    primary: "“…”"
    secondary: "‘…’"
  replacements:
    - key: "(c)"
      value: "©"
    - key: "->"
      value: "→"
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON or YAML configuration file (CLI args override file values)",
    )

    # Input
    parser.add_argument("-i", "--input", type=str, help="Document to edit (default: empty)")
    keys = parser.add_mutually_exclusive_group()
    keys.add_argument("-k", "--keys", type=str, help="Keystroke script to replay")
    keys.add_argument("--keys-file", type=str, help="File containing the keystroke script")
    parser.add_argument(
        "--cursor",
        type=int,
        action="append",
        help="Caret offset (repeat for multiple cursors, default: end of document)",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Write the result here instead of stdout")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Autocorrect settings
    parser.add_argument(
        "--rule",
        nargs=2,
        action="append",
        metavar=("KEY", "VALUE"),
        help="Extra replacement rule (repeatable, wins over config rules)",
    )
    parser.add_argument(
        "--inactive", action="store_true", help="Disable autocorrect and magic quotes"
    )
    parser.add_argument("--primary-quotes", type=str, help="Double quote pair, e.g. '“…”'")
    parser.add_argument("--secondary-quotes", type=str, help="Single quote pair, e.g. '‘…’'")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
