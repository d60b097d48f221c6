"""Main entry point for the typewright package."""

import sys

from loguru import logger

from typewright.cli import create_parser
from typewright.core import load_config
from typewright.host import BufferView, parse_key_script
from typewright.keymap import build_keymap
from typewright.utils import add_log_file_handler, read_text_file, setup_logger, write_file_safely


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    setup_logger(verbose=args.verbose, debug=args.debug)
    if args.log_file:
        add_log_file_handler(args.log_file, verbose=args.verbose, debug=args.debug)

    # Load configuration
    config = load_config(args.config, args, parser)

    if args.verbose:
        logger.info("Configuration:")
        logger.info(f"  Active: {config.active}")
        logger.info(f"  Replacement rules: {len(config.replacements)}")
        logger.info(f"  Primary quotes: {config.magic_quotes.primary.to_config_string()}")
        logger.info(f"  Secondary quotes: {config.magic_quotes.secondary.to_config_string()}")
        logger.info("")

    text = read_text_file(args.input, "reading input document") if args.input else ""
    if args.keys_file:
        script = read_text_file(args.keys_file, "reading key script")
    else:
        script = args.keys or ""
    keys = parse_key_script(script)

    try:
        view = BufferView.from_text(text, args.cursor)
    except ValueError as e:
        parser.error(str(e))

    view.type_keys(keys, build_keymap(lambda: config))

    if args.verbose:
        logger.info(f"✓ Replayed {len(keys)} key(s) in {len(view.transactions)} transaction(s)")

    if args.output:
        write_file_safely(args.output, lambda f: f.write(view.text), "writing output document")
        if args.verbose:
            logger.info(f"✓ Wrote {args.output}")
    else:
        sys.stdout.write(view.text)


if __name__ == "__main__":
    main()
