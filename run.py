"""Entry point for the Gurbani JSON compiler."""

import argparse
import logging
import sys

from pydantic import ValidationError

from gurbani_compiler.compiler import build
from gurbani_compiler.config import LoggingConfig, load_config
from gurbani_compiler.errors import CompilerError

logger = logging.getLogger("gurbani_compiler")


def main(argv: list[str] | None = None) -> int:
    """Compile the corpus database into JSON artifacts."""
    parser = argparse.ArgumentParser(description="Generate JSON sources from the corpus database.")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ValidationError:
        defaults = LoggingConfig()
        logging.basicConfig(level=defaults.level, format=defaults.format)
        logger.exception("Invalid configuration in %s", args.config)
        return 1
    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    try:
        build(config)
    except CompilerError:
        logger.exception("Failed to generate JSON sources")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
