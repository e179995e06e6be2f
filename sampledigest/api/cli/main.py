"""CLI entry point: print sampled identifiers for files, md5sum-style."""

import argparse
import sys

from loguru import logger
from pydantic import ValidationError

from sampledigest.core.config.sampling_config import SamplingConfig
from sampledigest.imohash import ImoHash
from sampledigest.version import __version__

from .utils.rich_output import RichOutputFormatter


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()
    logger.enable("sampledigest")
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="imosum",
        description="Print sampled 128-bit identifiers for files.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="Files to hash",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    SamplingConfig.add_cli_arguments(parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Hash each file argument and print ``<hex>  <path>`` lines.

    Returns:
        0 if every file was hashed, 1 if any file failed or the sampling
        configuration is invalid
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    formatter = RichOutputFormatter(verbose=args.verbose)

    try:
        config = SamplingConfig.from_sources(args)
    except ValidationError as e:
        formatter.error(f"Invalid sampling configuration: {e}")
        return 1

    formatter.verbose_info(
        f"sample_size={config.sample_size} sample_threshold={config.sample_threshold}"
    )
    engine = ImoHash.from_config(config)

    failed = 0
    for path in args.files:
        try:
            identifier = engine.sum_file(path)
        except OSError as e:
            formatter.error(f"{path}: {e.strerror or e}")
            failed += 1
            continue
        print(f"{identifier.hex()}  {path}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
