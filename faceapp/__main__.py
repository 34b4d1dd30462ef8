"""Command line entry point for the FaceApp client."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import ClientConfig, FaceAppError, FilterService
from .api.base import NO_FILTER
from .utils.images import is_image_file

logger = logging.getLogger(__name__)


def _default_output(input_path: Path, filter_id: str) -> Path:
    return input_path.with_name(f"{input_path.stem}-{filter_id}.png")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Apply FaceApp filters to photos")
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        help="Photo to upload.",
    )
    parser.add_argument(
        "--filter",
        "-f",
        dest="filter_id",
        default=NO_FILTER,
        help=f"Filter identifier to apply (default: {NO_FILTER}).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Where to write the filtered image. Defaults to <input>-<filter>.png.",
    )
    parser.add_argument(
        "--list-filters",
        action="store_true",
        help="Print the available filters and exit.",
    )
    parser.add_argument(
        "--minimal",
        action="store_true",
        help="With --list-filters, print only filter identifiers.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML or JSON file with client settings.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.list_filters and args.input is None:
        parser.error("--input is required unless --list-filters is given.")

    config = ClientConfig.load(args.config) if args.config else ClientConfig()
    service = FilterService(config)

    try:
        if args.list_filters:
            filters = service.list_filters(minimal=args.minimal)
            payload = filters if args.minimal else [item.as_dict() for item in filters]
            json.dump(payload, sys.stdout, indent=2)
            sys.stdout.write("\n")
            return

        if not is_image_file(args.input):
            logger.warning("%s does not look like an image file; uploading anyway.", args.input)
        image = service.apply_filter(args.input, args.filter_id)
    except FaceAppError as exc:
        parser.exit(1, f"error: {exc}\n")

    output = args.output or _default_output(args.input, args.filter_id)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(image)
    sys.stdout.write(f"{output}\n")


if __name__ == "__main__":  # pragma: no cover
    main()
