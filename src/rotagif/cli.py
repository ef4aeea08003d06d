import argparse
import logging

from .config import DEFAULT_DELAY, DEFAULT_STEPS, RunConfig
from .errors import ConfigError, DecodeError, EncodeError, NotFoundError, WriteError
from .imageio import open_image, write_animated_image
from .palette import WEB_SAFE
from .scheduler import synthesize


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="rotagif", description="Make a rotating GIF from a still image"
    )
    parser.add_argument("image", help="Path to the source image")
    parser.add_argument("out", help="Output GIF path")
    parser.add_argument(
        "--steps",
        type=int,
        default=DEFAULT_STEPS,
        help=f"Number of steps to complete a full rotation (default: {DEFAULT_STEPS})",
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=DEFAULT_DELAY,
        help=f"Delay between steps in 100ths of a second (default: {DEFAULT_DELAY})",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        config = RunConfig.from_args(args)
    except ConfigError as exc:
        raise SystemExit(f"Invalid options: {exc}") from exc

    try:
        original = open_image(config.input)
    except (NotFoundError, DecodeError) as exc:
        raise SystemExit(f"Cannot load image: {exc}") from exc

    sequence = synthesize(original, config.steps, config.delay, palette=WEB_SAFE)

    try:
        write_animated_image(config.output, sequence.images, sequence.delays, WEB_SAFE)
    except (EncodeError, WriteError) as exc:
        raise SystemExit(f"Cannot create image: {exc}") from exc
    print(f"Wrote: {config.output}")


if __name__ == "__main__":
    main()
