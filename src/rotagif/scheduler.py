import logging
import math
import queue
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import List

from PIL import Image

from .errors import ConfigError
from .geometry import Rect
from .palette import WEB_SAFE
from .render import render_frame, sample_backfill

logger = logging.getLogger(__name__)

# GIF stores frame delays as unsigned 16-bit hundredths of a second.
MAX_DELAY = 0xFFFF


@dataclass(frozen=True)
class Frame:
    index: int
    image: Image.Image


@dataclass
class FrameSequence:
    frames: List[Frame]
    delays: List[int]

    def __post_init__(self):
        if len(self.frames) != len(self.delays):
            raise ValueError(
                f"{len(self.frames)} frames but {len(self.delays)} delays"
            )
        for position, frame in enumerate(self.frames):
            if frame.index != position:
                raise ValueError(f"frame {frame.index} found at position {position}")

    def __len__(self):
        return len(self.frames)

    @property
    def images(self):
        return [frame.image for frame in self.frames]


def validate_steps(steps, delay):
    if not isinstance(steps, int) or isinstance(steps, bool) or steps <= 0:
        raise ConfigError(f"steps must be a positive integer, got {steps!r}")
    if not isinstance(delay, int) or isinstance(delay, bool) or delay < 0:
        raise ConfigError(f"delay must be a non-negative integer, got {delay!r}")
    if delay > MAX_DELAY:
        raise ConfigError(f"delay must be at most {MAX_DELAY}, got {delay}")


def _render_step(index, src, bounds, backfill, palette, angle):
    logger.info("Frame %d starting", index + 1)
    image = render_frame(src, bounds, backfill, palette, angle)
    logger.info("Frame %d done", index + 1)
    return image


def _deliver(results, index, future):
    results.put((index, future))


def synthesize(src, steps, delay, palette=WEB_SAFE, executor=None, workers=None):
    """Render ``steps`` rotations of ``src`` and return them in angle order.

    Frames are rendered concurrently on ``executor`` (a process pool by
    default) and may complete in any order; each result is stored at its
    own index, so the returned sequence is always ascending.
    """
    validate_steps(steps, delay)

    src = src.convert("RGBA")
    bounds = Rect.of(src)
    backfill = sample_backfill(src)
    step_angle = 2 * math.pi / steps

    owned = executor is None
    if owned:
        executor = ProcessPoolExecutor(max_workers=workers)

    results = queue.Queue()
    frames = [None] * steps
    try:
        for i in range(steps):
            future = executor.submit(
                _render_step, i, src, bounds, backfill, palette, step_angle * i
            )
            future.add_done_callback(partial(_deliver, results, i))

        for _ in range(steps):
            index, future = results.get()
            frames[index] = Frame(index, future.result())
            logger.info("Frame %d queued", index + 1)
    finally:
        if owned:
            executor.shutdown(wait=True)

    ordered = []
    for frame in frames:
        logger.info("Frame %d dequeued", frame.index + 1)
        ordered.append(frame)
    return FrameSequence(ordered, [delay] * steps)
