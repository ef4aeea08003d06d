from concurrent.futures import ThreadPoolExecutor

import pytest
from PIL import Image, ImageSequence

from rotagif.errors import DecodeError, EncodeError, NotFoundError, WriteError
from rotagif.imageio import encode_animated_image, open_image, write_animated_image
from rotagif.palette import WEB_SAFE
from rotagif.scheduler import synthesize

RED = (255, 0, 0, 255)


def _frames(colors, size=(4, 4)):
    frames = []
    for color in colors:
        im = Image.new("P", size, WEB_SAFE.nearest(color))
        im.putpalette(WEB_SAFE.to_bytes())
        frames.append(im)
    return frames


@pytest.mark.parametrize("fmt", ["PNG", "JPEG", "BMP"])
def test_open_common_formats(tmp_path, fmt):
    path = tmp_path / f"source.{fmt.lower()}"
    Image.new("RGB", (3, 2), (200, 10, 10)).save(path, format=fmt)
    im = open_image(path)
    assert im.mode == "RGBA"
    assert im.size == (3, 2)


def test_open_missing_file(tmp_path):
    with pytest.raises(NotFoundError):
        open_image(tmp_path / "nope.png")


def test_open_corrupt_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nthis is not a png")
    with pytest.raises(DecodeError):
        open_image(path)


def test_open_unsupported_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(DecodeError):
        open_image(path)


def test_every_frame_is_written_with_its_delay(tmp_path):
    path = tmp_path / "out.gif"
    frames = _frames([RED, RED, RED, (0, 0, 255)])
    write_animated_image(path, frames, [10, 10, 10, 3], WEB_SAFE)

    with Image.open(path) as gif:
        assert gif.n_frames == 4
        assert gif.info["loop"] == 0
        durations = []
        colors = []
        for frame in ImageSequence.Iterator(gif):
            durations.append(frame.info["duration"])
            colors.append(frame.convert("RGB").getpixel((1, 1)))
    assert durations == [100, 100, 100, 30]
    assert colors == [(255, 0, 0)] * 3 + [(0, 0, 255)]


def test_solid_red_scenario_container(tmp_path):
    path = tmp_path / "red.gif"
    src = Image.new("RGBA", (4, 4), RED)
    with ThreadPoolExecutor() as pool:
        sequence = synthesize(src, 4, 10, executor=pool)
    write_animated_image(path, sequence.images, sequence.delays, WEB_SAFE)

    with Image.open(path) as gif:
        assert gif.n_frames == 4
        for frame in ImageSequence.Iterator(gif):
            assert frame.info["duration"] == 100
            assert set(frame.convert("RGB").getdata()) == {(255, 0, 0)}


def test_output_is_byte_identical_across_runs(tmp_path):
    src = Image.new("RGBA", (12, 9), (10, 120, 240, 255))
    src.paste((240, 200, 20, 255), (2, 2, 7, 6))
    outputs = []
    for run in range(2):
        with ThreadPoolExecutor(max_workers=4) as pool:
            sequence = synthesize(src, 9, 2, executor=pool)
        path = tmp_path / f"run{run}.gif"
        write_animated_image(path, sequence.images, sequence.delays, WEB_SAFE)
        outputs.append(path.read_bytes())
    assert outputs[0] == outputs[1]


def test_mismatched_delays_fail_to_encode():
    with pytest.raises(EncodeError):
        encode_animated_image(_frames([RED, RED]), [1], WEB_SAFE)


def test_empty_sequence_fails_to_encode():
    with pytest.raises(EncodeError):
        encode_animated_image([], [], WEB_SAFE)


def test_true_color_frames_fail_to_encode():
    with pytest.raises(EncodeError):
        encode_animated_image([Image.new("RGB", (2, 2))], [1], WEB_SAFE)


def test_unwritable_destination(tmp_path):
    path = tmp_path / "missing-dir" / "out.gif"
    with pytest.raises(WriteError):
        write_animated_image(path, _frames([RED]), [1], WEB_SAFE)
