import numpy as np
import pytest
from PIL import Image

from helpers.programs import ADD_HACK, MAX_HACK
from rom import output_path, to_array, to_bitmap, write_bitmap, write_hack, write_rom


def test_output_path():
    assert output_path("prog/Add.asm") == "prog/Add.hack"
    assert output_path("Add.asm", "bin") == "Add.bin"
    assert output_path("Add", "png") == "Add.png"


def test_write_hack(tmp_path):
    path = tmp_path / "Add.hack"
    write_hack(path, ADD_HACK)

    text = path.read_text(encoding="utf-8")
    assert text == "\n".join(ADD_HACK)
    assert not text.endswith("\n")


def test_to_array():
    arr = to_array(ADD_HACK)
    assert arr.dtype == np.dtype(">u2")
    assert arr.tolist() == [2, 0xEC10, 3, 0xE090, 0, 0xE308]


def test_write_rom(tmp_path):
    path = tmp_path / "Max.bin"
    write_rom(path, MAX_HACK)

    data = path.read_bytes()
    assert len(data) == 2 * len(MAX_HACK)
    # big-endian: @10 is 00 0a
    assert data[8:10] == b"\x00\x0a"

    words = np.fromfile(path, dtype=">u2")
    assert [format(int(w), "016b") for w in words] == MAX_HACK


def test_to_bitmap():
    img = to_bitmap(ADD_HACK)
    assert img.mode == "1"
    assert img.size == (16, len(ADD_HACK))

    pixels = np.array(img)
    for row, word in enumerate(ADD_HACK):
        drawn = "".join("0" if p else "1" for p in pixels[row])
        assert drawn == word, f"row {row}"


def test_to_bitmap_scaled():
    img = to_bitmap(ADD_HACK, scale=4)
    assert img.size == (64, 4 * len(ADD_HACK))


def test_to_bitmap_empty():
    with pytest.raises(ValueError):
        to_bitmap([])


def test_write_bitmap(tmp_path):
    path = tmp_path / "Add.png"
    write_bitmap(path, ADD_HACK)

    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == (16, len(ADD_HACK))
