# rom.py
import os
from typing import List

import numpy as np
from PIL import Image

from assembler import WORD_BITS, join_words

EXTENSIONS = {
    "hack": ".hack",
    "bin": ".bin",
    "png": ".png",
}


def output_path(source, fmt="hack"):
    root, _ = os.path.splitext(source)
    return root + EXTENSIONS[fmt]


def write_hack(path, words: List[str]):
    # no trailing newline after the last word
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(join_words(words))


def to_array(words: List[str]) -> np.ndarray:
    return np.array([int(w, 2) for w in words], dtype=">u2")


def write_rom(path, words: List[str]):
    """Raw ROM image: two bytes per word, most significant byte first."""
    with open(path, "wb") as f:
        f.write(to_array(words).tobytes())


def to_bitmap(words: List[str], scale=1) -> Image.Image:
    """One row of 16 pixels per word, set bits drawn black."""
    if not words:
        raise ValueError("no words to draw")

    bits = np.array([[c == "1" for c in w] for w in words], dtype=bool)
    pixels = np.where(bits, 0, 255).astype(np.uint8)

    img = Image.fromarray(pixels).convert("1", dither=Image.Dither.NONE)
    if scale > 1:
        img = img.resize((WORD_BITS * scale, len(words) * scale), Image.Resampling.NEAREST)
    return img


def write_bitmap(path, words: List[str], scale=1):
    to_bitmap(words, scale).save(path, format="PNG")
