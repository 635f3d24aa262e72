"""
Encrypt the raw pixels of a grayscale image with a byte cipher and show
the result next to the original. A repeating Vigenere key leaves the
outline of the picture visible; adding transposition scrambles it.
"""
from typing import Optional, Tuple

import matplotlib
import numpy as np
from PIL import Image

from .super_encryption import DEFAULT_COLUMNS, super_encrypt
from .vigenere import BytesLike, extended_encrypt

MODES = ("extended", "super")


def load_grayscale(path: str) -> Tuple[bytes, int, int]:
    """
    Loads an image and converts it to 8-bit grayscale.
    Returns (raw_bytes, width, height).
    """
    with Image.open(path) as img:
        gray = img.convert('L')
        w, h = gray.size
        return gray.tobytes(), w, h


def encrypt_image_bytes(raw: bytes, key: BytesLike, mode: str = "extended",
                        columns: int = DEFAULT_COLUMNS) -> bytes:
    if mode == "extended":
        return extended_encrypt(raw, key)
    if mode == "super":
        return super_encrypt(raw, key, columns)
    raise ValueError(f"Unsupported mode: {mode}")


def to_array(data: bytes, width: int, height: int) -> np.ndarray:
    return np.frombuffer(data, dtype=np.uint8).reshape((height, width))


def show_side_by_side(original: np.ndarray, cipher: np.ndarray, title: str,
                      out_file: Optional[str] = None) -> None:
    if out_file:
        # render off-screen when only saving
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    fig, axes = plt.subplots(1, 2, figsize=(10, 5))
    ax_left, ax_right = axes.ravel()

    ax_left.imshow(original, cmap='gray', vmin=0, vmax=255)
    ax_left.set_title("Original Grayscale")
    ax_left.axis("off")

    ax_right.imshow(cipher, cmap='gray', vmin=0, vmax=255)
    ax_right.set_title(title)
    ax_right.axis("off")

    if out_file:
        fig.savefig(out_file)
        plt.close(fig)
    else:
        plt.show()


def visualize(path: str, key: BytesLike, mode: str = "extended",
              columns: int = DEFAULT_COLUMNS, out_file: Optional[str] = None) -> bytes:
    raw, w, h = load_grayscale(path)
    print(f"Loaded image '{path}': {w}x{h}, total {len(raw)} bytes in grayscale.")
    cipher = encrypt_image_bytes(raw, key, mode, columns)
    title = "Extended Vigenere" if mode == "extended" else f"Super Encryption ({columns} columns)"
    show_side_by_side(to_array(raw, w, h), to_array(cipher, w, h), title, out_file)
    if out_file:
        print(f"Figure saved to '{out_file}'.")
    return cipher
