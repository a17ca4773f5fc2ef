import os
import sys
import math
import numpy as np
from PIL import Image
from tqdm import tqdm

# CONFIGURATION
PACK_PER_PIXEL = 3  # bytes per pixel (RGB)
ALPHA = 255  # every written pixel is fully opaque
OUTPUT_SUFFIX = "_image"
OUTPUT_EXT = ".png"  # lossless, so pixels read back bit-perfect

USAGE = "Usage: bin2img <input_file> [<input_file> ...]"


def image_size(n_bytes):
    """Side of the square canvas for an input of n_bytes."""
    return math.isqrt(n_bytes // PACK_PER_PIXEL)


def bytes_to_canvas(data, size):
    """
    Lay the bytes out as RGB pixels, left-to-right then top-to-bottom.
    Trailing bytes that don't make a full pixel, or that don't fit on the
    canvas, are dropped. Cells with no data stay (0, 0, 0, 0).
    """
    canvas = np.zeros((size, size, 4), dtype=np.uint8)
    count = min(len(data) // PACK_PER_PIXEL, size * size)
    if count == 0:
        return canvas

    pixels = np.frombuffer(data, dtype=np.uint8, count=count * PACK_PER_PIXEL)
    flat = canvas.reshape(-1, 4)
    flat[:count, :3] = pixels.reshape(count, PACK_PER_PIXEL)
    flat[:count, 3] = ALPHA
    return canvas


def canvas_to_image(canvas):
    # (h, w, 4) uint8 arrays come out as RGBA
    return Image.fromarray(canvas)


def output_path(input_file):
    return os.path.splitext(input_file)[0] + OUTPUT_SUFFIX + OUTPUT_EXT


def data_to_image(data, output_png):
    """
    Encode an in-memory buffer as a square PNG at output_png.

    Returns output_png, or None when the buffer is too short to fill a
    single pixel. Write and encoding errors propagate to the caller.
    """
    side = image_size(len(data))
    if side == 0:
        return None

    canvas = bytes_to_canvas(data, side)
    canvas_to_image(canvas).save(output_png, format="PNG")
    return output_png


def read_bytes(input_file):
    with open(input_file, "rb") as f:
        return f.read()


def file_to_image(input_file, output_png=None):
    """Convert one file to a square PNG next to it, see data_to_image."""
    if output_png is None:
        output_png = output_path(input_file)
    return data_to_image(read_bytes(input_file), output_png)


def convert_all(files):
    # Progress bar only pays off with several inputs
    bar = tqdm(files, desc="Converting files", unit="file", disable=len(files) < 2)
    for filename in bar:
        try:
            data = read_bytes(filename)
            written = data_to_image(data, output_path(filename))
            if written is None:
                tqdm.write(f"[SKIP] {filename}: too short for a single pixel ({len(data)} bytes)")
            else:
                tqdm.write(f"[SUCCESS] Image successfully created: {written}")
        except (OSError, ValueError) as exc:
            tqdm.write(f"[ERROR] Error processing {filename}: {exc}")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(USAGE)
        return 0

    convert_all(list(argv))
    return 0


# MAIN
if __name__ == "__main__":
    sys.exit(main())
