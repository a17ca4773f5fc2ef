import sys
import numpy as np
from PIL import Image

USAGE = "Usage: img2bin <image_file> <output_file>"


def image_to_bytes(input_png):
    """RGB channels of every pixel in scan order; alpha is dropped."""
    with Image.open(input_png) as img:
        rgb = np.asarray(img.convert("RGB"), dtype=np.uint8)
    return rgb.tobytes()


def image_to_file(input_png, output_file):
    data = image_to_bytes(input_png)

    with open(output_file, "wb") as f:
        f.write(data)

    print(f"[SUCCESS] Recovered {len(data)} bytes into {output_file}")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) != 2:
        print(USAGE)
        return 0

    image_to_file(argv[0], argv[1])
    return 0


# MAIN
if __name__ == "__main__":
    sys.exit(main())
