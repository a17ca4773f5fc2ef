import numpy as np
from PIL import Image

import bin2img
import img2bin


def test_image_to_bytes_recovers_filled_region(tmp_path):
    data = bytes((i * 31) % 256 for i in range(3 * 16 + 2))
    src = tmp_path / "payload.bin"
    src.write_bytes(data)

    out = bin2img.file_to_image(str(src))

    assert img2bin.image_to_bytes(out) == data[:3 * 16]


def test_image_to_bytes_drops_alpha(tmp_path):
    arr = np.array([[[10, 20, 30, 0], [40, 50, 60, 255]]], dtype=np.uint8)
    path = tmp_path / "rgba.png"
    Image.fromarray(arr).save(path)

    assert img2bin.image_to_bytes(str(path)) == bytes([10, 20, 30, 40, 50, 60])


def test_image_to_file(tmp_path, capsys):
    src = tmp_path / "orig.bin"
    src.write_bytes(bytes(range(12)))
    png = bin2img.file_to_image(str(src))
    restored = tmp_path / "restored.bin"

    img2bin.image_to_file(png, str(restored))

    assert restored.read_bytes() == bytes(range(12))
    assert "Recovered 12 bytes" in capsys.readouterr().out


def test_main_usage(capsys):
    assert img2bin.main(["only-one"]) == 0
    assert capsys.readouterr().out.strip() == img2bin.USAGE
