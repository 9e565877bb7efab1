import base64
import unittest

from pngsize.png import HEADER_SIZE, PNG, PNG_SIGNATURE, PngDimensions, UnsupportedFormatError, is_png

from .helpers import png_header


class TestPNG(unittest.TestCase):
    def test_parse_png(self):
        buffer = (
            "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAIAAACQd1PeAAAAD0lEQVR4nGNgYAAAAAMAAWgmWQ0AAAAASUVORK5CYII="
        )
        png = PNG(base64.b64decode(buffer))
        dims = png.get_dimensions()
        self.assertEqual(dims.width, 1)
        self.assertEqual(dims.height, 1)

    def test_invalid_png(self):
        with self.assertRaises(ValueError):
            PNG(b"IAMADUCK").get_dimensions()

    def test_big_endian_fields(self):
        dims = PNG(png_header(256, 200)).get_dimensions()
        self.assertEqual(dims, PngDimensions(width=256, height=200))

    def test_ignores_bytes_between_signature_and_fields(self):
        """8..16 구간과 24 이후의 바이트는 결과에 영향을 주지 않아야 합니다."""
        buffer = PNG_SIGNATURE + b"\xff" * 8 + b"\x00\x00\x01\x00" + b"\x00\x00\x00\xc8" + b"\xde\xad" * 50
        dims = PNG(buffer).get_dimensions()
        self.assertEqual((dims.width, dims.height), (256, 200))

    def test_full_u32_range(self):
        dims = PNG(png_header(0, 0xFFFFFFFF)).get_dimensions()
        self.assertEqual(dims.width, 0)
        self.assertEqual(dims.height, 4294967295)

    def test_signature_mismatch_at_any_position(self):
        for i in range(8):
            buffer = bytearray(png_header(10, 10))
            buffer[i] ^= 0x01
            with self.subTest(position=i):
                with self.assertRaises(UnsupportedFormatError):
                    PNG(bytes(buffer)).get_dimensions()

    def test_jpeg_magic(self):
        with self.assertRaises(UnsupportedFormatError):
            PNG(b"\xff\xd8\xff\xe0" + b"\x00" * 40).get_dimensions()

    def test_truncated_header(self):
        """시그니처가 맞아도 24바이트 미만이면 형식 오류로 처리해야 합니다."""
        full = png_header(1, 1)
        for length in (0, 7, 8, 16, 20, HEADER_SIZE - 1):
            with self.subTest(length=length):
                with self.assertRaises(UnsupportedFormatError):
                    PNG(full[:length]).get_dimensions()

    def test_is_png(self):
        self.assertTrue(is_png(PNG_SIGNATURE))
        self.assertFalse(is_png(PNG_SIGNATURE[:7]))
        self.assertFalse(is_png(b"GIF89a\x00\x00"))

    def test_to_dict(self):
        self.assertEqual(PngDimensions(width=3, height=4).to_dict(), {"width": 3, "height": 4})


if __name__ == "__main__":
    unittest.main()
