"""
Tests for the binary PBM (P4) codec.
"""

import io

import pytest
from PIL import Image

from rlebw import pbm
from rlebw.errors import AllocError, FormatError, ImageIOError, RLEBWError
from rlebw.image import BLACK, WHITE, BWImage, is_equal
from rlebw.pbm import codec as pbm_codec

from .helpers import pixel_grid, random_pixels


class TestBits:
    def test_pack_msb_first(self):
        assert pbm.pack_bits([1, 0, 1, 0, 0, 0, 0, 1]) == b"\xa1"

    def test_pack_pads_with_white(self):
        assert pbm.pack_bits([1, 1, 1]) == b"\xe0"

    def test_unpack_msb_first(self):
        assert list(pbm.unpack_bits(b"\x81\x40")) == [1, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0]

    def test_bytes_per_row(self):
        assert [pbm.bytes_per_row(w) for w in (1, 8, 9, 16, 17)] == [1, 1, 2, 2, 3]


class TestRead:
    def test_header_with_comments(self):
        data = b"P4\n# made by hand\n# second comment\n3 2\n\xbf\x60"
        img = pbm.loads(data)
        assert (img.width, img.height) == (3, 2)
        # padding bits in the first byte are ignored
        assert pixel_grid(img) == [[1, 0, 1], [0, 1, 1]]

    def test_comment_between_width_and_height(self):
        img = pbm.loads(b"P4 3\n# height follows\n1\n\xe0")
        assert pixel_grid(img) == [[1, 1, 1]]

    def test_single_whitespace_before_pixels(self):
        # the second newline is pixel data: 0x0a == 00001010
        img = pbm.loads(b"P4\n8 1\n\n")
        assert pixel_grid(img) == [[0, 0, 0, 0, 1, 0, 1, 0]]

    def test_read_header_leaves_stream_at_pixels(self):
        stream = io.BytesIO(b"P4 16 2\n\x01\x02\x03\x04")
        assert pbm.read_header(stream) == (16, 2)
        assert stream.read() == b"\x01\x02\x03\x04"

    @pytest.mark.parametrize(
        "data",
        [
            b"P1\n3 2\n\x00\x00",
            b"",
            b"P4\n-3 2\n\x00\x00",
            b"P4\nab 2\n\x00\x00",
            b"P4\n0 2\n",
            b"P4\n3 0\n",
            b"P4\n3 2",
            b"P4\n3 2x\x00\x00",
            b"P4\n# unterminated comment",
            b"P4\n3 2\n\xa0",
            b"P4\n17 1\n\xff\xff",
            b"P4\n" + b"1" * 5000 + b" 1\n\x00",
            b"P4\n" + b"9" * 30 + b" 1\n\x00",
            b"P4\n99999999999 1\n\x00",
        ],
    )
    def test_malformed_input(self, data):
        with pytest.raises(FormatError):
            pbm.loads(data)

    def test_format_error_is_recoverable_error(self):
        with pytest.raises(RLEBWError):
            pbm.loads(b"P5\n1 1\n\x00")

    def test_huge_width_is_truncated_data(self):
        with pytest.raises(FormatError, match="Truncated"):
            pbm.loads(b"P4\n9999999999 1\n\x00")

    def test_out_of_memory_while_decoding(self, monkeypatch):
        error = MemoryError()

        def fail(width, raw_row):
            raise error

        monkeypatch.setattr(pbm_codec, "encode_row", fail)
        with pytest.raises(AllocError) as excinfo:
            pbm.loads(b"P4\n3 1\n\x00")
        assert excinfo.value.__cause__ is error
        assert isinstance(excinfo.value, MemoryError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageIOError) as excinfo:
            pbm.load(tmp_path / "missing.pbm")
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)


class TestWrite:
    def test_exact_bytes(self):
        img = BWImage.from_pixels([[1, 0, 1], [0, 0, 1]])
        assert pbm.dumps(img) == b"P4\n3 2\n\xa0\x20"

    def test_full_bytes_have_no_padding(self):
        img = BWImage.create(16, 1, BLACK)
        assert pbm.dumps(img) == b"P4\n16 1\n\xff\xff"

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(ImageIOError):
            pbm.save(BWImage.create(1, 1, WHITE), tmp_path / "no-such-dir" / "out.pbm")


class TestRoundTrip:
    @pytest.mark.parametrize("width", [1, 7, 8, 9, 16, 17])
    @pytest.mark.parametrize("height", [1, 3])
    def test_save_then_load(self, tmp_path, rng, width, height):
        img = BWImage.from_pixels(random_pixels(rng, width, height))
        path = tmp_path / "image.pbm"
        pbm.save(img, path)
        assert is_equal(pbm.load(path), img)

    def test_chessboard_round_trip(self):
        img = BWImage.create_chessboard(12, 6, 3, WHITE)
        assert is_equal(pbm.loads(pbm.dumps(img)), img)


class TestPillowCompatibility:
    def test_pillow_reads_our_files(self, tmp_path, rng):
        img = BWImage.from_pixels(random_pixels(rng, 13, 5))
        path = tmp_path / "ours.pbm"
        pbm.save(img, path)
        with Image.open(path) as pil:
            assert pil.mode == "1"
            assert pil.size == (13, 5)
            for y in range(5):
                for x in range(13):
                    assert (pil.getpixel((x, y)) == 0) == (img.pixel(x, y) == BLACK)

    def test_we_read_pillow_files(self, tmp_path):
        pil = Image.new("1", (10, 3), 255)
        pil.putpixel((0, 0), 0)
        pil.putpixel((9, 2), 0)
        path = tmp_path / "pillow.pbm"
        pil.save(path)
        img = pbm.load(path)
        assert (img.width, img.height) == (10, 3)
        assert img.pixel(0, 0) == BLACK
        assert img.pixel(9, 2) == BLACK
        assert img.pixel(5, 1) == WHITE
