import io
from pathlib import Path

import pytest
from PIL import Image

from smartpaste.clipboard import ImageBundle, Representation, StaticSnapshot, load_image, parse_uri_list
from smartpaste.clipboard.linux import CommandSnapshot
from smartpaste.errors import ClipboardReadError


def _png_bytes(mode="RGB", size=(2, 2)):
    buf = io.BytesIO()
    Image.new(mode, size).save(buf, format="PNG")
    return buf.getvalue()


def _fake_snapshot(contents):
    calls = []

    def reader(target):
        calls.append(target)
        return contents.get(target)

    return CommandSnapshot("fake", list(contents), reader), calls


class TestParseUriList:

    def test_gnome_copied_files(self):
        data = b"copy\nfile:///home/me/a%20b.txt\nfile:///home/me/c.txt"
        assert parse_uri_list(data) == [Path("/home/me/a b.txt"), Path("/home/me/c.txt")]

    def test_skips_comments_and_web_links(self):
        data = "# comment\r\nhttps://example.com/x\r\nfile:///tmp/x.png\r\n"
        assert parse_uri_list(data) == [Path("/tmp/x.png")]

    def test_plain_absolute_paths(self):
        assert parse_uri_list("/a/b\n") == [Path("/a/b")]


class TestLoadImage:

    def test_single_frame(self):
        image = load_image(_png_bytes())
        assert isinstance(image, Image.Image)
        assert image.size == (2, 2)

    def test_multi_frame_tiff_becomes_bundle(self):
        buf = io.BytesIO()
        large = Image.new("RGB", (8, 8))
        small = Image.new("RGB", (4, 4))
        large.save(buf, format="TIFF", save_all=True, append_images=[small])

        bundle = load_image(buf.getvalue())

        assert isinstance(bundle, ImageBundle)
        assert [v.size for v in bundle.variants] == [(8, 8), (4, 4)]

    def test_garbage_raises(self):
        with pytest.raises(ClipboardReadError):
            load_image(b"not an image")


class TestStaticSnapshot:

    def test_offers_only_present_values(self):
        snapshot = StaticSnapshot({Representation.TEXT: "hi", Representation.IMAGE: None})
        assert snapshot.offers(Representation.TEXT)
        assert not snapshot.offers(Representation.IMAGE)
        assert snapshot.describe() == ["text"]

    def test_extract_missing(self):
        with pytest.raises(ClipboardReadError):
            StaticSnapshot().extract(Representation.TEXT)


class TestCommandSnapshot:

    def test_empty_clipboard(self):
        snapshot, _ = _fake_snapshot({})
        assert snapshot.is_empty()
        assert snapshot.describe() == []

    def test_text_only_reads_on_extract(self):
        snapshot, calls = _fake_snapshot({"UTF8_STRING": "héllo".encode(), "TARGETS": b""})
        assert snapshot.offers(Representation.TEXT)
        assert not snapshot.offers(Representation.IMAGE)
        assert calls == []
        assert snapshot.extract(Representation.TEXT) == "héllo"

    def test_web_link_is_not_a_file_list(self):
        snapshot, _ = _fake_snapshot({
            "text/uri-list": b"https://example.com",
            "text/plain": b"https://example.com",
        })
        assert not snapshot.offers(Representation.FILE_LIST)
        assert snapshot.offers(Representation.TEXT)

    def test_file_list(self):
        snapshot, calls = _fake_snapshot({
            "x-special/gnome-copied-files": b"copy\nfile:///a/b%20c.txt\nfile:///a/d.txt",
        })
        assert snapshot.offers(Representation.FILE_LIST)
        assert snapshot.extract(Representation.FILE_LIST) == [Path("/a/b c.txt"), Path("/a/d.txt")]
        assert calls == ["x-special/gnome-copied-files"]

    def test_image(self):
        snapshot, _ = _fake_snapshot({"image/png": _png_bytes()})
        assert snapshot.offers(Representation.IMAGE)
        assert isinstance(snapshot.extract(Representation.IMAGE), Image.Image)

    def test_unreadable_target(self):
        snapshot, _ = _fake_snapshot({"image/png": None})
        with pytest.raises(ClipboardReadError):
            snapshot.extract(Representation.IMAGE)
