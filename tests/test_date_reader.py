# -*- coding: utf-8 -*-
import os
from datetime import date, datetime

import piexif
import pytest
from PIL import Image

from date_watermark.core import date_reader
from date_watermark.core.date_reader import (
    UNKNOWN_DATE,
    DateResolver,
    parse_exif_datetime,
    read_exif,
)
from date_watermark.core.errors import MetadataReadError

from conftest import exif_bytes

ORIGINAL = piexif.ExifIFD.DateTimeOriginal
DIGITIZED = piexif.ExifIFD.DateTimeDigitized
DATETIME = piexif.ImageIFD.DateTime


def _set_mtime(path, when):
    ts = when.timestamp()
    os.utime(path, (ts, ts))
    return when.strftime("%Y-%m-%d")


def test_original_wins_over_digitized(make_image):
    path = make_image(exif=exif_bytes({ORIGINAL: b"2021:05:06 10:11:12", DIGITIZED: b"2020:01:02 03:04:05"}))
    assert DateResolver().resolve(path) == "2021-05-06"


def test_digitized_used_without_original(make_image):
    path = make_image(exif=exif_bytes({DIGITIZED: b"2020:01:02 03:04:05"}))
    assert DateResolver().resolve(path) == "2020-01-02"


def test_generic_datetime_tag(make_image):
    path = make_image(exif=exif_bytes(zeroth={DATETIME: b"2019:12:31 23:59:59"}))
    assert DateResolver().resolve(path) == "2019-12-31"


def test_png_exif_chunk_is_read(make_image):
    path = make_image("shot.png", exif=exif_bytes({ORIGINAL: b"2018:07:08 09:10:11"}))
    assert DateResolver().resolve(path) == "2018-07-08"


def test_blank_tag_falls_through_to_next(make_image):
    path = make_image(exif=exif_bytes({ORIGINAL: b"    :  :     :  :  ", DIGITIZED: b"2022:02:03 00:00:00"}))
    assert DateResolver().resolve(path) == "2022-02-03"


def test_no_metadata_uses_modification_date(make_image):
    path = make_image()
    expected = _set_mtime(path, datetime(2015, 3, 4, 12, 0, 0))
    assert DateResolver().resolve(path) == expected == "2015-03-04"


def test_corrupt_file_uses_modification_date(tmp_path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"")
    expected = _set_mtime(str(path), datetime(2016, 6, 7, 8, 0, 0))
    assert DateResolver().resolve(str(path)) == expected


def test_nothing_available_returns_sentinel(tmp_path):
    assert DateResolver().resolve(str(tmp_path / "missing.jpg")) == UNKNOWN_DATE


def test_custom_steps_are_tried_in_order(make_image):
    path = make_image()
    calls = []

    def first(p, exif):
        calls.append("first")
        return None

    def second(p, exif):
        calls.append("second")
        return date(2001, 2, 3)

    assert DateResolver(steps=[first, second]).resolve(path) == "2001-02-03"
    assert calls == ["first", "second"]


def test_metadata_errors_are_absorbed(make_image, monkeypatch):
    path = make_image(exif=exif_bytes({ORIGINAL: b"2021:05:06 10:11:12"}))
    expected = _set_mtime(path, datetime(2014, 1, 1, 12, 0, 0))

    def boom(p):
        raise MetadataReadError("unreadable")

    monkeypatch.setattr(date_reader, "read_exif", boom)
    assert DateResolver().resolve(path) == expected


def test_read_exif_raises_metadata_error_for_missing_file(tmp_path):
    with pytest.raises(MetadataReadError):
        read_exif(str(tmp_path / "nope.jpg"))


@pytest.mark.parametrize("value, expected", [
    (b"2021:05:06 10:11:12", date(2021, 5, 6)),
    ("2021-05-06 10:11:12", date(2021, 5, 6)),
    (b"2021:05:06 10:11:12\x00", date(2021, 5, 6)),
    ("2021:05:06", date(2021, 5, 6)),
    (b"", None),
    (b"not a date", None),
    (None, None),
])
def test_parse_exif_datetime(value, expected):
    assert parse_exif_datetime(value) == expected


def test_none_path_returns_sentinel():
    assert DateResolver().resolve(None) == UNKNOWN_DATE


@pytest.mark.parametrize("name", ["scan.tif", "scan.tiff", "icon.bmp", "anim.gif", "plain.png"])
def test_formats_without_exif_use_modification_date(make_image, name):
    path = make_image(name)
    expected = _set_mtime(path, datetime(2013, 9, 10, 12, 0, 0))
    assert DateResolver().resolve(path) == expected == "2013-09-10"


def test_tiff_datetime_tag_is_read(tmp_path):
    path = str(tmp_path / "scan.tif")
    Image.new("RGB", (16, 16)).save(path, format="TIFF", tiffinfo={DATETIME: "2017:04:05 06:07:08"})
    _set_mtime(path, datetime(2013, 9, 10, 12, 0, 0))
    assert DateResolver().resolve(path) == "2017-04-05"
