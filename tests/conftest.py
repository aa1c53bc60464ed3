# -*- coding: utf-8 -*-
import os
from typing import Dict, Optional

import piexif
import pytest
from PIL import Image

_PIL_FORMAT = {
    '.jpg': 'JPEG', '.jpeg': 'JPEG', '.png': 'PNG', '.gif': 'GIF',
    '.bmp': 'BMP', '.tif': 'TIFF', '.tiff': 'TIFF',
}


def exif_bytes(exif: Optional[Dict[int, bytes]] = None, zeroth: Optional[Dict[int, bytes]] = None) -> bytes:
    return piexif.dump({"0th": zeroth or {}, "Exif": exif or {}, "GPS": {}, "1st": {}, "thumbnail": None})


@pytest.fixture
def make_image(tmp_path):
    """Writes a small solid image and returns its path."""

    def _make(name="photo.jpg", size=(200, 120), color=(10, 20, 30), directory=None, exif=None):
        directory = directory or tmp_path
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(str(directory), name)
        fmt = _PIL_FORMAT.get(os.path.splitext(name)[1].lower(), 'JPEG')
        img = Image.new("RGB", size, color)
        if exif is not None:
            img.save(path, format=fmt, exif=exif)
        else:
            img.save(path, format=fmt)
        return path

    return _make
