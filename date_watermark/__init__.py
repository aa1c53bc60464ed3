# -*- coding: utf-8 -*-
"""按 EXIF 拍摄日期给图片加日期水印。"""
__version__ = "1.0.0"
