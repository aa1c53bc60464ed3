# -*- coding: utf-8 -*-
"""核心逻辑：日期读取、定位、合成与批处理。"""
from .batch import BatchProcessor, FileTask, Outcome, ProcessingStats, tally
from .composer import compose_date_watermark
from .config import WatermarkConfig, parse_color
from .date_reader import UNKNOWN_DATE, DateResolver
from .errors import (
    CompositeError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    InputPathError,
    MetadataReadError,
    UnsupportedFormatError,
    WatermarkError,
)
from .fonts import FontWeight
from .placement import DrawOrigin, Position, place

__all__ = [
    "BatchProcessor", "FileTask", "Outcome", "ProcessingStats", "tally",
    "compose_date_watermark", "WatermarkConfig", "parse_color",
    "UNKNOWN_DATE", "DateResolver", "FontWeight", "DrawOrigin", "Position", "place",
    "WatermarkError", "ConfigurationError", "InputPathError", "UnsupportedFormatError",
    "DecodeError", "CompositeError", "EncodeError", "MetadataReadError",
]
