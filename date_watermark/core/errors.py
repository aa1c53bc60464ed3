# -*- coding: utf-8 -*-
"""异常类型。

- 启动期致命错误：ConfigurationError / InputPathError
- 单文件错误（批处理中计数后继续）：UnsupportedFormatError / DecodeError /
  CompositeError / EncodeError
- MetadataReadError 只在日期读取内部使用，不会抛到批处理层
"""


class WatermarkError(Exception):
    """Base exception for all watermarking operations."""


class ConfigurationError(WatermarkError):
    """Raised when a watermark setting is out of range or missing."""


class InputPathError(WatermarkError):
    """Raised when the input file or directory cannot be used."""


class UnsupportedFormatError(WatermarkError):
    """Raised for files whose extension is not a supported image format."""


class DecodeError(WatermarkError):
    pass


class CompositeError(WatermarkError):
    pass


class EncodeError(WatermarkError):
    pass


class MetadataReadError(WatermarkError):
    pass
