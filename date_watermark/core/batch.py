# -*- coding: utf-8 -*-
"""批量处理：逐个文件执行 解码 → 读日期 → 合成 → 保存。

单个文件失败只计数并记录日志，不影响后续文件。
每个文件的结果是一个 Outcome，统计由结果流累加得到。
"""
from __future__ import annotations
import copy
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple, Optional

from .composer import compose_date_watermark
from .config import WatermarkConfig
from .date_reader import DateResolver
from .errors import InputPathError, UnsupportedFormatError, WatermarkError
from .exporter import image_format_for, output_dir_for, output_path_for, save_image
from .image_loader import ImageLoader, has_supported_ext, require_supported

logger = logging.getLogger(__name__)


class Outcome(Enum):
    PROCESSED = "processed"
    SKIPPED = "skipped"
    ERRORED = "errored"


@dataclass
class ProcessingStats:
    processed: int = 0
    skipped: int = 0
    errored: int = 0

    @property
    def total(self) -> int:
        return self.processed + self.skipped + self.errored

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.PROCESSED:
            self.processed += 1
        elif outcome is Outcome.SKIPPED:
            self.skipped += 1
        else:
            self.errored += 1

    def reset(self) -> None:
        self.processed = self.skipped = self.errored = 0


def tally(outcomes: Iterable[Outcome]) -> ProcessingStats:
    stats = ProcessingStats()
    for outcome in outcomes:
        stats.record(outcome)
    return stats


def format_summary(stats: ProcessingStats) -> str:
    rule = "=" * 52
    return "\n".join([
        "",
        rule,
        "Processing Summary:",
        f"  Files processed successfully: {stats.processed}",
        f"  Files skipped: {stats.skipped}",
        f"  Files with errors: {stats.errored}",
        f"  Total files: {stats.total}",
        rule,
    ])


class FileTask(NamedTuple):
    source: str
    output_dir: str


class BatchProcessor:
    def __init__(
        self,
        config: WatermarkConfig,
        resolver: Optional[DateResolver] = None,
        loader: Optional[ImageLoader] = None,
    ):
        self.config = config
        self.resolver = resolver or DateResolver()
        self.loader = loader or ImageLoader()
        self._stats = ProcessingStats()

    @property
    def stats(self) -> ProcessingStats:
        return copy.copy(self._stats)

    def reset_counters(self) -> None:
        self._stats.reset()

    def process_file(self, task: FileTask) -> Outcome:
        """Runs the whole pipeline for one file and reports how it went."""
        name = os.path.basename(task.source)
        try:
            require_supported(task.source)
        except UnsupportedFormatError as exc:
            logger.warning("%s", exc)
            return Outcome.SKIPPED

        print(f"Processing: {name}")
        image = watermarked = None
        try:
            image = self.loader.load(task.source)
            date_text = self.resolver.resolve(task.source)
            watermarked = compose_date_watermark(image, date_text, self.config)
            target = output_path_for(task.source, task.output_dir)
            save_image(watermarked, target, image_format_for(task.source))
        except WatermarkError as exc:
            logger.error("%s: %s", type(exc).__name__, exc)
            return Outcome.ERRORED
        except Exception:
            logger.exception("Unexpected error processing file: %s", name)
            return Outcome.ERRORED
        finally:
            for img in (watermarked, image):
                if img is not None:
                    img.close()

        print(f"  ✓ Saved: {os.path.basename(target)} (watermark: {date_text})")
        return Outcome.PROCESSED

    def _run(self, task: FileTask) -> Outcome:
        outcome = self.process_file(task)
        self._stats.record(outcome)
        return outcome

    def process_single_file(self, path: str) -> bool:
        path = os.path.abspath(os.fspath(path))
        output_dir = output_dir_for(os.path.dirname(path))
        return self._run(FileTask(path, output_dir)) is Outcome.PROCESSED

    def process_directory(self, directory: str) -> bool:
        """Watermarks every supported file directly inside directory.

        Returns True if at least one file was processed successfully.
        """
        directory = os.path.abspath(os.fspath(directory))
        if not os.path.isdir(directory):
            raise InputPathError(f"Invalid input directory: {directory}")

        output_dir = output_dir_for(directory)
        files = self.loader.collect(directory)
        images = [p for p in files if has_supported_ext(p)]
        if not images:
            print(f"No supported image files found in directory: {directory}")
            return False

        print(f"Found {len(images)} image files to process")
        print(f"Output directory: {output_dir}")

        outcomes = [self._run(FileTask(p, output_dir)) for p in files]
        print(format_summary(self._stats))
        return Outcome.PROCESSED in outcomes
