"""
Keyword Count Pipeline

Resolves the keyword set, scans a file or every entry of a directory, stores
one frequency map per file and writes the JSON report.
"""

import logging
import os
import stat
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from kwc_core.errors import MissingInputError, NotFoundError
from kwc_core.utils import file_base_name
from .base import AbstractPipeline
from ..filters import LineFilter, create_line_filter
from ..keywords import resolve_keywords
from ..processors import KeywordCountProcessor
from ..report_generator import KeywordCountReportGenerator
from ..store import ResultStore
from ..types import FrequencyMap, KeywordCountConfig, KeywordSpec, ScanStats

logger = logging.getLogger(__name__)


class KeywordCountPipeline(AbstractPipeline):
    """
    Pipeline counting keyword occurrences per file.

    Directory entries are scanned concurrently on a bounded thread pool. The
    report is written once all scans have finished; with
    ``incremental_writes`` it is also rewritten after every completed file,
    under the store lock.
    """

    def __init__(self,
                 config: KeywordCountConfig,
                 line_filter: Optional[LineFilter] = None,
                 report_generator: Optional[KeywordCountReportGenerator] = None):
        """
        Initialize the keyword count pipeline.

        Args:
            config: Run configuration
            line_filter: Backend isolating keyword matches (from ``config.line_filter`` if omitted)
            report_generator: Report writer (built from ``config`` if omitted)
        """
        self.config = config
        self.line_filter = line_filter or create_line_filter(config.line_filter)
        self.report_generator = report_generator or KeywordCountReportGenerator(config.report_config())

        self.keywords: List[str] = []
        self.processor: Optional[KeywordCountProcessor] = None
        self.results = ResultStore()
        self.stats = ScanStats()

    def get_name(self) -> str:
        return "KeywordCountPipeline"

    def get_keywords(self) -> List[str]:
        return resolve_keywords(self.config.keywords_list, self.config.key_name)

    def _ensure_processor(self) -> KeywordCountProcessor:
        """Build the processor on first use.

        ``run()`` resets it for every run; ``scan_file`` and ``scan_directory``
        called on their own resolve the keywords here.
        """
        if self.processor is None:
            self.keywords = self.keywords or self.get_keywords()
            self.processor = KeywordCountProcessor(
                keywords=self.keywords,
                ignore_case=self.config.ignore_case,
                line_filter=self.line_filter,
            )
        return self.processor

    def run(self, target: Optional[Path] = None) -> ResultStore:
        """Run the analysis and return the populated results store."""
        target = Path(target) if target is not None else self.config.target
        if target is None:
            raise MissingInputError("Target not provided")

        self.results = ResultStore()
        self.stats = ScanStats(start_time=time.time())

        self.keywords = self.get_keywords()
        self.processor = None
        self._ensure_processor()
        logger.info("Counting %d keywords in %s", len(self.keywords), target)

        try:
            mode = target.stat().st_mode
        except OSError as exc:
            raise NotFoundError(f"Target not found: {target}") from exc

        if stat.S_ISREG(mode):
            self.stats.total_files = 1
            self.scan_file(target)
        elif stat.S_ISDIR(mode):
            self.scan_directory(target)
        else:
            logger.warning("Skipping %s: neither a file nor a directory", target)

        self.write_report()

        self.stats.end_time = time.time()
        logger.info(
            "Scanned %d file(s), %d match(es) in %.2fs",
            self.stats.scanned_files, self.stats.total_matches, self.stats.total_time,
        )
        return self.results

    def scan_file(self, path: Path) -> FrequencyMap:
        """Count keywords in one file and register the map under its base name.

        Usable without ``run()``; the report is then only written with
        ``incremental_writes`` or an explicit ``write_report()``.
        """
        frequency_map = self._ensure_processor().process(path)
        name = file_base_name(path)

        with self.results.locked() as results:
            if name in results:
                logger.warning("Overwriting results for '%s' with %s", name, path)
            results[name] = frequency_map
            self.stats.scanned_files += 1
            self.stats.total_matches += sum(frequency_map.values())
            if self.config.incremental_writes:
                self.write_report()

        logger.debug("Scanned %s: %s", path, frequency_map)
        return frequency_map

    def scan_directory(self, directory: Path) -> None:
        """Scan every immediate entry of ``directory``; the first failure propagates."""
        directory = Path(directory)
        try:
            entries = sorted(os.listdir(directory))
        except OSError as exc:
            raise NotFoundError(f"Cannot list directory: {directory}") from exc

        self._ensure_processor()
        paths = [directory / entry for entry in entries]
        self.stats.total_files += len(paths)
        if not paths:
            logger.info("No entries found in %s", directory)
            return

        max_workers = min(self.config.max_workers, len(paths))
        logger.info("Scanning %d entries in %s with %d workers", len(paths), directory, max_workers)

        progress_bar = tqdm(total=len(paths), desc="Scanning files") if self.config.show_progress else None

        try:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                future_to_path = {executor.submit(self.scan_file, path): path for path in paths}
                try:
                    for future in as_completed(future_to_path):
                        future.result()
                        if progress_bar:
                            progress_bar.update(1)
                except Exception as exc:
                    logger.error("Scan of %s failed: %s", future_to_path[future], exc)
                    for pending in future_to_path:
                        pending.cancel()
                    raise
        finally:
            if progress_bar:
                progress_bar.close()

    def write_report(self):
        """Serialize the whole store to every configured report format."""
        with self.results.locked():
            report_paths = self.report_generator.generate_all(self.results)
            self.stats.report_writes += 1
        return report_paths


def analyze(target,
            keywords_list: KeywordSpec,
            line_filter: Optional[LineFilter] = None,
            **options) -> ResultStore:
    """
    Analyze a file or directory for keywords and write the JSON report.

    Args:
        target: File or directory to analyze
        keywords_list: Keyword list or path to a keyword file
        line_filter: Optional line filter override
        **options: Remaining ``KeywordCountConfig`` fields (``output_path``, ``ignore_case``, ...)

    Returns:
        ResultStore mapping file base names to keyword counts
    """
    config = KeywordCountConfig(target=Path(target), keywords_list=keywords_list, **options)
    return KeywordCountPipeline(config, line_filter=line_filter).run()
