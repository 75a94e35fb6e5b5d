"""Pipeline orchestrator: walk a directory, quarantine rejects, aggregate turnover."""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from tqdm import tqdm

from config import Config
from errors import (
    FileProcessingError,
    InvalidDirectoryError,
    InvalidSessionError,
    QuarantineError,
    ReportExportError,
)
from extractors.factory import GrammarFactory
from models.batch_result import FileResult, FileStatus, RunCounters, RunResult
from models.rejection import RejectionReason
from models.session import Session, SessionValidator, TokenExpiryValidator
from processors.amount_extractor import AmountExtractor
from processors.content_validator import ContentValidator
from processors.eligibility import EligibilityFilter
from stats.aggregator import StatisticsAggregator
from stats.invalid_tracker import InvalidFileTracker
from utils.logging_config import get_logger

Echo = Callable[[str], None]


class DocumentPipeline:
    """Route every file of a directory to the aggregator or to quarantine."""

    def __init__(
        self,
        session: Session,
        session_validator: Optional[SessionValidator] = None,
        year: Optional[str] = None,
        max_file_size: Optional[int] = None,
        extension: Optional[str] = None,
        invalid_dir_name: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        echo: Optional[Echo] = None,
        show_progress: bool = False,
        grammars: Optional[GrammarFactory] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            session: Access session owned by the caller
            session_validator: Checks the session before a run (defaults to
                TokenExpiryValidator with Config.SESSION_TOKEN_LENGTH)
            year: Processing year (defaults to Config.FILTER_YEAR)
            max_file_size: Largest accepted file in bytes (defaults to Config)
            extension: Recognized text extension (defaults to Config.TEXT_EXTENSION)
            invalid_dir_name: Quarantine subdirectory name (defaults to Config)
            logger: Receives the structured event stream
            echo: Receives human-readable console text; nothing is printed without it
            show_progress: Display a tqdm progress bar during the walk
            grammars: Grammar set (defaults to the built-in Check/Invoice/Order)
        """
        self.session = session
        self.session_validator = session_validator or TokenExpiryValidator(
            token_length=Config.SESSION_TOKEN_LENGTH
        )
        self.year = Config.FILTER_YEAR if year is None else year
        self.max_file_size = (
            Config.max_file_size_bytes() if max_file_size is None else max_file_size
        )
        self.extension = Config.TEXT_EXTENSION if extension is None else extension
        self.invalid_dir_name = (
            Config.INVALID_DIR_NAME if invalid_dir_name is None else invalid_dir_name
        )
        self.logger = logger or get_logger(__name__)
        self.echo = echo
        self.show_progress = show_progress

        self.grammars = grammars or GrammarFactory()
        self.eligibility = EligibilityFilter(self.year, self.extension)
        self.validator = ContentValidator(self.grammars, self.max_file_size)

        # Per-run state, replaced on every process_directory() call
        self._reset()

    def _emit(self, text: str) -> None:
        if self.echo:
            self.echo(text)

    def _reset(self) -> None:
        self.counters = RunCounters()
        self.statistics = StatisticsAggregator()
        self.invalid_files = InvalidFileTracker()
        self.extractor = AmountExtractor(self.statistics, self.grammars, self.max_file_size)

    def _check_session(self) -> None:
        self.logger.info("Checking the access token...")
        if not self.session_validator.is_valid(self.session.token, self.session.expires_at):
            self.logger.error("Invalid access token.")
            raise InvalidSessionError()

    def process_directory(
        self,
        directory: Path,
        stats_file: Optional[Path] = None,
        report_file: Optional[Path] = None,
    ) -> RunResult:
        """
        Process every regular file directly inside a directory.

        Args:
            directory: Directory holding the documents (not walked recursively)
            stats_file: Statistics export path (defaults to Config.stats_file())
            report_file: Invalid-file report path (defaults to Config.report_file())

        Returns:
            RunResult with per-file outcomes, counters and statistics

        Raises:
            InvalidSessionError: The session is absent or expired; nothing is touched
            InvalidDirectoryError: The directory does not exist, or its quarantine
                folder cannot be created
            QuarantineError: A rejected file could not be moved
            StatisticsExportError: The statistics file could not be written
        """
        self._reset()
        self._check_session()

        directory = Path(directory)
        if not directory.is_dir():
            self.logger.error(
                f"The specified directory does not exist or is not a directory: {directory}"
            )
            raise InvalidDirectoryError(directory)

        stats_file = Path(stats_file or Config.stats_file())
        report_file = Path(report_file or Config.report_file())

        invalid_dir = directory / self.invalid_dir_name
        try:
            invalid_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.error(f"The invalid folder cannot be created: {invalid_dir} ({e})")
            raise InvalidDirectoryError(invalid_dir) from e

        files = sorted(path for path in directory.iterdir() if path.is_file())

        self.logger.info(f"The beginning of parsing files in a directory: {directory}")
        self._emit(f"The beginning of parsing files in a directory: {directory}")

        run_result = RunResult(
            started_at=datetime.now(),
            input_directory=str(directory),
            quarantine_directory=str(invalid_dir),
            stats_file=str(stats_file),
            report_file=str(report_file),
        )

        with tqdm(
            total=len(files), desc="Processing documents", disable=not self.show_progress
        ) as pbar:
            for path in files:
                result = self._process_single_file(path, invalid_dir)
                run_result.results.append(result)

                pbar.set_postfix_str(f"{result.filename[:40]} ({result.status.value})")
                pbar.update(1)

        run_result.completed_at = datetime.now()
        run_result.counters = self.counters.model_copy()
        run_result.invalid_files = self.invalid_files.records

        self._log_processing_results(report_file)

        self.statistics.display(self.echo)
        self.statistics.export(stats_file)
        run_result.statistics = self.statistics.snapshot()

        self.logger.info("Statistics have been saved successfully.")
        self._emit("Statistics have been saved successfully.")
        return run_result

    def _process_single_file(self, path: Path, invalid_dir: Path) -> FileResult:
        """
        Route one file through eligibility, content validation and extraction.

        Args:
            path: File to process
            invalid_dir: Quarantine directory

        Returns:
            FileResult in a terminal state (aggregated or quarantined)
        """
        start_time = time.time()
        self.counters.total_processed += 1
        result = FileResult(filename=path.name, file_path=str(path))

        try:
            eligibility = self.eligibility.evaluate(path)
            result.status = FileStatus.ELIGIBILITY_CHECKED
            if not eligibility.eligible:
                self._quarantine(path, invalid_dir, eligibility.reason, result)
                result.processing_time_seconds = time.time() - start_time
                return result

            if not self.validator.has_parseable_line(path):
                self._quarantine(path, invalid_dir, RejectionReason.INCORRECT_CONTENT, result)
                result.processing_time_seconds = time.time() - start_time
                return result
            result.status = FileStatus.CONTENT_VALIDATED

            amounts = self.extractor.parse(path)
            result.status = FileStatus.EXTRACTED

            self.extractor.record(amounts)
            result.amounts = amounts
            result.status = FileStatus.AGGREGATED
            self.counters.valid_count += 1
            self.logger.info(f"The file has been processed successfully: {path.name}")

        except FileProcessingError as e:
            self.logger.error(f"Error processing the file {path.name}: {e}")
            result.error_message = str(e)
            if path.exists():
                self._quarantine(path, invalid_dir, e.rejection_reason, result)
            else:
                self.logger.warning(f"The file disappeared before it could be moved: {path.name}")
                self._record_rejection(path.name, e.rejection_reason, result)

        result.processing_time_seconds = time.time() - start_time
        return result

    def _quarantine(
        self,
        path: Path,
        invalid_dir: Path,
        reason: RejectionReason,
        result: FileResult,
    ) -> None:
        """
        Move a rejected file into quarantine and record why.

        An existing file of the same name in quarantine is replaced.

        Raises:
            QuarantineError: If the move fails
        """
        destination = invalid_dir / path.name
        try:
            path.replace(destination)
        except OSError as e:
            self.logger.error(f"The file could not be moved {path.name}: {e}")
            raise QuarantineError(path.name, destination, e) from e

        self._record_rejection(path.name, reason, result)
        self.logger.info(
            f"The file has been moved to the invalid folder: {path.name} ({reason.value})"
        )

    def _record_rejection(
        self, filename: str, reason: RejectionReason, result: FileResult
    ) -> None:
        self.invalid_files.record(reason, filename)
        self.counters.invalid_count += 1
        result.status = FileStatus.QUARANTINED
        result.rejection_reason = reason

    def _log_processing_results(self, report_file: Path) -> None:
        counters = self.counters
        self.logger.info(
            f"File processing results: total={counters.total_processed}, "
            f"valid={counters.valid_count}, invalid={counters.invalid_count}"
        )
        self._emit(
            "\n======== FILE PROCESSING RESULTS ========\n"
            f"Total files: {counters.total_processed}\n"
            f"Valid files: {counters.valid_count}\n"
            f"Invalid files: {counters.invalid_count}"
        )

        self._emit(self.invalid_files.generate_report())
        try:
            self.invalid_files.export_report(report_file)
        except ReportExportError as e:
            self.logger.error(str(e))
