"""Run the turnover pipeline over a document directory."""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config import Config  # noqa: E402
from errors import PipelineError  # noqa: E402
from exporters import CSVExporter, SummaryGenerator  # noqa: E402
from models import Session, TokenExpiryValidator  # noqa: E402
from processors import DocumentPipeline  # noqa: E402
from utils.logging_config import setup_logging, shutdown_logging  # noqa: E402


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract turnover totals from a directory of financial text records"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        help="Directory with documents (defaults to SOURCE_DIR of the environment)",
    )
    parser.add_argument("--env", "-e", help="Environment name from environments.json")
    parser.add_argument(
        "--config-file", default="environments.json", help="Environments file"
    )
    parser.add_argument("--year", help="Processing year (default: FILTER_YEAR)")
    parser.add_argument("--output-dir", help="Directory for statistics and reports")
    parser.add_argument(
        "--max-file-size-mb", type=int, help="Largest accepted document in MB"
    )
    parser.add_argument(
        "--summary", action="store_true", help="Also write CSV ledgers and a markdown summary"
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    return parser.parse_args(argv)


def load_session() -> Session:
    """Read the access session from the environment, exiting on a malformed expiry."""
    try:
        return Session.from_env()
    except ValueError as e:
        print(f"Error: invalid access session, SESSION_EXPIRES_AT is not ISO 8601: {e}")
        sys.exit(1)


def main(argv=None):
    """Process one directory and print the results."""
    args = parse_args(argv)

    if Path(args.config_file).exists():
        try:
            env_name = Config.load_environment(args.env, args.config_file)
        except (ValueError, KeyError) as e:
            print(f"Error loading environment: {e}")
            sys.exit(1)
    else:
        Config.load_from_env()
        env_name = "environment variables"

    if args.year:
        Config.FILTER_YEAR = Config.validate_year(args.year)
    if args.output_dir:
        Config.OUTPUT_DIR = Path(args.output_dir)
    if args.max_file_size_mb:
        Config.MAX_FILE_SIZE_MB = Config.validate_max_size(args.max_file_size_mb)

    session = load_session()

    Config.ensure_directories()
    listener = setup_logging(log_file=str(Config.OUTPUT_DIR / Config.LOG_FILE), async_sink=True)

    directory = Path(args.directory) if args.directory else Config.SOURCE_DIR

    print()
    print("=" * 80)
    print("DOCUMENT TURNOVER ANALYSIS")
    print("=" * 80)
    print()
    print(f"Configuration:    {env_name}")
    print(f"Source Directory: {directory}")
    print(f"Output Directory: {Config.OUTPUT_DIR}")
    print(f"Processing Year:  {Config.FILTER_YEAR}")
    print()

    pipeline = DocumentPipeline(
        session=session,
        session_validator=TokenExpiryValidator(token_length=Config.SESSION_TOKEN_LENGTH),
        echo=print,
        show_progress=not args.no_progress,
    )

    start_time = time.time()
    try:
        result = pipeline.process_directory(directory)
    except PipelineError as e:
        print(f"\nError: {e}")
        shutdown_logging(listener)
        sys.exit(1)

    if args.summary:
        exporter = CSVExporter(output_dir=Config.OUTPUT_DIR)
        for file_type, file_path in exporter.export(result.results).items():
            print(f"  {file_type:12s}: {file_path}")

        summary_file = SummaryGenerator(output_dir=Config.OUTPUT_DIR).generate_summary(result)
        print(f"  {'summary':12s}: {summary_file}")

    print()
    print(f"Statistics file:  {result.stats_file}")
    print(f"Invalid report:   {result.report_file}")
    print(f"The processing of documents is completed in {time.time() - start_time:.2f}s")
    print()

    shutdown_logging(listener)


if __name__ == "__main__":
    main()
