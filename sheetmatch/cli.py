"""
CLI interface for user interactions.
Provides commands for loading datasets, inspecting them, and running matches.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tabulate import tabulate

from .config_loader import ConfigLoader, MatcherConfig
from .csv_parser import CSVParser
from .dataset_store import DatasetNotFoundError, DatasetStore
from .export_pipeline import ExportPipeline
from .ingestion_pipeline import IngestionPipeline
from .logging_setup import setup_logging
from .match_pipeline import MatchPipeline
from .models import MatchRequest, MatchResult, original_row_number
from .utils import clamp_threshold, parse_index_list, truncate_string

logger = logging.getLogger(__name__)


class CLI:
    """Command-line interface for dataset matching."""

    def __init__(self, config: MatcherConfig):
        """
        Initialize CLI.

        Args:
            config: Loaded matcher configuration
        """
        self.config = config
        self.store = DatasetStore()
        parser = CSVParser(delimiter=config.csv_delimiter, encoding=config.csv_encoding)
        self.ingestion = IngestionPipeline(self.store, parser)

    def load(self, files: List[Path]) -> List[str]:
        """Load input files into the store."""
        return self.ingestion.load_files(files)

    def list_datasets(self) -> None:
        """Print loaded datasets with their sizes."""
        names = self.store.names()
        if not names:
            print("No datasets loaded")
            return

        table_data = []
        for name in names:
            dataset = self.store.get(name)
            table_data.append([name, dataset.row_count, dataset.column_count,
                               truncate_string(', '.join(dataset.headers), 60)])

        print(tabulate(table_data,
                       headers=['Dataset', 'Rows', 'Columns', 'Headers'],
                       tablefmt='grid'))

    def show_dataset(self, name: str, limit: int = 20) -> None:
        """
        Print a dataset's headers and first rows.

        Args:
            name: Dataset name
            limit: Number of rows to display
        """
        dataset = self.store.get(name)
        table_data = [[original_row_number(idx), *row]
                      for idx, row in enumerate(dataset.rows[:limit])]

        print(f"\nDataset {name} (showing {len(table_data)} of {dataset.row_count} rows):\n")
        print(tabulate(table_data, headers=['Row', *dataset.headers], tablefmt='grid'))

    def run_match(self, request: MatchRequest) -> MatchResult:
        """Run a match and print one summary line per group."""
        result = MatchPipeline(self.store).run(request)

        if not result.groups:
            print(f"No matches between {request.sheet1} and {request.sheet2} "
                  f"({result.comparisons} column pairs compared)")
            return result

        table_data = [
            [idx, group.header1, group.header2, len(group), group.exact_count, group.fuzzy_count]
            for idx, group in enumerate(result.groups)
        ]
        print(f"\n{request.sheet1} vs {request.sheet2}: {result.comparisons} column pairs compared, "
              f"{len(result.groups)} match groups, {result.total_matches} matches\n")
        print(tabulate(table_data,
                       headers=['Group', request.sheet1, request.sheet2, 'Matches', 'Exact', 'Fuzzy'],
                       tablefmt='grid'))
        return result

    def export(self, result: MatchResult, output: Optional[Path], format: str,
               group_index: Optional[int], ignore_a: List[int], ignore_b: List[int]) -> Optional[Path]:
        """
        Export a match result.

        Args:
            result: Result of run_match
            output: Output file path (None = default name under the export dir)
            format: 'excel', 'csv' or 'json'
            group_index: Export one group only
            ignore_a: Column indices of the first dataset to leave out
            ignore_b: Column indices of the second dataset to leave out
        """
        if output is not None:
            output = Path(output)
            pipeline = ExportPipeline(output.parent)
            filename = output.name
        else:
            pipeline = ExportPipeline(self.config.export_dir)
            filename = None

        path = pipeline.export_result(result, self.store, format=format,
                                      group_index=group_index, filename=filename,
                                      ignore_a=ignore_a, ignore_b=ignore_b)
        if path is None:
            print("Nothing to export")
        else:
            print(f"✓ Exported {pipeline.stats.total_records} matches to {path}")
        return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find matching columns between two tabular datasets")

    parser.add_argument('--config', type=Path, default=Path('./config.yaml'),
                        help='Config path')
    parser.add_argument('--log-level', type=str, help='Override configured log level')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # datasets command
    datasets_parser = subparsers.add_parser('datasets', help='List datasets in input files')
    datasets_parser.add_argument('files', type=Path, nargs='+', help='CSV/TSV files')

    # show command
    show_parser = subparsers.add_parser('show', help='Show a dataset')
    show_parser.add_argument('files', type=Path, nargs='+', help='CSV/TSV files')
    show_parser.add_argument('--dataset', type=str, required=True, help='Dataset name')
    show_parser.add_argument('--limit', type=int, default=20, help='Number of rows')

    # match command
    match_parser = subparsers.add_parser('match', help='Match columns of two datasets')
    match_parser.add_argument('files', type=Path, nargs='+', help='CSV/TSV files')
    match_parser.add_argument('--sheet1', type=str, required=True, help='First dataset name')
    match_parser.add_argument('--sheet2', type=str, required=True, help='Second dataset name')
    match_parser.add_argument('--fuzzy', action=argparse.BooleanOptionalAction, default=None,
                              help='Enable or disable fuzzy matching (default: from config)')
    match_parser.add_argument('--threshold', type=int, help='Fuzzy threshold (0-100)')
    match_parser.add_argument('--export', type=Path, help='Export path')
    match_parser.add_argument('--format', type=str, default='excel',
                              choices=sorted(ExportPipeline.EXPORTERS), help='Export format')
    match_parser.add_argument('--group', type=int, help='Export only this match group')
    match_parser.add_argument('--ignore1', type=str, help='Comma-separated columns of sheet1 to leave out')
    match_parser.add_argument('--ignore2', type=str, help='Comma-separated columns of sheet2 to leave out')
    match_parser.add_argument('--export-default', action='store_true',
                              help='Export to the configured export directory')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = ConfigLoader(args.config.parent).load_or_default(args.config.name)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_dir, args.log_level or config.log_level,
                  json_format=config.json_logs)

    cli = CLI(config)

    try:
        cli.load(args.files)

        if args.command == 'datasets':
            cli.list_datasets()
        elif args.command == 'show':
            cli.show_dataset(args.dataset, limit=args.limit)
        elif args.command == 'match':
            use_fuzzy = config.use_fuzzy if args.fuzzy is None else args.fuzzy
            threshold = config.fuzzy_threshold if args.threshold is None else args.threshold
            request = MatchRequest(
                sheet1=args.sheet1,
                sheet2=args.sheet2,
                use_fuzzy=use_fuzzy,
                fuzzy_threshold=clamp_threshold(threshold),
            )
            result = cli.run_match(request)

            if args.export or args.export_default:
                cli.export(result, args.export, args.format, args.group,
                           parse_index_list(args.ignore1), parse_index_list(args.ignore2))
    except (DatasetNotFoundError, FileNotFoundError, ValueError, IndexError) as e:
        logger.error(f"Command {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
