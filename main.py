"""
Main entry point for the tabular profiling engine.
Reads a CSV, Excel or JSON file and prints its data profile.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from tabular_profiler.exceptions import DataProfilingError
from tabular_profiler.file_utils import FileHandler
from tabular_profiler.profiling_module import DataProfiler


def setup_logging(verbose: bool = False) -> None:
    """Set up logging for the application."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Profile a tabular data file.")
    parser.add_argument('file', help="CSV, Excel or JSON file")
    parser.add_argument('--json', action='store_true',
                        help="print the full profile as JSON")
    parser.add_argument('--workers', type=int, default=1,
                        help="threads for the per-column pass")
    parser.add_argument('--progress', action='store_true',
                        help="show a progress bar over columns")
    parser.add_argument('--verbose', action='store_true')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Profile one file and print the result."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        df = FileHandler().read_file(args.file)
        profiler = DataProfiler(max_workers=args.workers, show_progress=args.progress)
        profile = profiler.profile(df)
    except DataProfilingError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        logging.error(f"Profiling error: {e}")
        return 1

    if args.json:
        print(json.dumps(profile.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(profiler.generate_profile_summary(profile))
    return 0


if __name__ == "__main__":
    sys.exit(main())
