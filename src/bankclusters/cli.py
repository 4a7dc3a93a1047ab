"""Command-line entry point for customer clustering.

Run the module directly as a script::

    python -m bankclusters --input customers.txt --output clusters.txt

Input and output names that are not given on the command line are prompted
for. The report is written under the output directory (``output/`` by
default) next to the normalized intermediate file.
"""

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from .config import DEFAULT_CONFIG
from .exceptions import ClusteringError
from .pipeline import cluster_customers


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cluster bank customers with k-means")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Raw customer file (prompted for when omitted).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Report file name inside the output directory (prompted for when omitted).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_CONFIG.output_dir,
        help="Directory for the report and the normalized intermediate file.",
    )
    parser.add_argument(
        "--clusters",
        type=int,
        default=DEFAULT_CONFIG.n_clusters,
        help="Number of clusters.",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_CONFIG.n_iterations,
        help="Number of assign/update iterations.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_CONFIG.seed,
        help="Random seed for the initial centroids.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Optional image file for a scatter plot of the clusters.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None,
         prompt: Callable[[str], str] = input) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    input_file = args.input if args.input is not None else Path(prompt("Enter input file: ").strip())
    output_name = args.output if args.output is not None else prompt("Enter output file: ").strip()

    config = DEFAULT_CONFIG.with_overrides(
        n_clusters=args.clusters,
        n_iterations=args.iterations,
        seed=args.seed,
        output_dir=args.output_dir,
    )

    try:
        result = cluster_customers(input_file, output_name, config, plot_path=args.plot)
    except ClusteringError as exc:
        logging.error("%s: %s", type(exc).__name__, exc)
        return 1

    logging.info("Report written to %s", result.report_path)
    if result.sse is None:
        print("SSE: unavailable")
    else:
        print(f"SSE: {result.sse:f}")
    return 0
