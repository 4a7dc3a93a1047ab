"""
Report writer.

Records are written grouped by cluster label (assignment index + 1), in
ascending label order and record order within a group. Each line holds the
record's attribute values followed by its label. Every group, even an empty
one, is followed by two newlines, and the report ends with the cluster count.
"""

from pathlib import Path
from typing import Union
import logging
from torch import Tensor

from ..exceptions import IOUnavailableError

logger = logging.getLogger(__name__)


def format_record(values, label: int) -> str:
    return " ".join([*(repr(float(v)) for v in values), str(label)])


def format_report(records: Tensor, assignments: Tensor, n_clusters: int) -> str:
    """Render the grouped report as a string.

    Args:
        records: (n, d) records
        assignments: (n,) cluster indices; unassigned records (-1) are omitted
        n_clusters: Number of clusters in the run
    """
    rows = records.tolist()
    labels = (assignments + 1).tolist()

    lines = []
    for label in range(1, n_clusters + 1):
        for row, row_label in zip(rows, labels):
            if row_label == label:
                lines.append(format_record(row, label) + "\n")
        lines.append("\n\n")

    lines.append(f"\nNumber of Clusters: {n_clusters}\n")
    return "".join(lines)


def write_report(path: Union[str, Path], records: Tensor, assignments: Tensor,
                 n_clusters: int) -> Path:
    """Write the grouped report to ``path``.

    Raises:
        IOUnavailableError: If the file cannot be created
    """
    path = Path(path)
    report = format_report(records, assignments, n_clusters)
    try:
        with open(path, 'w', encoding='utf-8') as fh:
            fh.write(report)
    except OSError as exc:
        raise IOUnavailableError(f"Cannot write {path}: {exc.strerror or exc}") from exc

    logger.info("Wrote report for %d records to %s", records.shape[0], path)
    return path


def write_context_report(path: Union[str, Path], context) -> Path:
    """Write the report for a finished RunContext."""
    return write_report(path, context.records, context.assignments, context.n_clusters)
