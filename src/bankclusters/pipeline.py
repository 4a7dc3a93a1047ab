"""
End-to-end customer clustering: normalize, load, cluster, score, report.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
import logging

from .algorithms.kmeans import KMeans
from .base.data_structures import RunContext
from .config import RunConfig, DEFAULT_CONFIG
from .exceptions import IOUnavailableError
from .io.loader import load_dataset
from .io.normalize import convert_training_file
from .io.report import write_context_report
from .utils.metrics import score_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Outputs of one pipeline run."""

    context: RunContext
    sse: Optional[float]
    report_path: Path
    normalized_path: Path
    plot_path: Optional[Path] = None


def cluster_customers(input_file: Union[str, Path],
                      output_name: str,
                      config: RunConfig = DEFAULT_CONFIG,
                      plot_path: Optional[Union[str, Path]] = None) -> PipelineResult:
    """Cluster a raw customer file and write the grouped report.

    Args:
        input_file: Raw record file of integer (age, income, credit score) rows
        output_name: Report file name, created under ``config.output_dir``
        config: Run parameters and file locations
        plot_path: Optional image file for a scatter plot of the result

    Returns:
        PipelineResult with the finished run context and its score
    """
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IOUnavailableError(
            f"Cannot create output directory {config.output_dir}: {exc.strerror or exc}"
        ) from exc

    normalized_path = convert_training_file(input_file, config.normalized_path)
    dataset = load_dataset(normalized_path)

    kmeans = KMeans().configure(config.n_clusters, config.n_iterations, config.seed)
    context = kmeans.run(dataset)

    report_path = write_context_report(config.output_path(output_name), context)
    sse = score_context(context)
    if sse is None:
        logger.warning("No iterations were run; records are unassigned and no SSE is available")

    if plot_path is not None:
        # matplotlib is only loaded when a plot is requested
        from .visualization.plot_clusters import save_cluster_plot
        plot_path = save_cluster_plot(plot_path, context)
        logger.info("Saved cluster plot to %s", plot_path)

    return PipelineResult(
        context=context,
        sse=sse,
        report_path=report_path,
        normalized_path=normalized_path,
        plot_path=plot_path,
    )
