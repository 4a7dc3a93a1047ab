"""
Cluster visualization utilities.

Scatter plots of two chosen attributes, colored by cluster label, with the
final centroids overlaid.
"""

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union
import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from torch import Tensor

from ..io.normalize import CUSTOMER_TRANSFORMS


def plot_clusters_2d(records: Tensor,
                     labels: Tensor,
                     centers: Optional[Tensor] = None,
                     ax: Optional[plt.Axes] = None,
                     dims: Tuple[int, int] = (0, 1),
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     axis_names: Optional[Sequence[str]] = None,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot clustering results on two attributes.

    Args:
        records: (n, d) records
        labels: (n,) cluster labels
        centers: Optional (k, d) cluster centroids
        ax: Matplotlib axes (created if None)
        dims: Indices of the attributes on the x and y axes
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        axis_names: Attribute names used for axis labels
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    x_dim, y_dim = dims
    X_np = records.detach().cpu().numpy()
    labels_np = labels.detach().cpu().numpy()

    unique_labels = np.unique(labels_np)
    n_clusters = len(unique_labels)
    cmap = matplotlib.colormaps['tab10' if n_clusters <= 10 else 'tab20']

    for i, label in enumerate(unique_labels):
        mask = labels_np == label
        ax.scatter(X_np[mask, x_dim], X_np[mask, y_dim],
                   color=cmap(i % cmap.N),
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {label}')

    if centers is not None:
        centers_np = centers.detach().cpu().numpy()
        ax.scatter(centers_np[:, x_dim], centers_np[:, y_dim],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids')

    if axis_names is not None:
        ax.set_xlabel(axis_names[x_dim])
        ax.set_ylabel(axis_names[y_dim])

    if show_legend:
        ax.legend(loc='best')
    if title:
        ax.set_title(title)

    return ax


def save_cluster_plot(path: Union[str, Path], context,
                      dims: Tuple[int, int] = (0, 1),
                      title: Optional[str] = None) -> Path:
    """Render a finished RunContext to an image file."""
    path = Path(path)
    if context.dataset.n_attributes == 1:
        dims = (0, 0)
    axis_names = None
    if context.dataset.n_attributes == len(CUSTOMER_TRANSFORMS):
        axis_names = [t.name for t in CUSTOMER_TRANSFORMS]

    fig, ax = plt.subplots(figsize=(8, 6))
    try:
        plot_clusters_2d(context.records, context.labels, context.centroids,
                         ax=ax, dims=dims, axis_names=axis_names,
                         title=title or f'{context.n_clusters} clusters')
        fig.savefig(path, bbox_inches='tight')
    finally:
        plt.close(fig)

    return path
