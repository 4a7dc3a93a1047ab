"""Run configuration for the customer clustering pipeline."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RunConfig:
    """Configuration object for a clustering run.

    The defaults are the reference configuration: four clusters, one hundred
    iterations and a fixed seed so that reports can be reproduced.
    """

    n_clusters: int = 4
    n_iterations: int = 100
    seed: int = 58947

    # Files
    output_dir: Path = Path("output")
    normalized_name: str = "normalizedTemp.txt"

    @property
    def normalized_path(self) -> Path:
        """Intermediate file holding the normalized records."""
        return self.output_dir / self.normalized_name

    def output_path(self, name: str) -> Path:
        """Location of a report file named ``name``."""
        return self.output_dir / name

    def with_overrides(self,
                       n_clusters: Optional[int] = None,
                       n_iterations: Optional[int] = None,
                       seed: Optional[int] = None,
                       output_dir: Optional[Path] = None) -> 'RunConfig':
        """Return a copy with every non-None argument replaced."""
        changes = {
            'n_clusters': n_clusters,
            'n_iterations': n_iterations,
            'seed': seed,
            'output_dir': Path(output_dir) if output_dir is not None else None,
        }
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


DEFAULT_CONFIG = RunConfig()
