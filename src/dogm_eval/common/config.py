"""
Evaluator configuration using OmegaConf structured configs.

The evaluator thresholds live in a single dataclass so they can be tuned per
instance. Values are loaded from YAML files and CLI-style ``key=value``
overrides on top of the dataclass defaults.
"""

import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from omegaconf import OmegaConf, DictConfig


logger = logging.getLogger(__name__)

MATCHING_POLICIES = ("greedy", "one_to_one")


@dataclass
class EvaluatorConfig:
    """Thresholds used by the precision evaluator."""
    # World units; a ground-truth vehicle must be strictly closer than this to match.
    max_assignment_distance: float = 5.0
    # Grid units; neighborhood radius of the density clustering.
    max_neighbor_distance: float = 3.0
    min_neighbors: int = 5
    matching: str = "greedy"

    def validate(self) -> None:
        """
        Check that all thresholds are usable.

        Raises:
            ValueError: If a threshold is out of range or the matching policy is unknown
        """
        if self.max_assignment_distance <= 0:
            raise ValueError(
                f"max_assignment_distance must be positive, got {self.max_assignment_distance}"
            )
        if self.max_neighbor_distance <= 0:
            raise ValueError(
                f"max_neighbor_distance must be positive, got {self.max_neighbor_distance}"
            )
        if self.min_neighbors < 1:
            raise ValueError(f"min_neighbors must be at least 1, got {self.min_neighbors}")
        if self.matching not in MATCHING_POLICIES:
            raise ValueError(
                f"Unknown matching policy: {self.matching}. Available policies: {list(MATCHING_POLICIES)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "EvaluatorConfig":
        """Build a validated config from a plain dictionary."""
        cfg = OmegaConf.merge(OmegaConf.structured(cls), values)
        config = OmegaConf.to_object(cfg)
        config.validate()
        return config


def _evaluator_section(file_cfg: DictConfig) -> DictConfig:
    """Return the ``evaluator`` section of a config file, or the file itself."""
    if "evaluator" in file_cfg:
        return file_cfg.evaluator
    return file_cfg


def load_evaluator_config(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[List[str]] = None
) -> EvaluatorConfig:
    """
    Load evaluator configuration.

    Merging order (later overrides earlier):
    1. Dataclass defaults
    2. YAML file (its ``evaluator`` section if present, otherwise the whole file)
    3. Overrides in ``key=value`` format

    Args:
        config_path: Optional path to a YAML file
        overrides: Optional list of overrides, e.g. ``['max_assignment_distance=4.0']``

    Returns:
        Validated EvaluatorConfig

    Raises:
        FileNotFoundError: If config_path doesn't exist
        ValueError: If the resulting values are out of range
    """
    cfg = OmegaConf.structured(EvaluatorConfig)

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Evaluator config not found at {config_path}")
        logger.info(f"Loading evaluator config from {config_path}")
        cfg = OmegaConf.merge(cfg, _evaluator_section(OmegaConf.load(config_path)))

    valid_overrides = []
    for override in overrides or []:
        if '=' not in override:
            logger.warning(f"Invalid override format: {override}. Expected 'key=value'")
            continue
        valid_overrides.append(override)
        logger.info(f"Applied override: {override}")
    if valid_overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(valid_overrides))

    config = OmegaConf.to_object(cfg)
    config.validate()
    return config
