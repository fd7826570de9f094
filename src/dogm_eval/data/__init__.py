"""Grid samples and simulated ground-truth data."""

from .dataset import GridSample, Vehicle, SimulationStep, SimulationDataset

__all__ = [
    "GridSample",
    "Vehicle",
    "SimulationStep",
    "SimulationDataset",
]
