"""
Data structures for grid samples and simulated ground truth.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Sequence, Tuple, Union


@dataclass(frozen=True)
class GridSample:
    """A grid cell carrying a velocity estimate.

    ``x`` and ``y`` are grid indices with the origin in the top left corner and
    y pointing downwards.
    """
    x: float
    y: float
    mean_x_vel: float = 0.0
    mean_y_vel: float = 0.0


@dataclass(frozen=True)
class Vehicle:
    """Ground-truth vehicle state in world coordinates."""
    pos: Tuple[float, float]
    vel: Tuple[float, float]

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Vehicle":
        pos = record['pos']
        vel = record.get('vel', (0.0, 0.0))
        return cls(pos=(float(pos[0]), float(pos[1])), vel=(float(vel[0]), float(vel[1])))


@dataclass
class SimulationStep:
    """Ground-truth vehicles present at one simulation step."""
    vehicles: List[Vehicle] = field(default_factory=list)


VehicleRecord = Union[Vehicle, Dict[str, Any]]
StepRecord = Union[SimulationStep, Sequence[VehicleRecord], Dict[str, Any]]


def _to_vehicle(record: VehicleRecord) -> Vehicle:
    if isinstance(record, Vehicle):
        return record
    return Vehicle.from_dict(record)


def _to_step(record: StepRecord) -> SimulationStep:
    if isinstance(record, SimulationStep):
        return record
    if isinstance(record, dict):
        record = record.get('vehicles', [])
    return SimulationStep(vehicles=[_to_vehicle(v) for v in record])


class SimulationDataset:
    """Read-only sequence of simulation steps, indexable by step."""

    def __init__(self, steps: Sequence[SimulationStep]):
        self._steps = tuple(steps)

    @classmethod
    def from_records(cls, records: Sequence[StepRecord]) -> "SimulationDataset":
        """
        Build a dataset from in-memory records.

        Each record is a ``SimulationStep``, a list of vehicles, or a dict with a
        ``vehicles`` key. Vehicles are ``Vehicle`` objects or dicts with ``pos``
        and ``vel`` entries.
        """
        return cls([_to_step(record) for record in records])

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, idx: int) -> SimulationStep:
        if idx < 0 or idx >= len(self._steps):
            raise IndexError(f"Step {idx} out of range for {len(self._steps)} steps")
        return self._steps[idx]

    def __iter__(self) -> Iterator[SimulationStep]:
        return iter(self._steps)

    def vehicles_at(self, step_index: int) -> List[Vehicle]:
        """Return the ground-truth vehicles of a step."""
        return self[step_index].vehicles
