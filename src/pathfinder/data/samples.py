# Sample maps bundled with the package, loaded once from samples.yaml.

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from ..grid import Grid


class Expectation(BaseModel):
    """Outcome a sample map should produce."""
    path: Optional[str] = None
    word: Optional[str] = None
    error: Optional[str] = None
    count: Optional[int] = None


class Sample(BaseModel):
    rows: List[str] = Field(default_factory=list)
    expect: Expectation = Field(default_factory=Expectation)


def list_samples() -> List[str]:
    '''
    Returns the names of all bundled samples, in file order.
    '''
    return list(_SAMPLES)


def get_sample(name: str) -> Grid:
    '''
    Returns the grid for sample `name`.
    Raises KeyError if there is no such sample.
    '''
    return Grid.from_rows(_SAMPLES[name].rows)


def get_expectation(name: str) -> Expectation:
    return _SAMPLES[name].expect


def _load(path: Path) -> Dict[str, Sample]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {name: Sample(**entry) for name, entry in data.items()}


# Load the sample maps from the data file next to this module
_DATA_FILE = Path(__file__).parent / "samples.yaml"
_SAMPLES = _load(_DATA_FILE)
