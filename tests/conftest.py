# Tests configuration for Lact8
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lact8.calculations.lactate import Step
from lact8.step_table import StepIdGenerator, make_demo_steps


@pytest.fixture
def id_gen():
    """Fresh id generator starting at 1."""
    return StepIdGenerator()


@pytest.fixture
def demo_steps(id_gen):
    """Canonical demo test: 200-400 W in 20 W steps."""
    return make_demo_steps(id_gen)


@pytest.fixture
def make_steps():
    """Build steps from (intensity, lactate) or (intensity, hr, lactate) tuples."""
    def _make(rows):
        steps = []
        for i, row in enumerate(rows, start=1):
            if len(row) == 2:
                intensity, lactate = row
                hr = 100 + i * 5
            else:
                intensity, hr, lactate = row
            steps.append(Step(id=i, intensity=intensity, heart_rate_bpm=hr, lactate_mmol_l=lactate))
        return steps
    return _make
