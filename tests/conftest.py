import esper
import numpy as np
import pytest

import quaternion
from systems import RotationSystem
from world_manager import WorldManager

# Tolerance for floating point comparisons
TOLERANCE = 1e-9


def same_rotation(a, b, tol=TOLERANCE):
    """q and -q are the same rotation."""
    a = np.asarray(a)
    b = np.asarray(b)
    return np.allclose(a, b, atol=tol) or np.allclose(a, -b, atol=tol)


def rotation_about(axis, degrees):
    return quaternion.from_axis_angle(axis, degrees)


@pytest.fixture
def world(request):
    """A private esper world with the rotation system installed."""
    manager = WorldManager(name=f"test-{request.node.name}")
    manager.add_processor(RotationSystem())
    yield manager
    esper.switch_world("default")
    esper.delete_world(manager.name)
