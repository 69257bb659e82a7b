import logging
import math
import weakref

import esper

import quaternion
from components import AxisMode, Orientation, RotationConfig

logger = logging.getLogger(__name__)


def tick(orientation, config, elapsed_seconds):
    """
    Advance an orientation by one frame of rotation.

    The angle is `config.rate_per_second * elapsed_seconds` degrees. World-up
    rotations are pre-multiplied, local-up rotations post-multiplied, and the
    result is renormalized and written back into `orientation.quaternion`.

    Args:
        orientation (Orientation): The orientation to update in place
        config (RotationConfig): Rate and axis mode
        elapsed_seconds (float): Time since the previous frame
    """
    if elapsed_seconds < 0:
        logger.debug(f"Negative frame time {elapsed_seconds}s clamped to zero")
        elapsed_seconds = 0.0

    angle = config.rate_per_second * elapsed_seconds
    if not math.isfinite(angle):
        logger.warning(
            f"Non-finite rotation angle (rate={config.rate_per_second}, "
            f"elapsed={elapsed_seconds}), skipping rotation for this frame"
        )
        angle = 0.0

    # Local up is +Y in the object's own frame, so the same axis works for both modes
    delta = quaternion.from_axis_angle(quaternion.WORLD_UP, angle)
    if config.axis_mode is AxisMode.WORLD_UP:
        rotated = quaternion.multiply(delta, orientation.quaternion)
    else:
        rotated = quaternion.multiply(orientation.quaternion, delta)

    orientation.quaternion[:] = quaternion.normalize(rotated)


class RotationSystem(esper.Processor):
    def __init__(self):
        # Keyed on the component since esper reuses entity ids after a clear
        self.failed_orientations = weakref.WeakSet()

    def process(self, elapsed_seconds):
        """Rotate every entity that carries an orientation and a rotation config."""
        for entity, (orientation, config) in esper.get_components(
            Orientation, RotationConfig
        ):
            try:
                tick(orientation, config, elapsed_seconds)
            except Exception as e:
                if orientation not in self.failed_orientations:
                    logger.error(
                        f"Failed to rotate entity #{entity}: {str(e)}", exc_info=True
                    )
                    self.failed_orientations.add(orientation)
