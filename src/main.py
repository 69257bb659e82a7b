"""
Main application module that spins a camera entity around its up-axis.

Configuration is read from the environment, the ECS world is populated with a
single rotatable camera, and pyglet's event loop drives the rotation system
once per frame.
"""

import logging
import sys

import config
from frame_loop import FrameLoop
from logging_config import setup_logging
from systems import RotationSystem
from world_manager import world_manager

logger = logging.getLogger(__name__)


def build_frame_loop(rotation_config, frame_rate):
    """Create the camera entity and the frame loop that rotates it."""
    world_manager.add_processor(RotationSystem())
    camera = world_manager.spawn_rotatable(rotation_config)
    logger.info(
        f"Camera #{camera} rotating at {rotation_config.rate_per_second:g} deg/s "
        f"around the {rotation_config.axis_mode.value} up-axis"
    )
    return FrameLoop(world_manager, frame_rate=frame_rate), camera


def main(environ=None):
    try:
        setup_logging(config.load_log_level(environ))
        rotation_config = config.load_rotation_config(environ)
        frame_rate = config.load_frame_rate(environ)
        duration = config.load_duration(environ)
    except ValueError as exception:
        logger.critical(f"Invalid configuration: {str(exception)}")
        return 1

    frame_loop, camera = build_frame_loop(rotation_config, frame_rate)

    try:
        frame_loop.run(duration)
    except KeyboardInterrupt:
        logger.info("Shutting down...")

    logger.info(f"Final camera orientation: {world_manager.orientation_of(camera)!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
