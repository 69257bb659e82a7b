"""
Host frame loop driving the ECS world from pyglet's clock.

`step()` advances one frame from the loop's own clock and is what tests and
custom hosts call. `run()` hands control to pyglet's event loop, which calls
back once per frame at the configured rate.
"""

import logging

import pyglet

logger = logging.getLogger(__name__)


class FrameLoop:
    def __init__(self, world_manager, frame_rate=60.0, clock=None):
        if frame_rate <= 0:
            raise ValueError(f"Frame rate must be positive, got {frame_rate}")
        self.world_manager = world_manager
        self.frame_rate = float(frame_rate)
        self.clock = clock or pyglet.clock.Clock()
        self.frame_count = 0

    def on_frame(self, delta_time):
        self.world_manager.process(delta_time)
        self.frame_count += 1

    def step(self):
        """Tick the clock once and process the elapsed time. Returns the elapsed seconds."""
        delta_time = self.clock.tick()
        self.on_frame(delta_time)
        return delta_time

    def stop(self, delta_time=None):
        logger.info(f"Stopping frame loop after {self.frame_count} frames")
        pyglet.clock.unschedule(self.on_frame)
        pyglet.app.exit()

    def run(self, duration=None):
        """
        Schedule the world on pyglet's global clock and enter the event loop.

        Args:
            duration (float, optional): Seconds to run before exiting. Runs until
                the event loop is stopped otherwise.
        """
        # pyglet.app pulls in the platform windowing layer, so import it only when running
        import pyglet.app

        pyglet.clock.schedule_interval(self.on_frame, 1.0 / self.frame_rate)
        if duration is not None:
            pyglet.clock.schedule_once(self.stop, duration)

        logger.info(f"Starting frame loop at {self.frame_rate:g} fps")
        pyglet.app.run()
