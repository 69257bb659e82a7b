import logging

import esper

from components import Orientation, Position, RotationConfig, Scale

logger = logging.getLogger(__name__)


class WorldManager:
    """
    Owns one named esper world and the entities living in it.

    esper keeps a single active world per process, so every operation switches
    to this manager's world before touching the database.
    """

    def __init__(self, name="rotator"):
        self._name = name

    @property
    def name(self):
        return self._name

    def activate(self):
        if esper.current_world != self._name:
            esper.switch_world(self._name)

    def add_processor(self, processor, priority=0):
        """
        Register a processor unless one of the same type is already installed.

        Returns:
            esper.Processor: The processor that will run in this world
        """
        self.activate()
        existing = esper.get_processor(type(processor))
        if existing is not None:
            logger.debug(
                f"{type(processor).__name__} already runs in world '{self._name}'"
            )
            return existing
        esper.add_processor(processor, priority=priority)
        logger.debug(f"Added {type(processor).__name__} to world '{self._name}'")
        return processor

    def spawn_rotatable(self, config, position=None, orientation=None, scale=None):
        """
        Create an entity that rotation systems will pick up.

        Args:
            config (RotationConfig): Rotation rate and axis mode
            position (Position, optional): Defaults to the origin
            orientation (Orientation, optional): Defaults to identity
            scale (Scale, optional): Defaults to unit scale

        Returns:
            int: The new entity id
        """
        if not isinstance(config, RotationConfig):
            raise TypeError("config must be a RotationConfig")
        self.activate()
        entity = esper.create_entity(
            position or Position(),
            orientation or Orientation(),
            scale or Scale(),
            config,
        )
        logger.info(f"Spawned rotatable entity #{entity} with {config!r}")
        return entity

    def orientation_of(self, entity):
        self.activate()
        return esper.component_for_entity(entity, Orientation)

    def position_of(self, entity):
        self.activate()
        return esper.component_for_entity(entity, Position)

    def scale_of(self, entity):
        self.activate()
        return esper.component_for_entity(entity, Scale)

    def process(self, elapsed_seconds):
        """Run every processor of this world for one frame."""
        self.activate()
        esper.process(elapsed_seconds)

    def clear(self):
        self.activate()
        esper.clear_database()
        logger.debug(f"Cleared world '{self._name}'")


world_manager = WorldManager()
