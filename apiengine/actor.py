"""Actors placed in a level and the components they own."""

from dataclasses import replace

from apiengine.base import EngineObject
from apiengine.engine_math import Transform


class ActorComponent(EngineObject):
    """A part of an actor; ``actor`` is set by the actor that creates it."""

    def __init__(self):
        super().__init__()
        self.actor = None
        self.has_begun_play = False
        self.live_time = 0.0

    def begin_play(self):
        """Called once, before the owning level's first tick after creation."""
        self.has_begun_play = True

    def component_tick(self, delta_time):
        """Called every frame with the elapsed seconds."""
        self.live_time += delta_time


class SceneComponent(ActorComponent):
    """A component with its own transform, placed relative to its actor."""

    def __init__(self):
        super().__init__()
        self.transform = Transform()

    @property
    def component_location(self):
        return self.transform.location

    @property
    def component_scale(self):
        return self.transform.scale

    def set_component_location(self, location):
        self.transform = replace(self.transform, location=location)

    def set_component_scale(self, scale):
        self.transform = replace(self.transform, scale=scale)

    def actor_transform(self):
        """The component's transform offset by its actor's location."""
        actor_location = self.actor.transform.location
        return Transform(scale=self.transform.scale, location=actor_location + self.transform.location)


class Actor(EngineObject):
    """Something that lives in a level, with a transform and components."""

    _pending_components = []

    def __init__(self):
        super().__init__()
        self.world = None
        self.transform = Transform()
        self.components = []

    def begin_play(self):
        """Called once just before the actor's first tick in its level."""

    def tick(self, delta_time):
        """Called every frame with the elapsed seconds."""

    def level_change_start(self):
        """Called when the actor's level becomes the current level."""

    def level_change_end(self):
        """Called when the actor's level stops being the current level."""

    @property
    def actor_location(self):
        return self.transform.location

    def set_actor_location(self, location):
        self.transform = replace(self.transform, location=location)

    def add_actor_location(self, direction):
        self.transform = replace(self.transform, location=self.transform.location + direction)

    def set_actor_scale(self, scale):
        self.transform = replace(self.transform, scale=scale)

    def create_default_sub_object(self, component_type):
        """Create a component owned by this actor; it begins play on the next level tick."""
        component = component_type()
        component.actor = self
        self.components.append(component)
        Actor._pending_components.append(component)
        return component

    @staticmethod
    def component_begin_play():
        """Start every component created since the last call."""
        pending = Actor._pending_components
        while pending:
            pending.pop(0).begin_play()


class GameMode(Actor):
    """The first actor of a level, which prepares the level's rules."""