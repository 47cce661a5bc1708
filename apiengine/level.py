"""Levels: the actors of one scene, their renderers and the camera."""

from apiengine.actor import Actor
from apiengine.engine_math import Vector2D

_CLEAR_COLOUR = (255, 255, 255)


class Level:
    """A scene that starts, ticks and draws its actors.

    ``window`` is the window drawn into; ``after_render`` is called once all
    renderers have drawn and before the back buffer is presented.
    """

    def __init__(self, window=None):
        self.window = window
        self.game_mode = None
        self.main_pawn = None
        self.all_actors = []
        self._begin_play_list = []
        self.camera_to_main_pawn = True
        self.camera_pos = Vector2D.ZERO
        self.camera_pivot = Vector2D.ZERO
        self.renderers = {}
        self.after_render = None

    def level_change_start(self):
        for actor in list(self.all_actors):
            actor.level_change_start()

    def level_change_end(self):
        for actor in list(self.all_actors):
            actor.level_change_end()

    def tick(self, delta_time):
        """Start newly spawned actors and components, then tick every actor."""
        while self._begin_play_list:
            actor = self._begin_play_list.pop(0)
            actor.begin_play()
            self.all_actors.append(actor)
        Actor.component_begin_play()

        for actor in list(self.all_actors):
            actor.tick(delta_time)

    def render(self, delta_time):
        """Clear the back buffer, draw renderers in ascending order and present."""
        back_buffer = self.window.back_buffer if self.window is not None else None
        if back_buffer is not None and back_buffer.surface is not None:
            back_buffer.surface.fill(_CLEAR_COLOUR)

        if self.camera_to_main_pawn and self.main_pawn is not None:
            self.camera_pos = self.main_pawn.transform.location + self.camera_pivot

        for order in sorted(self.renderers):
            for renderer in list(self.renderers[order]):
                renderer.render(delta_time)

        if self.after_render is not None:
            self.after_render()

        if back_buffer is not None:
            self.window.present()

    def spawn_actor(self, actor_type):
        """Create an actor in this level; it begins play on the next tick."""
        actor = actor_type()
        actor.world = self
        self._begin_play_list.append(actor)
        return actor

    def create_game_mode(self, game_mode_type, main_pawn_type):
        """Create the level's game mode and main pawn, in that order."""
        self.game_mode = game_mode_type()
        self.main_pawn = main_pawn_type()
        self.main_pawn.world = self
        self.game_mode.world = self
        self._begin_play_list.append(self.game_mode)
        self._begin_play_list.append(self.main_pawn)

    def set_camera_to_main_pawn(self, enabled):
        self.camera_to_main_pawn = bool(enabled)

    def set_camera_pivot(self, pivot):
        self.camera_pivot = pivot

    def set_camera_pos(self, pos):
        self.camera_pos = pos

    def push_renderer(self, renderer):
        self.renderers.setdefault(renderer.order, []).append(renderer)

    def change_render_order(self, renderer, prev_order):
        """Move a renderer from ``prev_order`` to its current order."""
        previous = self.renderers.get(prev_order, [])
        previous[:] = [r for r in previous if r is not renderer]
        self.renderers.setdefault(renderer.order, []).append(renderer)