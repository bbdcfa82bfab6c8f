# modes.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)

SCRUBBER_STEP = 3


class Mode(Enum):
    DRAWING = "drawing"
    PLAYBACK = "playback"


class Event(Enum):
    PRESS = "press"
    RELEASE = "release"


# Every event leads to the same mode, whatever mode we are in
TRANSITIONS = {
    Event.PRESS: Mode.DRAWING,
    Event.RELEASE: Mode.PLAYBACK,
}


class Direction(Enum):
    UNKNOWN = 0
    LEFT = -1
    RIGHT = 1


class ShapeSegmenter:
    """
    Watches horizontal pointer motion while drawing.

    A voice can only answer one y per scrubber x, so doubling back over
    already drawn x positions has to start a new shape.
    """

    def __init__(self):
        self.direction = Direction.UNKNOWN

    def reset(self):
        self.direction = Direction.UNKNOWN

    def update(self, prev_x, cur_x):
        """Track the direction of travel. Returns True when it reversed."""
        moving_left = cur_x < prev_x
        moving_right = cur_x > prev_x

        if self.direction is Direction.UNKNOWN:
            if moving_left:
                self.direction = Direction.LEFT
            elif moving_right:
                self.direction = Direction.RIGHT
            return False

        if self.direction is Direction.RIGHT and moving_left:
            self.direction = Direction.LEFT
            return True
        if self.direction is Direction.LEFT and moving_right:
            self.direction = Direction.RIGHT
            return True
        return False


class Scrubber:
    """Playback read-head sweeping left to right across the canvas."""

    def __init__(self, step=SCRUBBER_STEP):
        self.step = step
        self.position = 0

    def reset(self):
        self.position = 0

    def advance(self, width):
        self.position += self.step
        if self.position > width:
            self.position = 0
        return self.position

    def tick(self, app, surface):
        x = self.position
        surface.stroke_line((x, 0), (x, app.canvas.height), 0, 100, 100, 3)

        # Also draws each voice's intersection marker
        app.play(x, surface)

        self.step = app.settings.scrubber_step
        self.advance(app.canvas.width)


class DrawingMode:
    def on_enter(self, app):
        app.segmenter.reset()

    def on_exit(self, app):
        app.finalize_shape()
        app.new_shape()

    def tick(self, app, surface, x, y):
        if app.segmenter.update(app.prev_x, x):
            # The reversed-from shape is finished and starts to wobble
            app.finalize_shape()
            app.new_shape()

        app.record_segment(app.prev_x, app.prev_y, x, y)
        app.play_frequency(y)


class PlaybackMode:
    def on_enter(self, app):
        pass

    def on_exit(self, app):
        app.mute_all()

    def tick(self, app, surface, x, y):
        app.scrubber.tick(app, surface)


class ModeController:
    """Holds the current mode and runs its enter/exit/tick hooks."""

    def __init__(self):
        self.mode = None
        self.behaviors = {
            Mode.DRAWING: DrawingMode(),
            Mode.PLAYBACK: PlaybackMode(),
        }

    def start(self, app):
        if self.mode is None:
            self.mode = Mode.PLAYBACK
            self.behaviors[self.mode].on_enter(app)

    def set_mode(self, mode, app):
        if self.mode is not None:
            self.behaviors[self.mode].on_exit(app)
        logger.debug("Mode %s -> %s", self.mode, mode)
        self.mode = mode
        self.behaviors[mode].on_enter(app)

    def dispatch(self, event, app):
        self.set_mode(TRANSITIONS[event], app)

    def tick(self, app, surface, x, y):
        self.behaviors[self.mode].tick(app, surface, x, y)
