from modes import TRANSITIONS, Direction, Event, Mode, ModeController, Scrubber, ShapeSegmenter


def test_direction_learned_from_first_move():
    seg = ShapeSegmenter()
    assert not seg.update(10, 10)
    assert seg.direction is Direction.UNKNOWN

    assert not seg.update(10, 20)
    assert seg.direction is Direction.RIGHT


def test_reversal_detected_both_ways():
    seg = ShapeSegmenter()
    seg.update(0, 10)
    assert seg.update(10, 5)
    assert seg.direction is Direction.LEFT
    assert seg.update(5, 8)
    assert seg.direction is Direction.RIGHT


def test_same_direction_and_equal_x_never_reverse():
    seg = ShapeSegmenter()
    seg.update(0, -5)
    assert not seg.update(-5, -10)
    assert not seg.update(-10, -10)
    assert seg.direction is Direction.LEFT


def test_reset_forgets_direction():
    seg = ShapeSegmenter()
    seg.update(0, 10)
    seg.reset()
    assert seg.direction is Direction.UNKNOWN
    assert not seg.update(10, 0)


def test_scrubber_wraps_past_width():
    scrubber = Scrubber(step=3)
    scrubber.position = 798
    positions = [scrubber.position]
    for _ in range(3):
        positions.append(scrubber.advance(800))
    assert positions == [798, 0, 3, 6]


def test_scrubber_does_not_wrap_on_edge():
    scrubber = Scrubber(step=2)
    scrubber.position = 798
    assert scrubber.advance(800) == 800


def test_transition_table():
    assert TRANSITIONS[Event.PRESS] is Mode.DRAWING
    assert TRANSITIONS[Event.RELEASE] is Mode.PLAYBACK


class RecordingApp:
    """Just enough of AppState for the mode hooks."""

    def __init__(self):
        self.log = []
        self.segmenter = ShapeSegmenter()

    def finalize_shape(self):
        self.log.append("finalize")

    def new_shape(self):
        self.log.append("new_shape")

    def mute_all(self):
        self.log.append("mute_all")


def test_start_enters_playback_without_exit():
    app = RecordingApp()
    modes = ModeController()
    modes.start(app)
    assert modes.mode is Mode.PLAYBACK
    assert app.log == []

    modes.start(app)
    assert app.log == []


def test_press_leaves_playback_by_muting():
    app = RecordingApp()
    modes = ModeController()
    modes.start(app)
    app.segmenter.update(0, 10)

    modes.dispatch(Event.PRESS, app)

    assert modes.mode is Mode.DRAWING
    assert app.log == ["mute_all"]
    assert app.segmenter.direction is Direction.UNKNOWN


def test_release_finalizes_then_allocates():
    app = RecordingApp()
    modes = ModeController()
    modes.dispatch(Event.PRESS, app)
    modes.dispatch(Event.RELEASE, app)
    assert modes.mode is Mode.PLAYBACK
    assert app.log == ["finalize", "new_shape"]


def test_self_transition_reruns_hooks():
    app = RecordingApp()
    modes = ModeController()
    modes.start(app)
    modes.dispatch(Event.RELEASE, app)
    assert modes.mode is Mode.PLAYBACK
    assert app.log == ["mute_all"]
