# state.py
import logging

from jitter import JITTER_AMPLITUDE, JITTER_INTERVAL, NoiseJitter, PerlinNoise1D
from modes import SCRUBBER_STEP, Event, ModeController, Scrubber, ShapeSegmenter
from segments import SATURATION, Segment, SegmentStore
from voice import MAX_FREQ, MIN_FREQ, VOICE_AMPLITUDE, ToneVoice

logger = logging.getLogger(__name__)

BACKGROUND = (45, SATURATION, 75)  # hsl


class Settings:
    def __init__(self):
        # --- Audio Synthesis ---
        self.gain = 0.5            # Master Volume
        self.smoothing = 0.3       # 0.01 (Slow) to 0.9 (Fast)
        self.voice_amplitude = VOICE_AMPLITUDE
        self.min_freq = MIN_FREQ
        self.max_freq = MAX_FREQ
        self.clamp_frequency = False  # Off: pointer outside the canvas overshoots

        # --- Visuals ---
        self.jitter_amplitude = JITTER_AMPLITUDE
        self.jitter_interval = JITTER_INTERVAL
        self.noise_seed = 0

        # --- Playback ---
        self.scrubber_step = SCRUBBER_STEP  # Pixels per frame

        # --- Global Flags ---
        self.running = True


# Create a single shared instance
shared = Settings()


class Canvas:
    def __init__(self, width, height):
        self.width = width
        self.height = height

    def resize(self, width, height):
        self.width = width
        self.height = height


class AppState:
    """
    Everything one drawing session owns, passed to every frame.

    `source_factory` is called once per voice and must return a ToneSource.
    """

    def __init__(self, canvas, source_factory, settings=None, noise=None):
        self.canvas = canvas
        self.source_factory = source_factory
        self.settings = settings if settings is not None else shared
        self.noise = noise if noise is not None else PerlinNoise1D(self.settings.noise_seed)

        self.store = SegmentStore()
        self.voices = []
        self.jitters = []
        self.current_voice = None
        self.current_jitter = None

        self.segmenter = ShapeSegmenter()
        self.scrubber = Scrubber(self.settings.scrubber_step)
        self.modes = ModeController()

        self.prev_x = 0
        self.prev_y = 0

        self.new_shape()

    @property
    def mode(self):
        return self.modes.mode

    # --- Shapes ---
    def new_shape(self):
        if self.current_voice is not None:
            self.current_voice.mute()

        self.current_voice = ToneVoice(self.source_factory(), self.canvas, self.settings)
        self.voices.append(self.current_voice)

        self.current_jitter = NoiseJitter(
            self.noise,
            amplitude=self.settings.jitter_amplitude,
            interval=self.settings.jitter_interval,
        )
        self.jitters.append(self.current_jitter)
        logger.debug("New shape, %d voices", len(self.voices))
        return self.current_voice

    def finalize_shape(self):
        self.current_jitter.activate()

    def record_segment(self, x0, y0, x1, y1):
        segment = Segment(x0, y0, x1, y1, self.current_jitter)
        self.store.record(segment)
        self.current_voice.append(segment)
        return segment

    def clear(self):
        self.mute_all()
        self.store.clear()
        self.voices = []
        self.jitters = []
        self.current_voice = None
        self.current_jitter = None
        self.scrubber.reset()
        self.new_shape()
        logger.info("Session cleared")

    # --- Sound ---
    def play_frequency(self, y):
        self.current_voice.play_frequency(y)

    def play(self, x, surface=None):
        for voice in self.voices:
            voice.play(x, surface)

    def mute_all(self):
        for voice in self.voices:
            voice.mute()

    def advance_jitters(self):
        for jitter in self.jitters:
            jitter.amplitude = self.settings.jitter_amplitude
            jitter.advance(self.mode)
        # Jitter can change which segment sits lower, so re-sort
        self.store.resort()

    # --- Input ---
    def press(self):
        self.modes.dispatch(Event.PRESS, self)

    def release(self):
        self.modes.dispatch(Event.RELEASE, self)

    def track_pointer(self, x, y):
        self.prev_x = x
        self.prev_y = y

    # --- Frame ---
    def frame(self, surface, x, y):
        self.modes.start(self)

        surface.clear(*BACKGROUND)
        self.advance_jitters()
        self.store.render(surface, self.canvas)

        self.modes.tick(self, surface, x, y)
        self.track_pointer(x, y)
