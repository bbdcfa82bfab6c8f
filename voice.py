# voice.py
from typing import Protocol

MIN_FREQ = 120.0
MAX_FREQ = 500.0
VOICE_AMPLITUDE = 0.5


class ToneSource(Protocol):
    def start(self): ...

    def set_frequency(self, hz): ...

    def set_amplitude(self, level): ...


def map_frequency(y, height, min_freq=MIN_FREQ, max_freq=MAX_FREQ, clamp=False):
    """
    Map a canvas y position to a frequency.

    The flipped height is squared before the linear map, so pitch moves
    slowly near the bottom of the canvas and quickly near the top. Positions
    outside [0, height] overshoot the range unless `clamp` is set.
    """
    if height <= 0:
        return min_freq
    flipped = height - y
    freq = min_freq + (flipped * flipped) / (height * height) * (max_freq - min_freq)
    if clamp:
        freq = max(min_freq, min(max_freq, freq))
    return freq


class ToneVoice:
    """The segments of one shape and the tone source that sounds them."""

    def __init__(self, source, canvas, settings):
        self.source = source
        self.canvas = canvas
        self.settings = settings

        self.segments = []
        self.tone_started = False
        # Sources start silent, so a new voice is muted without telling it
        self.muted = True

    def append(self, segment):
        self.segments.append(segment)

    def evaluate_at(self, x):
        """Return the y where the first segment spanning x crosses it, or None."""
        for segment in self.segments:
            start_x, end_x = segment.start_x, segment.end_x
            if not (start_x <= x <= end_x):
                continue
            # Vertical drags have no slope to follow
            if segment.is_degenerate:
                continue
            start_y, end_y = segment.start_y, segment.end_y
            slope = (end_y - start_y) / (end_x - start_x)
            return start_y + slope * (x - start_x)
        return None

    def play(self, x, surface=None):
        y = self.evaluate_at(x)
        if y is None:
            self.mute()
            return None

        if surface is not None:
            surface.stroke_line((x, y), (x, y), 0, 100, 0, 2)
        self.play_frequency(y)
        return y

    def map_frequency(self, y):
        s = self.settings
        return map_frequency(
            y, self.canvas.height, s.min_freq, s.max_freq, clamp=s.clamp_frequency
        )

    def play_frequency(self, y):
        self.unmute()
        self.source.set_frequency(self.map_frequency(y))

    def mute(self):
        if not self.muted:
            self.source.set_amplitude(0)
        self.muted = True

    def unmute(self):
        if not self.tone_started:
            self.source.start()
            self.tone_started = True
        self.source.set_amplitude(self.settings.voice_amplitude)
        self.muted = False
