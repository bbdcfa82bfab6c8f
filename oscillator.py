# oscillator.py
import numpy as np

SAMPLE_RATE = 44100


class Oscillator:
    """
    One sine voice. The UI thread sets targets, the audio callback renders.

    Frequency and amplitude glide towards their targets once per block.
    """

    def __init__(self, sample_rate=SAMPLE_RATE):
        self.sample_rate = sample_rate
        self.phase = 0.0
        self.started = False

        # --- STATE ---
        self.curr_freq = 0.0
        self.curr_amp = 0.0

        self.target_freq = 0.0
        self.target_amp = 0.0

    # --- ToneSource ---
    def start(self):
        self.started = True

    def set_frequency(self, hz):
        self.target_freq = float(hz)
        # First pitch is taken as is rather than gliding up from 0 Hz
        if self.curr_freq == 0.0:
            self.curr_freq = self.target_freq

    def set_amplitude(self, level):
        self.target_amp = max(0.0, min(1.0, float(level)))

    # --- SYNTHESIS ---
    def render(self, frame_count, smoothing=0.3):
        if not self.started:
            return np.zeros(frame_count, dtype=np.float32)

        # Exponential Moving Average
        alpha = (1.0 - smoothing) * 0.5
        self.curr_freq = (self.target_freq * alpha) + (self.curr_freq * (1 - alpha))
        self.curr_amp = (self.target_amp * alpha) + (self.curr_amp * (1 - alpha))

        phase_inc = 2 * np.pi * self.curr_freq / self.sample_rate
        phases = self.phase + np.arange(frame_count) * phase_inc
        self.phase = (self.phase + frame_count * phase_inc) % (2 * np.pi)

        return (np.sin(phases) * self.curr_amp).astype(np.float32)
