# audio_engine.py
import logging
import threading

import numpy as np
import pyaudio

import state
from oscillator import SAMPLE_RATE, Oscillator

logger = logging.getLogger(__name__)

BUFFER_SIZE = 256


class AudioEngine:
    """Mixes every voice's oscillator into one stereo output stream."""

    def __init__(self, settings=None):
        self.settings = settings if settings is not None else state.shared
        self.p = pyaudio.PyAudio()
        self.stream = None

        self.oscillators = []
        self._lock = threading.Lock()

    def start(self):
        try:
            self.stream = self.p.open(
                format=pyaudio.paFloat32,
                channels=2,
                rate=SAMPLE_RATE,
                output=True,
                frames_per_buffer=BUFFER_SIZE,
                stream_callback=self.callback
            )
        except OSError as e:
            logger.warning("Could not open audio output, running silent: %s", e)
            self.stream = None
            return False

        self.stream.start_stream()
        logger.info("Audio started (sr=%d, buf=%d)", SAMPLE_RATE, BUFFER_SIZE)
        return True

    def new_source(self):
        osc = Oscillator(SAMPLE_RATE)
        with self._lock:
            self.oscillators.append(osc)
        return osc

    def retain(self, sources):
        """Forget every oscillator not in `sources`."""
        keep = {id(s) for s in sources}
        with self._lock:
            self.oscillators = [o for o in self.oscillators if id(o) in keep]

    def mix(self, frame_count):
        s = self.settings
        mono = np.zeros(frame_count, dtype=np.float32)
        with self._lock:
            oscillators = list(self.oscillators)
        for osc in oscillators:
            mono += osc.render(frame_count, s.smoothing)

        mono = np.clip(mono * s.gain, -1.0, 1.0)

        stereo = np.zeros(frame_count * 2, dtype=np.float32)
        stereo[0::2] = mono
        stereo[1::2] = mono
        return stereo

    def callback(self, in_data, frame_count, time_info, status):
        return (self.mix(frame_count).tobytes(), pyaudio.paContinue)

    def shutdown(self):
        if self.stream is not None:
            self.stream.stop_stream()
            self.stream.close()
            self.stream = None
        self.p.terminate()
        logger.info("Audio stopped")
