import pytest

import state


class FakeToneSource:
    """Records every call so tests can assert on the order of audio updates."""

    def __init__(self):
        self.calls = []

    def start(self):
        self.calls.append(("start",))

    def set_frequency(self, hz):
        self.calls.append(("freq", hz))

    def set_amplitude(self, level):
        self.calls.append(("amp", level))

    def amplitudes(self):
        return [c[1] for c in self.calls if c[0] == "amp"]

    def frequencies(self):
        return [c[1] for c in self.calls if c[0] == "freq"]


class FakeSurface:
    def __init__(self):
        self.calls = []

    def clear(self, hue, saturation, luminosity):
        self.calls.append(("clear", hue, saturation, luminosity))

    def fill_quad(self, p0, p1, p2, p3, hue, saturation, luminosity):
        self.calls.append(("quad", (p0, p1, p2, p3), hue, saturation, luminosity))

    def stroke_line(self, p0, p1, hue, saturation, luminosity, width):
        self.calls.append(("line", (p0, p1), hue, saturation, luminosity, width))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def settings():
    return state.Settings()


@pytest.fixture
def canvas():
    return state.Canvas(800, 600)


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def sources():
    return []


@pytest.fixture
def app(canvas, settings, sources):
    def factory():
        source = FakeToneSource()
        sources.append(source)
        return source

    return state.AppState(canvas, factory, settings=settings)
