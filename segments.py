# segments.py
from typing import Protocol

HUE = 233
SATURATION = 100

# Luminosity range for the fills, bottom of canvas -> top of canvas
LUM_LOW = 20
LUM_HIGH = 80


class DrawSurface(Protocol):
    def clear(self, hue, saturation, luminosity): ...

    def fill_quad(self, p0, p1, p2, p3, hue, saturation, luminosity): ...

    def stroke_line(self, p0, p1, hue, saturation, luminosity, width): ...


def luminosity_for(max_y, height):
    """Linearly map a y position from [height, 0] onto [LUM_LOW, LUM_HIGH]."""
    if height <= 0:
        return LUM_LOW
    return LUM_LOW + (height - max_y) / height * (LUM_HIGH - LUM_LOW)


class Segment:
    """
    A line between two pointer samples, stored leftmost point first.

    The vertical coordinates are offset by the shape's jitter every time
    they are read, so a segment never caches its effective position.
    """

    __slots__ = ("_points", "jitter")

    def __init__(self, x0, y0, x1, y1, jitter=None):
        start, end = (x0, y0), (x1, y1)
        if x1 < x0:
            start, end = end, start
        self._points = (start[0], start[1], end[0], end[1])
        self.jitter = jitter

    def _offset(self):
        if self.jitter is None:
            return 0.0
        return self.jitter.sample()

    @property
    def start_x(self):
        return self._points[0]

    @property
    def start_y(self):
        return self._points[1] + self._offset()

    @property
    def end_x(self):
        return self._points[2]

    @property
    def end_y(self):
        return self._points[3] + self._offset()

    @property
    def start(self):
        return (self.start_x, self.start_y)

    @property
    def end(self):
        return (self.end_x, self.end_y)

    def effective_y(self, index):
        if index == 0:
            return self.start_y
        if index == 1:
            return self.end_y
        raise IndexError(f"segment endpoint index out of range: {index}")

    @property
    def max_y(self):
        return max(self.start_y, self.end_y)

    @property
    def is_degenerate(self):
        return self.start_x == self.end_x

    def __repr__(self):
        x0, y0, x1, y1 = self._points
        return f"Segment(({x0}, {y0}) -> ({x1}, {y1}))"


class SegmentStore:
    """All segments of every shape, kept in paint order (smallest max y first)."""

    def __init__(self):
        self.segments = []

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def record(self, segment):
        self.segments.append(segment)
        self.resort()
        return segment

    def resort(self):
        # list.sort is stable, so equal depths keep their drawing order
        self.segments.sort(key=lambda s: s.max_y)

    def clear(self):
        self.segments.clear()

    def render(self, surface, canvas):
        bottom = canvas.height
        for segment in self.segments:
            start, end = segment.start, segment.end
            lum = luminosity_for(max(start[1], end[1]), canvas.height)

            # Quads are wound start -> end -> bottom right -> bottom left
            surface.fill_quad(
                start, end, (end[0], bottom), (start[0], bottom),
                HUE, SATURATION, lum,
            )
            # Slightly lighter edge on top of the fill
            surface.stroke_line(start, end, HUE, SATURATION, lum + 10, 1)
