# canvas.py
import colorsys

import dearpygui.dearpygui as dpg


def hsl_to_rgba(hue, saturation, luminosity, alpha=255):
    """HSL on a 360/100/100 scale to a dearpygui 0-255 RGBA tuple."""
    h = (hue % 360) / 360.0
    s = max(0.0, min(1.0, saturation / 100.0))
    l = max(0.0, min(1.0, luminosity / 100.0))
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (int(r * 255), int(g * 255), int(b * 255), alpha)


class DearPyGuiSurface:
    """Draws onto a dearpygui drawlist, which is rebuilt every frame."""

    def __init__(self, drawlist, canvas):
        self.drawlist = drawlist
        self.canvas = canvas

    def clear(self, hue, saturation, luminosity):
        dpg.delete_item(self.drawlist, children_only=True)
        color = hsl_to_rgba(hue, saturation, luminosity)
        dpg.draw_rectangle(
            (0, 0), (self.canvas.width, self.canvas.height),
            color=color, fill=color, parent=self.drawlist
        )

    def fill_quad(self, p0, p1, p2, p3, hue, saturation, luminosity):
        color = hsl_to_rgba(hue, saturation, luminosity)
        dpg.draw_quad(p0, p1, p2, p3, color=color, fill=color, thickness=0, parent=self.drawlist)

    def stroke_line(self, p0, p1, hue, saturation, luminosity, width):
        color = hsl_to_rgba(hue, saturation, luminosity)
        if p0 == p1:
            # Zero length lines vanish in dearpygui, draw a dot instead
            dpg.draw_circle(p0, width, color=color, fill=color, parent=self.drawlist)
            return
        dpg.draw_line(p0, p1, color=color, thickness=width, parent=self.drawlist)
