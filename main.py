import logging

import dearpygui.dearpygui as dpg

import state
from audio_engine import AudioEngine
from canvas import DearPyGuiSurface

logger = logging.getLogger(__name__)

# --- SETTINGS ---
W_WIDTH = 1200
W_HEIGHT = 800
PANEL_WIDTH = 300
INSTRUCTIONS = "Click and drag to draw. Release to hear your drawing play back."


def canvas_size():
    width = max(1, dpg.get_viewport_client_width() - PANEL_WIDTH - 30)
    height = max(1, dpg.get_viewport_client_height() - 50)
    return width, height


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s: %(message)s")

    audio = AudioEngine()
    audio.start()

    canvas = state.Canvas(W_WIDTH - PANEL_WIDTH - 30, W_HEIGHT - 50)
    app = state.AppState(canvas, audio.new_source)

    dpg.create_context()

    # --- INPUT ---
    def on_press(sender, app_data):
        if not dpg.is_item_hovered("canvas"):
            return
        if dpg.is_item_shown("instructions"):
            dpg.hide_item("instructions")
        app.press()

    def on_release(sender, app_data):
        app.release()

    def on_clear(sender, app_data):
        app.clear()
        audio.retain([voice.source for voice in app.voices])

    def on_resize(sender, app_data):
        width, height = canvas_size()
        canvas.resize(width, height)
        dpg.configure_item("canvas", width=width, height=height)

    with dpg.handler_registry():
        dpg.add_mouse_click_handler(button=dpg.mvMouseButton_Left, callback=on_press)
        dpg.add_mouse_release_handler(button=dpg.mvMouseButton_Left, callback=on_release)

    with dpg.window(tag="Primary Window"):

        # Split Layout: Left (Controls) | Right (Canvas)
        with dpg.group(horizontal=True):

            # --- LEFT PANEL: CONFIGURATION ---
            with dpg.child_window(width=PANEL_WIDTH):
                dpg.add_text("SYNTH SETTINGS", color=(0, 255, 204))
                dpg.add_separator()

                def update_config(sender, app_data, user_data):
                    setattr(state.shared, user_data, app_data)

                dpg.add_slider_float(label="Master Gain", default_value=state.shared.gain, max_value=1.0, callback=update_config, user_data="gain")
                # Smoothing: 0.01 (Slow/Heavy) -> 0.95 (Fast/Responsive)
                dpg.add_slider_float(label="Smoothing", default_value=state.shared.smoothing, max_value=0.95, min_value=0.01, callback=update_config, user_data="smoothing")
                dpg.add_slider_float(label="Voice Level", default_value=state.shared.voice_amplitude, max_value=1.0, callback=update_config, user_data="voice_amplitude")
                dpg.add_checkbox(label="Clamp Frequency", default_value=state.shared.clamp_frequency, callback=update_config, user_data="clamp_frequency")

                dpg.add_spacer(height=20)
                dpg.add_text("PLAYBACK SETTINGS", color=(0, 255, 204))
                dpg.add_separator()
                dpg.add_slider_int(label="Scrubber Speed", default_value=state.shared.scrubber_step, max_value=20, min_value=1, callback=update_config, user_data="scrubber_step")
                dpg.add_slider_float(label="Jitter", default_value=state.shared.jitter_amplitude, max_value=120.0, callback=update_config, user_data="jitter_amplitude")

                dpg.add_spacer(height=20)
                dpg.add_button(label="Clear", callback=on_clear)

            # --- RIGHT PANEL: CANVAS ---
            with dpg.group():
                dpg.add_text(INSTRUCTIONS, tag="instructions")
                dpg.add_drawlist(width=canvas.width, height=canvas.height, tag="canvas")

    surface = DearPyGuiSurface("canvas", canvas)

    dpg.create_viewport(title="Line Scrub Synth", width=W_WIDTH, height=W_HEIGHT)
    dpg.set_viewport_resize_callback(on_resize)
    dpg.setup_dearpygui()
    dpg.set_primary_window("Primary Window", True)
    dpg.show_viewport()

    # Start tracking the pointer from wherever it is now
    app.track_pointer(*dpg.get_drawing_mouse_pos())

    # One tick per rendered frame
    while dpg.is_dearpygui_running() and state.shared.running:
        x, y = dpg.get_drawing_mouse_pos()
        app.frame(surface, x, y)
        dpg.render_dearpygui_frame()

    # --- CLEANUP ---
    state.shared.running = False
    audio.shutdown()
    dpg.destroy_context()


if __name__ == "__main__":
    main()
