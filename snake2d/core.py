"""A window that shows a canvas and drives per-frame update and input callbacks."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike

import pygame

from .canvas import Canvas
from .image import Image
from .rfont import FontError, RFont
from .utils import screenshot_file_name

DEFAULT_FPS = 64
DEFAULT_TITLE = "Spinach App"
FONT_IMAGE_PATH = "res/TrueNoFontAtlas.ppm"
FONT_CSV_PATH = "res/TrueNoFontData.csv"

_VIDEO_INIT_FAILED = 1
_WINDOW_FAILED = 2
_FONT_FAILED = 4

_WAIT_END_EVENTS = frozenset({pygame.KEYUP, pygame.QUIT, pygame.MOUSEBUTTONUP})

UpdateAndRender = Callable[[Canvas], None]
InputHandler = Callable[["pygame.event.Event"], None]


class CoreInitError(Exception):
    """Raised when the window, the video system or the font cannot be set up.

    ``code`` tells which step failed: 1 video, 2 window, 4 font.
    """

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"{message} (error {code})")
        self.code = code


class SpinachCore:
    """Owns the window and the canvas, and runs the frame loop."""

    def __init__(
        self,
        width: int,
        height: int,
        update_and_render: UpdateAndRender | None = None,
        input_handler: InputHandler | None = None,
        font_image_path: str | PathLike = FONT_IMAGE_PATH,
        font_csv_path: str | PathLike = FONT_CSV_PATH,
    ) -> None:
        self.window = None
        self.canvas: Canvas | None = None
        self.update_and_render = update_and_render
        self.input_handler = input_handler
        self._quit_requested = False
        self.set_target_fps(DEFAULT_FPS)
        self._init(width, height, font_image_path, font_csv_path)

    def _init(self, width, height, font_image_path, font_csv_path) -> None:
        pygame.init()
        try:
            pygame.display.init()
        except pygame.error as exc:
            pygame.quit()
            raise CoreInitError(_VIDEO_INIT_FAILED, f"couldn't initialize video: {exc}") from exc
        try:
            self.window = pygame.display.set_mode((width, height))
            pygame.display.set_caption(DEFAULT_TITLE)
        except pygame.error as exc:
            self.close()
            raise CoreInitError(_WINDOW_FAILED, f"couldn't create window: {exc}") from exc
        try:
            font = RFont.load(font_image_path, font_csv_path)
        except FontError as exc:
            self.close()
            raise CoreInitError(_FONT_FAILED, f"couldn't load font: {exc}") from exc
        self.canvas = Canvas(width, height)
        self.canvas.font = font

    def __enter__(self) -> SpinachCore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def set_target_fps(self, fps: int) -> None:
        """Set the frame rate the main loop aims for."""
        if fps <= 0:
            raise ValueError(f"frames per second must be positive, got {fps}")
        self.target_fps = fps
        self.target_millis_per_frame = int(1000.0 / fps)

    def set_window_title(self, title: str) -> None:
        """Set the window caption; does nothing once the window is gone."""
        if self.window is None:
            return
        pygame.display.set_caption(title)

    def request_quit(self) -> None:
        """Make the running main loop stop after the current frame."""
        self._quit_requested = True

    def _require_canvas(self) -> Canvas:
        if self.canvas is None or self.window is None:
            raise RuntimeError("the core has been closed")
        return self.canvas

    def _dispatch(self, event) -> None:
        if event.type == pygame.QUIT:
            self._quit_requested = True
            return
        if event.type == pygame.KEYDOWN:
            key = getattr(event, "key", None)
            if key == pygame.K_ESCAPE:
                self._quit_requested = True
            elif key == pygame.K_F12:
                self.save_screenshot(screenshot_file_name())
        if self.input_handler is not None:
            self.input_handler(event)

    def main_loop(self) -> None:
        """Poll events, update and render frames until a quit is requested.

        Escape and closing the window quit; F12 saves a screenshot named after
        the current time. All events but quit reach the input handler.
        """
        canvas = self._require_canvas()
        self._quit_requested = False
        frame_time = 0
        wait_time = 0
        while not self._quit_requested:
            start = pygame.time.get_ticks()
            canvas.last_frame_time = (frame_time + wait_time) / 1000.0
            for event in pygame.event.get():
                self._dispatch(event)
            if self.update_and_render is not None:
                self.update_and_render(canvas)
            self.render_canvas()
            frame_time = pygame.time.get_ticks() - start
            if frame_time < self.target_millis_per_frame:
                wait_time = self.target_millis_per_frame - frame_time
                pygame.time.delay(wait_time)
            else:
                wait_time = 0

    def render_canvas(self) -> None:
        """Show the current canvas contents in the window."""
        canvas = self._require_canvas()
        src = canvas.pixels
        rgb = bytearray(canvas.num_pixels * 3)
        rgb[0::3] = src[2::4]
        rgb[1::3] = src[1::4]
        rgb[2::3] = src[0::4]
        frame = pygame.image.frombuffer(bytes(rgb), (canvas.width, canvas.height), "RGB")
        self.window.blit(frame, (0, 0))
        pygame.display.flip()

    def save_screenshot(self, file_name: str | PathLike) -> None:
        """Write the canvas to a PNG file."""
        Image(self._require_canvas()).save_as_png(file_name)

    def wait_for_events(self):
        """Block until a key or mouse button is released or quit is asked; return that event."""
        while True:
            event = pygame.event.wait()
            if event.type in _WAIT_END_EVENTS:
                return event

    def close(self) -> None:
        """Close the window and release the canvas."""
        self.window = None
        self.canvas = None
        pygame.quit()