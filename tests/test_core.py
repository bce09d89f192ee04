import pygame
import pytest

from snake2d.core import CoreInitError, SpinachCore
from snake2d.image import Image


@pytest.fixture
def font_files(tmp_path):
    atlas = tmp_path / "atlas.ppm"
    atlas.write_bytes(b"P6\n16 8\n255\n" + bytes(16 * 8 * 3))
    lines = [
        "Image Width,16",
        "Image Height,8",
        "Cell Width,8",
        "Cell Height,8",
        "Base Char,32",
        "Font Name,Test",
        "Font Height,8",
        "Font Width,8",
    ]
    lines += [f"Char {i} Base Width,8" for i in range(256)]
    csv = tmp_path / "font.csv"
    csv.write_text("\n".join(lines) + "\n")
    return atlas, csv


@pytest.fixture
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def core(dummy_video, font_files):
    atlas, csv = font_files
    instance = SpinachCore(64, 48, font_image_path=atlas, font_csv_path=csv)
    yield instance
    instance.close()


def test_missing_font_fails_with_code_4(dummy_video, tmp_path):
    with pytest.raises(CoreInitError) as info:
        SpinachCore(
            64,
            48,
            font_image_path=tmp_path / "missing.ppm",
            font_csv_path=tmp_path / "missing.csv",
        )
    assert info.value.code == 4


def test_canvas_matches_window_and_has_font(core):
    assert (core.canvas.width, core.canvas.height) == (64, 48)
    assert core.canvas.font.cell_width == 8
    assert core.window.get_size() == (64, 48)


def test_set_target_fps(core):
    core.set_target_fps(5)
    assert core.target_fps == 5
    assert core.target_millis_per_frame == 200


def test_set_target_fps_rejects_zero(core):
    with pytest.raises(ValueError):
        core.set_target_fps(0)


def test_set_window_title_keeps_window(core):
    core.set_window_title("Example Game for Spinach")
    assert pygame.display.get_caption()[0] == "Example Game for Spinach"
    assert core.window.get_size() == (64, 48)
    assert (core.canvas.width, core.canvas.height) == (64, 48)


def test_update_handler_runs_until_quit_requested(core):
    seen = []

    def update(canvas):
        seen.append(canvas)
        core.request_quit()

    core.update_and_render = update
    core.main_loop()
    assert seen == [core.canvas]


def test_quit_event_ends_loop_and_is_not_forwarded(core):
    frames = []
    events = []
    core.update_and_render = frames.append
    core.input_handler = events.append
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    core.main_loop()
    assert len(frames) == 1
    assert all(event.type != pygame.QUIT for event in events)


def test_escape_ends_loop_and_reaches_input_handler(core):
    frames = []
    events = []
    core.update_and_render = frames.append
    core.input_handler = events.append
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    core.main_loop()
    assert len(frames) == 1
    keys = [e.key for e in events if e.type == pygame.KEYDOWN]
    assert keys == [pygame.K_ESCAPE]


def test_f12_saves_screenshot(core, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    events = []
    core.input_handler = events.append
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F12))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    core.main_loop()
    assert len(list(tmp_path.glob("*.png"))) == 1
    assert [e.key for e in events if e.type == pygame.KEYDOWN] == [pygame.K_F12]


def test_save_screenshot_round_trip(core, tmp_path):
    core.canvas.clear_color = (1, 2, 3)
    core.canvas.clear()
    path = tmp_path / "shot.png"
    core.save_screenshot(path)
    assert Image.from_png(path).canvas.pixels == core.canvas.pixels


def test_render_canvas_shows_canvas(core):
    core.canvas.clear_color = (10, 20, 30)
    core.canvas.clear()
    core.canvas.set_pixel(5, 6, 200, 100, 50)
    core.render_canvas()
    assert tuple(core.window.get_at((0, 0)))[:3] == (10, 20, 30)
    assert tuple(core.window.get_at((5, 6)))[:3] == (200, 100, 50)


def test_wait_for_events_returns_key_release(core):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    event = core.wait_for_events()
    assert event.type == pygame.KEYUP


def test_close_shuts_down(core):
    core.close()
    assert core.canvas is None
    assert pygame.display.get_init() is False
    with pytest.raises(RuntimeError):
        core.render_canvas()