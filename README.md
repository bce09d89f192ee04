# snake2d

A classic snake game. It is drawn on a software pixel canvas and shown in a
pygame window. The snake speeds up with every fruit it eats.

## Installing

```
pip install .
```

## Playing

```
snake2d
```

The command takes no options other than `--help`. It opens a 640x480 window
titled "Example Game for Spinach".

The game loads its bitmap font from `res/TrueNoFontAtlas.ppm` (a binary P6
PPM) and `res/TrueNoFontData.csv`. Both paths are relative to the directory
you start it from, and the package does not include these files. If the
video system, the window or the font cannot be set up, the command prints
`initialization failed with error N` and exits with status 1. N is 1 for
video, 2 for the window and 4 for the font.

Keys:

- Arrow keys steer the snake. The head cannot turn onto the axis it is
  already moving along, so it cannot reverse straight back.
- F5 restarts.
- F12 saves the canvas as a PNG file named after the current local time,
  for example `20240131_142500.png`, in the current directory.
- Escape, or closing the window, quits.

The game starts at 5 frames per second. Each fruit eaten adds one point,
grows the snake by one segment and adds one frame per second, up to 60.
The world wraps at its edges. If the head runs into the body, the score line
changes to `Game Over! Score: N` and the picture freezes. Press F5 to play
again.

## Using the pieces

The package can also be used as a library:

- `snake2d.canvas.Canvas`: a BGRA pixel buffer (`pixels`, `width`,
  `height`) with a `primary_color`, a `clear_color` and an optional `font`.
  It offers `clear`, `set_pixel` and `get_pixel`, `draw_filled_rect`,
  `draw_line`, `draw_image`, `draw_image_chroma_keyed`,
  `draw_sub_image_chroma_keyed`, `draw_text`, `flip_horizontally`,
  `flip_vertically` and `clone`. Setting `alpha_blending` makes image
  drawing blend by source alpha.
- `snake2d.blit.bit_block_transfer`: the block copy behind image and text
  drawing. It supports clipping, chroma keys, colour replacement and alpha
  blending.
- `snake2d.image.Image`: `blank`, `solid_color_block` and `checker`
  images. `from_png` loads anything Pillow can read, `from_ppm_raw` loads
  binary PPM files, and `save_as_png` writes PNG files. Failures raise
  `ImageError`.
- `snake2d.rfont.RFont`: a bitmap font made of an atlas image and a CSV
  file of metrics. `RFont.load(image_path, csv_path)` loads one, and
  `parse_font_metrics` reads the CSV lines. Failures raise `FontError`.
- `snake2d.core.SpinachCore`: the window, frame timing and event loop. It
  takes an update-and-render callback, which receives the canvas, and an
  input callback, which receives pygame events. The font paths can be
  passed in. It can be used as a context manager and raises
  `CoreInitError` when setup fails.
- `snake2d.utils`: `Rect`, `intersect_rects` and `screenshot_file_name`.
- `snake2d.segment`, `snake2d.snake` and `snake2d.game` hold the game
  itself. `Game` takes an optional `random.Random` so that fruit placement
  can be reproduced.

## Running the tests

```
pip install ".[test]"
pytest
```