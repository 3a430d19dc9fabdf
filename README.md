# superseq

`superseq` models the menu of a small drum and synth sequencer editor. The
menu has a header with three modes (EDIT, PERFORM, SEQUENCE), an edit area
with three pages (DRUM, SYNTH, MOD), and a drum editor grid of six voices by
fourteen parameters (Sample, S-Rate, Pitch, Vol, Pan, V-ADSR, F-ADSR, Depth,
F-Cut, F-Res, Start, End, Loop, Xfade). Each cell in the Pitch row holds an
integer input that starts at 0 with a range of -12 to 12.

Nothing is drawn to a display. Each rendered frame is recorded on a `Canvas`
as a tuple of drawing commands (`Clear`, `FillRect`, `Text`), so the editor
can be driven from scripts and its output inspected.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
superseq session.txt
superseq < session.txt
```

`superseq` reads controller input from the named file, or from standard
input when no file (or `-`) is given, one frame per line. Each line names the
buttons pressed in that frame, separated by spaces or commas; text after `#`
is ignored and an empty line is a frame with nothing pressed:

```
r
l
c_right
a        # focus the current cell
d_down
b
```

Button names are `a`, `b`, `z`, `start`, `d_up`, `d_down`, `d_left`,
`d_right`, `l`, `r`, `c_up`, `c_down`, `c_left` and `c_right`.

The menu is rendered once at the start and again after every frame that
changes it. When the input ends, the command prints the number of drawing
commands in each frame and the final mode, for example:

```
frame 0: 104 commands
frame 1: 5 commands
mode: EDIT
```

An unknown button name or an unreadable file ends the command with a message
on standard error and exit status 2.

Controls:

- `l` and `r` switch between the main modes (no wrapping).
- `c_left` and `c_right` switch the edit page while in EDIT mode.
- In the drum editor, the d-pad moves the cursor and wraps at the edges;
  `a` focuses the cell under the cursor and `b` leaves it.

## Library use

```python
from superseq.input import Buttons, InputState
from superseq.menu import Menu
from superseq.render import Canvas

menu = Menu()
canvas = Canvas()
controls = InputState()

menu.render(canvas)                       # grids take input once rendered
controls.update(Buttons.from_names(["d_right"]))
if menu.update(controls):
    frame = menu.render(canvas)           # tuple of drawing commands
print(menu.drum_grid.cur_x, menu.mode.name)
```

`superseq.app.run(lines, canvas)` does the same for an iterable of input
lines and returns the `Menu`.

Modules:

- `superseq.synth` – `Voice`, `Sample`, `Envelope` and `Lfo` settings with
  `EnvelopeType` and `LfoShape`; a sample's rate divisor must be 1, 2, 4 or 8.
- `superseq.input` – `Buttons` (one frame's pressed buttons), `InputState`,
  `Direction` and `NavigationAxis`.
- `superseq.render` – `Color`, `FontStyle`, `default_font_styles()`, the
  command types and the recording `Canvas`.
- `superseq.ui_elements` – `SelectionGrid`, `GridCell` and `IntInput`.
- `superseq.menu` – `Menu`, `Section`, `Label`, `Palette`, `DisplayState`,
  `MainMode` and `EditPage`.
- `superseq.app` – `parse_buttons`, `run`, `random_range` and `main`.

## What it does not do

- It makes no sound. The synth settings are plain data; nothing plays samples
  or applies envelopes and LFOs.
- It has no display or window; frames exist only as recorded commands.
- The PERFORM and SEQUENCE screens and the SYNTH and MOD pages are empty.
- Pitch values cannot yet be changed: inside a focused cell the directions
  have no effect.
- There is no saving or loading of presets, projects or sequences.