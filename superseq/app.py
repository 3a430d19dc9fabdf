"""Run the sequencer's menu from a stream of controller frames."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Sequence

from superseq.input import Buttons, InputState
from superseq.menu import Menu
from superseq.render import Canvas

# Mixer channel allocation.
CHANNEL_SFX1 = 0
CHANNEL_SFX2 = 1
CHANNEL_MUSIC = 2
# Controller port allocation.
DRUM_PORT = 0
MELODIC_PORT = 1
MOD_PORT = 2
VISUAL_PORT = 3

OUTPUT_FREQUENCY = 48000
AUDIO_BUFFERS = 4
MIXER_CHANNELS = 16
MUSIC_MAX_FREQUENCY = 128000


def random_range(low: int, high: int, rng: random.Random | None = None) -> int:
    """A random integer between ``low`` and ``high``, both included."""
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    source = rng if rng is not None else random
    return source.randint(low, high)


def parse_buttons(line: str) -> Buttons:
    """Read one frame of input: button names separated by spaces or commas.

    Text after ``#`` is ignored; an empty line means nothing was pressed.
    """
    content = line.split("#", 1)[0]
    return Buttons.from_names(content.replace(",", " ").split())


def run(lines: Iterable[str], canvas: Canvas) -> Menu:
    """Draw the menu, then feed it one frame per line, redrawing on change."""
    menu = Menu()
    controls = InputState()
    menu.render(canvas)
    for line in lines:
        controls.update(parse_buttons(line))
        if menu.update(controls):
            menu.render(canvas)
    return menu


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="superseq",
        description="Drive the sequencer menu with one line of pressed buttons per frame.",
    )
    parser.add_argument(
        "input", nargs="?", default="-", help="file of button frames ('-' for stdin)"
    )
    args = parser.parse_args(argv)

    canvas = Canvas()
    try:
        if args.input == "-":
            menu = run(sys.stdin, canvas)
        else:
            with open(args.input, encoding="utf-8") as handle:
                menu = run(handle, canvas)
    except (OSError, ValueError) as exc:
        print(f"superseq: {exc}", file=sys.stderr)
        return 2

    for index, frame in enumerate(canvas.frames):
        print(f"frame {index}: {len(frame)} commands")
    print(f"mode: {menu.mode.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())