"""The sequencer's menu: mode header, edit pages and the drum editor grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from superseq.input import InputState, NavigationAxis
from superseq.render import Canvas, Color, DrawCommand
from superseq.ui_elements import GridCell, SelectionGrid

SCREEN_WIDTH = 512
HEADER_HEIGHT = 20
LABEL_WIDTH = 100

DRUM_ROW_NAMES = (
    "Sample",
    "S-Rate",
    "Pitch",
    "Vol",
    "Pan",
    "V-ADSR",
    "F-ADSR",
    "Depth",
    "F-Cut",
    "F-Res",
    "Start",
    "End",
    "Loop",
    "Xfade",
)
DRUM_VOICES = 6
PITCH_ROW = 2
PITCH_RANGE = (-12, 12)


class MainMode(IntEnum):
    """The top-level screens chosen with L and R."""

    EDIT = 0
    PERFORM = 1
    SEQUENCE = 2


class EditPage(IntEnum):
    """The edit screens chosen with C-left and C-right."""

    DRUM = 0
    SYNTH = 1
    MOD = 2


@dataclass
class DisplayState:
    """Whether the display and the menu need drawing again."""

    update_display: bool = False
    redraw_menu: bool = False


@dataclass
class Palette:
    """Menu colours; an odd ``color_mode`` picks the light background."""

    bkg_dark: Color = Color(0x21, 0x21, 0x21, 0xFF)
    bkg_light: Color = Color(0xA9, 0xAF, 0xD1, 0xFF)
    menu_bkg: Color = Color(0x17, 0x43, 0x4E, 0xFF)
    menu_end: Color = Color(0x5C, 0x07, 0x44, 0xFF)
    highlight: Color = Color(255, 255, 0, 255)
    color_mode: int = 0

    @property
    def background(self) -> Color:
        return self.bkg_light if self.color_mode & 1 else self.bkg_dark


@dataclass
class Label:
    """A line of text; selected labels are drawn highlighted."""

    x: int
    y: int
    text: str
    visible: bool = True
    selected: bool = False


@dataclass
class Section:
    """A group of labels and grids with child sections, one of them current."""

    labels: list[Label] = field(default_factory=list)
    grids: list[SelectionGrid] = field(default_factory=list)
    cur_selection: int = -1
    is_selected: bool = True
    children: list[Section] = field(default_factory=list)

    def defocus(self) -> None:
        """Take the focus from every grid in this section and its children."""
        for grid in self.grids:
            grid.focused = False
        for child in self.children:
            child.defocus()


def _labels(*entries: tuple[int, int, str]) -> list[Label]:
    return [Label(x, y, text) for x, y, text in entries]


def _drum_editor_grid() -> SelectionGrid:
    grid = SelectionGrid(
        id="drum_editor_grid",
        x=15,
        y=52,
        width=DRUM_VOICES,
        height=len(DRUM_ROW_NAMES),
        navigation_input=NavigationAxis.STICK,
    )
    grid.init_cells(DRUM_ROW_NAMES, ["Voice"], 70, 70, 44, 13, 65, 11)
    low, high = PITCH_RANGE
    for voice in range(grid.width):
        grid.add_int_input(voice, PITCH_ROW, 0, low, high)
    return grid


class Menu:
    """The whole menu tree and the state that input moves through it.

    Grids only take input once a render has given them the focus.
    """

    def __init__(self, palette: Palette | None = None) -> None:
        self.palette = palette if palette is not None else Palette()
        self.display = DisplayState()
        self.drum_grid = _drum_editor_grid()
        self.header = Section(
            labels=_labels((70, 20, "EDIT"), (220, 20, "PERFORM"), (370, 20, "SEQUENCE")),
            cur_selection=0,
        )
        drum_labels = [
            Label(10, 52 + row * 13, name) for row, name in enumerate(DRUM_ROW_NAMES)
        ]
        drum_labels += [
            Label(80 + voice * 70, 41, f"Voice {voice + 1}") for voice in range(DRUM_VOICES)
        ]
        self.edit_drum = Section(labels=drum_labels, grids=[self.drum_grid])
        self.perform = Section()
        self.sequence = Section()
        self.edit = Section(
            labels=_labels((70, 30, "DRUM"), (220, 30, " SYNTH"), (370, 30, "  MOD")),
            cur_selection=0,
            children=[self.edit_drum, self.perform, self.sequence],
        )
        self.body_sections = [self.edit, self.perform, self.sequence]
        self.grids = [self.drum_grid]

    @property
    def mode(self) -> MainMode:
        return MainMode(self.header.cur_selection)

    @property
    def edit_page(self) -> EditPage:
        return EditPage(self.edit.cur_selection)

    def update(self, controls: InputState) -> bool:
        """Apply one frame of input; returns whether the menu needs redrawing."""
        buttons = controls.pressed
        changed = False
        if buttons.l and self.header.cur_selection > 0:
            self.header.cur_selection -= 1
            changed = True
        elif buttons.r and self.header.cur_selection < len(MainMode) - 1:
            self.header.cur_selection += 1
            changed = True

        in_edit = self.header.cur_selection == MainMode.EDIT
        if buttons.c_left and in_edit and self.edit.cur_selection > 0:
            self.edit.cur_selection -= 1
            changed = True
        if buttons.c_right and in_edit and self.edit.cur_selection < len(EditPage) - 1:
            self.edit.cur_selection += 1
            changed = True

        for grid in self.grids:
            if grid.update(controls):
                changed = True
        self.display.redraw_menu = changed
        return changed

    def render(self, canvas: Canvas) -> tuple[DrawCommand, ...]:
        """Draw the whole menu as one frame and return its commands."""
        palette = self.palette
        canvas.clear(palette.background)
        canvas.fill_rect(0, 0, SCREEN_WIDTH, HEADER_HEIGHT, palette.menu_bkg)
        for step in range(4):
            shade = palette.menu_bkg.scaled(8 - step, 8)
            canvas.fill_rect(
                0,
                HEADER_HEIGHT + 3 * step + 1,
                SCREEN_WIDTH,
                HEADER_HEIGHT + 3 * step + 3,
                shade,
            )

        self.render_section(self.header, canvas)
        current = self.header.cur_selection
        for index, section in enumerate(self.body_sections):
            if index == current:
                self.render_section(section, canvas)
            else:
                section.defocus()
        self.display.redraw_menu = False
        return canvas.present()

    def render_section(self, section: Section, canvas: Canvas) -> None:
        """Draw a section and its current child; the other children lose focus."""
        for index, label in enumerate(section.labels):
            label.selected = section.cur_selection == index
            self._render_label(label, canvas)
        for grid in section.grids:
            grid.focused = True
            self._render_grid(grid, canvas)
        for index, child in enumerate(section.children):
            if index == section.cur_selection:
                self.render_section(child, canvas)
            else:
                child.defocus()

    @staticmethod
    def _render_label(label: Label, canvas: Canvas) -> None:
        canvas.text(label.x, label.y, label.text, 1 if label.selected else 0, LABEL_WIDTH)

    def _render_grid(self, grid: SelectionGrid, canvas: Canvas) -> None:
        for column in grid.cells:
            for cell in column:
                self._render_cell(cell, canvas)

    def _render_cell(self, cell: GridCell, canvas: Canvas) -> None:
        right = cell.x + cell.width
        bottom = cell.y + cell.height
        if cell.selected:
            canvas.fill_rect(cell.x - 1, cell.y - 1, right + 1, bottom + 1, self.palette.highlight)
        canvas.fill_rect(cell.x, cell.y, right, bottom, self.palette.menu_bkg)
        style = 1 if cell.focused else 0
        for int_input in cell.int_inputs:
            canvas.text(
                cell.x + (cell.width // 2 - 3),
                cell.y + (cell.height - 2),
                str(int_input.value),
                style,
                cell.width,
            )