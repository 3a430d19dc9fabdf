"""Selection grids, their cells and the integer inputs held in the cells."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from superseq.input import Direction, InputState, NavigationAxis


@dataclass
class IntInput:
    """An integer value edited inside a grid cell."""

    id: str
    value: int = 0
    default: int = 0
    minimum: int = 0
    maximum: int = 0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    visible: bool = True
    enabled: bool = True
    selected: bool = False
    focused: bool = False

    @classmethod
    def create(cls, id: str, default: int, minimum: int, maximum: int) -> IntInput:
        """An input that starts at its default value."""
        return cls(id=id, value=default, default=default, minimum=minimum, maximum=maximum)

    def focus(self) -> None:
        """Give this input the focus."""
        self.focused = True


@dataclass
class GridCell:
    """One cell of a selection grid."""

    id: str
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    visible: bool = True
    enabled: bool = True
    selected: bool = False
    focused: bool = False
    int_inputs: list[IntInput] = field(default_factory=list)
    inputs: list[Any] = field(default_factory=list)
    cur_input: int = 0

    def focus(self) -> None:
        """Focus the cell; a cell with a single input passes the focus on to it."""
        self.focused = True
        self.cur_input = 0
        if len(self.inputs) == 1:
            self.inputs[0].focus()

    def update(self, controls: InputState) -> bool:
        """Handle one frame of input while focused; B leaves the cell.

        Returns whether anything changed.
        """
        if controls.pressed.b:
            self.focused = False
            return True
        # Directions inside a cell are read but have no effect yet.
        for direction in (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN):
            if controls.direction_pressed(direction, None):
                break
        return False


@dataclass
class SelectionGrid:
    """A grid of cells navigated with directional input.

    Cells are stored column by column: ``cells[x][y]``.
    """

    id: str
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    navigation_input: NavigationAxis = NavigationAxis.STICK
    cur_x: int = 0
    cur_y: int = 0
    visible: bool = True
    enabled: bool = True
    selected: bool = False
    focused: bool = False
    cells: list[list[GridCell]] = field(default_factory=list)

    def init_cells(
        self,
        row_names: Sequence[str],
        col_names: Sequence[str],
        x_start: int,
        x_step: int,
        y_start: int,
        y_step: int,
        cell_width: int,
        cell_height: int,
    ) -> None:
        """Create every cell of the grid, laid out from (x_start, y_start).

        A single row or column name is shared by every row or column. The
        cell at (0, 0) starts selected.
        """
        if len(col_names) != 1 and len(col_names) < self.width:
            raise ValueError(
                f"need 1 or at least {self.width} column names, got {len(col_names)}"
            )
        if len(row_names) != 1 and len(row_names) < self.height:
            raise ValueError(
                f"need 1 or at least {self.height} row names, got {len(row_names)}"
            )
        columns = []
        for i in range(self.width):
            col_name = col_names[0] if len(col_names) == 1 else col_names[i]
            column = []
            for j in range(self.height):
                row_name = row_names[0] if len(row_names) == 1 else row_names[j]
                column.append(
                    GridCell(
                        id=f"{col_name}_{i}_{row_name}_{j}",
                        x=x_start + i * x_step,
                        y=y_start + j * y_step,
                        width=cell_width,
                        height=cell_height,
                        visible=True,
                        enabled=True,
                        selected=(i == 0 and j == 0),
                    )
                )
            columns.append(column)
        self.cells = columns

    def add_int_input(
        self, x: int, y: int, default: int, minimum: int, maximum: int
    ) -> IntInput:
        """Add an integer input to the cell at (x, y) and return it."""
        cell = self.cell(x, y)
        if cell is None:
            raise IndexError(f"no cell at ({x}, {y}) in a {self.width}x{self.height} grid")
        new_input = IntInput.create(f"{cell.id}_int_input", default, minimum, maximum)
        cell.int_inputs.append(new_input)
        return new_input

    def cell(self, x: int, y: int) -> GridCell | None:
        """The cell at (x, y), or None when the position lies outside the grid."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        if not self.cells:
            raise RuntimeError("grid cells have not been initialised")
        return self.cells[x][y]

    def current_cell(self) -> GridCell | None:
        """The cell under the cursor, or None when the cursor is outside the grid."""
        return self.cell(self.cur_x, self.cur_y)

    def current_cell_focused(self) -> bool:
        """Whether the cell under the cursor has the focus."""
        cell = self.current_cell()
        return cell is not None and cell.focused

    def focus_current_cell(self) -> None:
        """Give the focus to the cell under the cursor."""
        cell = self.current_cell()
        if cell is not None:
            cell.focused = True

    def defocus_current_cell(self) -> None:
        """Take the focus from the cell under the cursor."""
        cell = self.current_cell()
        if cell is not None:
            cell.focused = False

    def select_current_cell(self) -> None:
        """Mark the cell under the cursor as selected."""
        cell = self.current_cell()
        if cell is not None:
            cell.selected = True

    def _move_cursor(self, controls: InputState) -> bool:
        axis = self.navigation_input
        if controls.direction_pressed(Direction.UP, axis):
            self.cur_y = self.cur_y - 1 if self.cur_y > 0 else self.height - 1
        elif controls.direction_pressed(Direction.DOWN, axis):
            self.cur_y = self.cur_y + 1 if self.cur_y + 1 < self.height else 0
        elif controls.direction_pressed(Direction.LEFT, axis):
            self.cur_x = self.cur_x - 1 if self.cur_x > 0 else self.width - 1
        elif controls.direction_pressed(Direction.RIGHT, axis):
            self.cur_x = self.cur_x + 1 if self.cur_x + 1 < self.width else 0
        else:
            return False
        return True

    def update(self, controls: InputState) -> bool:
        """Handle one frame of input; returns whether the grid needs redrawing.

        With no cell focused the directions move the cursor, wrapping at the
        edges. With a cell focused, input goes to that cell and B leaves it.
        A focuses the cell under the cursor.
        """
        if not self.focused:
            return False
        changed = False
        if not self.current_cell_focused():
            last_cell = self.current_cell()
            if self._move_cursor(controls):
                changed = True
            current = self.current_cell()
            if last_cell is not current:
                if last_cell is not None:
                    last_cell.selected = False
                self.select_current_cell()
        else:
            if controls.pressed.b:
                self.defocus_current_cell()
                changed = True
            current = self.current_cell()
            if current is not None and current.update(controls):
                changed = True
        if controls.pressed.a:
            self.focus_current_cell()
            changed = True
        return changed