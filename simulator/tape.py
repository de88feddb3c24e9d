from enum import Enum

from simulator.errors import AllocationError

BLANK = "_"
WILDCARD = "*"
LINE_TERMINATORS = ("\n", "\r")


class Move(Enum):
    LEFT = "l"
    RIGHT = "r"
    STAY = "*"

    @classmethod
    def parse(cls, value):
        """Map a source-file move character to a Move, or None if it is not one."""
        for move in cls:
            if move.value == value:
                return move
        return None


class Tape:
    """
    Infinite bidirectional tape that materializes cells lazily.

    Cells at positions >= 0 live in `_right`, cells at negative positions
    live in `_left` (position -1 is `_left[0]`), so both ends grow by append.
    """

    def __init__(self, blank=BLANK, max_cells=None):
        self.blank = blank
        self.max_cells = max_cells or None
        self._left = []
        self._right = [blank]
        self._pos = 0

    @classmethod
    def initialize(cls, symbols, blank=BLANK, max_cells=None):
        tape = cls(blank=blank, max_cells=max_cells)
        first = True
        for symbol in symbols:
            if symbol in LINE_TERMINATORS:
                continue
            if not first:
                tape.move(Move.RIGHT)
            tape.write(symbol)
            first = False
        tape.seek_to_leftmost()
        return tape

    @property
    def head(self):
        return self._pos

    @property
    def leftmost(self):
        return -len(self._left)

    @property
    def rightmost(self):
        return len(self._right) - 1

    def __len__(self):
        return len(self._left) + len(self._right)

    def _cell(self, position):
        if position < 0:
            return self._left[-position - 1]
        return self._right[position]

    def read(self):
        return self._cell(self._pos)

    def write(self, symbol):
        # Wildcard in the output column leaves the cell untouched
        if symbol == WILDCARD:
            return
        if self._pos < 0:
            self._left[-self._pos - 1] = symbol
        else:
            self._right[self._pos] = symbol

    def _materialize(self, cells):
        if self.max_cells is not None and len(self) >= self.max_cells:
            raise AllocationError(f"Tape is limited to {self.max_cells:,} cells")
        try:
            cells.append(self.blank)
        except MemoryError as e:
            raise AllocationError(f"Out of memory after {len(self):,} cells") from e

    def move(self, direction):
        if direction is Move.RIGHT:
            if self._pos + 1 > self.rightmost:
                self._materialize(self._right)
            self._pos += 1
        elif direction is Move.LEFT:
            if self._pos - 1 < self.leftmost:
                self._materialize(self._left)
            self._pos -= 1

    def seek_to_leftmost(self):
        self._pos = self.leftmost

    def cells(self):
        """Yield (position, symbol) for every materialized cell, left to right."""
        for position in range(self.leftmost, self.rightmost + 1):
            yield position, self._cell(position)

    def render(self):
        return "".join(symbol for _, symbol in self.cells() if symbol != self.blank)

    def visualize(self, window=10):
        """Two-line view of the cells around the head with a `^` marker under it."""
        start = max(self.leftmost, self._pos - window)
        end = min(self.rightmost, self._pos + window)

        tape_str = ""
        head_str = ""
        for position in range(start, end + 1):
            tape_str += f"{self._cell(position)} "
            head_str += "^ " if position == self._pos else "  "
        return tape_str.rstrip() + "\n" + head_str.rstrip()
