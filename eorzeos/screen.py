"""A text-mode video buffer with a cursor, and line input on top of it."""

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 25
DEFAULT_ATTRIBUTE = 0x07


class Screen:
    """Character cells holding a glyph and a colour attribute, written at a cursor."""

    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, attribute=DEFAULT_ATTRIBUTE):
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self.attribute = DEFAULT_ATTRIBUTE
        self.set_text_color(attribute)
        self._cells = [[(" ", self.attribute)] * width for _ in range(height)]
        self._x = 0
        self._y = 0

    def set_text_color(self, attribute):
        """Set the attribute used for characters written from now on."""
        if not 0 <= attribute <= 0xFF:
            raise ValueError(f"attribute out of range: {attribute!r}")
        self.attribute = attribute

    def _put(self, x, y, char):
        self._cells[y][x] = (char, self.attribute)

    def _scroll(self):
        # The bottom row is blanked and the cursor parked there; rows above stay put.
        bottom = self.height - 1
        for x in range(self.width):
            self._put(x, bottom, " ")
        self._x = 0
        self._y = bottom

    def print_char(self, c):
        """Write one character, handling newline, carriage return and backspace."""
        if len(c) != 1:
            raise ValueError("print_char expects a single character")
        if c == "\n":
            self._y += 1
            self._x = 0
        elif c == "\r":
            self._x = 0
        elif c == "\b":
            if self._x > 0:
                self._x -= 1
                self._put(self._x, self._y, " ")
            elif self._y > 0:
                self._y -= 1
                self._x = self.width - 1
        elif " " <= c <= "\x7f":
            self._put(self._x, self._y, c)
            self._x += 1

        if self._x >= self.width:
            self._x = 0
            self._y += 1
        if self._y >= self.height:
            self._scroll()

    def print_string(self, text):
        """Write every character of ``text``."""
        for c in text:
            self.print_char(c)

    def clear(self):
        """Blank every cell with the current attribute and home the cursor."""
        self._cells = [[(" ", self.attribute)] * self.width for _ in range(self.height)]
        self._x = 0
        self._y = 0

    def cell(self, x, y):
        """Return the ``(character, attribute)`` pair at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside the screen")
        return self._cells[y][x]

    def row_text(self, y):
        """Return the characters of row ``y``, trailing blanks included."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside the screen")
        return "".join(char for char, _ in self._cells[y])

    def lines(self):
        """Return every row with trailing blanks removed."""
        return [self.row_text(y).rstrip(" ") for y in range(self.height)]

    def cursor(self):
        """Return the cursor position as ``(x, y)``."""
        return (self._x, self._y)


def read_string(screen, keys):
    """Read keys until carriage return, echoing to ``screen``; return the line.

    ``keys`` yields single characters; pass an iterator to keep its position
    between calls. Raises EOFError if it runs out before a carriage return.
    """
    buffer = []
    for c in keys:
        if c == "\r":
            screen.print_char("\n")
            return "".join(buffer)
        if c == "\b":
            if buffer:
                buffer.pop()
                screen.print_char("\b")
        elif " " <= c <= "~":
            buffer.append(c)
            screen.print_char(c)
    raise EOFError("keyboard input exhausted")