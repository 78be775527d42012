"""The interactive command shell and the boot sequence that starts it."""

import argparse
import operator
import sys
from datetime import datetime
from typing import NamedTuple

from eorzeos.numeric import atoi, div, itoa
from eorzeos.screen import DEFAULT_ATTRIBUTE, Screen, read_string

TOKEN_MAX_LEN = 63
USERNAME_MAX_LEN = 15
DEFAULT_USERNAME = "user"

TEXT_COLOR_DEFAULT = DEFAULT_ATTRIBUTE
TEXT_COLOR_RED = 0x04
TEXT_COLOR_YELLOW = 0x0E
TEXT_COLOR_BLUE = 0x01

GRAND_COMPANIES = {
    "maelstrom": (TEXT_COLOR_RED, "@Storm"),
    "twinadder": (TEXT_COLOR_YELLOW, "@Serpent"),
    "immortalflames": (TEXT_COLOR_BLUE, "@Flame"),
}

YOGURT_RESPONSES = ("yo", "ts unami gng </3", "sygau")

WELCOME = "Welcome to EorzeOS!\n"

_OPERATIONS = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": div,
}

_TICKS_PER_SECOND = 1193182 / 65536


def _int32(value):
    return (value + 0x80000000) % 0x100000000 - 0x80000000


def _bios_tick():
    """Timer ticks since midnight, as the system clock counts them."""
    now = datetime.now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return int((now - midnight).total_seconds() * _TICKS_PER_SECOND) & 0xFFFFFFFF


class Command(NamedTuple):
    name: str
    args: tuple


def parse_command(line):
    """Split a line on spaces into a command name and up to two arguments."""
    tokens = [token[:TOKEN_MAX_LEN] for token in line.split(" ") if token][:3]
    tokens += [""] * (3 - len(tokens))
    return Command(tokens[0], (tokens[1], tokens[2]))


class Shell:
    """Reads commands from a key source and writes replies to a screen."""

    def __init__(self, screen=None, keys=(), seed=None):
        self.screen = Screen() if screen is None else screen
        self._keys = iter(keys)
        self._seed = (seed or 0) & 0xFFFFFFFF
        self.username = DEFAULT_USERNAME
        self.suffix = ""

    def random(self, limit):
        """Next pseudo-random number in ``range(limit)``; 0 when ``limit`` is not positive."""
        if limit <= 0:
            return 0
        if self._seed == 0:
            self._seed = _bios_tick()
        self._seed = (self._seed * 1103515245 + 12345) & 0xFFFFFFFF
        return (self._seed // 65536) % limit

    def prompt(self):
        return f"{self.username}{self.suffix}> "

    def _say(self, text):
        self.screen.print_string(text)

    def execute(self, line):
        """Run one input line."""
        command = parse_command(line)
        if not command.name:
            if line and line[0] not in "\n\r":
                self._say(line + "\n")
            return
        first, second = command.args
        match command.name:
            case "user":
                self._set_user(first)
            case "grandcompany":
                self._join_grand_company(first)
            case "clear":
                self._clear()
            case "add" | "sub" | "mul" | "div":
                self._math(command.name, first, second)
            case "yogurt":
                self._say(YOGURT_RESPONSES[self.random(len(YOGURT_RESPONSES))] + "\n")
            case "yo":
                self._say("gurt\n")
            case "gurt":
                self._say("yo\n")
            case _:
                self._say(line + "\n")

    def _set_user(self, name):
        self.username = name[:USERNAME_MAX_LEN] if name else DEFAULT_USERNAME
        self._say(f"Username changed to {self.username}\n")

    def _join_grand_company(self, name):
        if name in GRAND_COMPANIES:
            color, suffix = GRAND_COMPANIES[name]
            self.screen.clear()
            self.screen.set_text_color(color)
            self.suffix = suffix
        elif not name:
            self._say(
                "Error: Grand Company name required. (maelstrom, twinadder, immortalflames)\n"
            )
        else:
            self._say(f"Error: Unknown Grand Company '{name}'.\n")

    def _clear(self):
        self.screen.clear()
        self.screen.set_text_color(TEXT_COLOR_DEFAULT)
        self.suffix = ""

    def _math(self, operation, first, second):
        if not first or not second:
            self._say("Math error: Two arguments required.\n")
            return
        left, right = atoi(first), atoi(second)
        if operation == "div" and right == 0:
            self._say("Math error: Division by zero.\n")
            return
        result = _int32(_OPERATIONS[operation](left, right))
        self._say(itoa(result) + "\n")

    def run(self):
        """Prompt, read and execute lines until the key source is exhausted."""
        while True:
            self._say(self.prompt())
            try:
                line = read_string(self.screen, self._keys)
            except EOFError:
                return
            self.execute(line)


def boot(screen=None, keys=(), seed=None):
    """Clear the screen, greet, and run a shell until input ends; return the shell."""
    screen = Screen() if screen is None else screen
    screen.clear()
    screen.set_text_color(DEFAULT_ATTRIBUTE)
    screen.print_string(WELCOME)
    shell = Shell(screen, keys, seed)
    shell.run()
    return shell


class _TerminalScreen(Screen):
    """A screen that also mirrors its output to a text stream."""

    def __init__(self, stream):
        super().__init__()
        self._stream = stream
        self.hide_echo = False

    def print_char(self, c):
        super().print_char(c)
        if self.hide_echo:
            # The terminal already showed the typed line and its newline.
            if c == "\n":
                self.hide_echo = False
            return
        if c == "\b":
            self._stream.write("\b \b")
        elif c in "\n\r" or " " <= c <= "\x7f":
            self._stream.write(c)
        self._stream.flush()

    def clear(self):
        super().clear()
        if hasattr(self, "_stream"):
            self._stream.write("\x1b[2J\x1b[H")
            self._stream.flush()


def _terminal_keys(screen, stream):
    for line in stream:
        screen.hide_echo = True
        yield from line.rstrip("\r\n")
        yield "\r"


def main(argv=None):
    parser = argparse.ArgumentParser(prog="eorzeos", description="Run the EorzeOS shell.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)
    screen = _TerminalScreen(sys.stdout)
    try:
        boot(screen, _terminal_keys(screen, sys.stdin), args.seed)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())