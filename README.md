# eorzeos

A small command shell that runs on a simulated text-mode screen. The
screen is a grid of character cells (80x25 by default), each holding a
glyph and a colour attribute, written at a cursor. When output runs past
the bottom row, the bottom row is blanked and the cursor is parked at its
start.

## Installing

    pip install .

## Running

    eorzeos [--seed N]

The shell clears the screen, prints `Welcome to EorzeOS!` and shows a
prompt such as `user> `. Lines are read from standard input and output is
written to standard output; the session ends when input ends. `--seed`
fixes the starting value of the random generator used by `yogurt`;
without it the generator is seeded from the time of day.

## Commands

Input is split on spaces into a command and up to two arguments; each
word is cut to 63 characters.

| Command | Effect |
| --- | --- |
| `user <name>` | Change the prompt's user name (cut to 15 characters); with no name it resets to `user` |
| `grandcompany <name>` | Clear the screen, change the text colour and add a suffix to the prompt: `maelstrom` (red, `@Storm`), `twinadder` (yellow, `@Serpent`), `immortalflames` (blue, `@Flame`) |
| `clear` | Clear the screen, restore the default colour and drop the suffix |
| `add a b`, `sub a b`, `mul a b`, `div a b` | 32-bit integer arithmetic; division truncates toward zero, and division by zero is reported as an error |
| `yogurt` | One of three random replies |
| `yo` / `gurt` | Answer each other |

Any other non-blank line is echoed back.

## Using it as a library

    from eorzeos.screen import Screen
    from eorzeos.shell import Shell, boot, parse_command

    screen = Screen(80, 25, 0x07)
    shell = Shell(screen, iter([]), 1)
    shell.execute("add 2 3")
    print(screen.lines())        # rows with trailing blanks removed
    print(screen.cursor())       # (x, y)

    parse_command("div 10 3")    # Command(name='div', args=('10', '3'))

`Shell.run()` prompts, reads and executes lines until its key source is
exhausted; keys are single characters, with `"\r"` ending a line and
`"\b"` erasing one. `boot(screen, keys, seed)` clears the screen, prints
the greeting, runs a shell and returns it.

`eorzeos.screen` also provides `read_string(screen, keys)`, which reads
one line with echo and raises `EOFError` if the keys run out.
`Screen.cell(x, y)` returns a `(character, attribute)` pair and
`Screen.row_text(y)` a whole row.

`eorzeos.numeric` provides the integer helpers `div`, `mod`, `atoi` and
`itoa` used by the arithmetic commands.

## What it does not do

The screen is a model held in memory: colour attributes are kept per cell
but are not shown in the terminal, and there is no real video memory,
keyboard hardware or bootable disk image. The shell has no file system
and no commands beyond those listed above.

## Tests

    pip install .[test]
    pytest