# smallsh

A small interactive shell for POSIX systems.

## Features

- A `: ` prompt that reads one command per line; the shell ends on `exit`
  or at end of input
- Blank lines and lines whose first word starts with `#` are ignored
- Built-in commands:
  - `exit` leaves the shell
  - `cd [dir]` changes the working directory (see below)
  - `status` prints `exit value 0` or `exit value 1` for the last command
    that finished: a foreground command, or a background command reported
    as done
- Any other command is run in a forked child process and found through `PATH`;
  a command that cannot be started prints `NAME: no such file or directory`
- Input and output redirection with `< file` and `> file`; an output file is
  created or truncated with mode 0644, and an input file that cannot be opened
  prints `cannot open FILE for input`
- A trailing `&` runs the command in the background. The child prints
  `background pid is N`, and when it finishes the shell reports
  `background pid N is done: exit value V` before the next prompt.
  Background commands without a redirection read from and write to `/dev/null`.
  An `&` that is not the last word is passed to the command as an ordinary word.
- A foreground command that ends with a non-zero wait status is followed by
  `terminated by signal N`
- `Ctrl-C` (SIGINT) is ignored by the shell and by background commands,
  but stops the current foreground command
- `Ctrl-Z` (SIGTSTP) toggles foreground-only mode, in which a trailing `&`
  is ignored and every command runs in the foreground. Child processes ignore
  SIGTSTP.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
smallsh
```

A short session:

```
: ls > listing.txt
: wc -l < listing.txt
12
: sleep 5 &
background pid is 4242
: status
exit value 0
: exit
```

## Line syntax

Words are separated by spaces and newlines only; there is no quoting,
globbing, variable expansion or piping. `<` and `>` take the next word as a
file name; a missing file name, or more than 512 command words, prints an
error and the line is skipped.

## `cd`

With no argument `cd` goes to `$HOME`. An argument that begins with the
current directory is used as it stands; any other argument is appended to the
current directory, so `cd /tmp` from `/home/user` tries `/home/user/tmp`.
A directory that cannot be entered is ignored silently.

## Using it from Python

- `smallsh.command.parse_line(line, foreground_only)` returns a
  `Command` (with `argv`, `input_file`, `output_file` and `background`), or
  `None` for a blank or comment line; it raises `ValueError` for a missing
  redirection file name or too many arguments.
- `smallsh.executor.change_directory(command)` performs `cd`.
- `smallsh.executor.execute_command(command)` forks and runs the command,
  returning the raw wait status of a foreground command and `0` for a
  background one.
- `smallsh.shell.Shell` holds the loop: `run()`, `handle_line(line)`
  (returns `False` on `exit`), `reap_background()` (returns a list of
  `(pid, exit value)` pairs) and `toggle_foreground_mode(signo, frame)`.
  `Shell(stdin)` reads from the given text stream instead of standard input.

## Development

```
pip install -e ".[test]"
pytest
```