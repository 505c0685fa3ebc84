"""Running commands: the cd built-in and external programs."""

from __future__ import annotations

import os
import signal
import sys

from .command import Command

_WRITE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC


def change_directory(command: Command) -> None:
    """Change the working directory as the ``cd`` built-in does.

    With no argument the directory becomes $HOME. An argument that begins with
    the current directory is used as it stands; anything else is appended to
    the current directory. A directory that cannot be entered is ignored.
    """
    if len(command.argv) == 1:
        target = os.environ.get("HOME")
        if target is None:
            return
    else:
        cwd = os.getcwd()
        argument = command.argv[1]
        if argument.startswith(cwd):
            target = argument
        elif argument.startswith("/"):
            target = cwd + argument
        else:
            target = f"{cwd}/{argument}"
    try:
        os.chdir(target)
    except OSError:
        pass


def _say(text: str, fd: int = 1) -> None:
    os.write(fd, text.encode())


def _redirect(path: str, flags: int, target_fd: int) -> None:
    fd = os.open(path, flags, 0o644)
    try:
        os.dup2(fd, target_fd)
    finally:
        os.close(fd)


def _run_child(command: Command) -> int:
    """Prepare the forked child and exec the program; returns only on failure."""
    signal.signal(signal.SIGTSTP, signal.SIG_IGN)
    signal.signal(signal.SIGINT, signal.SIG_IGN if command.background else signal.SIG_DFL)
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)

    if command.input_file is not None:
        try:
            _redirect(command.input_file, os.O_RDONLY, 0)
        except OSError:
            _say(f"cannot open {command.input_file} for input\n")
            return 1

    if command.output_file is not None:
        try:
            _redirect(command.output_file, _WRITE_FLAGS, 1)
        except OSError as exc:
            _say(f"output file open(): {exc.strerror}\n", 2)
            return 1

    if command.background:
        _say(f"background pid is {os.getpid()}\n")
        try:
            if command.input_file is None:
                _redirect(os.devnull, os.O_RDONLY, 0)
            if command.output_file is None:
                _redirect(os.devnull, _WRITE_FLAGS, 1)
        except OSError as exc:
            _say(f"background redirection: {exc.strerror}\n", 2)
            return 1

    try:
        os.execvp(command.argv[0], command.argv)
    except OSError:
        _say(f"{command.argv[0]}: no such file or directory\n")
    return 1


def execute_command(command: Command) -> int:
    """Run an external command in a child process.

    A foreground command is waited for and its raw wait status returned; a
    non-zero status is reported with the terminating signal. A background
    command is not waited for and 0 is returned.
    """
    if not command.argv:
        raise ValueError("no command to execute")

    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid == 0:
        code = 1
        try:
            code = _run_child(command)
        finally:
            os._exit(code)

    if command.background:
        return 0

    _, status = os.waitpid(pid, 0)
    if status != 0:
        print(f"terminated by signal {os.WTERMSIG(status)}", flush=True)
    return status