"""The interactive shell loop with its built-in commands."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import TextIO

from .command import parse_line
from .executor import change_directory, execute_command

PROMPT = ": "


class Shell:
    """A small shell: prompt, built-ins, foreground and background jobs."""

    def __init__(self, stdin: TextIO | None = None) -> None:
        self._stdin = stdin
        self.status = 0
        self.foreground_only = False

    def toggle_foreground_mode(self, signo, frame) -> None:
        """SIGTSTP handler: switch foreground-only mode on or off."""
        self.foreground_only = not self.foreground_only
        if self.foreground_only:
            message = "\nEntering foreground-only mode (& is now ignored)\n"
        else:
            message = "\nExiting foreground-only mode\n"
        os.write(1, message.encode())

    def reap_background(self) -> list[tuple[int, int]]:
        """Collect finished children without blocking and report each one."""
        finished = []
        while True:
            try:
                pid, status = os.waitpid(-1, os.WNOHANG)
            except ChildProcessError:
                break
            if pid == 0:
                break
            self.status = 1 if status else 0
            print(f"background pid {pid} is done: exit value {self.status}", flush=True)
            finished.append((pid, self.status))
        return finished

    def handle_line(self, line: str) -> bool:
        """Process one line of input; returns False when the shell should exit."""
        try:
            command = parse_line(line, self.foreground_only)
        except ValueError as exc:
            print(f"smallsh: {exc}", file=sys.stderr, flush=True)
            return True
        if command is None or not command.argv:
            return True

        name = command.argv[0]
        if name == "exit":
            return False
        if name == "status":
            print(f"exit value {self.status}", flush=True)
        elif name == "cd":
            change_directory(command)
        else:
            self.status = 1 if execute_command(command) else 0
        return True

    def run(self) -> int:
        """Read and run commands until ``exit`` or end of input."""
        stream = self._stdin if self._stdin is not None else sys.stdin
        previous_int = signal.signal(signal.SIGINT, signal.SIG_IGN)
        previous_tstp = signal.signal(signal.SIGTSTP, self.toggle_foreground_mode)
        try:
            while True:
                self.reap_background()
                print(PROMPT, end="", flush=True)
                line = stream.readline()
                if not line or not self.handle_line(line):
                    break
        finally:
            signal.signal(signal.SIGINT, previous_int)
            signal.signal(signal.SIGTSTP, previous_tstp)
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on standard input."""
    parser = argparse.ArgumentParser(prog="smallsh", description="A small interactive shell.")
    parser.parse_args(argv)
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())