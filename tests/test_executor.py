import os
import re
import signal

import pytest

from smallsh.command import Command
from smallsh.executor import change_directory, execute_command


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return os.getcwd()


def _cd(*args):
    """Run cd with the given arguments and return the resulting working directory."""
    result = change_directory(Command(argv=["cd", *args]))
    assert result is None
    return os.getcwd()


def test_cd_without_argument_goes_home(workdir, tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    assert _cd() == os.path.join(workdir, "home")


def test_cd_relative(workdir):
    os.mkdir("sub")
    assert _cd("sub") == os.path.join(workdir, "sub")


def test_cd_absolute_under_cwd(workdir):
    target = os.path.join(workdir, "deeper")
    os.mkdir(target)
    assert _cd(target) == target


def test_cd_slash_path_is_appended_to_cwd(workdir):
    os.makedirs("inner")
    assert _cd("/inner") == os.path.join(workdir, "inner")


def test_cd_missing_directory_leaves_cwd(workdir):
    assert _cd("does-not-exist") == workdir


def test_successful_command_returns_zero(capfd):
    assert execute_command(Command(argv=["true"])) == 0
    assert "terminated" not in capfd.readouterr().out


def test_failing_command_reports_status(capfd):
    status = execute_command(Command(argv=["false"]))
    assert status != 0
    assert "terminated by signal 0\n" in capfd.readouterr().out


def test_killed_command_reports_signal(capfd):
    status = execute_command(Command(argv=["sh", "-c", "kill -TERM $$"]))
    assert os.WIFSIGNALED(status)
    assert f"terminated by signal {int(signal.SIGTERM)}" in capfd.readouterr().out


def test_output_redirection(tmp_path):
    out = tmp_path / "out.txt"
    assert execute_command(Command(argv=["echo", "hello"], output_file=str(out))) == 0
    assert out.read_text() == "hello\n"


def test_input_and_output_redirection(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("line one\nline two\n")
    out = tmp_path / "out.txt"
    command = Command(argv=["cat"], input_file=str(source), output_file=str(out))
    assert execute_command(command) == 0
    assert out.read_text() == source.read_text()


def test_missing_input_file(tmp_path, capfd):
    missing = str(tmp_path / "missing.txt")
    status = execute_command(Command(argv=["cat"], input_file=missing))
    assert status != 0
    assert f"cannot open {missing} for input" in capfd.readouterr().out


def test_unknown_program(capfd):
    status = execute_command(Command(argv=["no-such-program-xyz"]))
    assert status != 0
    assert "no-such-program-xyz: no such file or directory" in capfd.readouterr().out


def test_background_command_is_not_waited_for(capfd):
    assert execute_command(Command(argv=["true"], background=True)) == 0
    pid, status = os.waitpid(-1, 0)
    assert status == 0
    match = re.search(r"background pid is (\d+)", capfd.readouterr().out)
    assert match is not None and int(match.group(1)) == pid


def test_empty_command_rejected():
    with pytest.raises(ValueError):
        execute_command(Command())