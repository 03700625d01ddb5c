import io

import pytest

from ansiterm.command import Command, csi, execute, queue


class FakeWrite:
    def __init__(self):
        self.buffer = ""
        self.flushed = False

    def write(self, content):
        self.buffer += content
        self.flushed = False
        return len(content)

    def flush(self):
        self.flushed = True


class FakeCommand(Command):
    def write_ansi(self):
        return "cmd"


def test_queue_one():
    result = FakeWrite()
    queue(result, FakeCommand())
    assert result.buffer == "cmd"
    assert not result.flushed


def test_queue_many():
    result = FakeWrite()
    queue(result, FakeCommand(), FakeCommand())
    assert result.buffer == "cmdcmd"
    assert not result.flushed


def test_many_queues_append_in_order():
    result = FakeWrite()
    queue(queue(result, FakeCommand()), FakeCommand())
    queue(result, FakeCommand())
    assert result.buffer == "cmdcmdcmd"
    assert not result.flushed


def test_execute_one():
    result = FakeWrite()
    execute(result, FakeCommand())
    assert result.buffer == "cmd"
    assert result.flushed


def test_execute_many():
    result = FakeWrite()
    execute(result, FakeCommand(), FakeCommand())
    assert result.buffer == "cmdcmd"
    assert result.flushed


def test_execute_with_no_commands_still_flushes():
    result = FakeWrite()
    execute(result)
    assert result.buffer == ""
    assert result.flushed


def test_queue_returns_writer():
    result = FakeWrite()
    assert queue(result, FakeCommand()) is result


def test_queue_to_binary_stream_encodes_text():
    stream = io.BytesIO()
    queue(stream, FakeCommand(), FakeCommand())
    assert stream.getvalue() == b"cmdcmd"


def test_queue_to_text_stream():
    stream = io.StringIO()
    execute(stream, FakeCommand())
    assert stream.getvalue() == "cmd"


def test_queue_rejects_non_command():
    result = FakeWrite()
    with pytest.raises(TypeError):
        queue(result, "cmd")
    assert result.buffer == ""


def test_command_str_is_ansi_text():
    command = FakeCommand()
    stream = io.StringIO()
    queue(stream, command)
    assert str(command) == "cmd"
    assert f"{command}" == "cmd"
    assert str(command) == stream.getvalue()


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_csi_prefix():
    assert csi("0m") == "\x1b[0m"
    assert csi() == "\x1b["
    assert csi("?1049h") == "\x1b[?1049h"


def test_csi_joins_parts():
    assert csi(5, ";", 3, "H") == "\x1b[5;3H"