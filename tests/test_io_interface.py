import pytest

from cardwar.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    LoggingIOInterface,
    TestIOInterface,
)


def test_dummy_io_interface_methods():
    interface = DummyIOInterface()

    assert interface.output("Test") is None
    assert interface.input("prompt") == ""


def test_console_io_interface_methods(mocker, capsys):
    interface = ConsoleIOInterface()
    mocker.patch("builtins.input", side_effect=["2"])

    interface.output("Test message")
    assert capsys.readouterr().out == "Test message\n"

    assert interface.input("Who plays? ") == "2"


def test_test_io_interface_methods():
    interface = TestIOInterface(["1", "q"])

    interface.output("Test")
    assert interface.sent_messages == ["Test"]

    assert interface.input("first? ") == "1"
    assert interface.input("second? ") == "q"
    assert interface.prompts == ["first? ", "second? "]

    with pytest.raises(EOFError):
        interface.input("third? ")


def test_logging_io_interface_appends(tmp_path):
    log_file = tmp_path / "game.log"
    interface = LoggingIOInterface(str(log_file))

    interface.output("line one")
    assert interface.input("Play?") == ""

    assert log_file.read_text(encoding="utf-8").splitlines() == [
        "line one",
        "[INPUT PROMPT] Play?",
    ]


@pytest.mark.asyncio
async def test_logging_io_interface_output_async(tmp_path):
    log_file = tmp_path / "game.log"
    interface = LoggingIOInterface(str(log_file))

    await interface.output_async("async line")
    await interface.output_async("another")

    assert log_file.read_text(encoding="utf-8") == "async line\nanother\n"


@pytest.mark.asyncio
async def test_input_async_runs_the_blocking_input(mocker):
    interface = ConsoleIOInterface()
    mocker.patch("builtins.input", return_value="bottom")
    assert await interface.input_async("> ") == "bottom"
