from conftest import MemoryClipboard, ScriptedInjector
from services import ClipboardService, CommandRegistry, CommandResult, SelectionService, build_registry


def make_registry(clipboard=None, injector=None):
    return build_registry(
        ClipboardService(clipboard or MemoryClipboard()),
        SelectionService(injector or ScriptedInjector()),
    )


def test_registry_exposes_the_four_commands():
    assert make_registry().names() == [
        "auto_copy_selection",
        "clear_other_selections",
        "copy_to_clipboard",
        "read_clipboard",
    ]


def test_invoke_dispatches_by_name():
    clipboard = MemoryClipboard()
    registry = make_registry(clipboard=clipboard)

    written = registry.invoke("copy_to_clipboard", {"text": "hello"})
    read = registry.invoke("read_clipboard")

    assert written == CommandResult.success("Text copied: 5 characters")
    assert read == CommandResult.success("hello")
    assert clipboard.text == "hello"


def test_unknown_command_is_a_failure_result():
    result = make_registry().invoke("paste_everything")

    assert result == CommandResult.failure("Unknown command: paste_everything")


def test_missing_argument_is_a_failure_result():
    result = make_registry().invoke("copy_to_clipboard", {})

    assert not result.ok
    assert result.message.startswith("Invalid arguments for copy_to_clipboard:")


def test_unexpected_argument_is_a_failure_result():
    result = make_registry().invoke("read_clipboard", {"text": "x"})

    assert not result.ok
    assert result.message.startswith("Invalid arguments for read_clipboard:")


def test_handler_exception_becomes_failure(caplog):
    registry = CommandRegistry()

    def explode():
        raise RuntimeError("boom")

    registry.register("explode", explode)
    result = registry.invoke("explode")

    assert result == CommandResult.failure("explode failed: boom")
    assert "Command explode raised" in caplog.text


def test_duplicate_registration_is_rejected():
    registry = CommandRegistry()
    registry.register("read_clipboard", lambda: CommandResult.success("x"))

    try:
        registry.register("read_clipboard", lambda: CommandResult.success("y"))
    except ValueError as exc:
        assert "already registered" in str(exc)
    else:
        raise AssertionError("duplicate registration accepted")
