import pytest

from cmdy.errors import NoOptionsError
from cmdy.menu.tool_menu import ToolMenu, build_option_map
from cmdy.models.menu_option import MenuOption

OPTIONS = [
    MenuOption("Build", {"linux": "make", "mac": "make"}),
    MenuOption("Windows only", {"windows": "build.bat"}),
    MenuOption("deploy", {"linux": "./scripts/deploy.sh"}),
]


def test_cancel_returns_after_one_selector_call(stub_selector, stub_dispatcher):
    selector = stub_selector()
    dispatcher = stub_dispatcher()

    assert ToolMenu(OPTIONS, selector, dispatcher, os_key="linux").start() == 0
    assert len(selector.calls) == 1
    assert dispatcher.commands == []


def test_selector_receives_displays_in_order(stub_selector, stub_dispatcher):
    selector = stub_selector()
    ToolMenu(OPTIONS, selector, stub_dispatcher(), os_key="linux").start()
    assert selector.calls == [["Build", "Windows only", "deploy"]]


def test_empty_options_never_reach_selector(stub_selector, stub_dispatcher):
    selector = stub_selector(["Build"])
    with pytest.raises(NoOptionsError) as exc_info:
        ToolMenu([], selector, stub_dispatcher(), os_key="linux").start()
    assert selector.calls == []
    assert exc_info.value.exit_code == 1
    assert exc_info.value.solutions


def test_dispatches_until_cancel(stub_selector, stub_dispatcher):
    selector = stub_selector(["Build", "deploy", "Build"])
    dispatcher = stub_dispatcher()

    count = ToolMenu(OPTIONS, selector, dispatcher, os_key="linux").start()

    assert count == 3
    assert dispatcher.commands == ["make", "./scripts/deploy.sh", "make"]
    assert len(selector.calls) == 4


def test_failed_command_keeps_looping(stub_selector, stub_dispatcher):
    selector = stub_selector(["Build", "deploy"])
    dispatcher = stub_dispatcher(succeed=False)

    ToolMenu(OPTIONS, selector, dispatcher, os_key="linux").start()

    assert dispatcher.commands == ["make", "./scripts/deploy.sh"]


def test_unmatched_selection_is_ignored(stub_selector, stub_dispatcher):
    selector = stub_selector(["not in menu", "Build"])
    dispatcher = stub_dispatcher()

    ToolMenu(OPTIONS, selector, dispatcher, os_key="linux").start()

    assert dispatcher.commands == ["make"]
    assert len(selector.calls) == 3


def test_missing_command_for_os_is_skipped(stub_selector, stub_dispatcher):
    selector = stub_selector(["Windows only", "Build"])
    dispatcher = stub_dispatcher()

    ToolMenu(OPTIONS, selector, dispatcher, os_key="linux").start()

    assert dispatcher.commands == ["make"]


def test_uses_resolved_os_key(stub_selector, stub_dispatcher):
    dispatcher = stub_dispatcher()
    ToolMenu(OPTIONS, stub_selector(["Windows only"]), dispatcher, os_key="windows").start()
    assert dispatcher.commands == ["build.bat"]


def test_option_map_last_write_wins():
    first = MenuOption("deploy", {"linux": "make deploy"})
    second = MenuOption("deploy", {"linux": "./scripts/deploy.sh"})

    option_map = build_option_map([first, second])

    assert option_map == {"deploy": second}
    assert option_map["deploy"] is second


def test_duplicate_display_dispatches_last_option(stub_selector, stub_dispatcher):
    options = [
        MenuOption("deploy", {"linux": "make deploy"}),
        MenuOption("deploy", {"linux": "./scripts/deploy.sh"}),
    ]
    dispatcher = stub_dispatcher()

    ToolMenu(options, stub_selector(["deploy"]), dispatcher, os_key="linux").start()

    assert dispatcher.commands == ["./scripts/deploy.sh"]
