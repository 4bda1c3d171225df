import os

import pytest

from cmdy.models.menu_option import MenuOption


def make_script(directory, name, mode=0o755, content="#!/bin/sh\necho ok\n"):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content)
    os.chmod(path, mode)
    return path


class StubSelector:
    """Restituisce le risposte in ordine, poi None (annullamento)"""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.calls = []

    def select(self, displays):
        self.calls.append(list(displays))
        if self.answers:
            return self.answers.pop(0)
        return None


class StubDispatcher:
    def __init__(self, succeed=True):
        self.commands = []
        self.succeed = succeed

    def dispatch(self, command):
        self.commands.append(command)
        return self.succeed


@pytest.fixture
def build_option():
    return MenuOption("Build", {"linux": "make"})


@pytest.fixture
def stub_selector():
    return StubSelector


@pytest.fixture
def stub_dispatcher():
    return StubDispatcher
