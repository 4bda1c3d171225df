import subprocess

from rich.console import Console

from cmdy.menu import selector as selector_module
from cmdy.menu.selector import FzfSelector


def fake_run_factory(returncode=0, stdout="", calls=None):
    def fake_run(argv, **kwargs):
        if calls is not None:
            calls.append((argv, kwargs))
        return subprocess.CompletedProcess(argv, returncode, stdout=stdout)
    return fake_run


def test_argv_includes_header_and_options():
    selector = FzfSelector(header="Select an option:", options="--height=~50% --layout=reverse")
    assert selector.build_argv() == ["fzf", "--header=Select an option:", "--height=~50%", "--layout=reverse"]


def test_returns_trimmed_selection(monkeypatch):
    calls = []
    monkeypatch.setattr(selector_module.subprocess, "run", fake_run_factory(stdout="  deploy \n", calls=calls))

    assert FzfSelector().select(["Build", "deploy"]) == "deploy"
    argv, kwargs = calls[0]
    assert kwargs["input"] == "Build\ndeploy"


def test_non_zero_exit_is_cancel(monkeypatch):
    monkeypatch.setattr(selector_module.subprocess, "run", fake_run_factory(returncode=130, stdout="Build\n"))
    assert FzfSelector().select(["Build"]) is None


def test_empty_output_is_cancel(monkeypatch):
    monkeypatch.setattr(selector_module.subprocess, "run", fake_run_factory(stdout="\n"))
    assert FzfSelector().select(["Build"]) is None


def test_missing_fzf_is_cancel_with_single_hint():
    console = Console(record=True, width=120)
    selector = FzfSelector(command="/nonexistent/fzf", console=console, install_url="https://example.invalid/fzf")

    assert selector.select(["Build"]) is None
    assert selector.select(["Build"]) is None

    output = console.export_text()
    assert output.count("not found") == 1
    assert "https://example.invalid/fzf" in output
