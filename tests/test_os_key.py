import pytest

from cmdy.utils import os_key
from cmdy.utils.os_key import current_os_key, resolve_os_key


def test_darwin_maps_to_mac():
    assert resolve_os_key("darwin") == "mac"


@pytest.mark.parametrize("host", ["linux", "windows", "freebsd", "Darwin", "", "plan9"])
def test_other_identifiers_pass_through(host):
    assert resolve_os_key(host) == host


def test_current_os_key_lowercases_platform(monkeypatch):
    monkeypatch.setattr(os_key.platform, "system", lambda: "Darwin")
    assert current_os_key() == "mac"
    monkeypatch.setattr(os_key.platform, "system", lambda: "Linux")
    assert current_os_key() == "linux"
