import platform

from iavlproof import version
from iavlproof.version import VersionInfo, get_version_info


def test_version_info_string():
    info = VersionInfo("1.0", "abc", "main", "runtime")
    assert str(info) == "iavl: 1.0\ngit commit: abc\ngit branch: main\nruntime"


def test_get_version_info_uses_module_values(monkeypatch):
    monkeypatch.setattr(version, "VERSION", "2.1.0")
    monkeypatch.setattr(version, "COMMIT", "deadbeef")
    monkeypatch.setattr(version, "BRANCH", "release")
    info = get_version_info()
    assert (info.iavl, info.git_commit, info.branch) == ("2.1.0", "deadbeef", "release")


def test_get_version_info_defaults_empty():
    info = get_version_info()
    assert (info.iavl, info.git_commit, info.branch) == (
        version.VERSION,
        version.COMMIT,
        version.BRANCH,
    )


def test_runtime_description():
    runtime = get_version_info().python_version
    assert runtime.startswith("python version " + platform.python_version() + " ")
    assert runtime.endswith("\n")