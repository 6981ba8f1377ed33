import pytest

from bundle_inspect.core.bundle_tool import BundleTool
from bundle_inspect.utils.cli_tools import configureOutput


@pytest.fixture(autouse=True)
def quietOutput():
    configureOutput(verbose=False, debug=False)
    yield
    configureOutput(verbose=False, debug=False)


@pytest.fixture
def bundlePath(tmp_path):
    path = tmp_path / "sdk.asb"
    path.write_bytes(b"PK\x05\x06" + b"\x00" * 18)
    return path


class FakeBundleTool:
    """Stands in for the bundletool executable and records each invocation."""

    def __init__(self):
        self.calls = []
        self.stdout = ""
        self.stderr = ""
        self.returncode = 0
        self.sideEffect = None

    def __call__(self, params):
        self.calls.append(list(params))
        if self.sideEffect is not None:
            self.sideEffect(params)
        return {
            "returncode": self.returncode,
            "stdout": self.stdout,
            "stderr": self.stderr,
            "ok": self.returncode == 0,
        }


@pytest.fixture
def fakeBundleTool(monkeypatch):
    fake = FakeBundleTool()
    monkeypatch.setattr(BundleTool, "runBundleTool", staticmethod(fake))
    return fake
