"""kill-port CLI: lsof lookup and kill, never raising."""

import subprocess

import pytest

from portal.cli import kill_port as kill_port_module
from portal.cli.kill_port import DEFAULT_PORT, kill_port, main


class FakeRun:
    """Records subprocess.run calls; lsof answers with the given stdout."""

    def __init__(self, lsof_stdout: str = "", kill_error: Exception | None = None):
        self.calls: list[list[str]] = []
        self.lsof_stdout = lsof_stdout
        self.kill_error = kill_error

    def __call__(self, args, **kwargs):
        self.calls.append(args)
        if args[0] == "kill" and self.kill_error:
            raise self.kill_error
        stdout = self.lsof_stdout if args[0] == "lsof" else ""
        return subprocess.CompletedProcess(args, 0, stdout=stdout, stderr="")


@pytest.fixture
def fake_run(monkeypatch):
    def _install(**kwargs) -> FakeRun:
        fake = FakeRun(**kwargs)
        monkeypatch.setattr(kill_port_module.subprocess, "run", fake)
        return fake
    return _install


def test_free_port(fake_run, capsys):
    fake = fake_run()

    assert kill_port(3000) == 0
    assert fake.calls == [["lsof", "-ti", ":3000"]]
    assert "Port 3000 is free." in capsys.readouterr().out


def test_kills_every_pid(fake_run, capsys):
    fake = fake_run(lsof_stdout="101\n202\n")

    assert kill_port(8080) == 2
    assert ["kill", "-9", "101"] in fake.calls
    assert ["kill", "-9", "202"] in fake.calls
    assert "Process killed successfully." in capsys.readouterr().out


def test_kill_failure_is_reported(fake_run, capsys):
    fake_run(
        lsof_stdout="101\n",
        kill_error=subprocess.CalledProcessError(1, ["kill", "-9", "101"]),
    )

    assert kill_port(3000) == 0
    assert "Failed to kill process 101" in capsys.readouterr().err


def test_missing_lsof_is_reported(monkeypatch, capsys):
    def missing(*args, **kwargs):
        raise FileNotFoundError("lsof")

    monkeypatch.setattr(kill_port_module.subprocess, "run", missing)

    assert kill_port(3000) == 0
    assert "Error checking port" in capsys.readouterr().err


def test_main_defaults_to_3000(fake_run):
    fake = fake_run()

    assert main([]) == 0
    assert fake.calls[0] == ["lsof", "-ti", f":{DEFAULT_PORT}"]


def test_main_rejects_invalid_port():
    with pytest.raises(SystemExit):
        main(["70000"])
