from __future__ import annotations

from typer.testing import CliRunner

from cli.ropes.app import EditCLIOptions, app
from cli.ropes.benchmark import benchmark_edits, replay_edits
from ropex import Rope
from tests.utils.workloads import EditOp


def test_cli_forwards_options(monkeypatch) -> None:
    runner = CliRunner()
    invoked = {}

    def fake_run_edits(opts) -> None:  # type: ignore[override]
        invoked["options"] = opts

    monkeypatch.setattr("cli.ropes.app.run_edits", fake_run_edits)
    result = runner.invoke(
        app,
        [
            "--length",
            "64",
            "--edits",
            "10",
            "--seed",
            "3",
            "--kind",
            "list",
            "--balance-every",
            "5",
        ],
    )
    assert result.exit_code == 0
    options = invoked["options"]
    assert isinstance(options, EditCLIOptions)
    assert options.length == 64
    assert options.edits == 10
    assert options.seed == 3
    assert options.kind == "list"
    assert options.balance_every == 5


def test_cli_runs_small_workload() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["--length", "200", "--edits", "50", "--seed", "1", "--balance-every", "10"],
    )
    assert result.exit_code == 0, result.output
    assert "rope[str]" in result.output
    assert "edits=50" in result.output
    assert "balanced=" in result.output


def test_cli_rejects_unknown_kind() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--kind", "ndarray"])
    assert result.exit_code != 0


def test_benchmark_edits_reports_final_state() -> None:
    result = benchmark_edits(length=100, edits=40, seed=5, kind="list", balance_every=8)

    assert result.kind == "list"
    assert result.edits == 40
    assert result.final_length >= 0
    assert result.final_depth >= 0
    assert result.edits_per_second > 0


def test_replay_edits_applies_script() -> None:
    rope = Rope("abcdef")
    script = [
        EditOp("insert", 3, 2, "XY"),
        EditOp("erase", 0, 1),
        EditOp("at", 0),
    ]

    passes = replay_edits(rope, script)

    assert passes == 0
    assert rope.to_sequence() == "bcXYdef"
