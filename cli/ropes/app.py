from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import typer
from typing_extensions import Annotated

from ropex import config as rx_config

from .benchmark import benchmark_edits


@dataclass
class EditCLIOptions:
    length: int = 100_000
    edits: int = 2_000
    seed: int = 0
    kind: str = "str"
    balance_every: int = 0
    max_chunk: int = 16
    log_level: str | None = None


app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Benchmark random edit workloads against the ropex rope.",
)

_SHAPE_PANEL = "Workload shape"
_RUNTIME_PANEL = "Runtime controls"


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    length: Annotated[
        int,
        typer.Option(
            "--length",
            min=0,
            help="Length of the initial rope.",
            rich_help_panel=_SHAPE_PANEL,
        ),
    ] = 100_000,
    edits: Annotated[
        int,
        typer.Option(
            "--edits",
            min=0,
            help="Number of random insert/erase/at operations to replay.",
            rich_help_panel=_SHAPE_PANEL,
        ),
    ] = 2_000,
    seed: Annotated[
        int,
        typer.Option(
            "--seed",
            help="Seed for the workload generator.",
            rich_help_panel=_SHAPE_PANEL,
        ),
    ] = 0,
    kind: Annotated[
        str,
        typer.Option(
            "--kind",
            help="Element kind of the rope: str or list.",
            rich_help_panel=_SHAPE_PANEL,
        ),
    ] = "str",
    max_chunk: Annotated[
        int,
        typer.Option(
            "--max-chunk",
            min=1,
            help="Largest insert/erase size in the workload.",
            rich_help_panel=_SHAPE_PANEL,
        ),
    ] = 16,
    balance_every: Annotated[
        int,
        typer.Option(
            "--balance-every",
            min=0,
            help="Rebalance (when needed) after every N edits; 0 disables.",
            rich_help_panel=_RUNTIME_PANEL,
        ),
    ] = 0,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="Override ROPEX_LOG_LEVEL for this run.",
            rich_help_panel=_RUNTIME_PANEL,
        ),
    ] = None,
) -> None:
    options = EditCLIOptions(
        length=length,
        edits=edits,
        seed=seed,
        kind=kind,
        balance_every=balance_every,
        max_chunk=max_chunk,
        log_level=log_level,
    )
    ctx.obj = options
    if ctx.invoked_subcommand is None:
        run_edits(options)


def run_edits(options: EditCLIOptions) -> None:
    if options.kind not in {"str", "list"}:
        raise typer.BadParameter(
            f"Unsupported kind '{options.kind}'. Expected 'str' or 'list'.",
            param_hint="--kind",
        )
    if options.log_level:
        os.environ["ROPEX_LOG_LEVEL"] = options.log_level
    rx_config.reset_runtime_config_cache()
    rx_config.runtime_config()

    result = benchmark_edits(
        length=options.length,
        edits=options.edits,
        seed=options.seed,
        kind=options.kind,
        balance_every=options.balance_every,
        max_chunk=options.max_chunk,
    )
    print(
        f"rope[{result.kind}] | initial={result.initial_length} "
        f"edits={result.edits} "
        f"time={result.elapsed_seconds:.4f}s "
        f"throughput={result.edits_per_second:,.1f} edits/s "
        f"balance_passes={result.balance_passes}"
    )
    print(
        f"final | length={result.final_length} depth={result.final_depth} "
        f"balanced={result.balanced}"
    )


def main() -> None:
    app()


__all__ = ["EditCLIOptions", "app", "main", "run_edits"]
