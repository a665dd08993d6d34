"""
simple-rng CLI

Developer tool for sampling a generator from the shell.

Usage:
    simple-rng raw --seed 123 --count 10      Raw engine outputs
    simple-rng range 1 6 --count 20           Dice rolls
    simple-rng float | bool                   Scaled floats / coin flips
    simple-rng unsigned 8 | signed 16         Fixed-width integers
    simple-rng pick red green blue            Random element
    simple-rng shuffle a b c d                Fisher-Yates shuffle

Without --seed the SIMPLE_RNG_SEED setting is used, then the clock. The seed
is always printed so any run can be replayed.
"""

import logging
from collections.abc import Callable
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from simple_rng import __version__
from simple_rng.config import get_settings
from simple_rng.constants import CLI_SAMPLES_COUNT_DEFAULT, CLI_SAMPLES_COUNT_MAX
from simple_rng.engine import Generator
from simple_rng.errors import RngError
from simple_rng.models import Algorithm, Variant

app = typer.Typer(
    name="simple-rng",
    help="simple-rng - seedable, non-cryptographic pseudo-random numbers",
    add_completion=False,
)

console = Console()

SeedOption = Annotated[
    Optional[int], typer.Option("--seed", "-s", help="Seed (default: settings, then clock)")
]
AlgorithmOption = Annotated[
    Optional[Algorithm], typer.Option("--algorithm", "-a", help="Transition function")
]
VariantOption = Annotated[
    Optional[Variant], typer.Option("--variant", help="LCG constants")
]
CountOption = Annotated[
    int,
    typer.Option(
        "--count", "-n", min=1, max=CLI_SAMPLES_COUNT_MAX, help="Number of samples"
    ),
]


# =============================================================================
# Helpers
# =============================================================================


def _make_generator(
    seed: int | None,
    algorithm: Algorithm | None,
    variant: Variant | None,
) -> Generator:
    settings = get_settings()
    algorithm = algorithm or settings.algorithm
    variant = variant or settings.variant
    if seed is None:
        seed = settings.seed

    try:
        if seed is None:
            return Generator.from_time(algorithm=algorithm, variant=variant)
        return Generator.new(seed, algorithm, variant)
    except RngError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def _sample(
    title: str,
    rng: Generator,
    count: int,
    draw: Callable[[], Any],
) -> None:
    """Print `count` draws as a table, headed by the replay seed."""
    seed = rng.seed
    try:
        values = [draw() for _ in range(count)]
    except RngError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"[dim]seed={seed} algorithm={rng.algorithm.value} variant={rng.variant.value}[/dim]"
    )
    table = Table(title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Value", style="green")
    for i, value in enumerate(values):
        table.add_row(str(i), str(value))
    console.print(table)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def raw(
    seed: SeedOption = None,
    algorithm: AlgorithmOption = None,
    variant: VariantOption = None,
    count: CountOption = CLI_SAMPLES_COUNT_DEFAULT,
) -> None:
    """Raw engine outputs."""
    rng = _make_generator(seed, algorithm, variant)
    _sample("Raw", rng, count, rng.advance)


@app.command("range")
def range_(
    min_val: int = typer.Argument(..., metavar="MIN", help="Inclusive lower bound"),
    max_val: int = typer.Argument(..., metavar="MAX", help="Inclusive upper bound"),
    seed: SeedOption = None,
    algorithm: AlgorithmOption = None,
    variant: VariantOption = None,
    count: CountOption = CLI_SAMPLES_COUNT_DEFAULT,
) -> None:
    """Integers in [MIN, MAX]."""
    rng = _make_generator(seed, algorithm, variant)
    _sample(f"Range [{min_val}, {max_val}]", rng, count, lambda: rng.gen_range(min_val, max_val))


@app.command("float")
def float_(
    seed: SeedOption = None,
    algorithm: AlgorithmOption = None,
    variant: VariantOption = None,
    count: CountOption = CLI_SAMPLES_COUNT_DEFAULT,
) -> None:
    """Floats in [0.0, 1.0)."""
    rng = _make_generator(seed, algorithm, variant)
    _sample("Float", rng, count, rng.gen_float)


@app.command("bool")
def bool_(
    seed: SeedOption = None,
    algorithm: AlgorithmOption = None,
    variant: VariantOption = None,
    count: CountOption = CLI_SAMPLES_COUNT_DEFAULT,
) -> None:
    """Coin flips."""
    rng = _make_generator(seed, algorithm, variant)
    _sample("Bool", rng, count, rng.gen_bool)


@app.command()
def unsigned(
    width: int = typer.Argument(..., help="Bit width: 8, 16, 32 or 64"),
    seed: SeedOption = None,
    algorithm: AlgorithmOption = None,
    variant: VariantOption = None,
    count: CountOption = CLI_SAMPLES_COUNT_DEFAULT,
) -> None:
    """Unsigned integers of WIDTH bits."""
    rng = _make_generator(seed, algorithm, variant)
    _sample(f"u{width}", rng, count, lambda: rng.gen_unsigned(width))


@app.command()
def signed(
    width: int = typer.Argument(..., help="Bit width: 8, 16, 32 or 64"),
    seed: SeedOption = None,
    algorithm: AlgorithmOption = None,
    variant: VariantOption = None,
    count: CountOption = CLI_SAMPLES_COUNT_DEFAULT,
) -> None:
    """Signed integers of WIDTH bits."""
    rng = _make_generator(seed, algorithm, variant)
    _sample(f"i{width}", rng, count, lambda: rng.gen_signed(width))


@app.command()
def pick(
    items: Optional[list[str]] = typer.Argument(None, help="Items to choose from"),
    seed: SeedOption = None,
    algorithm: AlgorithmOption = None,
    variant: VariantOption = None,
    count: CountOption = CLI_SAMPLES_COUNT_DEFAULT,
) -> None:
    """Random element of ITEMS."""
    rng = _make_generator(seed, algorithm, variant)
    choices = items or []
    _sample("Pick", rng, count, lambda: rng.pick_random(choices))


@app.command()
def shuffle(
    items: list[str] = typer.Argument(..., help="Items to shuffle"),
    seed: SeedOption = None,
    algorithm: AlgorithmOption = None,
    variant: VariantOption = None,
) -> None:
    """ITEMS in shuffled order."""
    rng = _make_generator(seed, algorithm, variant)
    shuffled = list(items)
    rng.shuffle(shuffled)
    console.print(
        f"[dim]seed={rng.seed} algorithm={rng.algorithm.value} variant={rng.variant.value}[/dim]"
    )
    console.print(" ".join(shuffled))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    """simple-rng - seedable, non-cryptographic pseudo-random numbers."""
    logging.basicConfig(level=get_settings().log_level.upper())

    if version:
        console.print(f"simple-rng version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print("Use [cyan]simple-rng --help[/cyan] for available commands.")


if __name__ == "__main__":
    app()
