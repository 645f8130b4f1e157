from collections.abc import Callable

import click
import tomlkit
from pydantic import TypeAdapter, ValidationError

from fixed_point_math.config import settings
from fixed_point_math.exceptions import ArithmeticFault, FixedPointValueError
from fixed_point_math.fixed_point import FixedPointFactory
from fixed_point_math.version import __version__

INTEGER_TYPE_CHOICES = ("i64", "i128", "i256", "u64", "u128", "u256")


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: str) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(),
                ),
            )
        case _:
            ...


def _ratio_options(func: Callable[..., None]) -> Callable[..., None]:
    func = click.option(
        "--host/--recoverable",
        default=False,
        help="Fault on failure, escalating to the next wider width first (default: recoverable)",
    )(func)
    func = click.option(
        "--type",
        "int_type",
        type=click.Choice(INTEGER_TYPE_CHOICES, case_sensitive=False),
        default=None,
        help="Integer width and signedness of the operands (default: configured type)",
    )(func)
    func = click.option(
        "--rounding",
        type=click.Choice(("floor", "ceil"), case_sensitive=False),
        default="floor",
        show_default=True,
    )(func)
    func = click.argument("denominator", type=int, required=False)(func)
    func = click.argument("y", type=int)(func)
    return click.argument("x", type=int)(func)


def _run(
    operation: str,
    x: int,
    y: int,
    denominator: int | None,
    rounding: str,
    int_type: str | None,
    host: bool,
) -> None:
    if denominator is None:
        denominator = settings.scale
    if int_type is None:
        int_type = settings.default_type

    method_name = f"fixed_{operation}_{rounding.lower()}"
    try:
        if host:
            result = getattr(FixedPointFactory.get_host_fixed_point(int_type), method_name)(
                x, y, denominator
            )
        else:
            result = getattr(FixedPointFactory.get_fixed_point(int_type), method_name)(
                x, y, denominator
            )
    except ValidationError as exc:
        raise click.BadParameter(f"operands must be valid {int_type} values") from exc
    except (ArithmeticFault, FixedPointValueError) as exc:
        raise click.ClickException(str(exc.message)) from exc

    click.echo(str(result))


@cli.command("mul")
@_ratio_options
def mul(
    x: int,
    y: int,
    denominator: int | None,
    rounding: str,
    int_type: str | None,
    host: bool,
) -> None:
    """
    Calculate X * Y / DENOMINATOR, rounded in the requested direction.

    DENOMINATOR defaults to the configured scale.
    """

    _run("mul", x, y, denominator, rounding, int_type, host)


@cli.command("div")
@_ratio_options
def div(
    x: int,
    y: int,
    denominator: int | None,
    rounding: str,
    int_type: str | None,
    host: bool,
) -> None:
    """
    Calculate X * DENOMINATOR / Y, rounded in the requested direction.

    DENOMINATOR defaults to the configured scale.
    """

    _run("div", x, y, denominator, rounding, int_type, host)
