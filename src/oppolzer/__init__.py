"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
computing the Oppolzer terms (diurnal lunisolar polar motion) of the Earth's rotation axis.
"""

from __future__ import annotations

__version__ = "1.0.0"


def runOppolzer(  # noqa: PLR0913
    parameter_file: str,
    epochs: list[float],
    station_longitude: float | None = None,
    north_only: bool = False,
    earth_model: int | str | None = None,
    output_unit: str | None = None,
    loader_name: str | None = None,
) -> list[str]:
    """Compute & report the Oppolzer terms for each epoch.

    Args:
        parameter_file (``str``): path to the coefficient table file
        epochs (``list``): epochs to evaluate, as Modified Julian Dates
        station_longitude (``float``, optional): station longitude in degrees. If given, results
            are transformed into the station north/east components.
        north_only (``bool``, optional): only report the north component. Requires
            `station_longitude`.
        earth_model (``int`` | ``str``, optional): Earth model index or name. Defaults to
            ``None``, which uses the behavioral config value.
        output_unit (``str``, optional): output unit name or symbol. Defaults to ``None``, which
            uses the behavioral config value.
        loader_name (``str``, optional): coefficient table loader name. Defaults to ``None``,
            which uses the behavioral config value.

    Returns:
        ``list``: one formatted result line per epoch
    """
    # Local Imports
    from .common.logger import Logger
    from .terms import OppolzerTerms

    logger = Logger("oppolzer")

    if north_only and station_longitude is None:
        logger.error("North component requested without a station longitude")
        raise ValueError("`north_only` requires `station_longitude`")

    terms = OppolzerTerms.fromParameterFile(
        parameter_file,
        loader_name=loader_name,
        earth_model=earth_model,
        output_unit=output_unit,
    )
    logger.info(
        f"Evaluating {len(terms.table)} terms for the {terms.model_name!r} model in {terms.output_unit.name}",
    )

    lines = []
    for mjd in epochs:
        if north_only:
            north = terms.computeNorthComponent(mjd, station_longitude)
            lines.append(f"{mjd:.6f} {north: .9f}")
        else:
            result = terms.compute(mjd, station_longitude)
            lines.append(f"{mjd:.6f} {result.dx: .9f} {result.dy: .9f}")

    return lines


def main(argv: list[str] | None = None) -> None:
    """OPPOLZER main entry point.

    This is the function that the :command:`oppolzer` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import getCommandLineParser

    # Parse command line arguments and pass them to runOppolzer
    parser = getCommandLineParser()
    cli_args = parser.parse_args(argv)

    if cli_args.config_path:
        BehavioralConfig(cli_args.config_path)

    epochs = list(cli_args.epochs) + list(cli_args.dates)
    if not epochs:
        parser.error("at least one epoch is required, as MJD or --date")

    if cli_args.north_only and cli_args.station_longitude is None:
        parser.error("--north requires --longitude")

    for line in runOppolzer(
        cli_args.parameter_file,
        epochs,
        station_longitude=cli_args.station_longitude,
        north_only=cli_args.north_only,
        earth_model=cli_args.earth_model,
        output_unit=cli_args.output_unit,
        loader_name=cli_args.loader_name,
    ):
        print(line)
