"""CLI for restart-sanity."""

from __future__ import annotations

import sys

import click

from restart_sanity import __version__
from restart_sanity.log import set_verbose
from restart_sanity.precision import DEFAULT_DIGITS
from restart_sanity.restart import DEFAULT_H_I


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__)
@click.argument("filename", type=click.Path(dir_okay=False))
@click.option("-e", "--H_I", "h_i", default=DEFAULT_H_I, show_default=True,
              type=click.FloatRange(min=0, min_open=True),
              help="Initial entropy estimate H_I, in bits per symbol.")
@click.option("--digits", default=DEFAULT_DIGITS, show_default=True, type=click.IntRange(min=100),
              help="Working precision in decimal digits.")
@click.option("-v", "--verbose", is_flag=True, help="Trace progress and every summation term to stderr.")
def main(filename: str, h_i: float, digits: int, verbose: bool) -> None:
    """Perform the SP800-90B restart sanity check on FILENAME.

    FILENAME holds a 1000x1000 restart matrix in one-symbol-per-byte
    format, row-major, exactly 1,000,000 bytes.

    Examples:

        restart-sanity-check -e 0.8 restart_matrix.bin

        restart-sanity-check -v --H_I 1.0 restart_matrix.bin
    """
    from restart_sanity.matrix import load_matrix
    from restart_sanity.report import render_report
    from restart_sanity.restart import run_restart_test

    set_verbose(verbose)

    try:
        matrix = load_matrix(filename)
    except OSError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    try:
        result = run_restart_test(matrix, h_i=h_i, digits=digits)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'-e' / '--H_I'")

    click.echo(render_report(result))


if __name__ == "__main__":
    main()
