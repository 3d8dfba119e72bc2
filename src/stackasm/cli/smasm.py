"""
smasm - Stack Machine Assembler Command-Line Interface
======================================================

This module implements the command-line interface for the stack machine
assembler.

Usage Examples
--------------
Basic assembly (writes program.bin):
    $ smasm program.sm

Decimal listing on stdout:
    $ smasm program.sm -f text -o -

Big-endian binary plus a symbol file:
    $ smasm program.sm --byteorder big -s program.sym

Pre-defined label:
    $ smasm -D io_base=4096 program.sm

Defaults for format, byte order, encoding and log level come from the
SMASM_* environment variables (see stackasm.config).
"""

from pathlib import Path
from typing import Optional
import logging

import click

from stackasm import __version__
from stackasm.assembler import (
    Compiler,
    format_words,
    words_to_bytes,
    write_binary,
    write_symbols,
    write_text,
)
from stackasm.cli.errors import exit_with_error
from stackasm.config import BYTEORDERS, OUTPUT_FORMATS, AssemblerConfig

logger = logging.getLogger(__name__)

STDOUT = Path("-")


def setup_logging(verbose: bool, config: AssemblerConfig) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else config.level
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def parse_define(defn: str) -> tuple[str, int]:
    """
    Parse a -D option into a label name and address.

    A value may be decimal or 0x-prefixed hex; a bare name defaults to 1.

    Raises:
        click.BadParameter: If the value is not a number
    """
    if "=" not in defn:
        return defn.strip(), 1

    name, value_str = defn.split("=", 1)
    value_str = value_str.strip()
    try:
        if value_str.lower().startswith("0x"):
            value = int(value_str[2:], 16)
        else:
            value = int(value_str)
    except ValueError:
        raise click.BadParameter(f"invalid value in -D {defn}", param_hint="'-D'")
    return name.strip(), value


def default_output(input_file: Path, output_format: str) -> Path:
    suffix = ".bin" if output_format == "binary" else ".txt"
    return input_file.with_suffix(suffix)


def write_output(words: list[int], output_file: Path, config: AssemblerConfig) -> int:
    """Write words to a file in the configured format; return the size in bytes."""
    if config.output_format == "binary":
        return write_binary(words, output_file, config.byteorder)
    return write_text(words, output_file, config.output_format)


def echo_words(words: list[int], config: AssemblerConfig) -> None:
    """Write words to stdout; binary output goes out as raw bytes."""
    if config.output_format == "binary":
        click.echo(words_to_bytes(words, config.byteorder), nl=False)
    else:
        click.echo(format_words(words, config.output_format), nl=False)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    help="Output file, '-' for stdout (default: input with .bin or .txt suffix)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format: raw 32-bit words, decimal or hex listing. Default: binary.",
)
@click.option(
    "--byteorder",
    type=click.Choice(BYTEORDERS, case_sensitive=False),
    default=None,
    help="Byte order of binary output. Default: little.",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate label table file",
)
@click.option(
    "-e", "--encoding",
    default=None,
    help="Encoding of the source file. Default: utf-8.",
)
@click.option(
    "-D", "--define",
    multiple=True,
    help="Pre-define label (format: NAME=ADDRESS)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="smasm")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: Optional[str],
    byteorder: Optional[str],
    symbols: Optional[Path],
    encoding: Optional[str],
    define: tuple[str, ...],
    verbose: bool,
) -> None:
    """
    Assemble a stack machine program into 32-bit words.

    INPUT_FILE is the assembly source file to compile.

    \b
    Examples:
        smasm prog.sm                  # Outputs prog.bin
        smasm prog.sm -f hex -o -      # Hex listing on stdout
        smasm -D base=100 prog.sm      # Pre-define label
    """
    try:
        config = AssemblerConfig.from_env()
        if output_format:
            config.output_format = output_format.lower()
        if byteorder:
            config.byteorder = byteorder.lower()
        if encoding:
            config.encoding = encoding
        config.validate()

        setup_logging(verbose, config)

        compiler = Compiler(encoding=config.encoding)
        for defn in define:
            name, value = parse_define(defn)
            compiler.define_label(name, value)

        if verbose:
            click.echo(f"Assembling {input_file}...")

        words = compiler.compile_file(input_file)

        output_file = output if output is not None else default_output(input_file, config.output_format)
        if output_file == STDOUT:
            echo_words(words, config)
        else:
            size = write_output(words, output_file, config)
            if verbose:
                click.echo(f"Wrote {len(words)} words ({size} bytes) to {output_file}")

        if symbols:
            write_symbols(compiler.labels, symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        logger.debug(f"Defined {len(compiler.labels)} labels")

    except Exception as e:
        exit_with_error(e, verbose=verbose)


if __name__ == "__main__":
    main()
