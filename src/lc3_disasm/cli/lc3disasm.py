"""
lc3disasm - LC-3 Object File Disassembler Command-Line Interface
================================================================

This module implements the command-line interface for the LC-3
disassembler. It loads an object file, disassembles every word in
ascending address order and writes the listing.

Usage Examples
--------------
Disassemble an object file:
    $ lc3disasm program.obj

Limit number of instructions:
    $ lc3disasm program.obj --count 20

Output to file:
    $ lc3disasm program.obj -o listing.asm

Show raw words and trap/offset annotations:
    $ lc3disasm program.obj --words --comments

Decode the NOP/CLR/INC/DEC extension:
    $ lc3disasm program.obj --extensions

Machine-readable output:
    $ lc3disasm program.obj --json
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from lc3_disasm import __version__
from lc3_disasm.cli.errors import ExitCode, handle_cli_exception
from lc3_disasm.config import DisassemblerConfig
from lc3_disasm.cpu import MAX_ADDRESS
from lc3_disasm.disassembler import LC3Disassembler
from lc3_disasm.objfile import MemoryImage, load_file

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_header(name: str, image: MemoryImage) -> list:
    """Build the ``;`` comment lines that precede the listing."""
    lines = [
        f"; Disassembly of {name}",
        f"; Origin: 0x{image.origin:04X}",
        f"; Words: {len(image)}",
    ]
    if image.truncated:
        lines.append(
            f"; Truncated: {image.dropped_words} word(s) past 0x{MAX_ADDRESS:04X} were dropped"
        )
    if image.trailing_bytes:
        lines.append(f"; Trailing bytes: {image.trailing_bytes}")
    lines.append("")
    return lines


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
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-c", "--count",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of instructions to disassemble (default: all)",
)
@click.option(
    "--header/--no-header",
    default=None,
    help="Print a comment header with origin and word count (default: enabled)",
)
@click.option(
    "--words/--no-words",
    "show_words",
    default=None,
    help="Include the raw instruction word after each address",
)
@click.option(
    "--comments/--no-comments",
    default=None,
    help="Annotate trap vectors and PC-relative offsets",
)
@click.option(
    "--extensions/--no-extensions",
    default=None,
    help="Decode the NOP/CLR/INC/DEC extension carried in RES words",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail if the object overflows the address space instead of truncating",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Emit a JSON array of decoded instructions instead of a listing",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="lc3disasm")
def main(
    input_file: Path,
    output: Optional[Path],
    count: Optional[int],
    header: Optional[bool],
    show_words: Optional[bool],
    comments: Optional[bool],
    extensions: Optional[bool],
    strict: Optional[bool],
    as_json: bool,
    verbose: bool,
) -> None:
    """
    Disassemble an LC-3 object file.

    INPUT_FILE is a big-endian object file: an origin word followed by
    the words to place at consecutive addresses.

    Options not given on the command line fall back to the LC3_DISASM_*
    environment variables.

    Examples:

        # Full listing
        lc3disasm program.obj

        # First 20 instructions, with annotations, into a file
        lc3disasm program.obj --count 20 --comments -o listing.asm
    """
    setup_logging(verbose)

    config = DisassemblerConfig.from_env().merge(
        header=header,
        show_words=show_words,
        comments=comments,
        extensions=extensions,
        strict=strict,
    )
    logger.debug(f"Configuration: {config}")

    try:
        image = load_file(input_file, strict=config.strict)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Load")

    if verbose:
        click.echo(f"Input file: {input_file} ({len(image)} words)", err=True)
        click.echo(f"Origin: 0x{image.origin:04X}", err=True)

    disasm = LC3Disassembler(extensions=config.extensions)
    instructions = disasm.disassemble(image, count=count)

    if as_json:
        result = json.dumps([instr.to_dict() for instr in instructions], indent=2) + "\n"
    else:
        output_lines = []
        if config.header:
            output_lines.extend(build_header(input_file.name, image))
        for instr in instructions:
            output_lines.append(
                instr.format(show_word=config.show_words, comments=config.comments)
            )
        result = "".join(f"{line}\n" for line in output_lines)

    if output:
        try:
            output.write_text(result, encoding="utf-8")
        except OSError as e:
            click.echo(f"Error writing {output}: {e}", err=True)
            sys.exit(ExitCode.INVALID_ARGS)
        if verbose:
            click.echo(f"Output written to: {output}", err=True)
    else:
        click.echo(result, nl=False)

    if verbose:
        click.echo(f"Instructions disassembled: {len(instructions)}", err=True)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
