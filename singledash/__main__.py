"""
Singledash CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Demo entry point. Declares the translator example arguments, or loads them
from a `singledash.yaml` / `singledash.toml` file, parses the command line and
prints what was resolved.

    python -m singledash -help
    python -m singledash -driverpath geckodriver.exe -headless false -verbose
"""
import os
import sys
from pathlib import Path
from typing import Any, Sequence

from rich.markup import escape
from rich.table import Table

from singledash.argument import Argument, ValueArgument
from singledash.config import loader
from singledash.console import console
from singledash.exceptions import SingledashError
from singledash.parser import ArgumentParser
from singledash.themes import OneColors
from singledash.utils import setup_logging


def find_singledash_config() -> Path | None:
    candidates = [
        Path.cwd() / "singledash.yaml",
        Path.cwd() / "singledash.toml",
        Path.cwd() / ".singledash.yaml",
        Path.cwd() / ".singledash.toml",
    ]
    if os.environ.get("SINGLEDASH_CONFIG"):
        candidates.append(Path(os.environ["SINGLEDASH_CONFIG"]))
    return next((p for p in candidates if p.is_file()), None)


def get_demo_parser() -> ArgumentParser:
    parser = ArgumentParser(program="singledash")
    parser.add(
        ValueArgument(
            "headless",
            True,
            "Determines if the browser runs in headless mode. "
            "If TRUE, the windows will be invisible.",
        )
    )
    parser.add(
        ValueArgument(
            "lang", "en:de", "Specifies the language pair for translation."
        ).with_alias("language")
    )
    parser.add(
        ValueArgument(
            "translator",
            "deepl",
            'Specifies the translation service to use. Possible values: "google" or "deepl"',
        )
    )
    parser.add(
        ValueArgument(
            "driverpath",
            Path("geckodriver.exe"),
            "Path to the Geckodriver binary.",
        )
        .with_alias("path")
        .mark_required()
    )
    parser.add(Argument("verbose").describe("Print every resolved argument."))
    return parser


def resolve_demo(parser: ArgumentParser) -> dict[str, Any]:
    return {
        "headless": parser.get_boolean("headless"),
        "driverpath": parser.get_path("driverpath"),
        "lang": parser.get_string("lang"),
        "translator": parser.get_string("translator"),
        "verbose": parser.is_set("verbose"),
    }


def render_arguments(parser: ArgumentParser) -> Table:
    table = Table(title="Resolved arguments", title_style=OneColors.BLUE_b)
    table.add_column("Name", style=OneColors.CYAN)
    table.add_column("Kind")
    table.add_column("Set")
    table.add_column("Value", style="value")
    for argument in parser.arguments:
        value = argument.value if isinstance(argument, ValueArgument) else ""
        table.add_row(argument.name, str(argument.kind), str(argument.is_set), value)
    return table


def run(argv: Sequence[str]) -> dict[str, Any]:
    """Parse `argv` against the configured or demo declarations."""
    args = list(argv)

    config_path = find_singledash_config()
    parser = loader(config_path) if config_path else get_demo_parser()
    parser.parse(args)

    try:
        if config_path:
            resolved = {
                argument.name: parser.get_string(argument.name)
                for argument in parser.arguments
                if isinstance(argument, ValueArgument)
            }
        else:
            resolved = resolve_demo(parser)
    except SingledashError as error:
        console.print(f"[error]❌ {escape(str(error))}[/]", highlight=False)
        sys.exit(1)

    if parser.is_set("verbose") or config_path:
        console.print(render_arguments(parser))
    return resolved


def main() -> None:
    setup_logging(log_filename=os.environ.get("SINGLEDASH_LOG_FILE"))
    run(sys.argv[1:])


if __name__ == "__main__":
    main()
