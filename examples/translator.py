"""
Translator launcher arguments.

    python examples/translator.py -help
    python examples/translator.py -path geckodriver.exe -headless false -lang de:en
"""
import sys
from pathlib import Path

from singledash import Argument, ArgumentParser, ValueArgument
from singledash.console import console
from singledash.utils import setup_logging

setup_logging()

parser = ArgumentParser()
parser.add(
    ValueArgument(
        "headless",
        True,
        "Determines if the browser runs in headless mode. "
        "If TRUE, the windows will be invisible.",
    )
)
parser.add(
    ValueArgument("lang", "en:de", "Specifies the language pair for translation.")
    .with_alias("language")
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
        Path("C:\\path\\to\\geckodriver.exe"),
        "Path to the Geckodriver binary.",
    )
    .with_alias("path")
    .mark_required()
)
parser.add(Argument("dry-run").describe("Only print what would be translated."))
parser.parse(sys.argv[1:])

headless = parser.get_boolean("headless")
driver_path = parser.get_path("driverpath")
lang = parser.get_string("lang")
translator = parser.get_string("translator")

console.print(f"headless={headless} driver={driver_path} lang={lang} via {translator}")
console.print(f"dry run: {parser.is_set('dry-run')}")
