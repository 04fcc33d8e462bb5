from __future__ import annotations
import argparse
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tintlog.core.colors import LEVEL_COLORS, Color
from tintlog.core.errors import TintlogError
from tintlog.core.levels import Severity, parse_level
from tintlog.logger import ColorLog
from tintlog.system.settings import Settings

# rich style names for the escape codes each Color emits
RICH_STYLES = {
    Color.BLACK: "black",
    Color.RED: "red",
    Color.GREEN: "green",
    Color.YELLOW: "bright_yellow",
    Color.BLUE: "blue",
    Color.MAGENTA: "magenta",
    Color.CYAN: "cyan",
    Color.GREY: "white",
    Color.WHITE: "bright_white",
}

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tintlog", description="Emit sample log lines at every level.")
    p.add_argument("--level", help="threshold name or number (NONE, DEBUG, INFO, WARN, ERROR, FATAL)")
    p.add_argument("--file", help="also mirror lines to this file (truncated on start)")
    p.add_argument("--no-color", action="store_true", help="disable ANSI colors on the console")
    p.add_argument("--preview", action="store_true", help="show the level/color table and exit")
    return p

def preview_table() -> Table:
    table = Table(title="tintlog levels")
    table.add_column("Level")
    table.add_column("Value", justify="right")
    table.add_column("Label")
    table.add_column("Color")
    for sev, color in LEVEL_COLORS.items():
        style = RICH_STYLES[color]
        table.add_row(sev.name, str(int(sev)), Text(f"[{sev.label}]", style=style),
                      Text(f"{color.name} ({int(color)})", style=style))
    return table

def demo(log: ColorLog):
    log.debug("debug message, threshold is %s", log.get_log_level())
    log.info("info message")
    log.warn("warn message")
    log.error("error message")
    log.fatal("fatal message")
    log.print("pre-formatted line through print()", Severity.INFO, Color.CYAN)
    log.printc("fragment without prefix", Severity.INFO, Color.BLUE)
    log.printc("\n", Severity.INFO, Color.WHITE)

def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    if args.preview:
        console.print(preview_table())
        return 0
    settings = Settings.load()
    try:
        if args.level:
            parse_level(args.level)
            settings.data.level = args.level
        if args.file:
            settings.data.log_file = args.file
        if args.no_color:
            settings.data.no_color = True
        settings.data.normalize()
        log = settings.build_logger()
    except TintlogError as e:
        console.print(f"[bold red]{e}[/bold red]")
        return 2
    with log:
        demo(log)
    return 0

def main():
    raise SystemExit(run())
