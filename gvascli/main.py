from __future__ import annotations
import argparse
import hashlib
import json
import logging
import os
from typing import Dict, Optional
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from libgvas.errors import GvasError, MissingHint
from libgvas.reader import decode_gvas
from libgvas.summary import summarize_gvas
from libgvas.writer import encode_gvas

console = Console()

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )

def load_hints(path: Optional[str]) -> Dict[str, str]:
    # Hints file: {"Property.Path.StructProperty": "StructTypeName", ...}
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        hints = json.load(f)
    if not isinstance(hints, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in hints.items()
    ):
        raise SystemExit(f"Hints file must be a JSON object of strings: {path}")
    return hints

def _sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()

def cmd_summary(args: argparse.Namespace) -> int:
    s = summarize_gvas(args.sav, load_hints(args.hints))
    console.print(f"[bold]File:[/bold] {s.path}")
    console.print(f"[bold]Size:[/bold] {s.file_size} bytes")
    console.print(f"[bold]Engine:[/bold] {s.engine_version}")
    console.print(f"[bold]Save class:[/bold] {s.save_game_class_name}")
    console.print(f"[bold]Custom versions:[/bold] {s.custom_version_count}")

    t = Table(title="Properties")
    t.add_column("Name", overflow="fold")
    t.add_column("Type")
    t.add_column("Value", overflow="fold")
    if s.properties:
        for p in s.properties:
            t.add_row(p.name, p.property_type, p.value)
    else:
        t.add_row("(none found)", "-", "-")
    console.print(t)
    return 0

def cmd_verify_roundtrip(args: argparse.Namespace) -> int:
    inp = os.path.abspath(args.sav)
    if not os.path.exists(inp):
        console.print(f"[red]File not found:[/red] {inp}")
        return 2
    outp = args.out or inp + ".roundtrip.sav"

    with open(inp, "rb") as f:
        data = f.read()
    out = encode_gvas(decode_gvas(data, load_hints(args.hints)))
    with open(outp, "wb") as f:
        f.write(out)

    a = _sha256(data)
    b = _sha256(out)
    console.print(f"IN : {inp}\n     sha256={a}")
    console.print(f"OUT: {outp}\n     sha256={b}")
    if a == b:
        console.print("[green]IDENTICAL[/green]")
        return 0
    console.print("[yellow]DIFF[/yellow]")
    return 1

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gvascli")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every decoded property")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("summary", help="Print header and top-level properties of a save file")
    s.add_argument("sav")
    s.add_argument("--hints", help="JSON file mapping property paths to struct type names")
    s.set_defaults(fn=cmd_summary)

    r = sub.add_parser("verify-roundtrip", help="Decode->encode and compare bytes")
    r.add_argument("sav")
    r.add_argument("--hints", help="JSON file mapping property paths to struct type names")
    r.add_argument("--out", help="Where to write the re-encoded file (default: <sav>.roundtrip.sav)")
    r.set_defaults(fn=cmd_verify_roundtrip)

    return p

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    try:
        return int(args.fn(args))
    except MissingHint as e:
        console.print(f"[red]Missing hint[/red] for {e.property_type} at offset {e.position}")
        console.print(f'Add to the hints file: [bold]"{e.path}": "<StructType>"[/bold]')
        return 1
    except GvasError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
