import json
from pathlib import Path
import click
from .logic import CANONICAL_JSON_KW, verify_sfv

@click.group()
def main():
    pass

@main.command("manifest")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--preflight", is_flag=True, help="Check that every listed file exists before hashing")
@click.option("--all", "all_entries", is_flag=True, help="Check every entry instead of stopping at the first failure")
def manifest_cmd(path: Path, preflight: bool, all_entries: bool):
    result = verify_sfv(path, preflight=preflight, all_entries=all_entries)
    click.echo(json.dumps(result, **CANONICAL_JSON_KW))
    if result["status"] != "PASS":
        raise SystemExit(1)

if __name__ == "__main__":
    main()
