# bizadmin/cli/__main__.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from bizadmin.core.csv_export import records_to_csv
from bizadmin.server.db.store import COLLECTIONS, JsonStore
from bizadmin.server.logging_setup import configure_logging
from bizadmin.server.settings.config import settings
from bizadmin.services.collection_service import list_records
from bizadmin.services.seed import load_seed_file, seed_store

logger = logging.getLogger("bizadmin.cli")

EPILOG = """Examples:
  python -m bizadmin.cli seed data/seed.yaml
  python -m bizadmin.cli --db=/tmp/db.json seed data/seed.yaml --replace
  python -m bizadmin.cli export quotations --out=quotations-export.csv
  python -m bizadmin.cli serve --port 3000
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="python -m bizadmin.cli",
        description="Maintenance commands for the bizadmin JSON database.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("--db", default=None, help=f"Database file (default: {settings.db_path})")
    sub = ap.add_subparsers(dest="command", required=True)

    p_seed = sub.add_parser("seed", help="Load clients/invoices/... from a YAML or JSON seed file.")
    p_seed.add_argument("seed_file")
    p_seed.add_argument("--replace", action="store_true", help="Overwrite the seeded collections instead of appending.")

    p_export = sub.add_parser("export", help="Write a collection as CSV.")
    p_export.add_argument("collection", choices=COLLECTIONS)
    p_export.add_argument("--out", default=None, help="Output file (default: stdout).")

    p_serve = sub.add_parser("serve", help="Run the HTTP API with uvicorn.")
    p_serve.add_argument("--host", default=settings.host)
    p_serve.add_argument("--port", type=int, default=settings.port)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    store = JsonStore(args.db or settings.db_path)

    if args.command == "seed":
        try:
            seed = load_seed_file(Path(args.seed_file))
        except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
            print(f"Error reading seed file '{args.seed_file}': {e}", file=sys.stderr)
            return 2
        counts = seed_store(store, seed, replace=args.replace)
        total = sum(counts.values())
        print(f"Seeded {total} record(s) into {store.path}")
        return 0

    if args.command == "export":
        csv_text = records_to_csv(list_records(store, args.collection))
        if args.out:
            Path(args.out).write_text(csv_text, encoding="utf-8")
            logger.info("Wrote %s to %s", args.collection, args.out)
        else:
            sys.stdout.write(csv_text)
        return 0

    if args.command == "serve":
        import uvicorn

        if args.db:
            settings.db_path = args.db
        uvicorn.run("bizadmin.server.main:app", host=args.host, port=args.port)
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
