#!/usr/bin/env python3
"""Cria as tabelas do Onde Tem? no banco configurado em DATABASE_URL.

Uso:
    python scripts/init_db.py            # cria tabelas ausentes
    python scripts/init_db.py --reset    # apaga tudo e recria (dev/test)

Padrão: não apaga nada. `--reset` é recusado em produção.
"""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass

from app.infra.stores.database import create_database_engine, create_schema, drop_schema
from app.infra.stores.schema import metadata
from config.settings import get_base_settings, get_database_settings


@dataclass(frozen=True)
class InitStats:
    tables: int = 0
    dropped: bool = False


async def init_database(*, reset: bool) -> InitStats:
    engine = create_database_engine(get_database_settings())
    try:
        if reset:
            await drop_schema(engine)
        await create_schema(engine)
    finally:
        await engine.dispose()
    return InitStats(tables=len(metadata.tables), dropped=reset)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Apaga as tabelas antes de criar. Recusado em produção.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.reset and get_base_settings().is_production:
        raise SystemExit("--reset não é permitido em produção")

    stats = asyncio.run(init_database(reset=args.reset))
    mode = "reset" if stats.dropped else "create"
    print(f"[{mode}] tables={stats.tables}")


if __name__ == "__main__":
    main()
