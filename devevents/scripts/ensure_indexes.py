from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from devevents.core.env import load_env
from devevents.database.mongo import connection
from devevents.db.session import ensure_indexes
from devevents.logging import configure_logging


async def run_ensure_indexes() -> list[str]:
    database = await connection.get_database()
    try:
        return await ensure_indexes(database)
    finally:
        connection.close()


def main() -> None:
    load_env()
    configure_logging()
    names = asyncio.run(run_ensure_indexes())
    print(f"Indexes ensured ({', '.join(names)}) at {datetime.now(tz=timezone.utc).isoformat()}")


if __name__ == "__main__":
    main()
