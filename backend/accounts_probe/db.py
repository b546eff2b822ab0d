import logging
from typing import Optional, Sequence

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool

from .models import ConnectionConfig, QueryFailure, QuerySuccess

logger = logging.getLogger(__name__)

ACCOUNTS_SQL = "SELECT * FROM accounts"


def _sslmode(config: ConnectionConfig) -> str:
    # "require" encrypts without checking the server certificate
    return "verify-full" if config.tls_verify else "require"


def build_pool(config: ConnectionConfig) -> AsyncConnectionPool:
    """Unopened pool; the caller opens and closes it with `async with`."""
    kwargs = dict(
        host=config.host,
        port=config.port,
        dbname=config.database,
        user=config.user,
        password=config.password,
        sslmode=_sslmode(config),
        row_factory=dict_row,
    )
    if config.tls_verify:
        # "system" (libpq 16+) trusts the OS CA store instead of ~/.postgresql/root.crt
        kwargs["sslrootcert"] = config.sslrootcert or "system"
    return AsyncConnectionPool(conninfo="", kwargs=kwargs, open=False)


async def fetch_accounts(pool: AsyncConnectionPool, sql: str = ACCOUNTS_SQL,
                         params: Optional[Sequence] = None):
    try:
        async with pool.connection() as conn:
            cur = await conn.execute(sql, params)
            rows = await cur.fetchall()
    except psycopg.Error as exc:
        # PoolTimeout is an OperationalError, so unreachable hosts land here too
        logger.error("accounts query failed: %s", exc)
        return QueryFailure(cause=exc)
    return QuerySuccess(rows=list(rows))
