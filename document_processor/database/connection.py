from psycopg_pool import ConnectionPool

from document_processor.config.settings import Settings


def build_conninfo(settings: Settings) -> str:
    return (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )


def create_pool(settings: Settings) -> ConnectionPool:
    """Create the connection pool handed to the record repository.

    Connections are established in the background; the first ``put`` waits
    for one.
    """
    return ConnectionPool(
        build_conninfo(settings),
        min_size=1,
        max_size=settings.db_pool_max_size,
        open=True,
    )
