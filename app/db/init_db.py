import psycopg2
from psycopg2 import sql
from psycopg2.extensions import ISOLATION_LEVEL_AUTOCOMMIT
from sqlalchemy.engine import make_url
import logging

logger = logging.getLogger(__name__)

def create_database(database_url: str):
    """Create the target PostgreSQL database if it doesn't exist."""
    url = make_url(database_url)
    if url.get_backend_name() != "postgresql":
        logger.debug(f"Skipping database creation for {url.get_backend_name()} backend.")
        return

    try:
        # Connect to default 'postgres' database to check/create target DB
        con = psycopg2.connect(
            user=url.username,
            password=url.password,
            host=url.host,
            port=url.port or 5432,
            dbname="postgres"
        )
        con.set_isolation_level(ISOLATION_LEVEL_AUTOCOMMIT)
        cur = con.cursor()

        cur.execute("SELECT 1 FROM pg_catalog.pg_database WHERE datname = %s", (url.database,))
        exists = cur.fetchone()

        if not exists:
            logger.info(f"Database {url.database} does not exist. Creating...")
            cur.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(url.database)))
            logger.info(f"Database {url.database} created successfully.")
        else:
            logger.info(f"Database {url.database} already exists.")

        cur.close()
        con.close()
    except psycopg2.Error as e:
        logger.error(f"Error creating database: {e}")
        # Proceeding anyway, the schema builder reports if the target is unreachable

if __name__ == "__main__":
    from app.core.config import settings

    logging.basicConfig(level=logging.INFO)
    create_database(settings.DATABASE_URL)
