import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from sqlalchemy import MetaData, Table, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.db.session import Base

logger = logging.getLogger(__name__)


class SchemaBuildError(Exception):
    """Raised when the startup schema build cannot complete."""


class SchemaState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    SCHEMA_REGISTERED = "schema_registered"
    ASSOCIATIONS_BUILT = "associations_built"
    SYNCED = "synced"


@dataclass
class BuildResult:
    ok: bool
    state: SchemaState
    entity: Optional[str] = None
    error: Optional[Exception] = None


class SchemaBuilder:
    """
    Brings an ordered collection of mapped entities up against a database.

    The build runs in three transitions, each returning a BuildResult:

      register()   UNINITIALIZED      -> SCHEMA_REGISTERED
      associate()  SCHEMA_REGISTERED  -> ASSOCIATIONS_BUILT
      sync()       ASSOCIATIONS_BUILT -> SYNCED

    A failing transition logs, leaves the state where it was and stops there.
    Nothing that already happened is rolled back; schema setup runs once at
    startup and a failure means the process has to be restarted.
    """

    def __init__(self, engine: Engine, models: Sequence[type], metadata: MetaData = Base.metadata):
        self.engine = engine
        self.models = list(models)
        self.metadata = metadata
        self.state = SchemaState.UNINITIALIZED
        self.tables: List[Table] = []

    def _wrong_state(self, action: str) -> BuildResult:
        error = SchemaBuildError(f"Cannot {action} while schema is {self.state.value}")
        logger.error(str(error))
        return BuildResult(ok=False, state=self.state, error=error)

    def register(self) -> BuildResult:
        """Resolve every entity's table, in order, against a live connection."""
        if self.state != SchemaState.UNINITIALIZED:
            return self._wrong_state("register entities")

        try:
            with self.engine.connect():
                pass
        except SQLAlchemyError as e:
            logger.exception("Cannot reach database while registering entities")
            return BuildResult(ok=False, state=self.state, error=e)

        tables: List[Table] = []
        for model in self.models:
            name = getattr(model, "__name__", repr(model))
            try:
                table = inspect(model).local_table
                if table.metadata is not self.metadata:
                    raise SchemaBuildError(f"{name} is declared on a different metadata")
            except (SQLAlchemyError, SchemaBuildError) as e:
                logger.exception("Error while initializing entity %s", name)
                return BuildResult(ok=False, state=self.state, entity=name, error=e)
            if table not in tables:
                tables.append(table)
            logger.debug("Registered %s as table %s", name, table.name)

        self.tables = tables
        self.state = SchemaState.SCHEMA_REGISTERED
        logger.info("Registered %d entities.", len(self.models))
        return BuildResult(ok=True, state=self.state)

    def associate(self) -> BuildResult:
        """Configure each entity's relationships and check they stay inside the registered set."""
        if self.state != SchemaState.SCHEMA_REGISTERED:
            return self._wrong_state("build associations")

        for model in self.models:
            name = model.__name__
            try:
                # Touching .relationships configures the mappers
                for rel in inspect(model).relationships:
                    target = rel.mapper.local_table
                    if target not in self.tables:
                        raise SchemaBuildError(
                            f"{name}.{rel.key} references unregistered table {target.name}"
                        )
                    if rel.secondary is not None and rel.secondary not in self.tables:
                        raise SchemaBuildError(
                            f"{name}.{rel.key} goes through unregistered table {rel.secondary.name}"
                        )
            except (SQLAlchemyError, SchemaBuildError) as e:
                logger.exception("Error while creating associations for %s", name)
                return BuildResult(ok=False, state=self.state, entity=name, error=e)

        self.state = SchemaState.ASSOCIATIONS_BUILT
        logger.info("Associations built.")
        return BuildResult(ok=True, state=self.state)

    def sync(self, force: bool = False) -> BuildResult:
        """Create missing tables; with force, drop the registered tables first."""
        if self.state not in (SchemaState.ASSOCIATIONS_BUILT, SchemaState.SYNCED):
            return self._wrong_state("sync schema")

        try:
            with self.engine.begin() as connection:
                if force:
                    logger.warning("Dropping %d tables before sync.", len(self.tables))
                    self.metadata.drop_all(bind=connection, tables=self.tables)
                self.metadata.create_all(bind=connection, tables=self.tables)
        except SQLAlchemyError as e:
            logger.exception("Error while synchronizing database schema")
            return BuildResult(ok=False, state=self.state, error=e)

        self.state = SchemaState.SYNCED
        logger.info("Database schema synchronized (force=%s).", force)
        return BuildResult(ok=True, state=self.state)

    def build(self, force: bool = False) -> BuildResult:
        """Run register, associate and sync, stopping at the first failure."""
        result = self.register()
        if not result.ok:
            return result
        result = self.associate()
        if not result.ok:
            return result
        return self.sync(force=force)
