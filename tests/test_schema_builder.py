import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from app.core.config import Settings
from app.db.base import ALL_MODELS
from app.db.schema_builder import BuildResult, SchemaBuilder, SchemaBuildError, SchemaState
from app.db.session import Database
from app.main import create_app
from app.models.hall import Hall
from app.models.movie import Genre
from app.models.show import Show


@pytest.fixture()
def engine(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'schema.db'}")
    yield database.engine
    database.dispose()


def _table_names(engine):
    return set(inspect(engine).get_table_names())


def test_build_walks_every_state(engine):
    builder = SchemaBuilder(engine, ALL_MODELS)
    assert builder.state == SchemaState.UNINITIALIZED

    assert builder.register() == BuildResult(ok=True, state=SchemaState.SCHEMA_REGISTERED)
    assert builder.associate() == BuildResult(ok=True, state=SchemaState.ASSOCIATIONS_BUILT)
    assert builder.sync() == BuildResult(ok=True, state=SchemaState.SYNCED)

    assert _table_names(engine) == {model.__tablename__ for model in ALL_MODELS}


def test_transitions_out_of_order_fail_without_side_effects(engine):
    builder = SchemaBuilder(engine, ALL_MODELS)

    result = builder.sync()
    assert not result.ok
    assert result.state == SchemaState.UNINITIALIZED
    assert isinstance(result.error, SchemaBuildError)

    assert not builder.associate().ok
    assert _table_names(engine) == set()


def test_register_stops_at_unmapped_entity(engine):
    class NotAnEntity:
        pass

    builder = SchemaBuilder(engine, [Hall, NotAnEntity, Genre])
    result = builder.build()

    assert not result.ok
    assert result.state == SchemaState.UNINITIALIZED
    assert result.entity == "NotAnEntity"
    assert _table_names(engine) == set()


def test_associate_stops_when_target_is_not_registered(engine, caplog):
    builder = SchemaBuilder(engine, [Show])
    result = builder.build()

    assert not result.ok
    assert result.state == SchemaState.SCHEMA_REGISTERED
    assert result.entity == "Show"
    assert "Error while creating associations for Show" in caplog.text
    assert _table_names(engine) == set()


def test_register_fails_when_database_unreachable(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'missing' / 'nowhere.db'}")
    try:
        result = SchemaBuilder(database.engine, ALL_MODELS).build()
    finally:
        database.dispose()

    assert not result.ok
    assert result.state == SchemaState.UNINITIALIZED


def test_sync_without_force_keeps_data(engine):
    assert SchemaBuilder(engine, ALL_MODELS).build(force=False).ok
    with engine.begin() as connection:
        connection.execute(Genre.__table__.insert().values(name="Noir"))

    assert SchemaBuilder(engine, ALL_MODELS).build(force=False).ok

    with engine.connect() as connection:
        assert connection.execute(Genre.__table__.select()).all()[0].name == "Noir"


def test_sync_with_force_resets_schema(engine):
    assert SchemaBuilder(engine, ALL_MODELS).build().ok
    with engine.begin() as connection:
        connection.execute(Genre.__table__.insert().values(name="Noir"))

    assert SchemaBuilder(engine, ALL_MODELS).build(force=True).ok

    with engine.connect() as connection:
        assert connection.execute(Genre.__table__.select()).all() == []


def test_startup_aborts_when_schema_build_fails(tmp_path):
    app_settings = Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'missing' / 'nowhere.db'}",
        CREATE_DATABASE=False,
    )
    app = create_app(app_settings)

    with pytest.raises(SchemaBuildError):
        with TestClient(app):
            pass
