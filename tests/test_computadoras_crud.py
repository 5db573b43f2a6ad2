"""Tests for the single-statement CRUD helpers."""

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from computadoras.db.session import Base
from computadoras.crud.computadoras import (
    create_computadora,
    delete_computadora,
    get_computadora,
    list_by_marca,
    list_computadoras,
    replace_computadora,
)

# Ensure models are registered so metadata tables are created
from computadoras.models import computadora as computadora_model  # noqa: F401


DELL = {
    "marca": "Dell",
    "modelo": "Inspiron 15",
    "procesador": "Intel Core i5-1035G1",
    "ram_gb": 8,
    "almacenamiento_gb": 512,
    "tipo_almacenamiento": "SSD",
    "sistema_operativo": "Windows 10",
}


@pytest.fixture()
def db_session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def test_list_is_empty_before_any_insert(db_session):
    assert list_computadoras(db_session) == []


def test_create_assigns_id_and_round_trips_fields(db_session):
    payload = dict(DELL, precio=Decimal("749.99"), fecha_adquisicion=date(2023, 3, 14))
    created = create_computadora(db_session, payload)

    assert created.id is not None
    fetched = get_computadora(db_session, created.id)
    assert fetched is not None
    for key, value in payload.items():
        assert getattr(fetched, key) == value


def test_list_returns_rows_in_id_order(db_session):
    first = create_computadora(db_session, DELL)
    second = create_computadora(db_session, dict(DELL, marca="HP", modelo="Pavilion"))

    assert [item.id for item in list_computadoras(db_session)] == [first.id, second.id]


def test_list_by_marca_matches_exact_brand(db_session):
    create_computadora(db_session, DELL)
    create_computadora(db_session, dict(DELL, modelo="XPS 13"))
    create_computadora(db_session, dict(DELL, marca="Lenovo", modelo="ThinkPad T14"))

    dells = list_by_marca(db_session, "Dell")
    assert sorted(item.modelo for item in dells) == ["Inspiron 15", "XPS 13"]
    assert list_by_marca(db_session, "Apple") == []


def test_replace_overwrites_every_column(db_session):
    created = create_computadora(db_session, dict(DELL, precio=Decimal("749.99")))
    replacement = {
        "marca": "Dell",
        "modelo": "Inspiron 16",
        "procesador": "Intel Core i7-1255U",
        "ram_gb": 16,
        "almacenamiento_gb": 1024,
        "tipo_almacenamiento": "SSD",
        "sistema_operativo": "Windows 11",
        "precio": None,
        "fecha_adquisicion": date(2024, 1, 2),
    }

    assert replace_computadora(db_session, created.id, replacement) == 1

    db_session.expire_all()
    fetched = get_computadora(db_session, created.id)
    for key, value in replacement.items():
        assert getattr(fetched, key) == value


def test_replace_missing_id_affects_no_rows(db_session):
    assert replace_computadora(db_session, 999999, dict(DELL, precio=None, fecha_adquisicion=None)) == 0


def test_delete_twice_reports_zero_the_second_time(db_session):
    item_id = create_computadora(db_session, DELL).id

    assert delete_computadora(db_session, item_id) == 1
    assert delete_computadora(db_session, item_id) == 0
    assert get_computadora(db_session, item_id) is None
