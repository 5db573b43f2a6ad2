# computadoras/crud/computadoras.py
from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from ..models.computadora import Computadora


def list_computadoras(db: Session) -> list[Computadora]:
    """
    Return every record ordered by id.
    """
    stmt = select(Computadora).order_by(Computadora.id)
    return list(db.execute(stmt).scalars().all())


def get_computadora(db: Session, item_id: int) -> Computadora | None:
    """
    Fetch a single record by primary key.
    """
    return db.get(Computadora, item_id)


def list_by_marca(db: Session, marca: str) -> list[Computadora]:
    """
    Return every record whose brand matches exactly, ordered by id.
    """
    stmt = select(Computadora).where(Computadora.marca == marca).order_by(Computadora.id)
    return list(db.execute(stmt).scalars().all())


def create_computadora(db: Session, payload: dict) -> Computadora:
    """
    Insert a record from a payload dict; the store assigns the id.
    """
    obj = Computadora(**payload)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def replace_computadora(db: Session, item_id: int, payload: dict) -> int:
    """
    Overwrite every column of the record ``item_id`` in one UPDATE.
    Returns the number of matched rows (0 when the id does not exist).
    """
    stmt = (
        update(Computadora)
        .where(Computadora.id == item_id)
        .values(**payload)
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount


def delete_computadora(db: Session, item_id: int) -> int:
    """
    Delete the record ``item_id`` in one DELETE and return the affected row count.
    """
    stmt = (
        delete(Computadora)
        .where(Computadora.id == item_id)
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount
