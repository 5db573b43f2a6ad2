"""HTTP routes for the ``Computadoras`` resource.

Each handler runs exactly one statement through ``crud.computadoras``. Store
errors are not caught here: they propagate to the ``SQLAlchemyError`` handler
registered in ``core.errors`` so every route reports them the same way.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..core.errors import NOT_FOUND_MESSAGE
from ..crud.computadoras import (
    create_computadora,
    delete_computadora,
    get_computadora,
    list_by_marca,
    list_computadoras,
    replace_computadora,
)
from ..db.session import get_db
from ..models.computadora import INT_MAX
from ..deps.auth import require_bearer
from ..schemas.computadora import (
    ComputadoraCreate,
    ComputadoraCreated,
    ComputadoraOut,
    ComputadoraReplace,
    ErrorOut,
    MessageOut,
)

router = APIRouter(prefix="/computadoras", tags=["computadoras"], dependencies=[Depends(require_bearer)])

ERROR_RESPONSES = {
    404: {"model": ErrorOut, "description": "No record matches the request"},
    500: {"model": ErrorOut, "description": "The database could not complete the statement"},
}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)


def _storable_id(item_id: int) -> bool:
    # Ids outside the INT column range cannot match a row.
    return 1 <= item_id <= INT_MAX


@router.get("", response_model=list[ComputadoraOut], summary="List every computer")
def api_list(db: Session = Depends(get_db)):
    return list_computadoras(db)


# Registered before "/{item_id}" so "marca" is never parsed as an id.
@router.get(
    "/marca/{marca}",
    response_model=list[ComputadoraOut],
    responses=ERROR_RESPONSES,
    summary="List computers of one brand",
)
def api_list_by_marca(marca: str, db: Session = Depends(get_db)):
    rows = list_by_marca(db, marca)
    if not rows:
        raise _not_found()
    return rows


@router.get("/{item_id}", response_model=ComputadoraOut, responses=ERROR_RESPONSES, summary="Get a computer by id")
def api_get(item_id: int, db: Session = Depends(get_db)):
    item = get_computadora(db, item_id) if _storable_id(item_id) else None
    if item is None:
        raise _not_found()
    return item


@router.post(
    "",
    response_model=ComputadoraCreated,
    status_code=status.HTTP_201_CREATED,
    responses={500: ERROR_RESPONSES[500]},
    summary="Create a computer",
)
def api_create(payload: ComputadoraCreate, db: Session = Depends(get_db)):
    item = create_computadora(db, payload.model_dump())
    return ComputadoraCreated(message=f"Inserted {item.marca} {item.modelo}", id=item.id)


@router.put("/{item_id}", response_model=MessageOut, responses=ERROR_RESPONSES, summary="Replace a computer")
def api_replace(item_id: int, payload: ComputadoraReplace, db: Session = Depends(get_db)):
    if not _storable_id(item_id) or not replace_computadora(db, item_id, payload.model_dump()):
        raise _not_found()
    return MessageOut(message=f"Updated {payload.marca} {payload.modelo}")


@router.delete("/{item_id}", response_model=MessageOut, responses=ERROR_RESPONSES, summary="Delete a computer")
def api_delete(item_id: int, db: Session = Depends(get_db)):
    if not _storable_id(item_id) or not delete_computadora(db, item_id):
        raise _not_found()
    return MessageOut(message="deleted")
