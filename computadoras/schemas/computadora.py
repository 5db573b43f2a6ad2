"""Request and response bodies for the ``/computadoras`` endpoints.

``ComputadoraCreate`` lets the optional columns be left out. ``ComputadoraReplace``
is used by PUT, which rewrites every column, so every key must be sent; the
optional columns may be ``null`` but may not be missing.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.computadora import INT_MAX


class ComputadoraBase(BaseModel):
    # Unknown keys (a stray ``id`` included) are dropped, not rejected.
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    marca: str = Field(min_length=1, max_length=100)
    modelo: str = Field(min_length=1, max_length=100)
    procesador: str = Field(min_length=1, max_length=100)
    # Strict: JSON true or 8.0 is not a size.
    ram_gb: int = Field(strict=True, ge=0, le=INT_MAX)
    almacenamiento_gb: int = Field(strict=True, ge=0, le=INT_MAX)
    tipo_almacenamiento: str = Field(min_length=1, max_length=20)
    sistema_operativo: str = Field(min_length=1, max_length=100)


class ComputadoraCreate(ComputadoraBase):
    precio: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    fecha_adquisicion: Optional[date] = None


class ComputadoraReplace(ComputadoraBase):
    precio: Optional[Decimal] = Field(..., max_digits=10, decimal_places=2)
    fecha_adquisicion: Optional[date] = Field(...)


class ComputadoraOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    marca: str
    modelo: str
    procesador: str
    ram_gb: int
    almacenamiento_gb: int
    tipo_almacenamiento: str
    sistema_operativo: str
    precio: Optional[Decimal] = None
    fecha_adquisicion: Optional[date] = None


class MessageOut(BaseModel):
    message: str


class ComputadoraCreated(MessageOut):
    id: int


class ErrorOut(BaseModel):
    code: str
    message: str
    details: Optional[dict] = None
