"""ORM mapping for the ``Computadoras`` table."""

from __future__ import annotations

from sqlalchemy import Column, Date, Integer, Numeric, String

from ..db.session import Base


# Largest value a MySQL INT column holds; ids and the integer fields share it.
INT_MAX = 2_147_483_647


class Computadora(Base):
    __tablename__ = "Computadoras"

    id = Column(Integer, primary_key=True, autoincrement=True)
    marca = Column(String(100), nullable=False, index=True)
    modelo = Column(String(100), nullable=False)
    procesador = Column(String(100), nullable=False)
    ram_gb = Column(Integer, nullable=False)
    almacenamiento_gb = Column(Integer, nullable=False)
    tipo_almacenamiento = Column(String(20), nullable=False)
    sistema_operativo = Column(String(100), nullable=False)
    # Only present in some deployments; added by the migration when missing.
    precio = Column(Numeric(10, 2), nullable=True)
    fecha_adquisicion = Column(Date, nullable=True)
