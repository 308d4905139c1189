"""
Modelo SQLAlchemy para a tabela estudantes.
A entidade protege as próprias invariantes: nome obrigatório e desativação sem volta.
"""

import uuid
from typing import Optional

from sqlalchemy import Boolean, Column, String, UniqueConstraint, Uuid, true
from sqlalchemy.orm import validates

from app.database import Base


class Student(Base):
    __tablename__ = "estudantes"
    __table_args__ = (UniqueConstraint("nome", name="uq_estudantes_nome"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    nome = Column(String, nullable=False)
    ativo = Column(Boolean, nullable=False, default=True, server_default=true())

    def __init__(self, nome: str):
        # O id é gerado na construção para já estar disponível antes do flush.
        super().__init__(id=uuid.uuid4(), nome=nome, ativo=True)

    @validates("nome")
    def _validate_nome(self, key: str, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise ValueError("O nome do estudante é obrigatório.")
        return value

    def rename(self, nome: str) -> None:
        """Substitui o nome. Não verifica unicidade (a constraint do banco cuida disso)."""
        self.nome = nome

    def deactivate(self) -> None:
        """Desativação lógica, idempotente. Não existe operação inversa."""
        self.ativo = False

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, nome={self.nome!r}, ativo={self.ativo})>"
