"""
Schemas Pydantic: contratos de entrada e saída dos estudantes.
"""

import uuid

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Aceita "nome" e "Nome" no corpo (clientes antigos enviam PascalCase).
_NOME_ALIASES = AliasChoices("nome", "Nome")


class StudentCreate(BaseModel):
    """Corpo de criação de um estudante (POST /estudantes)."""
    nome: str = Field(validation_alias=_NOME_ALIASES)

    @field_validator("nome")
    @classmethod
    def nome_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("O nome não pode ser vazio.")
        return v


class StudentUpdate(BaseModel):
    """Corpo de atualização do nome (PUT /estudantes/{id})."""
    nome: str = Field(validation_alias=_NOME_ALIASES)

    @field_validator("nome")
    @classmethod
    def nome_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("O nome não pode ser vazio.")
        return v


class StudentResponse(BaseModel):
    """Projeção pública de um estudante. O status ativo nunca é exposto."""
    id: uuid.UUID
    nome: str

    model_config = {"from_attributes": True}
