"""
Router dos estudantes.
POST   /estudantes            criação (409 se o nome já existe)
GET    /estudantes/ativos     listagem dos ativos
GET    /estudantes/inativos   listagem dos inativos
GET    /estudantes            listagem completa
PUT    /estudantes/{id}       atualização do nome (404 se não existe, 409 se o nome já está em uso)
DELETE /estudantes/{id}       desativação (exclusão lógica, 404 se não existe)
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import StudentAlreadyExistsError, StudentNotFoundError
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services import student_service

router = APIRouter(prefix="/estudantes", tags=["Estudantes"])


@router.post(
    "",
    response_model=StudentResponse,
    summary="Adiciona um novo estudante",
    responses={409: {"description": "Estudante já cadastrado"}},
)
async def create_student(data: StudentCreate, db: AsyncSession = Depends(get_db)):
    """Esta rota adiciona um novo estudante ao banco de dados."""
    try:
        return await student_service.create_student(db, data)
    except StudentAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/ativos", response_model=List[StudentResponse], summary="Obtém todos os estudantes ativos")
async def list_active_students(db: AsyncSession = Depends(get_db)):
    """Retorna a lista de todos os estudantes marcados como ativos."""
    return await student_service.list_active_students(db)


@router.get("/inativos", response_model=List[StudentResponse], summary="Obtém todos os estudantes inativos")
async def list_inactive_students(db: AsyncSession = Depends(get_db)):
    """Retorna a lista de todos os estudantes que não estão marcados como ativos."""
    return await student_service.list_inactive_students(db)


@router.get("", response_model=List[StudentResponse], summary="Obtém todos os estudantes, ativos e inativos")
async def list_students(db: AsyncSession = Depends(get_db)):
    """Esta rota retorna uma lista de todos os estudantes, ativos e inativos, no banco de dados."""
    return await student_service.list_students(db)


@router.put(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Atualiza um estudante existente",
    responses={404: {"description": "Estudante não encontrado"}, 409: {"description": "Nome já utilizado"}},
)
async def rename_student(student_id: uuid.UUID, data: StudentUpdate, db: AsyncSession = Depends(get_db)):
    """Atualiza o nome de um estudante existente, identificado pelo seu ID."""
    try:
        return await student_service.rename_student(db, student_id, data)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StudentAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete(
    "/{student_id}",
    response_class=Response,
    summary="Desativa um estudante existente",
    responses={404: {"description": "Estudante não encontrado"}},
)
async def deactivate_student(student_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """
    Desativa um estudante existente, identificado pelo seu ID.
    O registro é mantido com ativo = false; não há exclusão física.
    """
    try:
        await student_service.deactivate_student(db, student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=200)
