"""
Serviço de negócio dos estudantes.
Criação, listagens (todos / ativos / inativos), renomeação e desativação lógica.

Cada função recebe a sessão explicitamente. O cancelamento da corrotina antes
do commit não persiste nada; um commit já concluído não é desfeito.
"""

import uuid
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import StudentAlreadyExistsError, StudentNotFoundError
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate

logger = logging.getLogger(__name__)


async def create_student(db: AsyncSession, data: StudentCreate) -> StudentResponse:
    """
    Cria um estudante ativo.
    Levanta StudentAlreadyExistsError se o nome já existir (ativo ou não).

    A verificação prévia não é atômica com o INSERT: entre duas criações
    concorrentes, a constraint uq_estudantes_nome rejeita a segunda.
    """
    existing_id = (await db.execute(
        select(Student.id).where(Student.nome == data.nome).limit(1)
    )).scalar()
    if existing_id is not None:
        raise StudentAlreadyExistsError(data.nome)

    student = Student(nome=data.nome)
    db.add(student)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise StudentAlreadyExistsError(data.nome)

    logger.info("Estudante criado: %s (%s)", student.nome, student.id)
    return _to_response(student)


async def list_students(db: AsyncSession) -> list[StudentResponse]:
    """Retorna todos os estudantes, ativos e inativos."""
    students = (await db.execute(select(Student))).scalars().all()
    return [_to_response(s) for s in students]


async def list_active_students(db: AsyncSession) -> list[StudentResponse]:
    students = (await db.execute(
        select(Student).where(Student.ativo.is_(True))
    )).scalars().all()
    return [_to_response(s) for s in students]


async def list_inactive_students(db: AsyncSession) -> list[StudentResponse]:
    students = (await db.execute(
        select(Student).where(Student.ativo.is_(False))
    )).scalars().all()
    return [_to_response(s) for s in students]


async def rename_student(db: AsyncSession, student_id: uuid.UUID, data: StudentUpdate) -> StudentResponse:
    """
    Atualiza o nome de um estudante, preservando o id.
    Não há verificação prévia de unicidade; se o banco recusar o nome, vira conflito.
    """
    student = await db.get(Student, student_id)
    if student is None:
        raise StudentNotFoundError(student_id)

    student.rename(data.nome)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise StudentAlreadyExistsError(data.nome)

    logger.info("Estudante %s renomeado para %s", student.id, student.nome)
    return _to_response(student)


async def deactivate_student(db: AsyncSession, student_id: uuid.UUID) -> None:
    """
    Desativa um estudante (exclusão lógica, a linha é mantida).
    Idempotente: desativar duas vezes não gera erro.
    """
    student = await db.get(Student, student_id)
    if student is None:
        raise StudentNotFoundError(student_id)

    student.deactivate()
    await db.commit()
    logger.info("Estudante desativado: %s", student_id)


def _to_response(student: Student) -> StudentResponse:
    """Projeção pública (id + nome)."""
    return StudentResponse(id=student.id, nome=student.nome)
