"""
Testes unitários da entidade Student (sem banco).
"""

import uuid

import pytest

from app.models.student import Student


def test_construcao_gera_id_e_ativa():
    s = Student(nome="Ana")
    assert isinstance(s.id, uuid.UUID)
    assert s.nome == "Ana"
    assert s.ativo is True


def test_construcao_ids_distintos():
    assert Student(nome="Ana").id != Student(nome="Bea").id


@pytest.mark.parametrize("nome", ["", "   ", None])
def test_construcao_nome_invalido(nome):
    with pytest.raises(ValueError, match="obrigatório"):
        Student(nome=nome)


def test_rename_preserva_id():
    s = Student(nome="Ana")
    original_id = s.id
    s.rename("Ana Maria")
    assert s.id == original_id
    assert s.nome == "Ana Maria"


def test_rename_mesmo_nome():
    s = Student(nome="Ana")
    s.rename("Ana")
    assert s.nome == "Ana"


def test_rename_nome_vazio_rejeitado():
    s = Student(nome="Ana")
    with pytest.raises(ValueError):
        s.rename("  ")
    assert s.nome == "Ana"


def test_deactivate_idempotente():
    s = Student(nome="Ana")
    s.deactivate()
    s.deactivate()
    assert s.ativo is False


def test_nenhuma_operacao_reativa():
    s = Student(nome="Ana")
    s.deactivate()
    s.rename("Outra")
    assert s.ativo is False
    assert not hasattr(s, "activate")
