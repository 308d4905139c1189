"""
Erros de domínio levantados pelos serviços e traduzidos em HTTP pelos routers.
"""

import uuid


class StudentNotFoundError(LookupError):
    """Nenhum estudante com o id informado (404)."""

    def __init__(self, student_id: uuid.UUID):
        self.student_id = student_id
        super().__init__("Estudante não encontrado.")


class StudentAlreadyExistsError(ValueError):
    """Já existe um estudante com esse nome (409)."""

    def __init__(self, nome: str):
        self.nome = nome
        super().__init__("Estudante já cadastrado.")
