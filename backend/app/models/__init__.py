# Importa todos os modelos para registrar as tabelas em Base.metadata
# antes que a aplicação, o Alembic ou os testes precisem delas.

from app.models.student import Student  # noqa: F401
