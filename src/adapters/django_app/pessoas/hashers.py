"""
Adapter de hashing de senhas sobre `django.contrib.auth.hashers`.

O algoritmo segue `settings.PASSWORD_HASHERS` (PBKDF2 em produção,
MD5 nos testes para velocidade).
"""

from django.contrib.auth.hashers import check_password, make_password


class DjangoPasswordHasher:
    """Implementa o port PasswordHasher do Core."""

    def hash(self, senha: str) -> str:
        return make_password(senha)

    def verify(self, senha: str, senha_hash: str) -> bool:
        return check_password(senha, senha_hash)
