import pytest

from imobras.core import ValidationError, validate_credentials


def test_email_is_normalized():
    assert validate_credentials(" Alice@Imobras.com.BR ", "secret123") == "alice@imobras.com.br"


@pytest.mark.parametrize("email", [
    "sem-arroba",
    "alice@imobras..com",
    "alice@",
    "@imobras.com.br",
    "alice @imobras.com.br",
    "",
])
def test_invalid_emails_are_rejected(email):
    with pytest.raises(ValidationError) as exc:
        validate_credentials(email, "secret123")
    assert exc.value.message == "Email inválido"


def test_short_password_is_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_credentials("alice@imobras.com.br", "12345")
    assert "6 caracteres" in exc.value.message
