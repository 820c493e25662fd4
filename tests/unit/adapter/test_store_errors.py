import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from identity.adapter.repositories.errors import translate_store_errors, violated_unique_field
from identity.app.repositories.user_repository import StoreError, UniqueConstraintViolation


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO users ...", {}, Exception(message))


@pytest.mark.parametrize(
    "message, field",
    [
        ("UNIQUE constraint failed: users.username", "username"),
        ("UNIQUE constraint failed: users.email", "email"),
        (
            'duplicate key value violates unique constraint "ix_users_email"\n'
            "DETAIL:  Key (email)=(username@x.com) already exists.",
            "email",
        ),
        (
            'duplicate key value violates unique constraint "ix_users_username"\n'
            "DETAIL:  Key (username)=(email) already exists.",
            "username",
        ),
        ("Duplicate entry 'username@x.com' for key 'users.ix_users_email'", "email"),
    ],
)
def test_violated_unique_field(message, field):
    assert violated_unique_field(_integrity_error(message)) == field


def test_value_mentioning_a_column_is_not_a_marker():
    message = "duplicate key value violates unique constraint\nDETAIL: value 'username' exists"

    assert violated_unique_field(_integrity_error(message)) is None


def test_other_integrity_errors_become_store_errors():
    with pytest.raises(StoreError):
        with translate_store_errors():
            raise _integrity_error("FOREIGN KEY constraint failed")


def test_unique_violation_is_translated():
    with pytest.raises(UniqueConstraintViolation) as exc_info:
        with translate_store_errors():
            raise _integrity_error("UNIQUE constraint failed: users.email")

    assert exc_info.value.field == "email"


def test_driver_failure_becomes_store_error():
    with pytest.raises(StoreError):
        with translate_store_errors():
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))
