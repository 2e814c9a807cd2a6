# errors.py
# Результат операций и единая ошибка для обработчиков

import enum


class ErrorKind(enum.Enum):
    VALIDATION = 'validation_error'
    NOT_FOUND = 'not_found'
    CONSTRAINT = 'constraint_violation'
    UNKNOWN = 'unknown'


# HTTP-статус страницы ошибки для каждого вида
STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONSTRAINT: 409,
    ErrorKind.UNKNOWN: 500,
}

INVALID_CALL = 'Neispravan poziv'
OPERATION_FAILED = 'Operacija nije uspjela'
ALREADY_APPLIED = 'Već ste prijavljeni!'


class Ok:
    """Успешный результат операции, value - строки из БД или id."""
    ok = True

    def __init__(self, value=None):
        self.value = value

    def __repr__(self):
        return f'Ok({self.value!r})'


class Err:
    """Неуспешный результат: вид ошибки и сообщение для пользователя."""
    ok = False

    def __init__(self, kind, message=INVALID_CALL, details=None):
        self.kind = kind
        self.message = message
        # Для ошибок валидации - список ошибок pydantic
        self.details = details

    def __repr__(self):
        return f'Err({self.kind.name}, {self.message!r})'


class CompetitionError(Exception):
    """
    Общая ошибка запроса. Ее ловит обработчик из app.py и показывает
    страницу error.html с сообщением.
    """

    def __init__(self, message=INVALID_CALL, kind=ErrorKind.VALIDATION):
        super().__init__(message)
        self.message = message
        self.kind = kind

    @classmethod
    def from_err(cls, err):
        return cls(err.message, err.kind)

    @property
    def status_code(self):
        return STATUS_BY_KIND.get(self.kind, 500)
