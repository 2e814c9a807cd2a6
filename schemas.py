# schemas.py
# Pydantic-схемы входных данных (параметры пути и тело формы)

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from errors import Ok, Err, ErrorKind, INVALID_CALL


class _FormSchema(BaseModel):
    # Лишние ключи - ошибка, как и отсутствующие
    model_config = ConfigDict(extra='forbid')


class IdSchema(_FormSchema):
    id: int = Field(gt=0)


class CompetitionAddSchema(_FormSchema):
    name: str = Field(min_length=3, max_length=50)
    description: str = Field(min_length=3, max_length=1000)
    apply_till: date


class CompetitionEditSchema(CompetitionAddSchema):
    id: int = Field(gt=0)


class BodoviSchema(_FormSchema):
    id: int = Field(gt=0)
    bodovi: float = Field(ge=1, le=50)


def validate(schema, data):
    """Проверяет dict по схеме. Возвращает Ok(модель) или Err(VALIDATION)."""
    try:
        return Ok(schema.model_validate(dict(data)))
    except ValidationError as e:
        return Err(ErrorKind.VALIDATION, INVALID_CALL, details=e.errors())
