from datetime import date

from pydantic import BaseModel, field_validator


class AuthorRecord(BaseModel):
    first_name: str | None = None
    family_name: str
    date_of_birth: date | None = None
    date_of_death: date | None = None


class AuthorCreate(AuthorRecord):
    first_name: str = ""

    @field_validator("family_name")
    @classmethod
    def family_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("family_name must not be blank")
        return value


class AuthorOut(AuthorCreate):
    id: int
