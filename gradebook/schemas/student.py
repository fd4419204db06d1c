from pydantic import BaseModel, ConfigDict, EmailStr, computed_field
from pydantic.alias_generators import to_camel


class StudentBase(BaseModel):
    firstname: str
    lastname: str
    email_address: EmailStr

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StudentCreate(StudentBase):
    pass


class StudentInDB(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):

    @computed_field(alias="fullName")
    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"
