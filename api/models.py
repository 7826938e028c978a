from typing import Annotated, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator


class UserId:
    """A user identifier that may arrive as a string or a positive integer.

    Two ids are equal when their canonical string forms are equal, so
    ``UserId(42) == UserId("42")``.
    """

    __slots__ = ("value",)

    def __init__(self, value: str | int):
        self.value = value

    @property
    def canonical(self) -> str:
        return str(self.value)

    def __eq__(self, other):
        if not isinstance(other, UserId):
            return NotImplemented
        return self.canonical == other.canonical

    def __hash__(self):
        return hash(self.canonical)

    def __str__(self):
        return self.canonical

    def __repr__(self):
        return f"UserId({self.value!r})"


class BoardCreate(BaseModel):
    name: Annotated[StrictStr, Field(min_length=1, max_length=255)]
    # may be omitted, but an explicit null is rejected
    description: StrictStr = None
    userId: Union[StrictStr, Annotated[StrictInt, Field(gt=0)]]

    @field_validator("userId", mode="before")
    @classmethod
    def whole_number_user_id(cls, value):
        # JSON numbers such as 42.0 or 1e2 arrive as floats
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @property
    def owner(self) -> UserId:
        return UserId(self.userId)


# (name, position) of the columns every new board starts with
DEFAULT_COLUMNS = (
    ("To Do", 0),
    ("In Progress", 1),
    ("Done", 2),
)
