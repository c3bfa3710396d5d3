from pydantic import BaseModel, Field

U64_MAX = 2**64 - 1


class Task(BaseModel):
    """Task record for todo items.

    The id is chosen by the client and is the key the store files the task
    under. Field values must already have the right JSON type: "7" is not an
    id and 1 is not a boolean. Unknown fields in incoming JSON are ignored.
    """
    id: int = Field(strict=True, ge=0, le=U64_MAX)
    name: str = Field(strict=True)
    completed: bool = Field(strict=True)
