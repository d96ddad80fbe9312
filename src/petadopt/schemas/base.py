"""Shared schema building blocks.

CamelModel: base for every request/response body: fields are snake_case in
Python and camelCase on the wire (snake_case input is accepted too).
SuccessResponse[T]: the envelope wrapped around every successful response.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatchModel(CamelModel):
    """Base for partial-update bodies.

    Unknown keys are rejected, so fields owned by the adoption workflow
    (``isAdopted``, ``pets``) can't be smuggled in through a generic update.
    """

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict[str, object]:
        """Only the fields the client actually sent with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope for successful responses: {"success": true, "message": ..., "payload": ...}.

    ``[T]`` is a Python 3.12 type parameter, so one class serves every
    endpoint::

        SuccessResponse[PetResponse]
        SuccessResponse[list[PetResponse]]
    """

    success: bool = True
    message: str
    payload: T
