"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Pydantic validates data at the boundary (request bodies, ORM rows) and gives
us JSON serialization for free. It also tracks which fields were explicitly
provided (`model_fields_set`), which the task patch relies on.
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from taskboard.domain.errors import InvalidInputError


class User(BaseModel):
    """
    Public view of a registered user.

    The credential is deliberately not part of this model, so a User can be
    returned to any caller as-is.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    created_at: datetime = Field(default_factory=datetime.now)


class UserRecord(User):
    """User as stored, including the bcrypt password hash."""

    password_hash: str = Field(..., repr=False)

    def to_public(self) -> User:
        return User.model_validate(self.model_dump(exclude={"password_hash"}))


class Project(BaseModel):
    """
    A named container of tasks, owned by exactly one user.

    owner_id is fixed at creation.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str = Field(..., min_length=1)
    owner_id: str
    created_at: datetime = Field(default_factory=datetime.now)


class Task(BaseModel):
    """
    A to-do item inside a project.

    A task has no owner of its own: whoever owns its project owns the task.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str = Field(..., min_length=1)
    project_id: str
    completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)


class TaskPatch(BaseModel):
    """
    Optional partial update for a task.

    Presence matters more than value here: a patch with no recognized field
    means "toggle completed", while `completed=False` or `title=""` are
    explicit values. Presence is read from `model_fields_set`, so an explicit
    None is "present" and gets rejected by the service.
    """
    model_config = ConfigDict(extra='ignore')

    title: Optional[StrictStr] = None
    completed: Optional[StrictBool] = None

    @property
    def has_title(self) -> bool:
        return "title" in self.model_fields_set

    @property
    def has_completed(self) -> bool:
        return "completed" in self.model_fields_set

    @property
    def is_toggle(self) -> bool:
        """True when no recognized field was provided"""
        return not (self.has_title or self.has_completed)

    @classmethod
    def from_body(cls, body: Any) -> "TaskPatch":
        """
        Build a patch from a loosely typed request body.

        Args:
            body: None, an existing TaskPatch, or a mapping (decoded JSON)

        Returns:
            TaskPatch with presence information preserved

        Raises:
            InvalidInputError: body is not a mapping or a field has the wrong type
        """
        if body is None:
            return cls()
        if isinstance(body, TaskPatch):
            return body
        if not isinstance(body, Mapping):
            raise InvalidInputError("patch body must be an object", message_key="task.invalid_patch")

        try:
            return cls.model_validate(dict(body))
        except ValidationError as e:
            bad_fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
            key = "task.invalid_completed" if "completed" in bad_fields else "task.invalid_patch"
            raise InvalidInputError(str(e), message_key=key) from e
