"""Tag entity."""

from typing import Optional
from uuid import UUID, uuid4

from okozukai.domain.shared.exceptions import ErrorCode, ValidationError

MAX_NAME_LENGTH = 60


class Tag:
    """A user-defined label attachable to many transactions."""

    def __init__(
        self,
        name: str,
        color: str,
        id: Optional[UUID] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._name = self.normalize_name(name)
        self._color = color

    @classmethod
    def create(cls, name: str, color: str) -> "Tag":
        return cls(name=name, color=color)

    @classmethod
    def reconstitute(cls, id: UUID, name: str, color: str) -> "Tag":
        return cls(id=id, name=name, color=color)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def color(self) -> str:
        return self._color

    def rename(self, new_name: str) -> None:
        self._name = self.normalize_name(new_name)

    @staticmethod
    def normalize_name(name: Optional[str]) -> str:
        """Trim and validate a tag name.

        Exposed so uniqueness checks compare names the way they are stored.
        """
        if not name or not name.strip():
            msg = "Tag name is required."
            raise ValidationError(msg, code=ErrorCode.INVALID_NAME)

        normalized = name.strip()
        if len(normalized) > MAX_NAME_LENGTH:
            msg = f"Tag name must be {MAX_NAME_LENGTH} characters or fewer."
            raise ValidationError(msg, code=ErrorCode.INVALID_NAME)
        return normalized

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Tag(id={self._id}, name={self._name!r}, color={self._color})"
