"""Toggle and cascade outcomes."""

from typing import Generic, Optional, TypeVar

from pydantic import Field

from vidtube.domain.model.common import DomainModel
from vidtube.domain.value import ToggleState

E = TypeVar("E")


class ToggleResult(DomainModel, Generic[E]):
    """Result of flipping an edge.

    ``edge`` is the created or deleted edge. It is None only when a
    concurrent request created and removed the edge while this toggle ran,
    in which case the edge is observed absent.
    """

    state: ToggleState
    edge: Optional[E] = None


class CascadeReport(DomainModel):
    """What a cascade removed for one deleted parent entity."""

    reactions_removed: int = Field(default=0, ge=0)
    comments_removed: int = Field(default=0, ge=0)
