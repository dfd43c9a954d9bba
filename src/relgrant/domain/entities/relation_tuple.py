"""Relation tuple entity - one fact in the relationship graph."""

from dataclasses import dataclass

from relgrant.domain.exceptions import ValidationError


@dataclass(frozen=True)
class SubjectSet:
    """Everyone holding relation on object within namespace."""

    namespace: str
    object: str
    relation: str


@dataclass(frozen=True)
class RelationTuple:
    """Subject (a concrete id or a subject set) holds relation on object."""

    namespace: str
    object: str | None = None
    relation: str | None = None
    subject_id: str | None = None
    subject_set: SubjectSet | None = None

    def __post_init__(self) -> None:
        if self.subject_id is not None and self.subject_set is not None:
            raise ValidationError("Relation tuple cannot have both subject_id and subject_set")

    def filter_fields(self) -> dict[str, str | None]:
        """Tuple store keyword arguments matching exactly this tuple."""
        return {
            "subject": self.subject_id,
            "relation": self.relation,
            "object": self.object,
            "set_object": self.subject_set.object if self.subject_set else None,
            "set_relation": self.subject_set.relation if self.subject_set else None,
        }
