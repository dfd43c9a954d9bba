"""Domain entities."""

from relgrant.domain.entities.relation_tuple import RelationTuple, SubjectSet

__all__ = [
    "RelationTuple",
    "SubjectSet",
]
