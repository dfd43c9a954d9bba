"""Keto REST wire models."""

from pydantic import BaseModel, ConfigDict

from relgrant.domain.entities import RelationTuple, SubjectSet


class SubjectSetModel(BaseModel):
    """Subject set as sent and received by Keto."""

    model_config = ConfigDict(extra="ignore")

    namespace: str
    object: str
    relation: str


class RelationTupleModel(BaseModel):
    """Relation tuple JSON body."""

    model_config = ConfigDict(extra="ignore")

    namespace: str
    object: str | None = None
    relation: str | None = None
    subject_id: str | None = None
    subject_set: SubjectSetModel | None = None

    @classmethod
    def from_domain(cls, relation_tuple: RelationTuple) -> "RelationTupleModel":
        subject_set = None
        if relation_tuple.subject_set is not None:
            subject_set = SubjectSetModel(
                namespace=relation_tuple.subject_set.namespace,
                object=relation_tuple.subject_set.object,
                relation=relation_tuple.subject_set.relation,
            )
        return cls(
            namespace=relation_tuple.namespace,
            object=relation_tuple.object,
            relation=relation_tuple.relation,
            subject_id=relation_tuple.subject_id,
            subject_set=subject_set,
        )

    def to_domain(self) -> RelationTuple:
        subject_set = None
        if self.subject_set is not None:
            subject_set = SubjectSet(
                namespace=self.subject_set.namespace,
                object=self.subject_set.object,
                relation=self.subject_set.relation,
            )
        return RelationTuple(
            namespace=self.namespace,
            object=self.object,
            relation=self.relation,
            subject_id=self.subject_id,
            subject_set=subject_set,
        )


class CheckResponse(BaseModel):
    """Reply of the check endpoint."""

    model_config = ConfigDict(extra="ignore")

    allowed: bool


class RelationTuplesPage(BaseModel):
    """One page of the query endpoint."""

    model_config = ConfigDict(extra="ignore")

    relation_tuples: list[RelationTupleModel] | None = None
    next_page_token: str | None = None
