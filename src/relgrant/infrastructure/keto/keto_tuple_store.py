"""Ory Keto tuple store over its REST API."""

from typing import TypeVar

import httpx
import pydantic

from relgrant.domain.entities import RelationTuple, SubjectSet
from relgrant.domain.exceptions import StoreUnavailable, ValidationError
from relgrant.infrastructure.keto.models import (
    CheckResponse,
    RelationTupleModel,
    RelationTuplesPage,
)
from relgrant.logging import get_logger

logger = get_logger(__name__)

CHECK_PATH = "/relation-tuples/check"
QUERY_PATH = "/relation-tuples"
WRITE_PATH = "/admin/relation-tuples"

M = TypeVar("M", bound=pydantic.BaseModel)


class KetoTupleStore:
    """Tuple store backed by Keto's read and write APIs.

    Requests are sent one at a time and never retried; any transport
    failure or unexpected status surfaces as StoreUnavailable.
    """

    def __init__(
        self,
        read_url: str,
        write_url: str,
        namespace: str = "ssm",
        timeout: float = 10.0,
        page_size: int | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._read_url = read_url.rstrip("/")
        self._write_url = write_url.rstrip("/")
        self._namespace = namespace
        self._page_size = page_size
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def namespace(self) -> str:
        return self._namespace

    async def __aenter__(self) -> "KetoTupleStore":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this store created it."""
        if self._owns_client:
            await self._client.aclose()

    async def check(self, subject: str, relation: str, object: str) -> bool:
        """True if subject holds relation on object, directly or via subject sets."""
        params = {
            "namespace": self._namespace,
            "subject_id": subject,
            "relation": relation,
            "object": object,
        }
        # Keto answers 403 with {"allowed": false} for denied checks.
        response = await self._request(
            "check", "GET", self._read_url + CHECK_PATH, params=params, expected=(200, 403)
        )
        return self._parse(CheckResponse, response, "check").allowed

    async def create(
        self,
        *,
        subject: str | None = None,
        relation: str | None = None,
        object: str | None = None,
        set_object: str | None = None,
        set_relation: str | None = None,
    ) -> None:
        """Write one tuple. Keto treats an existing tuple as success."""
        self._validate_subject(subject, set_object, set_relation)
        subject_set = None
        if set_object is not None:
            subject_set = SubjectSet(self._namespace, set_object, set_relation)
        relation_tuple = RelationTuple(
            namespace=self._namespace,
            object=object,
            relation=relation,
            subject_id=subject,
            subject_set=subject_set,
        )
        body = RelationTupleModel.from_domain(relation_tuple).model_dump(
            mode="json", exclude_none=True
        )
        logger.debug("keto_create", tuple=body)
        await self._request(
            "create", "PUT", self._write_url + WRITE_PATH, json=body, expected=(200, 201)
        )

    async def delete(
        self,
        *,
        subject: str | None = None,
        relation: str | None = None,
        object: str | None = None,
        set_object: str | None = None,
        set_relation: str | None = None,
    ) -> None:
        """Delete every tuple matching the given fields."""
        params = self._filter_params(subject, relation, object, set_object, set_relation)
        logger.debug("keto_delete", filter=params)
        await self._request(
            "delete", "DELETE", self._write_url + WRITE_PATH, params=params, expected=(200, 204)
        )

    async def query(
        self,
        *,
        subject: str | None = None,
        relation: str | None = None,
        object: str | None = None,
        set_object: str | None = None,
        set_relation: str | None = None,
    ) -> list[RelationTuple]:
        """Return every matching tuple, following pagination to the end."""
        params = self._filter_params(subject, relation, object, set_object, set_relation)
        if self._page_size is not None:
            params["page_size"] = str(self._page_size)

        tuples: list[RelationTuple] = []
        while True:
            response = await self._request(
                "query", "GET", self._read_url + QUERY_PATH, params=params
            )
            page = self._parse(RelationTuplesPage, response, "query")
            tuples.extend(t.to_domain() for t in page.relation_tuples or [])
            if not page.next_page_token:
                return tuples
            params["page_token"] = page.next_page_token

    def _filter_params(
        self,
        subject: str | None,
        relation: str | None,
        object: str | None,
        set_object: str | None,
        set_relation: str | None,
    ) -> dict[str, str]:
        self._validate_subject(subject, set_object, set_relation)
        params = {"namespace": self._namespace}
        if object is not None:
            params["object"] = object
        if relation is not None:
            params["relation"] = relation
        if subject is not None:
            params["subject_id"] = subject
        if set_object is not None:
            params["subject_set.namespace"] = self._namespace
            params["subject_set.object"] = set_object
            params["subject_set.relation"] = set_relation
        return params

    @staticmethod
    def _validate_subject(
        subject: str | None, set_object: str | None, set_relation: str | None
    ) -> None:
        if (set_object is None) != (set_relation is None):
            raise ValidationError("Subject set needs both set_object and set_relation")
        if subject is not None and set_object is not None:
            raise ValidationError("Subject id and subject set are mutually exclusive")

    async def _request(
        self,
        operation: str,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json: dict | None = None,
        expected: tuple[int, ...] = (200,),
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, url, params=params, json=json)
        except httpx.HTTPError as e:
            logger.error("keto_unreachable", operation=operation, url=url, error=str(e))
            raise StoreUnavailable(operation, str(e)) from e

        if response.status_code not in expected:
            logger.error(
                "keto_request_failed",
                operation=operation,
                url=url,
                status_code=response.status_code,
            )
            raise StoreUnavailable(operation, response.text, response.status_code)
        return response

    @staticmethod
    def _parse(model: type[M], response: httpx.Response, operation: str) -> M:
        try:
            return model.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            logger.error("keto_bad_reply", operation=operation, error=str(e))
            raise StoreUnavailable(operation, "malformed reply") from e
