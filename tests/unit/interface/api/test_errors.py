"""Unit tests for domain error translation."""

import json
from uuid import uuid4

import pytest
from fastapi import Request

from vidtube.domain.error import (
    CascadeIncompleteError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from vidtube.interface.api.errors import domain_error_handler, status_for


class TestStatusFor:
    """Each error kind maps to one HTTP status."""

    def test_known_kinds(self):
        assert status_for(ValidationError("bad kind")) == 400
        assert status_for(NotFoundError("Video", str(uuid4()))) == 404
        assert status_for(NotAuthorizedError("video", "v", "u", "delete")) == 403
        assert status_for(ConflictError("Reaction", "k")) == 409
        assert status_for(CascadeIncompleteError("video", "v")) == 500

    def test_subclass_inherits_parent_status(self):
        class MissingChannelError(NotFoundError):
            pass

        assert status_for(MissingChannelError("channel", "c")) == 404

    def test_unmapped_domain_error_is_bad_request(self):
        assert status_for(DomainError("something odd")) == 400


def _delete_request(path: str) -> Request:
    return Request({"type": "http", "method": "DELETE", "path": path, "headers": []})


class TestCascadeIncompleteResponse:
    """The 500 body tells clients whether the delete still stands."""

    @pytest.mark.asyncio
    async def test_rolled_back_delete_says_so(self):
        error = CascadeIncompleteError("video", "v1", rolled_back=True)

        response = await domain_error_handler(_delete_request("/videos/v1"), error)
        body = json.loads(response.body)

        assert response.status_code == 500
        assert body["kind"] == "cascade_incomplete"
        assert "rolled back" in body["detail"]

    @pytest.mark.asyncio
    async def test_kept_delete_reports_leftover_dependents(self):
        error = CascadeIncompleteError("video", "v1")

        response = await domain_error_handler(_delete_request("/videos/v1"), error)
        body = json.loads(response.body)

        assert body["kind"] == "cascade_incomplete"
        assert "rolled back" not in body["detail"]
        assert "not fully removed" in body["detail"]
        assert "orphan sweep" in str(error)

    @pytest.mark.asyncio
    async def test_cause_never_reaches_the_client(self):
        error = CascadeIncompleteError("video", "v1")
        error.__cause__ = ConnectionError("db-host-17 refused connection")

        response = await domain_error_handler(_delete_request("/videos/v1"), error)

        assert "db-host-17" not in response.body.decode()
