"""Unit tests for the PostgreSQL comment repository error handling."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, OperationalError

from colloquy.domain.error import StoreUnavailableError, ValidationFailedError
from colloquy.domain.value import CommentId, CommentStatus, PostId
from colloquy.persistence.repository import PostgresCommentRepository
from colloquy.persistence.repository.comment import store_errors
from tests.conftest import make_comment


class DriverError(Exception):
    """Driver exception carrying a SQLSTATE, as asyncpg errors do."""

    def __init__(self, sqlstate):
        super().__init__(sqlstate)
        self.sqlstate = sqlstate


class UnreachableSession:
    """Session stand-in whose every statement fails like a dropped connection."""

    async def execute(self, stmt):
        raise OperationalError(str(stmt), {}, Exception("connection refused"))

    async def flush(self):
        pass


class TestStoreErrors:
    """Tests for store_errors."""

    def test_translates_sqlalchemy_errors(self):
        with pytest.raises(StoreUnavailableError) as exc_info:
            with store_errors("find_by_id"):
                raise OperationalError("SELECT 1", {}, Exception("boom"))

        assert exc_info.value.operation == "find_by_id"
        assert isinstance(exc_info.value.__cause__, OperationalError)

    def test_leaves_other_errors_alone(self):
        with pytest.raises(KeyError):
            with store_errors("find_by_id"):
                raise KeyError("id")

    @pytest.mark.parametrize("error_type", [DataError, IntegrityError])
    def test_rejected_values_become_validation_errors(self, error_type):
        with pytest.raises(ValidationFailedError) as exc_info:
            with store_errors("create"):
                raise error_type("INSERT", {}, Exception("value too long"))

        assert [e.field for e in exc_info.value.errors] == ["comment"]
        assert isinstance(exc_info.value.__cause__, error_type)

    def test_data_exception_sqlstate_becomes_validation_error(self):
        with pytest.raises(ValidationFailedError):
            with store_errors("create"):
                raise DBAPIError("INSERT", {}, DriverError("22021"))

    def test_other_sqlstate_is_an_outage(self):
        with pytest.raises(StoreUnavailableError):
            with store_errors("create"):
                raise DBAPIError("INSERT", {}, DriverError("57P01"))


class TestPostgresCommentRepositoryFailures:
    """Store outages surface as StoreUnavailableError from every operation."""

    @pytest.fixture
    def repo(self):
        return PostgresCommentRepository(UnreachableSession())

    @pytest.mark.asyncio
    async def test_find_by_id(self, repo):
        with pytest.raises(StoreUnavailableError):
            await repo.find_by_id(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_find_by_post(self, repo):
        with pytest.raises(StoreUnavailableError):
            await repo.find_by_post(PostId(uuid4()), {CommentStatus.APPROVED})

    @pytest.mark.asyncio
    async def test_create(self, repo):
        with pytest.raises(StoreUnavailableError):
            await repo.create(make_comment(PostId(uuid4())))

    @pytest.mark.asyncio
    async def test_update_status(self, repo):
        with pytest.raises(StoreUnavailableError):
            await repo.update_status(CommentId(uuid4()), CommentStatus.SPAM)

    @pytest.mark.asyncio
    async def test_delete(self, repo):
        with pytest.raises(StoreUnavailableError):
            await repo.delete(CommentId(uuid4()))
