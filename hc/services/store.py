"""
Persistence store for folders and saved requests.

The store owns both record kinds. Every public method runs in its own
transaction and surfaces failures as typed errors:

- NotFoundError when a lookup finds no row or a mutation affects no row
- ValidationError when a stored header column is not a JSON object of strings
- StorageError for any failure of the database engine itself
"""

import json
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..database import utcnow
from ..exceptions import NotFoundError, StorageError, ValidationError
from ..models.folder import Folder
from ..models.request import Request
from ..schemas.folder import FolderResponse
from ..schemas.request import RequestResponse


def serialize_headers(headers: Mapping[str, str] | None) -> str:
    """Encode a header mapping for the ``headers`` column. None encodes as ``{}``."""
    return json.dumps(dict(headers or {}))


def deserialize_headers(raw: str | None) -> dict[str, str]:
    """
    Decode the ``headers`` column back into a mapping.

    An empty or NULL column decodes to an empty mapping.

    Raises:
        ValidationError: if the text is not a JSON object of string values
    """
    if not raw:
        return {}

    try:
        headers = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"failed to deserialize headers: {exc}") from exc

    if not isinstance(headers, dict) or not all(
        isinstance(value, str) for value in headers.values()
    ):
        raise ValidationError("failed to deserialize headers: expected an object of strings")

    return headers


def to_request_response(row: Request) -> RequestResponse:
    return RequestResponse(
        id=row.id,
        name=row.name,
        folder_id=row.folder_id,
        method=row.method,
        url=row.url,
        headers=deserialize_headers(row.headers),
        body=row.body or "",
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class PersistenceStore:
    """
    CRUD for folders and requests on top of a SQLAlchemy session factory.

    The store keeps no state of its own between calls, so one instance is
    shared by every worker thread of the server.
    """

    def __init__(self, session_factory: sessionmaker, logger: logging.Logger):
        self._session_factory = session_factory
        self._log = logger

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Run a unit of work in one transaction.

        Commits when the block exits cleanly. Otherwise rolls back and
        re-raises the original exception unchanged.

        Usage:
            with store.transaction() as session:
                session.add(...)
                session.execute(...)
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            try:
                session.rollback()
            except SQLAlchemyError as rollback_exc:
                self._log.error("Failed to rollback transaction: %s", rollback_exc)
            raise
        finally:
            session.close()

    @contextmanager
    def _unit(self, action: str) -> Iterator[Session]:
        try:
            with self.transaction() as session:
                yield session
        except SQLAlchemyError as exc:
            self._log.error("Failed to %s: %s", action, exc)
            raise StorageError(f"failed to {action}", exc) from exc

    # Folder operations

    def create_folder(self, name: str, parent_id: int | None = None) -> FolderResponse:
        """Insert a folder and return it as persisted."""
        self._log.info("Creating folder: %s", name)

        now = utcnow()
        with self._unit("create folder") as session:
            folder = Folder(name=name, parent_id=parent_id, created_at=now, updated_at=now)
            session.add(folder)
            session.flush()
            folder_id = folder.id

        return self.get_folder(folder_id)

    def get_folder(self, folder_id: int) -> FolderResponse:
        with self._unit("get folder") as session:
            folder = session.get(Folder, folder_id)
            if folder is None:
                raise NotFoundError("folder")
            return FolderResponse.model_validate(folder)

    def list_folders(self) -> list[FolderResponse]:
        """All folders, sorted by name."""
        with self._unit("get folders") as session:
            rows = session.scalars(select(Folder).order_by(Folder.name, Folder.id)).all()
            return [FolderResponse.model_validate(row) for row in rows]

    def update_folder(self, folder_id: int, name: str, parent_id: int | None = None) -> None:
        self._log.info("Updating folder: %d", folder_id)

        with self._unit("update folder") as session:
            result = session.execute(
                update(Folder)
                .where(Folder.id == folder_id)
                .values(name=name, parent_id=parent_id, updated_at=utcnow())
            )
            if result.rowcount == 0:
                raise NotFoundError("folder")

    def delete_folder(self, folder_id: int) -> None:
        """
        Delete a folder.

        SQLite removes descendant folders through the parent_id cascade and
        clears folder_id on requests that pointed at any removed folder.
        """
        self._log.info("Deleting folder: %d", folder_id)

        with self._unit("delete folder") as session:
            result = session.execute(delete(Folder).where(Folder.id == folder_id))
            if result.rowcount == 0:
                raise NotFoundError("folder")

    # Request operations

    def create_request(
        self,
        name: str,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: str = "",
        folder_id: int | None = None,
    ) -> RequestResponse:
        """Insert a request and return it as persisted, headers decoded."""
        self._log.info("Creating request: %s", name)

        now = utcnow()
        with self._unit("create request") as session:
            request = Request(
                name=name,
                folder_id=folder_id,
                method=method,
                url=url,
                headers=serialize_headers(headers),
                body=body,
                created_at=now,
                updated_at=now,
            )
            session.add(request)
            session.flush()
            request_id = request.id

        return self.get_request(request_id)

    def get_request(self, request_id: int) -> RequestResponse:
        with self._unit("get request") as session:
            request = session.get(Request, request_id)
            if request is None:
                raise NotFoundError("request")
            return to_request_response(request)

    def list_requests(self) -> list[RequestResponse]:
        """All requests, most recently updated first."""
        with self._unit("get requests") as session:
            rows = session.scalars(
                select(Request).order_by(Request.updated_at.desc(), Request.id.desc())
            ).all()
            return [to_request_response(row) for row in rows]

    def update_request(
        self,
        request_id: int,
        name: str,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: str = "",
        folder_id: int | None = None,
    ) -> None:
        self._log.info("Updating request: %d", request_id)

        with self._unit("update request") as session:
            result = session.execute(
                update(Request)
                .where(Request.id == request_id)
                .values(
                    name=name,
                    folder_id=folder_id,
                    method=method,
                    url=url,
                    headers=serialize_headers(headers),
                    body=body,
                    updated_at=utcnow(),
                )
            )
            if result.rowcount == 0:
                raise NotFoundError("request")

    def delete_request(self, request_id: int) -> None:
        self._log.info("Deleting request: %d", request_id)

        with self._unit("delete request") as session:
            result = session.execute(delete(Request).where(Request.id == request_id))
            if result.rowcount == 0:
                raise NotFoundError("request")
