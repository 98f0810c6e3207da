"""Ownership guard shared by the task and upload handlers."""

import logging
from fastapi import HTTPException, status
from sqlalchemy.orm import Query
from app.errors import FORBIDDEN
from app.utils.security import Identity

logger = logging.getLogger(__name__)


def allow(caller: Identity, owner_id: int) -> bool:
    return caller.is_admin or caller.id == owner_id

def ensure_allowed(caller: Identity, owner_id: int, resource: str, resource_id: int) -> None:
    if not allow(caller, owner_id):
        logger.info("forbidden: user %s on %s %s", caller.id, resource, resource_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN)

def scope_to_caller(query: Query, owner_column, caller: Identity) -> Query:
    """Admins see every row; everyone else only their own."""
    if caller.is_admin:
        return query
    return query.filter(owner_column == caller.id)
