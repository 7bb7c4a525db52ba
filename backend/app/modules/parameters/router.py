from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.modules.users.service import UserNotFound
from .schemas import ParameterDelete, ParameterDeleteResponse, ParametersUpdate
from .service import ParametersService
from .store import KeyNotFound, ParametersError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parameters", tags=["parameters"])

DbDep = Annotated[Session, Depends(get_db)]


def _http_error(exc: ParametersError) -> HTTPException:
    code = status.HTTP_404_NOT_FOUND if isinstance(exc, KeyNotFound) else status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=exc.message)


@router.get("/{user_id}", response_model=dict[str, Any])
def get_parameters(user_id: str, db: DbDep):
    logger.info("Fetching parameters for user %s", user_id)
    try:
        return ParametersService(db).get(user_id)
    except UserNotFound as e:
        logger.error("User not found: %s", user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{user_id}", response_model=dict[str, Any])
def update_parameters(user_id: str, payload: ParametersUpdate, db: DbDep):
    logger.info("Updating parameters for user %s", user_id)
    try:
        parameters = ParametersService(db).update(user_id, payload.parameters)
    except UserNotFound as e:
        logger.error("User not found: %s", user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ParametersError as e:
        logger.warning("Rejected parameters update for user %s: %s", user_id, e.kind)
        raise _http_error(e)
    logger.info("Parameters updated for user %s", user_id)
    return parameters


@router.delete("/{user_id}", response_model=ParameterDeleteResponse)
def delete_parameter(
    user_id: str,
    db: DbDep,
    payload: Annotated[ParameterDelete | None, Body()] = None,
    key: Annotated[str | None, Query()] = None,
):
    target = (payload.key if payload else None) or key
    logger.info("Deleting parameter %r for user %s", target, user_id)
    try:
        parameters = ParametersService(db).delete(user_id, target)
    except UserNotFound as e:
        logger.error("User not found: %s", user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ParametersError as e:
        logger.warning("Rejected parameter deletion for user %s: %s", user_id, e.kind)
        raise _http_error(e)
    logger.info("Parameter %r deleted for user %s", target, user_id)
    return ParameterDeleteResponse(
        message=f"Parameter '{target}' deleted successfully",
        parameters=parameters,
    )
