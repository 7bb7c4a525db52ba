from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from .models import Faq
from .repository import FaqsRepository
from .schemas import FaqCreate, FaqRead, FaqUpdate


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/faqs", tags=["faqs"])

DbDep = Annotated[Session, Depends(get_db)]


def _get_or_404(repo: FaqsRepository, faq_id: int) -> Faq:
    faq = repo.get(faq_id)
    if not faq:
        logger.warning("FAQ not found with ID %s", faq_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="FAQ not found")
    return faq


@router.get("", response_model=list[FaqRead])
def list_published(db: DbDep):
    return FaqsRepository(db).list_by_visibility(published=True)


# Declared before /{faq_id} so "hidden" is not parsed as an id
@router.get("/hidden", response_model=list[FaqRead])
def list_hidden(db: DbDep):
    return FaqsRepository(db).list_by_visibility(published=False)


@router.post("", response_model=FaqRead, status_code=status.HTTP_201_CREATED)
def create_faq(payload: FaqCreate, db: DbDep):
    faq = FaqsRepository(db).create(payload)
    logger.info("FAQ created successfully with ID %s", faq.id)
    return faq


@router.get("/{faq_id}", response_model=FaqRead)
def read_faq(faq_id: int, db: DbDep):
    return _get_or_404(FaqsRepository(db), faq_id)


@router.put("/{faq_id}", response_model=FaqRead)
def update_faq(faq_id: int, payload: FaqUpdate, db: DbDep):
    repo = FaqsRepository(db)
    faq = repo.update(_get_or_404(repo, faq_id), payload)
    logger.info("FAQ updated successfully with ID %s", faq_id)
    return faq


@router.delete("/{faq_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_faq(faq_id: int, db: DbDep):
    repo = FaqsRepository(db)
    repo.delete(_get_or_404(repo, faq_id))
    logger.info("FAQ deleted successfully with ID %s", faq_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
