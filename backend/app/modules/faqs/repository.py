from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Faq
from .schemas import FaqCreate, FaqUpdate


class FaqsRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_by_visibility(self, published: bool) -> list[Faq]:
        stmt = select(Faq).where(Faq.is_published.is_(published)).order_by(Faq.id)
        return list(self.db.scalars(stmt))

    def get(self, faq_id: int) -> Optional[Faq]:
        return self.db.get(Faq, faq_id)

    def create(self, data: FaqCreate) -> Faq:
        faq = Faq(**data.model_dump())
        self.db.add(faq)
        self.db.commit()
        self.db.refresh(faq)
        return faq

    def update(self, faq: Faq, data: FaqUpdate) -> Faq:
        for field, value in data.model_dump(exclude_none=True).items():
            setattr(faq, field, value)
        self.db.add(faq)
        self.db.commit()
        self.db.refresh(faq)
        return faq

    def delete(self, faq: Faq) -> None:
        self.db.delete(faq)
        self.db.commit()
