# This project was developed with assistance from AI tools.
"""Application lookup backed by SQLAlchemy."""

import uuid
from typing import Protocol

from db import Application, Product
from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload


class ApplicationStore(Protocol):
    """Anything that can look an application up by id.

    Implementations either raise when no single application matches or
    return None to report that it is absent.
    """

    def find_application_by_id(self, application_id: uuid.UUID) -> Application | None: ...


class SqlApplicationStore:
    """Strict single-row lookup: raises NoResultFound / MultipleResultsFound."""

    def __init__(self, session: Session):
        self._session = session

    def find_application_by_id(self, application_id: uuid.UUID) -> Application:
        stmt = (
            select(Application)
            .where(Application.id == application_id)
            .options(
                joinedload(Application.person),
                joinedload(Application.legal_entity),
                joinedload(Application.current_review),
                selectinload(Application.products).selectinload(Product.funds),
            )
        )
        return self._session.execute(stmt).unique().scalar_one()
