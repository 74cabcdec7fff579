# This project was developed with assistance from AI tools.
"""Demo data seeding service.

Seeds one application per document path so every template can be rendered
immediately after setup.

Simulated for demonstration purposes -- not real financial data.
"""

import logging

from db import Application, Fund, LegalEntity, Person, Product, Review
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from .fixtures import DEMO_APPLICATIONS

logger = logging.getLogger(__name__)

_DEMO_IDS = [fixture["id"] for fixture in DEMO_APPLICATIONS]


def _build_application(fixture: dict) -> Application:
    products = []
    for position, product_data in enumerate(fixture["products"]):
        funds = [
            Fund(position=i, name=f["name"], amount=f["amount"], fees=f["fees"])
            for i, f in enumerate(product_data["funds"])
        ]
        products.append(Product(position=position, name=product_data["name"], funds=funds))

    legal_entity_data = fixture.get("legal_entity")
    review_data = fixture.get("review")
    return Application(
        id=fixture["id"],
        reference_number=fixture["reference_number"],
        state=fixture["state"],
        date=fixture["date"],
        person=Person(**fixture["person"]),
        is_legal_entity=legal_entity_data is not None,
        legal_entity=LegalEntity(**legal_entity_data) if legal_entity_data else None,
        current_review=Review(**review_data) if review_data else None,
        products=products,
    )


def _clear_demo_data(session: Session) -> None:
    """Remove demo applications together with their people, entities and reviews."""
    apps = session.execute(select(Application).where(Application.id.in_(_DEMO_IDS))).scalars().all()
    person_ids = {a.person_id for a in apps}
    entity_ids = {a.legal_entity_id for a in apps if a.legal_entity_id is not None}
    review_ids = {a.current_review_id for a in apps if a.current_review_id is not None}

    for app in apps:
        session.delete(app)
    session.flush()

    if review_ids:
        session.execute(delete(Review).where(Review.id.in_(review_ids)))
    if entity_ids:
        session.execute(delete(LegalEntity).where(LegalEntity.id.in_(entity_ids)))
    if person_ids:
        session.execute(delete(Person).where(Person.id.in_(person_ids)))
    logger.info("Cleared %d demo application(s)", len(apps))


def seed_demo_data(session: Session, force: bool = False) -> dict:
    """Insert the demo applications.

    Returns a summary dict. When demo data already exists and ``force`` is
    False nothing is written and ``status`` is ``"already_seeded"``.
    """
    existing = session.execute(
        select(Application.id).where(Application.id.in_(_DEMO_IDS))
    ).scalars().all()

    if existing and not force:
        return {"status": "already_seeded", "applications": len(existing)}

    if existing:
        _clear_demo_data(session)
        session.commit()

    applications = [_build_application(fixture) for fixture in DEMO_APPLICATIONS]
    session.add_all(applications)
    session.commit()

    logger.info("Seeded %d demo application(s)", len(applications))
    return {
        "status": "seeded",
        "applications": len(applications),
        "ids": {app.reference_number: str(app.id) for app in applications},
    }
