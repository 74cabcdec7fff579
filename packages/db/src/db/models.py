# This project was developed with assistance from AI tools.
"""
Domain models

Applications for financial products, the people and legal entities behind
them, the products and funds they hold, and manual review records.
"""

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from .enums import ApplicationState


class Person(Base):
    """Individual applicant."""

    __tablename__ = "people"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)

    applications = relationship("Application", back_populates="person")

    def __repr__(self):
        return f"<Person(id={self.id}, name='{self.first_name} {self.surname}')>"


class LegalEntity(Base):
    """Organisation applying through a representative person."""

    __tablename__ = "legal_entities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(String(255), nullable=False)
    registration_number = Column(String(64), nullable=False, unique=True)
    country_of_incorporation = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<LegalEntity(id={self.id}, company_name='{self.company_name}')>"


class Review(Base):
    """Manual review placed on an application."""

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    reason = Column(Text, nullable=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
    details = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<Review(id={self.id}, reason='{self.reason}')>"


class Application(Base):
    """Application for one or more financial products."""

    __tablename__ = "applications"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    reference_number = Column(String(32), nullable=False, unique=True, index=True)
    state = Column(
        Enum(ApplicationState, name="application_state", native_enum=False),
        nullable=False,
        default=ApplicationState.PENDING,
    )
    date = Column(Date, nullable=False)
    is_legal_entity = Column(Boolean, nullable=False, default=False)
    person_id = Column(Integer, ForeignKey("people.id"), nullable=False, index=True)
    legal_entity_id = Column(Integer, ForeignKey("legal_entities.id"), nullable=True)
    current_review_id = Column(Integer, ForeignKey("reviews.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    person = relationship("Person", back_populates="applications")
    legal_entity = relationship("LegalEntity")
    current_review = relationship("Review")
    products = relationship(
        "Product",
        back_populates="application",
        cascade="all, delete-orphan",
        order_by="Product.position",
    )

    def __repr__(self):
        return f"<Application(id={self.id}, state='{self.state}')>"


class Product(Base):
    """Financial product held under an application."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    application_id = Column(
        Uuid, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)

    application = relationship("Application", back_populates="products")
    funds = relationship(
        "Fund",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Fund.position",
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"


class Fund(Base):
    """Investment fund within a product."""

    __tablename__ = "funds"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    fees = Column(Numeric(14, 2), nullable=False, default=0)

    product = relationship("Product", back_populates="funds")

    def __repr__(self):
        return f"<Fund(id={self.id}, name='{self.name}', amount={self.amount})>"
