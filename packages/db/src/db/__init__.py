# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, SessionLocal, create_tables, engine, get_db
from .enums import ApplicationState
from .models import (
    Application,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)

__all__ = [
    "Base",
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "__version__",
    # Enums
    "ApplicationState",
    # Models
    "Application",
    "Fund",
    "LegalEntity",
    "Person",
    "Product",
    "Review",
]
