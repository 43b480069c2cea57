"""SQLAlchemy models for duobalance database."""

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    ForeignKey,
    Index,
    Numeric,
    String,
    create_engine,
)
from sqlalchemy.orm import Session, declarative_base, relationship, sessionmaker

Base = declarative_base()


class Category(Base):
    """Expense category model."""

    __tablename__ = "categories"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    color = Column(String, nullable=False)
    # Insertion order; the category list keeps the order categories were added in
    position = Column(BigInteger, nullable=False, default=0)


class Batch(Base):
    """Settled period model."""

    __tablename__ = "batches"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    settled_at = Column(BigInteger, nullable=False)
    total_ricardo = Column(Numeric(12, 2), nullable=False)
    total_rafaela = Column(Numeric(12, 2), nullable=False)
    balance = Column(Numeric(12, 3), nullable=False)
    payer_who_owes = Column(String, nullable=False)
    # Insertion order; breaks ties between batches settled in the same millisecond
    seq = Column(BigInteger, nullable=False, default=0)

    # Relationships
    expenses = relationship("Expense", back_populates="batch")


class Expense(Base):
    """Expense model. Active expenses have no batch."""

    __tablename__ = "expenses"

    id = Column(String, primary_key=True)
    amount = Column(Numeric(12, 2), nullable=False)
    payer = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    # Not a foreign key: deleting a category leaves the reference dangling
    category_id = Column(String, nullable=True)
    description = Column(String, nullable=True)
    created_at = Column(BigInteger, nullable=False)
    # Insertion order; breaks ties between expenses created in the same millisecond
    seq = Column(BigInteger, nullable=False, default=0)
    batch_id = Column(String, ForeignKey("batches.id"), nullable=True)

    __table_args__ = (Index("ix_expenses_batch_id", "batch_id"),)

    # Relationships
    batch = relationship("Batch", back_populates="expenses")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
