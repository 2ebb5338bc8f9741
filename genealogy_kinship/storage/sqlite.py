"""SQLite database of people and relationship records.

This module defines the schema the record-keeping layer writes to and reads
it back as the Person and RelationshipEdge shapes the kinship engine uses.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from sqlalchemy import Column, ForeignKey, Integer, String, Text, create_engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker

from genealogy_kinship.graph import FamilyGraph, validate_edges
from genealogy_kinship.schemas import Person as PersonRecord
from genealogy_kinship.schemas import RelationshipEdge
from genealogy_kinship.storage.edge_file import FamilyDataset

Base = declarative_base()


class Person(Base):
    """Person entity."""

    __tablename__ = "people"

    id = Column(Integer, primary_key=True)
    primary_name = Column(String, nullable=False)
    given_names = Column(String)
    family_name = Column(String)
    gender = Column(String)
    notes = Column(Text)
    created_at = Column(String, default=lambda: datetime.utcnow().isoformat())

    # Relationships
    events = relationship("Event", back_populates="person", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name='{self.primary_name}')>"


class Event(Base):
    """Life event (birth, death, etc.)."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True)
    person_id = Column(Integer, ForeignKey("people.id"), nullable=False)
    event_type = Column(String, nullable=False)  # birth, death, etc.
    date = Column(String)  # Stored as string to handle uncertain/partial dates
    place = Column(String)

    # Relationships
    person = relationship("Person", back_populates="events")

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, type='{self.event_type}', person_id={self.person_id})>"


class Relationship(Base):
    """Typed relationship between two people.

    For parent family types the source person is the parent or guardian.
    """

    __tablename__ = "relationships"

    id = Column(Integer, primary_key=True)
    source_person_id = Column(Integer, ForeignKey("people.id"), nullable=False)
    target_person_id = Column(Integer, ForeignKey("people.id"), nullable=False)
    relationship_type = Column(String, nullable=False)  # parent_child, spouse, sibling, etc.
    notes = Column(Text)

    def __repr__(self) -> str:
        return (
            f"<Relationship(id={self.id}, "
            f"type='{self.relationship_type}', "
            f"source={self.source_person_id}, "
            f"target={self.target_person_id})>"
        )


class GenealogyDatabase:
    """Database manager for people and relationship records."""

    def __init__(self, db_path: Path | None = None):
        """Initialize the database.

        Args:
            db_path: Path to SQLite database file (default: ./genealogy.db)
        """
        self.db_path = db_path or Path("./genealogy.db")
        self.engine = create_engine(f"sqlite:///{self.db_path}")
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine)

    def get_session(self):
        """Get a new database session."""
        return self.Session()

    def add_person(
        self,
        primary_name: str,
        given_names: str | None = None,
        family_name: str | None = None,
        gender: str | None = None,
        notes: str | None = None,
    ) -> Person:
        """Add a person record.

        Args:
            primary_name: Preferred display name
            given_names: Optional given names
            family_name: Optional family name
            gender: Optional gender (free text, e.g. 'M' or 'F')
            notes: Optional notes

        Returns:
            Created Person object
        """
        session = self.get_session()
        try:
            person = Person(
                primary_name=primary_name,
                given_names=given_names,
                family_name=family_name,
                gender=gender,
                notes=notes,
            )
            session.add(person)
            session.commit()
            session.refresh(person)
            return person
        finally:
            session.close()

    def add_event(
        self,
        person_id: int,
        event_type: str,
        date: str | None = None,
        place: str | None = None,
    ) -> Event:
        """Add a life event.

        Args:
            person_id: Person ID
            event_type: Type of event (birth, death, etc.)
            date: Date of event (flexible format)
            place: Location

        Returns:
            Created Event object
        """
        session = self.get_session()
        try:
            event = Event(person_id=person_id, event_type=event_type, date=date, place=place)
            session.add(event)
            session.commit()
            session.refresh(event)
            return event
        finally:
            session.close()

    def add_relationship(
        self,
        source_person_id: int,
        target_person_id: int,
        relationship_type: str,
        notes: str | None = None,
    ) -> Relationship:
        """Add a relationship between two people.

        Args:
            source_person_id: Parent/guardian for parent family types
            target_person_id: Child/ward for parent family types
            relationship_type: One of the RelationshipType values
            notes: Optional notes

        Returns:
            Created Relationship object

        Raises:
            InvalidEdge: If the type is unknown or both ids are the same person
        """
        edge = validate_edges(
            [
                {
                    "person_a": source_person_id,
                    "person_b": target_person_id,
                    "relationship_type": relationship_type,
                }
            ]
        )[0]

        session = self.get_session()
        try:
            rel = Relationship(
                source_person_id=source_person_id,
                target_person_id=target_person_id,
                relationship_type=edge.relationship_type.value,
                notes=notes,
            )
            session.add(rel)
            session.commit()
            session.refresh(rel)
            return rel
        finally:
            session.close()

    def get_person(self, person_id: int | str) -> PersonRecord | None:
        """Get a person as a kinship Person record.

        Args:
            person_id: Person ID (graph ids are strings, database ids integers)

        Returns:
            Person record, or None if not found
        """
        if not str(person_id).isdigit():
            return None

        session = self.get_session()
        try:
            person = session.query(Person).filter(Person.id == int(person_id)).first()
            if person is None:
                return None
            return self._to_record(person)
        finally:
            session.close()

    def load_people(self) -> list[PersonRecord]:
        """Load every person as a kinship Person record."""
        session = self.get_session()
        try:
            people = session.query(Person).order_by(Person.id).all()
            return [self._to_record(person) for person in people]
        finally:
            session.close()

    def load_edges(self) -> list[RelationshipEdge]:
        """Load every relationship as a validated RelationshipEdge, in insertion order.

        Raises:
            InvalidEdge: If a stored record has an unknown type or is self-referencing
        """
        session = self.get_session()
        try:
            rels = session.query(Relationship).order_by(Relationship.id).all()
            return validate_edges(
                {
                    "person_a": rel.source_person_id,
                    "person_b": rel.target_person_id,
                    "relationship_type": rel.relationship_type,
                }
                for rel in rels
            )
        finally:
            session.close()

    def load_dataset(self) -> FamilyDataset:
        """Load all people and relationships."""
        return FamilyDataset(people=self.load_people(), relationships=self.load_edges())

    def build_graph(self) -> FamilyGraph:
        """Build the family graph for everything in the database."""
        return self.load_dataset().build_graph()

    def get_stats(self) -> dict[str, Any]:
        """Get database statistics.

        Returns:
            Dictionary with database stats
        """
        session = self.get_session()
        try:
            stats: dict[str, Any] = {
                "total_people": session.query(Person).count(),
                "total_events": session.query(Event).count(),
                "total_relationships": session.query(Relationship).count(),
            }
            for (rel_type,) in session.query(Relationship.relationship_type).distinct():
                stats[f"{rel_type}_relationships"] = (
                    session.query(Relationship)
                    .filter(Relationship.relationship_type == rel_type)
                    .count()
                )
            return stats
        finally:
            session.close()

    @staticmethod
    def _to_record(person: Person) -> PersonRecord:
        birth = next((e for e in person.events if e.event_type == "birth"), None)
        death = next((e for e in person.events if e.event_type == "death"), None)
        return PersonRecord(
            id=str(person.id),
            name=person.primary_name,
            given_names=person.given_names,
            family_name=person.family_name,
            gender=person.gender,
            birth_date=birth.date if birth else None,
            death_date=death.date if death else None,
        )
