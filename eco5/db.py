"""
Database abstraction for the Eco5 relational store.

``SqlDbClient`` accepts any SQLAlchemy URL: Postgres in production, SQLite
(in-memory or on disk) for development and tests. Each operation checks a
connection out of the engine's pool for its own session and returns it on
every exit path; rows are mapped onto plain dataclass records.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import asdict, dataclass
from typing import Callable, Iterable, Optional, Protocol

from sqlalchemy import (
    Column,
    ForeignKey,
    Numeric,
    String,
    Text,
    create_engine,
    delete,
    or_,
    select,
    text,
)
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from eco5.timestamps import utc_now_iso

logger = logging.getLogger(__name__)

IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


class DbClient(Protocol):
    """Interface for database access."""

    def ping(self) -> bool:
        ...

    def create_user(
        self, email: str, name: str, password_hash: str
    ) -> "UserRecord":
        ...

    def get_user(self, user_id: str) -> Optional["UserRecord"]:
        ...

    def get_user_by_email(self, email: str) -> Optional["UserRecord"]:
        ...

    def search_users(
        self,
        query: Optional[str] = None,
        *,
        limit: int = 10,
        offset: int = 0,
        sort_by: str = "created_at",
        sort_order: str = "desc",
    ) -> list["UserRecord"]:
        ...

    def update_user(self, user_id: str, fields: dict) -> Optional["UserRecord"]:
        ...

    def get_dashboard(self, user_id: str) -> Optional["DashboardRecord"]:
        ...

    def update_dashboard(
        self, user_id: str, fields: dict
    ) -> Optional["DashboardRecord"]:
        ...

    def get_or_create_impact_calculator(
        self, user_id: str
    ) -> "ImpactCalculatorRecord":
        ...

    def update_impact_calculator(
        self, user_id: str, fields: dict
    ) -> Optional["ImpactCalculatorRecord"]:
        ...

    def list_forum_threads(
        self, *, limit: int = 50, offset: int = 0
    ) -> list["ForumThreadRecord"]:
        ...

    def get_forum_thread(self, thread_id: str) -> Optional["ForumThreadRecord"]:
        ...

    def create_forum_thread(
        self,
        user_id: str,
        thread_title: str,
        content: str,
        created_at: Optional[str] = None,
    ) -> "ForumThreadRecord":
        ...

    def update_forum_thread(
        self, thread_id: str, fields: dict
    ) -> Optional["ForumThreadRecord"]:
        ...

    def list_events(
        self, *, limit: int = 50, offset: int = 0
    ) -> list["EventRecord"]:
        ...

    def get_event(self, event_id: str) -> Optional["EventRecord"]:
        ...

    def create_event(
        self,
        event_name: str,
        event_date: str,
        organizer_id: str,
        location: Optional[str] = None,
    ) -> "EventRecord":
        ...

    def update_event(self, event_id: str, fields: dict) -> Optional["EventRecord"]:
        ...

    def delete_event(self, event_id: str) -> bool:
        ...

    def list_resources(
        self,
        *,
        content_type: Optional[str] = None,
        query: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list["ResourceRecord"]:
        ...

    def get_resource(self, resource_id: str) -> Optional["ResourceRecord"]:
        ...

    def create_resource(
        self,
        content_type: str,
        title: str,
        author_id: str,
        description: Optional[str] = None,
        content_url: Optional[str] = None,
    ) -> "ResourceRecord":
        ...

    def update_resource(
        self, resource_id: str, fields: dict
    ) -> Optional["ResourceRecord"]:
        ...

    def list_alerts(
        self, user_id: str, *, limit: int = 50, offset: int = 0
    ) -> list["AlertRecord"]:
        ...

    def get_alert(self, alert_id: str) -> Optional["AlertRecord"]:
        ...

    def create_alert(
        self,
        user_id: str,
        alert_type: str,
        message: str,
        created_at: Optional[str] = None,
    ) -> "AlertRecord":
        ...

    def update_alert(self, alert_id: str, fields: dict) -> Optional["AlertRecord"]:
        ...


class _Record:
    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class UserRecord(_Record):
    id: str
    email: str
    name: str
    created_at: str
    password_hash: str

    def as_dict(self) -> dict:
        # The credential never leaves the store layer.
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "created_at": self.created_at,
        }


@dataclass
class DashboardRecord(_Record):
    user_id: str
    carbon_footprint: float
    historical_data: Optional[str] = None
    daily_tips: Optional[str] = None
    challenges: Optional[str] = None


@dataclass
class ImpactCalculatorRecord(_Record):
    id: str
    user_id: str
    travel_habits: Optional[str] = None
    energy_consumption: Optional[str] = None
    waste_management: Optional[str] = None


@dataclass
class ForumThreadRecord(_Record):
    id: str
    user_id: str
    thread_title: str
    content: str
    created_at: str


@dataclass
class EventRecord(_Record):
    id: str
    event_name: str
    event_date: str
    organizer_id: str
    location: Optional[str] = None


@dataclass
class ResourceRecord(_Record):
    id: str
    content_type: str
    title: str
    author_id: str
    description: Optional[str] = None
    content_url: Optional[str] = None


@dataclass
class AlertRecord(_Record):
    id: str
    user_id: str
    alert_type: str
    message: str
    created_at: str


def new_id() -> str:
    return str(uuid.uuid4())


def _apply_fields(row, fields: dict, columns: Iterable[str]) -> None:
    """Copy whitelisted ``fields`` onto ``row`` in the fixed column order."""
    for column in columns:
        if column in fields:
            setattr(row, column, fields[column])


def _to_float(value) -> float:
    # NUMERIC comes back as Decimal (Postgres) or float/str (SQLite).
    return float(value) if value is not None else 0.0


class SqlDbClient:
    """
    SQLAlchemy-backed store. Postgres in production, SQLite for development and
    tests; no URL means a private in-memory SQLite database.
    """

    def __init__(self, database_url: Optional[str] = None, *, pool_size: int = 5):
        self.database_url = database_url or IN_MEMORY_URL
        self.engine = self._create_engine(self.database_url, pool_size)
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    @staticmethod
    def _create_engine(database_url: str, pool_size: int):
        if database_url.startswith("sqlite"):
            kwargs: dict = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in database_url or database_url.endswith("://"):
                # One shared connection, otherwise every checkout sees an empty db.
                kwargs["poolclass"] = StaticPool
            return create_engine(database_url, future=True, **kwargs)
        return create_engine(
            database_url,
            future=True,
            pool_size=pool_size,
            pool_pre_ping=True,
            pool_recycle=1800,
        )

    def ping(self) -> bool:
        with self.Session() as session:
            session.execute(text("SELECT 1"))
        return True

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        with self.Session() as session:
            for table in reversed(Base.metadata.sorted_tables):
                session.execute(table.delete())
            session.commit()

    # --- users ---------------------------------------------------------------

    def _to_user_record(self, row: "UserRow") -> UserRecord:
        return UserRecord(
            id=row.id,
            email=row.email,
            name=row.name,
            created_at=row.created_at,
            password_hash=row.password_hash,
        )

    def create_user(self, email: str, name: str, password_hash: str) -> UserRecord:
        """Insert a user and its zeroed dashboard in a single transaction."""
        with self.Session() as session:
            user = UserRow(
                id=new_id(),
                email=email,
                name=name,
                created_at=utc_now_iso(),
                password_hash=password_hash,
            )
            session.add(user)
            session.flush()
            session.add(
                DashboardRow(
                    user_id=user.id,
                    carbon_footprint=0.0,
                    historical_data=None,
                    daily_tips=None,
                    challenges=None,
                )
            )
            session.commit()
            return self._to_user_record(user)

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self.Session() as session:
            row = session.get(UserRow, user_id)
            return self._to_user_record(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self.Session() as session:
            row = session.execute(
                select(UserRow).where(UserRow.email == email)
            ).scalar_one_or_none()
            return self._to_user_record(row) if row else None

    def search_users(
        self,
        query: Optional[str] = None,
        *,
        limit: int = 10,
        offset: int = 0,
        sort_by: str = "created_at",
        sort_order: str = "desc",
    ) -> list[UserRecord]:
        sort_columns = {"name": UserRow.name, "created_at": UserRow.created_at}
        if sort_by not in sort_columns or sort_order not in ("asc", "desc"):
            raise ValueError(f"Unsupported sort: {sort_by} {sort_order}")
        column = sort_columns[sort_by]
        order = column.asc() if sort_order == "asc" else column.desc()

        stmt = select(UserRow)
        if query:
            stmt = stmt.where(
                or_(
                    UserRow.name.icontains(query, autoescape=True),
                    UserRow.email.icontains(query, autoescape=True),
                )
            )
        stmt = stmt.order_by(order, UserRow.id.asc()).limit(limit).offset(offset)
        with self.Session() as session:
            rows = session.execute(stmt).scalars().all()
            return [self._to_user_record(row) for row in rows]

    def update_user(self, user_id: str, fields: dict) -> Optional[UserRecord]:
        with self.Session() as session:
            row = session.get(UserRow, user_id)
            if not row:
                return None
            _apply_fields(row, fields, ("email", "name", "password_hash"))
            session.commit()
            return self._to_user_record(row)

    # --- dashboards ----------------------------------------------------------

    def _to_dashboard_record(self, row: "DashboardRow") -> DashboardRecord:
        return DashboardRecord(
            user_id=row.user_id,
            carbon_footprint=_to_float(row.carbon_footprint),
            historical_data=row.historical_data,
            daily_tips=row.daily_tips,
            challenges=row.challenges,
        )

    def get_dashboard(self, user_id: str) -> Optional[DashboardRecord]:
        with self.Session() as session:
            row = session.get(DashboardRow, user_id)
            return self._to_dashboard_record(row) if row else None

    def update_dashboard(
        self, user_id: str, fields: dict
    ) -> Optional[DashboardRecord]:
        with self.Session() as session:
            row = session.get(DashboardRow, user_id)
            if not row:
                return None
            _apply_fields(
                row,
                fields,
                ("carbon_footprint", "historical_data", "daily_tips", "challenges"),
            )
            session.commit()
            return self._to_dashboard_record(row)

    # --- impact calculators --------------------------------------------------

    def _to_calculator_record(
        self, row: "ImpactCalculatorRow"
    ) -> ImpactCalculatorRecord:
        return ImpactCalculatorRecord(
            id=row.id,
            user_id=row.user_id,
            travel_habits=row.travel_habits,
            energy_consumption=row.energy_consumption,
            waste_management=row.waste_management,
        )

    def _find_calculator(
        self, session: Session, user_id: str
    ) -> Optional["ImpactCalculatorRow"]:
        return (
            session.execute(
                select(ImpactCalculatorRow)
                .where(ImpactCalculatorRow.user_id == user_id)
                .order_by(ImpactCalculatorRow.id.asc())
                .limit(1)
            )
            .scalars()
            .first()
        )

    def get_or_create_impact_calculator(
        self, user_id: str
    ) -> ImpactCalculatorRecord:
        with self.Session() as session:
            row = self._find_calculator(session, user_id)
            if row:
                return self._to_calculator_record(row)

            row = ImpactCalculatorRow(
                id=new_id(),
                user_id=user_id,
                travel_habits=None,
                energy_consumption=None,
                waste_management=None,
            )
            session.add(row)
            try:
                session.commit()
            except IntegrityError:
                # Another request created it first; use that one.
                session.rollback()
                row = self._find_calculator(session, user_id)
                if row is None:
                    raise
            else:
                logger.info("Created empty impact calculator for user %s", user_id)
            return self._to_calculator_record(row)

    def update_impact_calculator(
        self, user_id: str, fields: dict
    ) -> Optional[ImpactCalculatorRecord]:
        with self.Session() as session:
            row = self._find_calculator(session, user_id)
            if not row:
                return None
            _apply_fields(
                row,
                fields,
                ("travel_habits", "energy_consumption", "waste_management"),
            )
            session.commit()
            return self._to_calculator_record(row)

    # --- community forum -----------------------------------------------------

    def _to_thread_record(self, row: "ForumThreadRow") -> ForumThreadRecord:
        return ForumThreadRecord(
            id=row.id,
            user_id=row.user_id,
            thread_title=row.thread_title,
            content=row.content,
            created_at=row.created_at,
        )

    def list_forum_threads(
        self, *, limit: int = 50, offset: int = 0
    ) -> list[ForumThreadRecord]:
        stmt = (
            select(ForumThreadRow)
            .order_by(ForumThreadRow.created_at.desc(), ForumThreadRow.id.asc())
            .limit(limit)
            .offset(offset)
        )
        with self.Session() as session:
            return [
                self._to_thread_record(row)
                for row in session.execute(stmt).scalars().all()
            ]

    def get_forum_thread(self, thread_id: str) -> Optional[ForumThreadRecord]:
        with self.Session() as session:
            row = session.get(ForumThreadRow, thread_id)
            return self._to_thread_record(row) if row else None

    def create_forum_thread(
        self,
        user_id: str,
        thread_title: str,
        content: str,
        created_at: Optional[str] = None,
    ) -> ForumThreadRecord:
        with self.Session() as session:
            row = ForumThreadRow(
                id=new_id(),
                user_id=user_id,
                thread_title=thread_title,
                content=content,
                created_at=created_at or utc_now_iso(),
            )
            session.add(row)
            session.commit()
            return self._to_thread_record(row)

    def update_forum_thread(
        self, thread_id: str, fields: dict
    ) -> Optional[ForumThreadRecord]:
        with self.Session() as session:
            row = session.get(ForumThreadRow, thread_id)
            if not row:
                return None
            _apply_fields(row, fields, ("thread_title", "content"))
            session.commit()
            return self._to_thread_record(row)

    # --- events --------------------------------------------------------------

    def _to_event_record(self, row: "EventRow") -> EventRecord:
        return EventRecord(
            id=row.id,
            event_name=row.event_name,
            event_date=row.event_date,
            location=row.location,
            organizer_id=row.organizer_id,
        )

    def list_events(self, *, limit: int = 50, offset: int = 0) -> list[EventRecord]:
        stmt = (
            select(EventRow)
            .order_by(EventRow.event_date.asc(), EventRow.id.asc())
            .limit(limit)
            .offset(offset)
        )
        with self.Session() as session:
            return [
                self._to_event_record(row)
                for row in session.execute(stmt).scalars().all()
            ]

    def get_event(self, event_id: str) -> Optional[EventRecord]:
        with self.Session() as session:
            row = session.get(EventRow, event_id)
            return self._to_event_record(row) if row else None

    def create_event(
        self,
        event_name: str,
        event_date: str,
        organizer_id: str,
        location: Optional[str] = None,
    ) -> EventRecord:
        with self.Session() as session:
            row = EventRow(
                id=new_id(),
                event_name=event_name,
                event_date=event_date,
                location=location,
                organizer_id=organizer_id,
            )
            session.add(row)
            session.commit()
            return self._to_event_record(row)

    def update_event(self, event_id: str, fields: dict) -> Optional[EventRecord]:
        with self.Session() as session:
            row = session.get(EventRow, event_id)
            if not row:
                return None
            _apply_fields(
                row, fields, ("event_name", "event_date", "location", "organizer_id")
            )
            session.commit()
            return self._to_event_record(row)

    def delete_event(self, event_id: str) -> bool:
        with self.Session() as session:
            result = session.execute(delete(EventRow).where(EventRow.id == event_id))
            session.commit()
            return (result.rowcount or 0) > 0

    # --- resource library ----------------------------------------------------

    def _to_resource_record(self, row: "ResourceRow") -> ResourceRecord:
        return ResourceRecord(
            id=row.id,
            content_type=row.content_type,
            title=row.title,
            description=row.description,
            content_url=row.content_url,
            author_id=row.author_id,
        )

    def list_resources(
        self,
        *,
        content_type: Optional[str] = None,
        query: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[ResourceRecord]:
        stmt = select(ResourceRow)
        if content_type:
            stmt = stmt.where(ResourceRow.content_type == content_type)
        if query:
            stmt = stmt.where(ResourceRow.title.icontains(query, autoescape=True))
        stmt = (
            stmt.order_by(ResourceRow.title.asc(), ResourceRow.id.asc())
            .limit(limit)
            .offset(offset)
        )
        with self.Session() as session:
            return [
                self._to_resource_record(row)
                for row in session.execute(stmt).scalars().all()
            ]

    def get_resource(self, resource_id: str) -> Optional[ResourceRecord]:
        with self.Session() as session:
            row = session.get(ResourceRow, resource_id)
            return self._to_resource_record(row) if row else None

    def create_resource(
        self,
        content_type: str,
        title: str,
        author_id: str,
        description: Optional[str] = None,
        content_url: Optional[str] = None,
    ) -> ResourceRecord:
        with self.Session() as session:
            row = ResourceRow(
                id=new_id(),
                content_type=content_type,
                title=title,
                description=description,
                content_url=content_url,
                author_id=author_id,
            )
            session.add(row)
            session.commit()
            return self._to_resource_record(row)

    def update_resource(
        self, resource_id: str, fields: dict
    ) -> Optional[ResourceRecord]:
        with self.Session() as session:
            row = session.get(ResourceRow, resource_id)
            if not row:
                return None
            _apply_fields(
                row,
                fields,
                ("content_type", "title", "description", "content_url", "author_id"),
            )
            session.commit()
            return self._to_resource_record(row)

    # --- alerts --------------------------------------------------------------

    def _to_alert_record(self, row: "AlertRow") -> AlertRecord:
        return AlertRecord(
            id=row.id,
            user_id=row.user_id,
            alert_type=row.alert_type,
            message=row.message,
            created_at=row.created_at,
        )

    def list_alerts(
        self, user_id: str, *, limit: int = 50, offset: int = 0
    ) -> list[AlertRecord]:
        stmt = (
            select(AlertRow)
            .where(AlertRow.user_id == user_id)
            .order_by(AlertRow.created_at.desc(), AlertRow.id.asc())
            .limit(limit)
            .offset(offset)
        )
        with self.Session() as session:
            return [
                self._to_alert_record(row)
                for row in session.execute(stmt).scalars().all()
            ]

    def get_alert(self, alert_id: str) -> Optional[AlertRecord]:
        with self.Session() as session:
            row = session.get(AlertRow, alert_id)
            return self._to_alert_record(row) if row else None

    def create_alert(
        self,
        user_id: str,
        alert_type: str,
        message: str,
        created_at: Optional[str] = None,
    ) -> AlertRecord:
        with self.Session() as session:
            row = AlertRow(
                id=new_id(),
                user_id=user_id,
                alert_type=alert_type,
                message=message,
                created_at=created_at or utc_now_iso(),
            )
            session.add(row)
            session.commit()
            return self._to_alert_record(row)

    def update_alert(self, alert_id: str, fields: dict) -> Optional[AlertRecord]:
        with self.Session() as session:
            row = session.get(AlertRow, alert_id)
            if not row:
                return None
            _apply_fields(row, fields, ("alert_type", "message"))
            session.commit()
            return self._to_alert_record(row)

    # --- demo data -----------------------------------------------------------

    def seed_demo_data(self, hash_password: Callable[[str], str]) -> int:
        """
        Load the two demo accounts and the rows that belong to them.

        Returns the number of users inserted; existing users are left alone.
        """
        inserted = 0
        with self.Session() as session:
            for user in DEMO_USERS:
                if session.get(UserRow, user["id"]):
                    continue
                session.add(
                    UserRow(
                        id=user["id"],
                        email=user["email"],
                        name=user["name"],
                        created_at=user["created_at"],
                        password_hash=hash_password(user["password"]),
                    )
                )
                session.flush()
                for model, rows in DEMO_ROWS:
                    for row in rows:
                        owner = (
                            row.get("user_id")
                            or row.get("organizer_id")
                            or row.get("author_id")
                        )
                        if owner == user["id"]:
                            session.add(model(**row))
                inserted += 1
            session.commit()
        return inserted


Base = declarative_base()


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    created_at = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)


class DashboardRow(Base):
    __tablename__ = "user_dashboards"

    user_id = Column(String, ForeignKey("users.id"), primary_key=True)
    carbon_footprint = Column(Numeric(asdecimal=False), nullable=False)
    historical_data = Column(Text, nullable=True)
    daily_tips = Column(Text, nullable=True)
    challenges = Column(Text, nullable=True)


class ImpactCalculatorRow(Base):
    __tablename__ = "impact_calculators"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, unique=True)
    travel_habits = Column(Text, nullable=True)
    energy_consumption = Column(Text, nullable=True)
    waste_management = Column(Text, nullable=True)


class ForumThreadRow(Base):
    __tablename__ = "eco_community_forum"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    thread_title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(String, nullable=False)


class EventRow(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True)
    event_name = Column(String, nullable=False)
    event_date = Column(String, nullable=False)
    location = Column(String, nullable=True)
    organizer_id = Column(String, ForeignKey("users.id"), nullable=False)


class ResourceRow(Base):
    __tablename__ = "resource_library"

    id = Column(String, primary_key=True)
    content_type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    content_url = Column(String, nullable=True)
    author_id = Column(String, ForeignKey("users.id"), nullable=False)


class AlertRow(Base):
    __tablename__ = "alerts"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    alert_type = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(String, nullable=False)


DEMO_USERS = [
    {
        "id": "user1",
        "email": "john.doe@example.com",
        "name": "John Doe",
        "created_at": "2023-10-01T10:00:00.000Z",
        "password": "password123",
    },
    {
        "id": "user2",
        "email": "jane.smith@example.com",
        "name": "Jane Smith",
        "created_at": "2023-10-01T11:00:00.000Z",
        "password": "admin123",
    },
]

DEMO_ROWS = [
    (
        DashboardRow,
        [
            {"user_id": "user1", "carbon_footprint": 42.5, "historical_data": "data1",
             "daily_tips": "tip1", "challenges": "challenge1"},
            {"user_id": "user2", "carbon_footprint": 38.7, "historical_data": "data2",
             "daily_tips": "tip2", "challenges": "challenge2"},
        ],
    ),
    (
        ImpactCalculatorRow,
        [
            {"id": "calculator1", "user_id": "user1", "travel_habits": "car",
             "energy_consumption": "high", "waste_management": "recycle"},
            {"id": "calculator2", "user_id": "user2", "travel_habits": "bus",
             "energy_consumption": "medium", "waste_management": "compost"},
        ],
    ),
    (
        ForumThreadRow,
        [
            {"id": "thread1", "user_id": "user1", "thread_title": "Sustainability Tips",
             "content": "Content of the first post.",
             "created_at": "2023-10-02T12:00:00.000Z"},
            {"id": "thread2", "user_id": "user2", "thread_title": "Eco-Friendly Travel",
             "content": "Content of the second post.",
             "created_at": "2023-10-02T13:00:00.000Z"},
        ],
    ),
    (
        EventRow,
        [
            {"id": "event1", "event_name": "Earth Day Celebration",
             "event_date": "2023-04-22T00:00:00.000Z", "location": "Central Park",
             "organizer_id": "user1"},
            {"id": "event2", "event_name": "Recycling Workshop",
             "event_date": "2023-05-15T00:00:00.000Z", "location": "Community Center",
             "organizer_id": "user2"},
        ],
    ),
    (
        ResourceRow,
        [
            {"id": "resource1", "content_type": "Video", "title": "How to Recycle",
             "description": "A video tutorial on recycling.",
             "content_url": "https://picsum.photos/200/300?random=1",
             "author_id": "user1"},
            {"id": "resource2", "content_type": "Article",
             "title": "Sustainable Living",
             "description": "An article about sustainable living practices.",
             "content_url": "https://picsum.photos/200/300?random=2",
             "author_id": "user2"},
        ],
    ),
    (
        AlertRow,
        [
            {"id": "alert1", "user_id": "user1", "alert_type": "Reminder",
             "message": "Don't forget about your next eco-challenge!",
             "created_at": "2023-10-03T14:00:00.000Z"},
            {"id": "alert2", "user_id": "user2", "alert_type": "Alert",
             "message": "New sustainability event near you!",
             "created_at": "2023-10-03T15:00:00.000Z"},
        ],
    ),
]
