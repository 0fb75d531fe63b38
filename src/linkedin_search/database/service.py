# ABOUTME: Database service for managing SQLite connections and list CRUD operations.
# ABOUTME: SQLModel implementation of the ListStore contract with duplicate-skipping batch inserts.

from collections.abc import Generator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, create_engine, select

from linkedin_search.logging import get_logger
from linkedin_search.models.lists import CrmList, ListAccount, ListProfile, SavedFilter

logger = get_logger(__name__)

BATCH_SIZE = 10


class DatabaseService:
    """Service for managing database connections and list operations."""

    DEFAULT_DB_PATH = Path.home() / ".linkedin-search" / "data.db"

    def __init__(self, db_path: Path | None = None) -> None:
        """Initialize the database service.

        Args:
            db_path: Path to the SQLite database file. Defaults to ~/.linkedin-search/data.db
        """
        self.db_path = db_path if db_path is not None else self.DEFAULT_DB_PATH
        self._engine = create_engine(f"sqlite:///{self.db_path}", echo=False)

    def init_db(self) -> None:
        """Initialize the database by creating tables and parent directories."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        SQLModel.metadata.create_all(self._engine)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager.

        Yields:
            SQLModel Session for database operations.
        """
        with Session(self._engine) as session:
            yield session

    def create_list(self, name: str, account_id: str) -> CrmList:
        """Create a new list for an account.

        Args:
            name: Display name of the list.
            account_id: Provider account the list belongs to.

        Returns:
            The saved CrmList with ID populated.
        """
        crm_list = CrmList(name=name, account_id=account_id)
        with self.get_session() as session:
            session.add(crm_list)
            session.commit()
            session.refresh(crm_list)
            return crm_list

    def get_crm_lists(self, account_id: str) -> list[CrmList]:
        """Retrieve an account's lists, newest first."""
        with self.get_session() as session:
            statement = (
                select(CrmList)
                .where(CrmList.account_id == account_id)
                .order_by(CrmList.created_at.desc())  # type: ignore[attr-defined]
            )
            return list(session.exec(statement).all())

    def get_list(self, list_id: UUID) -> CrmList | None:
        """Retrieve a list by ID."""
        with self.get_session() as session:
            return session.get(CrmList, list_id)

    def _existing_ids(
        self, session: Session, model: type[ListProfile] | type[ListAccount], list_id: UUID
    ) -> set[str]:
        statement = select(model.linkedin_id).where(model.list_id == list_id)
        return set(session.exec(statement).all())

    def _insert_new(
        self,
        model: type[ListProfile] | type[ListAccount],
        list_id: UUID,
        rows: Sequence[ListProfile | ListAccount],
    ) -> int:
        """Insert rows whose LinkedIn id is not yet in the list, in batches.

        A batch that still hits the uniqueness constraint (e.g. a concurrent
        writer) is skipped as a whole.

        Returns:
            Number of rows inserted.
        """
        with self.get_session() as session:
            seen = self._existing_ids(session, model, list_id)

        new_rows = []
        for row in rows:
            if row.linkedin_id in seen:
                continue
            seen.add(row.linkedin_id)
            row.list_id = list_id
            new_rows.append(row)

        if not new_rows:
            logger.info("no_new_rows", table=model.__tablename__, list_id=str(list_id))
            return 0

        inserted = 0
        for start in range(0, len(new_rows), BATCH_SIZE):
            batch = new_rows[start : start + BATCH_SIZE]
            with self.get_session() as session:
                session.add_all(batch)
                try:
                    session.commit()
                except IntegrityError:
                    session.rollback()
                    logger.warning(
                        "duplicate_batch_skipped",
                        table=model.__tablename__,
                        list_id=str(list_id),
                        size=len(batch),
                    )
                    continue
            inserted += len(batch)

        logger.info(
            "rows_added", table=model.__tablename__, list_id=str(list_id), inserted=inserted
        )
        return inserted

    def add_profiles_to_list(self, list_id: UUID, profiles: list[ListProfile]) -> int:
        """Add people to a list, skipping ones already in it.

        Args:
            list_id: The list to add to.
            profiles: Profiles to add; their list_id is overwritten.

        Returns:
            Number of profiles inserted.
        """
        return self._insert_new(ListProfile, list_id, profiles)

    def add_accounts_to_list(self, list_id: UUID, accounts: list[ListAccount]) -> int:
        """Add companies to a list, skipping ones already in it.

        Args:
            list_id: The list to add to.
            accounts: Accounts to add; their list_id is overwritten.

        Returns:
            Number of accounts inserted.
        """
        return self._insert_new(ListAccount, list_id, accounts)

    def get_profiles_in_list(self, list_id: UUID) -> list[ListProfile]:
        """Retrieve the people in a list, newest first."""
        with self.get_session() as session:
            statement = (
                select(ListProfile)
                .where(ListProfile.list_id == list_id)
                .order_by(ListProfile.created_at.desc())  # type: ignore[attr-defined]
            )
            return list(session.exec(statement).all())

    def get_accounts_in_list(self, list_id: UUID) -> list[ListAccount]:
        """Retrieve the companies in a list, newest first."""
        with self.get_session() as session:
            statement = (
                select(ListAccount)
                .where(ListAccount.list_id == list_id)
                .order_by(ListAccount.created_at.desc())  # type: ignore[attr-defined]
            )
            return list(session.exec(statement).all())

    def remove_profile_from_list(self, profile_id: UUID) -> None:
        """Delete one saved profile. Unknown IDs are ignored."""
        with self.get_session() as session:
            profile = session.get(ListProfile, profile_id)
            if profile is None:
                return
            session.delete(profile)
            session.commit()

    def save_filter(
        self,
        account_id: str,
        name: str,
        filters: dict[str, Any],
        group_name: str | None = None,
    ) -> SavedFilter:
        """Store a filter state under a name.

        Args:
            account_id: Provider account the filter belongs to.
            name: Name to show for the filter.
            filters: The filter state, stored as JSON.
            group_name: Optional group to file the filter under.

        Returns:
            The saved SavedFilter with ID populated.
        """
        saved = SavedFilter(
            account_id=account_id, name=name, filters=filters, group_name=group_name
        )
        with self.get_session() as session:
            session.add(saved)
            session.commit()
            session.refresh(saved)
            return saved

    def get_saved_filters(self, account_id: str) -> list[SavedFilter]:
        """Retrieve an account's saved filters in creation order."""
        with self.get_session() as session:
            statement = (
                select(SavedFilter)
                .where(SavedFilter.account_id == account_id)
                .order_by(SavedFilter.created_at)  # type: ignore[arg-type]
            )
            return list(session.exec(statement).all())
