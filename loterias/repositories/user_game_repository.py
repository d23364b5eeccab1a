"""Repository layer for users and their saved games."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from loterias.models.user import User
from loterias.models.user_game import UserGame


class UserGameRepository:
    """CRUD operations for UserGame."""

    def ensure_user(self, session: Session, user_id: str) -> User:
        user = session.get(User, user_id)
        if user is None:
            user = User(id=user_id)
            session.add(user)
            session.flush()
        return user

    def list_for_user(self, session: Session, user_id: str, limit: int | None = None) -> Sequence[UserGame]:
        stmt = select(UserGame).where(UserGame.user_id == user_id).order_by(desc(UserGame.id))
        if limit is not None:
            stmt = stmt.limit(int(limit))
        return list(session.scalars(stmt).all())

    def list_for_contest(self, session: Session, lottery_id: str, contest_number: int) -> Sequence[UserGame]:
        stmt = (
            select(UserGame)
            .where(UserGame.lottery_id == lottery_id, UserGame.contest_number == int(contest_number))
            .order_by(UserGame.id.asc())
        )
        return list(session.scalars(stmt).all())

    def create(self, session: Session, **fields: object) -> UserGame:
        game = UserGame(**fields)
        session.add(game)
        session.flush()  # assign PK
        return game
