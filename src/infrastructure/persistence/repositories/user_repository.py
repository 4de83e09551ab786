"""SQLAlchemy adapter for the UserRepository port.

Only the columns the access pipeline needs are selected; the role string is
returned exactly as stored so an unknown role fails closed in the matrix
instead of being coerced here.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import User
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """Reads users for principal resolution.

    Example:
        >>> async with database.get_session() as session:
        ...     principal_user = await UserRepository(session).find_by_id(1)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: int) -> User | None:
        stmt = select(
            UserModel.id, UserModel.email, UserModel.role, UserModel.name
        ).where(UserModel.id == user_id)
        row = (await self.session.execute(stmt)).one_or_none()
        if row is None:
            return None
        return User(id=row.id, email=row.email, role=row.role, name=row.name)
