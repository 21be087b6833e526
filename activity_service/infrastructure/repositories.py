from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import ActivityORM, ParticipantORM, UserORM
from ..application.use_cases.activities import IActivityRepository
from ..application.use_cases.register_user import IUserRepository
from ..domain.entities import Activity, Role, User
from ..domain.errors import ConflictError


def user_to_domain(u: UserORM) -> User:
    return User(id=u.id, username=u.username, password=u.password, role=Role(u.role))


def activity_to_domain(a: ActivityORM) -> Activity:
    return Activity(
        id=a.id,
        title=a.title,
        description=a.description,
        date=a.date,
        participants=tuple(p.username for p in a.participants),
    )


class UserRepository(IUserRepository):
    def __init__(self, db: Session): self.db = db

    def get_by_username(self, username: str) -> User | None:
        row = self.db.query(UserORM).filter(UserORM.username == username).first()
        return user_to_domain(row) if row else None

    def find_by_credentials(self, username: str, password: str) -> User | None:
        row = (self.db.query(UserORM)
               .filter(UserORM.username == username, UserORM.password == password)
               .first())
        return user_to_domain(row) if row else None

    def create(self, username: str, password: str, role: Role) -> User:
        row = UserORM(username=username, password=password, role=role.value)
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Username already taken")
        self.db.refresh(row)
        return user_to_domain(row)


class ActivityRepository(IActivityRepository):
    def __init__(self, db: Session): self.db = db

    def _row(self, activity_id: int) -> ActivityORM | None:
        return self.db.query(ActivityORM).filter(ActivityORM.id == activity_id).first()

    def get(self, activity_id: int) -> Activity | None:
        row = self._row(activity_id)
        return activity_to_domain(row) if row else None

    def list_all(self) -> list[Activity]:
        rows = self.db.query(ActivityORM).order_by(ActivityORM.id).all()
        return [activity_to_domain(r) for r in rows]

    def create(self, title: str, description: str, date: str) -> Activity:
        row = ActivityORM(title=title, description=description, date=date)
        self.db.add(row); self.db.commit(); self.db.refresh(row)
        return activity_to_domain(row)

    def update(self, activity_id: int, changes: dict[str, str]) -> Activity | None:
        row = self._row(activity_id)
        if not row: return None
        for name, value in changes.items():
            setattr(row, name, value)
        self.db.commit(); self.db.refresh(row)
        return activity_to_domain(row)

    def add_participant(self, activity_id: int, username: str) -> Activity:
        self.db.add(ParticipantORM(activity_id=activity_id, username=username))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("You are already registered for this activity")
        row = self._row(activity_id)
        self.db.refresh(row)
        return activity_to_domain(row)
