import structlog

from ...domain.entities import Activity
from ...domain.errors import NotFoundError, ValidationError
from ..dto import ActivityInput, ActivityPatch

logger = structlog.get_logger()


class IActivityRepository:
    def get(self, activity_id: int) -> Activity | None: ...
    def list_all(self) -> list[Activity]: ...
    def create(self, title: str, description: str, date: str) -> Activity: ...
    def update(self, activity_id: int, changes: dict[str, str]) -> Activity | None: ...
    def add_participant(self, activity_id: int, username: str) -> Activity: ...


class CreateActivity:
    def __init__(self, repo: IActivityRepository):
        self.repo = repo

    def execute(self, data: ActivityInput) -> Activity:
        if not data.title or not data.description or not data.date:
            raise ValidationError("Incomplete data: title, description and date are required")
        activity = self.repo.create(data.title, data.description, data.date)
        logger.info("activity_created", activity_id=activity.id, title=activity.title)
        return activity


class UpdateActivity:
    """Partial update: only truthy fields of the patch are applied."""

    def __init__(self, repo: IActivityRepository):
        self.repo = repo

    def execute(self, activity_id: int, patch: ActivityPatch) -> Activity:
        changes = patch.changes()
        activity = self.repo.update(activity_id, changes)
        if activity is None:
            raise NotFoundError("Activity not found")
        logger.info("activity_updated", activity_id=activity_id, fields=sorted(changes))
        return activity


class ListActivities:
    def __init__(self, repo: IActivityRepository):
        self.repo = repo

    def execute(self) -> list[Activity]:
        return self.repo.list_all()
