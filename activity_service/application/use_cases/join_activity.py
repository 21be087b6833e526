import structlog

from ...domain.entities import Activity
from ...domain.errors import ConflictError, NotFoundError
from .activities import IActivityRepository

logger = structlog.get_logger()


class JoinActivity:
    """Registers a student for an activity.

    A repeated join is reported as a ConflictError rather than ignored, so
    callers learn about duplicate registrations.
    """

    def __init__(self, repo: IActivityRepository):
        self.repo = repo

    def execute(self, activity_id: int, username: str) -> Activity:
        activity = self.repo.get(activity_id)
        if activity is None:
            raise NotFoundError("Activity not found")
        if username in activity.participants:
            raise ConflictError("You are already registered for this activity")
        activity = self.repo.add_participant(activity_id, username)
        logger.info("activity_joined", activity_id=activity_id, username=username)
        return activity
