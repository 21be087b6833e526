from fastapi import APIRouter, Depends, status

from ....application.dto import ActivityInput, ActivityPatch
from ....application.use_cases.activities import CreateActivity, ListActivities, UpdateActivity
from ....application.use_cases.join_activity import JoinActivity
from ....domain.entities import TokenClaims
from ....domain.errors import NotFoundError
from ....infrastructure.db import Store, get_store
from ....infrastructure.metrics import activity_joins_total
from ....infrastructure.repositories import ActivityRepository
from ..authz import get_claims, require_admin, require_student
from ..schemas import ActivityCreate, ActivityOut, ActivityResp, ActivityUpdate, MessageResp

router = APIRouter(prefix="/activities", tags=["activities"])

def get_activity_id(activity_id: str) -> int:
    # a non-numeric id cannot name an activity
    try:
        return int(activity_id)
    except ValueError:
        raise NotFoundError("Activity not found")

@router.get("", response_model=list[ActivityOut], dependencies=[Depends(get_claims)])
def list_activities(store: Store = Depends(get_store)):
    with store.session() as db:
        rows = ListActivities(ActivityRepository(db)).execute()
    return [ActivityOut.model_validate(a) for a in rows]

# --- Admin-only:

@router.post("", response_model=ActivityResp, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def create_activity(payload: ActivityCreate, store: Store = Depends(get_store)):
    data = ActivityInput(title=payload.title, description=payload.description, date=payload.date)
    with store.session() as db:
        activity = CreateActivity(ActivityRepository(db)).execute(data)
    return ActivityResp(message="Activity created", data=ActivityOut.model_validate(activity))

@router.put("/{activity_id}", response_model=ActivityResp, dependencies=[Depends(require_admin)])
def update_activity(activity_id: int = Depends(get_activity_id),
                    payload: ActivityUpdate | None = None,
                    store: Store = Depends(get_store)):
    payload = payload or ActivityUpdate()
    patch = ActivityPatch(title=payload.title, description=payload.description, date=payload.date)
    with store.session() as db:
        activity = UpdateActivity(ActivityRepository(db)).execute(activity_id, patch)
    return ActivityResp(message="Activity updated", data=ActivityOut.model_validate(activity))

# --- Student-only:

@router.post("/{activity_id}/join", response_model=MessageResp)
def join_activity(
    claims: TokenClaims = Depends(require_student),
    activity_id: int = Depends(get_activity_id),
    store: Store = Depends(get_store),
):
    with store.session() as db:
        activity = JoinActivity(ActivityRepository(db)).execute(activity_id, claims.username)
    activity_joins_total.inc()
    return MessageResp(message=f"Successfully joined activity: {activity.title}")
