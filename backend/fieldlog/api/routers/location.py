# backend/fieldlog/api/routers/location.py
from fastapi import APIRouter, Depends, HTTPException

from fieldlog.schemas.location import AuthorizationIn, FailureIn, FixesIn, LocationOut
from fieldlog.services.location.capability import PushCapability
from fieldlog.state import FieldState, get_state

router = APIRouter()


def _snapshot(field: FieldState) -> LocationOut:
    p = field.provider
    return LocationOut(
        location=p.location,
        authorization=p.auth_status,
        updating=p.updating,
        last_error=p.last_error,
    )


def _push_capability(field: FieldState) -> PushCapability:
    cap = field.capability
    if not isinstance(cap, PushCapability):
        raise HTTPException(status_code=409, detail="location source does not accept pushed data")
    return cap


@router.get("")
@router.get("/")
def get_location(field: FieldState = Depends(get_state)) -> LocationOut:
    return field.context.call(_snapshot, field)


@router.post("/start")
def start_location(field: FieldState = Depends(get_state)) -> LocationOut:
    field.context.call(field.provider.request_start)
    return field.context.call(_snapshot, field)


# Pushes below come from outside the owner context; the provider hands them off itself

@router.post("/fixes")
def push_fixes(payload: FixesIn, field: FieldState = Depends(get_state)):
    cap = _push_capability(field)
    accepted = cap.push_fixes(payload.fixes)
    return {"accepted": accepted, "count": len(payload.fixes)}


@router.post("/authorization")
def push_authorization(payload: AuthorizationIn, field: FieldState = Depends(get_state)):
    cap = _push_capability(field)
    cap.set_authorization(payload.status)
    return {"ok": True, "status": payload.status}


@router.post("/failure")
def push_failure(payload: FailureIn, field: FieldState = Depends(get_state)):
    cap = _push_capability(field)
    cap.push_failure(payload.message)
    return {"ok": True}
