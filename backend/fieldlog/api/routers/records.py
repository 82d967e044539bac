# backend/fieldlog/api/routers/records.py
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from fieldlog.schemas.record import DeleteIn, RecordIn, RecordList, RecordOut
from fieldlog.services.session.log import SessionLog
from fieldlog.state import FieldState, get_state

router = APIRouter()


def _listing(log: SessionLog, newest_first: bool = False) -> RecordList:
    rows = log.records(newest_first=newest_first)
    return RecordList(
        count=len(rows),
        locked=log.is_locked(),
        locked_category=log.locked_category(),
        records=[RecordOut.of(r) for r in rows],
    )


def _append(log: SessionLog, payload: RecordIn):
    if not log.append(payload.category, payload.value, payload.note):
        return None, log.last_rejection
    return RecordOut.of(log.records()[-1]), None


@router.get("")
@router.get("/")
def list_records(
    order: Literal["created", "newest"] = "created",
    field: FieldState = Depends(get_state),
) -> RecordList:
    return field.context.call(_listing, field.log, order == "newest")


@router.post("")
@router.post("/")
def create_record(payload: RecordIn, field: FieldState = Depends(get_state)) -> RecordOut:
    record, reason = field.context.call(_append, field.log, payload)
    if record is None:
        raise HTTPException(status_code=409, detail=f"record rejected: {reason.value}")
    return record


@router.delete("/{record_id}")
def delete_record(record_id: UUID, field: FieldState = Depends(get_state)):
    try:
        field.context.call(field.log.delete_ids, [record_id])
    except KeyError:
        raise HTTPException(status_code=404, detail="record not found")
    return {"ok": True}


@router.post("/delete")
def delete_records(payload: DeleteIn, field: FieldState = Depends(get_state)) -> RecordList:
    log = field.log
    try:
        if payload.ids:
            field.context.call(log.delete_ids, payload.ids)
        else:
            field.context.call(log.delete, payload.positions)
    except KeyError:
        raise HTTPException(status_code=404, detail="record not found")
    except IndexError:
        raise HTTPException(status_code=400, detail="position out of range")
    return field.context.call(_listing, log)


@router.post("/clear")
def clear_records(field: FieldState = Depends(get_state)) -> RecordList:
    field.context.call(field.log.clear)
    return field.context.call(_listing, field.log)
