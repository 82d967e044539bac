# backend/fieldlog/state.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from fastapi import Request

from fieldlog import config
from fieldlog.context import InlineContext, OwnerContext
from fieldlog.services.location.capability import LocationCapability, PushCapability
from fieldlog.services.location.provider import LocationProvider
from fieldlog.services.session.log import SessionLog

logger = logging.getLogger(__name__)


@dataclass
class FieldState:
    """Everything one collection session owns. Mutate only through ``context``."""

    context: Union[OwnerContext, InlineContext]
    capability: LocationCapability
    provider: LocationProvider
    log: SessionLog
    export_dir: Path = field(default_factory=config.export_dir)


def build_state(
    capability: LocationCapability | None = None,
    context: Union[OwnerContext, InlineContext, None] = None,
    export_dir: Path | None = None,
) -> FieldState:
    ctx = context or OwnerContext()
    cap = capability or PushCapability(auto_grant=config.AUTO_GRANT)
    provider = LocationProvider(cap, ctx)
    state = FieldState(
        context=ctx,
        capability=cap,
        provider=provider,
        log=SessionLog(provider),
    )
    if export_dir is not None:
        state.export_dir = export_dir
    logger.info("session state ready (export dir %s)", state.export_dir)
    return state


def get_state(request: Request) -> FieldState:
    return request.app.state.field
