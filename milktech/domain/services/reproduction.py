from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from milktech.domain.models.reproductive_event import ReproductiveEvent
from milktech.domain.value_objects.reproduction import ReproEventKind, ReproStatus

GESTATION_DAYS = 283


@dataclass(slots=True)
class ReproductiveState:
    status: ReproStatus
    service: ReproductiveEvent | None = None
    diagnosis: ReproductiveEvent | None = None
    expected_calving_date: date | None = None


def _latest(events: Iterable[ReproductiveEvent]) -> ReproductiveEvent | None:
    latest = None
    for event in events:
        if latest is None or event.date > latest.date:
            latest = event
    return latest


def last_service(events: Iterable[ReproductiveEvent]) -> ReproductiveEvent | None:
    return _latest(e for e in events if e.is_service)


def last_diagnosis(events: Iterable[ReproductiveEvent]) -> ReproductiveEvent | None:
    return _latest(e for e in events if e.kind is ReproEventKind.DIAGNOSIS)


def infer_state(
    events: Iterable[ReproductiveEvent], *, gestation_days: int = GESTATION_DAYS
) -> ReproductiveState:
    """Derive the current reproductive status from an unordered event log.

    PREGNANT when the latest diagnosis is positive and not older than the
    latest service (calving expected `gestation_days` after that service);
    SERVICED when a service has no later diagnosis; EMPTY otherwise.
    """
    events = list(events)
    service = last_service(events)
    diagnosis = last_diagnosis(events)
    if (
        service is not None
        and diagnosis is not None
        and diagnosis.is_positive_diagnosis
        and diagnosis.date >= service.date
    ):
        return ReproductiveState(
            status=ReproStatus.PREGNANT,
            service=service,
            diagnosis=diagnosis,
            expected_calving_date=service.date + timedelta(days=gestation_days),
        )
    if service is not None and (diagnosis is None or diagnosis.date < service.date):
        return ReproductiveState(status=ReproStatus.SERVICED, service=service, diagnosis=diagnosis)
    return ReproductiveState(status=ReproStatus.EMPTY, service=service, diagnosis=diagnosis)
