from __future__ import annotations

import random
from datetime import date, timedelta
from uuid import uuid4

from milktech.domain.models.reproductive_event import ReproductiveEvent
from milktech.domain.services.reproduction import GESTATION_DAYS, infer_state
from milktech.domain.value_objects.reproduction import ReproEventKind, ReproStatus


def event(animal_id, kind, the_date, result=""):
    return ReproductiveEvent.create(
        animal_id=animal_id, kind=kind, date=the_date, result=result
    )


def test_no_events_is_empty():
    state = infer_state([])
    assert state.status is ReproStatus.EMPTY
    assert state.expected_calving_date is None


def test_service_without_diagnosis_is_serviced():
    animal = str(uuid4())
    state = infer_state([event(animal, ReproEventKind.INSEMINATION, date(2024, 1, 10))])
    assert state.status is ReproStatus.SERVICED
    assert state.service.date == date(2024, 1, 10)


def test_positive_diagnosis_after_service_is_pregnant():
    animal = str(uuid4())
    events = [
        event(animal, ReproEventKind.INSEMINATION, date(2024, 1, 10)),
        event(animal, ReproEventKind.DIAGNOSIS, date(2024, 2, 15), "positivo"),
    ]
    state = infer_state(events)
    assert state.status is ReproStatus.PREGNANT
    assert state.expected_calving_date == date(2024, 10, 19)
    assert state.expected_calving_date == date(2024, 1, 10) + timedelta(days=GESTATION_DAYS)


def test_negative_diagnosis_is_empty():
    animal = str(uuid4())
    events = [
        event(animal, ReproEventKind.SERVICE, date(2024, 1, 10)),
        event(animal, ReproEventKind.DIAGNOSIS, date(2024, 2, 15), "negativo"),
    ]
    assert infer_state(events).status is ReproStatus.EMPTY


def test_new_service_after_positive_diagnosis_is_serviced():
    animal = str(uuid4())
    events = [
        event(animal, ReproEventKind.INSEMINATION, date(2024, 1, 10)),
        event(animal, ReproEventKind.DIAGNOSIS, date(2024, 2, 15), "positivo"),
        event(animal, ReproEventKind.SERVICE, date(2024, 3, 1)),
    ]
    state = infer_state(events)
    assert state.status is ReproStatus.SERVICED
    assert state.expected_calving_date is None


def test_diagnosis_same_day_as_service_counts():
    animal = str(uuid4())
    events = [
        event(animal, ReproEventKind.INSEMINATION, date(2024, 1, 10)),
        event(animal, ReproEventKind.DIAGNOSIS, date(2024, 1, 10), "POSITIVO"),
    ]
    assert infer_state(events).status is ReproStatus.PREGNANT


def test_inference_ignores_event_order():
    animal = str(uuid4())
    events = [
        event(animal, ReproEventKind.INSEMINATION, date(2024, 1, 10)),
        event(animal, ReproEventKind.DIAGNOSIS, date(2024, 2, 15), "positivo"),
        event(animal, ReproEventKind.CALVING, date(2023, 5, 1), "vivo"),
    ]
    expected = infer_state(events)
    for _ in range(5):
        shuffled = events[:]
        random.shuffle(shuffled)
        state = infer_state(shuffled)
        assert state.status is expected.status
        assert state.expected_calving_date == expected.expected_calving_date
