"""Tests for the append-only RecordStore."""
import json

from tests.conftest import make_outcome
from weather_station.logic.classify import DisplayTag
from weather_station.models.record import Record, RecordStore
from weather_station.models.weather import WeatherOutcome


def _record(country="IN", city="Pune", outcome=None, tag=DisplayTag.CLEAR) -> Record:
    return Record(country=country, city=city, outcome=outcome or make_outcome(), tag=tag)


def test_empty_store():
    store = RecordStore()
    assert len(store) == 0
    assert store.countries == store.cities == store.outcomes == store.tags == ()


def test_columns_stay_aligned():
    store = RecordStore()
    store.append(_record("IN", "Pune"))
    store.append(_record("XX", "Nowhere", WeatherOutcome.failed(), DisplayTag.ERROR))
    store.append(_record("US", "Boston", make_outcome("rain", 9.0, "Boston"), DisplayTag.PRECIPITATION))

    assert len(store.countries) == len(store.cities) == len(store.outcomes) == len(store.tags) == 3
    assert store.countries == ("IN", "XX", "US")
    assert store.cities == ("Pune", "Nowhere", "Boston")
    assert store.tags == (DisplayTag.CLEAR, DisplayTag.ERROR, DisplayTag.PRECIPITATION)
    assert store[1].outcome.is_failure
    assert [r.city for r in store] == ["Pune", "Nowhere", "Boston"]


def test_views_are_snapshots():
    store = RecordStore()
    store.append(_record())
    records = store.records
    store.append(_record("GB", "London"))
    assert len(records) == 1
    assert len(store) == 2


def test_to_json_dumps_every_record():
    store = RecordStore()
    store.append(_record())
    store.append(_record("XX", "Nowhere", WeatherOutcome.failed(), DisplayTag.ERROR))

    data = json.loads(store.to_json())
    assert [d["city"] for d in data] == ["Pune", "Nowhere"]
    assert data[0]["tag"] == "clear"
    assert data[0]["outcome"]["temperature"] == 28.0
    assert data[1]["tag"] == "error"
    assert data[1]["outcome"]["is_failure"] is True
    assert "created_at" in data[0]
