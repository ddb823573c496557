# tests/test_models.py

from __future__ import annotations

import pytest
from pydantic import ValidationError

from awqat_salah import AuthResponse, AwqatResponse, Credentials, DailyContent, Location, PrayerTime, PrayerTimeEid


def test_prayer_time_maps_camel_case_keys():
    record = PrayerTime.model_validate(
        {
            "fajr": "05:51",
            "hijriDateShortIso8601": "1448-04-27",
            "gregorianDateLongIso8601": "2026-10-19T00:00:00",
            "shapeMoonUrl": "https://img.test/moon.gif",
            "qiblaTime": "11:39",
        }
    )

    assert record.fajr == "05:51"
    assert record.hijri_date_short_iso8601 == "1448-04-27"
    assert record.gregorian_date_long_iso8601 == "2026-10-19T00:00:00"
    assert record.shape_moon_url == "https://img.test/moon.gif"
    assert record.qibla_time == "11:39"
    assert record.isha is None


def test_prayer_time_has_eighteen_fields():
    assert len(PrayerTime.model_fields) == 18


def test_eid_and_daily_content_aliases():
    eid = PrayerTimeEid.model_validate({"eidAlFitrDate": "2027-03-09", "eidAlAdhaTime": "07:02"})
    daily = DailyContent.model_validate({"id": 1, "dayOfYear": 292, "praySource": "Ibn Majah"})

    assert eid.eid_al_fitr_date == "2027-03-09"
    assert eid.eid_al_adha_time == "07:02"
    assert daily.day_of_year == 292
    assert daily.pray_source == "Ibn Majah"


def test_payloads_accept_field_names_and_ignore_unknown_keys():
    location = Location.model_validate({"id": 3, "code": "DE", "name": "Germany", "extra": True})
    assert location == Location(id=3, code="DE", name="Germany")


def test_payloads_are_immutable():
    location = Location(id=1, code="TR", name="Turkey")
    with pytest.raises(ValidationError):
        location.name = "Other"


def test_envelope_null_message_becomes_empty_string():
    envelope = AwqatResponse[list[Location]].model_validate({"data": [], "success": True, "message": None})
    assert envelope.message == ""
    assert envelope.data == []


def test_envelope_rejects_wrong_payload_shape():
    with pytest.raises(ValidationError):
        AwqatResponse[AuthResponse].model_validate_json(b'{"data": {"refreshToken": "r"}, "success": true}')


def test_credentials_are_frozen_and_hide_password():
    credentials = Credentials(email="a@b.c", password="pw")

    assert credentials.login_payload() == {"email": "a@b.c", "password": "pw"}
    assert "pw" not in repr(credentials)
    with pytest.raises(ValidationError):
        credentials.email = "x@y.z"
