"""Unit tests for HealthRecord entity."""

import pytest

from domain.intake.core.entities.health_record import HealthRecord
from domain.intake.core.exceptions.domain_errors import (
    IncompleteRecordError,
    UnknownFieldError,
    ValidationError,
)
from domain.intake.schema.field_schema import parse_record
from domain.intake.schema.fields import FIELDS


class TestHealthRecord:
    """Test HealthRecord entity."""

    def test_created_empty(self):
        """Test a new record has every field unset."""
        record = HealthRecord()

        assert record.bmi is None
        assert len(record.missing_fields()) == 16
        assert not record.is_complete

    def test_bmi_follows_weight_and_height(self):
        """Test BMI is recomputed on every weight/height change."""
        record = HealthRecord()
        record.set("weight_kg", 60.0)
        assert record.bmi is None

        record.set("height_cm", 165.0)
        assert record.bmi == 22.0

        record.set("Weight", 80.0)
        assert record.bmi == 29.4

        record.unset("height_cm")
        assert record.bmi is None

    def test_bmi_has_no_setter(self):
        """Test BMI cannot be assigned as an attribute."""
        record = HealthRecord()

        with pytest.raises(AttributeError):
            record.bmi = 25.0  # type: ignore[misc]

    @pytest.mark.parametrize("name", ["bmi", "BMI"])
    def test_bmi_cannot_be_set(self, name):
        """Test set() refuses the derived field."""
        record = HealthRecord()

        with pytest.raises(ValidationError) as exc:
            record.set(name, 25.0)
        assert exc.value.field == "bmi"
        assert exc.value.reason == "read-only"

    def test_unknown_field(self):
        """Test set() refuses undeclared fields."""
        with pytest.raises(UnknownFieldError):
            HealthRecord().set("Cholesterol", 200)

    def test_attribute_access(self, valid_raw_record):
        """Test declared fields read as attributes."""
        record = parse_record(valid_raw_record)

        assert record.age == 27
        assert record.blood_group_code == 15
        assert record.bmi == 22.0
        with pytest.raises(AttributeError):
            record.cholesterol

    def test_every_field_has_a_read_only_property(self, valid_raw_record):
        """Test each declared field is an explicit property matching get()."""
        record = parse_record(valid_raw_record)

        for spec in FIELDS:
            assert isinstance(getattr(HealthRecord, spec.name), property)
            assert getattr(record, spec.name) == record.get(spec.name)
        with pytest.raises(AttributeError):
            record.age = 40

    def test_payload_has_exactly_sixteen_keys(self, valid_raw_record, expected_payload):
        """Test serialization emits the documented keys only."""
        payload = parse_record(valid_raw_record).to_payload()

        assert payload == expected_payload
        assert len(payload) == 16

    def test_payload_types(self, valid_raw_record):
        """Test integer fields serialize as ints and measures as floats."""
        payload = parse_record(valid_raw_record).to_payload()

        assert isinstance(payload["Age"], int)
        assert isinstance(payload["BloodGroup"], int)
        assert isinstance(payload["RegularPeriods"], int)
        assert isinstance(payload["Weight"], float)
        assert isinstance(payload["BMI"], float)

    def test_incomplete_payload_rejected(self):
        """Test serialization fails fast while fields are unset."""
        record = HealthRecord()
        record.set("age", 30)

        with pytest.raises(IncompleteRecordError) as exc:
            record.to_payload()
        assert "age" not in exc.value.missing
        assert "bmi" in exc.value.missing
