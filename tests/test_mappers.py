"""매퍼 테스트.

Mapper tests — Identifier parsing and DTO to entity projection.
"""

import uuid
from datetime import date
from decimal import Decimal

from app.mappers import registration_mapper, student_mapper
from app.mappers.base import parse_id
from app.schemas.course import RegistrationCreate
from app.schemas.people import StudentCreate


class TestParseId:
    """식별자 파싱 테스트."""

    def test_valid_string(self):
        value = uuid.uuid4()
        assert parse_id(str(value)) == value

    def test_uuid_instance_passes_through(self):
        value = uuid.uuid4()
        assert parse_id(value) is value

    def test_blank_malformed_and_non_string(self):
        assert parse_id("") is None
        assert parse_id("   ") is None
        assert parse_id("not-a-uuid") is None
        assert parse_id(42) is None
        assert parse_id(None) is None


class TestEntityMapper:
    """DTO → 엔티티 변환 테스트."""

    def test_id_fields_are_uuid_columns_only(self):
        assert student_mapper.id_fields == frozenset({"id"})
        assert registration_mapper.id_fields == frozenset({"id", "student_id", "course_id"})

    def test_to_entity_parses_foreign_keys(self):
        student_id, course_id = uuid.uuid4(), uuid.uuid4()
        entity = registration_mapper.to_entity(RegistrationCreate(
            price=Decimal("99.90"), student_id=str(student_id), course_id=str(course_id),
        ))
        assert entity.student_id == student_id
        assert entity.course_id == course_id
        # None 필드는 생략 — column default applies at insert
        assert entity.registration_date is None

    def test_malformed_foreign_key_yields_no_entity(self):
        dto = RegistrationCreate(price=Decimal("1"), student_id="bad", course_id=str(uuid.uuid4()))
        assert registration_mapper.to_entity(dto) is None

    def test_national_id_is_not_treated_as_identifier(self):
        entity = student_mapper.to_entity(
            StudentCreate(name="Ada", national_id="12345", birth_date=date(2000, 1, 1))
        )
        assert entity.national_id == "12345"

    def test_none_dto(self):
        assert student_mapper.to_entity(None) is None

    def test_text_fields_are_trimmed(self):
        entity = student_mapper.to_entity(
            StudentCreate(name="  Ada Kim ", national_id=" 123 ", birth_date=date(2000, 1, 1))
        )
        assert entity.name == "Ada Kim"
        assert entity.national_id == "123"
