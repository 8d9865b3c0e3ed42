"""기본 매퍼 — DTO와 ORM 엔티티 간의 순수 변환.

Base Mapper — Pure projections between request/response schemas and ORM entities.
No session access happens here: a mapper only reads attributes that the
repository already loaded.

Usage:
    student_mapper = EntityMapper(Student, StudentSummary, StudentResponse)
    entity = student_mapper.to_entity(create_dto)   # None when dto is None or ids are malformed
"""

from typing import Any, Generic, Iterable, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import Uuid, inspect

from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)


def parse_id(value: Any) -> UUID | None:
    """문자열 식별자를 UUID로 변환합니다. 비어 있거나 잘못된 경우 None.

    Parse an identifier into a UUID. Returns None for empty or malformed input.
    """
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return UUID(value.strip())
    except ValueError:
        return None


class EntityMapper(Generic[ModelType]):
    """한 엔티티 유형에 대한 DTO ↔ 엔티티 변환기.

    DTO to entity (and back) projection for one entity type.

    Attributes:
        model: SQLAlchemy 모델 클래스 (ORM model class)
        summary_schema: 목록 응답 스키마 (List item schema)
        response_schema: 단건 응답 스키마 (Single item schema)
        detail_schema: 상세 응답 스키마, 없으면 None (Joined detail schema, optional)
    """

    def __init__(
        self,
        model: type[ModelType],
        summary_schema: type[BaseModel],
        response_schema: type[BaseModel],
        detail_schema: type[BaseModel] | None = None,
    ) -> None:
        self.model: type[ModelType] = model
        self.summary_schema: type[BaseModel] = summary_schema
        self.response_schema: type[BaseModel] = response_schema
        self.detail_schema: type[BaseModel] | None = detail_schema
        # UUID 컬럼 — 요청에서는 문자열로 들어오는 식별자/외래키 (Identifier and FK columns)
        columns = inspect(model).columns
        self.id_fields: frozenset[str] = frozenset(c.key for c in columns if isinstance(c.type, Uuid))
        self.nullable_fields: frozenset[str] = frozenset(c.key for c in columns if c.nullable)

    def to_entity(self, dto: BaseModel | None) -> ModelType | None:
        """요청 DTO를 임시(transient) 엔티티로 변환합니다.

        Project a request DTO onto a transient entity. Identifier fields are
        parsed into UUIDs; a malformed identifier makes the projection fail.
        Text values are stored trimmed. Fields set to None are left out so
        column defaults still apply.

        Args:
            dto: 생성/수정/삭제 요청 DTO (Create, update, or delete DTO)

        Returns:
            ModelType | None: 변환된 엔티티, 실패 시 None (Entity, or None on failure)
        """
        if dto is None:
            return None

        data: dict[str, Any] = {}
        for field, value in dto.model_dump().items():
            if value is None:
                continue
            if field in self.id_fields:
                parsed: UUID | None = parse_id(value)
                if parsed is None:
                    return None
                value = parsed
            elif isinstance(value, str):
                value = value.strip()
            data[field] = value

        return self.model(**data)

    def to_summaries(self, entities: Iterable[ModelType]) -> list[BaseModel]:
        return [self.summary_schema.model_validate(e) for e in entities]

    def to_response(self, entity: ModelType | None) -> BaseModel | None:
        if entity is None:
            return None
        return self.response_schema.model_validate(entity)

    def to_details(self, entities: Iterable[ModelType]) -> list[BaseModel]:
        """상세 쿼리로 로드된 엔티티들을 중첩 상세 DTO로 변환합니다.

        Project eager-loaded entities onto nested detail DTOs.
        """
        if self.detail_schema is None:
            raise TypeError(f"{self.model.__name__} has no detail projection")
        return [self.detail_schema.model_validate(e) for e in entities]

    def to_detail(self, entity: ModelType | None) -> BaseModel | None:
        if entity is None:
            return None
        return self.to_details([entity])[0]
