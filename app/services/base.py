"""기본 매니저 — 모든 엔티티 매니저의 공통 CRUD 오케스트레이션.

Base Manager — Common CRUD orchestration shared by every entity manager.

Every write goes through the same five steps:
    1. 검증 (validate the DTO)
    2. 매핑 (map it to a transient entity, then re-validate the entity)
    3. 스테이징 (stage the repository call inside an explicit transaction)
    4. 커밋 (commit the unit of work, read the affected-row count)
    5. 해석 (count > 0 commits the transaction, anything else rolls it back)

Failures are returned as Result/DataResult values; no exception raised by a
repository or the unit of work escapes a manager. Cancellation is the one
exception: the transaction handle rolls back and CancelledError propagates.

Usage:
    class StudentManager(BaseManager[Student]):
        repository_name = "students"
        messages = STUDENT
        mapper = student_mapper
"""

import logging
from typing import Any, Awaitable, Callable, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

from app.database import Base
from app.mappers.base import EntityMapper, parse_id
from app.repositories.base import BaseRepository
from app.unit_of_work import UnitOfWork
from app.utils.messages import EntityMessages
from app.utils.result import DataResult, Result

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseManager(Generic[ModelType]):
    """엔티티 하나에 대한 조회/생성/수정/삭제 오케스트레이션.

    Read and write orchestration for one entity type.
    Subclasses declare which repository, messages, and mapper they use,
    which text fields are required, and any extra invariants.

    Attributes:
        repository_name: 작업 단위의 레포지토리 속성 이름 (UnitOfWork attribute, e.g. "students")
        messages: 결과 메시지 카탈로그 (Outcome message catalogue)
        mapper: DTO ↔ 엔티티 변환기 (DTO/entity mapper)
        required_text_fields: 공백 불가 텍스트 필드 (Text fields that must be non-blank)
    """

    repository_name: str
    messages: EntityMessages
    mapper: EntityMapper[ModelType]
    required_text_fields: tuple[str, ...] = ("name",)

    def __init__(self, uow: UnitOfWork) -> None:
        """매니저를 초기화합니다.

        Args:
            uow: 이 요청의 작업 단위 (The request's unit of work)
        """
        self._uow: UnitOfWork = uow

    @property
    def repository(self) -> BaseRepository[ModelType]:
        return getattr(self._uow, self.repository_name)

    # ------------------------------------------------------------------
    # 검증 훅 — Validation hooks
    # ------------------------------------------------------------------

    def check_invariants(self, entity: ModelType) -> str | None:
        """엔티티별 추가 불변식 검사. 위반 사유 또는 None 반환.

        Entity-specific invariants; return a reason string when violated.
        """
        return None

    def validate_payload(self, dto: BaseModel) -> str | None:
        """매핑 전 DTO 검증 — 필수 텍스트와 식별자 형식.

        Validate a DTO before mapping: required text fields must be non-blank
        and identifier fields must parse (nullable references may be omitted).
        """
        for field in self.required_text_fields:
            value: Any = getattr(dto, field, None)
            if not isinstance(value, str) or not value.strip():
                return f"{_label(field)} is required."

        for field in self.mapper.id_fields:
            if field == "id" or field not in type(dto).model_fields:
                continue
            value = getattr(dto, field, None)
            if value is None and field in self.mapper.nullable_fields:
                continue
            if parse_id(value) is None:
                return f"{_label(field)} is missing or malformed."
        return None

    def validate_entity(self, entity: ModelType) -> str | None:
        """매핑된 엔티티 재검증 — 필수 텍스트 및 불변식.

        Re-validate the mapped entity before it may reach a repository.
        """
        for field in self.required_text_fields:
            value: Any = getattr(entity, field, None)
            if not isinstance(value, str) or not value.strip():
                return f"{_label(field)} is required."
        return self.check_invariants(entity)

    # ------------------------------------------------------------------
    # 조회 — Reads
    # ------------------------------------------------------------------

    async def get_all(self, track: bool = True) -> DataResult[list[BaseModel]]:
        """전체 목록을 조회합니다. 비어 있으면 실패로 보고합니다.

        List every row. An empty table is reported as a failure with no data.
        """
        try:
            entities: list[ModelType] = await self.repository.get_all(track)
        except Exception:
            logger.exception("%s list query failed", self.messages.entity)
            return DataResult.failure(self.messages.read_failed)

        if not entities:
            return DataResult.failure(self.messages.list_empty)
        return DataResult.success(self.mapper.to_summaries(entities), self.messages.list_success)

    async def get_by_id(self, record_id: str | UUID | None, track: bool = True) -> DataResult[BaseModel]:
        """ID로 단건을 조회합니다.

        Retrieve one row. An empty or malformed id fails before any query;
        a missing row fails with the not-found message.

        Args:
            record_id: 조회할 식별자 (Identifier as received from the caller)
            track: 세션 연결 유지 여부 (Whether the row stays attached)
        """
        parsed: UUID | None = parse_id(record_id)
        if parsed is None:
            return DataResult.failure(self.messages.invalid_id)

        try:
            entity: ModelType | None = await self.repository.get_by_id(parsed, track)
        except Exception:
            logger.exception("%s lookup failed for id=%s", self.messages.entity, parsed)
            return DataResult.failure(self.messages.read_failed)

        if entity is None:
            return DataResult.failure(self.messages.not_found)

        response: BaseModel | None = self.mapper.to_response(entity)
        if response is None:
            return DataResult.failure(self.messages.mapping_failed)
        return DataResult.success(response, self.messages.get_success)

    # ------------------------------------------------------------------
    # 쓰기 — Writes
    # ------------------------------------------------------------------

    async def create(self, dto: BaseModel | None) -> Result:
        """생성: 검증 → 매핑 → 재검증 → 스테이징 → 커밋.

        Create a row from a create DTO.
        """
        failed: str = self.messages.create_failed
        if dto is None:
            return Result.failure(EntityMessages.with_reason(failed, "No data was provided."))

        reason: str | None = self.validate_payload(dto)
        if reason:
            return Result.failure(EntityMessages.with_reason(failed, reason))

        entity: ModelType | None = self._map(dto)
        if entity is None:
            return Result.failure(self.messages.mapping_failed)

        reason = self.validate_entity(entity)
        if reason:
            return Result.failure(EntityMessages.with_reason(failed, reason))

        return await self._write(self.repository.create, entity, self.messages.create_success, failed)

    async def update(self, dto: BaseModel | None) -> Result:
        """수정: 식별자 검증 → 매핑 → 불변식 검증 → 트랜잭션 내 교체.

        Replace a row from an update DTO. A zero-row commit rolls back and fails.
        """
        failed: str = self.messages.update_failed
        if dto is None:
            return Result.failure(EntityMessages.with_reason(failed, "No data was provided."))
        if parse_id(getattr(dto, "id", None)) is None:
            return Result.failure(EntityMessages.with_reason(failed, self.messages.invalid_id))

        reason: str | None = self.validate_payload(dto)
        if reason:
            return Result.failure(EntityMessages.with_reason(failed, reason))

        entity: ModelType | None = self._map(dto)
        if entity is None:
            return Result.failure(self.messages.mapping_failed)

        reason = self.validate_entity(entity)
        if reason:
            return Result.failure(EntityMessages.with_reason(failed, reason))

        return await self._write(self.repository.update, entity, self.messages.update_success, failed)

    async def remove(self, dto: BaseModel | None) -> Result:
        """삭제: 식별자 검증 → 매핑 → 트랜잭션 내 삭제.

        Delete the row named by a delete DTO. Symmetric to update().
        """
        failed: str = self.messages.delete_failed
        if dto is None or parse_id(getattr(dto, "id", None)) is None:
            return Result.failure(EntityMessages.with_reason(failed, self.messages.invalid_id))

        entity: ModelType | None = self._map(dto)
        if entity is None:
            return Result.failure(self.messages.mapping_failed)

        return await self._write(self.repository.remove, entity, self.messages.delete_success, failed)

    def _map(self, dto: BaseModel) -> ModelType | None:
        entity: ModelType | None = self.mapper.to_entity(dto)
        if entity is None:
            logger.warning("%s mapping produced no entity from %s", self.messages.entity, type(dto).__name__)
        return entity

    async def _write(
        self,
        stage: Callable[[ModelType], Awaitable[None]],
        entity: ModelType,
        success_message: str,
        failed_message: str,
    ) -> Result:
        """명시적 트랜잭션 안에서 스테이징과 커밋을 수행하고 결과를 해석합니다.

        Stage and commit inside an explicit transaction, then interpret the
        affected-row count. Any fault rolls the transaction back (the handle
        does this on exit) and becomes a failed Result.

        Args:
            stage: 레포지토리 쓰기 메서드 (Repository create/update/remove)
            entity: 매핑된 엔티티 (Mapped entity)
            success_message: 성공 메시지 (Message for the success outcome)
            failed_message: 실패 메시지 (Message for the failure outcome)

        Returns:
            Result: 성공 또는 실패 (Success or failure)
        """
        try:
            async with self._uow.begin_transaction() as transaction:
                await stage(entity)
                affected: int = await self._uow.commit()
                if affected > 0:
                    await transaction.commit()
                    return Result.success(success_message)

                await transaction.rollback()
                return Result.failure(failed_message)
        except Exception:
            logger.exception("%s write failed and was rolled back", self.messages.entity)
            return Result.failure(failed_message)


class DetailManager(BaseManager[ModelType]):
    """상세 조회를 지원하는 매니저 — 관련 엔티티를 즉시 로딩.

    Manager for aggregates with a joined detail projection
    (Course, Lesson, ExamResult, Registration).
    """

    async def get_all_detail(self, track: bool = True) -> DataResult[list[BaseModel]]:
        """관련 엔티티를 포함한 전체 상세 목록을 조회합니다.

        List every row with related aggregates, loaded by one detail query.
        An empty result is a failure, as with get_all().
        """
        try:
            entities: list[ModelType] = await self.repository.get_all_detail(track)
        except Exception:
            logger.exception("%s detail query failed", self.messages.entity)
            return DataResult.failure(self.messages.read_failed)

        details: list[BaseModel] = self.mapper.to_details(entities) if entities else []
        if not details:
            return DataResult.failure(self.messages.list_empty)
        return DataResult.success(details, self.messages.list_success)

    async def get_by_id_detail(self, record_id: str | UUID | None, track: bool = True) -> DataResult[BaseModel]:
        """관련 엔티티를 포함한 단건 상세를 조회합니다.

        Retrieve one row with related aggregates.
        """
        parsed: UUID | None = parse_id(record_id)
        if parsed is None:
            return DataResult.failure(self.messages.invalid_id)

        try:
            entity: ModelType | None = await self.repository.get_by_id_detail(parsed, track)
        except Exception:
            logger.exception("%s detail lookup failed for id=%s", self.messages.entity, parsed)
            return DataResult.failure(self.messages.read_failed)

        if entity is None:
            return DataResult.failure(self.messages.not_found)

        detail: BaseModel | None = self.mapper.to_detail(entity)
        if detail is None:
            return DataResult.failure(self.messages.mapping_failed)
        return DataResult.success(detail, self.messages.get_success)


def _label(field: str) -> str:
    # "national_id" -> "National id"
    return field.replace("_", " ").capitalize()
