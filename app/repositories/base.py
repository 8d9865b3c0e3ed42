"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all aggregate repositories.
A repository is bound to the session of the unit of work that created it.
Writes are only staged on the session; they reach the database when the unit
of work commits.

Usage:
    class StudentRepository(BaseRepository[Student]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(Student, session)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import LoaderOption

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)

# 교체 대상에서 제외되는 컬럼 — Columns never overwritten by update()
_IMMUTABLE_COLUMNS: frozenset[str] = frozenset({"id", "created_at", "updated_at"})


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing the common capability set:
    get_all, get_by_id, create, update, remove, and the detail variants
    for repositories that declare detail_options().

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
        session: 작업 단위의 비동기 세션 (The unit of work's async session)
    """

    def __init__(self, model: type[ModelType], session: AsyncSession) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class and the owning session.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
            session: 작업 단위가 소유한 세션 (Session owned by the unit of work)
        """
        self.model: type[ModelType] = model
        self.session: AsyncSession = session

    def detail_options(self) -> list[LoaderOption]:
        """상세 쿼리에서 즉시 로딩할 관계 옵션. 기본값은 없음.

        Eager-load options used by the detail queries. Repositories whose
        aggregate has related rows override this; an empty list means the
        aggregate has no detail projection.
        """
        return []

    def _detach(self, entities: Sequence[ModelType], track: bool) -> Sequence[ModelType]:
        # track=False: 읽기 전용 — 세션에서 분리 (Read-only rows are expunged)
        if not track:
            for entity in entities:
                self._expunge_loaded(entity)
        return entities

    def _expunge_loaded(self, entity: Any) -> None:
        """행과 함께 즉시 로딩된 관련 행도 세션에서 분리합니다.

        Expunge a row together with every related row already loaded on it,
        so a detail graph stays readable after the session rolls back and closes.
        """
        if entity is None or entity not in self.session:
            return
        state = inspect(entity)
        self.session.expunge(entity)
        for relationship in state.mapper.relationships:
            if relationship.key in state.unloaded:
                continue
            value: Any = state.attrs[relationship.key].loaded_value
            related = value if relationship.uselist else [value]
            for item in related:
                self._expunge_loaded(item)

    async def _fetch(self, query: Select, track: bool) -> list[ModelType]:
        result = await self.session.execute(query)
        entities: list[ModelType] = list(result.unique().scalars().all())
        self._detach(entities, track)
        return entities

    async def get_all(self, track: bool = True) -> list[ModelType]:
        """모든 레코드를 조회합니다.

        Retrieve all records in creation order.

        Args:
            track: True면 세션에 연결 유지, False면 분리된 읽기 전용
                   (Keep rows attached for mutation, or detach them for read-only use)

        Returns:
            list[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select = select(self.model).order_by(self.model.created_at, self.model.id)
        return await self._fetch(query, track)

    async def get_by_id(self, record_id: UUID, track: bool = True) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)
            track: 세션 연결 유지 여부 (Whether the row stays attached)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        entities = await self._fetch(query, track)
        return entities[0] if entities else None

    async def get_all_detail(self, track: bool = True) -> list[ModelType]:
        """관련 엔티티를 즉시 로딩하여 전체 목록을 조회합니다.

        Retrieve all records with related aggregates eager-loaded. The number
        of round trips depends on detail_options(), never on the row count.
        """
        query: Select = (
            select(self.model)
            .options(*self.detail_options())
            .order_by(self.model.created_at, self.model.id)
        )
        return await self._fetch(query, track)

    async def get_by_id_detail(self, record_id: UUID, track: bool = True) -> ModelType | None:
        """관련 엔티티를 즉시 로딩하여 단건을 조회합니다.

        Retrieve one record with related aggregates eager-loaded.
        """
        query: Select = (
            select(self.model)
            .options(*self.detail_options())
            .where(self.model.id == record_id)
        )
        entities = await self._fetch(query, track)
        return entities[0] if entities else None

    async def create(self, entity: ModelType) -> None:
        """새 레코드 삽입을 스테이징합니다 (커밋 시 반영).

        Stage an insert. The row becomes visible after the unit of work commits.
        """
        self.session.add(entity)

    async def update(self, entity: ModelType) -> None:
        """식별자 기준 전체 교체를 스테이징합니다.

        Stage a full replacement of the stored row identified by entity.id.
        Every mutable column is copied from the given entity; None is skipped
        for non-nullable columns so their stored value is kept. A missing row
        stages nothing, which the unit of work reports as zero affected rows.

        Args:
            entity: 교체 값을 담은 임시 엔티티 (Transient entity carrying the new values)
        """
        stored: ModelType | None = await self.session.get(self.model, entity.id)
        if stored is None:
            return

        for column in inspect(self.model).columns:
            if column.key in _IMMUTABLE_COLUMNS:
                continue
            value: Any = getattr(entity, column.key)
            if value is None and not column.nullable:
                continue
            setattr(stored, column.key, value)

    async def remove(self, entity: ModelType) -> None:
        """식별자 기준 삭제를 스테이징합니다.

        Stage deletion of the row identified by entity.id. A missing row stages nothing.
        """
        stored: ModelType | None = await self.session.get(self.model, entity.id)
        if stored is not None:
            await self.session.delete(stored)
