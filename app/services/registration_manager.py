"""수강 등록 매니저 — 등록 CRUD 및 상세(학생, 강좌 포함) 조회.

Registration Manager — CRUD orchestration for registrations and their
student/course detail.
"""

from decimal import Decimal

from app.mappers import registration_mapper
from app.models.course import Registration
from app.services.base import DetailManager
from app.utils.messages import REGISTRATION

# Numeric(10, 2) 컬럼 한계 (Limits of the Numeric(10, 2) price column)
PRICE_STEP = Decimal("0.01")
PRICE_LIMIT = Decimal("100000000")


class RegistrationManager(DetailManager[Registration]):
    """수강 등록 매니저.

    A registration's price is required, may not be negative, and must fit the
    price column exactly (at most two decimal places, below 100000000) so the
    stored value reads back unchanged. The check runs on the mapped entity,
    before any repository call.
    """

    repository_name = "registrations"
    messages = REGISTRATION
    mapper = registration_mapper
    required_text_fields = ()

    def check_invariants(self, entity: Registration) -> str | None:
        if entity.price is None:
            return "Price is required."
        price = Decimal(entity.price)
        if price < 0:
            return "Price must not be negative."
        if price >= PRICE_LIMIT:
            return f"Price must be less than {PRICE_LIMIT}."
        if price != price.quantize(PRICE_STEP):
            return "Price must have at most two decimal places."
        return None
