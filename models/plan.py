"""
models/plan.py
--------------
Budget postures and the plan objects derived from them.
"""

from dataclasses import dataclass, field
from enum import Enum


class PlanType(str, Enum):
    AUSTERITY = "austerity"
    BALANCED = "balanced"
    COMFORT = "comfort"


@dataclass(frozen=True)
class PlanPolicy:
    """
    Fixed policy knobs for one posture.

    Attributes:
        buffer_pct: Share of disposable income held back as a safety buffer.
        weekend_multiplier: Allowance factor applied on weekend days.
        savings_pct: Share of the post-buffer pool reserved as savings.
    """
    buffer_pct: float
    weekend_multiplier: float
    savings_pct: float


PLAN_POLICIES: dict[PlanType, PlanPolicy] = {
    PlanType.AUSTERITY: PlanPolicy(buffer_pct=0.20, weekend_multiplier=1.0, savings_pct=0.30),
    PlanType.BALANCED: PlanPolicy(buffer_pct=0.10, weekend_multiplier=1.3, savings_pct=0.15),
    PlanType.COMFORT: PlanPolicy(buffer_pct=0.05, weekend_multiplier=1.6, savings_pct=0.0),
}

PLAN_TITLES: dict[PlanType, dict[str, str]] = {
    PlanType.AUSTERITY: {"en": "Austerity", "ar": "التقشف", "ru": "Аскетизм"},
    PlanType.BALANCED: {"en": "Balanced", "ar": "التوازن", "ru": "Баланс"},
    PlanType.COMFORT: {"en": "Comfort", "ar": "الراحة", "ru": "Комфорт"},
}

PLAN_DESCRIPTIONS: dict[PlanType, dict[str, str]] = {
    PlanType.AUSTERITY: {
        "en": "Strict savings mode. Essentials only.",
        "ar": "وضع توفير صارم. للضروريات فقط.",
        "ru": "Строгий режим экономии. Только необходимое.",
    },
    PlanType.BALANCED: {
        "en": "Smart balance between life and savings.",
        "ar": "توازن ذكي بين الحياة والادخار.",
        "ru": "Разумный баланс между жизнью и сбережениями.",
    },
    PlanType.COMFORT: {
        "en": "Spend your full available budget comfortably.",
        "ar": "صرف الميزانية المتاحة بالكامل براحة.",
        "ru": "Комфортно тратьте весь доступный бюджет.",
    },
}


@dataclass(frozen=True)
class BudgetPlan:
    """
    A daily allowance under one posture. Recomputed on demand, never stored;
    only the selected type and its daily limit are persisted.
    """
    type: PlanType
    daily_limit: float
    monthly_savings_projected: float
    descriptions: dict[str, str] = field(default_factory=dict, compare=False)

    def description(self, language: str) -> str:
        return self.descriptions.get(language) or self.descriptions.get("en", "")

    def title(self, language: str) -> str:
        titles = PLAN_TITLES[self.type]
        return titles.get(language, titles["en"])
