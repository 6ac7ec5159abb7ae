"""PrecisionAdvisory — нефатальный сигнал о возможной потере точности.

Immutable Pydantic модель. Advisory никогда не выбрасывается как exception:
он возвращается вместе с результатом (TriangleResult/NumberResult) и
дублируется в лог на уровне WARNING.
"""

from enum import Enum

from pydantic import BaseModel, Field


class AdvisoryKind(str, Enum):
    """Тип advisory.

    PRECISION_LOSS          — значения выходят за точный целый диапазон float64
    NUMERICAL_INSTABILITY   — float результат определителя теряет точность или переполняется
    MEMORY_FOOTPRINT        — буфер (n+1)x(n+1) становится большим
    """

    PRECISION_LOSS = "PRECISION_LOSS"
    NUMERICAL_INSTABILITY = "NUMERICAL_INSTABILITY"
    MEMORY_FOOTPRINT = "MEMORY_FOOTPRINT"


class PrecisionAdvisory(BaseModel):
    """Advisory, выданный для конкретного семейства/последовательности и порядка n."""

    kind: AdvisoryKind = Field(..., description="Тип advisory")
    subject: str = Field(..., min_length=1, description="FamilyId или SequenceId")
    order: int = Field(..., ge=0, description="Запрошенный порядок n")
    threshold: int = Field(..., ge=0, description="Порог, после которого выдаётся advisory")
    message: str = Field(..., min_length=1, description="Человекочитаемое описание")

    model_config = {"frozen": True}
