"""
Precision — пороги точности и выдача PrecisionAdvisory

Для каждого семейства треугольников и каждой последовательности задан порог
порядка n. При n > порога значения всё равно вычисляются (Python int точен),
но могут выйти за точный целый диапазон float64, поэтому к результату
прикладывается advisory. Advisory ничего не блокирует и не меняет форму
результата.

Пороги:
- 20: EULERIAN, SEA, TRINOMIAL (и числа Эйлера/Энтрингера)
- 25: BELL
- 30: CATALAN
- 50: PASCAL, RASCAL, LOZANIC, CLARK, LEIBNIZ, BERNOULLI_TRIANGLE
- 20: числа Бернулли (float результат определителя, а не рост ячеек)
- 2000: SIERPINSKI (объём памяти буфера)
- FLOYD / LAZY_CATERER: порога нет
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Final, Optional, Tuple, Union

from numtri.core.domain.advisory import AdvisoryKind, PrecisionAdvisory
from numtri.core.domain.buffer import TriangularBuffer
from numtri.core.domain.family import FamilyId, SequenceId
from numtri.core.math.numerical_safeguards import FLOAT64_EXACT_INT_LIMIT, is_exact_in_float64

logger = logging.getLogger(__name__)

Subject = Union[FamilyId, SequenceId]

# =============================================================================
# ПОРОГИ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_FAMILY_THRESHOLDS: Final[Dict[FamilyId, int]] = {
    FamilyId.PASCAL: 50,
    FamilyId.RASCAL: 50,
    FamilyId.LOZANIC: 50,
    FamilyId.CLARK: 50,
    FamilyId.LEIBNIZ: 50,
    FamilyId.BERNOULLI_TRIANGLE: 50,
    FamilyId.CATALAN: 30,
    FamilyId.BELL: 25,
    FamilyId.EULERIAN: 20,
    FamilyId.SEA: 20,
    FamilyId.TRINOMIAL: 20,
    FamilyId.SIERPINSKI: 2000,
}

DEFAULT_SEQUENCE_THRESHOLDS: Final[Dict[SequenceId, int]] = {
    SequenceId.BELL: 25,
    SequenceId.CATALAN: 30,
    SequenceId.CAKE: 50,
    SequenceId.MOSER: 50,
    SequenceId.EULERIAN: 20,
    SequenceId.ENTRINGER: 20,
    SequenceId.BERNOULLI: 20,
}

# Advisory особого типа, остальные PRECISION_LOSS
_SPECIAL_KINDS: Final[Dict[Subject, AdvisoryKind]] = {
    SequenceId.BERNOULLI: AdvisoryKind.NUMERICAL_INSTABILITY,
    FamilyId.SIERPINSKI: AdvisoryKind.MEMORY_FOOTPRINT,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PrecisionConfig:
    """Конфигурация порогов advisory.

    Attributes:
        family_thresholds: порог n для каждого FamilyId (нет ключа -> нет advisory)
        sequence_thresholds: порог n для каждого SequenceId
        float_exact_limit: граница точного целого в float64 (для сообщений)
    """

    family_thresholds: Dict[FamilyId, int] = field(
        default_factory=lambda: dict(DEFAULT_FAMILY_THRESHOLDS)
    )
    sequence_thresholds: Dict[SequenceId, int] = field(
        default_factory=lambda: dict(DEFAULT_SEQUENCE_THRESHOLDS)
    )
    float_exact_limit: int = FLOAT64_EXACT_INT_LIMIT

    def threshold_for(self, subject: Subject) -> Optional[int]:
        """Порог для семейства/последовательности или None, если порога нет."""
        if isinstance(subject, FamilyId):
            return self.family_thresholds.get(subject)
        return self.sequence_thresholds.get(subject)


# =============================================================================
# ADVISORIES
# =============================================================================


def _advisory_message(kind: AdvisoryKind, subject: Subject, order: int, threshold: int, limit: int) -> str:
    if kind == AdvisoryKind.NUMERICAL_INSTABILITY:
        return (
            f"Determinant-based {subject.value} numbers are returned as double precision "
            f"floats; for n > {threshold} the exponent range dominates the result and values "
            f"may round or overflow to infinity (n={order})."
        )
    if kind == AdvisoryKind.MEMORY_FOOTPRINT:
        return (
            f"The {subject.value} buffer is ({order + 1})x({order + 1}); for n > {threshold} "
            f"memory usage may be significant."
        )
    return (
        f"Entries of {subject.value} grow quickly. For n > {threshold} integer values may "
        f"exceed the exact range of double precision ({limit}) and float results may not "
        f"be exact (n={order})."
    )


def check_precision(
    subject: Subject,
    order: int,
    config: Optional[PrecisionConfig] = None,
) -> Tuple[PrecisionAdvisory, ...]:
    """
    Выдача advisory, если порядок превышает порог subject.

    Args:
        subject: FamilyId или SequenceId
        order: Провалидированный порядок n
        config: Пороги (default: PrecisionConfig())

    Returns:
        Пустой tuple или tuple из одного PrecisionAdvisory
    """
    config = config or PrecisionConfig()
    threshold = config.threshold_for(subject)

    if threshold is None or order <= threshold:
        return ()

    kind = _SPECIAL_KINDS.get(subject, AdvisoryKind.PRECISION_LOSS)
    advisory = PrecisionAdvisory(
        kind=kind,
        subject=subject.value,
        order=order,
        threshold=threshold,
        message=_advisory_message(kind, subject, order, threshold, config.float_exact_limit),
    )
    logger.warning("%s advisory for %s: %s", kind.value, subject.value, advisory.message)
    return (advisory,)


def fits_float64(buffer: TriangularBuffer, config: Optional[PrecisionConfig] = None) -> bool:
    """Все целые ячейки буфера точно представимы в float64 (to_numpy без потерь)."""
    limit = (config or PrecisionConfig()).float_exact_limit
    return all(
        is_exact_in_float64(value, limit)
        for row in buffer.rows
        for value in row
        if isinstance(value, int)
    )
