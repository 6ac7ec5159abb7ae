"""Family — идентификаторы семейств треугольников и производных последовательностей.

FamilyId   — треугольные массивы, которые умеет строить engine
SequenceId — скалярные последовательности, извлекаемые из готовых треугольников
"""

from enum import Enum


class FamilyId(str, Enum):
    """Семейство числового треугольника."""

    PASCAL = "PASCAL"
    BELL = "BELL"
    CATALAN = "CATALAN"
    EULERIAN = "EULERIAN"
    RASCAL = "RASCAL"
    LOZANIC = "LOZANIC"
    TRINOMIAL = "TRINOMIAL"
    CLARK = "CLARK"
    LEIBNIZ = "LEIBNIZ"
    SEA = "SEA"  # Seidel–Entringer–Arnold
    BERNOULLI_TRIANGLE = "BERNOULLI_TRIANGLE"
    FLOYD = "FLOYD"
    SIERPINSKI = "SIERPINSKI"


class SequenceId(str, Enum):
    """Скалярная последовательность.

    BELL/CATALAN/CAKE/LAZY_CATERER/MOSER/BERNOULLI индексируются только n,
    EULERIAN/ENTRINGER — парой (n, k).
    """

    BELL = "BELL"
    CATALAN = "CATALAN"
    CAKE = "CAKE"
    LAZY_CATERER = "LAZY_CATERER"
    MOSER = "MOSER"
    BERNOULLI = "BERNOULLI"
    EULERIAN = "EULERIAN"
    ENTRINGER = "ENTRINGER"


# Последовательности с двумя индексами (n, k)
INDEXED_SEQUENCES = frozenset({SequenceId.EULERIAN, SequenceId.ENTRINGER})
