"""
Determinant — извлечение чисел Бернулли через определитель матрицы Хессенберга

Для чётного n >= 2:
    pascal = треугольник Паскаля порядка n+1
    H = tril(pascal[последние n строк, первые n столбцов], 1)
    det(H) считается точно на целых Python (H — нижняя матрица Хессенберга)
    B_n = sign(det) * exp(log|det| - lgamma(n+2)) = det / (n+1)!

Логарифмическая форма избегает переполнения (n+1)! при больших n.
Если |B_n| выходит за диапазон float64, возвращается ±inf.
Базовые случаи: B_0 = 1, B_1 = 1/2, B_n = 0 для нечётного n > 1.
"""

import math

import numpy as np

from numtri.core.domain.buffer import TriangularBuffer


def hessenberg_band(pascal: TriangularBuffer, size: int) -> np.ndarray:
    """
    Нижнетреугольная матрица с одной наддиагональю из буфера Паскаля.

    Args:
        pascal: треугольник Паскаля порядка size+1
        size: размер матрицы n

    Returns:
        Матрица size x size (dtype=object, элементы — точные int)
    """
    if pascal.order != size + 1:
        raise ValueError(f"pascal buffer of order {size + 1} required, got {pascal.order}")

    block = np.array([list(row[:size]) for row in pascal.rows[-size:]], dtype=object)
    return np.tril(block, 1)


def hessenberg_determinant(band: np.ndarray) -> int:
    """
    Точный определитель нижней матрицы Хессенберга (h[i][j] = 0 при j > i+1).

    Разложение ведущего минора D_k по последней строке (1-based):
        D_k = sum_i (-1)^(k-i) * h[k][i] * prod(h[j][j+1], j = i..k-1) * D_(i-1)

    Сумма считается по схеме Горнера: O(size^2) целочисленных операций.
    """
    rows = [[int(value) for value in row] for row in band.tolist()]
    minors = [1]

    for k in range(1, len(rows) + 1):
        last = rows[k - 1]
        acc = 0
        for i in range(1, k + 1):
            if i > 1:
                acc = -acc * rows[i - 2][i - 1]
            previous = minors[i - 1]
            if previous:
                acc += last[i - 1] * previous
        minors.append(acc)

    return minors[-1]


def bernoulli_from_determinant(n: int, pascal: TriangularBuffer) -> float:
    """
    Число Бернулли B_n для чётного n >= 2.

    Args:
        n: чётный порядок >= 2
        pascal: треугольник Паскаля порядка n+1

    Returns:
        B_n как float (знак берётся из определителя, ±inf вне диапазона float64)
    """
    determinant = hessenberg_determinant(hessenberg_band(pascal, n))
    if determinant == 0:
        return 0.0

    log_magnitude = math.log(abs(determinant)) - math.lgamma(n + 2)
    try:
        magnitude = math.exp(log_magnitude)
    except OverflowError:
        magnitude = math.inf

    return -magnitude if determinant < 0 else magnitude
