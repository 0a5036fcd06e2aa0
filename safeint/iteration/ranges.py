"""Ranges — безопасная итерация по значениям целочисленного типа.

Итераторы проходят значения от begin до end включительно и никогда не
зацикливаются из-за переполнения счётчика:
- iter_range / inc / dec: шаг единица, end выдаётся после тела цикла, поэтому
  счётчик не выходит за экстремальное значение
- step / inc_step / dec_step: произвольный положительный шаг, пары
  (индекс, значение); итерация прекращается, когда следующее значение проходит
  end или шаг с wraparound «откатывает» счётчик назад (переполнение)

Итераторы ленивые и перезапускаемые: каждый вызов создаёт новый генератор.
Нулевой или отрицательный шаг — ошибка программиста, выбрасывается сразу при
вызове, а не при первой итерации.
"""

from typing import Iterator

from safeint.core.domain.int_types import IntType
from safeint.core.errors import IterStepNegative, IterStepZero
from safeint.core.math.machine import add_wrapping, sub_wrapping
from safeint.core.math.primitives import distance


# =============================================================================
# ШАГ ЕДИНИЦА
# =============================================================================


def _forward(int_type: IntType, begin: int, end: int) -> Iterator[int]:
    number = begin
    while number < end:
        yield number
        number = add_wrapping(int_type, number, 1)

    yield end


def _backward(int_type: IntType, begin: int, end: int) -> Iterator[int]:
    number = begin
    while number > end:
        yield number
        number = sub_wrapping(int_type, number, 1)

    yield end


def iter_range(int_type: IntType, begin: int, end: int) -> Iterator[int]:
    """
    Значения от begin до end включительно с шагом единица.

    Если begin > end, значения уменьшаются, иначе увеличиваются.

    Examples:
        >>> list(iter_range(INT8, 126, 127))
        [126, 127]
        >>> list(iter_range(UINT8, 1, 0))
        [1, 0]
    """
    int_type.ensure_operands(begin, end)

    if begin > end:
        return _backward(int_type, begin, end)

    return _forward(int_type, begin, end)


def inc(int_type: IntType, begin: int, end: int) -> Iterator[int]:
    """Возрастающие значения от begin до end включительно; пусто если begin > end."""
    int_type.ensure_operands(begin, end)

    if begin > end:
        return iter(())

    return _forward(int_type, begin, end)


def dec(int_type: IntType, begin: int, end: int) -> Iterator[int]:
    """Убывающие значения от begin до end включительно; пусто если begin < end."""
    int_type.ensure_operands(begin, end)

    if begin < end:
        return iter(())

    return _backward(int_type, begin, end)


# =============================================================================
# ПРОИЗВОЛЬНЫЙ ШАГ
# =============================================================================


def _ensure_step(int_type: IntType, begin: int, end: int, step_size: int) -> None:
    int_type.ensure_operands(begin, end)

    if step_size == 0:
        raise IterStepZero()
    if step_size < 0:
        raise IterStepNegative(step_size)

    int_type.ensure_operands(step_size)


def _forward_step(
    int_type: IntType, begin: int, end: int, step_size: int
) -> Iterator[tuple[int, int]]:
    index = 0
    number = begin

    while True:
        yield index, number

        following = add_wrapping(int_type, number, step_size)

        # Откат назад означает переполнение счётчика
        if following < number or following > end:
            return

        number = following
        index += 1


def _backward_step(
    int_type: IntType, begin: int, end: int, step_size: int
) -> Iterator[tuple[int, int]]:
    index = 0
    number = begin

    while True:
        yield index, number

        following = sub_wrapping(int_type, number, step_size)

        if following > number or following < end:
            return

        number = following
        index += 1


def step(
    int_type: IntType, begin: int, end: int, step_size: int
) -> Iterator[tuple[int, int]]:
    """
    Пары (индекс, значение) от begin к end с шагом step_size.

    Если begin > end, значения уменьшаются, иначе увеличиваются. end выдаётся
    только если на него попадает шаг.

    Args:
        int_type: Тип значений
        begin: Начальное значение
        end: Граница (включительно)
        step_size: Положительный шаг

    Raises:
        IterStepZero: Если step_size == 0
        IterStepNegative: Если step_size < 0

    Examples:
        >>> list(step(INT8, 126, 127, 2))
        [(0, 126)]
        >>> list(step(INT8, -128, 127, 100))
        [(0, -128), (1, -28), (2, 72)]
    """
    _ensure_step(int_type, begin, end, step_size)

    if begin > end:
        return _backward_step(int_type, begin, end, step_size)

    return _forward_step(int_type, begin, end, step_size)


def inc_step(
    int_type: IntType, begin: int, end: int, step_size: int
) -> Iterator[tuple[int, int]]:
    """Возрастающий вариант step; пусто если begin > end."""
    _ensure_step(int_type, begin, end, step_size)

    if begin > end:
        return iter(())

    return _forward_step(int_type, begin, end, step_size)


def dec_step(
    int_type: IntType, begin: int, end: int, step_size: int
) -> Iterator[tuple[int, int]]:
    """Убывающий вариант step; пусто если begin < end."""
    _ensure_step(int_type, begin, end, step_size)

    if begin < end:
        return iter(())

    return _backward_step(int_type, begin, end, step_size)


# =============================================================================
# РАЗМЕР
# =============================================================================


def iter_size(int_type: IntType, begin: int, end: int) -> int:
    """
    Количество значений, которые выдаст iter_range(int_type, begin, end).

    Examples:
        >>> iter_size(INT8, -128, 127)
        256
    """
    return distance(int_type, begin, end) + 1


def iter_step_size(int_type: IntType, begin: int, end: int, step_size: int) -> int:
    """
    Количество значений, которые выдаст step(int_type, begin, end, step_size).

    Examples:
        >>> iter_step_size(INT8, -128, 127, 86)
        3
    """
    _ensure_step(int_type, begin, end, step_size)

    return distance(int_type, begin, end) // step_size + 1
