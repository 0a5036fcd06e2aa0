"""
Int Types — Описание целочисленных типов фиксированной разрядности

Python int не ограничен по разрядности, поэтому тип фиксированной ширины
описывается значением IntType, а поведение машины этой ширины (wraparound в
дополнительном коде) эмулируется методом IntType.wrap.

Модуль предоставляет:
- IntType: знаковые/беззнаковые типы 8/16/32/64 бит
- FloatType: float32/float64 с корректным округлением целых (round half to even)
- Интроспекцию диапазона: int_range, bit_width

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Границы диапазона вычисляются через wraparound самого типа, без сравнения
   с более широким типом
2. IntType и FloatType неизменяемы и хешируемы
3. Повторные вызовы int_range возвращают одну и ту же пару
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимые разрядности целых типов
INT_BIT_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64)

# Разрядность значащей части (включая неявный бит) для float типов
FLOAT_PRECISIONS: Final[dict[int, int]] = {32: 24, 64: 53}


# =============================================================================
# INT TYPE
# =============================================================================


class IntType(BaseModel):
    """
    Целочисленный тип фиксированной разрядности.

    Immutable модель (frozen=True): сравнение и хеширование по значению,
    поэтому IntType(bits=8, signed=True) == INT8.
    """

    bits: int = Field(..., description="Разрядность (8, 16, 32 или 64)")
    signed: bool = Field(..., description="Знаковый тип (дополнительный код)")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        """Проверка поддерживаемой разрядности."""
        if v not in INT_BIT_WIDTHS:
            raise ValueError(f"bits must be one of {INT_BIT_WIDTHS}, got {v}")
        return v

    def __str__(self) -> str:
        return self.name

    @property
    def name(self) -> str:
        """Имя типа в стиле int8/uint64."""
        prefix = "int" if self.signed else "uint"
        return f"{prefix}{self.bits}"

    @property
    def zero(self) -> int:
        """Нулевое значение типа (заполняет слот значения при отказе)."""
        return 0

    @property
    def minimum(self) -> int:
        """
        Минимальное значение типа.

        Для знакового типа единица сдвигается в знаковый разряд с wraparound,
        для беззнакового минимум равен нулю.
        """
        if not self.signed:
            return 0
        return self.wrap(1 << (self.bits - 1))

    @property
    def maximum(self) -> int:
        """
        Максимальное значение типа.

        Минимум, уменьшенный на единицу с wraparound: для беззнакового типа это
        0 - 1, для знакового — переход через границу от минимума к максимуму.
        """
        return self.wrap(self.minimum - 1)

    def wrap(self, value: int) -> int:
        """
        Приведение неограниченного целого к типу с wraparound.

        Эмулирует поведение машинной арифметики: берутся младшие bits разрядов,
        для знакового типа старший разряд интерпретируется как знак.

        Examples:
            >>> INT8.wrap(128)
            -128
            >>> UINT8.wrap(-1)
            255
        """
        mask = (1 << self.bits) - 1
        pattern = value & mask
        if self.signed and pattern >> (self.bits - 1):
            return pattern - (1 << self.bits)
        return pattern

    def contains(self, value: int) -> bool:
        """Проверка, что value представимо в типе."""
        return self.wrap(value) == value

    def unsigned(self) -> "IntType":
        """Беззнаковый тип той же разрядности."""
        return IntType(bits=self.bits, signed=False)

    def ensure_operands(self, *values: int) -> None:
        """
        Валидация операндов операции.

        Raises:
            TypeError: Если операнд не int (bool тоже отклоняется)
            ValueError: Если операнд вне диапазона типа
        """
        for value in values:
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"{self.name} operand must be int, got {type(value).__name__}"
                )
            if not self.contains(value):
                raise ValueError(f"{value} is out of range of {self.name}")


# =============================================================================
# FLOAT TYPE
# =============================================================================


class FloatType(BaseModel):
    """
    Тип с плавающей точкой IEEE 754.

    Python float является float64, float32 эмулируется округлением значащей
    части до 24 разрядов. Диапазон экспоненты float32 (~3.4e38) покрывает все
    64-битные целые, поэтому для целых достаточно округления значащей части.
    """

    bits: int = Field(..., description="Разрядность (32 или 64)")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        """Проверка поддерживаемой разрядности."""
        if v not in FLOAT_PRECISIONS:
            raise ValueError(f"bits must be one of {tuple(FLOAT_PRECISIONS)}, got {v}")
        return v

    def __str__(self) -> str:
        return self.name

    @property
    def name(self) -> str:
        return f"float{self.bits}"

    @property
    def precision(self) -> int:
        """Разрядность значащей части, включая неявный бит."""
        return FLOAT_PRECISIONS[self.bits]

    def from_int(self, number: int) -> float:
        """
        Конверсия целого в ближайшее представимое значение типа.

        Округление round half to even выполняется над самим целым, без
        промежуточного float64, поэтому для float32 нет двойного округления.

        Examples:
            >>> FLOAT32.from_int(16777217)
            16777216.0
            >>> FLOAT64.from_int(2**53 + 1)
            9007199254740992.0
        """
        magnitude = abs(number)
        excess = magnitude.bit_length() - self.precision
        if excess <= 0:
            return float(number)

        kept, dropped = divmod(magnitude, 1 << excess)
        half = 1 << (excess - 1)
        if dropped > half or (dropped == half and kept & 1):
            kept += 1

        rounded = float(kept << excess)
        return rounded if number >= 0 else -rounded


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ТИПЫ
# =============================================================================

INT8: Final[IntType] = IntType(bits=8, signed=True)
INT16: Final[IntType] = IntType(bits=16, signed=True)
INT32: Final[IntType] = IntType(bits=32, signed=True)
INT64: Final[IntType] = IntType(bits=64, signed=True)
UINT8: Final[IntType] = IntType(bits=8, signed=False)
UINT16: Final[IntType] = IntType(bits=16, signed=False)
UINT32: Final[IntType] = IntType(bits=32, signed=False)
UINT64: Final[IntType] = IntType(bits=64, signed=False)

INT_TYPES: Final[tuple[IntType, ...]] = (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
)

FLOAT32: Final[FloatType] = FloatType(bits=32)
FLOAT64: Final[FloatType] = FloatType(bits=64)


# =============================================================================
# ИНТРОСПЕКЦИЯ ДИАПАЗОНА
# =============================================================================


def int_range(int_type: IntType) -> tuple[int, int]:
    """
    Минимальное и максимальное значения типа.

    Examples:
        >>> int_range(INT8)
        (-128, 127)
        >>> int_range(UINT16)
        (0, 65535)
    """
    return int_type.minimum, int_type.maximum


def bit_width(int_type: IntType) -> int:
    """Разрядность типа."""
    return int_type.bits
