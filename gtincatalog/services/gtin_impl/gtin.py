"""
GTIN (Global Trade Item Number) value type.

Every GTIN is held in canonical GTIN-14 form: a tuple of 14 digits, left-padded
with zeros, where index 13 is the check digit. Shorter native codes (GTIN-8,
GTIN-12, GTIN-13) occupy the trailing positions, so their type can be inferred
from where the first significant digit sits.

Construction never checks the checksum. Validity is queried explicitly through
`is_check_digit_valid()`, `classify()` and `is_valid()`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Sequence, Tuple, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import GTINClassificationError, GTINInvariantError, GTINParseError

GTIN_LENGTH = 14
CHECK_DIGIT_INDEX = GTIN_LENGTH - 1
_ASCII_DIGITS = frozenset("0123456789")


class GTINType(Enum):
    GTIN8 = "GTIN-8"
    GTIN12 = "GTIN-12"
    GTIN13 = "GTIN-13"
    GTIN14 = "GTIN-14"


# Position of the first significant digit for each type.
_INDICATOR_INDEX = {
    GTINType.GTIN14: 0,
    GTINType.GTIN13: 1,
    GTINType.GTIN12: 2,
    GTINType.GTIN8: 6,
}


@dataclass(frozen=True)
class GTIN:
    """Immutable 14-digit GTIN in canonical, zero-padded form."""

    digits: Tuple[int, ...]

    def __post_init__(self) -> None:
        # Freeze whatever sequence the caller handed in; values are trusted.
        object.__setattr__(self, "digits", tuple(self.digits))

    @classmethod
    def from_digits(cls, digits: Sequence[int]) -> "GTIN":
        """Builds a GTIN from 14 digits without any validation."""
        return cls(tuple(digits))

    @classmethod
    def parse(cls, value: str) -> "GTIN":
        """
        Parses a 14-character decimal string.

        Args:
            value: Exactly 14 ASCII digits, no separators.

        Returns:
            The parsed GTIN. The check digit is not verified.

        Raises:
            GTINParseError: If the length is not 14 or a character is not a digit.
        """
        if len(value) != GTIN_LENGTH:
            raise GTINParseError(f"Invalid GTIN: expected {GTIN_LENGTH} characters, got {len(value)}.")
        for position, char in enumerate(value):
            if char not in _ASCII_DIGITS:
                raise GTINParseError(f"Invalid GTIN: non-digit character {char!r} at position {position}.")
        return cls(tuple(int(char) for char in value))

    def classify(self) -> GTINType:
        """
        Infers the native GTIN type from the zero padding.

        Raises:
            GTINClassificationError: If the digits match no GTIN shape.
        """
        if self.digits[0] != 0:
            return GTINType.GTIN14
        if self.digits[1] != 0:
            return GTINType.GTIN13
        if self.digits[2] != 0:
            return GTINType.GTIN12
        if not any(self.digits[2:6]) and self.digits[6] != 0:
            return GTINType.GTIN8
        raise GTINClassificationError("Invalid GTIN: no recognized GTIN shape.")

    def indicator_digit(self) -> int:
        """Returns the first significant digit of the classified type, always 1-9."""
        digit = self.digits[_INDICATOR_INDEX[self.classify()]]
        if digit == 0:
            raise GTINInvariantError(f"Indicator digit of {self} resolved to zero.")
        return digit

    def leading_zeros(self) -> int:
        count = 0
        for digit in self.digits:
            if digit != 0:
                break
            count += 1
        return count

    def check_digit(self) -> int:
        """Returns the stored check digit as-is."""
        return self.digits[CHECK_DIGIT_INDEX]

    def calculate_check_digit(self) -> int:
        """
        Computes the GS1 mod-10 check digit over the 13 payload digits.

        Even positions weigh 3 and odd positions weigh 1; zero padding
        contributes nothing.
        """
        total = sum(digit * (3 if index % 2 == 0 else 1) for index, digit in enumerate(self.digits[:CHECK_DIGIT_INDEX]))
        return (10 - (total % 10)) % 10

    def is_check_digit_valid(self) -> bool:
        return self.check_digit() == self.calculate_check_digit()

    def is_valid(self) -> bool:
        """True when the checksum matches and the shape is recognized."""
        if not self.is_check_digit_valid():
            return False
        try:
            self.classify()
        except GTINClassificationError:
            return False
        return True

    def as_array(self) -> List[int]:
        """Returns a mutable copy of the digits."""
        return list(self.digits)

    def as_slice(self) -> Tuple[int, ...]:
        """Returns the read-only digit tuple."""
        return self.digits

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self.digits)

    def __len__(self) -> int:
        return len(self.digits)

    def __iter__(self) -> Iterator[int]:
        return iter(self.digits)

    def __getitem__(self, index: Union[int, slice]) -> Union[int, Tuple[int, ...]]:
        return self.digits[index]

    @classmethod
    def _validate(cls, value: str) -> "GTIN":
        try:
            return cls.parse(value)
        except GTINParseError as e:
            # pydantic only reports ValueError as a field validation error.
            raise ValueError(str(e)) from e

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        """Lets pydantic models declare GTIN fields that read and write the 14-digit string."""
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls._validate),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
