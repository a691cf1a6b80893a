SUPPORTED_BASES = (2, 8, 10, 16)

# values are kept inside the signed 64-bit range
MAX_VALUE = 2**63 - 1

# longest input echoed back in error messages
MAX_ECHO = 24

HEX_TO_VALUE = {
    **{str(d): d for d in range(10)},
    **{c: 10 + i for i, c in enumerate("abcdef")},
    **{c: 10 + i for i, c in enumerate("ABCDEF")},
}
VALUE_TO_DIGIT = "0123456789ABCDEF"


class ConversionError(ValueError):
    pass


class EmptyInput(ConversionError):
    def __init__(self):
        super().__init__("Empty input!")


class InvalidDigit(ConversionError):
    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        if base == 16:
            message = f"Invalid hexadecimal digit '{char}'"
        else:
            message = f"Invalid digit '{char}' for base {base}"
        super().__init__(message)


class ValueOutOfRange(ConversionError):
    def __init__(self, digits: str, base: int):
        self.digits = digits
        self.base = base
        if len(digits) > MAX_ECHO:
            digits = f"{digits[:MAX_ECHO]}... ({len(digits)} digits)"
        super().__init__(
            f"'{digits}' in base {base} does not fit in a 64-bit signed integer "
            f"(max {MAX_VALUE})."
        )


def check_base(base: int) -> int:
    if base not in SUPPORTED_BASES:
        raise ValueError(
            f"Only these bases are supported: {', '.join(map(str, SUPPORTED_BASES))}."
        )
    return base


def digit_value(char: str, base: int) -> int:
    if base == 16:
        if char not in HEX_TO_VALUE:
            raise InvalidDigit(char, base)
        value = HEX_TO_VALUE[char]
    else:
        value = ord(char) - ord("0")

    if value < 0 or value >= base:
        raise InvalidDigit(char, base)
    return value


def decode(digits: str, base: int) -> int:
    """Turn a digit string (most significant first) into an int.

    Raises InvalidDigit on the first character that is not a digit of
    ``base`` and ValueOutOfRange when the number does not fit in MAX_VALUE.
    """
    check_base(base)
    if not digits:
        raise EmptyInput()

    value = 0
    power = 1
    for char in reversed(digits):
        digit = digit_value(char, base)
        value += digit * power
        if value > MAX_VALUE:
            raise ValueOutOfRange(digits, base)
        power *= base
    return value


def encode(value: int, base: int) -> str:
    check_base(base)
    if value < 0:
        raise ValueError("Negative numbers are not supported.")
    if value == 0:
        return "0"

    digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(VALUE_TO_DIGIT[remainder])
    return "".join(reversed(digits))


def parse_decimal(text: str) -> int:
    if not text:
        raise EmptyInput()

    for char in text:
        if not "0" <= char <= "9":
            raise InvalidDigit(char, 10)

    value = 0
    for char in text:
        value = value * 10 + (ord(char) - ord("0"))
        if value > MAX_VALUE:
            raise ValueOutOfRange(text, 10)
    return value
