from GaussLab.linear_system.results import (
    Classification, Inconsistent, Infinite, Unique
)

SUBSCRIPT_ZERO = 0x2080


def generate_subscript(i: int) -> str:
    """ 12 -> '₁₂' """
    return ''.join(chr(SUBSCRIPT_ZERO + int(digit)) for digit in str(i))


def format_value(value: float) -> str:
    """ One decimal place, no integer zero: -0.2 -> '-.2', 4 -> '4.0' """
    text = f'{value:.1f}'
    if text.startswith('0.'):
        return text[1:]
    if text.startswith('-0.'):
        return '-' + text[2:]
    return text


def format_classification(result: Classification) -> str:
    match result:
        case Inconsistent():
            return '\nNo Solution'
        case Infinite():
            return '\nInfinitely many Solutions'
        case Unique(solution=solution):
            lines = [
                f'X{generate_subscript(i)} = {format_value(x)}\n'
                for i, x in enumerate(solution)
            ]
            return '\n'.join(lines)
    raise TypeError(f"Not a classification: {result!r}")


def pretty_print(result: Classification):
    print(format_classification(result))
