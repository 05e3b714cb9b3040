import logging
import sys

from GaussLab.linear_system.elimination import GaussianElimination
from GaussLab.linear_system.formatting import pretty_print
from GaussLab.linear_system.loader import load_file


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv:
        file_name = argv[0]
    else:
        file_name = input("Enter the filename: ")

    try:
        augmented = load_file(file_name)
        result = GaussianElimination(augmented).solve()
    except FileNotFoundError as err:
        print(f"\nFile not found: {err.filename} ({err.strerror})")
        return 1
    except ValueError as err:
        print(f"\nInvalid input: {err}")
        return 1

    pretty_print(result)
    return 0


def run():
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())


if __name__ == "__main__":
    run()
