"""
Validating readers composed through Either.as_, with failures logged.

Run: python examples/validation_readers.py
"""
from eitherpy import ConsoleLogger, Either, Reads, Right, number, string


def main():
    logger = ConsoleLogger(level="DEBUG")
    read_as_error = Reads.unit(lambda v: Right.unit(ValueError(v)))
    age = Either.as_(read_as_error, number).logged(logger, "age")
    for v in [42, "forty-two"]:
        print(v, "->", age.get_value(v))

    name = string.map(str.strip).logged(logger, "name")
    print(name.get_value("  Ada "), name.get_value(7))


if __name__ == "__main__":
    main()
