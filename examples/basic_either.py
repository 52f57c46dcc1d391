"""
Basic Either usage: transformations, recovery and matching.

Run: python examples/basic_either.py
"""
import json

from eitherpy import Left, Right, json_default


def parse_int(s: str):
    try:
        return Right(int(s))
    except ValueError:
        return Left(f"not an int: {s!r}")


def main():
    for raw in ["20", "abc"]:
        res = parse_int(raw).map(lambda n: n * 2).flat_map(lambda n: Right(n) if n < 100 else Left("too big"))
        print(raw, "->", res)
        print("  get_or_else:", res.get_or_else(lambda err: -1))
        print("  match:", res.match(left=lambda e: f"error: {e}", right=lambda n: f"ok: {n}"))
        print("  flipped:", res.flip())
    print(json.dumps({"ok": Right(1), "err": Left("boom")}, default=json_default))


if __name__ == "__main__":
    main()
