"""Eased sequences -- the smallest useful tick-ease program.

Demonstrates:
- Building a sequence with a named constructor
- Pulling values one at a time with next()
- Collecting a whole sequence with list()
- Looking a curve up by name with ease()

Run: python examples/basics.py
"""

from tick_ease import EASERS, ease, quad_in, sin_inout


def main() -> None:
    print("=== Eased sequences ===\n")

    # Nothing is computed until values are pulled.
    seq = quad_in(0.0, 10.0, 3)
    print(f"  {seq!r}")
    print(f"  first value: {next(seq)}")
    print(f"  rest: {list(seq)}\n")

    # A fresh call gives a fresh sequence.
    print(f"  sin_inout(-1, 1, 5): {list(sin_inout(-1.0, 1.0, 5))}\n")

    for name in ("linear", "cubic_out", "exp_inout"):
        values = ", ".join(f"{v:7.2f}" for v in ease(name, 0.0, 100.0, 6))
        print(f"  {name:<12} {values}")

    print(f"\n{len(EASERS)} curve names registered.")


if __name__ == "__main__":
    main()
