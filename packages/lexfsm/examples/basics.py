"""Hello World -- the smallest useful lexfsm machine.

Demonstrates:
- Adding states and chaining transitions
- Running a sequence and reading Success / Failure
- Validating without side effects via call_actions=False

Run: python -m examples.basics
"""

from lexfsm import Failure, Machine


def main() -> None:
    print("=== A/B alternation ===\n")

    machine: Machine[str] = Machine()
    expect_a = machine.add_state(accepting=True)
    expect_b = machine.add_state()

    seen: list[str] = []
    machine[expect_a].on(expect_b, "A", seen.append)
    machine[expect_b].on(expect_a, "B", seen.append)

    for text in ("ABAB", "ABA", "AA"):
        result = machine.run(text)
        if isinstance(result, Failure):
            print(f"  {text!r:8} -> {result.message}")
        else:
            print(
                f"  {text!r:8} -> ended in state {result.final_state}"
                f"  (accepting={machine[result.final_state].accepting})"
            )

    print(f"\nActions saw: {''.join(seen)}")

    seen.clear()
    machine.run("ABAB", call_actions=False)
    print(f"After a validation-only run, actions saw: {''.join(seen)!r}")


if __name__ == "__main__":
    main()
