"""Error conditions, logging and concurrent runs."""

import logging
import threading

import pytest

from lexfsm import InvalidTargetError, Machine, Success

# --- Dangling targets ---


def test_dangling_target_raises_when_taken():
    machine = Machine()
    s = machine.add_state()
    machine[s].on(s, "a").on(5, "b")

    with pytest.raises(InvalidTargetError) as exc_info:
        machine.run("aab")

    err = exc_info.value
    assert (err.state, err.index, err.target) == (0, 1, 5)
    assert err.position == 3
    assert err.state_count == 1
    assert "Transition 1 of state 0 targets unknown state 5" in str(err)


def test_dangling_target_is_an_index_error():
    machine = Machine()
    s = machine.add_state()
    machine[s].on(1, "a")
    with pytest.raises(IndexError):
        machine.run("a")


def test_negative_target_raises():
    machine = Machine()
    s = machine.add_state()
    machine[s].on(-1, "a")
    with pytest.raises(InvalidTargetError) as exc_info:
        machine.run("a")
    assert exc_info.value.target == -1


def test_dangling_target_not_taken_is_harmless():
    machine = Machine()
    s = machine.add_state()
    machine[s].on(s, "a").on(9, "b")
    assert machine.run("aaa") == Success(0)


def test_dangling_target_fixed_by_adding_state():
    """Targets are resolved at run time against the current state list."""
    machine = Machine()
    s = machine.add_state()
    machine[s].on(1, "a")
    with pytest.raises(InvalidTargetError):
        machine.run("a")
    machine.add_state()
    assert machine.run("a") == Success(1)


def test_dangling_target_action_called_before_error():
    """The action sees the accepted symbol before the target is resolved."""
    seen = []
    machine = Machine()
    s = machine.add_state()
    machine[s].on(3, "a", seen.append)
    with pytest.raises(InvalidTargetError):
        machine.run("a")
    assert seen == ["a"]


def test_dangling_target_without_actions_still_raises():
    seen = []
    machine = Machine()
    s = machine.add_state()
    machine[s].on(3, "a", seen.append)
    with pytest.raises(InvalidTargetError):
        machine.run("a", call_actions=False)
    assert seen == []


# --- Machines with no states ---


def test_empty_machine_empty_input():
    assert Machine().run([]) == Success(0)


def test_empty_machine_non_empty_input_raises():
    with pytest.raises(IndexError, match="no states"):
        Machine().run("a")


# --- Caller callbacks pass through ---


def test_predicate_exception_propagates_unwrapped():
    class Boom(Exception):
        pass

    def predicate(symbol):
        raise Boom(symbol)

    machine = Machine()
    s = machine.add_state()
    machine[s].when(s, predicate)
    with pytest.raises(Boom):
        machine.run("a")


def test_action_exception_propagates_unwrapped():
    def action(symbol):
        raise ValueError(f"cannot emit {symbol}")

    machine = Machine()
    s = machine.add_state()
    machine[s].on(s, "a", action)
    with pytest.raises(ValueError, match="cannot emit a"):
        machine.run("a")
    # Suppressed actions cannot fail.
    assert machine.run("a", call_actions=False) == Success(0)


# --- Logging ---


def test_logs_transitions_at_debug(caplog):
    machine = Machine()
    s = machine.add_state()
    machine[s].on(s, "a")
    with caplog.at_level(logging.DEBUG, logger="lexfsm"):
        machine.run("ab")
    messages = [r.getMessage() for r in caplog.records]
    assert "0 -> 0 on 'a' at position 1" in messages
    assert "state 0 rejected 'b' at position 2" in messages


def test_no_debug_records_by_default(caplog):
    machine = Machine()
    s = machine.add_state()
    machine[s].on(s, "a")
    with caplog.at_level(logging.WARNING, logger="lexfsm"):
        machine.run("aab")
    assert caplog.records == []


def test_logs_dangling_target_at_error(caplog):
    machine = Machine()
    s = machine.add_state()
    machine[s].on(4, "a")
    with caplog.at_level(logging.ERROR, logger="lexfsm"):
        with pytest.raises(InvalidTargetError):
            machine.run("a")
    assert [r.levelno for r in caplog.records] == [logging.ERROR]


# --- Concurrency ---


def test_concurrent_runs_share_one_machine():
    machine = Machine()
    even = machine.add_state(accepting=True)
    odd = machine.add_state()
    machine[even].on(odd, "1").on(even, "0")
    machine[odd].on(even, "1").on(odd, "0")

    inputs = ["1" * n + "0" * n for n in range(1, 40)]
    expected = {text: machine.run(text) for text in inputs}
    results: dict[str, object] = {}
    lock = threading.Lock()

    def worker(chunk):
        for text in chunk:
            result = machine.run(text)
            with lock:
                results[text] = result

    threads = [threading.Thread(target=worker, args=(inputs[i::4],)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == expected
