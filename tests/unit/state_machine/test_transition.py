"""
转换规则与转换错误测试
"""

import unittest

from pydantic import ValidationError

from flatfsm.core.state_machine import (
    BaseStateMachine,
    Transition,
    TransitionError,
    is_no_transition,
    is_suspended,
    source,
    target,
)


def allow(fsm, data) -> bool:
    return True


def fields(t: Transition) -> tuple:
    return (t.source, t.target, t.event, t.action)


class TestTransitionBuilder(unittest.TestCase):
    """测试转换规则的构建方法"""

    def test_of(self) -> None:
        t = Transition.of("A", "B", "x", allow)
        self.assertEqual((t.source, t.target, t.event), ("A", "B", "x"))
        self.assertIs(t.action, allow)
        self.assertTrue(t.is_valid())

    def test_builders_return_copies(self) -> None:
        partial = source("A")
        full = partial.with_target("B").with_event("x").with_action(allow)

        self.assertIsNone(partial.target)
        self.assertIsNone(partial.event)
        self.assertFalse(partial.is_valid())
        self.assertEqual(fields(full), ("A", "B", "x", allow))

    def test_target_builder(self) -> None:
        t = target("B").with_source("A").with_event("x")
        self.assertEqual(fields(t), ("A", "B", "x", None))

    def test_transition_is_frozen(self) -> None:
        t = Transition.of("A", "B", "x")
        with self.assertRaises(ValidationError):
            t.target = "C"  # type: ignore[misc]

    def test_action_must_be_callable(self) -> None:
        with self.assertRaises(ValidationError):
            Transition(source="A", target="B", event="x", action="not callable")  # type: ignore[arg-type]

    def test_add_to_machine(self) -> None:
        fsm: BaseStateMachine[str, str] = BaseStateMachine()
        Transition.of("A", "B", "x").add(fsm)
        self.assertEqual([fields(t) for t in fsm.get_transitions()], [("A", "B", "x", None)])


class TestTransitionError(unittest.TestCase):
    """测试转换错误的判定方法"""

    def test_no_transition(self) -> None:
        err = TransitionError("x")
        self.assertTrue(err.is_no_transition())
        self.assertFalse(err.is_suspended())
        self.assertEqual(str(err), "no transition for the event 'x'")

    def test_suspended(self) -> None:
        err = TransitionError("x", "A", "B")
        self.assertTrue(err.is_suspended())
        self.assertFalse(err.is_no_transition())
        self.assertEqual(str(err), "source state 'A' transition for the event 'x' is suspended")

    def test_predicates_on_other_values(self) -> None:
        for value in (None, ValueError("x"), "x"):
            self.assertFalse(is_suspended(value))
            self.assertFalse(is_no_transition(value))

    def test_equality(self) -> None:
        self.assertEqual(TransitionError("x", "A", "B"), TransitionError("x", "A", "B"))
        self.assertNotEqual(TransitionError("x", "A", "B"), TransitionError("x"))
        self.assertEqual(len({TransitionError("x"), TransitionError("x")}), 1)

    def test_can_be_raised(self) -> None:
        with self.assertRaises(TransitionError):
            raise TransitionError("x")


if __name__ == "__main__":
    unittest.main()
