"""
转换规则表测试

- 添加规则：追加、原位替换、批量校验
- 查询规则：lookup / index / 成员判断
- 派生视图：状态、事件、终止状态
"""

import unittest

from flatfsm.core.state_machine import Transition, TransitionTable


def noop(fsm, data) -> bool:
    return True


class TestTransitionTableAdd(unittest.TestCase):
    """测试规则添加与替换"""

    def setUp(self) -> None:
        self.table: TransitionTable[str, str] = TransitionTable()

    def test_append_in_order(self) -> None:
        """不同的 (source, event) 按顺序追加"""
        t1 = Transition.of("A", "B", "x")
        t2 = Transition.of("B", "C", "y")
        t3 = Transition.of("A", "C", "z")
        self.table.add(t1, t2, t3)

        self.assertEqual(self.table.all(), [t1, t2, t3])
        self.assertEqual(len(self.table), 3)

    def test_replace_keeps_position(self) -> None:
        """重复的 (source, event) 原位替换，保留第一次的位置"""
        first = Transition.of("A", "B", "x")
        other = Transition.of("B", "C", "y")
        second = Transition.of("A", "C", "x", noop)

        self.table.add(first, other)
        self.table.add(second)

        transitions = self.table.all()
        self.assertEqual(len(transitions), 2)
        self.assertIs(transitions[0], second)
        self.assertEqual(transitions[0].target, "C")
        self.assertIs(transitions[0].action, noop)
        self.assertIs(transitions[1], other)

    def test_replace_within_one_batch(self) -> None:
        """同一批次中的重复规则也按从左到右的顺序替换"""
        first = Transition.of("A", "B", "x")
        second = Transition.of("A", "C", "x")
        self.table.add(first, second)

        self.assertEqual(self.table.all(), [second])

    def test_invalid_transition_rejects_batch(self) -> None:
        """任一规则字段为空时抛出 ValueError，且整批都不会被添加"""
        valid = Transition.of("A", "B", "x")
        for invalid in (
            Transition(source="A", target="B"),
            Transition(source="A", event="x"),
            Transition(target="B", event="x"),
            Transition.of("", "B", "x"),
        ):
            with self.assertRaises(ValueError):
                self.table.add(valid, invalid)
            self.assertEqual(len(self.table), 0)

    def test_clear(self) -> None:
        self.table.add(Transition.of("A", "B", "x"))
        self.table.clear()
        self.assertEqual(self.table.all(), [])


class TestTransitionTableLookup(unittest.TestCase):
    """测试规则查询"""

    def setUp(self) -> None:
        self.table: TransitionTable[str, str] = TransitionTable()
        self.ab = Transition.of("A", "B", "x")
        self.bc = Transition.of("B", "C", "y")
        self.table.add(self.ab, self.bc)

    def test_lookup(self) -> None:
        self.assertIs(self.table.lookup("A", "x"), self.ab)
        self.assertIs(self.table.lookup("B", "y"), self.bc)
        self.assertIsNone(self.table.lookup("A", "y"))
        self.assertIsNone(self.table.lookup(None, "x"))

    def test_index(self) -> None:
        self.assertEqual(self.table.index("A", "x"), 0)
        self.assertEqual(self.table.index("B", "y"), 1)
        self.assertEqual(self.table.index("C", "x"), -1)

    def test_contains(self) -> None:
        self.assertIn(("A", "x"), self.table)
        self.assertNotIn(("A", "y"), self.table)
        self.assertNotIn("A", self.table)

    def test_all_returns_copy(self) -> None:
        transitions = self.table.all()
        transitions.clear()
        self.assertEqual(len(self.table), 2)


class TestTransitionTableViews(unittest.TestCase):
    """测试派生视图"""

    def setUp(self) -> None:
        self.table: TransitionTable[str, str] = TransitionTable()

    def test_terminations(self) -> None:
        """A--x-->B, B--y-->C 的终止状态为 C"""
        self.table.add(Transition.of("A", "B", "x"), Transition.of("B", "C", "y"))
        self.assertEqual(self.table.terminations(), ["C"])

    def test_no_terminations_in_cycle(self) -> None:
        self.table.add(Transition.of("A", "B", "x"), Transition.of("B", "A", "y"))
        self.assertEqual(self.table.terminations(), [])

    def test_states_first_seen_order(self) -> None:
        self.table.add(
            Transition.of("B", "A", "x"),
            Transition.of("A", "C", "y"),
            Transition.of("C", "B", "x"),
        )
        self.assertEqual(self.table.states(), ["B", "A", "C"])

    def test_events_first_seen_order(self) -> None:
        self.table.add(
            Transition.of("B", "A", "y"),
            Transition.of("A", "C", "x"),
            Transition.of("C", "B", "y"),
        )
        self.assertEqual(self.table.events(), ["y", "x"])

    def test_empty_views(self) -> None:
        self.assertEqual(self.table.states(), [])
        self.assertEqual(self.table.events(), [])
        self.assertEqual(self.table.terminations(), [])


if __name__ == "__main__":
    unittest.main()
