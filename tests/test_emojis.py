from __future__ import annotations

import unittest

from reactnav.pagination import DEFAULT_EMOJIS
from reactnav.pagination import Action
from reactnav.pagination import ControlEmojis

STAR = "\N{WHITE MEDIUM STAR}"


class ControlEmojisTest(unittest.TestCase):
    def test_defaults_in_order(self):
        emojis = ControlEmojis()

        self.assertEqual(
            [action for action, _ in emojis],
            [Action.TO_BEGIN, Action.BACKWARD, Action.FORWARD, Action.TO_END, Action.STOP],
        )
        self.assertEqual(emojis.emojis, list(DEFAULT_EMOJIS.values()))

    def test_unset_entries_fall_back_to_defaults(self):
        emojis = ControlEmojis(stop=STAR)

        self.assertEqual(emojis[Action.STOP], STAR)
        self.assertEqual(emojis[Action.FORWARD], DEFAULT_EMOJIS[Action.FORWARD])
        self.assertEqual(len(emojis), 5)

    def test_lookup(self):
        emojis = ControlEmojis(forward=STAR)

        self.assertIs(emojis.action_for(STAR), Action.FORWARD)
        self.assertIs(emojis.action_for(STAR + "\N{VARIATION SELECTOR-16}"), Action.FORWARD)
        self.assertIsNone(emojis.action_for(DEFAULT_EMOJIS[Action.FORWARD]))
        self.assertIsNone(emojis.action_for("\N{THUMBS UP SIGN}"))

    def test_duplicates_are_rejected(self):
        with self.assertRaises(ValueError):
            ControlEmojis(forward=STAR, backward=STAR)

        with self.assertRaises(ValueError):
            ControlEmojis(stop=DEFAULT_EMOJIS[Action.TO_END])

    def test_empty_is_rejected(self):
        with self.assertRaises(ValueError):
            ControlEmojis(stop="")

    def test_from_mapping(self):
        emojis = ControlEmojis.from_mapping({"toBegin": STAR, "stop": "\N{CROSS MARK}", "bogus": "x"})

        self.assertEqual(emojis[Action.TO_BEGIN], STAR)
        self.assertEqual(emojis[Action.STOP], "\N{CROSS MARK}")
        self.assertEqual(emojis[Action.TO_END], DEFAULT_EMOJIS[Action.TO_END])

    def test_from_empty_mapping(self):
        self.assertEqual(ControlEmojis.from_mapping(None), ControlEmojis())

    def test_from_mapping_rejects_non_mappings(self):
        with self.assertRaises(TypeError):
            ControlEmojis.from_mapping([STAR])

    def test_mapping_round_trip(self):
        emojis = ControlEmojis(to_end=STAR)
        self.assertEqual(ControlEmojis.from_mapping(emojis.to_mapping()), emojis)


if __name__ == "__main__":
    unittest.main()
