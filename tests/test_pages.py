from __future__ import annotations

import unittest

import discord

from reactnav import errors
from reactnav.features.pages import build_embeds
from reactnav.features.pages import split_pages
from reactnav.pagination import PageStore
from reactnav.pagination import validate_embed


class ValidateEmbedTest(unittest.TestCase):
    def test_accepts_a_normal_embed(self):
        embed = discord.Embed(title="Hello", description="World")
        self.assertIs(validate_embed(embed), embed)

    def test_accepts_fields_only(self):
        embed = discord.Embed()
        embed.add_field(name="a", value="b")
        validate_embed(embed)

    def test_rejects_non_embeds(self):
        with self.assertRaises(errors.InvalidPage):
            validate_embed({"title": "Hello"})

    def test_rejects_empty_embeds(self):
        with self.assertRaises(errors.InvalidPage):
            validate_embed(discord.Embed())

    def test_rejects_long_title(self):
        with self.assertRaises(errors.InvalidPage):
            validate_embed(discord.Embed(title="x" * 257))

    def test_rejects_long_field_value(self):
        embed = discord.Embed(title="t")
        embed.add_field(name="n", value="v" * 1025)
        with self.assertRaises(errors.InvalidPage):
            validate_embed(embed)

    def test_rejects_too_many_fields(self):
        embed = discord.Embed(title="t")
        for i in range(26):
            embed.add_field(name=str(i), value=str(i))
        with self.assertRaises(errors.InvalidPage):
            validate_embed(embed)

    def test_rejects_too_much_text_overall(self):
        embed = discord.Embed(title="t", description="d" * 4000)
        embed.add_field(name="n", value="v" * 1000)
        embed.add_field(name="n", value="v" * 1000)
        with self.assertRaises(errors.InvalidPage):
            validate_embed(embed)

    def test_ignores_footer_that_gets_replaced(self):
        embed = discord.Embed(title="t", description="d" * 4000)
        embed.set_footer(text="f" * 2100)

        self.assertIs(validate_embed(embed), embed)

        store = PageStore()
        store.append(embed)
        self.assertEqual(store.stamp(0).footer.text, "1/1")


class PageStoreTest(unittest.TestCase):
    def test_stamp_sets_position_footer(self):
        store = PageStore()
        for embed in build_embeds(["a", "b", "c"]):
            store.append(embed)

        self.assertEqual(store.stamp(1).footer.text, "2/3")
        self.assertEqual(store[1].footer.text, "2/3")
        self.assertIsNone(store[0].footer.text)

    def test_stamp_keeps_footer_icon(self):
        store = PageStore()
        embed = discord.Embed(title="a")
        embed.set_footer(text="old", icon_url="https://example.com/icon.png")
        store.append(embed)

        page = store.stamp(0)

        self.assertEqual(page.footer.text, "1/1")
        self.assertEqual(page.footer.icon_url, "https://example.com/icon.png")

    def test_frozen_store_rejects_pages(self):
        store = PageStore()
        store.append(discord.Embed(title="a"))
        store.freeze()

        with self.assertRaises(errors.AlreadyRunning):
            store.append(discord.Embed(title="b"))
        self.assertEqual(len(store), 1)

    def test_empty_store_is_falsy(self):
        self.assertFalse(PageStore())


class SplitPagesTest(unittest.TestCase):
    def test_splits_on_rule_lines(self):
        text = "first page\n---\nsecond\npage\n  ---  \nthird"
        self.assertEqual(split_pages(text), ["first page", "second\npage", "third"])

    def test_drops_empty_pages(self):
        self.assertEqual(split_pages("---\nonly\n---\n---\n"), ["only"])

    def test_dashes_inside_lines_do_not_split(self):
        self.assertEqual(split_pages("a --- b"), ["a --- b"])


if __name__ == "__main__":
    unittest.main()
