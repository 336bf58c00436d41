"""Tests for keyword-based image resolution."""

import pytest

from models.entities import ImageRef
from models.keyword_table import BAG, DEFAULT_IMAGE, DRESS, LIPSTICK, PERFUME, SHOES
from services.image_resolver import KeywordImageResolver, resolve


class TestResolve:
    """Tests for the built-in keyword table."""

    @pytest.mark.parametrize("name,expected", [
        ("perfume", PERFUME),
        ("Running Shoes", SHOES),
        ("my new bag", BAG),
        ("red DRESS", DRESS),
        ("waterproof mascara", LIPSTICK),
        ("عطر فرنسي", PERFUME),
        ("حقيبة يد", BAG),
    ])
    def test_matches_keywords(self, name, expected):
        """Names containing a keyword get that keyword's image."""
        assert resolve(name) == expected

    def test_substring_match_without_word_boundary(self):
        """'baggage' contains 'bag' and gets the bag image."""
        assert resolve("baggage") == BAG

    def test_empty_or_missing_name_gives_default(self):
        """Empty and None names get the default image."""
        assert resolve("") == DEFAULT_IMAGE
        assert resolve(None) == DEFAULT_IMAGE

    def test_no_match_gives_default(self):
        """Unknown names fall back to the default image."""
        assert resolve("apple") == DEFAULT_IMAGE
        assert resolve("   ") == DEFAULT_IMAGE

    def test_default_is_first_table_entry(self):
        """The fallback image is the perfume image."""
        assert DEFAULT_IMAGE == PERFUME

    def test_first_entry_wins(self):
        """A name matching two entries gets the earlier entry's image."""
        # "spray" (perfume) comes before "boot" (shoes) in the table
        assert resolve("boot spray") == PERFUME
        assert resolve("dress shoes") == SHOES

    def test_surrounding_whitespace_and_case(self):
        """Matching ignores case and surrounding whitespace."""
        assert resolve("  LIPSTICK  ") == LIPSTICK

    def test_deterministic(self):
        """Resolving the same name twice gives the same image."""
        assert resolve("sneaker") == resolve("sneaker")


class TestKeywordImageResolver:
    """Tests for resolvers built from custom tables."""

    def test_custom_table(self):
        """A custom table is scanned in order, keywords lower-cased."""
        apple = ImageRef(key="apple", filename="apple.png", emoji="🍎")
        car = ImageRef(key="car", filename="car.png", emoji="🚗")
        resolver = KeywordImageResolver([(["APPLE"], apple), (["car"], car)])

        assert resolver.resolve("green apple") == apple
        assert resolver("Race car") == car
        assert resolver.resolve("banana") == apple

    def test_explicit_default(self):
        """An explicit default overrides the first entry."""
        fallback = ImageRef(key="none", filename="none.png", emoji="❔")
        resolver = KeywordImageResolver(default=fallback)

        assert resolver.resolve("banana") == fallback
        assert resolver.resolve("bag") == BAG
