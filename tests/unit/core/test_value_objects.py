"""
Unit tests for core value objects.
"""
import re

import pytest

from core.domain.exceptions import InvalidInputError
from core.domain.value_objects import BrandSlug, BrandType, ImageType, generate_slug

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class TestGenerateSlug:
    """Tests for title to slug derivation."""

    def test_simple_title(self):
        """Test a plain Latin title."""
        assert generate_slug("Dior") == "dior"

    def test_spaces_become_hyphens(self):
        """Test words are joined with hyphens."""
        assert generate_slug("Maison Francis Kurkdjian") == "maison-francis-kurkdjian"

    def test_cyrillic_title_is_transliterated(self):
        """Test non-Latin titles produce a Latin slug."""
        slug = generate_slug("Диор")

        assert slug == "dior"
        assert SLUG_PATTERN.match(slug)

    def test_accents_are_stripped(self):
        """Test accented characters are folded to ASCII."""
        assert generate_slug("Lancôme") == "lancome"

    def test_punctuation_is_dropped(self):
        """Test symbols do not leave doubled or edge hyphens."""
        slug = generate_slug("  Dolce & Gabbana!  ")

        assert slug == "dolce-gabbana"
        assert SLUG_PATTERN.match(slug)

    def test_underscores_become_hyphens(self):
        """Test underscores are normalised."""
        assert generate_slug("yves_saint_laurent") == "yves-saint-laurent"

    def test_same_title_same_slug(self):
        """Test derivation is deterministic."""
        assert generate_slug("Chanel No 5") == generate_slug("Chanel No 5")

    @pytest.mark.parametrize("title", ["", "   ", "!!!", "&&"])
    def test_unsluggable_title(self, title):
        """Test titles with nothing sluggable are rejected."""
        with pytest.raises(InvalidInputError):
            generate_slug(title)


class TestBrandSlug:
    """Tests for BrandSlug value object."""

    def test_valid_slug(self):
        """Test valid brand slug."""
        slug = BrandSlug("dior")
        assert str(slug) == "dior"

    def test_valid_slug_with_hyphens(self):
        """Test valid slug with hyphens."""
        slug = BrandSlug("tom-ford")
        assert str(slug) == "tom-ford"

    def test_from_title(self):
        """Test slug built from a title."""
        assert BrandSlug.from_title("Tom Ford") == BrandSlug("tom-ford")

    def test_invalid_slug_empty(self):
        """Test invalid empty slug."""
        with pytest.raises(ValueError, match="cannot be empty"):
            BrandSlug("")

    def test_invalid_slug_uppercase(self):
        """Test slugs must be lowercase."""
        with pytest.raises(ValueError, match="Invalid brand slug"):
            BrandSlug("Dior")

    def test_invalid_slug_non_ascii(self):
        """Test slugs must be ASCII."""
        with pytest.raises(ValueError, match="Invalid brand slug"):
            BrandSlug("диор")

    def test_invalid_slug_special_chars(self):
        """Test invalid slug with special characters."""
        with pytest.raises(ValueError, match="Invalid brand slug"):
            BrandSlug("tom_ford!")

    def test_slug_equality(self):
        """Test value objects compare by value."""
        assert BrandSlug("dior") == BrandSlug("dior")
        assert hash(BrandSlug("dior")) == hash(BrandSlug("dior"))


class TestEnums:
    """Tests for enum string forms."""

    def test_image_type_str(self):
        """Test image type renders as its value."""
        assert str(ImageType.BRAND) == "BRAND"

    def test_brand_type_str(self):
        """Test brand type renders as its value."""
        assert str(BrandType.MASS_MARKET) == "MASS_MARKET"
