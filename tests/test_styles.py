import pytest
from dashboard.styles import style_for, CATEGORY_STYLES, DEFAULT_STYLE, CategoryStyle


class TestStyleFor:
    @pytest.mark.parametrize("label", ["Sports", "sports", "SPORTS", "sPoRtS"])
    def test_case_insensitive(self, label):
        assert style_for(label) == CATEGORY_STYLES["sports"]

    def test_all_seven_categories_known(self):
        assert set(CATEGORY_STYLES) == {
            "politics", "sports", "local news", "technology",
            "entertainment", "business", "health",
        }

    def test_multi_word_category(self):
        assert style_for("Local News") == CATEGORY_STYLES["local news"]

    @pytest.mark.parametrize("label", ["Unknown", "", None, "sport", " sports", "local-news", "Sports "])
    def test_unmatched_gets_default(self, label):
        assert style_for(label) == DEFAULT_STYLE

    def test_distinct_palettes(self):
        styles = list(CATEGORY_STYLES.values()) + [DEFAULT_STYLE]
        assert len({s.bg for s in styles}) == len(styles)

    def test_pure(self):
        assert style_for("Health") == style_for("Health")
        assert style_for("nope") == style_for("nope")

    def test_styles_are_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_STYLE.bg = "red"
        assert isinstance(style_for("Business"), CategoryStyle)
