import pytest
from backend.core.normalize import AliasNormalizer, normalize


@pytest.mark.unit
class TestNormalize:
    """Tests for the normalize function."""

    def test_expand_abbreviations(self):
        """Test that abbreviations are expanded."""
        assert normalize("db bench press") == "dumbbell bench press"
        assert normalize("bb squat") == "barbell squat"
        assert normalize("ohp") == "overhead press"

    def test_remove_separators(self):
        """Test that separators are converted to spaces."""
        assert normalize("push-up") == "push up"
        assert normalize("push_up") == "push up"

    def test_remove_special_characters(self):
        assert normalize("bench press!") == "bench press"
        assert normalize("squat (barbell)") == "squat barbell"

    def test_remove_stopwords(self):
        assert normalize("row with the cable") == "row cable"

    def test_plural_to_singular(self):
        assert normalize("barbell curls") == "barbell curl"
        assert normalize("bench presses") == "bench press"

    def test_full_width_is_folded(self):
        assert normalize("ＳＱＵＡＴ") == "squat"

    def test_empty_string(self):
        assert normalize("") == ""
        assert normalize("   ") == ""


@pytest.mark.unit
class TestJapaneseKeys:
    def test_middle_dot_and_spaces_between_japanese_words_are_dropped(self):
        assert normalize("ダンベル・プレス") == "ダンベルプレス"
        assert normalize("ダンベル　プレス") == "ダンベルプレス"
        assert normalize("ベンチ プレス") == normalize("ベンチプレス")

    def test_half_width_katakana_is_folded(self):
        assert normalize("ﾍﾞﾝﾁﾌﾟﾚｽ") == "ベンチプレス"

    def test_mixed_script_keeps_word_gap(self):
        assert normalize("DB ベンチ") == "dumbbell ベンチ"


@pytest.mark.unit
class TestAliasNormalizer:
    def test_custom_dictionary(self):
        normalizer = AliasNormalizer(
            expand={"sl": "straight leg"},
            stopwords=["on"],
            plural_to_singular={"deadlifts": "deadlift"},
        )
        assert normalizer("SL Deadlifts on Box") == "straight leg deadlift box"

    def test_empty_dictionary_only_folds_text(self):
        assert AliasNormalizer()("Bench-Press!") == "bench press"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "normalization.yaml"
        path.write_text("expand:\n  kb: kettlebell\nstopwords: [the]\n", encoding="utf-8")
        assert AliasNormalizer.from_yaml(path)("the KB swing") == "kettlebell swing"
