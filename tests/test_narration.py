from apps.performance.locale import Locale
from apps.performance.narration import speech_lang, summary_text


def test_english_summary():
    record = {
        "district_name": "PUNE",
        "state_name": "MAHARASHTRA",
        "month": "Mar",
        "fin_year": "2024-2025",
        "households_worked": 12500,
        "persondays_generated": 250000,
    }
    assert summary_text(record, Locale.EN) == (
        "District PUNE in MAHARASHTRA. Month Mar of 2024-2025. "
        "12500 households worked. 250000 person days generated. "
    )


def test_missing_counts_are_left_out_and_fallbacks_used():
    text = summary_text({"month": "Mar", "fin_year": "2024-2025"}, Locale.EN, fallback_district="Pune")
    assert text == "District Pune in Maharashtra. Month Mar of 2024-2025. "


def test_hindi_summary():
    text = summary_text({"districtName": "Pune", "households_worked": 10}, Locale.HI)
    assert text.startswith("महाराष्ट्र के Pune ज़िले में")
    assert "10 परिवारों ने काम किया।" in text


def test_speech_lang():
    assert speech_lang("en") == "en-IN"
    assert speech_lang(Locale.HI) == "hi-IN"
    assert summary_text(None, Locale.EN) == ""
