"""Spoken summary of the latest record for the audio-help button."""
from apps.performance.locale import Locale
from apps.performance.normalizer import resolve

SPEECH_LANGS = {
    Locale.EN: 'en-IN',
    Locale.HI: 'hi-IN',
}


def speech_lang(locale):
    return SPEECH_LANGS[Locale(locale)]


def _text(record, key, default=''):
    value = resolve(record, key)
    return str(value) if value else default


def summary_text(record, locale, fallback_district='', fallback_state='Maharashtra'):
    if not record:
        return ''

    district = _text(record, 'district_name', fallback_district)
    month = _text(record, 'month')
    year = _text(record, 'fin_year')
    households = _text(record, 'households_worked')
    persondays = _text(record, 'persondays_generated')

    if Locale(locale) is Locale.HI:
        state = _text(record, 'state_name', 'महाराष्ट्र')
        text = f'{state} के {district} ज़िले में, {year} के {month} महीने का प्रदर्शन। '
        if households:
            text += f'{households} परिवारों ने काम किया। '
        if persondays:
            text += f'{persondays} मानव-दिवस बने। '
        return text

    state = _text(record, 'state_name', fallback_state)
    text = f'District {district} in {state}. Month {month} of {year}. '
    if households:
        text += f'{households} households worked. '
    if persondays:
        text += f'{persondays} person days generated. '
    return text
