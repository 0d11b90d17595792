"""Labels and phrase tables for the two supported display languages."""
from dataclasses import dataclass, fields
from enum import Enum


class Locale(str, Enum):
    EN = 'en'
    HI = 'hi'


DEFAULT_LOCALE = Locale.EN


@dataclass(frozen=True)
class Phrases:
    heading: str
    view: str
    selected: str
    recent: str
    speak: str
    speaking: str
    table_title: str
    compare_state: str
    compare_district: str
    above_average: str
    below_average: str
    difference: str
    better_district: str
    select_district: str
    no_data: str
    no_records: str
    source: str
    error: str
    warning: str
    load_performance_first: str
    available_states: str
    available_districts: str
    state_average: str
    your_district: str
    employment_days: str
    persondays: str
    more_persondays: str
    both_zero: str
    district_missing: str
    click_view_performance: str
    need_both_districts: str
    period: str
    trend_title: str
    trend_help: str
    average: str
    days: str
    glossary_title: str
    districts_error: str
    performance_error: str
    comparison_error: str

    def __post_init__(self):
        for f in fields(self):
            if not getattr(self, f.name):
                raise ValueError(f'Missing phrase: {f.name}')


PHRASES = {
    Locale.EN: Phrases(
        heading='Select Your District',
        view='View Performance',
        selected='Selected District',
        recent='Recent Months',
        speak='Play Audio Help',
        speaking='Speaking…',
        table_title='Detailed Records',
        compare_state='Compare with State Average',
        compare_district='Compare with Another District',
        above_average='Above State Average',
        below_average='Below State Average',
        difference='Difference',
        better_district='Better Performing District',
        select_district='Select District to Compare',
        no_data='No data found',
        no_records='No records available for this district.',
        source='Source',
        error='Error',
        warning='Warning',
        load_performance_first='Please load district performance data first. Click "View Performance" button.',
        available_states='Available states:',
        available_districts='Available districts',
        state_average='State Average',
        your_district='Your District',
        employment_days='Employment Days',
        persondays='Persondays',
        more_persondays='more persondays',
        both_zero='Both state average and district data are 0. No data available.',
        district_missing='This district was not found in data for this period.',
        click_view_performance='Please click "View Performance" button to load data.',
        need_both_districts='Data must be available for both districts. Try fetching performance data first.',
        period='Period',
        trend_title='Trend: Employment Days Created (last {count} months)',
        trend_help='This graph shows how many employment days were created over the past months',
        average='Average',
        days='days',
        glossary_title='What do these terms mean?',
        districts_error='Failed to load districts: {detail}. Make sure backend is running on {base_url}',
        performance_error='Failed to fetch performance: {detail}',
        comparison_error='Failed to fetch comparison: {detail}',
    ),
    Locale.HI: Phrases(
        heading='अपना ज़िला चुनें',
        view='प्रदर्शन देखें',
        selected='चुना गया ज़िला',
        recent='हाल के महीने',
        speak='आवाज़ में जानकारी',
        speaking='बोला जा रहा है…',
        table_title='विस्तृत रिकॉर्ड',
        compare_state='राज्य औसत से तुलना',
        compare_district='दूसरे ज़िले से तुलना',
        above_average='राज्य औसत से ऊपर',
        below_average='राज्य औसत से नीचे',
        difference='अंतर',
        better_district='बेहतर प्रदर्शन करने वाला ज़िला',
        select_district='तुलना के लिए ज़िला चुनें',
        no_data='कोई डेटा नहीं मिला',
        no_records='इस जिले के लिए कोई रिकॉर्ड उपलब्ध नहीं है।',
        source='स्रोत',
        error='त्रुटि',
        warning='चेतावनी',
        load_performance_first='पहले जिला प्रदर्शन डेटा लोड करें। "View Performance" बटन पर क्लिक करें।',
        available_states='उपलब्ध राज्य:',
        available_districts='उपलब्ध जिले',
        state_average='राज्य औसत',
        your_district='आपका जिला',
        employment_days='रोज़गार दिवस',
        persondays='मानव-दिवस',
        more_persondays='अधिक मानव-दिवस',
        both_zero='राज्य औसत और जिला डेटा दोनों 0 हैं। कोई डेटा उपलब्ध नहीं है।',
        district_missing='यह जिला इस अवधि के लिए डेटा में नहीं मिला।',
        click_view_performance='कृपया "View Performance" बटन पर क्लिक करके डेटा लोड करें।',
        need_both_districts='दोनों जिलों के लिए डेटा उपलब्ध होना चाहिए।',
        period='अवधि',
        trend_title='रुझान: रोज़गार दिवस (पिछले {count} महीने)',
        trend_help='यह ग्राफ दिखाता है कि पिछले महीनों में कितने रोज़गार दिवस बनाए गए',
        average='औसत',
        days='दिवस',
        glossary_title='इन शब्दों का क्या अर्थ है?',
        districts_error='ज़िले लोड नहीं हो सके: {detail}। जाँचें कि बैकएंड {base_url} पर चल रहा है',
        performance_error='प्रदर्शन डेटा नहीं मिल सका: {detail}',
        comparison_error='तुलना डेटा नहीं मिल सका: {detail}',
    ),
}

if set(PHRASES) != set(Locale):
    raise ImportError('Every locale needs a phrase table')

HINDI_LABELS = {
    'fin_year': 'वित्तीय वर्ष',
    'month': 'महीना',
    'state_name': 'राज्य',
    'district_name': 'ज़िला',
    'households_worked': 'काम करने वाले परिवार',
    'persondays_generated': 'सृजित मानव-दिवस',
    'women_persondays_percent': 'महिला मानव-दिवस %',
    'no_of_ongoing_works': 'चल रहे कार्य',
    'no_of_completed_works': 'पूरा हुए कार्य',
    'avg_wage_rate': 'औसत मज़दूरी दर',
    'total_wages': 'कुल मज़दूरी',
}

DESCRIPTIONS = {
    Locale.EN: {
        'households_worked': 'Families who received work',
        'persondays_generated': 'Total days of employment created',
        'women_persondays_percent': 'Share of workdays provided to women',
        'no_of_ongoing_works': 'Projects currently running',
        'no_of_completed_works': 'Projects finished this period',
        'avg_wage_rate': 'Average payment per day per person',
        'total_wages': 'Total money paid to workers',
    },
    Locale.HI: {
        'households_worked': 'काम पाने वाले परिवार',
        'persondays_generated': 'बनाए गए रोज़गार के दिन',
        'women_persondays_percent': 'महिलाओं को मिले काम के दिनों का हिस्सा',
        'no_of_ongoing_works': 'अभी चल रहे प्रोजेक्ट',
        'no_of_completed_works': 'इस अवधि में पूरे हुए प्रोजेक्ट',
        'avg_wage_rate': 'प्रति व्यक्ति प्रति दिन औसत भुगतान',
        'total_wages': 'मजदूरों को कुल भुगतान',
    },
}

GLOSSARY = {
    Locale.EN: (
        ('Persondays Generated', 'Total days of employment provided in the district. Higher is better.'),
        ('Households Worked', 'Number of families that received work. Each family should get 100 days of work per year.'),
        ('Women Persondays %', 'Percentage of workdays provided to women. Above 33% is good.'),
        ('Ongoing/Completed Works', 'MGNREGA projects running and finished in the district.'),
        ('Average Wage Rate', 'How much each person was paid per day (in ₹).'),
        ('Total Wages', 'Total money paid to all workers combined.'),
    ),
    Locale.HI: (
        ('सृजित मानव-दिवस (Persondays Generated)', 'जिले में कितने दिनों का रोज़गार दिया गया। जितना अधिक, उतना बेहतर।'),
        ('काम करने वाले परिवार (Households Worked)', 'कितने परिवारों को काम मिला। हर परिवार को साल में 100 दिन काम मिलना चाहिए।'),
        ('महिला मानव-दिवस % (Women Persondays %)', 'कुल काम में महिलाओं का हिस्सा। 33% से अधिक बेहतर है।'),
        ('चल रहे/पूरे हुए कार्य (Ongoing/Completed Works)', 'जिले में चल रहे और पूरे हुए MGNREGA प्रोजेक्ट्स।'),
        ('औसत मज़दूरी दर (Avg Wage Rate)', 'हर व्यक्ति को हर दिन कितनी मज़दूरी मिली (₹ में)।'),
        ('कुल मज़दूरी (Total Wages)', 'सभी मज़दूरों को कुल कितना पैसा दिया गया।'),
    ),
}


def parse_locale(code):
    """Map a request's language code onto a supported locale."""
    try:
        return Locale(str(code).strip().lower())
    except ValueError:
        return DEFAULT_LOCALE


def phrases(locale):
    return PHRASES[Locale(locale)]


def pretty_label(key):
    """``no_of_ongoing_works`` -> ``No Of Ongoing Works``"""
    spaced = key.replace('_', ' ')
    pretty = ' '.join(word[:1].upper() + word[1:] for word in spaced.split(' '))
    return pretty if pretty.strip() else key


def label_for(key, locale=DEFAULT_LOCALE):
    if Locale(locale) is Locale.HI and key in HINDI_LABELS:
        return HINDI_LABELS[key]
    return pretty_label(key)


def description_for(key, locale=DEFAULT_LOCALE):
    return DESCRIPTIONS[Locale(locale)].get(key, '')
