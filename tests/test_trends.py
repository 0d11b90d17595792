from apps.performance.trends import build_trend, chart_geometry


def _record(month, persondays, **extra):
    return {"month": month, "fin_year": "2024-2025", "persondays_generated": persondays, **extra}


def test_trend_drops_zero_and_reverses_to_oldest_first():
    records = [_record("Mar", 100), _record("Feb", 0), _record("Jan", 300)]
    series = build_trend(records)

    assert series.values == [300, 100]
    assert series.labels == ["Jan/2024-2025", "Mar/2024-2025"]
    assert series.mean == 200


def test_trend_uses_alternate_labels_and_grouped_strings():
    records = [
        {"month": "Mar", "fin_year": "2024-2025", "Persondays_Generated": "2,00,000"},
        {"month": "Feb", "finYear": "2024-2025", "persondaysGenerated": "1,00,000"},
    ]
    series = build_trend(records)
    assert series.values == [100000, 200000]
    assert series.labels[0] == "Feb/2024-2025"


def test_trend_drops_unavailable_values():
    records = [_record("Mar", 100), {"month": "Feb"}, _record("Jan", None), _record("Dec", 50)]
    assert build_trend(records).values == [50, 100]


def test_single_point_has_no_trend():
    assert build_trend([_record("Mar", 100), _record("Feb", 0)]) is None
    assert build_trend([]) is None
    assert build_trend(None) is None


def test_missing_month_or_year_gives_partial_label():
    series = build_trend([{"persondays_generated": 5}, {"month": "Jan", "persondays_generated": 7}])
    assert series.labels == ["Jan/", "/"]


def test_mean_display_is_rounded_and_grouped():
    series = build_trend([_record("Mar", 150001), _record("Feb", 150000)])
    assert series.mean_display == "1,50,001"


def test_chart_geometry_spans_padding():
    series = build_trend([_record("Mar", 300), _record("Feb", 100), _record("Jan", 200)])
    chart = chart_geometry(series, width=640, height=160, pad=24)

    xs = [x for x, _ in chart["points"]]
    ys = [y for _, y in chart["points"]]
    assert xs[0] == 24 and xs[-1] == 616
    # Highest value sits at the top padding, lowest at the bottom
    assert min(ys) == 24 and max(ys) == 136
    assert chart["path"].startswith("M 24.0")
    assert chart["mean_y"] == 80
