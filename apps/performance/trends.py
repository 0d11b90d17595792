import math
from dataclasses import dataclass

from apps.performance.formatting import group_indian, parse_number
from apps.performance.normalizer import resolve

TREND_KEY = 'persondays_generated'


@dataclass(frozen=True)
class TrendPoint:
    label: str
    value: float


@dataclass(frozen=True)
class TrendSeries:
    points: tuple
    mean: float

    def __len__(self):
        return len(self.points)

    @property
    def values(self):
        return [p.value for p in self.points]

    @property
    def labels(self):
        return [p.label for p in self.points]

    @property
    def mean_display(self):
        return group_indian(math.floor(self.mean + 0.5))


def point_label(record):
    month = resolve(record, 'month') or ''
    year = resolve(record, 'fin_year') or ''
    return f'{month}/{year}'


def build_trend(records, key=TREND_KEY):
    """Chronological series for ``key`` from newest-first records.

    Records whose value is missing or zero are left out. Returns ``None``
    when fewer than two points remain.
    """
    points = []
    for record in records or ():
        value = parse_number(resolve(record, key))
        if not value:
            continue
        points.append(TrendPoint(point_label(record), value))

    points.reverse()
    if len(points) < 2:
        return None

    mean = sum(p.value for p in points) / len(points)
    return TrendSeries(tuple(points), mean)


def chart_geometry(series, width=640, height=160, pad=24):
    """SVG coordinates for the trend line and its mean reference line."""
    values = series.values
    min_y, max_y = min(values), max(values)
    span = max(1, max_y - min_y)
    step = (width - pad * 2) / (len(values) - 1)

    def y(v):
        return height - pad - ((v - min_y) * (height - pad * 2)) / span

    coords = [(pad + i * step, y(v)) for i, v in enumerate(values)]
    path = ' '.join(
        f'{"M" if i == 0 else "L"} {x:.1f} {yy:.1f}' for i, (x, yy) in enumerate(coords)
    )
    return {
        'width': width,
        'height': height,
        'pad': pad,
        'path': path,
        'points': coords,
        'mean_y': y(series.mean),
        'x_end': width - pad,
    }
