"""Dashboard state as immutable snapshots and a pure reducer.

Every user action or completed fetch becomes an action object; ``reduce``
returns the next snapshot without touching the previous one. Each fetch
slot carries the token of its latest request so that a slow, superseded
response cannot overwrite a fresher one.
"""
from dataclasses import dataclass, replace

from apps.performance.locale import DEFAULT_LOCALE, Locale

DISTRICTS = 'districts'
PERFORMANCE = 'performance'
COMPARATIVE = 'comparative'
SLOTS = (DISTRICTS, PERFORMANCE, COMPARATIVE)


@dataclass(frozen=True)
class Slot:
    loading: bool = False
    error: str = None
    data: object = None
    token: int = 0


@dataclass(frozen=True)
class DashboardState:
    districts: Slot = Slot()
    performance: Slot = Slot()
    comparative: Slot = Slot()
    selected: str = ''
    compare_with: str = ''
    show_compare: bool = False
    locale: Locale = DEFAULT_LOCALE
    last_token: int = 0

    @property
    def district_names(self):
        return [d.name for d in self.districts.data or ()]

    def slot(self, name):
        return getattr(self, name)


@dataclass(frozen=True)
class SelectDistrict:
    name: str


@dataclass(frozen=True)
class SelectCompareDistrict:
    name: str


@dataclass(frozen=True)
class ToggleCompare:
    show: bool


@dataclass(frozen=True)
class SetLocale:
    locale: Locale


@dataclass(frozen=True)
class SuggestDistrict:
    """Best-effort preselection from a reverse-geocoded place name."""
    place: str


@dataclass(frozen=True)
class RequestStarted:
    slot: str


@dataclass(frozen=True)
class RequestSucceeded:
    slot: str
    token: int
    data: object


@dataclass(frozen=True)
class RequestFailed:
    slot: str
    token: int
    error: str


def match_district(place, districts):
    """First loaded district whose name appears inside ``place``."""
    place = (place or '').lower()
    if not place:
        return None
    for district in districts or ():
        if district.name and district.name.lower() in place:
            return district
    return None


def _with_slot(state, name, **changes):
    return replace(state, **{name: replace(state.slot(name), **changes)})


def reduce(state, action):
    if isinstance(action, SelectDistrict):
        return replace(state, selected=action.name)

    if isinstance(action, SelectCompareDistrict):
        return replace(state, compare_with=action.name)

    if isinstance(action, ToggleCompare):
        return replace(state, show_compare=action.show)

    if isinstance(action, SetLocale):
        return replace(state, locale=Locale(action.locale))

    if isinstance(action, SuggestDistrict):
        match = match_district(action.place, state.districts.data)
        return replace(state, selected=match.name) if match else state

    if isinstance(action, RequestStarted):
        token = state.last_token + 1
        state = replace(state, last_token=token)
        if action.slot == PERFORMANCE:
            state = _with_slot(state, PERFORMANCE, loading=True, error=None, data=None, token=token)
            return _with_slot(state, COMPARATIVE, data=None)
        return _with_slot(state, action.slot, loading=True, error=None, token=token)

    if isinstance(action, (RequestSucceeded, RequestFailed)):
        if action.token != state.slot(action.slot).token:
            return state

        if isinstance(action, RequestFailed):
            return _with_slot(state, action.slot, loading=False, error=action.error)

        state = _with_slot(state, action.slot, loading=False, error=None, data=action.data)
        if action.slot == DISTRICTS and action.data:
            state = replace(state, selected=action.data[0].name)
        return state

    raise TypeError(f'Unknown action: {action!r}')


def start(state, slot):
    """Reduce a ``RequestStarted`` and hand back the token it was given."""
    state = reduce(state, RequestStarted(slot))
    return state, state.slot(slot).token
