"""Property/value dictionary.

Maps a CSS property to the values the house style accepts for it. Each
accepted value is an acceptor: either an exact literal or a predicate over
the value string. Properties missing from the dictionary accept anything.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Tuple, Union

HEX_COLOR_RE = re.compile(r'^#([0-9a-fA-F]{3}$|[0-9a-fA-F]{6}$)')
MEASUREMENT_RE = re.compile(r'[1-9]\d*(px|%|em)')
# Open and close quotes are not required to match.
URL_RE = re.compile(r'url\(["\'].+["\']\)')

NAMED_COLORS = frozenset([
    'aliceblue', 'antiquewhite', 'aqua', 'aquamarine', 'azure', 'beige',
    'bisque', 'black', 'blanchedalmond', 'blue', 'blueviolet', 'brown',
    'burlywood', 'cadetblue', 'chartreuse', 'chocolate', 'coral',
    'cornflowerblue', 'cornsilk', 'crimson', 'cyan', 'darkblue', 'darkcyan',
    'darkgoldenrod', 'darkgray', 'darkgreen', 'darkkhaki', 'darkmagenta',
    'darkolivegreen', 'darkorange', 'darkorchid', 'darkred', 'darksalmon',
    'darkseagreen', 'darkslateblue', 'darkslategray', 'darkturquoise',
    'darkviolet', 'deeppink', 'deepskyblue', 'dimgray', 'dodgerblue',
    'firebrick', 'floralwhite', 'forestgreen', 'fuchsia', 'gainsboro',
    'ghostwhite', 'gold', 'goldenrod', 'gray', 'green', 'greenyellow',
    'honeydew', 'hotpink', 'indianred', 'indigo', 'ivory', 'khaki',
    'lavender', 'lavenderblush', 'lawngreen', 'lemonchiffon', 'lightblue',
    'lightcoral', 'lightcyan', 'lightgoldenrodyellow', 'lightgray',
    'lightgreen', 'lightpink', 'lightsalmon', 'lightseagreen',
    'lightskyblue', 'lightslategray', 'lightsteelblue', 'lightyellow',
    'lime', 'limegreen', 'linen', 'magenta', 'maroon', 'mediumaquamarine',
    'mediumblue', 'mediumorchid', 'mediumpurple', 'mediumseagreen',
    'mediumslateblue', 'mediumspringgreen', 'mediumturquoise',
    'mediumvioletred', 'midnightblue', 'mintcream', 'mistyrose', 'moccasin',
    'navajowhite', 'navy', 'oldlace', 'olive', 'olivedrab', 'orange',
    'orangered', 'orchid', 'palegoldenrod', 'palegreen', 'paleturquoise',
    'palevioletred', 'papayawhip', 'peachpuff', 'peru', 'pink', 'plum',
    'powderblue', 'purple', 'red', 'rosybrown', 'royalblue', 'saddlebrown',
    'salmon', 'sandybrown', 'seagreen', 'seashell', 'sienna', 'silver',
    'skyblue', 'slateblue', 'slategray', 'snow', 'springgreen', 'steelblue',
    'tan', 'teal', 'thistle', 'tomato', 'turquoise', 'violet', 'wheat',
    'white', 'whitesmoke', 'yellow', 'yellowgreen',
])

def is_color(value: str) -> bool:
    """True for ``#rgb``, ``#rrggbb`` or a named CSS color."""
    return bool(HEX_COLOR_RE.match(value)) or value in NAMED_COLORS

def is_measurement(value: str) -> bool:
    """True when the value contains a px, % or em measurement."""
    return bool(MEASUREMENT_RE.search(value))

def is_url(value: str) -> bool:
    """True when the value contains a quoted ``url(...)``."""
    return bool(URL_RE.search(value))

@dataclass(frozen=True)
class Literal:
    text: str

    def __call__(self, value: str) -> bool:
        return value == self.text

@dataclass(frozen=True)
class Predicate:
    fn: Callable[[str], bool]
    name: str = ''

    def __call__(self, value: str) -> bool:
        return bool(self.fn(value))

Acceptor = Union[Literal, Predicate]

def make_acceptor(entry: Union[str, Callable[[str], bool], Literal, Predicate]) -> Acceptor:
    """Wrap a plain string or callable into an Acceptor."""
    if isinstance(entry, (Literal, Predicate)):
        return entry
    if isinstance(entry, str):
        return Literal(entry)
    if callable(entry):
        return Predicate(entry, getattr(entry, '__name__', ''))
    raise TypeError(f"Unsupported acceptor: {entry!r}")

class PropertyDictionary:
    """Read-only mapping from property name to its acceptors."""

    def __init__(self, entries: Mapping[str, Iterable] = None):
        table = {}
        for prop, values in (entries or {}).items():
            table[prop] = tuple(make_acceptor(e) for e in values)
        self._entries = MappingProxyType(table)

    def lookup(self, prop: str) -> Optional[Tuple[Acceptor, ...]]:
        return self._entries.get(prop)

    def accepts(self, prop: str, value: str) -> bool:
        """Check a value against the acceptors registered for ``prop``.

        Args:
            prop: Property name as written in the stylesheet
            value: Declared value

        Returns:
            True if the property is unknown or any acceptor matches
        """
        acceptors = self.lookup(prop)
        if acceptors is None:
            return True
        return any(acceptor(value) for acceptor in acceptors)

    def extend(self, entries: Mapping[str, Iterable]) -> 'PropertyDictionary':
        """Return a new dictionary with ``entries`` added or replaced."""
        merged = dict(self._entries)
        merged.update({p: tuple(make_acceptor(e) for e in values) for p, values in entries.items()})
        return PropertyDictionary(merged)

    def __contains__(self, prop: str) -> bool:
        return prop in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

DEFAULT_ENTRIES = {
    # background properties
    'background': [is_color, is_url],
    # positioning properties
    'position': ['static', 'absolute', 'fixed', 'relative', 'inherit'],
    # color properties
    'color': [is_color],
}

DEFAULT_DICTIONARY = PropertyDictionary(DEFAULT_ENTRIES)

__all__ = [
    'is_color',
    'is_measurement',
    'is_url',
    'Literal',
    'Predicate',
    'Acceptor',
    'make_acceptor',
    'PropertyDictionary',
    'DEFAULT_ENTRIES',
    'DEFAULT_DICTIONARY',
]
