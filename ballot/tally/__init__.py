"""Winner-selection methods used when tallying votes."""

from .base import TallyMethod

# Tally method registry - import methods here to register them
_tally_methods: dict[str, type[TallyMethod]] = {}


def register_tally_method(method_class: type[TallyMethod]) -> type[TallyMethod]:
    """Decorator to register a tally method class under its key."""
    _tally_methods[method_class.key] = method_class
    return method_class


def get_tally_method(key: str) -> TallyMethod:
    """Return an instance of the method registered under key."""
    try:
        return _tally_methods[key]()
    except KeyError:
        known = ", ".join(sorted(_tally_methods)) or "none"
        raise ValueError(f"Unknown tally method {key!r} (known: {known})") from None


def get_all_tally_methods() -> list[TallyMethod]:
    """Return instances of all registered tally methods."""
    return [method_class() for method_class in _tally_methods.values()]


from . import adjacent  # noqa: E402,F401
from . import plurality  # noqa: E402,F401
