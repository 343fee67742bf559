from collections.abc import Mapping
from contextvars import ContextVar
from .lookup import lookup

# active traces, innermost last
tracing = ContextVar("tracing", default=())

def step(handle, key):
    child = nn(lookup(handle(), key))
    traces = tracing.get()
    if traces:
        traces[-1].step(key, child)
    return child

class Handle:
    """
        a callable that unwraps to the value it was made from,
        and turns every attribute or item read into a handle one level deeper
    """
    __slots__ = ["__raw"]

    def __init__(self, raw):
        object.__setattr__(self, "_Handle__raw", raw)
    def __call__(self):
        return object.__getattribute__(self, "_Handle__raw")

    # NOTE: every name navigates, the handle's own names included - implicit dunders still resolve on the type
    def __getattribute__(self, name):
        if name == "__class__":
            # isinstance checks against ABCs read it, h["__class__"] reaches the value's class
            return type(self)
        return step(self, name)
    def __getitem__(self, key):
        return step(self, key)

    def __setattr__(self, name, value):
        raise AttributeError("handles are read-only, set {} on the unwrapped value".format(repr(name)))
    def __delattr__(self, name):
        raise AttributeError("handles are read-only, delete {} on the unwrapped value".format(repr(name)))
    # an unbounded __getitem__ would otherwise make the handle iterable forever
    __iter__ = None

    def __dir__(self):
        raw = self()
        names = set(dir(raw))
        if isinstance(raw, Mapping):
            names.update(key for key in raw if isinstance(key, str) and key.isidentifier())
        return sorted(names)
    def __repr__(self):
        return "nn({})".format(repr(self()))

def nn(raw):
    return Handle(raw)
wrap = nn
