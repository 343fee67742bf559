from collections.abc import Mapping, Sequence
import re

INDEX = re.compile(r"0|[1-9][0-9]*")

def seq_index(key):
    """
        ints and slices index as they are, canonical numeric strings become ints
    """
    if isinstance(key, (int, slice)):
        return key
    if isinstance(key, str) and INDEX.fullmatch(key):
        return int(key)
    return None

def lookup(raw, key):
    """
        reads one level of a value, returns None where there is nothing to read

        mappings are read by key, sequences by index, anything else with __getitem__ by item,
        and a string key then falls back to the attribute of that name
    """
    if raw is None:
        return None
    if isinstance(raw, Mapping):
        try:
            # NOTE: a membership test first, so a defaultdict is not filled in
            if key in raw:
                return raw[key]
        except TypeError:
            pass
    elif isinstance(raw, Sequence):
        index = seq_index(key)
        if index is not None:
            try:
                return raw[index]
            except (IndexError, TypeError):
                pass
    elif not isinstance(key, str) and hasattr(type(raw), "__getitem__"):
        try:
            return raw[key]
        except (LookupError, TypeError):
            pass
    if isinstance(key, str):
        try:
            return getattr(raw, key)
        except AttributeError:
            pass
    return None
