from . import utils
from .handle import tracing
import sys

class trace(utils.Context):
    """
        prints every navigation step while active

            with trace():
                nn(config).server.port()
        prints
            .server -> {'port': 8080}
            .port -> 8080

        traces nest, only the innermost one prints
        the active traces belong to the current thread or task, see contextvars
    """
    MAX_OBJ_LEN = 60

    def __init__(self, file=None):
        self.file = file
    def print(self, msg):
        print(msg, file=self.file if self.file is not None else sys.stderr)
    def step(self, key, child):
        self.print("{} -> {}".format(self.key_str(key), self.obj_str(child())))

    @staticmethod
    def key_str(key):
        if isinstance(key, str) and key.isidentifier():
            return "." + key
        return "[{}]".format(repr(key))
    def obj_str(self, obj):
        # NOTE: a repr may navigate handles of its own
        with suspend():
            s = repr(obj)
        s = utils.one_line(s)
        if len(s) > self.MAX_OBJ_LEN:
            wrap = "{}<{{}}..>".format(type(obj).__qualname__)
            s = wrap.format(s[:self.MAX_OBJ_LEN - len(wrap) + len("{}")])
        return s

    def __enter__(self):
        tracing.set(tracing.get() + (self,))
        return self
    def __exit__(self, exc_type, exc, tb):
        # exits may come out of order, only this trace is removed
        tracing.set(tuple(active for active in tracing.get() if active is not self))

class suspend(utils.Context):
    """
        navigates silently, whatever traces are active
    """
    def __init__(self):
        self.token = None
    def __enter__(self):
        self.token = tracing.set(())
        return self
    def __exit__(self, exc_type, exc, tb):
        tracing.reset(self.token)
