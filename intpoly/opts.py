"""Module-local settings.

Modules declare an `Option` next to the code that reads it:

    verbose = Option("verbose", bool, False, description="...")
    ...
    if verbose.value: ...

and the command-line front end calls `setup(parser)` to expose every
declared option as a `--flag`, then `read(args)` to load the parsed values.
"""

# every Option, in declaration order
_OPTS = []

# values to use for options whose modules have not been imported yet
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        assert isinstance(default, type)
        self.name = name
        self.type = type
        self.default = default
        self.description = description
        self.metavar = metavar
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        _OPTS.append(self)

    def __bool__(self):
        raise Exception(
            "Option {!r} used as a boolean; read `.value` instead".format(self.name))

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

def _flag(o):
    # boolean options that default to True are turned off with --no-NAME
    if o.type is bool and o.default:
        return "no-" + o.name
    return o.name

def _help(o):
    if o.type is bool:
        return o.description
    default = "default={!r}".format(o.default)
    return "{} ({})".format(o.description, default) if o.description else default

def setup(parser):
    for o in _OPTS:
        if o.type is bool:
            parser.add_argument("--" + _flag(o), action="store_true", default=False, help=_help(o))
        else:
            parser.add_argument("--" + _flag(o), type=o.type, metavar=o.metavar, default=o.default, help=_help(o))

def read(args):
    for o in _OPTS:
        v = getattr(args, _flag(o).replace("-", "_"))
        if o.type is bool and o.default:
            v = not v
        o.value = v

def snapshot():
    """Current value of every option, by name."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Undo changes made since `snapshot()` returned `snap`."""
    global _DEFAULT_VALUE_OVERRIDES
    for o in _OPTS:
        o.value = snap.get(o.name, o.value)
    _DEFAULT_VALUE_OVERRIDES = dict(snap)
