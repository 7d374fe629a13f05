"""Reader and writer for the pair-list polynomial format.

A polynomial is written as whitespace-separated integer pairs
"coefficient exponent", in any order, ending with the pair "0 0":

    5 2 3 0 0 0      means 5x^2 + 3

The important functions are:
 - read_polynomial: tokens -> Polynomial (one pair list)
 - read_polynomials: tokens -> Polynomial, Polynomial, ... (until the end)
 - format_pairs: Polynomial -> str (the inverse of read_polynomial)
"""

# builtin
import itertools

# 3rd party
from ply import lex

# ours
from intpoly.polynomials import Polynomial
from intpoly import logging

class PolyInputError(ValueError):
    """The input is not a well-formed, "0 0"-terminated pair list."""
    def __init__(self, message, lineno=None):
        if lineno is not None:
            message = "on line {}: {}".format(lineno, message)
        super().__init__(message)
        self.lineno = lineno

# Lexer ########################################################################

tokens = ("INT",)

def make_lexer():

    def t_INT(t):
        r"[-+]?\d+"
        t.value = int(t.value)
        return t

    # Define a rule so we can track line numbers
    def t_newline(t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r\f\v"

    def t_error(t):
        raise PolyInputError("illegal character {}".format(repr(t.value[0])), t.lexer.lineno)

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    """Lazily lex the string (or readable file) `s` into INT tokens."""
    if not isinstance(s, str):
        s = s.read()
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.lineno = 1
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

def _token_source(stream):
    # strings and files are lexed here; anything else is taken to be an
    # iterator over tokens that the caller is sharing between several reads
    if isinstance(stream, str) or hasattr(stream, "read"):
        return tokenize(stream)
    return iter(stream)

# Reader #######################################################################

def _next_pair(toks):
    """The next (coeff, exp) pair, or None if the input ends cleanly."""
    coeff = next(toks, None)
    if coeff is None:
        return None
    exp = next(toks, None)
    if exp is None:
        raise PolyInputError("expected an exponent after coefficient {}".format(coeff.value), coeff.lineno)
    return coeff.value, exp.value

def read_polynomial(stream, target : Polynomial = None) -> Polynomial:
    """Read one "0 0"-terminated pair list into `target`.

    Every existing coefficient of `target` is zeroed first (its length is
    kept), then each pair is applied with `target.set_coeff(coeff, exp)`,
    growing it as needed.  The terminating pair is consumed but not applied.
    Returns `target`, or a new polynomial if none was given.
    """
    if target is None:
        target = Polynomial()
    toks = _token_source(stream)
    for i in range(len(target.coeffs)):
        target.coeffs[i] = 0
    with logging.task("read_polynomial"):
        while True:
            pair = _next_pair(toks)
            if pair is None:
                raise PolyInputError("input ended before the terminating 0 0 pair")
            if pair == (0, 0):
                break
            coeff, exp = pair
            logging.event("set x^{} to {}".format(abs(exp), coeff))
            target.set_coeff(coeff, exp)
    return target

def read_polynomials(stream):
    """Yield each pair list in `stream` until the input runs out."""
    toks = _token_source(stream)
    while True:
        first = next(toks, None)
        if first is None:
            return
        yield read_polynomial(itertools.chain([first], toks))

def parse(s : str) -> Polynomial:
    """Read a single polynomial from the string `s`."""
    return read_polynomial(s)

# Writer #######################################################################

def format_pairs(p : Polynomial) -> str:
    """The pair-list form of `p`, highest exponent first, ending in "0 0"."""
    pairs = ["{} {}".format(p.coeffs[i], i) for i in reversed(range(len(p.coeffs))) if p.coeffs[i] != 0]
    pairs.append("0 0")
    return " ".join(pairs)
