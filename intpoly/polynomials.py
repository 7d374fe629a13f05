"""Class for representing polynomials of one variable with integer
coefficients.

The coefficients live in a dense list indexed by exponent, so
`p.coeffs[5] == 4` means the term 4x^5.  The list always has at least one
entry, and trailing zeros are kept: they never change the value of the
polynomial (see `Polynomial.__eq__`), only its length.

Important members:
 - get_coeff/set_coeff: read and write single coefficients (writes grow)
 - +, -, * and their in-place forms
 - str(p) / p.write(out): human-readable text, e.g. " +1x^3 -3x^2 +4"
 - p.read(stream): replace the coefficients from a "c e ... 0 0" pair list
"""

from intpoly.common import FrozenDict

class Polynomial(object):
    __slots__ = ("coeffs",)

    def __init__(self, coeff=0, exp=0):
        if isinstance(coeff, Polynomial):
            self.coeffs = list(coeff.coeffs)
            return
        self.coeffs = [0] * abs(exp) + [coeff]

    @staticmethod
    def from_coefficients(coeffs):
        """Build a polynomial whose dense list is exactly `coeffs`."""
        p = Polynomial()
        coeffs = list(coeffs)
        if coeffs:
            p.coeffs = coeffs
        return p

    def copy(self):
        return Polynomial(self)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return Polynomial(self)

    def __len__(self):
        return len(self.coeffs)

    @property
    def degree(self):
        """The highest exponent with a non-zero coefficient (0 for the zero
        polynomial)."""
        for i in reversed(range(len(self.coeffs))):
            if self.coeffs[i] != 0:
                return i
        return 0

    def terms(self) -> FrozenDict:
        """Snapshot of the non-zero terms as {exponent: coefficient}."""
        return FrozenDict([(i, c) for i, c in enumerate(self.coeffs) if c != 0])

    def get_coeff(self, exp : int) -> int:
        if exp < 0 or exp >= len(self.coeffs):
            return 0
        return self.coeffs[exp]

    def set_coeff(self, coeff : int, exp : int):
        index = abs(exp)
        if index >= len(self.coeffs):
            self.coeffs.extend([0] * (index + 1 - len(self.coeffs)))
        self.coeffs[index] = coeff

    def _grow_to(self, size):
        # all growth goes through set_coeff, which zero-fills and then writes
        # the (unchanged) last slot
        if len(self.coeffs) < size:
            self.set_coeff(0, size - 1)

    def assign(self, other):
        """Replace this polynomial's coefficients with a copy of `other`'s."""
        if other is not self:
            self.coeffs = list(other.coeffs)
        return self

    # Arithmetic ##############################################################

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        # copy the longer one, then add the shorter one into its prefix
        if len(self.coeffs) > len(other.coeffs):
            longer, shorter = self, other
        else:
            longer, shorter = other, self
        res = Polynomial(longer)
        for i, c in enumerate(shorter.coeffs):
            res.coeffs[i] += c
        return res

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        res = Polynomial(self)
        res._grow_to(len(other.coeffs))
        for i, c in enumerate(other.coeffs):
            res.coeffs[i] -= c
        return res

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return Polynomial.from_coefficients(_convolve(self.coeffs, other.coeffs))

    def __radd__(self, other):
        return self + other

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __rmul__(self, other):
        return self * other

    def __iadd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        self._grow_to(len(other.coeffs))
        for i, c in enumerate(other.coeffs):
            self.coeffs[i] += c
        return self

    def __isub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        self._grow_to(len(other.coeffs))
        for i, c in enumerate(other.coeffs):
            self.coeffs[i] -= c
        return self

    def __imul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        self.coeffs = _convolve(self.coeffs, other.coeffs)
        return self

    def __neg__(self):
        return Polynomial.from_coefficients(-c for c in self.coeffs)

    def __pos__(self):
        return Polynomial(self)

    # Comparison ##############################################################

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.equals(other)

    def __ne__(self, other):
        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    # mutable, so not hashable
    __hash__ = None

    def equals(self, other):
        if len(self.coeffs) > len(other.coeffs):
            smaller, larger = other.coeffs, self.coeffs
        else:
            smaller, larger = self.coeffs, other.coeffs
        n = len(smaller)
        return larger[:n] == smaller and not any(larger[n:])

    # Text ####################################################################

    def __str__(self):
        return format_polynomial(self)

    def __repr__(self):
        return "Polynomial.from_coefficients({!r})".format(self.coeffs)

    def write(self, out):
        """Write the human-readable form of this polynomial to `out`."""
        out.write(format_polynomial(self))
        return out

    def read(self, stream):
        """Reset this polynomial and load it from a "c e ... 0 0" pair list.

        See `intpoly.parse.read_polynomial`.
        """
        from intpoly.parse import read_polynomial
        return read_polynomial(stream, target=self)

def _coerce(x):
    if isinstance(x, Polynomial):
        return x
    if isinstance(x, int) and not isinstance(x, bool):
        return Polynomial(x)
    return NotImplemented

def _convolve(a, b):
    res = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            res[i + j] += x * y
    return res

def format_polynomial(p : Polynomial) -> str:
    """Human-readable text for `p`, highest exponent first.

    Only non-zero terms are written, each preceded by a space:

        >>> format_polynomial(Polynomial.from_coefficients([4, 0, -3, 1]))
        ' +1x^3 -3x^2 +4'

    The zero polynomial is written " 0".
    """
    s = ""
    for i in reversed(range(len(p.coeffs))):
        c = p.coeffs[i]
        if c == 0:
            continue
        s += " {}{}".format("+" if c > 0 else "", c)
        if i > 0:
            s += "x"
        if i > 1:
            s += "^{}".format(i)
    return s or " 0"
