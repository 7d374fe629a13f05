"""Univariate polynomials with integer coefficients."""

from intpoly.polynomials import Polynomial, format_polynomial
from intpoly.parse import read_polynomial, read_polynomials, format_pairs, parse, PolyInputError
