import math
from typing import List, Optional

from mpmath import mp

from complex_value import Complex, Ordering
from utils.arith_config import get_dps, get_mode, is_faithful
from utils.trace_helpers import add_traceback

mp.dps = get_dps()

_REL_EPS = mp.mpf('1e-12')
_ABS_EPS = mp.mpf('1e-12')


class ComplexAlgebraEngine:
    """Runs Complex ops with step-wise traceback and an mpmath cross-check."""

    def __init__(self):
        self.traceback_info: List[dict] = []

    # -------------------------------------------------------------- #
    # Trace helper
    # -------------------------------------------------------------- #
    def _add_traceback(self, step: str, info: str):
        add_traceback(self, step, info)

    def _record(self, tag: str, a: Complex, b: Complex, result: Complex) -> Complex:
        self._add_traceback(tag, f'{a!r} {tag} {b!r} = {result!r} [{get_mode()}]')
        return result

    # ---- operator wrappers ---------------------------------------- #
    def add(self, a, b): return self._record('+', a, b, a + b)
    def sub(self, a, b): return self._record('-', a, b, a - b)
    def mul(self, a, b): return self._record('*', a, b, a * b)
    def div(self, a, b): return self._record('/', a, b, a / b)

    def compare(self, a: Complex, b: Complex) -> Optional[Ordering]:
        result = a.partial_cmp(b)
        self._add_traceback('partial_cmp', f'{a!r} vs {b!r} -> {result}')
        return result

    def equals(self, a: Complex, b: Complex) -> bool:
        result = a == b
        self._add_traceback('eq', f'{a!r} == {b!r} -> {result}')
        return result

    def display(self, a: Complex) -> str:
        text = str(a)
        self._add_traceback('display', text.splitlines()[0])
        return text

    # -------------------------------------------------------------- #
    # compute() entry – dispatch on the operator token
    # -------------------------------------------------------------- #
    def compute(self, op: str, a: Complex, b: Complex) -> Complex:
        self._add_traceback('compute_start', f'{a!r} {op} {b!r}')
        for token, fn in [('+', self.add),
                          ('-', self.sub),
                          ('*', self.mul),
                          ('/', self.div)]:
            if op == token:
                return fn(a, b)
        raise ValueError(f'Unsupported complex operator: {op}')

    # -------------------------------------------------------------- #
    # mpmath verification
    # -------------------------------------------------------------- #
    @staticmethod
    def _reference(op: str, za, zb):
        """Same formula as the float op, evaluated at mpmath precision."""
        if op == '+' or (op == '-' and is_faithful()):
            return za + zb
        if op == '-':
            return za - zb
        if op == '*':
            return za * zb
        if op == '/':
            den = zb.real ** 2 + zb.imag ** 2
            return za * mp.mpc(zb.real / den, -zb.imag / den)
        raise ValueError(f'Unsupported complex operator: {op}')

    @staticmethod
    def _agrees(got: float, expected) -> bool:
        if math.isnan(got) or math.isinf(got) or mp.isnan(expected) or mp.isinf(expected):
            if math.isnan(got):
                return bool(mp.isnan(expected))
            return got == float(expected)
        return bool(mp.almosteq(mp.mpf(got), expected, _REL_EPS, _ABS_EPS))

    def verify(self, op: str, a: Complex, b: Complex, result: Optional[Complex] = None) -> bool:
        """Check a float result against the mpmath evaluation of the same op.

        A zero divisor cannot be evaluated by mpmath, so it never verifies.
        """
        if result is None:
            result = self.compute(op, a, b)
        with mp.workdps(get_dps()):
            za, zb = a.to_mpc(), b.to_mpc()
            if op == '/' and zb.real == 0 and zb.imag == 0:
                self._add_traceback('verify', f'{op}: zero divisor, skipped')
                return False
            expected = self._reference(op, za, zb)
            ok = (self._agrees(result.re, expected.real)
                  and self._agrees(result.im, expected.imag))
        self._add_traceback('verify', f'{op}: {result!r} vs {expected} -> {ok}')
        return ok
