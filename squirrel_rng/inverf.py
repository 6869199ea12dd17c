import math

# Winitzki's constant; max relative error around 2e-3 across the open interval.
_A = 0.147


def inv_erf(x: float) -> float:
    """Approximate inverse error function (Winitzki 2008)."""
    # The open interval (-1, 1) is the real domain. The edges diverge to
    # +/-inf and anything outside (or NaN) maps to NaN rather than raising.
    if math.isnan(x) or abs(x) > 1.0:
        return math.nan
    if x == 0.0:
        return 0.0
    sign = math.copysign(1.0, x)
    if abs(x) == 1.0:
        return sign * math.inf

    ln = math.log(1.0 - x * x)
    pia = math.pi * _A
    alpha = (2.0 / pia) + (ln / 2.0)
    beta = ln / _A
    return sign * math.sqrt(math.sqrt(alpha * alpha - beta) - alpha)
