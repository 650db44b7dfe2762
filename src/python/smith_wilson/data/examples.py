"""
Demonstration dataset.

Twenty annual zero-coupon rates (annual compounding) with a 4.2% ultimate
forward rate and the convergence speed alpha = 0.142068, extrapolated to
65 years.
"""

import numpy as np

EXAMPLE_MATURITIES = np.arange(1.0, 21.0)

EXAMPLE_RATES = np.array([
    0.0131074591432979,
    0.0222629098372424,
    0.0273403667327403,
    0.0317884414257146,
    0.0327205345299401,
    0.0332867589595655,
    0.0336112121443886,
    0.0341947663149128,
    0.0345165922380981,
    0.0346854377006694,
    0.035717334079127,
    0.0368501673784445,
    0.0376263620230677,
    0.0385237084707761,
    0.0395043823351044,
    0.0401574909803133,
    0.0405715278625131,
    0.0415574765441695,
    0.0415582458410996,
    0.042551132694631,
])

EXAMPLE_UFR = 0.042
EXAMPLE_ALPHA = 0.142068

EXAMPLE_TARGETS = np.arange(1.0, 66.0)
