
from gridrefs.utils.functions import *


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.5
    assert round_half_up(-1.65, 1) == -1.6

    assert round_half_up(52.52000749, 7) == 52.5200075


def test_round_to_meter():
    assert round_to_meter(391775.5) == 391776
    assert round_to_meter(391775.49) == 391775
    assert round_to_meter(5820072.5) == 5820073
    assert round_to_meter(9999999.5) == 10000000
    assert round_to_meter(0.) == 0
    assert round_to_meter(-0.5) == 0
    assert round_to_meter(-0.51) == -1

    assert isinstance(round_to_meter(1.2), int)
