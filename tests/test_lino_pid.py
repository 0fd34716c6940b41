import struct

import pytest

from linobase.lino_pid import LinoPID


def test_default_serializes_to_zero_bytes():
    assert LinoPID().serialize() == bytes(12)


def test_wire_order_is_p_d_i():
    gains = LinoPID(p=1.5, d=2.5, i=3.5)
    assert gains.serialize() == struct.pack("<fff", 1.5, 2.5, 3.5)


def test_round_trip():
    gains = LinoPID(p=0.75, d=0.125, i=-2.0)
    assert LinoPID.deserialize(gains.serialize()) == gains


def test_float32_precision_on_round_trip():
    restored = LinoPID.deserialize(LinoPID(p=0.1).serialize())
    assert restored.p == pytest.approx(0.1, rel=1e-6)


def test_truncated_rejected():
    with pytest.raises(ValueError):
        LinoPID.deserialize(bytes(11))