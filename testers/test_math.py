# -*- coding: utf-8 -*-
import numpy as np
from objmesh.math.vec4 import Vec4

def test_vec4_set_rgb_keeps_alpha():
    c = Vec4(0.2, 0.2, 0.2, 0.5)
    c.set_rgb(1, 0, 0)
    assert np.allclose(c.as_np(), [1, 0, 0, 0.5])

def test_vec4_equality_and_copy():
    a = Vec4(1, 2, 3, 4)
    b = a.copy()
    assert a == b
    b[3] = 0
    assert a != b
    assert a.w == 4.0
