import numpy as np
from numba import types

##############################################################################
# Global constants
##############################################################################

# Constants
X, Y, Z = 0, 1, 2
TWO_PI = 2 * np.pi
PRECISIONS = ('float32', 'float64')


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Vector dot product signatures (also used for Euclidean distance)
sig_dot_f32 = types.float32(
    types.float32[:],
    types.float32[:]
    )
sig_dot_f64 = types.float64(
    types.float64[:],
    types.float64[:]
    )

# Vector cross product signatures (three components out)
sig_cross_f32 = types.float32[:](
    types.float32[:],
    types.float32[:]
    )
sig_cross_f64 = types.float64[:](
    types.float64[:],
    types.float64[:]
    )

# Signed planar angle signatures
sig_angle_between_f32 = types.float32(
    types.float32[:],
    types.float32[:]
    )
sig_angle_between_f64 = types.float64(
    types.float64[:],
    types.float64[:]
    )

# Linear transformation signatures (vector, matrix, row widths)
sig_transform_f32 = types.float32[:](
    types.float32[:],
    types.float32[:,:],
    types.int64[:]
    )
sig_transform_f64 = types.float64[:](
    types.float64[:],
    types.float64[:,:],
    types.int64[:]
    )
