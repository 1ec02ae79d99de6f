from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for vector operations
##########################################################################################

# No fastmath on these kernels: NaN and inf inputs have to come out the other side.

@njit([sig_dot_f32, sig_dot_f64], cache=True)
def vector_dot_product_nb_core(
    vec1,
    vec2):
    """
    Compute dot product of two vectors over their shared components
    vec1: shape (N,), vec2: shape (M,)
    returns: scalar, sum over min(N, M) components
    """
    lim = min(vec1.shape[0], vec2.shape[0])
    out = 0.0

    for i in range(lim):
        out += vec1[i] * vec2[i]

    return out


@njit([sig_dot_f32, sig_dot_f64], cache=True)
def vector_distance_nb_core(
    vec1,
    vec2):
    """
    Compute Euclidean distance between two vectors over their shared components
    vec1: shape (N,), vec2: shape (M,)
    returns: scalar
    """
    lim = min(vec1.shape[0], vec2.shape[0])
    out = 0.0

    for i in range(lim):
        out += (vec1[i] - vec2[i])**2

    return np.sqrt(out)


@njit([sig_cross_f32, sig_cross_f64], cache=True)
def vector_cross_product_nb_core(
    vec1,
    vec2):
    """
    Compute cross product of two 3D vectors
    vec1, vec2: shape (3,) or longer, only the first three components are read
    returns: shape (3,)
    """
    out = np.zeros(3, dtype=vec1.dtype)

    for i in range(3):
        id1 = (i + 1) % 3
        id2 = (i + 2) % 3
        out[i] = vec1[id1] * vec2[id2] - vec1[id2] * vec2[id1]

    return out


@njit([sig_angle_between_f32, sig_angle_between_f64], cache=True)
def vector_angle_between_nb_core(
    vec1,
    vec2):
    """
    Compute the signed angle from vec1 to vec2 in the XY plane (in radians)
    vec1, vec2: shape (2,) or longer, only X and Y are read
    returns: scalar in [-pi, pi], positive counterclockwise
    """
    theta1 = np.arctan2(vec1[Y], vec1[X])
    theta2 = np.arctan2(vec2[Y], vec2[X])
    dtheta = theta2 - theta1

    while dtheta > np.pi:
        dtheta -= TWO_PI
    while dtheta < -np.pi:
        dtheta += TWO_PI

    return dtheta


@njit([sig_transform_f32, sig_transform_f64], cache=True)
def vector_transform_nb_core(
    vec,
    matrix,
    widths):
    """
    Linear transformation y = M x with ragged rows
    vec: shape (K,), K >= matrix.shape[1]
    matrix: shape (R, K), row i is only valid up to widths[i]
    widths: shape (R,)
    returns: shape (R,)
    """
    R = matrix.shape[0]
    out = np.zeros(R, dtype=vec.dtype)

    for i in range(R):
        acc = 0.0
        for j in range(widths[i]):
            acc += matrix[i, j] * vec[j]
        out[i] = acc

    return out


##########################################################################################
# Core numpy functions for vector operations
##########################################################################################


def vector_operation_np_core(
    operand_1,
    operand_2,
    ufunc):
    """
    Broadcast a binary ufunc over vectors and scalars.

    Two vectors are combined over their shared components, a vector and a
    scalar over every component of the vector, two scalars directly.
    """
    if np.ndim(operand_1) > 0 and np.ndim(operand_2) > 0:
        lim = min(operand_1.shape[0], operand_2.shape[0])
        return ufunc(operand_1[:lim], operand_2[:lim])

    return ufunc(operand_1, operand_2)


def vector_dot_product_np_core(
    vector_1 : np.ndarray,
    vector_2 : np.ndarray) -> float:
    """
    Compute the dot product of two vectors over their shared components.
    """

    lim = min(vector_1.shape[0], vector_2.shape[0])
    out = np.einsum("i,i->",
                    vector_1[:lim],
                    vector_2[:lim])

    return out


def vector_distance_np_core(
    vector_1 : np.ndarray,
    vector_2 : np.ndarray) -> float:
    """
    Compute the Euclidean distance between two vectors over their shared components.
    """

    lim = min(vector_1.shape[0], vector_2.shape[0])
    diff = vector_1[:lim] - vector_2[:lim]

    return np.sqrt(np.einsum("i,i->", diff, diff))


def vector_cross_product_np_core(
    vector_1 : np.ndarray,
    vector_2 : np.ndarray) -> np.ndarray:
    """
    Compute the cross product of two 3D vectors.
    """

    out = np.array([
                vector_1[Y] * vector_2[Z] - vector_1[Z] * vector_2[Y],
                vector_1[Z] * vector_2[X] - vector_1[X] * vector_2[Z],
                vector_1[X] * vector_2[Y] - vector_1[Y] * vector_2[X]],
                   dtype=vector_1.dtype)

    return out


def vector_angle_between_np_core(
    vector_1 : np.ndarray,
    vector_2 : np.ndarray) -> float:
    """
    Compute the signed angle from vector_1 to vector_2 in the XY plane.
    """

    dtheta = (np.arctan2(vector_2[Y], vector_2[X])
              - np.arctan2(vector_1[Y], vector_1[X]))

    # normalise to [-pi, pi]
    while dtheta > np.pi:
        dtheta -= TWO_PI
    while dtheta < -np.pi:
        dtheta += TWO_PI

    return dtheta


def vector_angle_np_core(
    vector : np.ndarray,
    magnitude : float) -> float:
    """
    Compute the angle between a vector and the positive X axis, in [0, pi].
    """

    return np.arccos(vector[X] / magnitude)


def vector_transform_np_core(
    vector : np.ndarray,
    matrix : np.ndarray,
    widths : np.ndarray) -> np.ndarray:
    """
    Compute y = M x, bounding row i of M to its first widths[i] entries.
    """

    in_row = np.arange(matrix.shape[1])[np.newaxis, :] < widths[:, np.newaxis]
    terms = np.where(in_row,
                     matrix * vector[np.newaxis, :matrix.shape[1]],
                     0.0)

    return terms.sum(axis=1).astype(vector.dtype)
