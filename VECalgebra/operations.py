"""
    VECalgebra Vector Algebra Module

    This module provides vector algebra on plain numeric sequences: broadcast
    arithmetic between vectors and scalars, norm, distance, unit vectors,
    dot, cross and triple products, planar angles, and linear transformations
    (rotation, shear). Kernels are compiled with Numba, with NumPy
    implementations to fall back on when Numba is not used.

    Nothing is validated: float errors propagate as inf / nan, vectors of
    different length are truncated to the shorter one, and components that
    are read past the end of a vector are taken as nan.

"""

import numpy as np
from .constants import *
from .core_functions import *


class VectorAlgebra():
    """
    Vector algebra using Numba kernels
    """

    def __init__(
        self,
        use_numba: bool = True,
        precision: str = 'float64',
        debug: bool = False) -> None:
        """
        Initialize vector algebra operations.

        Args:
            use_numba (bool)    : use the Numba JIT kernels. Default is True.
            precision (str)     : working precision, 'float32' or 'float64'. Default is 'float64'.
            debug (bool)        : print which kernel serves each call. Default is False.
        """

        if precision not in PRECISIONS:
            raise ValueError("precision must be 'float32' or 'float64'")

        self.use_numba = use_numba
        self.precision = precision
        self.debug = debug

        if precision == 'float32':
            self.float_dtype = np.float32
        else:
            self.float_dtype = np.float64

        if self.debug:
            print(f"VectorAlgebra: use_numba={use_numba}, precision={precision}, debug={debug}")


    ## ###############################################################
    ## Operand handling
    ## ###############################################################

    def _as_operand(
        self,
        operand):
        """
        Scalars (ndim 0) become a numpy scalar, anything else a fresh 1D array.
        """
        if np.ndim(operand) == 0:
            return self.float_dtype(operand)
        return np.array(operand, dtype=self.float_dtype)


    def _as_vector(
        self,
        vector) -> np.ndarray:
        """
        A scalar has no components, so it becomes an empty vector.
        """
        if np.ndim(vector) == 0:
            return np.zeros(0, dtype=self.float_dtype)
        return np.array(vector, dtype=self.float_dtype)


    def _padded(
        self,
        vector : np.ndarray,
        num_of_components : int) -> np.ndarray:
        """
        Pad a vector with nan up to num_of_components.
        """
        missing = num_of_components - vector.shape[0]
        if missing <= 0:
            return vector
        return np.concatenate((vector,
                               np.full(missing, np.nan, dtype=self.float_dtype)))


    def _as_matrix(
        self,
        matrix):
        """
        Pack a (possibly ragged) sequence of rows into a zero-filled 2D array
        plus the width of each row.
        """
        rows = [self._as_vector(row) for row in matrix]
        widths = np.array([row.shape[0] for row in rows], dtype=np.int64)
        num_of_cols = int(widths.max()) if len(rows) else 0

        out = np.zeros((len(rows), num_of_cols), dtype=self.float_dtype)
        for i, row in enumerate(rows):
            out[i, :row.shape[0]] = row

        return out, widths


    def _kernel(
        self,
        name : str,
        nb_core,
        np_core):
        """
        Pick the Numba or NumPy kernel for an operation.
        """
        if self.use_numba:
            if self.debug:
                print(f"VectorAlgebra.{name}: numba kernel {nb_core.__name__}")
            return nb_core
        if self.debug:
            print(f"VectorAlgebra.{name}: numpy kernel {np_core.__name__}")
        return np_core


    def _operation(
        self,
        operand_1,
        operand_2,
        ufunc):
        """
        Broadcast ufunc between two operands, each a vector or a scalar.
        """
        operand_1 = self._as_operand(operand_1)
        operand_2 = self._as_operand(operand_2)
        with np.errstate(all='ignore'):
            return vector_operation_np_core(operand_1,
                                            operand_2,
                                            ufunc)


    ## ###############################################################
    ## Basic operations
    ## ###############################################################

    def add(
        self,
        operand_1,
        operand_2):
        """
        Add two vectors / scalars
        """
        return self._operation(operand_1, operand_2, np.add)


    def subtract(
        self,
        operand_1,
        operand_2):
        """
        Subtract two vectors / scalars
        """
        return self._operation(operand_1, operand_2, np.subtract)


    def multiply(
        self,
        operand_1,
        operand_2):
        """
        Multiply two vectors / scalars element-wise
        """
        return self._operation(operand_1, operand_2, np.multiply)


    def divide(
        self,
        operand_1,
        operand_2):
        """
        Divide two vectors / scalars element-wise. Division by zero gives inf / nan.
        """
        return self._operation(operand_1, operand_2, np.divide)


    ## ###############################################################
    ## Length, distance and unit vector
    ## ###############################################################

    def norm(
        self,
        vector):
        """
        Euclidean length of a vector, sqrt(v . v)
        """
        vector = self._as_vector(vector)
        dot = self._kernel("norm",
                           vector_dot_product_nb_core,
                           vector_dot_product_np_core)
        with np.errstate(all='ignore'):
            return np.sqrt(self.float_dtype(dot(vector, vector)))


    def length(
        self,
        vector):
        """
        Alias for norm
        """
        return self.norm(vector)


    def distance(
        self,
        vector_1,
        vector_2):
        """
        Euclidean distance between two vectors over their shared components
        """
        distance = self._kernel("distance",
                                vector_distance_nb_core,
                                vector_distance_np_core)
        with np.errstate(all='ignore'):
            return self.float_dtype(distance(self._as_vector(vector_1),
                                             self._as_vector(vector_2)))


    def unit(
        self,
        vector):
        """
        Unit vector in the direction of vector. The zero vector gives nan components.
        """
        return self.divide(vector, self.norm(vector))


    ## ###############################################################
    ## Dot, cross and triple products
    ## ###############################################################

    def dot(
        self,
        vector_1,
        vector_2):
        """
        Dot product of two vectors over their shared components.
        Orthogonal vectors give 0.
        """
        dot = self._kernel("dot",
                           vector_dot_product_nb_core,
                           vector_dot_product_np_core)
        with np.errstate(all='ignore'):
            return self.float_dtype(dot(self._as_vector(vector_1),
                                        self._as_vector(vector_2)))


    def cross(
        self,
        vector_1,
        vector_2):
        """
        Cross product of two 3D vectors, perpendicular to both.

        Passing the very same object twice returns the scalar 0.0 rather than
        a zero vector. Equal but distinct vectors go through the full product.

        Args:
            vector_1 : first vector, components past the third are ignored
            vector_2 : second vector, components past the third are ignored

        Returns:
            np.ndarray of shape (3,), or 0.0 when vector_1 is vector_2.
            Missing components (vectors shorter than 3) are read as nan.
        """
        if vector_1 is vector_2:
            return self.float_dtype(0.0)

        cross = self._kernel("cross",
                             vector_cross_product_nb_core,
                             vector_cross_product_np_core)
        with np.errstate(all='ignore'):
            return cross(self._padded(self._as_vector(vector_1), 3),
                         self._padded(self._as_vector(vector_2), 3))


    def scalar_triple_product(
        self,
        vector_1,
        vector_2,
        vector_3):
        """
        Scalar triple product: vec1 . (vec2 x vec3)
        """
        return self.dot(vector_1, self.cross(vector_2, vector_3))


    def vector_triple_product(
        self,
        vector_1,
        vector_2,
        vector_3):
        """
        Vector triple product: vec1 x (vec2 x vec3)
        """
        return self.cross(vector_1, self.cross(vector_2, vector_3))


    ## ###############################################################
    ## Angles
    ## ###############################################################

    def angle_between(
        self,
        vector_1,
        vector_2):
        """
        Angle from vector_1 to vector_2 on the XY plane, positive counterclockwise.

        Only the X and Y components are used.

        Returns:
            dtheta (float): angle in [-pi, pi]
        """
        angle_between = self._kernel("angle_between",
                                     vector_angle_between_nb_core,
                                     vector_angle_between_np_core)
        with np.errstate(all='ignore'):
            return self.float_dtype(angle_between(self._padded(self._as_vector(vector_1), 2),
                                                  self._padded(self._as_vector(vector_2), 2)))


    def angle(
        self,
        vector):
        """
        Angle between a vector and the positive X axis, in [0, pi].
        """
        vector = self._padded(self._as_vector(vector), 1)
        magnitude = self.norm(vector)
        with np.errstate(all='ignore'):
            return self.float_dtype(vector_angle_np_core(vector, magnitude))


    ## ###############################################################
    ## Matrix transformations
    ## ###############################################################

    def transform(
        self,
        vector,
        matrix):
        """
        Linear transformation of a vector by a matrix, y_i = sum_j M_ij x_j.

        Rows may have different widths; each row only reads as many
        components of the vector as it has entries. Components of the vector
        that a row reaches past its end are nan.

        Args:
            vector : sequence of N numbers
            matrix : sequence of R rows

        Returns:
            np.ndarray of shape (R,)
        """
        matrix, widths = self._as_matrix(matrix)
        return self._transform(self._as_vector(vector), matrix, widths)


    def _transform(
        self,
        vector : np.ndarray,
        matrix : np.ndarray,
        widths : np.ndarray) -> np.ndarray:
        vector = self._padded(vector, matrix.shape[1])
        transform = self._kernel("transform",
                                 vector_transform_nb_core,
                                 vector_transform_np_core)
        with np.errstate(all='ignore'):
            return transform(vector, matrix, widths)


    def rotate(
        self,
        vector,
        theta : float):
        """
        Rotate a 2D vector counterclockwise by theta (in radians).
        Only the X and Y components are used.
        """
        matrix = np.array([
            [np.cos(theta), -np.sin(theta)],
            [np.sin(theta),  np.cos(theta)]],
                          dtype=self.float_dtype)
        return self._transform(self._as_vector(vector),
                               matrix,
                               np.array([2, 2], dtype=np.int64))


    def shear(
        self,
        vector,
        k : float,
        parallel_to_x : bool):
        """
        Shear a 2D vector.

        Args:
            vector : 2D vector
            k (float) : shear factor
            parallel_to_x (bool) : shear parallel to X (True) or to Y (False)
        """
        matrix = np.array([
            [1, k if parallel_to_x else 0],
            [0 if parallel_to_x else k, 1]],
                          dtype=self.float_dtype)
        return self._transform(self._as_vector(vector),
                               matrix,
                               np.array([2, 2], dtype=np.int64))
