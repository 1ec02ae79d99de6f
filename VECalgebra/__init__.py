"""
VECalgebra Vector Algebra Module

Provides vector algebra primitives over plain numeric sequences: broadcast
arithmetic between vectors and scalars, norm, distance, unit vectors, dot,
cross and triple products, planar angles, and linear transformations.

The module-level functions use a shared default VectorAlgebra instance
(Numba kernels, float64). Build your own VectorAlgebra for other settings.
"""

# Import main classes
from .operations import VectorAlgebra

# Import core functions for advanced users
from .core_functions import (
    vector_dot_product_nb_core,
    vector_distance_nb_core,
    vector_cross_product_nb_core,
    vector_angle_between_nb_core,
    vector_transform_nb_core,
    vector_operation_np_core,
    vector_dot_product_np_core,
    vector_distance_np_core,
    vector_cross_product_np_core,
    vector_angle_between_np_core,
    vector_angle_np_core,
    vector_transform_np_core
)

_default = VectorAlgebra()

add = _default.add
subtract = _default.subtract
multiply = _default.multiply
divide = _default.divide
norm = _default.norm
length = _default.length
distance = _default.distance
unit = _default.unit
dot = _default.dot
cross = _default.cross
scalar_triple_product = _default.scalar_triple_product
vector_triple_product = _default.vector_triple_product
angle_between = _default.angle_between
angle = _default.angle
transform = _default.transform
rotate = _default.rotate
shear = _default.shear

# Version info
__version__ = "1.0.0"

# Define public API
__all__ = [
    'VectorAlgebra',
    # Functional surface
    'add',
    'subtract',
    'multiply',
    'divide',
    'norm',
    'length',
    'distance',
    'unit',
    'dot',
    'cross',
    'scalar_triple_product',
    'vector_triple_product',
    'angle_between',
    'angle',
    'transform',
    'rotate',
    'shear',
    # Core functions for advanced use
    'vector_dot_product_nb_core',
    'vector_distance_nb_core',
    'vector_cross_product_nb_core',
    'vector_angle_between_nb_core',
    'vector_transform_nb_core',
    'vector_operation_np_core',
    'vector_dot_product_np_core',
    'vector_distance_np_core',
    'vector_cross_product_np_core',
    'vector_angle_between_np_core',
    'vector_angle_np_core',
    'vector_transform_np_core'
]
