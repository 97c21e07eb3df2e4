from typing import Sequence, Tuple, Union

import numpy as np

from genre_recommendation.domain.exceptions import InvalidInputError

Vector = Union[Sequence[float], np.ndarray]


def _as_vector(v: Vector) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.ndim != 1:
        raise InvalidInputError(f"Expected a one-dimensional vector, got shape {arr.shape}")
    return arr


def _as_pair(a: Vector, b: Vector) -> Tuple[np.ndarray, np.ndarray]:
    vec_a, vec_b = _as_vector(a), _as_vector(b)
    if vec_a.shape != vec_b.shape:
        raise InvalidInputError(f"Vector lengths differ: {vec_a.shape[0]} != {vec_b.shape[0]}")
    return vec_a, vec_b


def dot_product(a: Vector, b: Vector) -> float:
    """Sum of pairwise products of two equal-length vectors"""
    vec_a, vec_b = _as_pair(a, b)
    return float(np.dot(vec_a, vec_b))


def magnitude(v: Vector) -> float:
    """Euclidean norm of a vector"""
    return float(np.linalg.norm(_as_vector(v)))


def cosine_similarity(a: Vector, b: Vector) -> float:
    """Cosine of the angle between two vectors.

    Returns 0.0 when either vector has zero magnitude instead of dividing by zero.
    """
    vec_a, vec_b = _as_pair(a, b)
    squared_norms = float(np.dot(vec_a, vec_a)) * float(np.dot(vec_b, vec_b))
    if squared_norms == 0.0:
        return 0.0

    # sqrt(|a|^2 * |b|^2) keeps integer inputs exact, so cos(v, v) == 1.0
    similarity = float(np.dot(vec_a, vec_b)) / float(np.sqrt(squared_norms))
    return float(np.clip(similarity, -1.0, 1.0))
