"""
De Casteljau subdivision matrices for Bézier curve splitting and trimming.
"""

import numpy as np


def de_casteljau_split_1d(N, tau, basis_index):
    """
    Compute De Casteljau subdivision coefficients for a single basis vector.

    Runs the de Casteljau triangle on the unit vector e_{basis_index} and
    collects its left and right edges.
    """
    w = np.zeros(N + 1)
    w[basis_index] = 1.0
    left = [w[0]]
    right = [w[-1]]
    W = w.copy()

    for _ in range(1, N + 1):
        W = (1 - tau) * W[:-1] + tau * W[1:]
        left.append(W[0])
        right.append(W[-1])

    L = np.array(left)
    R = np.array(right[::-1])
    return L, R


def de_casteljau_split_matrices(N, tau):
    """
    Compute subdivision matrices S_left and S_right.

    For a degree-N control polygon P, S_left @ P covers [0, tau] and
    S_right @ P covers [tau, 1], both reparameterized to [0, 1].
    """
    S_left = np.zeros((N + 1, N + 1))
    S_right = np.zeros((N + 1, N + 1))

    for j in range(N + 1):
        L, R = de_casteljau_split_1d(N, tau, j)
        S_left[:, j] = L
        S_right[:, j] = R
    return S_left, S_right


def trim_matrix(N, u1, u2):
    """
    Matrix mapping a degree-N control polygon to that of its [u1, u2] piece.

    The tail of a split at u1 covers [u1, 1]; u2 sits at the local parameter
    alpha = (u2 - u1) / (1 - u1) of that tail, so the head of a second split
    at alpha is the trimmed polygon.
    """
    _, S_tail = de_casteljau_split_matrices(N, u1)
    alpha = (u2 - u1) / (1.0 - u1)
    S_head, _ = de_casteljau_split_matrices(N, alpha)
    return S_head @ S_tail


def segment_matrices_equal_params(N, n_seg):
    """
    Generate segment matrices for equal-parameter splitting.
    Returns list of (N+1, N+1) matrices, one per segment.
    """
    if n_seg < 1:
        raise ValueError("n_seg must be >= 1")
    if n_seg == 1:
        return [np.eye(N + 1)]

    mats = []
    remainder = np.eye(N + 1)

    for k in range(n_seg, 1, -1):
        tau = 1.0 / k
        S_L, S_R = de_casteljau_split_matrices(N, tau)
        mats.append(S_L @ remainder)
        remainder = S_R @ remainder
    mats.append(remainder)
    return mats
