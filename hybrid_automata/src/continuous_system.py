"""
Discrete-time continuous systems attached to the modes of a hybrid system.

Only the interface needed by HybridSystem is provided: state and input
dimensions, and a single step of the dynamics.
"""

from typing import Optional

import numpy as np


class DiscreteIdentitySystem:
    """Discrete-time identity system x[k+1] = x[k]."""

    def __init__(self, statedim: int):
        if statedim < 0:
            raise ValueError("State dimension must be non-negative")
        self._statedim = statedim

    @property
    def statedim(self) -> int:
        return self._statedim

    @property
    def inputdim(self) -> int:
        return 0

    def step(self, x: np.ndarray, u: Optional[np.ndarray] = None) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        if x.shape != (self.statedim,):
            raise ValueError(
                f"State must have shape ({self.statedim},), got {x.shape}",
            )
        return x.copy()

    def __repr__(self) -> str:
        return f"DiscreteIdentitySystem(statedim={self.statedim})"


class DiscreteLinearControlSystem:
    """Discrete-time linear control system x[k+1] = A x[k] + B u[k].

    Args:
        A: Square state matrix of shape (n, n)
        B: Input matrix of shape (n, m)
    """

    def __init__(self, A: np.ndarray, B: np.ndarray):
        A = np.atleast_2d(np.asarray(A, dtype=float))
        B = np.asarray(B, dtype=float)
        if B.ndim == 1:
            B = B.reshape(-1, 1)

        if A.shape[0] != A.shape[1]:
            raise ValueError(f"A must be square, got shape {A.shape}")
        if B.shape[0] != A.shape[0]:
            raise ValueError(
                f"B must have {A.shape[0]} rows to match A, got shape {B.shape}",
            )
        self.A = A
        self.B = B

    @property
    def statedim(self) -> int:
        return self.A.shape[0]

    @property
    def inputdim(self) -> int:
        return self.B.shape[1]

    def step(self, x: np.ndarray, u: Optional[np.ndarray] = None) -> np.ndarray:
        """Apply one step of the dynamics. A missing input is taken as zero."""
        x = np.asarray(x, dtype=float)
        if x.shape != (self.statedim,):
            raise ValueError(
                f"State must have shape ({self.statedim},), got {x.shape}",
            )
        if u is None:
            u = np.zeros(self.inputdim)
        u = np.atleast_1d(np.asarray(u, dtype=float))
        if u.shape != (self.inputdim,):
            raise ValueError(
                f"Input must have shape ({self.inputdim},), got {u.shape}",
            )
        return self.A @ x + self.B @ u

    def __repr__(self) -> str:
        return (
            f"DiscreteLinearControlSystem(statedim={self.statedim}, "
            f"inputdim={self.inputdim})"
        )
