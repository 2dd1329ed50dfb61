import numpy as np

# Identity minus 4-neighbour Laplacian, row-major.
IDENTITY_MINUS_LAPLACIAN = np.array(
    [[0.0, -1.0, 0.0],
     [-1.0, 5.0, -1.0],
     [0.0, -1.0, 0.0]],
    dtype=np.float32,
)


def make_kernel(amount: float) -> np.ndarray:
    """
    Return a fresh 3x3 kernel whose center weight is scaled by *amount*.

    amount = 0 → pure negative Laplacian (edges only)
    amount = 1 → identity minus Laplacian (classic sharpen)
    """
    kernel = IDENTITY_MINUS_LAPLACIAN.copy()
    kernel[1, 1] *= amount
    return kernel
