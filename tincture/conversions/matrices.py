"""Fixed sRGB (D65) constants. Matrices are flat row-major 9-tuples."""
import numpy as np

RGB_TO_XYZ = (
    0.4124564, 0.3575761, 0.1804375,
    0.2126729, 0.7151522, 0.0721750,
    0.0193339, 0.1191920, 0.9503041,
)

XYZ_TO_RGB = (
     3.2404542, -1.5371385, -0.4985314,
    -0.9692660,  1.8760108,  0.0415560,
     0.0556434, -0.2040259,  1.0572252,
)

# Reference white (Xn, Yn, Zn)
D65_WHITE = (0.95047, 1.00000, 1.08883)

LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3

LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def mat_vec(matrix, x: float, y: float, z: float) -> tuple[float, float, float]:
    """Multiply a flat row-major 3x3 matrix by the column vector (x, y, z)."""
    return (
        matrix[0] * x + matrix[1] * y + matrix[2] * z,
        matrix[3] * x + matrix[4] * y + matrix[5] * z,
        matrix[6] * x + matrix[7] * y + matrix[8] * z,
    )


def as_np_matrix(matrix) -> np.ndarray:
    return np.asarray(matrix, dtype=float).reshape(3, 3)
