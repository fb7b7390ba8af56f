from .format_type import ColorFormat
from .color_types import Pixel, RGBA, HSL, XYZ, Lab, CMYK, ColorSpace

__all__ = ["ColorFormat", "Pixel", "RGBA", "HSL", "XYZ", "Lab", "CMYK", "ColorSpace"]
