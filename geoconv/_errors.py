__all__ = ("GeoConvError", "EncodeError", "DecodeError", "ValidationError")


class GeoConvError(Exception):
    """Base class for all geoconv exceptions"""


class EncodeError(GeoConvError):
    """An error occurred while encoding a typed geometry"""


class DecodeError(GeoConvError):
    """An error occurred while decoding a flat geometry value"""


class ValidationError(DecodeError):
    """The flat input doesn't have the shape the decoder expects"""
