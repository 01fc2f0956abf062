"""
Custom exceptions for cube construction and selector validation
"""


class CubeError(ValueError):
    """Raised when a cube operation receives invalid input"""
    def __init__(self, message: str, error_type: str = None, details: dict = None):
        self.message = message
        self.error_type = error_type or "CubeError"
        self.details = details or {}
        super().__init__(self.message)


class InvalidSizeError(CubeError):
    """Raised when a cube is created with a size below 1"""
    def __init__(self, message: str, size=None, details: dict = None):
        self.size = size
        super().__init__(message, "InvalidSizeError", details)


class InvalidLayerError(CubeError):
    """Raised when a layer selector names an unknown axis or an out of range index"""
    def __init__(self, message: str, axis=None, index=None, details: dict = None):
        self.axis = axis
        self.index = index
        super().__init__(message, "InvalidLayerError", details)


class InvalidFaceError(CubeError):
    """Raised when a face value is outside the six-face catalog"""
    def __init__(self, message: str, face=None, details: dict = None):
        self.face = face
        super().__init__(message, "InvalidFaceError", details)


class InvalidCycleError(CubeError):
    """Raised when an orientation cycle is not 4 distinct faces"""
    def __init__(self, message: str, cycle=None, details: dict = None):
        self.cycle = cycle
        super().__init__(message, "InvalidCycleError", details)


class InvalidPositionError(CubeError):
    """Raised when a position lies outside the cube grid"""
    def __init__(self, message: str, position=None, details: dict = None):
        self.position = position
        super().__init__(message, "InvalidPositionError", details)
