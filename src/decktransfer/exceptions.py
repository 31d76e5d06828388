"""Exception hierarchy for decktransfer."""


class DeckTransferError(Exception):
    """Base exception for all decktransfer errors."""

    pass


class GeometryError(DeckTransferError):
    """Errors in geometric calculations."""

    pass


class InvalidGeometryError(GeometryError):
    """Empty or degenerate boundary, or a polygon with too few points."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class LineOutOfBoundsError(InvalidGeometryError):
    """A derived centerline or cutline point falls outside the section."""

    def __init__(
        self,
        line_kind: str,
        line_name: str,
        point: tuple[float, float],
        bounds: tuple[float, float, float, float],
    ) -> None:
        self.line_kind = line_kind
        self.line_name = line_name
        self.point = point
        self.bounds = bounds
        x_min, x_max, y_min, y_max = bounds
        super().__init__(
            f"Invalid {line_kind} {line_name}: ({point[0]:.4f}, {point[1]:.4f}) "
            f"is outside section bounds "
            f"[X: {x_min:.4f} to {x_max:.4f}, Y: {y_min:.4f} to {y_max:.4f}]"
        )


class DocumentError(DeckTransferError):
    """Errors related to the interchange file contents."""

    pass


class MalformedFileError(DocumentError):
    """Interchange file is not valid JSON or does not match the schema."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed section file '{path}': {reason}")


class EmptyDocumentError(DocumentError):
    """Interchange file contains no sections."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No sections found in '{path}'")


class IOFailureError(DeckTransferError):
    """Reading or writing the interchange file failed at the OS level."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"I/O failure on '{path}': {reason}")


class FileReadError(IOFailureError):
    """Error reading a section file."""

    pass


class FileWriteError(IOFailureError):
    """Error writing a section file."""

    pass


class TransferError(DeckTransferError):
    """The target tool rejected the section."""

    def __init__(self, section_name: str, reason: str) -> None:
        self.section_name = section_name
        self.reason = reason
        super().__init__(f"Transfer of section '{section_name}' failed: {reason}")
