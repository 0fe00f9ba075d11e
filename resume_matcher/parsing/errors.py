from __future__ import annotations


class DocumentError(ValueError):
    """Base class for failures turning an uploaded file into resume text."""


class UnsupportedFormatError(DocumentError):
    pass


class DocumentDecodeError(DocumentError):
    pass


class DocumentTooShortError(DocumentError):
    def __init__(self, characters: int, min_chars: int):
        super().__init__(
            "The file appears to be empty or too short. Please upload a complete resume."
        )
        self.characters = characters
        self.min_chars = min_chars
