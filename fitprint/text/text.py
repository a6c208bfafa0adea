from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) into rendered output.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: int, length: int) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset, offset + length)

    def slice(self, text: str) -> str:
        return text[self.start : self.end]

    def __repr__(self) -> str:
        return f"{self.start}..{self.end}"
