import codecs
import unicodedata
from pathlib import Path

from langseg.core.exceptions import DecodingError


class TextDecoder:
    """
    Turns raw bytes into the text the analyzers consume.

    Handles:
    - Byte order mark removal
    - Decoding with a configurable codec and error policy
    - Optional Unicode normalization (NFC keeps accented letters composed)
    """

    ERROR_POLICIES = ("strict", "replace", "ignore")

    def __init__(
        self,
        encoding: str = "utf-8",
        errors: str = "strict",
        normalization: str | None = "NFC",
    ):
        """Initialize decoder with the codec and error policy to use."""
        try:
            self._codec = codecs.lookup(encoding).name
        except LookupError:
            raise DecodingError(f"Unknown encoding '{encoding}'", {"encoding": encoding})
        if errors not in self.ERROR_POLICIES:
            raise DecodingError(f"Unknown error policy '{errors}'", {"errors": errors})

        self.encoding = encoding
        self.errors = errors
        self.normalization = normalization

    def decode(self, data: bytes) -> str:
        """
        Decode bytes to text.

        Args:
            data: Raw file contents

        Returns:
            Decoded (and normalized) text

        Raises:
            DecodingError: If the bytes are invalid under the strict policy
        """
        if self._codec == "utf-8" and data.startswith(codecs.BOM_UTF8):
            data = data[len(codecs.BOM_UTF8):]

        try:
            text = data.decode(self.encoding, self.errors)
        except UnicodeDecodeError as e:
            raise DecodingError(
                f"Input is not valid {self.encoding} at byte {e.start}",
                {"encoding": self.encoding, "position": e.start},
            ) from e

        return self.normalize(text)

    def normalize(self, text: str) -> str:
        """Apply the configured Unicode normalization to already decoded text."""
        if self.normalization:
            return unicodedata.normalize(self.normalization, text)
        return text

    def read_file(self, path: str | Path) -> str:
        """Read and decode a file."""
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise DecodingError(f"Cannot read '{path}': {e}", {"path": str(path)}) from e
        return self.decode(data)
