from __future__ import annotations


class TorCheckError(RuntimeError):
    pass


class ClientError(TorCheckError):
    """The HTTP client failed, or its response could not be decoded."""

    def __init__(self, error: BaseException, *, decode: bool = False) -> None:
        super().__init__(str(error))
        self.error = error
        self._decode = decode

    def is_decode(self) -> bool:
        """True when the body was received but was not a usable JSON payload."""
        return self._decode


class ParsingError(TorCheckError):
    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error


class NotUsingTorError(TorCheckError):
    def __init__(self) -> None:
        super().__init__("You are not using Tor")
