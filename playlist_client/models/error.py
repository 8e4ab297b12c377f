"""Error envelope returned by Spotify and by playlist updates."""

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

SUCCESS_STATUS = 200
SUCCESS_MESSAGE = "success"


class ErrorBody(BaseModel):
    """Inner ``error`` object: status code plus message.

    Types are strict so a decoded body is never coerced; ``"400"`` is
    rejected rather than turned into ``400``.
    """

    model_config = ConfigDict(extra="allow")

    status: StrictInt
    message: StrictStr


class ErrorEnvelope(BaseModel):
    """``{"error": {"status": ..., "message": ...}}``.

    Spotify wraps failures in this shape. Playlist updates reuse it for
    success too, so callers always get an envelope back. Unknown keys are
    kept so that ``model_dump()`` reproduces a decoded body exactly.
    """

    model_config = ConfigDict(extra="allow")

    error: ErrorBody

    @classmethod
    def success(cls) -> "ErrorEnvelope":
        return cls(error=ErrorBody(status=SUCCESS_STATUS, message=SUCCESS_MESSAGE))

    @property
    def ok(self) -> bool:
        return self.error.status == SUCCESS_STATUS and self.error.message == SUCCESS_MESSAGE

    @property
    def status(self) -> int:
        return self.error.status

    @property
    def message(self) -> str:
        return self.error.message
