from pydantic import BaseModel


class ErrorPayload(BaseModel):
    """JSON body sent to clients that asked for a machine-readable error."""

    statusCode: int
    message: str
