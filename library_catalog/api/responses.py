from fastapi import Response
from fastapi.responses import JSONResponse, PlainTextResponse


class ResponseSink:
    """Collects the single payload of a request and turns it into a Response.

    A list becomes a JSON body, a string a plain-text body.
    """

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.response: Response | None = None

    def send(self, payload: list[str] | str) -> None:
        if self.response is not None:
            raise RuntimeError("Response already sent")
        if isinstance(payload, str):
            self.response = PlainTextResponse(payload, status_code=self.status_code)
        else:
            self.response = JSONResponse(list(payload), status_code=self.status_code)
