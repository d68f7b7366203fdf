from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True


class ReceivedResponse(BaseModel):
    received: bool = True
