from app.schemas.user import UserCreate, UserResponse, UserLogin, Token
from app.schemas.booking import BookingRequest, BookingIdResponse, BookingResponse, RoomResponse

__all__ = [
    "UserCreate", "UserResponse", "UserLogin", "Token",
    "BookingRequest", "BookingIdResponse", "BookingResponse", "RoomResponse",
]
