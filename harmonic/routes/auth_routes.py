from fastapi import APIRouter

from harmonic.auth import jwt_handler
from harmonic.schemas import TokenRequest, TokenResponse

router = APIRouter(tags=['auth'])


@router.post('/jwt', response_model=TokenResponse)
def issue_token(data: TokenRequest):
    token = jwt_handler.create_access_token(subject=data.email)
    return TokenResponse(token=token)
