from fastapi import APIRouter, Depends, HTTPException, status

from harmonic.auth.jwt_handler import normalize_email
from harmonic.repositories import UserRepository
from harmonic.routes.deps import get_user_repository
from harmonic.schemas import UserResponse, UserUpsert

router = APIRouter(tags=['users'])


@router.put('/users/{email}', response_model=UserResponse)
def upsert_user(email: str, data: UserUpsert, users: UserRepository = Depends(get_user_repository)):
    normalized_email = normalize_email(email)
    if data.email is not None and data.email != normalized_email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Email in body does not match the email in the path.',
        )

    values = data.model_dump(exclude_unset=True, exclude={'email'})
    return users.upsert_by_email(normalized_email, values)


@router.get('/users', response_model=list[UserResponse])
def list_users(users: UserRepository = Depends(get_user_repository)):
    return users.find_all()


@router.get('/users/{email}', response_model=UserResponse)
def get_user(email: str, users: UserRepository = Depends(get_user_repository)):
    user = users.find_by_email(normalize_email(email))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found.')
    return user


@router.get('/topInstructor', response_model=list[UserResponse])
def list_top_instructors(users: UserRepository = Depends(get_user_repository)):
    return users.top_instructors()


@router.get('/topInstructor/{role}', response_model=list[UserResponse])
def list_users_by_role(role: str, users: UserRepository = Depends(get_user_repository)):
    return users.find_by_role(role)
