from fastapi import APIRouter, Depends, HTTPException, status

from harmonic.auth.dependencies import Identity, get_current_identity
from harmonic.repositories import ClassRepository
from harmonic.routes.deps import get_class_repository
from harmonic.schemas import ClassCreate, ClassResponse, ClassUpdate

router = APIRouter(tags=['classes'])


@router.get('/classes', response_model=list[ClassResponse])
def list_classes(classes: ClassRepository = Depends(get_class_repository)):
    return classes.find_all()


# Registered before /classes/{email} so "approved" is never read as an email.
@router.get('/classes/approved', response_model=list[ClassResponse])
def list_approved_classes(classes: ClassRepository = Depends(get_class_repository)):
    return classes.find_approved()


@router.get('/classes/{email}', response_model=list[ClassResponse])
def list_instructor_classes(
    email: str,
    identity: Identity = Depends(get_current_identity),
    classes: ClassRepository = Depends(get_class_repository),
):
    del email
    return classes.find_by_instructor(identity.email)


@router.get('/popularClasses', response_model=list[ClassResponse])
def list_popular_classes(classes: ClassRepository = Depends(get_class_repository)):
    return classes.find_popular()


@router.post('/classes', response_model=ClassResponse, status_code=status.HTTP_201_CREATED)
def create_class(data: ClassCreate, classes: ClassRepository = Depends(get_class_repository)):
    return classes.insert(data.model_dump())


@router.patch('/classes/{class_id}', response_model=ClassResponse)
def update_class(class_id: int, data: ClassUpdate, classes: ClassRepository = Depends(get_class_repository)):
    updated = classes.update_by_id(class_id, data.model_dump(exclude_unset=True))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Class not found.')
    return updated
