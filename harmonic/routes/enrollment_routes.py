from fastapi import APIRouter, Depends, HTTPException, status

from harmonic.auth.dependencies import Identity, get_current_identity
from harmonic.repositories import ClassRepository, EnrollmentRepository
from harmonic.routes.deps import get_class_repository, get_enrollment_repository
from harmonic.schemas import ClassResponse, EnrollmentCreate, EnrollmentResponse

router = APIRouter(tags=['enrollments'])


@router.post('/enrolledClass', response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
def enroll_in_class(data: EnrollmentCreate, enrollments: EnrollmentRepository = Depends(get_enrollment_repository)):
    values = data.model_dump(exclude={'selection_id'})
    return enrollments.record_purchase(values, selection_id=data.selection_id)


@router.get('/enrolledClasses/{email}', response_model=list[EnrollmentResponse])
def list_enrolled_classes(
    email: str,
    identity: Identity = Depends(get_current_identity),
    enrollments: EnrollmentRepository = Depends(get_enrollment_repository),
):
    del email
    return enrollments.find_by_student(identity.email)


@router.get('/enrolledClass/{class_id}', response_model=ClassResponse)
def get_enrolled_class(class_id: int, classes: ClassRepository = Depends(get_class_repository)):
    course_class = classes.get_by_id(class_id)
    if course_class is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Class not found.')
    return course_class
