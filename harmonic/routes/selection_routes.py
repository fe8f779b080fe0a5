from fastapi import APIRouter, Depends, status

from harmonic.auth.dependencies import Identity, get_current_identity
from harmonic.repositories import SelectionRepository
from harmonic.routes.deps import get_selection_repository
from harmonic.schemas import DeleteResult, SelectionCreate, SelectionResponse

router = APIRouter(tags=['selections'])


@router.get('/selected/{email}', response_model=list[SelectionResponse])
def list_selected_classes(
    email: str,
    identity: Identity = Depends(get_current_identity),
    selections: SelectionRepository = Depends(get_selection_repository),
):
    del email
    return selections.find_by_student(identity.email)


@router.post('/selected', response_model=SelectionResponse, status_code=status.HTTP_201_CREATED)
def select_class(data: SelectionCreate, selections: SelectionRepository = Depends(get_selection_repository)):
    return selections.insert(data.model_dump())


@router.delete('/selected/{selection_id}', response_model=DeleteResult)
def remove_selected_class(selection_id: int, selections: SelectionRepository = Depends(get_selection_repository)):
    return DeleteResult(deleted_count=selections.delete_by_id(selection_id))
