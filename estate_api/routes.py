# estate_api/routes.py
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from . import crud, schemas
from .config import Settings
from .forms import Submission, project_submission, property_submission
from .storage import JsonStore
from .uploads import save_image

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_properties(request: Request) -> JsonStore:
    return request.app.state.properties

def get_projects(request: Request) -> JsonStore:
    return request.app.state.projects


def not_found(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": message})

# -----------------
# Properties
# -----------------
@router.post(
    "/properties",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.Property,
    response_model_exclude_unset=True,
)
def create_property(
    submission: Submission = Depends(property_submission),
    store: JsonStore = Depends(get_properties),
    settings: Settings = Depends(get_settings),
):
    path = save_image(submission.image, settings)
    return crud.create_property(store, submission.values, path)

@router.get("/properties")
def list_properties(store: JsonStore = Depends(get_properties)):
    # returned verbatim, whatever the file holds
    return store.list()

@router.delete("/properties/{property_id}", response_model=schemas.Message)
def delete_property(
    property_id: str,
    store: JsonStore = Depends(get_properties),
    settings: Settings = Depends(get_settings),
):
    if crud.delete_property(store, property_id, settings) is None:
        return not_found("Property not found")
    return {"message": "Property deleted successfully"}

# -----------------
# Projects
# -----------------
@router.post(
    "/projects",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.Project,
    response_model_exclude_unset=True,
)
def create_project(
    submission: Submission = Depends(project_submission),
    store: JsonStore = Depends(get_projects),
    settings: Settings = Depends(get_settings),
):
    path = save_image(submission.image, settings)
    return crud.create_project(store, submission.values, path)

@router.get("/projects")
def list_projects(store: JsonStore = Depends(get_projects)):
    return store.list()

@router.delete("/projects/{project_id}", response_model=schemas.Message)
def delete_project(
    project_id: str,
    store: JsonStore = Depends(get_projects),
    settings: Settings = Depends(get_settings),
):
    if crud.delete_project(store, project_id, settings) is None:
        return not_found("Project not found")
    return {"message": "Project deleted successfully"}
