"""API routes for Tag manipulation"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, status

from tagstore.dependencies.services import get_tag_service
from tagstore.schemas.base import ResponseSchema
from tagstore.schemas.tag import TagSchema
from tagstore.services.tag import TagService

tag_router = APIRouter(prefix="/tags", tags=["Tags"])

TagPayload = dict[str, Any]
# ids beyond a signed 64-bit integer never exist in the store
TagId = Annotated[int, Path(ge=1, le=2**63 - 1)]


@tag_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ResponseSchema[None],
)
def create_tag(
    payload: TagPayload = Body(examples=[{"name": "Tag One"}]),
    tag_service: TagService = Depends(get_tag_service),
):
    tag_service.create(payload)
    return ResponseSchema[None](code=status.HTTP_201_CREATED, status="Successfully created")


@tag_router.get("", response_model=ResponseSchema[list[TagSchema]])
def read_tags(tag_service: TagService = Depends(get_tag_service)):
    return ResponseSchema[list[TagSchema]](
        code=status.HTTP_200_OK,
        status="Successfully read",
        data=tag_service.find_all(),
    )


@tag_router.get("/{tag_id}", response_model=ResponseSchema[TagSchema])
def read_tag(tag_id: TagId, tag_service: TagService = Depends(get_tag_service)):
    return ResponseSchema[TagSchema](
        code=status.HTTP_200_OK,
        status="Successfully read",
        data=tag_service.find_by_id(tag_id),
    )


@tag_router.api_route(
    "/{tag_id}", methods=["PUT", "PATCH"], response_model=ResponseSchema[None]
)
def update_tag(
    tag_id: TagId,
    payload: TagPayload = Body(examples=[{"name": "Tag Two"}]),
    tag_service: TagService = Depends(get_tag_service),
):
    tag_service.update(tag_id, payload)
    return ResponseSchema[None](code=status.HTTP_200_OK, status="Successfully updated")


@tag_router.delete("/{tag_id}", response_model=ResponseSchema[None])
def delete_tag(tag_id: TagId, tag_service: TagService = Depends(get_tag_service)):
    tag_service.delete(tag_id)
    return ResponseSchema[None](code=status.HTTP_200_OK, status="Successfully deleted")
