"""
Enterprise management API routes.

Provides CRUD operations for enterprises and their settings. Writes emit
notification events and reads consult the external cache first; both go
through the event publisher and never fail the request.
"""

import logging
from typing import Any, List, Optional, Union
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, status
from pydantic import BaseModel, TypeAdapter, ValidationError

from enterprise_service.api.dependencies import get_enterprise_service, get_event_publisher
from enterprise_service.events import EventPublisher
from enterprise_service.events.publisher import (
    CACHE_ENTERPRISE,
    CACHE_ENTERPRISES,
    ENTERPRISE_CREATED,
    ENTERPRISE_DELETED,
    ENTERPRISE_UPDATED,
    GET_ALL_ENTERPRISES,
    GET_ENTERPRISE,
    INVALIDATE_ENTERPRISE_CACHE,
)
from enterprise_service.middleware.auth import get_current_principal
from enterprise_service.schemas.enterprise import (
    EnterpriseCreate,
    EnterpriseResponse,
    EnterpriseUpdate,
    MessageResponse,
)
from enterprise_service.services.enterprise import EnterpriseService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/enterprises",
    tags=["enterprises"],
    dependencies=[Depends(get_current_principal)],
)


async def _cached(
    publisher: EventPublisher, pattern: str, data: dict[str, Any], schema: Any
) -> Optional[Any]:
    """Look up a cached value; anything that does not match the schema is a miss."""
    cached = await publisher.send(pattern, data)
    if not cached:
        return None
    try:
        return TypeAdapter(schema).validate_python(cached)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed cache reply for '{pattern}': {e.error_count()} errors")
        return None


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json")


@router.post("", response_model=EnterpriseResponse, status_code=status.HTTP_201_CREATED)
async def create_enterprise(
    enterprise: EnterpriseCreate,
    background_tasks: BackgroundTasks,
    enterprise_service: EnterpriseService = Depends(get_enterprise_service),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    Create a new enterprise with its settings.

    Args:
        enterprise: Enterprise data
        background_tasks: Runs the notification after the response
        enterprise_service: Enterprise service
        publisher: Event publisher

    Returns:
        Created enterprise
    """
    created = await enterprise_service.create(enterprise)

    background_tasks.add_task(
        publisher.emit,
        ENTERPRISE_CREATED,
        {"enterpriseId": str(created.enterprise_id), "name": created.name},
    )
    return created


@router.get("", response_model=List[EnterpriseResponse])
async def list_enterprises(
    background_tasks: BackgroundTasks,
    enterprise_service: EnterpriseService = Depends(get_enterprise_service),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    List enterprises.

    Served from the external cache when it answers, otherwise from the
    database, after which the cache is asked to store the result.
    """
    cached = await _cached(publisher, GET_ALL_ENTERPRISES, {}, List[EnterpriseResponse])
    if cached:
        return cached

    enterprises = [
        EnterpriseResponse.model_validate(enterprise)
        for enterprise in await enterprise_service.find_all()
    ]
    background_tasks.add_task(
        publisher.emit, CACHE_ENTERPRISES, [_dump(enterprise) for enterprise in enterprises]
    )
    return enterprises


@router.get("/{enterprise_id}", response_model=EnterpriseResponse)
async def get_enterprise(
    enterprise_id: UUID,
    background_tasks: BackgroundTasks,
    enterprise_service: EnterpriseService = Depends(get_enterprise_service),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    Get enterprise by ID.

    Raises:
        NotFoundError: If enterprise not found
    """
    cached = await _cached(
        publisher, GET_ENTERPRISE, {"id": str(enterprise_id)}, EnterpriseResponse
    )
    if cached:
        return cached

    enterprise = EnterpriseResponse.model_validate(
        await enterprise_service.find_one(enterprise_id)
    )
    background_tasks.add_task(
        publisher.emit, CACHE_ENTERPRISE, {"id": str(enterprise_id), "data": _dump(enterprise)}
    )
    return enterprise


async def _update(
    enterprise_id: UUID,
    changes: Union[EnterpriseCreate, EnterpriseUpdate],
    background_tasks: BackgroundTasks,
    enterprise_service: EnterpriseService,
    publisher: EventPublisher,
):
    updated = await enterprise_service.update(enterprise_id, changes)

    background_tasks.add_task(
        publisher.emit,
        ENTERPRISE_UPDATED,
        {
            "enterpriseId": str(enterprise_id),
            "updates": changes.model_dump(mode="json", exclude_unset=True),
        },
    )
    background_tasks.add_task(publisher.emit, INVALIDATE_ENTERPRISE_CACHE, {"id": str(enterprise_id)})
    return updated


@router.put("/{enterprise_id}", response_model=EnterpriseResponse)
async def replace_enterprise(
    enterprise_id: UUID,
    enterprise: EnterpriseCreate,
    background_tasks: BackgroundTasks,
    enterprise_service: EnterpriseService = Depends(get_enterprise_service),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    Update enterprise with a full enterprise body.

    Raises:
        NotFoundError: If enterprise not found
    """
    return await _update(enterprise_id, enterprise, background_tasks, enterprise_service, publisher)


@router.patch("/{enterprise_id}", response_model=EnterpriseResponse)
async def update_enterprise(
    enterprise_id: UUID,
    enterprise_update: EnterpriseUpdate,
    background_tasks: BackgroundTasks,
    enterprise_service: EnterpriseService = Depends(get_enterprise_service),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    Partially update enterprise.

    Settings fields are merged into the existing settings.

    Args:
        enterprise_id: Enterprise UUID
        enterprise_update: Fields to update
        background_tasks: Runs the notifications after the response
        enterprise_service: Enterprise service
        publisher: Event publisher

    Returns:
        Updated enterprise

    Raises:
        NotFoundError: If enterprise not found
    """
    return await _update(
        enterprise_id, enterprise_update, background_tasks, enterprise_service, publisher
    )


@router.delete("/{enterprise_id}", response_model=MessageResponse)
async def delete_enterprise(
    enterprise_id: UUID,
    background_tasks: BackgroundTasks,
    enterprise_service: EnterpriseService = Depends(get_enterprise_service),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    Delete enterprise and its settings.

    Raises:
        NotFoundError: If enterprise not found
    """
    await enterprise_service.remove(enterprise_id)

    background_tasks.add_task(publisher.emit, ENTERPRISE_DELETED, {"enterpriseId": str(enterprise_id)})
    background_tasks.add_task(publisher.emit, INVALIDATE_ENTERPRISE_CACHE, {"id": str(enterprise_id)})
    return MessageResponse(message="Enterprise deleted successfully")
