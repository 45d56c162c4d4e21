"""Job Routes — tracked jobs, their employees, import and connection discovery.

Invariants:
    - Every path with a job id goes through JobService ownership checks
    - Import and discovery writes stay committed even when the provider
      fails part-way; the error still surfaces as 502
"""

from fastapi import APIRouter, Depends, Query, Response, status

from introflow.api.dependencies import get_current_user, get_network_gateway, get_store
from introflow.core.repository_protocols import NetworkGateway
from introflow.models import User
from introflow.schemas.jobs import (
    DiscoveryResult, EmployeeCreate, EmployeeResponse, JobCreate, JobResponse,
)
from introflow.services.discovery_service import DiscoveryService
from introflow.services.entity_store import Store
from introflow.services.job_service import JobService

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=list[JobResponse])
async def list_jobs(
    limit: int | None = Query(None, ge=1, le=500),
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await JobService(store).list_jobs(user, limit)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    body: JobCreate,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await JobService(store).create_job(user, body.model_dump())


@router.post(
    "/import", response_model=list[JobResponse],
    status_code=status.HTTP_201_CREATED,
)
async def import_jobs(
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
    gateway: NetworkGateway = Depends(get_network_gateway),
):
    return await DiscoveryService(store, gateway).import_jobs(user)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await JobService(store).get_job(user, job_id)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(
    job_id: int,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    await JobService(store).delete_job(user, job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{job_id}/employees", response_model=list[EmployeeResponse])
async def list_employees(
    job_id: int,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await JobService(store).list_employees(user, job_id)


@router.post(
    "/{job_id}/employees", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    job_id: int,
    body: EmployeeCreate,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    return await JobService(store).create_employee(user, job_id, body.model_dump())


@router.post(
    "/{job_id}/discover", response_model=DiscoveryResult,
    status_code=status.HTTP_201_CREATED,
)
async def discover_connections(
    job_id: int,
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
    gateway: NetworkGateway = Depends(get_network_gateway),
):
    outcome = await DiscoveryService(store, gateway).discover_connections(user, job_id)
    return DiscoveryResult(
        job_id=outcome.job_id,
        employees_created=len(outcome.employees),
        employees_skipped=outcome.employees_skipped,
        mutuals_created=outcome.mutuals_created,
        employees=[EmployeeResponse.model_validate(e) for e in outcome.employees],
    )
