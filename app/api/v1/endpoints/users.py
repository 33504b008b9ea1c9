"""
User Endpoints - Employee records, search, soft/permanent delete and bulk import
"""
from typing import Any, List, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.user_service import UserService
from app.schemas import User, UserCreate, UserUpdate, DataResponse, BulkResponse
from app.core.enums import Department
from app.api.deps import get_current_employee, require_admin
from app.core.config import settings
from atams.encryption import encrypt_response_data
from atams.exceptions import NotFoundException

router = APIRouter()
user_service = UserService()


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(get_current_employee)]
)
async def list_users(
    skip: int = Query(0, ge=0, description="Number of records to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum records to return"),
    db: Session = Depends(get_db)
):
    """
    List active employees

    **Authorization:**
    - Any linked employee
    """
    users = user_service.list_users(db, skip=skip, limit=limit)

    response = DataResponse(
        success=True,
        message="Users retrieved successfully",
        data=users
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/search",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(get_current_employee)]
)
async def search_users(
    q: str = Query("", description="Matches first/last name, email or employee id"),
    department: Optional[Department] = Query(None, description="Filter by department"),
    db: Session = Depends(get_db)
):
    """
    Search active employees

    **Query Parameters:**
    - q: case-insensitive text
    - department: optional department filter
    """
    users = user_service.search_users(
        db,
        search=q,
        department=department.value if department else None
    )

    response = DataResponse(
        success=True,
        message="Users retrieved successfully",
        data=users
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(get_current_employee)]
)
async def get_user(
    user_id: int,
    db: Session = Depends(get_db)
):
    """Get a single employee by ID"""
    user = user_service.get_user(db, user_id)

    response = DataResponse(
        success=True,
        message="User retrieved successfully",
        data=user
    )
    return encrypt_response_data(response, settings)


@router.post(
    "",
    response_model=DataResponse[User],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)]
)
async def create_user(
    user: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Create an employee

    **Authorization:**
    - Admin only

    **Errors:**
    - 409: Username, email or employee id already exists
    """
    new_user = user_service.create_user(db, user)

    return DataResponse(
        success=True,
        message="User created successfully",
        data=new_user
    )


@router.post(
    "/bulk",
    response_model=BulkResponse[User],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin)]
)
async def bulk_create_users(
    users: List[Any] = Body(..., description="Array of user objects"),
    db: Session = Depends(get_db)
):
    """
    Import many employees at once

    **Authorization:**
    - Admin only

    **Response:**
    - Always 200; each item succeeds or fails on its own
    - errors: [{username, error}] in input order
    """
    summary = user_service.bulk_create_users(db, users)

    return BulkResponse(
        success=True,
        message=f"Processed {summary['processed']} users",
        **summary
    )


@router.put(
    "/{user_id}",
    response_model=DataResponse[User],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin)]
)
async def update_user(
    user_id: int,
    user: UserUpdate,
    db: Session = Depends(get_db)
):
    """
    Update an employee (partial)

    **Authorization:**
    - Admin only
    """
    updated_user = user_service.update_user(db, user_id, user)

    return DataResponse(
        success=True,
        message="User updated successfully",
        data=updated_user
    )


@router.delete(
    "/{user_id}",
    response_model=DataResponse[User],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin)]
)
async def deactivate_user(
    user_id: int,
    db: Session = Depends(get_db)
):
    """
    Soft delete an employee (marks inactive)

    **Authorization:**
    - Admin only
    """
    user = user_service.deactivate_user(db, user_id)

    return DataResponse(
        success=True,
        message="User deactivated successfully",
        data=user
    )


@router.delete(
    "/{user_id}/permanent",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)]
)
async def delete_user_permanently(
    user_id: int,
    db: Session = Depends(get_db)
):
    """
    Erase an employee and their attendance rows

    **Authorization:**
    - Admin only

    **Errors:**
    - 404: User not found
    - 409: Other records (e.g. leave requests) still reference the user
    """
    if not user_service.delete_user_permanently(db, user_id):
        raise NotFoundException(f"User with ID {user_id} not found")

    return None
