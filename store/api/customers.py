# store/api/customers.py

from fastapi import APIRouter, Depends, HTTPException

from store.api.dependencies import get_customer_interactor
from store.infrastructure import schemas
from store.interactors.customer_interactor import CustomerInteractor

router = APIRouter()


@router.post("/", response_model=schemas.Customer, status_code=201)
async def create_customer(
    customer: schemas.CustomerCreate,
    customer_interactor: CustomerInteractor = Depends(get_customer_interactor),
):
    return await customer_interactor.create_customer(customer)


@router.get("/", response_model=list[schemas.Customer])
async def read_customers(
    skip: int = 0,
    limit: int = 100,
    customer_interactor: CustomerInteractor = Depends(get_customer_interactor),
):
    return await customer_interactor.get_customers(skip=skip, limit=limit)


@router.get("/{customer_id}", response_model=schemas.Customer)
async def read_customer(
    customer_id: str,
    customer_interactor: CustomerInteractor = Depends(get_customer_interactor),
):
    customer = await customer_interactor.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.put("/{customer_id}", response_model=schemas.Customer)
async def update_customer(
    customer_id: str,
    customer_update: schemas.CustomerUpdate,
    customer_interactor: CustomerInteractor = Depends(get_customer_interactor),
):
    return await customer_interactor.update_customer(customer_id, customer_update)


@router.put("/{customer_id}/address", response_model=schemas.Customer)
async def change_address(
    customer_id: str,
    address: schemas.Address,
    customer_interactor: CustomerInteractor = Depends(get_customer_interactor),
):
    return await customer_interactor.change_address(customer_id, address)


@router.post("/{customer_id}/activate", response_model=schemas.Customer)
async def activate_customer(
    customer_id: str,
    customer_interactor: CustomerInteractor = Depends(get_customer_interactor),
):
    return await customer_interactor.activate_customer(customer_id)


@router.post("/{customer_id}/deactivate", response_model=schemas.Customer)
async def deactivate_customer(
    customer_id: str,
    customer_interactor: CustomerInteractor = Depends(get_customer_interactor),
):
    return await customer_interactor.deactivate_customer(customer_id)
