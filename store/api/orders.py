# store/api/orders.py

from fastapi import APIRouter, Depends, HTTPException

from store.api.dependencies import get_order_interactor
from store.infrastructure import schemas
from store.interactors.order_interactor import OrderInteractor

router = APIRouter()


@router.post("/", response_model=schemas.Order, status_code=201)
async def place_order(
    order: schemas.OrderCreate,
    order_interactor: OrderInteractor = Depends(get_order_interactor),
):
    return await order_interactor.place_order(order)


@router.get("/", response_model=list[schemas.Order])
async def read_orders(
    skip: int = 0,
    limit: int = 100,
    order_interactor: OrderInteractor = Depends(get_order_interactor),
):
    return await order_interactor.get_orders(skip=skip, limit=limit)


@router.get("/{order_id}", response_model=schemas.Order)
async def read_order(
    order_id: str,
    order_interactor: OrderInteractor = Depends(get_order_interactor),
):
    order = await order_interactor.get_order(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.post("/{order_id}/items", response_model=schemas.Order)
async def add_order_item(
    order_id: str,
    item: schemas.OrderItemCreate,
    order_interactor: OrderInteractor = Depends(get_order_interactor),
):
    return await order_interactor.add_item(order_id, item)


@router.delete("/{order_id}/items/{item_id}", response_model=schemas.Order)
async def remove_order_item(
    order_id: str,
    item_id: str,
    order_interactor: OrderInteractor = Depends(get_order_interactor),
):
    return await order_interactor.remove_item(order_id, item_id)
