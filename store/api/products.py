# store/api/products.py

from fastapi import APIRouter, Depends, HTTPException

from store.api.dependencies import get_product_interactor
from store.infrastructure import schemas
from store.interactors.product_interactor import ProductInteractor

router = APIRouter()


@router.post("/", response_model=schemas.Product, status_code=201)
async def create_product(
    product: schemas.ProductCreate,
    product_interactor: ProductInteractor = Depends(get_product_interactor),
):
    return await product_interactor.create_product(product)


@router.get("/", response_model=list[schemas.Product])
async def read_products(
    skip: int = 0,
    limit: int = 100,
    product_interactor: ProductInteractor = Depends(get_product_interactor),
):
    return await product_interactor.get_products(skip=skip, limit=limit)


@router.get("/{product_id}", response_model=schemas.Product)
async def read_product(
    product_id: str,
    product_interactor: ProductInteractor = Depends(get_product_interactor),
):
    product = await product_interactor.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/{product_id}", response_model=schemas.Product)
async def update_product(
    product_id: str,
    product_update: schemas.ProductUpdate,
    product_interactor: ProductInteractor = Depends(get_product_interactor),
):
    return await product_interactor.update_product(product_id, product_update)
