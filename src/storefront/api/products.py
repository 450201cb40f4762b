"""HTTP API – /product routes.

Static paths are registered before ``/{product_id}`` so they are not
swallowed by it.
"""
from __future__ import annotations

from typing import Annotated, Any, Literal

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from storefront.adapters.fastapi import staged_upload
from storefront.api.deps import ContainerDep
from storefront.domain import NewProduct, ProductChanges, ProductSearch

router = APIRouter(prefix="/product", tags=["product"])


@router.post("/new", status_code=status.HTTP_201_CREATED)
async def create_product(
    container: ContainerDep,
    name: Annotated[str | None, Form()] = None,
    price: Annotated[float | None, Form()] = None,
    stock: Annotated[int | None, Form()] = None,
    category: Annotated[str | None, Form()] = None,
    photo: Annotated[UploadFile | None, File()] = None,
) -> dict[str, Any]:
    fields = NewProduct(name=name, price=price, stock=stock, category=category)
    async with staged_upload(photo, container.settings.upload_dir) as path:
        await container.products.create(fields, path)
    return {"success": True, "message": "Product created successfully"}


@router.get("/latest")
async def latest_products(container: ContainerDep) -> dict[str, Any]:
    return {"success": True, "products": await container.products.latest()}


@router.get("/categories")
async def categories(container: ContainerDep) -> dict[str, Any]:
    return {"success": True, "categories": await container.products.categories()}


@router.get("/admin-products")
async def admin_products(container: ContainerDep) -> dict[str, Any]:
    return {"success": True, "products": await container.products.admin_products()}


@router.get("/all")
async def search_products(
    container: ContainerDep,
    search: str | None = None,
    category: str | None = None,
    price: Annotated[float | None, Query(ge=0)] = None,
    sort: Literal["asc", "desc"] | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
) -> dict[str, Any]:
    criteria = ProductSearch(search=search, category=category, max_price=price, sort=sort)
    result = await container.products.search(criteria, page=page)
    return {"success": True, "products": result.products, "total_page": result.total_page}


@router.get("/{product_id}")
async def get_product(product_id: str, container: ContainerDep) -> dict[str, Any]:
    return {"success": True, "product": await container.products.get(product_id)}


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    container: ContainerDep,
    name: Annotated[str | None, Form()] = None,
    price: Annotated[float | None, Form()] = None,
    stock: Annotated[int | None, Form()] = None,
    category: Annotated[str | None, Form()] = None,
    photo: Annotated[UploadFile | None, File()] = None,
) -> dict[str, Any]:
    changes = ProductChanges(name=name, price=price, stock=stock, category=category)
    async with staged_upload(photo, container.settings.upload_dir) as path:
        await container.products.update(product_id, changes, path)
    return {"success": True, "message": "Product updated successfully"}


@router.delete("/{product_id}")
async def delete_product(product_id: str, container: ContainerDep) -> dict[str, Any]:
    await container.products.delete(product_id)
    return {"success": True, "message": "Product deleted successfully"}
