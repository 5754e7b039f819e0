from fastapi import APIRouter, Depends, status

from eshop.services.auth.dependencies import (
    AuthContext,
    get_current_seller,
    get_current_user,
    require_admin,
)
from eshop.services.products.dependencies import get_product_service
from eshop.services.products.service import ProductService
from eshop.shared.models.product_dto import CreateProductRequest, CreateReviewRequest

router = APIRouter(prefix="/product", tags=["Products"])


@router.post("/create-product", status_code=status.HTTP_201_CREATED)
async def create_product(
    request: CreateProductRequest,
    service: ProductService = Depends(get_product_service),
):
    product = await service.create_product(request)
    return {"success": True, "product": product}


@router.get("/get-all-products-shop/{shop_id}", status_code=status.HTTP_201_CREATED)
async def get_all_products_shop(
    shop_id: str,
    service: ProductService = Depends(get_product_service),
):
    products = await service.get_shop_products(shop_id)
    return {"success": True, "products": products}


@router.delete("/delete-shop-product/{product_id}", status_code=status.HTTP_201_CREATED)
async def delete_shop_product(
    product_id: str,
    auth: AuthContext = Depends(get_current_seller),
    service: ProductService = Depends(get_product_service),
):
    await service.delete_product(product_id)
    return {"success": True, "message": "Product Deleted successfully!"}


@router.get("/get-all-products", status_code=status.HTTP_201_CREATED)
async def get_all_products(service: ProductService = Depends(get_product_service)):
    products = await service.get_all_products()
    return {"success": True, "products": products}


@router.put("/create-new-review")
async def create_new_review(
    request: CreateReviewRequest,
    auth: AuthContext = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    await service.create_review(auth.user_id, request)
    return {"success": True, "message": "Reviewed successfully!"}


@router.get("/admin-all-products", status_code=status.HTTP_201_CREATED)
async def admin_all_products(
    auth: AuthContext = Depends(require_admin),
    service: ProductService = Depends(get_product_service),
):
    products = await service.get_all_products()
    return {"success": True, "products": products}
