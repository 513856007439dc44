#boutique/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Response
from redis.exceptions import RedisError

from boutique.api.deps import get_cart_service
from boutique.domain.errors import NotFoundError, CooldownActiveError
from boutique.domain.schemas import (
    AddToCartIn,
    QuantityIn,
    CartOut,
    CartCountOut,
    CartScope,
)
from boutique.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


@router.get("/{scope}/{owner}", response_model=CartOut)
def get_cart(scope: CartScope, owner: str, svc: CartService = Depends(get_cart_service)):
    try:
        return svc.get_cart(scope, owner)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{scope}/{owner}/count", response_model=CartCountOut)
def get_cart_count(scope: CartScope, owner: str, svc: CartService = Depends(get_cart_service)):
    try:
        return CartCountOut(count=svc.count(scope, owner))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{scope}/{owner}/items", response_model=CartOut)
def add_item(
    scope: CartScope,
    owner: str,
    payload: AddToCartIn,
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.add_product(
            scope=scope,
            owner=owner,
            product_id=payload.product_id,
            selected_color=payload.selected_color,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CooldownActiveError as e:
        raise HTTPException(status_code=429, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RedisError:
        # fenetre anti double-clic indisponible apres les retries
        raise HTTPException(status_code=503, detail="Service panier momentanement indisponible")


@router.patch("/{scope}/{owner}/items/{product_id}", response_model=CartOut)
def set_item_quantity(
    scope: CartScope,
    owner: str,
    product_id: int,
    payload: QuantityIn,
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.set_quantity(scope, owner, product_id, payload.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{scope}/{owner}/items/{product_id}", response_model=CartOut)
def remove_item(
    scope: CartScope,
    owner: str,
    product_id: int,
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.remove_product(scope, owner, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{scope}/{owner}", status_code=204)
def clear_cart(scope: CartScope, owner: str, svc: CartService = Depends(get_cart_service)):
    try:
        svc.clear(scope, owner)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
