# boutique/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException, Response

from boutique.api.deps import get_order_service, require_admin
from boutique.domain.errors import NotFoundError
from boutique.domain.schemas import OrderCreate, OrderOut
from boutique.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=201)
def create_order(
    payload: OrderCreate,
    svc: OrderService = Depends(get_order_service),
):
    """
    Confirme la commande a partir du panier et le vide.
    Envoie la notification de facon asynchrone.
    """
    try:
        return svc.checkout(payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[OrderOut], dependencies=[Depends(require_admin)])
def list_orders(svc: OrderService = Depends(get_order_service)):
    return svc.list_orders()


@router.get("/{order_id}", response_model=OrderOut, dependencies=[Depends(require_admin)])
def get_order(order_id: int, svc: OrderService = Depends(get_order_service)):
    try:
        return svc.get_order(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{order_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_order(order_id: int, svc: OrderService = Depends(get_order_service)):
    try:
        svc.delete_order(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
