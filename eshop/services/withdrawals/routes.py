from fastapi import APIRouter, Depends, status

from eshop.services.auth.dependencies import AuthContext, get_current_seller, require_admin
from eshop.services.withdrawals.dependencies import get_withdraw_service
from eshop.services.withdrawals.service import WithdrawService
from eshop.shared.models.withdraw_dto import CreateWithdrawRequest, UpdateWithdrawRequest

router = APIRouter(prefix="/withdraw", tags=["Withdrawals"])


@router.post("/create-withdraw-request", status_code=status.HTTP_201_CREATED)
async def create_withdraw_request(
    request: CreateWithdrawRequest,
    auth: AuthContext = Depends(get_current_seller),
    service: WithdrawService = Depends(get_withdraw_service),
):
    withdraw = await service.create_withdraw_request(auth.seller, request)
    return {"success": True, "withdraw": withdraw}


@router.get("/get-all-withdraw-request", status_code=status.HTTP_201_CREATED)
async def get_all_withdraw_request(
    auth: AuthContext = Depends(require_admin),
    service: WithdrawService = Depends(get_withdraw_service),
):
    withdraws = await service.get_all_withdraws()
    return {"success": True, "withdraws": withdraws}


@router.put("/update-withdraw-request/{withdraw_id}", status_code=status.HTTP_201_CREATED)
async def update_withdraw_request(
    withdraw_id: str,
    request: UpdateWithdrawRequest,
    auth: AuthContext = Depends(require_admin),
    service: WithdrawService = Depends(get_withdraw_service),
):
    withdraw = await service.settle_withdraw(withdraw_id, request)
    return {"success": True, "withdraw": withdraw}
