from eshop.common.constants import TypeMsg
from eshop.common.exceptions import NotFoundError
from eshop.common.logger import log_info
from eshop.services.shops.repository import ShopRepository
from eshop.services.withdrawals.repository import WithdrawRepository
from eshop.shared.models.shop_dto import ShopDTO
from eshop.shared.models.withdraw_dto import CreateWithdrawRequest, UpdateWithdrawRequest, WithdrawDTO


class WithdrawService:
    def __init__(self, repository: WithdrawRepository, shops: ShopRepository):
        self.repository = repository
        self.shops = shops

    async def create_withdraw_request(self, seller: ShopDTO, request: CreateWithdrawRequest) -> WithdrawDTO:
        """Records a payout request and takes the amount off the seller's balance."""
        row = await self.repository.create_withdraw(
            seller.model_dump(by_alias=True, mode="json"), seller.id, request.amount
        )
        await self.shops.decrement_available_balance(seller.id, request.amount)

        withdraw = WithdrawDTO.model_validate(row)
        await log_info(
            f"Withdraw {withdraw.id} of {request.amount} requested by shop {seller.id}",
            type_msg=TypeMsg.INFO,
        )
        return withdraw

    async def get_all_withdraws(self) -> list[WithdrawDTO]:
        rows = await self.repository.get_all_withdraws()
        return [WithdrawDTO.model_validate(row) for row in rows]

    async def settle_withdraw(self, withdraw_id: str, request: UpdateWithdrawRequest) -> WithdrawDTO:
        """Marks a payout as paid. The seller's balance is not touched."""
        row = await self.repository.mark_succeeded(withdraw_id)
        if not row:
            raise NotFoundError("Withdraw not found.", status_code=404)

        if not await self.shops.get_shop_by_id(request.seller_id):
            raise NotFoundError("Seller not found.", status_code=404)

        await log_info(f"Withdraw {withdraw_id} settled", type_msg=TypeMsg.INFO)
        return WithdrawDTO.model_validate(row)
