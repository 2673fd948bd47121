"""Staked-token liquidity pool.

The pool swaps staked tokens for base tokens at a fixed price. The swap fee
depends on how much base-token liquidity is left after the swap:

    remaining > liquidity_target:   fee = fee_min
    remaining <= liquidity_target:  fee = fee_max - (fee_max - fee_min) * remaining / liquidity_target

Liquidity providers deposit base tokens and receive LP tokens proportional to
the value they add. Withdrawals pay out both reserves pro rata.

Every operation computes its results into locals first and only assigns to
the pool once all arithmetic has succeeded, so a failed call leaves the pool
unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from lp_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from lp_pool.errors import (
    CalculationError,
    ExchangePriceIsZero,
    FeeMaxLowerThanFeeMin,
    ValueTooLarge,
)
from lp_pool.math.fixed_point import multiply, proportional
from lp_pool.math.percentage import Percentage
from lp_pool.safe_int import S
from lp_pool.units import LpTokenAmount, Price, StakedTokenAmount, TokenAmount

logger = structlog.get_logger()


@dataclass(frozen=True)
class PoolSnapshot:
    """Point-in-time copy of every pool field."""

    price: Price
    token_amount: TokenAmount
    st_token_amount: StakedTokenAmount
    lp_token_amount: LpTokenAmount
    liquidity_target: TokenAmount
    fee_min: Percentage
    fee_max: Percentage


def _require(value: Any, expected: type, name: str) -> None:
    if type(value) is not expected:
        raise TypeError(f"{name} must be {expected.__name__}, got {type(value).__name__}")


class LpPool:
    """Liquidity pool exchanging staked tokens for base tokens.

    Reserves start at zero. price, liquidity_target, fee_min and fee_max are
    fixed for the lifetime of the pool.

    The pool is not synchronized; callers must serialize mutating calls.
    """

    def __init__(
        self,
        price: Price,
        fee_min: Percentage,
        fee_max: Percentage,
        liquidity_target: TokenAmount,
        config: PoolConfig | None = None,
    ) -> None:
        """Create an empty pool.

        Raises:
            TypeError: If an argument is not of its expected amount type
            FeeMaxLowerThanFeeMin: If fee_max < fee_min
            ExchangePriceIsZero: If price is zero
        """
        _require(price, Price, "price")
        _require(fee_min, Percentage, "fee_min")
        _require(fee_max, Percentage, "fee_max")
        _require(liquidity_target, TokenAmount, "liquidity_target")

        if fee_max < fee_min:
            raise FeeMaxLowerThanFeeMin(max=fee_max, min=fee_min)
        if price.value == 0:
            raise ExchangePriceIsZero()

        self._price = price
        self._fee_min = fee_min
        self._fee_max = fee_max
        self._liquidity_target = liquidity_target
        self._config = config or DEFAULT_POOL_CONFIG

        # Reserves are kept as raw scaled ints
        self._token_amount = 0
        self._st_token_amount = 0
        self._lp_token_amount = 0

    @classmethod
    def init(
        cls,
        price: Price,
        fee_min: Percentage,
        fee_max: Percentage,
        liquidity_target: TokenAmount,
        config: PoolConfig | None = None,
    ) -> LpPool:
        """Alias for the constructor."""
        return cls(price, fee_min, fee_max, liquidity_target, config)

    # --- Read-only state ---

    @property
    def price(self) -> Price:
        return self._price

    @property
    def fee_min(self) -> Percentage:
        return self._fee_min

    @property
    def fee_max(self) -> Percentage:
        return self._fee_max

    @property
    def liquidity_target(self) -> TokenAmount:
        return self._liquidity_target

    @property
    def config(self) -> PoolConfig:
        return self._config

    @property
    def token_amount(self) -> TokenAmount:
        """Base token reserve."""
        return TokenAmount(self._token_amount)

    @property
    def st_token_amount(self) -> StakedTokenAmount:
        """Staked token reserve."""
        return StakedTokenAmount(self._st_token_amount)

    @property
    def lp_token_amount(self) -> LpTokenAmount:
        """Outstanding LP tokens."""
        return LpTokenAmount(self._lp_token_amount)

    def snapshot(self) -> PoolSnapshot:
        return PoolSnapshot(
            price=self._price,
            token_amount=self.token_amount,
            st_token_amount=self.st_token_amount,
            lp_token_amount=self.lp_token_amount,
            liquidity_target=self._liquidity_target,
            fee_min=self._fee_min,
            fee_max=self._fee_max,
        )

    def current_liquidity(self) -> TokenAmount:
        """Total pool value in base tokens: token reserve + staked reserve * price.

        Raises:
            CalculationError: If the value does not fit in u64
        """
        return TokenAmount(self._current_value())

    def _current_value(self) -> int:
        staked_value = multiply(self._st_token_amount, self._price.value)
        return (S(self._token_amount) + staked_value).to_u64()

    # --- Operations ---

    def add_liquidity(self, token_amount: TokenAmount) -> LpTokenAmount:
        """Deposit base tokens and mint LP tokens.

        The first deposit into a valueless pool mints 1:1. Later deposits mint
        lp_supply * token_amount / current_value.

        Args:
            token_amount: Base tokens deposited

        Returns:
            LP tokens minted

        Raises:
            CalculationError: On overflow of the pool value, mint or reserves
        """
        _require(token_amount, TokenAmount, "token_amount")

        current_value = self._current_value()
        if current_value == 0:
            minted = token_amount.value
        else:
            minted = proportional(self._lp_token_amount, token_amount.value, current_value)

        new_token_amount = (S(self._token_amount) + token_amount.value).to_u64()
        new_lp_token_amount = (S(self._lp_token_amount) + minted).to_u64()

        self._token_amount = new_token_amount
        self._lp_token_amount = new_lp_token_amount

        logger.debug(
            "lp_pool_add_liquidity",
            deposited=token_amount.value,
            minted=minted,
            pool_value=current_value,
        )
        return LpTokenAmount(minted)

    def swap(self, st_token_amount: StakedTokenAmount) -> TokenAmount:
        """Exchange staked tokens for base tokens, net of fee.

        The fee is evaluated on the reserve that would remain after paying out
        the gross amount.

        Args:
            st_token_amount: Staked tokens paid into the pool

        Returns:
            Base tokens paid out

        Raises:
            CalculationError: If the base-token reserve cannot cover the gross
                amount, or on any overflow
        """
        _require(st_token_amount, StakedTokenAmount, "st_token_amount")

        gross = multiply(st_token_amount.value, self._price.value)
        if gross > self._token_amount:
            logger.debug(
                "lp_pool_swap_insufficient_liquidity",
                requested=gross,
                available=self._token_amount,
            )
            raise CalculationError(
                f"Insufficient liquidity: swap needs {gross}, reserve is {self._token_amount}"
            )

        fee = self._fee(TokenAmount(gross))
        fee_tokens = multiply(fee.value, gross)
        net = (S(gross) - fee_tokens).value

        new_token_amount = (S(self._token_amount) - net).value
        new_st_token_amount = (S(self._st_token_amount) + st_token_amount.value).to_u64()

        self._token_amount = new_token_amount
        self._st_token_amount = new_st_token_amount

        logger.debug(
            "lp_pool_swap",
            staked_in=st_token_amount.value,
            gross=gross,
            fee=fee.value,
            fee_tokens=fee_tokens,
            paid_out=net,
        )
        return TokenAmount(net)

    def remove_liquidity(
        self, lp_token_amount: LpTokenAmount
    ) -> tuple[StakedTokenAmount, TokenAmount]:
        """Redeem LP tokens for a pro-rata share of both reserves.

        Redeemed LP tokens are burned unless the pool was configured with
        burn_lp_on_withdraw=False.

        Args:
            lp_token_amount: LP tokens to redeem

        Returns:
            (staked tokens paid out, base tokens paid out)

        Raises:
            ValueTooLarge: If more LP tokens are redeemed than are outstanding
            CalculationError: On underflow of a reserve
        """
        _require(lp_token_amount, LpTokenAmount, "lp_token_amount")

        if lp_token_amount.value > self._lp_token_amount:
            raise ValueTooLarge(val=lp_token_amount.value, max=self._lp_token_amount)
        if lp_token_amount.value == 0:
            # proportional() falls back to the full amount on a zero supply
            return StakedTokenAmount.zero(), TokenAmount.zero()

        owed_staked = proportional(
            self._st_token_amount, lp_token_amount.value, self._lp_token_amount
        )
        owed_tokens = proportional(self._token_amount, lp_token_amount.value, self._lp_token_amount)

        new_token_amount = (S(self._token_amount) - owed_tokens).value
        new_st_token_amount = (S(self._st_token_amount) - owed_staked).value
        if self._config.burn_lp_on_withdraw:
            new_lp_token_amount = (S(self._lp_token_amount) - lp_token_amount.value).value
        else:
            new_lp_token_amount = self._lp_token_amount

        self._token_amount = new_token_amount
        self._st_token_amount = new_st_token_amount
        self._lp_token_amount = new_lp_token_amount

        logger.debug(
            "lp_pool_remove_liquidity",
            redeemed=lp_token_amount.value,
            staked_out=owed_staked,
            tokens_out=owed_tokens,
            burned=self._config.burn_lp_on_withdraw,
        )
        return StakedTokenAmount(owed_staked), TokenAmount(owed_tokens)

    # --- Fee curve ---

    def _fee(self, taken_token_amount: TokenAmount) -> Percentage:
        """Fee charged when taken_token_amount leaves the base-token reserve.

        Raises:
            CalculationError: If taken_token_amount exceeds the reserve
        """
        remaining = (S(self._token_amount) - taken_token_amount.value).value
        if remaining > self._liquidity_target.value:
            return self._fee_min

        discount = proportional(self._fee_delta().value, remaining, self._liquidity_target.value)
        return Percentage((S(self._fee_max.value) - discount).value)

    def _fee_delta(self) -> Percentage:
        return Percentage((S(self._fee_max.value) - self._fee_min.value).value)

    def __repr__(self) -> str:
        return (
            f"LpPool(price={self._price}, token_amount={self.token_amount}, "
            f"st_token_amount={self.st_token_amount}, lp_token_amount={self.lp_token_amount}, "
            f"liquidity_target={self._liquidity_target}, fee_min={self._fee_min}, "
            f"fee_max={self._fee_max})"
        )
