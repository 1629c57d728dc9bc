"""Split Phase.

Goal: take code that deals with two different things and split it into
separate phases that communicate through an intermediate data structure.
"""

from __future__ import annotations

from types import SimpleNamespace

from refactoring_catalog.base import RefactorBase
from refactoring_catalog.registry import entry_point


class BeforeRefactor(RefactorBase):
    # The first lines compute the product-oriented price, the rest the
    # shipping cost. The two calculations are independent.
    def price_order(self, product, quantity, shipping_method):
        base_price = product.base_price * quantity
        discount = (
            max(quantity - product.discount_threshold, 0)
            * product.base_price * product.discount_rate
        )
        if base_price > shipping_method.discount_threshold:
            shipping_per_case = shipping_method.discounted_fee
        else:
            shipping_per_case = shipping_method.fee_per_case
        shipping_cost = quantity * shipping_per_case
        return base_price - discount + shipping_cost


class Refactor1(RefactorBase):
    """Extract Function on the shipping calculation."""

    def price_order(self, product, quantity, shipping_method):
        base_price = product.base_price * quantity
        discount = (
            max(quantity - product.discount_threshold, 0)
            * product.base_price * product.discount_rate
        )
        return self.apply_shipping(base_price, shipping_method, quantity, discount)

    def apply_shipping(self, base_price, shipping_method, quantity, discount):
        if base_price > shipping_method.discount_threshold:
            shipping_per_case = shipping_method.discounted_fee
        else:
            shipping_per_case = shipping_method.fee_per_case
        shipping_cost = quantity * shipping_per_case
        return base_price - discount + shipping_cost


class Refactor2(RefactorBase):
    """Move base_price, quantity and discount into the intermediate structure."""

    def price_order(self, product, quantity, shipping_method):
        base_price = product.base_price * quantity
        discount = (
            max(quantity - product.discount_threshold, 0)
            * product.base_price * product.discount_rate
        )
        price_data = {"base_price": base_price, "quantity": quantity, "discount": discount}
        return self.apply_shipping(price_data, shipping_method)

    def apply_shipping(self, price_data, shipping_method):
        if price_data["base_price"] > shipping_method.discount_threshold:
            shipping_per_case = shipping_method.discounted_fee
        else:
            shipping_per_case = shipping_method.fee_per_case
        shipping_cost = price_data["quantity"] * shipping_per_case
        return price_data["base_price"] - price_data["discount"] + shipping_cost


class Refactor3(RefactorBase):
    """With the structure complete, the first phase becomes its own function."""

    def price_order(self, product, quantity, shipping_method):
        price_data = self.pricing_data(product, quantity)
        return self.apply_shipping(price_data, shipping_method)

    def pricing_data(self, product, quantity):
        base_price = product.base_price * quantity
        discount = (
            max(quantity - product.discount_threshold, 0)
            * product.base_price * product.discount_rate
        )
        return {"base_price": base_price, "quantity": quantity, "discount": discount}

    def apply_shipping(self, price_data, shipping_method):
        if price_data["base_price"] > shipping_method.discount_threshold:
            shipping_per_case = shipping_method.discounted_fee
        else:
            shipping_per_case = shipping_method.fee_per_case
        shipping_cost = price_data["quantity"] * shipping_per_case
        return price_data["base_price"] - price_data["discount"] + shipping_cost


@entry_point("FirstSetOfRefactorings::SplitPhase")
class Tests:
    PRODUCT = SimpleNamespace(base_price=10, discount_threshold=5, discount_rate=0.9)
    SHIPPING_METHOD = SimpleNamespace(discount_threshold=5, discounted_fee=1, fee_per_case=2)

    def run(self):
        return [
            klass().price_order(self.PRODUCT, 15, self.SHIPPING_METHOD) == 75
            for klass in (BeforeRefactor, Refactor1, Refactor2, Refactor3)
        ]
