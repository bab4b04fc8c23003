"""
Payment Variant Family
======================
Concrete payment methods. pay() only reports what would be charged; the
charge itself belongs to the payment provider, not to object creation.
"""

from ..interfaces.products import Amount, PaymentMethod, PaymentReceipt, PaymentVariant


class CreditCardPayment(PaymentMethod):
    variant = PaymentVariant.CREDIT_CARD

    def pay(self, amount: Amount) -> PaymentReceipt:
        return PaymentReceipt(
            method=self.variant,
            amount=amount,
            message=f"Paid {amount} by credit card",
        )


class PayPalPayment(PaymentMethod):
    variant = PaymentVariant.PAYPAL

    def pay(self, amount: Amount) -> PaymentReceipt:
        return PaymentReceipt(
            method=self.variant,
            amount=amount,
            message=f"Paid {amount} with PayPal",
        )


PAYMENT_FAMILIES = {
    PaymentVariant.CREDIT_CARD: {CreditCardPayment.kind: CreditCardPayment},
    PaymentVariant.PAYPAL: {PayPalPayment.kind: PayPalPayment},
}
