"""
Stripe Operations
-----------------
Thin delegations to the Stripe client, one per tool method.

Each operation takes (client, params, options) where `options` carries the
account scoping directive, and returns either a narrowed projection or the
Stripe object untouched. Errors are not handled here; the executor owns the
failure boundary.
"""

from typing import Any, Callable, Dict, List, Mapping

Params = Dict[str, Any]
Options = Dict[str, Any]
OperationFn = Callable[[Any, Params, Options], Any]


def _invoice_summary(invoice: Any) -> Dict[str, Any]:
    return {
        "id": invoice.id,
        "url": invoice.hosted_invoice_url,
        "customer": invoice.customer,
        "status": invoice.status,
    }


def create_customer(client: Any, params: Params, options: Options) -> Dict[str, Any]:
    customer = client.customers.create(params, options)
    return {"id": customer.id}


def list_customers(client: Any, params: Params, options: Options) -> List[Dict[str, Any]]:
    customers = client.customers.list(params, options)
    return [{"id": customer.id} for customer in customers.data]


def create_product(client: Any, params: Params, options: Options) -> Any:
    return client.products.create(params, options)


def list_products(client: Any, params: Params, options: Options) -> List[Any]:
    return list(client.products.list(params, options).data)


def create_price(client: Any, params: Params, options: Options) -> Any:
    return client.prices.create(params, options)


def list_prices(client: Any, params: Params, options: Options) -> List[Any]:
    return list(client.prices.list(params, options).data)


def create_payment_link(client: Any, params: Params, options: Options) -> Dict[str, Any]:
    payment_link = client.payment_links.create({"line_items": [params]}, options)
    return {"id": payment_link.id, "url": payment_link.url}


def create_invoice(client: Any, params: Params, options: Options) -> Dict[str, Any]:
    return _invoice_summary(client.invoices.create(params, options))


def create_invoice_item(client: Any, params: Params, options: Options) -> Dict[str, Any]:
    invoice_item = client.invoice_items.create(params, options)
    return {"id": invoice_item.id, "invoice": invoice_item.invoice}


def finalize_invoice(client: Any, params: Params, options: Options) -> Dict[str, Any]:
    return _invoice_summary(client.invoices.finalize_invoice(params["invoice"], {}, options))


def retrieve_balance(client: Any, params: Params, options: Options) -> Any:
    return client.balance.retrieve(params, options)


def create_refund(client: Any, params: Params, options: Options) -> Any:
    return client.refunds.create(params, options)


def cancel_subscription(client: Any, params: Params, options: Options) -> Any:
    return client.subscriptions.cancel(params["subscription"], {}, options)


OPERATIONS: Mapping[str, OperationFn] = {
    "create_customer": create_customer,
    "list_customers": list_customers,
    "create_product": create_product,
    "list_products": list_products,
    "create_price": create_price,
    "list_prices": list_prices,
    "create_payment_link": create_payment_link,
    "create_invoice": create_invoice,
    "create_invoice_item": create_invoice_item,
    "finalize_invoice": finalize_invoice,
    "retrieve_balance": retrieve_balance,
    "create_refund": create_refund,
    "cancel_subscription": cancel_subscription,
}
