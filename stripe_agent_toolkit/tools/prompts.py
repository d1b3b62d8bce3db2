"""Agent-facing descriptions for each Stripe tool."""

CREATE_CUSTOMER = """
This tool will create a customer in Stripe.

It takes two arguments:
- name (str): The name of the customer.
- email (str, optional): The email of the customer.
"""

LIST_CUSTOMERS = """
This tool will fetch a list of Customers from Stripe.

It takes two optional arguments:
- limit (int, optional): The number of customers to return, between 1 and 100.
- email (str, optional): Only return customers with this email address.
"""

CREATE_PRODUCT = """
This tool will create a product in Stripe.

It takes two arguments:
- name (str): The name of the product.
- description (str, optional): The description of the product.
"""

LIST_PRODUCTS = """
This tool will fetch a list of Products from Stripe.

It takes one optional argument:
- limit (int, optional): The number of products to return, between 1 and 100.
"""

CREATE_PRICE = """
This tool will create a price in Stripe. If a product has not already been
specified, a product should be created first.

It takes three arguments:
- product (str): The ID of the product to create the price for.
- unit_amount (int): The unit amount of the price in the smallest currency unit.
- currency (str): The three-letter lowercase currency code, e.g. usd.
"""

LIST_PRICES = """
This tool will fetch a list of Prices from Stripe.

It takes two optional arguments:
- product (str, optional): Only return prices for this product.
- limit (int, optional): The number of prices to return, between 1 and 100.
"""

CREATE_PAYMENT_LINK = """
This tool will create a payment link in Stripe.

It takes two arguments:
- price (str): The ID of the price to create the payment link for.
- quantity (int): The quantity of the product to include.
"""

CREATE_INVOICE = """
This tool will create an invoice in Stripe.

It takes two arguments:
- customer (str): The ID of the customer to create the invoice for. Omit it
  when a default customer has been configured.
- days_until_due (int, optional): The number of days until the invoice is due.
"""

CREATE_INVOICE_ITEM = """
This tool will create an invoice item in Stripe.

It takes three arguments:
- customer (str): The ID of the customer to create the invoice item for. Omit
  it when a default customer has been configured.
- price (str): The ID of the price for the item.
- invoice (str): The ID of the invoice to add the item to.
"""

FINALIZE_INVOICE = """
This tool will finalize an invoice in Stripe.

It takes one argument:
- invoice (str): The ID of the invoice to finalize.
"""

RETRIEVE_BALANCE = """
This tool will retrieve the balance from Stripe. It takes no input.
"""

CREATE_REFUND = """
This tool will refund a payment intent in Stripe.

It takes two arguments:
- payment_intent (str): The ID of the payment intent to refund.
- amount (int, optional): The amount to refund in cents; omit for a full refund.
"""

CANCEL_SUBSCRIPTION = """
This tool will cancel a subscription in Stripe.

It takes one argument:
- subscription (str): The ID of the subscription to cancel.
"""
