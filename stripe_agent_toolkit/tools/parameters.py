"""Parameter schemas for every Stripe tool."""

from .schema import ParameterType, ToolParameter, ToolSchema

# Lowercase ISO-4217 codes accepted for prices
CURRENCIES = frozenset({
    "aed", "afn", "all", "amd", "ang", "aoa", "ars", "aud", "awg", "azn",
    "bam", "bbd", "bdt", "bgn", "bhd", "bif", "bmd", "bnd", "bob", "brl",
    "bsd", "bwp", "byn", "bzd", "cad", "cdf", "chf", "clp", "cny", "cop",
    "crc", "cve", "czk", "djf", "dkk", "dop", "dzd", "egp", "etb", "eur",
    "fjd", "fkp", "gbp", "gel", "gip", "gmd", "gnf", "gtq", "gyd", "hkd",
    "hnl", "htg", "huf", "idr", "ils", "inr", "isk", "jmd", "jod", "jpy",
    "kes", "kgs", "khr", "kmf", "krw", "kwd", "kyd", "kzt", "lak", "lbp",
    "lkr", "lrd", "lsl", "mad", "mdl", "mga", "mkd", "mmk", "mnt", "mop",
    "mur", "mvr", "mwk", "mxn", "myr", "mzn", "nad", "ngn", "nio", "nok",
    "npr", "nzd", "omr", "pab", "pen", "pgk", "php", "pkr", "pln", "pyg",
    "qar", "ron", "rsd", "rub", "rwf", "sar", "sbd", "scr", "sek", "sgd",
    "shp", "sle", "sos", "srd", "std", "szl", "thb", "tjs", "tnd", "top",
    "try", "ttd", "twd", "tzs", "uah", "ugx", "usd", "uyu", "uzs", "vnd",
    "vuv", "wst", "xaf", "xcd", "xof", "xpf", "yer", "zar", "zmw",
})

EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"

LIST_LIMIT = ToolParameter(
    name="limit",
    type=ParameterType.INTEGER,
    description="Number of objects to return, between 1 and 100",
    required=False,
    min_value=1,
    max_value=100,
)


def _customer_field(purpose: str) -> ToolParameter:
    # Optional in the schema: the executor may bind it from the call context
    return ToolParameter(
        name="customer",
        type=ParameterType.STRING,
        description=f"The ID of the customer {purpose}",
        required=False,
        min_length=1,
    )


create_customer_parameters = ToolSchema(parameters=[
    ToolParameter(
        name="name",
        type=ParameterType.STRING,
        description="The name of the customer",
        min_length=1,
    ),
    ToolParameter(
        name="email",
        type=ParameterType.STRING,
        description="The email of the customer",
        required=False,
        pattern=EMAIL_PATTERN,
    ),
])

list_customers_parameters = ToolSchema(parameters=[
    LIST_LIMIT,
    ToolParameter(
        name="email",
        type=ParameterType.STRING,
        description="Only return customers with this email address",
        required=False,
    ),
])

create_product_parameters = ToolSchema(parameters=[
    ToolParameter(
        name="name",
        type=ParameterType.STRING,
        description="The name of the product",
        min_length=1,
    ),
    ToolParameter(
        name="description",
        type=ParameterType.STRING,
        description="The description of the product",
        required=False,
    ),
])

list_products_parameters = ToolSchema(parameters=[LIST_LIMIT])

create_price_parameters = ToolSchema(parameters=[
    ToolParameter(
        name="product",
        type=ParameterType.STRING,
        description="The ID of the product to create the price for",
        min_length=1,
    ),
    ToolParameter(
        name="unit_amount",
        type=ParameterType.INTEGER,
        description="The unit amount of the price in the smallest currency unit",
        min_value=0,
    ),
    ToolParameter(
        name="currency",
        type=ParameterType.STRING,
        description="Three-letter lowercase ISO currency code, e.g. usd",
        enum=sorted(CURRENCIES),
    ),
])

list_prices_parameters = ToolSchema(parameters=[
    ToolParameter(
        name="product",
        type=ParameterType.STRING,
        description="Only return prices for this product",
        required=False,
    ),
    LIST_LIMIT,
])

create_payment_link_parameters = ToolSchema(parameters=[
    ToolParameter(
        name="price",
        type=ParameterType.STRING,
        description="The ID of the price to create the payment link for",
        min_length=1,
    ),
    ToolParameter(
        name="quantity",
        type=ParameterType.INTEGER,
        description="The quantity of the product to include",
        min_value=1,
    ),
])

create_invoice_parameters = ToolSchema(parameters=[
    _customer_field("to create the invoice for"),
    ToolParameter(
        name="days_until_due",
        type=ParameterType.INTEGER,
        description="The number of days until the invoice is due",
        required=False,
        min_value=0,
    ),
])

create_invoice_item_parameters = ToolSchema(parameters=[
    _customer_field("to create the invoice item for"),
    ToolParameter(
        name="price",
        type=ParameterType.STRING,
        description="The ID of the price for the item",
        min_length=1,
    ),
    ToolParameter(
        name="invoice",
        type=ParameterType.STRING,
        description="The ID of the invoice to add the item to",
        min_length=1,
    ),
])

finalize_invoice_parameters = ToolSchema(parameters=[
    ToolParameter(
        name="invoice",
        type=ParameterType.STRING,
        description="The ID of the invoice to finalize",
        min_length=1,
    ),
])

retrieve_balance_parameters = ToolSchema(parameters=[])

create_refund_parameters = ToolSchema(parameters=[
    ToolParameter(
        name="payment_intent",
        type=ParameterType.STRING,
        description="The ID of the PaymentIntent to refund",
        min_length=1,
    ),
    ToolParameter(
        name="amount",
        type=ParameterType.INTEGER,
        description="The amount to refund in the smallest currency unit; omit for a full refund",
        required=False,
        min_value=0,
    ),
])

cancel_subscription_parameters = ToolSchema(parameters=[
    ToolParameter(
        name="subscription",
        type=ParameterType.STRING,
        description="The ID of the subscription to cancel",
        min_length=1,
    ),
])
