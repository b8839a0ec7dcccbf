"""
Centralized Constants - SINGLE SOURCE OF TRUTH

Source column names for the sales dataset, the legacy "no filter" sentinel,
and dashboard limits. Import from here; do not redefine these elsewhere.

The column names are a compatibility contract with the sales data file
(Superstore-style export). Renaming any of them breaks loading.
"""

# =============================================================================
# SOURCE COLUMNS (data file header names)
# =============================================================================

COL_ROW_ID = 'Row ID'
COL_ORDER_ID = 'Order ID'
COL_ORDER_DATE = 'Order Date'
COL_SHIP_DATE = 'Ship Date'
COL_SHIP_MODE = 'Ship Mode'
COL_CUSTOMER_ID = 'Customer ID'
COL_CUSTOMER_NAME = 'Customer Name'
COL_SEGMENT = 'Segment'
COL_COUNTRY = 'Country'
COL_CITY = 'City'
COL_STATE = 'State'
COL_POSTAL_CODE = 'Postal Code'
COL_REGION = 'Region'
COL_PRODUCT_ID = 'Product ID'
COL_CATEGORY = 'Category'
COL_SUB_CATEGORY = 'Sub-Category'
COL_PRODUCT_NAME = 'Product Name'
COL_SALES = 'Sales'
COL_QUANTITY = 'Quantity'
COL_DISCOUNT = 'Discount'
COL_PROFIT = 'Profit'

# Source column -> SalesRecord attribute
COLUMN_TO_FIELD = {
    COL_ROW_ID: 'row_id',
    COL_ORDER_ID: 'order_id',
    COL_ORDER_DATE: 'order_date',
    COL_SHIP_DATE: 'ship_date',
    COL_SHIP_MODE: 'ship_mode',
    COL_CUSTOMER_ID: 'customer_id',
    COL_CUSTOMER_NAME: 'customer_name',
    COL_SEGMENT: 'segment',
    COL_COUNTRY: 'country',
    COL_CITY: 'city',
    COL_STATE: 'state',
    COL_POSTAL_CODE: 'postal_code',
    COL_REGION: 'region',
    COL_PRODUCT_ID: 'product_id',
    COL_CATEGORY: 'category',
    COL_SUB_CATEGORY: 'sub_category',
    COL_PRODUCT_NAME: 'product_name',
    COL_SALES: 'sales',
    COL_QUANTITY: 'quantity',
    COL_DISCOUNT: 'discount',
    COL_PROFIT: 'profit',
}

TEXT_COLUMNS = [
    COL_ORDER_ID, COL_SHIP_MODE, COL_CUSTOMER_ID, COL_CUSTOMER_NAME,
    COL_SEGMENT, COL_COUNTRY, COL_CITY, COL_STATE, COL_REGION,
    COL_PRODUCT_ID, COL_CATEGORY, COL_SUB_CATEGORY, COL_PRODUCT_NAME,
]
FLOAT_COLUMNS = [COL_SALES, COL_DISCOUNT, COL_PROFIT]
INT_COLUMNS = [COL_ROW_ID, COL_QUANTITY]
DATE_COLUMNS = [COL_ORDER_DATE, COL_SHIP_DATE]

# =============================================================================
# FILTER DIMENSIONS
# =============================================================================

# Fields exposed by /distinct-values (attribute names on SalesRecord)
DISTINCT_VALUE_FIELDS = (
    'state',
    'region',
    'city',
    'country',
    'segment',
    'category',
    'sub_category',
    'ship_mode',
)
DEFAULT_DISTINCT_FIELD = 'state'

# Legacy dashboard dropdown value meaning "no state filter".
# Mapped to None at the request boundary, never compared against data.
ALL_STATES = 'All States'

# =============================================================================
# SUMMARY LIMITS
# =============================================================================

TOP_PRODUCTS_LIMIT = 10
DISCOUNT_PERCENT_DECIMALS = 1
