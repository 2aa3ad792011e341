BOOK_ID_PREFIX = "bk"

STOCK_OUT_TEXT = "Out of stock"
EMPTY_SUMMARY_TEXT = "No description."

PRICE_FORMAT_PATTERN = "¤#,##0"
PRICE_ROUNDING_STEP = 10

CART_ACTION_PATH = "/cart"
CART_PRICE_FIELD = "priceTHB"
