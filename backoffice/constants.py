DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50
MAX_LIMIT = 1000
# Keeps (page - 1) * limit within a signed 64-bit skip
MAX_PAGE = (2**63 - 1) // MAX_LIMIT
DEFAULT_SORT_FIELD = "_id"
DEFAULT_SORT_ORDER = "desc"

SEARCH_MATCH_LIMIT = 10

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"
ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}T"

# Renderer
MAX_TABLE_COLUMNS = 10
MAX_SEARCH_COLUMNS = 5
MAX_CELL_LENGTH = 100

DEFAULT_CONTENT_TYPE = "application/octet-stream"
