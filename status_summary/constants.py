"""Configuration constants for status summary extraction.

Tag names are matched against the local part of an element tag, so a
namespace qualifier never affects selection.
"""

import re

# =============================================================================
# XML Selection
# =============================================================================

ITEM_CODE_TAG = "itemCode"
STATUS_HISTORY_ROW_TAG = "StatusHistoryRow"
STATUS_TAG = "status"

# Candidate files must carry exactly this suffix (case-sensitive)
XML_SUFFIX = ".xml"
INPUT_ENCODING = "utf-8"

# ASCII digits only; applied to the stripped code
DIGITS_ONLY_PATTERN = re.compile(r"^[0-9]+$")

# =============================================================================
# Output Table
# =============================================================================

TABLE_COLUMNS = ("itemCode", "filename", "status")
DEFAULT_OUTPUT_FILE = "status_output.csv"
TABLE_ENCODING = "utf-8"
# CRLF, so fields holding either \r or \n are quoted
TABLE_LINE_TERMINATOR = "\r\n"
